"""Dependency installation and verification for generated projects.

Runs the package manager inside the new project directory. Failures
are reported as warnings: the generated files are valid without
installed dependencies and the user can rerun the command by hand.

File: mcpc/core/installer.py
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..utils.process import CommandResult, ProcessError, run_command
from .options import Tool

logger = logging.getLogger(__name__)

INSTALL_COMMANDS: Dict[Tool, Tuple[Tuple[str, ...], ...]] = {
    Tool.PNPM: (("pnpm", "install"),),
    Tool.YARN: (("yarn", "install"),),
    Tool.NPM: (("npm", "install"),),
    Tool.UV: (
        ("uv", "venv"),
        ("uv", "pip", "install", "-r", "requirements.txt"),
    ),
}

VERIFY_COMMANDS: Dict[Tool, Tuple[str, ...]] = {
    Tool.PNPM: ("pnpm", "run", "build"),
    Tool.YARN: ("yarn", "run", "build"),
    Tool.NPM: ("npm", "run", "build"),
    Tool.UV: ("uv", "run", "python", "-m", "py_compile", "server.py"),
}

@dataclass
class StageOutcome:
    """Commands run by a stage and the warning it produced, if any."""
    results: List[CommandResult] = field(default_factory=list)
    warning: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.warning is None

def run_commands(commands, cwd: Path, label: str) -> StageOutcome:
    """Run commands in order, stopping at the first failure.

    Args:
        commands: Sequence of argument tuples
        cwd: Working directory
        label: Stage name used in warnings

    Returns:
        StageOutcome with a warning if any command failed
    """
    outcome = StageOutcome()
    for args in commands:
        manual = " ".join(args)
        try:
            result = run_command(args, cwd=cwd)
        except ProcessError as e:
            outcome.warning = f"{label} failed: {e}. Please run '{manual}' manually"
            break

        outcome.results.append(result)
        if not result.ok:
            outcome.warning = (
                f"{label} failed: {result.describe_failure()}\n"
                f"Please run '{manual}' manually"
            )
            break

    if outcome.warning:
        logger.info(outcome.warning)
    return outcome

def install_dependencies(project_dir: Path, tool: Tool) -> StageOutcome:
    """Install the generated project's dependencies with its package manager."""
    logger.info(f"Installing dependencies with {tool.value} in {project_dir}")
    return run_commands(INSTALL_COMMANDS[tool], project_dir, "Dependency installation")

def verify_project(project_dir: Path, tool: Tool) -> StageOutcome:
    """Build or byte-compile the generated project as a smoke check."""
    logger.info(f"Verifying project in {project_dir}")
    return run_commands((VERIFY_COMMANDS[tool],), project_dir, "Verification")
