"""Project creation and initialization.

This module drives the whole scaffolding pipeline:
- System dependency checks
- Template selection
- Project file generation
- Dependency installation
- Optional verification
- Git initialization

Each stage produces a ``StepResult``. Dependency and write problems are
fatal and raised; installer, verification and git problems become
warnings on the returned ``ProjectReport``.

File: mcpc/core/project.py
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from ..utils.dependencies import MissingDependencyError, check_dependencies
from .installer import StageOutcome, install_dependencies, verify_project
from .options import ProjectSpec
from .template import create_context, select_bundle
from .vcs import init_repository
from .writer import ProjectWriter, WriteError

logger = logging.getLogger(__name__)

class ProjectError(Exception):
    """Base exception for project creation errors."""
    pass

class StepStatus(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    FATAL = "fatal"
    SKIPPED = "skipped"

@dataclass(frozen=True)
class StepResult:
    """Outcome of one pipeline stage."""
    name: str
    status: StepStatus
    message: str = ""

    @classmethod
    def from_outcome(cls, name: str, outcome: StageOutcome) -> 'StepResult':
        if outcome.ok:
            return cls(name, StepStatus.SUCCESS)
        return cls(name, StepStatus.WARNING, outcome.warning or "")

@dataclass
class ProjectReport:
    """Summary of a finished project creation."""
    spec: ProjectSpec
    project_dir: Path
    steps: List[StepResult] = field(default_factory=list)
    files: List[Path] = field(default_factory=list)

    @property
    def warnings(self) -> List[str]:
        return [s.message for s in self.steps if s.status is StepStatus.WARNING]

    @property
    def ok(self) -> bool:
        return all(s.status is not StepStatus.FATAL for s in self.steps)

    def step(self, name: str) -> Optional[StepResult]:
        for result in self.steps:
            if result.name == name:
                return result
        return None

class ProjectCreator:
    """Handles MCP server project creation and setup."""

    def __init__(
        self,
        spec: ProjectSpec,
        base_dir: Optional[Path] = None,
        install: bool = True,
        git: bool = True,
        verify: bool = False
    ):
        """Initialize project creator.

        Args:
            spec: What to generate
            base_dir: Parent directory for the project (default: cwd)
            install: Whether to install dependencies
            git: Whether to initialize a git repository
            verify: Whether to build/compile the project after installing
        """
        self.spec = spec
        self.base_dir = base_dir or Path.cwd()
        self.project_dir = self.base_dir / spec.name
        self.install = install
        self.git = git
        self.verify = verify
        self.report = ProjectReport(spec=spec, project_dir=self.project_dir)

    def create(self) -> ProjectReport:
        """Run the pipeline.

        A fatal stage is recorded on ``self.report`` before its error is
        re-raised.

        Returns:
            ProjectReport with one StepResult per stage

        Raises:
            MissingDependencyError: If required executables are missing
            WriteError: If the project tree cannot be written
        """
        report = self.report

        try:
            check_dependencies(self.spec, git=self.git)
        except MissingDependencyError as e:
            report.steps.append(StepResult("dependencies", StepStatus.FATAL, str(e)))
            raise
        report.steps.append(StepResult("dependencies", StepStatus.SUCCESS))

        bundle = select_bundle(self.spec)
        writer = ProjectWriter(self.project_dir, bundle, create_context(self.spec))
        try:
            report.files = writer.write()
        except (WriteError, OSError) as e:
            report.steps.append(StepResult("files", StepStatus.FATAL, str(e)))
            raise
        report.steps.append(StepResult("files", StepStatus.SUCCESS))

        installed = False
        if self.install:
            result = StepResult.from_outcome(
                "install", install_dependencies(self.project_dir, self.spec.tool)
            )
            installed = result.status is StepStatus.SUCCESS
        else:
            result = StepResult("install", StepStatus.SKIPPED)
        report.steps.append(result)

        if self.verify and installed:
            result = StepResult.from_outcome(
                "verify", verify_project(self.project_dir, self.spec.tool)
            )
        elif self.verify:
            result = StepResult(
                "verify", StepStatus.WARNING,
                "Verification skipped: dependencies were not installed"
            )
        else:
            result = StepResult("verify", StepStatus.SKIPPED)
        report.steps.append(result)

        # Git init proceeds even if installation failed
        if self.git:
            result = StepResult.from_outcome("git", init_repository(self.project_dir))
        else:
            result = StepResult("git", StepStatus.SKIPPED)
        report.steps.append(result)

        logger.info(f"Successfully created project in {self.project_dir}")
        return report

def create_project(
    spec: ProjectSpec,
    base_dir: Optional[Path] = None,
    install: bool = True,
    git: bool = True,
    verify: bool = False
) -> ProjectReport:
    """Create a new MCP server project.

    This is the main entry point for project creation.

    Args:
        spec: Validated project specification
        base_dir: Parent directory for project
        install: Whether to install dependencies
        git: Whether to initialize a git repository
        verify: Whether to run the verification step

    Returns:
        ProjectReport describing every stage

    Raises:
        MissingDependencyError: If required executables are missing
        WriteError: If the project tree cannot be written
        ProjectError: If an unexpected OS error occurs
    """
    creator = ProjectCreator(spec, base_dir, install=install, git=git, verify=verify)
    try:
        return creator.create()
    except OSError as e:
        raise ProjectError(f"Project creation failed: {e}") from e
