"""Process management utilities.

This module handles interactions with external processes: the package
managers, git and the language runtimes. It provides functions for:

- Running a command to completion and capturing its result
- Probing and parsing tool versions

Commands are treated as black boxes identified by their exit status.
There is no timeout handling; each command blocks until it finishes.

File: mcpc/utils/process.py
"""

import logging
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from packaging.version import InvalidVersion, Version, parse

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r"(\d+\.\d+(?:\.\d+)?)")

class ProcessError(Exception):
    """Base exception for process-related errors."""
    pass

class CommandNotFoundError(ProcessError):
    """Raised when the executable of a command is not installed."""
    def __init__(self, cmd: Sequence[str]):
        self.cmd = list(cmd)
        super().__init__(f"Command not found: {cmd[0]}")

@dataclass(frozen=True)
class CommandResult:
    """Outcome of a finished child process."""
    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        return " ".join(self.args)

    def describe_failure(self) -> str:
        """Human readable summary of a failed command."""
        msg = f"Command '{self.command_line}' failed with exit code {self.returncode}"
        output = (self.stderr or self.stdout).strip()
        if output:
            msg += f"\n{output}"
        return msg

def run_command(
    args: Sequence[str],
    cwd: Optional[Union[str, Path]] = None,
    capture_output: bool = True
) -> CommandResult:
    """Run a command and wait for it to finish.

    Args:
        args: Command and arguments
        cwd: Working directory
        capture_output: Whether to capture stdout/stderr

    Returns:
        CommandResult for the finished process. A non-zero exit code
        is returned, not raised.

    Raises:
        CommandNotFoundError: If the executable does not exist
        ProcessError: If the process cannot be started
    """
    cmd = list(args)
    logger.debug(f"Running {' '.join(cmd)} in {cwd or '.'}")

    try:
        completed = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=capture_output,
            text=True,
            check=False
        )
    except FileNotFoundError as e:
        raise CommandNotFoundError(cmd) from e
    except OSError as e:
        raise ProcessError(f"Failed to start '{' '.join(cmd)}': {e}") from e

    result = CommandResult(
        args=cmd,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or ""
    )

    if result.stdout:
        logger.debug(f"{cmd[0]} stdout:\n{result.stdout}")
    if result.stderr:
        logger.debug(f"{cmd[0]} stderr:\n{result.stderr}")
    logger.debug(f"{cmd[0]} exited with {result.returncode}")

    return result

def parse_version_output(output: str) -> Optional[Version]:
    """Extract the first version number from ``--version`` output.

    Handles "Python 3.12.1", "v20.11.0" and "uv 0.4.18 (abc 2024-10-08)".
    """
    match = VERSION_PATTERN.search(output)
    if not match:
        return None
    try:
        return parse(match.group(1))
    except InvalidVersion:
        return None

def probe_version(executable: str) -> Optional[Version]:
    """Run ``<executable> --version`` and parse the result.

    Args:
        executable: Executable name or path

    Returns:
        Parsed version, or None if it could not be determined
    """
    try:
        result = run_command([executable, "--version"])
    except ProcessError as e:
        logger.debug(f"Version probe for {executable} failed: {e}")
        return None

    if not result.ok:
        logger.debug(f"Version probe for {executable} exited with {result.returncode}")
        return None

    # Old Python 2 interpreters print the version on stderr
    return parse_version_output(result.stdout or result.stderr)
