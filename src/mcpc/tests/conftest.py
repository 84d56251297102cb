"""Shared pytest fixtures for the mcpc test suite.

Provides reusable fixtures for:
- Pretending every required executable is installed
- Replacing subprocess.run with a recording fake
"""

import subprocess
from typing import Dict, List, Optional
from unittest.mock import patch

import pytest
from packaging.version import Version

class FakeRun:
    """Stand-in for subprocess.run that records commands.

    ``failures`` maps a command prefix (e.g. ``("pnpm", "install")``) to
    the exit code it should return.
    """

    def __init__(self):
        self.calls: List[Dict] = []
        self.failures: Dict[tuple, int] = {}
        self.missing: set = set()

    def fail(self, *prefix: str, returncode: int = 1) -> None:
        self.failures[tuple(prefix)] = returncode

    @property
    def commands(self) -> List[List[str]]:
        return [call["args"] for call in self.calls]

    def __call__(self, args, cwd=None, **kwargs):
        self.calls.append({"args": list(args), "cwd": cwd})
        if args[0] in self.missing:
            raise FileNotFoundError(args[0])
        for prefix, code in self.failures.items():
            if tuple(args[:len(prefix)]) == prefix:
                return subprocess.CompletedProcess(args, code, "", f"{args[0]} exploded")
        return subprocess.CompletedProcess(args, 0, "ok\n", "")

@pytest.fixture
def fake_run():
    """Patch subprocess.run as used by mcpc.utils.process."""
    fake = FakeRun()
    with patch("mcpc.utils.process.subprocess.run", side_effect=fake):
        yield fake

@pytest.fixture
def installed():
    """Pretend every executable is on PATH with a recent version.

    Yields the set of executable names; remove a name to simulate it
    being missing.
    """
    present = {"git", "python", "python3", "node", "pnpm", "yarn", "npm", "uv"}

    def which(name: str) -> Optional[str]:
        return f"/usr/bin/{name}" if name in present else None

    with patch("mcpc.utils.dependencies.shutil.which", side_effect=which), \
         patch("mcpc.utils.dependencies.probe_version", return_value=Version("99.0")):
        yield present
