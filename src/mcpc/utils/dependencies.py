"""System dependency checks.

Verifies that the executables a project needs (git, the language
runtime and the package manager) are on ``PATH`` before anything is
written to disk.

File: mcpc/utils/dependencies.py
"""

import logging
import shutil
from dataclasses import dataclass
from typing import List, Optional, Tuple

from packaging.version import Version

from ..core.options import Language, ProjectSpec, Tool
from .process import probe_version

logger = logging.getLogger(__name__)

class DependencyError(Exception):
    """Base exception for system dependency problems."""
    pass

class MissingDependencyError(DependencyError):
    """Raised when required executables are missing or outdated."""
    def __init__(self, missing: List['Dependency']):
        self.missing = missing
        names = ", ".join(dep.name for dep in missing)
        super().__init__(f"Missing required dependencies: {names}")

@dataclass(frozen=True)
class Dependency:
    """An external executable the generator relies on.

    Any one of ``executables`` satisfies the dependency.
    """
    name: str
    executables: Tuple[str, ...]
    install_instructions: Optional[str] = None
    min_version: Optional[str] = None

    def locate(self) -> Optional[str]:
        """Return the path of the first executable found on PATH."""
        for executable in self.executables:
            path = shutil.which(executable)
            if path:
                return path
        return None

GIT = Dependency("Git", ("git",), "https://git-scm.com/downloads")
PYTHON = Dependency(
    "Python 3.10+", ("python3", "python"),
    "https://www.python.org/downloads/", min_version="3.10"
)
NODE = Dependency(
    "Node.js 18+", ("node",), "https://nodejs.org/", min_version="18"
)

TOOL_DEPENDENCIES = {
    Tool.UV: Dependency("uv", ("uv",), "pip install uv"),
    Tool.PNPM: Dependency("pnpm", ("pnpm",), "npm install -g pnpm"),
    Tool.YARN: Dependency("yarn", ("yarn",), "npm install -g yarn"),
    Tool.NPM: Dependency(
        "npm", ("npm",), "It comes with Node.js, please install Node.js"
    ),
}

RUNTIME_DEPENDENCIES = {
    Language.PYTHON: PYTHON,
    Language.TYPESCRIPT: NODE,
}

def required_dependencies(spec: ProjectSpec, git: bool = True) -> List[Dependency]:
    """List the dependencies needed to generate a project.

    Args:
        spec: Project specification
        git: Whether a git repository will be initialized

    Returns:
        Dependencies in the order they are reported
    """
    deps = []
    if git:
        deps.append(GIT)
    deps.append(RUNTIME_DEPENDENCIES[spec.language])
    deps.append(TOOL_DEPENDENCIES[spec.tool])
    return deps

def _is_outdated(dep: Dependency, path: str) -> bool:
    if dep.min_version is None:
        return False

    version = probe_version(path)
    if version is None:
        logger.warning(f"Could not determine {dep.name} version, assuming it is compatible")
        return False

    if version < Version(dep.min_version):
        logger.debug(f"{path} is version {version}, need {dep.min_version}")
        return True
    return False

def find_missing_dependencies(spec: ProjectSpec, git: bool = True) -> List[Dependency]:
    """Probe PATH for every required dependency.

    Args:
        spec: Project specification
        git: Whether a git repository will be initialized

    Returns:
        Missing or outdated dependencies; empty if all are present
    """
    missing = []
    for dep in required_dependencies(spec, git=git):
        path = dep.locate()
        if path is None:
            logger.debug(f"{dep.name} not found (looked for {', '.join(dep.executables)})")
            missing.append(dep)
        elif _is_outdated(dep, path):
            missing.append(dep)
        else:
            logger.debug(f"Found {dep.name} at {path}")
    return missing

def check_dependencies(spec: ProjectSpec, git: bool = True) -> None:
    """Ensure every required dependency is installed.

    Raises:
        MissingDependencyError: If anything is missing or outdated
    """
    missing = find_missing_dependencies(spec, git=git)
    if missing:
        raise MissingDependencyError(missing)
