"""
Main entry point for the `mcpc` package.

This file imports and re-exports key functions and classes from other modules
within the package, making them readily available for users.

File: mcpc/__init__.py
"""

__version__ = "0.1.0"

from .core.options import Language, OptionError, ProjectSpec, Tool, build_project_spec
from .core.project import ProjectError, ProjectReport, StepStatus, create_project
from .core.template import select_bundle
from .utils.dependencies import MissingDependencyError, find_missing_dependencies

__all__ = [
    "Language",
    "MissingDependencyError",
    "OptionError",
    "ProjectError",
    "ProjectReport",
    "ProjectSpec",
    "StepStatus",
    "Tool",
    "build_project_spec",
    "create_project",
    "find_missing_dependencies",
    "select_bundle",
]
