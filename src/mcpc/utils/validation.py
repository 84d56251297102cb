"""Input validation utilities for MCP server project creation.

This module provides validation functions for the inputs required
when scaffolding a project:
- Project names (must be usable as a directory name and a package name)
- Target directory paths

File: mcpc/utils/validation.py
"""

import logging
import os
import string
from pathlib import Path
from typing import Dict, NamedTuple, Optional

logger = logging.getLogger(__name__)

class ValidationResult(NamedTuple):
    """Result of a validation check."""
    is_valid: bool
    message: str
    details: Optional[Dict] = None

# npm rejects package names longer than this
MAX_NAME_LENGTH = 214

RESERVED_NAMES = {
    'con', 'prn', 'aux', 'nul',
    'com1', 'com2', 'com3', 'com4', 'com5', 'com6', 'com7', 'com8', 'com9',
    'lpt1', 'lpt2', 'lpt3', 'lpt4', 'lpt5', 'lpt6', 'lpt7', 'lpt8', 'lpt9',
}

def check_project_name(name: str) -> ValidationResult:
    """Validate a project name.

    The name becomes both the project directory and the package name
    written into the generated manifest.

    Args:
        name: The project name to validate

    Returns:
        ValidationResult with validation status and message

    Rules:
        - Must not be empty
        - Must be at most 214 characters
        - Must contain only ASCII letters, digits, _, -, .
        - Must start with a letter or digit
        - Must not be a reserved device name
        - Should be lowercase (warns but doesn't fail)
    """
    if not name:
        return ValidationResult(False, "Project name cannot be empty")

    if len(name) > MAX_NAME_LENGTH:
        return ValidationResult(
            False,
            f"Project name must be at most {MAX_NAME_LENGTH} characters"
        )

    if " " in name:
        return ValidationResult(False, "Project name must not contain spaces")

    if not name.isascii():
        return ValidationResult(False, "Project name must contain only ASCII characters")

    allowed_chars = set(string.ascii_letters + string.digits + "-_.")
    if not all(c in allowed_chars for c in name):
        return ValidationResult(
            False,
            "Project name must contain only letters, digits, underscore, "
            "hyphen, and period"
        )

    if not name[0].isalnum():
        return ValidationResult(
            False,
            "Project name must start with a letter or digit"
        )

    if name.lower() in RESERVED_NAMES:
        return ValidationResult(False, f"'{name}' is a reserved name")

    if not name.islower():
        logger.warning("Project name should be lowercase (but will be accepted)")

    return ValidationResult(True, "")

def check_project_path(path: Path) -> ValidationResult:
    """Validate the directory a project will be written to.

    Args:
        path: The project directory to validate

    Returns:
        ValidationResult with validation status and message

    Checks:
        - Parent directory must exist
        - Path must not exist, or be an empty directory
        - Must have write permissions to parent directory
    """
    try:
        resolved_path = path.resolve()
        parent = resolved_path.parent

        if not parent.exists():
            return ValidationResult(False, f"Parent directory does not exist: {parent}")

        if resolved_path.exists():
            if not resolved_path.is_dir():
                return ValidationResult(
                    False,
                    f"Path exists and is not a directory: {resolved_path}"
                )
            if any(resolved_path.iterdir()):
                return ValidationResult(
                    False,
                    f"Directory '{resolved_path}' already exists and is not empty. "
                    "Please choose another project name."
                )

        if not os.access(parent, os.W_OK):
            return ValidationResult(
                False,
                f"No write permission for directory: {parent}"
            )

        return ValidationResult(True, "")

    except OSError as e:
        return ValidationResult(False, f"Invalid path: {e}")
