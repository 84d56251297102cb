# src/mcpc/utils/__init__.py
from .files import atomic_write
from .process import CommandResult, run_command
from .validation import ValidationResult, check_project_name, check_project_path
