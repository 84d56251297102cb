"""Project file generation.

Creates the project directory and materializes every file of a
template bundle into it. There is no rollback: if a write fails the
files written so far stay on disk and the error names the path that
failed.

File: mcpc/core/writer.py
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import toml

from ..utils.files import FileError, atomic_write, ensure_directory, make_executable
from ..utils.validation import check_project_path
from .template import TemplateBundle, TemplateError, TemplateRenderer

logger = logging.getLogger(__name__)

class WriteError(TemplateError):
    """Raised when the project tree cannot be written."""
    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)

class ProjectExistsError(WriteError):
    """Raised when the target directory exists and is not empty."""
    pass

def _manifest_name(path: Path) -> Optional[str]:
    content = path.read_text(encoding="utf-8")
    if path.name == "package.json":
        return json.loads(content).get("name")
    if path.name == "pyproject.toml":
        return toml.loads(content).get("project", {}).get("name")
    return None

class ProjectWriter:
    """Writes a template bundle into a new project directory."""

    def __init__(
        self,
        project_dir: Path,
        bundle: TemplateBundle,
        context: Dict[str, Any],
        renderer: Optional[TemplateRenderer] = None
    ):
        self.project_dir = project_dir
        self.bundle = bundle
        self.context = context
        self.renderer = renderer or TemplateRenderer()
        self.written: List[Path] = []

    def check_target(self) -> None:
        """Refuse to write into an existing non-empty directory or a file.

        Raises:
            ProjectExistsError: If the target cannot be used
        """
        result = check_project_path(self.project_dir)
        if not result.is_valid:
            raise ProjectExistsError(self.project_dir, result.message)

    def write(self) -> List[Path]:
        """Create the directory tree and write every bundle file.

        Returns:
            Paths of the written files, in bundle order

        Raises:
            ProjectExistsError: If the target directory is not usable
            WriteError: If a directory or file cannot be written
        """
        self.check_target()
        self.written = []

        try:
            ensure_directory(self.project_dir)
            for dirname in self.bundle.directories:
                ensure_directory(self.project_dir / dirname)
        except FileError as e:
            raise WriteError(e.path, str(e)) from e

        for template_file in self.bundle.files:
            output_path = self.project_dir / template_file.output
            try:
                content = self.renderer.render(template_file.template, self.context)
                atomic_write(output_path, content)
                if template_file.executable:
                    make_executable(output_path)
            except (TemplateError, FileError) as e:
                raise WriteError(output_path, f"Failed to create {output_path}: {e}") from e

            self.written.append(output_path)
            logger.debug(f"Created {output_path}")

        self._validate_manifest()
        logger.info(f"Wrote {len(self.written)} files to {self.project_dir}")
        return self.written

    def _validate_manifest(self) -> None:
        """Check the rendered manifest parses and carries the project name.

        Raises:
            WriteError: If the manifest is malformed
        """
        if not self.bundle.manifest:
            return

        path = self.project_dir / self.bundle.manifest
        expected = self.context["project_name"]
        try:
            name = _manifest_name(path)
        except (OSError, ValueError, toml.TomlDecodeError) as e:
            raise WriteError(path, f"Generated manifest {path} is invalid: {e}") from e

        if name != expected:
            raise WriteError(
                path,
                f"Generated manifest {path} has name {name!r}, expected {expected!r}"
            )
