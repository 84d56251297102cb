"""Template bundles for MCP server projects.

This module maps a project's language to the fixed set of files and
directories generated for it, and renders those files with jinja2.
Templates live in the package's ``templates`` directory, one
subdirectory per language.

File: mcpc/core/template.py
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError as Jinja2Error,
)

from .options import Language, ProjectSpec, Tool

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"

class TemplateError(Exception):
    """Base exception for template-related errors."""
    pass

class RenderError(TemplateError):
    """Raised when template rendering fails."""
    pass

@dataclass(frozen=True)
class TemplateFile:
    """A template and where its rendered output goes in the project."""
    template: str
    output: str
    executable: bool = False

@dataclass(frozen=True)
class TemplateBundle:
    """The fixed set of files and directories generated for a language."""
    language: Language
    files: Tuple[TemplateFile, ...]
    directories: Tuple[str, ...] = ()
    manifest: Optional[str] = None

    @property
    def outputs(self) -> Tuple[str, ...]:
        return tuple(f.output for f in self.files)

TYPESCRIPT_BUNDLE = TemplateBundle(
    language=Language.TYPESCRIPT,
    directories=("src", "build"),
    files=(
        TemplateFile("typescript/package.json.jinja2", "package.json"),
        TemplateFile("typescript/tsconfig.json.jinja2", "tsconfig.json"),
        TemplateFile("typescript/gitignore.jinja2", ".gitignore"),
        TemplateFile("typescript/prettierrc.jinja2", ".prettierrc"),
        TemplateFile("typescript/prettierignore.jinja2", ".prettierignore"),
        TemplateFile("typescript/index.ts.jinja2", "src/index.ts"),
        TemplateFile("typescript/README.md.jinja2", "README.md"),
    ),
    manifest="package.json",
)

PYTHON_BUNDLE = TemplateBundle(
    language=Language.PYTHON,
    files=(
        TemplateFile("python/pyproject.toml.jinja2", "pyproject.toml"),
        TemplateFile("python/requirements.txt.jinja2", "requirements.txt"),
        TemplateFile("python/gitignore.jinja2", ".gitignore"),
        TemplateFile("python/server.py.jinja2", "server.py", executable=True),
        TemplateFile("python/README.md.jinja2", "README.md"),
    ),
    manifest="pyproject.toml",
)

BUNDLES: Dict[Language, TemplateBundle] = {
    Language.TYPESCRIPT: TYPESCRIPT_BUNDLE,
    Language.PYTHON: PYTHON_BUNDLE,
}

# Command lines shown in generated READMEs and next-step hints
TOOL_COMMANDS: Dict[Tool, Dict[str, str]] = {
    Tool.PNPM: {"install": "pnpm install", "build": "pnpm build", "dev": "pnpm dev"},
    Tool.YARN: {"install": "yarn", "build": "yarn build", "dev": "yarn dev"},
    Tool.NPM: {"install": "npm install", "build": "npm run build", "dev": "npm run dev"},
    Tool.UV: {
        "install": "uv pip install -r requirements.txt",
        "build": "uv run python -m py_compile server.py",
        "dev": "python server.py",
    },
}

def select_bundle(spec: ProjectSpec) -> TemplateBundle:
    """Get the template bundle for a project."""
    return BUNDLES[spec.language]

def create_context(spec: ProjectSpec) -> Dict[str, Any]:
    """Create the template rendering context for a project."""
    commands = TOOL_COMMANDS[spec.tool]
    return {
        "project_name": spec.name,
        "language": spec.language.value,
        "tool": spec.tool.value,
        "install_command": commands["install"],
        "build_command": commands["build"],
        "dev_command": commands["dev"],
    }

class TemplateRenderer:
    """Renders bundle templates with jinja2."""

    def __init__(self, template_dir: Optional[Path] = None):
        """Initialize template engine.

        Args:
            template_dir: Custom template directory. If None, uses default.

        Raises:
            TemplateError: If template directory is invalid
        """
        if template_dir is None:
            template_dir = TEMPLATE_DIR

        if not template_dir.is_dir():
            raise TemplateError(f"Template directory not found: {template_dir}")

        self.template_dir = template_dir
        # Generated files are not HTML; undefined variables are a bug in the bundle
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True
        )

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a single template.

        Args:
            template_name: Template path relative to the template directory
            context: Template rendering context

        Returns:
            Rendered text

        Raises:
            RenderError: If the template is missing or fails to render
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except Jinja2Error as e:
            raise RenderError(f"Template render error in {template_name}: {e}") from e
