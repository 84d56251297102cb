"""Project options and their validation.

Turns the raw values collected by the CLI into an immutable
``ProjectSpec``. Unsupported language/tool combinations are rejected
here so that later stages never have to handle them.

File: mcpc/core/options.py
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional

from ..utils.validation import check_project_name

logger = logging.getLogger(__name__)

class OptionError(Exception):
    """Raised when command line options are invalid."""
    pass

class Language(str, Enum):
    """Languages a project can be generated for."""
    TYPESCRIPT = "typescript"
    PYTHON = "python"

    @classmethod
    def from_string(cls, value: str) -> 'Language':
        """Convert a language code or name to a Language.

        Args:
            value: ``ts``, ``typescript``, ``py`` or ``python`` (any case)

        Returns:
            Language enum value

        Raises:
            OptionError: If the language is not recognized
        """
        try:
            return LANGUAGE_ALIASES[value.strip().lower()]
        except KeyError:
            raise OptionError(
                f"Unrecognized language '{value}'. "
                f"Choose one of: {', '.join(LANGUAGE_ALIASES)}"
            ) from None

    @property
    def display_name(self) -> str:
        return "TypeScript" if self is Language.TYPESCRIPT else "Python"

class Tool(str, Enum):
    """Package managers used to install project dependencies."""
    PNPM = "pnpm"
    YARN = "yarn"
    NPM = "npm"
    UV = "uv"

    @classmethod
    def from_string(cls, value: str) -> 'Tool':
        """Convert a tool name to a Tool.

        Raises:
            OptionError: If the tool is not recognized
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise OptionError(
                f"Unrecognized tool '{value}'. "
                f"Choose one of: {', '.join(t.value for t in cls)}"
            ) from None

LANGUAGE_ALIASES: Dict[str, Language] = {
    "ts": Language.TYPESCRIPT,
    "typescript": Language.TYPESCRIPT,
    "py": Language.PYTHON,
    "python": Language.PYTHON,
}

SUPPORTED_TOOLS: Dict[Language, FrozenSet[Tool]] = {
    Language.TYPESCRIPT: frozenset({Tool.PNPM, Tool.YARN, Tool.NPM}),
    Language.PYTHON: frozenset({Tool.UV}),
}

DEFAULT_TOOLS: Dict[Language, Tool] = {
    Language.TYPESCRIPT: Tool.PNPM,
    Language.PYTHON: Tool.UV,
}

DEFAULT_LANGUAGE = Language.TYPESCRIPT

@dataclass(frozen=True)
class ProjectSpec:
    """What to generate: project name, language and package manager."""
    name: str
    language: Language
    tool: Tool

    def __post_init__(self) -> None:
        result = check_project_name(self.name)
        if not result.is_valid:
            raise OptionError(f"Invalid project name '{self.name}': {result.message}")
        if self.tool not in SUPPORTED_TOOLS[self.language]:
            raise OptionError(
                f"Tool '{self.tool.value}' cannot be used with "
                f"{self.language.display_name}. Supported tools: "
                f"{', '.join(sorted(t.value for t in SUPPORTED_TOOLS[self.language]))}"
            )

def default_tool(language: Language) -> Tool:
    """Get the default package manager for a language."""
    return DEFAULT_TOOLS[language]

def build_project_spec(
    name: Optional[str],
    language: Optional[str] = None,
    tool: Optional[str] = None
) -> ProjectSpec:
    """Validate raw option values and build a ProjectSpec.

    Args:
        name: Project name
        language: Language code (defaults to TypeScript)
        tool: Package manager (defaults to the language's default tool)

    Returns:
        Validated ProjectSpec

    Raises:
        OptionError: If any option is missing, unrecognized or incompatible
    """
    if not name:
        raise OptionError("Project name is required")

    lang = Language.from_string(language) if language else DEFAULT_LANGUAGE
    chosen_tool = Tool.from_string(tool) if tool else default_tool(lang)

    spec = ProjectSpec(name=name, language=lang, tool=chosen_tool)
    logger.debug(f"Project spec: {spec}")
    return spec
