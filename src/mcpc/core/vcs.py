"""Version control initialization.

File: mcpc/core/vcs.py
"""

import logging
from pathlib import Path

from .installer import StageOutcome, run_commands

logger = logging.getLogger(__name__)

GIT_INIT = ("git", "init")

def init_repository(project_dir: Path) -> StageOutcome:
    """Run ``git init`` in the project directory.

    A failure is returned as a warning; the project is already complete.
    """
    logger.info(f"Initializing git repository in {project_dir}")
    return run_commands((GIT_INIT,), project_dir, "Git initialization")
