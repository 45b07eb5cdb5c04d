"""
Theming context logger.

Provides logging interface for theming context with automatic [theme] prefix.
All theming modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Any, Mapping, Optional

from loguru import logger

from resumark.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[theme]"

LEVEL_COLORS = {"INFO": "<blue>"}


def setup_theming_logger(log_dir: Path, session: Optional[Mapping[str, Any]] = None) -> Path:
    """
    Setup logger for theming context.

    Args:
        log_dir: Directory for this session
        session: Provenance facts (theme source, overrides file, ...)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="theme", log_dir=log_dir, session=session, level_colors=LEVEL_COLORS
    )


# Wrapper functions with automatic [theme] prefix


def _log_info(message: str) -> None:
    """Log info message with [theme] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [theme] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level theming-specific logging helpers


def log_render_start(target: str, resume_id: Optional[str] = None, slug: Optional[str] = None) -> None:
    """Log the start of a render request."""
    subject = f"public resume '{slug}'" if slug is not None else f"resume '{resume_id}'"
    _log_info(f"Rendering {subject} for {target}")


def log_theme_loaded(theme_id: str, path: Path) -> None:
    _log_debug(f"Loaded theme '{theme_id}' from {path}")
