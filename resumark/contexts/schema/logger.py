"""
Schema context logger.

Provides logging interface for schema context with automatic [schema] prefix.
All schema modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Any, List, Mapping, Optional

from loguru import logger

from resumark.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[schema]"

# Validation failures are warnings; make them stand out
LEVEL_COLORS = {"WARNING": "<bold><yellow>"}


def setup_schema_logger(log_dir: Path, session: Optional[Mapping[str, Any]] = None) -> Path:
    """
    Setup logger for schema context.

    Args:
        log_dir: Directory for this session
        session: Provenance facts (DSL file, DSL version, ...)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="schema", log_dir=log_dir, session=session, level_colors=LEVEL_COLORS
    )


# Wrapper functions with automatic [schema] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [schema] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [schema] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level schema-specific logging helpers


def log_validation_failure(errors: List) -> None:
    """Log a failed validation with the first few field errors."""
    _log_warning(f"DSL validation failed with {len(errors)} error(s)")
    for error in errors[:5]:
        _log_debug(f"  {error} [{error.code}]")
    if len(errors) > 5:
        _log_debug(f"  ... and {len(errors) - 5} more errors")


def log_migration_step(from_version: str, to_version: str) -> None:
    """Log a single applied migration step."""
    _log_debug(f"Migrated DSL {from_version} -> {to_version}")
