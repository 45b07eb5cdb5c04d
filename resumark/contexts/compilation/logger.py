"""
Compilation context logger.

Provides logging interface for compilation context with automatic [compile] prefix.
All compilation modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Any, Mapping, Optional

from loguru import logger

from resumark.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[compile]"

# Compilation results are the INFO records users watch for
LEVEL_COLORS = {"INFO": "<cyan>"}


def setup_compilation_logger(
    log_dir: Path,
    target: str = "html",
    session: Optional[Mapping[str, Any]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Setup logger for compilation context.

    Configures loguru with provenance tracking and compilation-specific context.

    Args:
        log_dir: Directory for this compilation session
        target: Render target for provenance ("html" or "pdf")
        session: Further provenance facts (DSL file, resume data source, ...)
        console_level: Minimum level shown on the console

    Returns:
        Path to log file

    Example:
        from resumark.contexts.compilation.logger import setup_compilation_logger, _log_info

        log_file = setup_compilation_logger(log_dir, target="pdf")
        _log_info("Starting compilation...")
    """
    return _setup_logger(
        context_name="compile",
        log_dir=log_dir,
        session={"Target": target, **(session or {})},
        level_colors=LEVEL_COLORS,
        console_level=console_level,
    )


# Wrapper functions with automatic [compile] prefix


def _log_info(message: str) -> None:
    """Log info message with [compile] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compile] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level compilation-specific logging helpers


def log_fallback(token_name: str, value, fallback) -> None:
    """Log an unrecognised enum value resolving to its fallback (not an error)."""
    _log_debug(f"Unrecognised {token_name} {value!r}, using {fallback!r}")


def log_compilation_start(version: str, target: str, preview: bool) -> None:
    """Log start of compilation with context."""
    mode = "preview" if preview else "resume data"
    _log_debug(f"Compiling DSL {version} for {target} ({mode})")


def log_compilation_result(ast, elapsed_time: float) -> None:
    """
    Log compilation result.

    Args:
        ast: ResumeAst from compile_dsl()
        elapsed_time: Time taken
    """
    columns = ", ".join(f"{c.id}={c.width_percentage}%" for c in ast.page.columns)
    _log_info(
        f"Compiled {len(ast.sections)} section(s) into [{columns}] ({elapsed_time * 1000:.1f}ms)"
    )
