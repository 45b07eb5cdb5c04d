"""
Session logging for resumark entry points.

Library modules only emit records through their context logger
(contexts/<context>/logger.py). Sinks are configured once per session by a
script calling one of the setup_*_logger functions, which delegate here.

A session directory holds one <context>.log file at DEBUG level; the console
gets console_level and above. Each log file opens with a provenance header:
package version and context, command line, working directory, Python version,
then whatever session facts the script supplies (target, input files, DSL
version). The header is written at DEBUG so it stays out of the console.
"""

import platform
import sys
from pathlib import Path
from typing import Any, List, Mapping, Optional

from loguru import logger

from resumark import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"

# Shared console colors; each context layers its own policy on top
LEVEL_COLORS = {
    "INFO": "<bold>",
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

HEADER_RULE = "=" * 80


def setup_logger(
    context_name: str,
    log_dir: Path,
    session: Optional[Mapping[str, Any]] = None,
    level_colors: Optional[Mapping[str, str]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Configure loguru sinks for one logging session.

    Replaces any existing sinks: a session file sink capturing everything and a
    colorized stderr sink at console_level.

    Args:
        context_name: Context identifier, also the log file stem ("compile", "schema", "theme")
        log_dir: Directory for this session (created if missing)
        session: Facts for the provenance header; None values are omitted
        level_colors: Context color policy, merged over LEVEL_COLORS
        console_level: Minimum level shown on the console

    Returns:
        Path to the session log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(context_name, session)

    return log_file


def provenance_lines(context_name: str, session: Optional[Mapping[str, Any]] = None) -> List[str]:
    """
    Build the provenance header for a session.

    Example:
        >>> provenance_lines("compile", {"Target": "pdf", "Resume data": None})[0]
        'resumark 0.1.0 [compile]'
    """
    lines = [
        f"resumark {__version__} [{context_name}]",
        f"Command: {' '.join(sys.argv)}",
        f"Working directory: {Path.cwd()}",
        f"Python: {platform.python_version()}",
    ]
    for key, value in (session or {}).items():
        if value is not None:
            lines.append(f"{key}: {value}")
    return lines


def log_provenance(context_name: str, session: Optional[Mapping[str, Any]] = None) -> None:
    logger.debug(HEADER_RULE)
    for line in provenance_lines(context_name, session):
        logger.debug(line)
    logger.debug(HEADER_RULE)
