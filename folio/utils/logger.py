"""
Loguru sinks for a build session.

Each build gets its own log directory: a DEBUG file sink named after the
context, plus a colorized console sink at the level the build config asks
for. Context-specific prefixed wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Dict, List

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
RULE = "=" * 80


def setup_logger(
    context_name: str,
    log_dir: Path,
    console_level: str = "INFO",
    provenance: Dict[str, object] = None,
) -> Path:
    """
    Route loguru output for one build session.

    Args:
        context_name: Log file stem (e.g., "build" writes build.log)
        log_dir: Directory for this session, created if needed
        console_level: Minimum level echoed to stdout (the file always gets DEBUG)
        provenance: Site-specific entries appended to the provenance header

    Returns:
        Path to log file

    Raises:
        ValueError: If console_level is not a loguru level name
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level.upper(), colorize=True)

    for line in provenance_lines(provenance):
        logger.info(line)

    return log_file


def provenance_lines(extra: Dict[str, object] = None) -> List[str]:
    """Header lines describing how this process was invoked, framed by rules."""
    lines = [
        RULE,
        f"Command: {' '.join(sys.argv)}",
        f"Working directory: {Path.cwd()}",
        f"Python: {sys.version.split()[0]}",
    ]
    lines.extend(f"{key}: {value}" for key, value in (extra or {}).items())
    lines.append(RULE)
    return lines
