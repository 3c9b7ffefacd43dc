"""
Building context logger.

Provides logging interface for building context with automatic [build] prefix.
All building modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.contexts.building.config import BuildConfig
from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[build]"


def setup_building_logger(log_dir: Path, config: BuildConfig) -> Path:
    """
    Setup logger for building context.

    The console level comes from config.console_level; the provenance
    header records which data file and output directory this build uses.

    Args:
        log_dir: Directory for this build session
        config: Build configuration

    Returns:
        Path to log file

    Example:
        from folio.contexts.building.logger import setup_building_logger, _log_info

        log_file = setup_building_logger(log_dir, config)
        _log_info("Starting build...")
    """
    return _setup_logger(
        context_name="build",
        log_dir=log_dir,
        console_level=config.console_level,
        provenance={
            "Data file": config.data_path,
            "Output directory": config.output_path,
            "Passthrough": ", ".join(config.passthrough) or "(none)",
        },
    )


# Wrapper functions with automatic [build] prefix


def _log_info(message: str) -> None:
    """Log info message with [build] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [build] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [build] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [build] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [build] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level building-specific logging helpers


def log_build_start(data_path: Path, output_path: Path, write: bool) -> None:
    """Log start of a build with context."""
    _log_info(f"Starting build{'' if write else ' (dry run)'}")
    _log_info(f"Data file: {data_path}")
    _log_debug(f"  Output: {output_path}")


def log_build_failure(error: Exception) -> None:
    """Log a failed build, one line per reported issue."""
    _log_error(f"Build failed: {type(error).__name__}")
    issues = getattr(error, "issues", None)
    if issues:
        for i, issue in enumerate(issues, 1):
            _log_error(f"  Issue {i}: {issue}")
    else:
        _log_error(f"  {error}")


def log_build_result(result, elapsed_time: float) -> None:
    """
    Log build result.

    Args:
        result: BuildResult from build_site()
        elapsed_time: Time taken to build
    """
    _log_success(f"Build succeeded: {len(result.pages)} page(s) ({elapsed_time:.2f}s)")
    for page in result.pages:
        _log_debug(f"  {page.url} -> {page.output_path}")

    if result.copied:
        _log_info(f"Copied {len(result.copied)} passthrough item(s)")
    for entry in result.skipped:
        _log_debug(f"  Ignored passthrough: {entry}")
    for entry in result.missing:
        _log_warning(f"Passthrough source not found: {entry}")
