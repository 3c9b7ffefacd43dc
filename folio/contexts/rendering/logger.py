"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module rather than from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[render]"


# Wrapper functions with automatic [render] prefix


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_render_result(url: str, html_length: int, diagnostics) -> None:
    """
    Log the outcome of rendering and checking one page.

    Args:
        url: Output URL of the page
        html_length: Size of the rendered markup in characters
        diagnostics: RenderDiagnostics from check_rendered_page()
    """
    _log_debug(f"  {url}: {html_length} characters")
    _log_debug(
        f"  jobs={diagnostics.job_count} wins={diagnostics.win_count} "
        f"tags={diagnostics.tag_count} links={diagnostics.link_count}"
    )

    if diagnostics.is_consistent:
        _log_success(f"Rendered {url} matches site data.")
        return

    _log_error(f"Rendered {url} does not match site data: {len(diagnostics.issues)} issue(s)")
    for i, issue in enumerate(diagnostics.issues, 1):
        _log_error(f"  Issue {i}: {issue}")
