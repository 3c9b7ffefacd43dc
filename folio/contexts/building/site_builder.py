"""
Site Builder

One-shot build of the site: load the Data Store, validate it, render the
index page, check the rendered markup, then copy the passthrough assets
and write the page. Nothing is written unless the data, the render and
the checks all pass. Assets are copied before the page, so a failed copy
never leaves a new index.html behind.
"""

import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from folio.contexts.building.config import BuildConfig
from folio.contexts.building.logger import (
    _log_debug,
    _log_info,
    log_build_failure,
    log_build_result,
    log_build_start,
    setup_building_logger,
)
from folio.contexts.data.site_data_structure import SiteDocument
from folio.contexts.rendering.exceptions import RenderMismatchError
from folio.contexts.rendering.logger import log_render_result
from folio.contexts.rendering.output_checks import RenderDiagnostics, check_rendered_page
from folio.contexts.rendering.renderer import render_page
from folio.contexts.rendering.template_registry import TemplateRegistry
from folio.utils.event_logging import log_build_event
from folio.utils.timestamp import now

INDEX_URL = "/"
INDEX_FILENAME = "index.html"


@dataclass
class BuiltPage:
    """
    One rendered page.

    Attributes:
        url: Output URL (e.g., "/")
        output_path: Where the page is (or would be) written
        content: Rendered HTML
        diagnostics: Output checks for this page
    """

    url: str
    output_path: Path
    content: str
    diagnostics: RenderDiagnostics


@dataclass
class BuildResult:
    """
    Result of a site build.

    Attributes:
        pages: Rendered pages
        written: Whether pages and passthrough assets were written to disk
        copied: Passthrough destinations that were copied
        skipped: Passthrough entries excluded by an ignore pattern
        missing: Passthrough entries whose source does not exist
        log_dir: Directory containing this build's log
    """

    pages: List[BuiltPage] = field(default_factory=list)
    written: bool = False
    copied: List[Path] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    log_dir: Optional[Path] = None

    def get_page(self, url: str) -> BuiltPage:
        """
        Get a page by output URL.

        Raises:
            KeyError: If no page was built for the URL
        """
        for page in self.pages:
            if page.url == url:
                return page
        raise KeyError(f"No page built for URL '{url}'")


def render_pages(config: BuildConfig, registry: TemplateRegistry = None) -> List[BuiltPage]:
    """
    Load, validate, render and check every page, without writing anything.

    Args:
        config: Build configuration
        registry: Template registry (defaults to the packaged templates)

    Returns:
        Rendered pages, addressable by output URL

    Raises:
        InvalidSiteDataError: If the Data Store violates the site schema
        SiteRenderError: If the template fails to render
        RenderMismatchError: If the rendered page does not reflect the data
    """
    document = SiteDocument.from_file(config.data_path)
    _log_info(
        f"Loaded site data: {len(document.jobs)} jobs, {len(document.wins)} wins, "
        f"{len(document.skills)} skills, {len(document.contact)} contact links"
    )

    html = render_page(document, registry=registry)
    diagnostics = check_rendered_page(document, html)
    log_render_result(INDEX_URL, len(html), diagnostics)

    if not diagnostics.is_consistent:
        raise RenderMismatchError(diagnostics.issues, url=INDEX_URL)

    return [
        BuiltPage(
            url=INDEX_URL,
            output_path=config.output_path / INDEX_FILENAME,
            content=html,
            diagnostics=diagnostics,
        )
    ]


def copy_passthrough(config: BuildConfig, result: BuildResult) -> None:
    """Copy passthrough files and directories into the output directory."""
    for entry in config.passthrough:
        if config.is_ignored(entry):
            result.skipped.append(entry)
            continue

        source = config.input_path / entry
        destination = config.output_path / entry

        if not source.exists():
            result.missing.append(entry)
            continue

        destination.parent.mkdir(parents=True, exist_ok=True)
        if source.is_dir():
            shutil.copytree(source, destination, dirs_exist_ok=True)
        else:
            shutil.copy2(source, destination)

        _log_debug(f"  Copied {source} -> {destination}")
        result.copied.append(destination)


def build_site(
    config: BuildConfig,
    write: bool = True,
    registry: TemplateRegistry = None,
) -> BuildResult:
    """
    Build the site.

    Orchestration function that:
    1. Sets up a timestamped build log
    2. Renders and checks every page (see render_pages)
    3. Copies passthrough assets, then writes pages (unless write=False)
    4. Records build events (started / completed / failed)

    Args:
        config: Build configuration
        write: Write output to disk (False for a dry run)
        registry: Template registry (defaults to the packaged templates)

    Returns:
        BuildResult

    Raises:
        ValueError: If output_dir and input_dir are the same directory
        InvalidSiteDataError, SiteRenderError, RenderMismatchError: see render_pages
        OSError: If a passthrough asset or page cannot be written

    Example:
        >>> result = build_site(load_build_config())
        >>> result.get_page("/").output_path
        PosixPath('.../_site/index.html')
    """
    if config.output_path.resolve() == config.input_path.resolve():
        raise ValueError(f"output_dir must differ from input_dir ({config.output_path})")

    logs_path = config.logs_path
    log_dir = logs_path / f"build_{now()}"
    setup_building_logger(log_dir, config)

    log_build_start(config.data_path, config.output_path, write)
    log_build_event(logs_path, "build_started", "building", data_file=str(config.data_path))

    start_time = time.time()
    try:
        pages = render_pages(config, registry=registry)
        result = BuildResult(pages=pages, written=write, log_dir=log_dir)
        if write:
            config.output_path.mkdir(parents=True, exist_ok=True)
            # Assets first: a failed copy must not leave a fresh index.html behind
            copy_passthrough(config, result)
            for page in pages:
                page.output_path.parent.mkdir(parents=True, exist_ok=True)
                page.output_path.write_text(page.content, encoding="utf-8")
    except Exception as e:
        log_build_failure(e)
        log_build_event(
            logs_path, "build_failed", "building", error_type=type(e).__name__, error=str(e)
        )
        raise

    elapsed_time = time.time() - start_time
    log_build_result(result, elapsed_time)
    log_build_event(
        logs_path,
        "build_completed",
        "building",
        pages=len(result.pages),
        written=write,
        copied=len(result.copied),
        missing=result.missing,
        elapsed_s=round(elapsed_time, 3),
    )

    return result
