#!/usr/bin/env python3
"""
Site Build CLI

Builds the portfolio site from its Data Store and checks the result.

Commands:
    build    - Validate, render, check and write the site
    validate - Validate the Data Store only
    check    - Render in memory and run the output checks
    events   - Show recent build events

Examples:\n

    build_site.py build                               # Build with site_config.yaml

    build_site.py build --output dist --dry-run       # Render without writing

    build_site.py build --set passthrough=[admin]     # Override a config value

    build_site.py validate _data/site.json            # Validate a data file
"""

import json
from pathlib import Path
from typing import List, Optional

import typer
from omegaconf.errors import OmegaConfBaseException
from typing_extensions import Annotated

from folio.contexts.building import build_site, load_build_config, render_pages
from folio.contexts.data import InvalidSiteDataError, validate_site_data
from folio.contexts.rendering import RenderMismatchError, SiteRenderError
from folio.utils.event_logging import get_recent_events
from folio.utils.timestamp import format_timestamp

app = typer.Typer(
    help="Build the portfolio site from its Data Store",
    add_completion=False,
    invoke_without_command=True,
)

BUILD_ERRORS = (SiteRenderError, OSError, ValueError)


def _load_config(config_path: Optional[Path], overrides: List[str]):
    try:
        return load_build_config(config_path, overrides)
    except (FileNotFoundError, OmegaConfBaseException) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _print_issues(title: str, issues: List[str]) -> None:
    typer.secho(f"✗ {title} ({len(issues)} issue(s))", fg=typer.colors.RED, bold=True)
    for issue in issues:
        typer.secho(f"  - {issue}", fg=typer.colors.RED)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("build")
def build_command(
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Build config YAML (default: site_config.yaml)"),
    ] = None,
    output_dir: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="Output directory (overrides output_dir)"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Render and check without writing anything"),
    ] = False,
    overrides: Annotated[
        Optional[List[str]],
        typer.Option("--set", help="Config override in key=value form (repeatable)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Echo DEBUG messages to the console"),
    ] = False,
):
    """
    Build the site.

    Validates the Data Store, renders the index page, checks the rendered
    markup against the data, then copies passthrough assets and writes the
    page. Nothing is written if the data, the render or the checks fail.

    Examples:\n

        $ build_site.py build                            # Build the site

        $ build_site.py build --dry-run                  # Check only
    """
    overrides = list(overrides or [])
    if output_dir:
        overrides.append(f"output_dir={output_dir}")
    if verbose:
        overrides.append("console_level=DEBUG")
    config = _load_config(config_path, overrides)

    typer.secho(f"\nBuilding: {config.data_path}", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    try:
        result = build_site(config, write=not dry_run)
    except (InvalidSiteDataError, RenderMismatchError) as e:
        typer.echo("")
        _print_issues("Build failed", e.issues)
        raise typer.Exit(code=1)
    except BUILD_ERRORS as e:
        typer.secho(f"\n✗ Build failed: {e}\n", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(code=1)

    typer.echo("")
    typer.secho("✓ Build succeeded", fg=typer.colors.GREEN, bold=True)
    for page in result.pages:
        status = "written" if result.written else "not written (dry run)"
        typer.echo(f"  {page.url} -> {page.output_path} [{status}]")
    if result.copied:
        typer.echo(f"  Passthrough copied: {len(result.copied)}")
    for entry in result.missing:
        typer.secho(f"  Passthrough missing: {entry}", fg=typer.colors.YELLOW)
    if result.log_dir:
        typer.echo(f"  Log: {result.log_dir / 'build.log'}")
    typer.echo("")


@app.command("validate")
def validate_command(
    data_file: Annotated[
        Optional[Path],
        typer.Argument(help="Data Store JSON file (default: data_file from config)"),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Build config YAML (default: site_config.yaml)"),
    ] = None,
):
    """
    Validate the Data Store against the site schema.

    Examples:\n

        $ build_site.py validate                         # Validate configured data file

        $ build_site.py validate drafts/site.json        # Validate another file
    """
    if data_file is None:
        data_file = _load_config(config_path, []).data_path

    typer.secho(f"\nValidating: {data_file}", fg=typer.colors.BLUE, bold=True)

    try:
        raw = json.loads(data_file.read_text(encoding="utf-8"))
    except FileNotFoundError:
        typer.secho(f"Error: Data file not found: {data_file}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        typer.secho(f"Error: Malformed JSON: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    result = validate_site_data(raw)
    if not result.is_valid:
        _print_issues("Validation failed", result.issues)
        raise typer.Exit(code=1)

    typer.secho("✓ Validation passed\n", fg=typer.colors.GREEN, bold=True)


@app.command("check")
def check_command(
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Build config YAML (default: site_config.yaml)"),
    ] = None,
):
    """Render every page in memory and check it against the Data Store."""
    config = _load_config(config_path, [])

    try:
        pages = render_pages(config)
    except (InvalidSiteDataError, RenderMismatchError) as e:
        _print_issues("Check failed", e.issues)
        raise typer.Exit(code=1)
    except BUILD_ERRORS as e:
        typer.secho(f"✗ Check failed: {e}\n", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(code=1)

    for page in pages:
        d = page.diagnostics
        typer.secho(f"✓ {page.url}", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  jobs={d.job_count} wins={d.win_count} tags={d.tag_count} links={d.link_count}")


@app.command("events")
def events_command(
    n: Annotated[int, typer.Option("--last", "-n", help="Number of events to show", min=1)] = 10,
    event_type: Annotated[
        Optional[str],
        typer.Option("--type", "-t", help="Only show this event type (e.g., build_failed)"),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Build config YAML (default: site_config.yaml)"),
    ] = None,
):
    """Show recent build events."""
    config = _load_config(config_path, [])
    events = get_recent_events(config.logs_path, n=n, event_type=event_type)

    if not events:
        typer.echo("No build events recorded.")
        return

    for event in events:
        extras = {k: v for k, v in event.items() if k not in ("timestamp", "event_type", "source")}
        typer.echo(
            f"{format_timestamp(event['timestamp'])}  {event['event_type']:<16} "
            f"{json.dumps(extras) if extras else ''}"
        )


if __name__ == "__main__":
    app()
