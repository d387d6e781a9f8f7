"""Command-line interface for sand."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

import typer

from .config import TrackerConfig, initialize, resolve_tracking_path
from .engine import Tracker
from .errors import SandError
from .paths import CONFIG_ENVVAR
from .reporting import StatusPrinter
from .storage import Filesystem

app = typer.Typer(help="Track what you spend your time on in a plain-text file.")

logger = logging.getLogger(__name__)


@app.callback(no_args_is_help=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        envvar=CONFIG_ENVVAR,
        path_type=Path,
        help="File that records which tracking file is in use.",
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    ctx.obj = TrackerConfig.from_option(config_path)


@contextmanager
def reported_errors() -> Iterator[None]:
    try:
        yield
    except SandError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _tracker(ctx: typer.Context) -> Tracker:
    storage = Filesystem()
    tracking_path = resolve_tracking_path(storage, ctx.obj)
    logger.debug("Using tracking file %s", tracking_path)
    return Tracker(storage, tracking_path)


@app.command()
def init(
    ctx: typer.Context,
    tracking_path: Path = typer.Argument(..., help="Tracking file to create or reuse."),
) -> None:
    """Choose the file that activities are recorded in."""
    with reported_errors():
        path = initialize(Filesystem(), ctx.obj, tracking_path)
    typer.echo(f"tracking time in {typer.style(str(path), fg='green')}")


@app.command()
def start(
    ctx: typer.Context,
    words: List[str] = typer.Argument(..., help="Description of the activity."),
) -> None:
    """Start a new activity, stopping the current one."""
    activity = " ".join(words)
    with reported_errors():
        stopped = _tracker(ctx).start(activity)
    StatusPrinter().print_started(activity, stopped)


@app.command()
def stop(ctx: typer.Context) -> None:
    """Stop the current activity."""
    with reported_errors():
        status = _tracker(ctx).stop()
    StatusPrinter().print_stopped(status)


@app.command()
def status(ctx: typer.Context) -> None:
    """Show the activity that is currently running."""
    with reported_errors():
        current = _tracker(ctx).status()
    printer = StatusPrinter()
    if current is None:
        printer.print_idle()
    else:
        printer.print_statuses([current])


@app.command()
def today(
    ctx: typer.Context,
    summed: bool = typer.Option(False, "--sum", help="Total the time per activity."),
) -> None:
    """List today's activities."""
    with reported_errors():
        statuses = _tracker(ctx).today()
    StatusPrinter().print_statuses(statuses, summed=summed)


@app.command()
def yesterday(
    ctx: typer.Context,
    summed: bool = typer.Option(False, "--sum", help="Total the time per activity."),
) -> None:
    """List yesterday's activities."""
    with reported_errors():
        statuses = _tracker(ctx).yesterday()
    StatusPrinter().print_statuses(statuses, summed=summed)


@app.command()
def query(
    ctx: typer.Context,
    words: Optional[List[str]] = typer.Argument(
        None, help="Text to find in activities or dates, e.g. 2020-05-20 or programming."
    ),
    summed: bool = typer.Option(False, "--sum", help="Total the time per activity."),
) -> None:
    """Search activities by description or date."""
    with reported_errors():
        statuses = _tracker(ctx).query(" ".join(words or []))
    StatusPrinter().print_statuses(statuses, summed=summed)
