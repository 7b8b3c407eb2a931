"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from tabdash.content import Tab, default_tabs, load_tabs
from tabdash.errors import TabdashError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

ContentOption = Annotated[
    Optional[Path],
    typer.Option("--content", "-c", envvar="TABDASH_CONTENT", help="JSON content file (default: built-in sample)"),
]
TabOption = Annotated[int, typer.Option("--tab", "-t", help="Index of the tab to start on")]


def _configure_logging(log_file: Optional[Path], level: str) -> None:
    """Log to a file only; the terminal belongs to the dashboard."""
    if log_file is None:
        return
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(filename=str(log_file), level=level.upper(), format=LOG_FORMAT)


def _tabs(content: Optional[Path], tab: int) -> list[Tab]:
    tabs = load_tabs(content) if content is not None else default_tabs()
    if not 0 <= tab < len(tabs):
        raise typer.BadParameter(f"must be between 0 and {len(tabs) - 1}", param_hint="--tab")
    return tabs


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="tabdash",
        help="Full-screen tabbed terminal dashboards.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)
    out = Console()

    @app.callback()
    def main(
        log_file: Annotated[Optional[Path], typer.Option("--log-file", envvar="TABDASH_LOG_FILE", help="Write logs to this file")] = None,
        log_level: Annotated[str, typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = "WARNING",
    ) -> None:
        """Full-screen tabbed terminal dashboards."""
        if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise typer.BadParameter(f"unknown level {log_level!r}", param_hint="--log-level")
        _configure_logging(log_file, log_level)

    @app.command()
    def run(
        content: ContentOption = None,
        tab: TabOption = 0,
        tick_ms: Annotated[int, typer.Option("--tick-ms", envvar="TABDASH_TICK_MS", min=1, help="Redraw tick interval in milliseconds")] = 200,
    ) -> None:
        """Launch the interactive dashboard (←/→ switch tabs, q quits)."""
        from tabdash.cli.dashboard.app import run_dashboard

        try:
            tabs = _tabs(content, tab)
            run_dashboard(tabs, selected=tab, tick_rate=tick_ms / 1000)
        except TabdashError as exc:
            logger.error("%s", exc)
            console.print(f"[red]Error:[/] {escape(str(exc))}")
            raise typer.Exit(1)
        except typer.BadParameter:
            raise
        except Exception:
            logger.exception("Dashboard crashed")
            raise

    @app.command()
    def preview(
        content: ContentOption = None,
        tab: TabOption = 0,
        width: Annotated[int, typer.Option("--width", "-w", min=1, help="Frame width in columns")] = 120,
        height: Annotated[int, typer.Option("--height", "-h", min=1, help="Frame height in rows")] = 40,
        plain: Annotated[bool, typer.Option("--plain", "-p", help="Characters only, no colors")] = False,
    ) -> None:
        """Render a single frame of one tab to stdout."""
        from tabdash.cli.core.tabs import TabSet
        from tabdash.cli.dashboard.app import render_frame
        from tabdash.render import TerminalRenderer, render_plain

        try:
            tabs = _tabs(content, tab)
        except TabdashError as exc:
            console.print(f"[red]Error:[/] {escape(str(exc))}")
            raise typer.Exit(1)

        tabset = TabSet([t.title for t in tabs], tab)
        canvas = render_frame(tabset, tabs[tab].content, width, height)
        if plain:
            print(render_plain(canvas))
        else:
            print(TerminalRenderer(absolute=False).render(canvas))

    @app.command()
    def validate(
        path: Annotated[Path, typer.Argument(help="JSON content file to check")],
    ) -> None:
        """Check a content file and list its tabs."""
        try:
            tabs = load_tabs(path)
        except TabdashError as exc:
            console.print(f"[red]Invalid:[/] {escape(str(exc))}")
            raise typer.Exit(1)

        out.print(f"[green]OK[/] {escape(path.name)}: {len(tabs)} tabs")
        for i, t in enumerate(tabs):
            out.print(f"  [bold]{i}[/] {escape(t.title)}")

    return app
