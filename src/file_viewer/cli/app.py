"""Typer CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from file_viewer.config import CliOverrides, ViewerConfig, load_config
from file_viewer.core.document import Document
from file_viewer.core.errors import ConfigError, DocumentLoadError
from file_viewer.core.state import ViewportState, ViewSize
from file_viewer.io.reader import load
from file_viewer.log import configure_logging

logger = logging.getLogger(__name__)


def _initial_state(
    document: Document,
    config: ViewerConfig,
    pattern: str,
    line: int,
    left: int = 0,
) -> ViewportState:
    top_line = max(0, min(line - 1, document.size() - 1))
    return ViewportState(
        top_line=top_line,
        left_edge=max(0, left),
        pattern=pattern,
        show_line_numbers=config.show_line_numbers,
        filtering=config.filtering,
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="file-viewer",
        help="View, search and filter text files in the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def _setup(
        config_path: Optional[Path],
        overrides: CliOverrides,
    ) -> ViewerConfig:
        try:
            config = load_config(config_path, overrides)
        except ConfigError as e:
            err_console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)
        configure_logging(config.log_level, config.log_file, err_console)
        logger.debug("effective config: %s", config)
        return config

    def _load(path: Path, config: ViewerConfig) -> Document:
        try:
            return load(path, encoding=config.encoding, errors=config.errors)
        except DocumentLoadError as e:
            logger.info("load failed: %s", e)
            err_console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)

    @app.command()
    def view(
        path: Annotated[Path, typer.Argument(help="Text file to view")],
        pattern: Annotated[str, typer.Option("--pattern", "-p", help="Initial search pattern")] = "",
        filter_: Annotated[Optional[bool], typer.Option("--filter/--no-filter", "-f", help="Start with filtering on")] = None,
        line_numbers: Annotated[Optional[bool], typer.Option("--line-numbers/--no-line-numbers", help="Show the line-number column")] = None,
        line: Annotated[int, typer.Option("--line", "-l", help="First line to show (1-based)")] = 1,
        encoding: Annotated[Optional[str], typer.Option("--encoding", "-e", help="File encoding")] = None,
        config_path: Annotated[Optional[Path], typer.Option("--config", help="Config file (TOML)")] = None,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write logs to this file")] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    ) -> None:
        """View a text file interactively.

        Keys: arrows/PgUp/PgDn scroll, Home/End jump horizontally,
        Ctrl+Home/Ctrl+End jump to the ends, / searches, n/p find the
        next/previous match, Ctrl+T filters, Ctrl+L toggles line numbers,
        Esc quits.
        """
        from file_viewer.cli.viewer import run_viewer

        config = _setup(config_path, CliOverrides(
            encoding=encoding,
            show_line_numbers=line_numbers,
            filtering=filter_,
            log_level="DEBUG" if verbose else None,
            log_file=log_file,
        ))
        document = _load(path, config)
        run_viewer(document, config, _initial_state(document, config, pattern, line))

    @app.command()
    def dump(
        path: Annotated[Path, typer.Argument(help="Text file to render")],
        width: Annotated[int, typer.Option("--width", min=1, help="Frame width in columns")] = 80,
        height: Annotated[int, typer.Option("--height", min=1, help="Frame height in rows")] = 24,
        pattern: Annotated[str, typer.Option("--pattern", "-p", help="Search pattern to highlight")] = "",
        filter_: Annotated[Optional[bool], typer.Option("--filter/--no-filter", "-f", help="Only show matching lines")] = None,
        line_numbers: Annotated[Optional[bool], typer.Option("--line-numbers/--no-line-numbers", help="Show the line-number column")] = None,
        line: Annotated[int, typer.Option("--line", "-l", help="First line to show (1-based)")] = 1,
        left: Annotated[int, typer.Option("--left", help="Horizontal scroll offset")] = 0,
        color: Annotated[bool, typer.Option("--color/--no-color", help="Emit ANSI colors")] = False,
        encoding: Annotated[Optional[str], typer.Option("--encoding", "-e", help="File encoding")] = None,
        config_path: Annotated[Optional[Path], typer.Option("--config", help="Config file (TOML)")] = None,
    ) -> None:
        """Print a single frame of the viewer without entering the terminal UI."""
        from file_viewer.render import TerminalRenderer, TextRenderer, paint, project

        config = _setup(config_path, CliOverrides(
            encoding=encoding,
            show_line_numbers=line_numbers,
            filtering=filter_,
        ))
        document = _load(path, config)
        view_size = ViewSize(width, height)
        state = _initial_state(document, config, pattern, line, left).clamped(
            view_size, document.size()
        )
        frame = project(state, document, view_size, line_number_margin=config.line_number_margin)
        canvas = paint(frame, config.x_factor, config.y_factor)
        if color:
            print(TerminalRenderer().render(canvas))
        else:
            print(TextRenderer().render(canvas))

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="Text file to inspect")],
        pattern: Annotated[str, typer.Option("--pattern", "-p", help="Count lines containing this text")] = "",
        encoding: Annotated[Optional[str], typer.Option("--encoding", "-e", help="File encoding")] = None,
    ) -> None:
        """Show line statistics for a text file."""
        config = _setup(None, CliOverrides(encoding=encoding))
        document = _load(path, config)

        console.print(f"[bold cyan]{escape(document.title)}[/]")
        console.print(f"  [bold]Lines:[/]   {document.size()}")
        console.print(f"  [bold]Longest:[/] {document.longest_line}")
        if pattern:
            first = document.find_next_matching_line(-1, pattern)
            console.print(f"  [bold]Matches:[/] {document.count_matches(pattern)}", highlight=False)
            if first is not None:
                console.print(f"  [bold]First:[/]   line {first + 1}", highlight=False)

    return app
