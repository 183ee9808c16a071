"""Typer CLI application."""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

logger = logging.getLogger(__name__)

STDIN_PATH = Path("-")


def configure_logging(verbose: bool) -> None:
    """Send library log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def read_input(path: Optional[Path]) -> str:
    """Read text from a file, or from stdin when path is omitted or '-'."""
    if path is None or path == STDIN_PATH:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8", errors="replace")


def write_output(text: str) -> None:
    """Write raw text to stdout, escape codes included."""
    sys.stdout.write(text)
    sys.stdout.flush()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-spans",
        help="Convert between escape-coded terminal text and style spans.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.callback()
    def root(
        verbose: Annotated[bool, typer.Option(
            "--verbose", "-v",
            envvar="ANSI_SPANS_VERBOSE",
            help="Log dropped escape sequences and codes",
        )] = False,
    ) -> None:
        configure_logging(verbose)

    @app.command()
    def parse(
        path: Annotated[Optional[Path], typer.Argument(exists=True, dir_okay=False, allow_dash=True, help="Input file ('-' or omitted for stdin)")] = None,
        split_on_word: Annotated[bool, typer.Option(
            "--split-on-word", "-w",
            envvar="ANSI_SPANS_SPLIT_ON_WORD",
            help="Split text spans at word boundaries",
        )] = False,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Decode escape-coded text into spans."""
        from ansi_spans.codec.parser import parse as parse_text
        from ansi_spans.render.json_format import dump_spans

        spans = parse_text(read_input(path), split_on_word=split_on_word)
        logger.debug("Parsed %d spans", len(spans))

        if json_output:
            write_output(dump_spans(spans) + "\n")
            return

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Type")
        table.add_column("Value")
        for i, span in enumerate(spans):
            table.add_row(str(i), span.type.value, repr(span.value))
        console.print(table)

    @app.command()
    def emit(
        path: Annotated[Optional[Path], typer.Argument(exists=True, dir_okay=False, allow_dash=True, help="JSON span file ('-' or omitted for stdin)")] = None,
    ) -> None:
        """Encode a JSON span array as escape-coded text."""
        from ansi_spans.codec.emitter import emit_string
        from ansi_spans.errors import AnsiSpansError
        from ansi_spans.render.json_format import load_spans

        try:
            output = emit_string(load_spans(read_input(path)))
        except AnsiSpansError as e:
            err_console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)

        write_output(output)

    @app.command()
    def strip(
        path: Annotated[Optional[Path], typer.Argument(exists=True, dir_okay=False, allow_dash=True, help="Input file ('-' or omitted for stdin)")] = None,
    ) -> None:
        """Print text with all SGR sequences removed."""
        from ansi_spans.render.text import strip_ansi

        write_output(strip_ansi(read_input(path)))

    @app.command()
    def normalize(
        path: Annotated[Optional[Path], typer.Argument(exists=True, dir_okay=False, allow_dash=True, help="Input file ('-' or omitted for stdin)")] = None,
    ) -> None:
        """Re-encode text with combined, minimal SGR sequences.

        Sequences the parser does not understand are dropped, and numeric
        (256-color) values cannot be re-encoded.
        """
        from ansi_spans.codec.emitter import emit_string
        from ansi_spans.codec.parser import parse as parse_text
        from ansi_spans.errors import AnsiSpansError

        try:
            output = emit_string(parse_text(read_input(path)))
        except AnsiSpansError as e:
            err_console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)

        write_output(output)

    return app
