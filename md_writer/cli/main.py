"""Main CLI application using Typer."""

from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console

from md_writer import __version__
from md_writer.cli.commands.code import block, fence, span
from md_writer.cli.commands.header import header
from md_writer.config import get_settings
from md_writer.config.constants import APP_NAME
from md_writer.utils.logging import setup_logging

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name=APP_NAME,
    help="Write Markdown fragments: code fences, code spans, code blocks and headings.",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Console for output
console = Console()

app.command(name="fence", help="Print a code fence.")(fence)
app.command(name="span", help="Print an inline code span.")(span)
app.command(name="block", help="Print a fenced code block.")(block)
app.command(name="header", help="Print a heading (levels 1-6).")(header)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]MD Writer[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging on stderr."),
    ] = False,
) -> None:
    """MD Writer - utilities to help make writing Markdown easier.

    Every command prints a single CommonMark fragment to stdout.
    """
    settings = get_settings()
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        json_format=settings.log_json,
    )


if __name__ == "__main__":
    app()
