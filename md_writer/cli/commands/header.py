"""Header command."""

from typing import Annotated

import typer
from rich.console import Console

from md_writer.config import get_settings
from md_writer.config.constants import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL
from md_writer.exceptions import MdWriterError
from md_writer.markdown import heading
from md_writer.utils.logging import get_logger

console = Console(stderr=True)
log = get_logger(__name__)


def header(
    text: Annotated[str, typer.Argument(help="Heading text.")],
    level: Annotated[
        int | None,
        typer.Option(
            "--level",
            "-l",
            help="Heading level: 1-2 are setext, 3-6 are ATX.",
            min=MIN_HEADING_LEVEL,
            max=MAX_HEADING_LEVEL,
        ),
    ] = None,
) -> None:
    """Print a heading."""
    settings = get_settings()
    if level is None:
        level = settings.output.default_heading_level

    log.debug("Building heading", heading_level=level, length=len(text))
    try:
        result = heading(text, level)
    except MdWriterError as e:
        log.error("Heading failed", error=str(e))
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    typer.echo(result)
