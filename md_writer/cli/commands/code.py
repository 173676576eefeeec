"""Code fragment commands: fence, span and block."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer

from md_writer.cli.callbacks import validate_info_string, validate_input_file
from md_writer.config import get_settings
from md_writer.markdown import (
    code_fence,
    code_span,
    fenced_code_block,
    fenced_js_code_block,
    fenced_rs_code_block,
    fenced_sh_code_block,
    fenced_ts_code_block,
)
from md_writer.utils.logging import get_logger

log = get_logger(__name__)

# Language aliases served by the dedicated fenced block builders
LANGUAGE_BUILDERS: dict[str, Callable[[str], str]] = {
    "js": fenced_js_code_block,
    "javascript": fenced_js_code_block,
    "rs": fenced_rs_code_block,
    "rust": fenced_rs_code_block,
    "sh": fenced_sh_code_block,
    "shell": fenced_sh_code_block,
    "ts": fenced_ts_code_block,
    "typescript": fenced_ts_code_block,
}


def fence(
    info_string: Annotated[
        str | None,
        typer.Argument(
            help="Info string (usually a language name) for the fence.",
            callback=validate_info_string,
        ),
    ] = None,
) -> None:
    """Print a code fence."""
    typer.echo(code_fence(info_string))


def span(
    code: Annotated[str, typer.Argument(help="Inline code to wrap in backticks.")],
) -> None:
    """Print a code span."""
    typer.echo(code_span(code))


def _read_code(code: str | None, file: Path | None) -> str:
    if code is not None and file is not None:
        raise typer.BadParameter("Pass either CODE or --file, not both")

    if code is not None:
        return code

    if file is not None:
        log.debug("Reading code from file", path=str(file))
        text = file.read_text(encoding="utf-8")
    else:
        log.debug("Reading code from stdin")
        text = sys.stdin.read()

    # A trailing newline would leave an empty line before the closing fence
    return text.removesuffix("\n")


def render_block(code: str, lang: str | None) -> str:
    """Build a fenced code block, using a dedicated builder for known aliases."""
    builder = LANGUAGE_BUILDERS.get(lang.lower()) if lang else None
    if builder is not None:
        return builder(code)
    return fenced_code_block(code, lang)


def block(
    code: Annotated[
        str | None,
        typer.Argument(help="Code to enclose. Read from --file or stdin when omitted."),
    ] = None,
    lang: Annotated[
        str | None,
        typer.Option(
            "--lang",
            "-l",
            help="Info string for the opening fence (js, rs, sh and ts are expanded).",
            callback=validate_info_string,
        ),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Read the code from this file.",
            dir_okay=False,
            callback=validate_input_file,
        ),
    ] = None,
) -> None:
    """Print a fenced code block."""
    settings = get_settings()
    info_string = lang if lang is not None else settings.output.default_info_string

    text = _read_code(code, file)
    log.debug("Building fenced code block", info_string=info_string, length=len(text))
    typer.echo(render_block(text, info_string))
