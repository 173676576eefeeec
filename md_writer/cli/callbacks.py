"""CLI callback functions."""

from pathlib import Path

import typer


def validate_info_string(value: str | None) -> str | None:
    """Reject info strings that would break a backtick code fence."""
    if value is None:
        return None

    if "`" in value:
        raise typer.BadParameter(f"Info string must not contain backticks: {value!r}")

    if "\n" in value or "\r" in value:
        raise typer.BadParameter("Info string must fit on a single line")

    return value


def validate_input_file(value: Path | None) -> Path | None:
    """Validate input file exists and is readable."""
    if value is None:
        return None

    if not value.exists():
        raise typer.BadParameter(f"File not found: {value}")

    if not value.is_file():
        raise typer.BadParameter(f"Path is not a file: {value}")

    return value
