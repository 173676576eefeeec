"""Tests for header command."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from md_writer.cli.main import app
from md_writer.exceptions import FragmentTooLargeError


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


class TestHeaderCommand:
    """Tests for the header command."""

    def test_default_level(self, runner):
        """Test the default level is a setext h2."""
        result = runner.invoke(app, ["header", "Hello!"])

        assert result.exit_code == 0
        assert result.stdout == "Hello!\n------\n"

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("1", "Hello!\n======\n"),
            ("3", "### Hello!\n"),
            ("4", "#### Hello!\n"),
            ("5", "##### Hello!\n"),
            ("6", "###### Hello!\n"),
        ],
    )
    def test_levels(self, runner, level, expected):
        result = runner.invoke(app, ["header", "Hello!", "--level", level])

        assert result.exit_code == 0
        assert result.stdout == expected

    @pytest.mark.parametrize("level", ["0", "7"])
    def test_level_out_of_range(self, runner, level):
        """Test typer rejects levels outside 1-6."""
        result = runner.invoke(app, ["header", "Hello!", "-l", level])

        assert result.exit_code == 2

    def test_default_level_from_config(self, runner, config_file):  # noqa: ARG002
        result = runner.invoke(app, ["header", "Hello!"])

        assert result.exit_code == 0
        assert result.stdout == "### Hello!\n"

    def test_default_level_from_env(self, runner, monkeypatch):
        monkeypatch.setenv("MD_WRITER_OUTPUT__DEFAULT_HEADING_LEVEL", "1")

        result = runner.invoke(app, ["header", "Grüße"])

        assert result.stdout == "Grüße\n=====\n"

    def test_library_error_exits_with_1(self, runner):
        """Test library errors are reported without a traceback."""
        with patch(
            "md_writer.cli.commands.header.heading",
            side_effect=FragmentTooLargeError(10),
        ):
            result = runner.invoke(app, ["header", "Hello!"])

        assert result.exit_code == 1
        assert "Error" in result.output
