import pytest
import typer

from md_writer.cli.callbacks import validate_info_string, validate_input_file


class TestCallbacks:
    def test_validate_info_string_valid(self):
        """Test plain info strings pass through."""
        assert validate_info_string("python") == "python"
        assert validate_info_string("json {.numberLines}") == "json {.numberLines}"

    def test_validate_info_string_none(self):
        """Test absent info string passes through."""
        assert validate_info_string(None) is None

    def test_validate_info_string_empty(self):
        """Test empty info string is allowed."""
        assert validate_info_string("") == ""

    def test_validate_info_string_backtick(self):
        """Test backticks are rejected."""
        with pytest.raises(typer.BadParameter, match="must not contain backticks"):
            validate_info_string("py`thon")

    @pytest.mark.parametrize("value", ["python\nrust", "python\r"])
    def test_validate_info_string_line_break(self, value):
        """Test line breaks are rejected."""
        with pytest.raises(typer.BadParameter, match="single line"):
            validate_info_string(value)

    def test_validate_input_file_valid(self, tmp_path):
        """Test validation of valid input file."""
        file_path = tmp_path / "main.rs"
        file_path.touch()
        assert validate_input_file(file_path) == file_path

    def test_validate_input_file_none(self):
        assert validate_input_file(None) is None

    def test_validate_input_file_not_found(self, tmp_path):
        """Test validation fails if input file doesn't exist."""
        with pytest.raises(typer.BadParameter, match="File not found"):
            validate_input_file(tmp_path / "nonexistent.rs")

    def test_validate_input_file_is_dir(self, tmp_path):
        """Test validation fails if input path is a directory."""
        with pytest.raises(typer.BadParameter, match="Path is not a file"):
            validate_input_file(tmp_path)
