"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test in an isolated directory without md-writer.yaml or .env."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("MD_WRITER_"):
            monkeypatch.delenv(key)

    from md_writer.config.settings import get_settings

    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture
def sample_code() -> str:
    """A small multi-line Rust snippet."""
    return 'fn main() {\n    println!("Hello world!");\n}'


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write an md-writer.yaml into the isolated working directory."""
    file_path = tmp_path / "md-writer.yaml"
    file_path.write_text(
        "log_level: INFO\noutput:\n  default_info_string: python\n  default_heading_level: 3\n",
        encoding="utf-8",
    )
    return file_path
