"""Configuration module for MD Writer."""

from md_writer.config.settings import (
    MdWriterSettings,
    OutputConfig,
    get_settings,
    reload_settings,
)

__all__ = [
    "MdWriterSettings",
    "OutputConfig",
    "get_settings",
    "reload_settings",
]
