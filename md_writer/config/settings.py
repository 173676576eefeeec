"""Configuration settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, YamlConfigSettingsSource

from md_writer.config.constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_HEADING_LEVEL,
    DEFAULT_LOG_LEVEL,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
)


class OutputConfig(BaseModel):
    """Defaults applied by the CLI when an option is omitted."""

    default_info_string: str | None = None
    default_heading_level: int = Field(
        default=DEFAULT_HEADING_LEVEL, ge=MIN_HEADING_LEVEL, le=MAX_HEADING_LEVEL
    )

    @field_validator("default_info_string")
    @classmethod
    def check_info_string(cls, value: str | None) -> str | None:
        """Reject info strings that would break a backtick code fence."""
        if value is None:
            return value
        if "`" in value:
            raise ValueError(f"info string must not contain backticks: {value!r}")
        if "\n" in value or "\r" in value:
            raise ValueError("info string must fit on a single line")
        return value


class MdWriterSettings(BaseSettings):
    """Main configuration class for MD Writer."""

    model_config = SettingsConfigDict(
        env_prefix="MD_WRITER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        """Customize settings sources to include YAML file."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=DEFAULT_CONFIG_FILE),
            file_secret_settings,
        )

    output: OutputConfig = Field(default_factory=OutputConfig)

    # Global settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = DEFAULT_LOG_LEVEL
    log_json: bool = False


@lru_cache
def get_settings() -> MdWriterSettings:
    """Get cached settings instance."""
    return MdWriterSettings()


def reload_settings() -> MdWriterSettings:
    """Force reload settings (clear cache)."""
    get_settings.cache_clear()
    return get_settings()
