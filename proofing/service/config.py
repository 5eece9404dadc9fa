# proofing/service/config.py

"""Application configuration using Pydantic Settings.

Values come from, in order of precedence: explicit keyword arguments,
environment variables (prefix 'PROOFING_'), a .env file, and a YAML file
(``proofing.yaml`` or the path in ``PROOFING_CONFIG_FILE``).
"""

import logging
import os
from functools import lru_cache
from typing import Optional, Tuple, Type

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    SettingsError,
    YamlConfigSettingsSource,
)

from proofing.core.definitions import DEFAULT_LANGUAGE, LONG_SENTENCE_THRESHOLD, Markers
from proofing.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "proofing.yaml"
CONFIG_FILE_ENV = "PROOFING_CONFIG_FILE"


class Settings(BaseSettings):
    """Global application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PROOFING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Checker
    language: str = Field(
        default=DEFAULT_LANGUAGE, description="Language tag sent to the grammar checker."
    )

    languagetool_url: Optional[str] = Field(
        default=None,
        description="Base URL of a LanguageTool server. None uses the public API.",
    )

    # Highlighting
    marker_open: str = Field(default=Markers.OPEN, description="Opening marker for flagged spans.")
    marker_close: str = Field(default=Markers.CLOSE, description="Closing marker for flagged spans.")
    highlight_css_class: str = Field(
        default=Markers.HTML_CLASS, description="CSS class of highlighted spans in HTML output."
    )

    # Style insights
    long_sentence_threshold: int = Field(
        default=LONG_SENTENCE_THRESHOLD,
        ge=1,
        description="Average words per sentence above which sentences are reported as long.",
    )

    log_level: str = Field(default="INFO", description="Logging level name.")

    @field_validator("language", "marker_open", "marker_close")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure the value is not empty."""
        if not v.strip():
            raise ValueError("Value cannot be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        yaml_file = os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE)
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file),
            file_secret_settings,
        )


def load_settings(**overrides) -> Settings:
    """Builds settings, converting validation failures.

    Raises:
        ConfigurationError: If any value is invalid.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        raise ConfigurationError(f"Invalid configuration: {e}") from e
    except (yaml.YAMLError, SettingsError) as e:
        logger.error(f"YAML parsing error: {e}", exc_info=True)
        raise ConfigurationError(f"Failed to parse configuration file: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Returns the process-wide settings instance."""
    return load_settings()
