"""
Configuration management for the accordion widget package.

This module provides centralized settings with environment variable
support and validation. Every field of ``AccordionSettings`` can be
supplied as an ``ACCORDION_<FIELD>`` environment variable or through a
``.env`` file.
"""

import re
import logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError, ErrorCodes

logger = logging.getLogger(__name__)

ENV_PREFIX = "ACCORDION_"

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


class AccordionSettings(BaseSettings):
    """Settings for accordion theming and the demo application."""

    # Theme Configuration
    padding: int = Field(4, ge=0, le=64)
    text_size: int = Field(14, ge=6, le=72)
    expand_icon: str = Field("▼", min_length=1)
    collapse_icon: str = Field("▲", min_length=1)
    background_color: str = Field("#2b2b2b")

    # GUI Configuration
    appearance_mode: Literal["dark", "light", "system"] = "dark"
    color_theme: Literal["blue", "green", "dark-blue"] = "blue"
    multi_open: bool = False
    window_width: int = Field(480, ge=200, le=2000)
    window_height: int = Field(640, ge=200, le=1200)

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("background_color")
    @classmethod
    def validate_background_color(cls, v: str) -> str:
        """Accept only #rgb or #rrggbb colours."""
        if not _HEX_COLOR.match(v):
            raise ValueError(f"background_color must be a hex colour like '#2b2b2b', got {v!r}")
        return v.lower()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a plain dictionary."""
        return self.model_dump()


class ConfigManager:
    """Manages settings lifecycle and provides convenient access methods."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else Path(".env")
        self._config: Optional[AccordionSettings] = None

    def load_config(self, **overrides: Any) -> AccordionSettings:
        """Load settings from the environment with optional overrides.

        Precedence, highest first: non-None overrides, process environment,
        then the ``.env`` file at ``config_path``.
        """
        env_file = self.config_path if self.config_path.exists() else None
        values = {k: v for k, v in overrides.items() if v is not None}

        try:
            self._config = AccordionSettings(_env_file=env_file, **values)
        except ValidationError as e:
            logger.error(f"Failed to load configuration: {e}")
            raise ConfigurationError(
                "Invalid accordion configuration",
                error_code=ErrorCodes.CONFIG_INVALID,
                details={"errors": e.errors(include_url=False)},
                original_error=e,
            ) from e

        logger.info("Configuration loaded successfully")
        return self._config

    def get_config(self) -> AccordionSettings:
        """Get current settings, loading them on first access."""
        if self._config is None:
            return self.load_config()
        return self._config

    def save_config(self, config: AccordionSettings, path: Optional[Path] = None) -> None:
        """Save settings to a file in ``.env`` format."""
        save_path = Path(path) if path else self.config_path

        lines = []
        for key, value in config.model_dump().items():
            if isinstance(value, bool):
                value = str(value).lower()
            lines.append(f"{ENV_PREFIX}{key.upper()}={value}")

        try:
            save_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write configuration to {save_path}",
                error_code=ErrorCodes.CONFIG_SAVE_FAILED,
                original_error=e,
            ) from e
        logger.info(f"Configuration saved to {save_path}")


# Global configuration manager instance
_config_manager = ConfigManager()


def get_config(**overrides: Any) -> AccordionSettings:
    """Get global settings instance with optional overrides."""
    return _config_manager.load_config(**overrides)


def get_config_manager() -> ConfigManager:
    """Get global configuration manager instance."""
    return _config_manager
