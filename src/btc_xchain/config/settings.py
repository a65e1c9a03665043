"""Codec settings loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``BTC_XCHAIN_``)
2. YAML config file (``BTC_XCHAIN_CONFIG_PATH`` env var or ``from_yaml``)
3. Defaults defined here
"""

from __future__ import annotations

import enum
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class LogLevel(enum.StrEnum):
    """Log levels accepted by the CLI tools."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file and return its contents as a dict.

    Returns an empty dict if the file doesn't exist or is empty.
    """
    p = Path(path)
    if not p.exists():
        logger.debug("Config file %s not found, using defaults", p)
        return {}
    text = p.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return data if isinstance(data, dict) else {}


class CodecConfig(BaseSettings):
    """Top-level codec configuration.

    Loads settings from environment variables (``BTC_XCHAIN_`` prefix),
    an optional YAML file, and built-in defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="BTC_XCHAIN_",
        case_sensitive=False,
    )

    reject_trailing_bytes: bool = Field(
        default=True,
        description="from_bytes/from_hex fail when bytes remain after the record",
    )
    log_level: LogLevel = LogLevel.WARNING
    config_path: str = ""

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Merge YAML config file contents under the env var overrides."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        yaml_data = _load_yaml(config_path)
        for key, val in yaml_data.items():
            if key not in values or values[key] is None:
                values[key] = val
        return values

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Construct ``CodecConfig`` loading defaults from a YAML file.

        Environment variables still override YAML values.
        """
        return cls(config_path=str(path))


@lru_cache(maxsize=1)
def get_config() -> CodecConfig:
    """Return the process-wide configuration, built on first use."""
    return CodecConfig()


def reset_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    get_config.cache_clear()
