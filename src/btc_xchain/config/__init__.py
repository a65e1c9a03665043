"""Configuration."""

from btc_xchain.config.settings import CodecConfig, LogLevel, get_config, reset_config

__all__ = ["CodecConfig", "LogLevel", "get_config", "reset_config"]
