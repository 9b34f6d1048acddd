"""Configuration module."""

from tukutil.config.loader import load_config, get_config, reset_config

__all__ = ["load_config", "get_config", "reset_config"]
