"""Configuration loader with environment variable overrides."""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "default.yaml"

# Used when the default config file is not present, e.g. in an installed package.
BUILTIN_DEFAULTS: dict[str, Any] = {
    "paths": {},
    "ids": {"root": "1.2.40.0.13.1.1.3542466645.", "seed_length": 5},
    "time": {"timezone": "Europe/London"},
    "logging": {"level": "INFO", "json": False},
}

_config: dict[str, Any] | None = None


def load_config(config_path: str | None = None) -> dict[str, Any]:
    """
    Load configuration from YAML file with environment variable overrides.

    An explicit ``config_path`` must exist. Without one, the bundled
    ``config/default.yaml`` is used if present, else the built-in defaults.
    """
    global _config
    if _config is not None:
        return _config

    if config_path is None and not Path(DEFAULT_CONFIG_PATH).exists():
        logger.debug("No config file at %s, using built-in defaults", DEFAULT_CONFIG_PATH)
        config = copy.deepcopy(BUILTIN_DEFAULTS)
    else:
        config_path = Path(config_path or DEFAULT_CONFIG_PATH)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        # Resolve paths relative to project root
        project_root = config_path.parent.parent
        if "paths" in config:
            for key, value in config["paths"].items():
                if isinstance(value, str) and not Path(value).is_absolute():
                    config["paths"][key] = str(project_root / value)

    # Environment overrides
    config["paths"] = config.get("paths") or {}
    config["ids"] = config.get("ids") or {}
    config["time"] = config.get("time") or {}
    config["logging"] = config.get("logging") or {}
    if os.getenv("TUKUTIL_CODESYSTEM_FILE"):
        # Relative to the working directory of the process
        config["paths"]["codesystem_file"] = str(Path(os.getenv("TUKUTIL_CODESYSTEM_FILE")).resolve())
    if os.getenv("TUKUTIL_ID_ROOT"):
        config["ids"]["root"] = os.getenv("TUKUTIL_ID_ROOT")
    if os.getenv("TUKUTIL_TIMEZONE"):
        config["time"]["timezone"] = os.getenv("TUKUTIL_TIMEZONE")
    if os.getenv("TUKUTIL_LOG_LEVEL"):
        config["logging"]["level"] = os.getenv("TUKUTIL_LOG_LEVEL")

    _config = config
    return _config


def get_config() -> dict[str, Any]:
    """Get loaded configuration. Loads if not already loaded."""
    if _config is None:
        load_config()
    return _config or {}


def reset_config() -> None:
    """Drop the cached configuration so the next call reloads it."""
    global _config
    _config = None
