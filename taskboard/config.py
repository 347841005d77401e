"""Configuration for Taskboard.

Settings come from, in increasing precedence:
- Built-in defaults
- A JSON config file (taskboard.json in the working directory by default)
- TASKBOARD_* environment variables
- Command line options (applied by the CLI)
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "taskboard.json"

ENV_PREFIX = "TASKBOARD_"


@dataclass
class AppConfig:
    """Application settings."""

    data_file: str = "data/tasks.json"
    host: str = "127.0.0.1"
    port: int = 5050
    debug: bool = False
    log_level: str = "INFO"
    json_indent: Optional[int] = 2


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _coerce_bool(value) -> bool:
    if isinstance(value, str):
        return _parse_bool(value)
    return bool(value)


def _parse_port(value, default: int, source) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid port %r in %s", value, source)
        return default


def _apply_env(config: AppConfig, environ) -> AppConfig:
    """Override config fields from TASKBOARD_* environment variables."""
    if f"{ENV_PREFIX}DATA_FILE" in environ:
        config.data_file = environ[f"{ENV_PREFIX}DATA_FILE"]
    if f"{ENV_PREFIX}HOST" in environ:
        config.host = environ[f"{ENV_PREFIX}HOST"]
    if f"{ENV_PREFIX}PORT" in environ:
        try:
            config.port = int(environ[f"{ENV_PREFIX}PORT"])
        except ValueError:
            logger.warning(
                "Ignoring invalid %sPORT=%r", ENV_PREFIX, environ[f"{ENV_PREFIX}PORT"]
            )
    if f"{ENV_PREFIX}DEBUG" in environ:
        config.debug = _parse_bool(environ[f"{ENV_PREFIX}DEBUG"])
    if f"{ENV_PREFIX}LOG_LEVEL" in environ:
        config.log_level = environ[f"{ENV_PREFIX}LOG_LEVEL"].upper()
    return config


def load_config(config_path: Optional[str] = None, environ=None) -> AppConfig:
    """Load configuration.

    Args:
        config_path: JSON config file. Defaults to taskboard.json in the
            current directory; a missing file means defaults.
        environ: Mapping of environment variables (defaults to os.environ).

    Returns:
        AppConfig with file values and environment overrides applied.
    """
    config = AppConfig()
    config_file = Path(config_path or DEFAULT_CONFIG_FILE)

    if config_file.exists():
        try:
            with open(config_file) as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Could not read config %s: %s", config_file, e)
            data = {}

        if not isinstance(data, dict):
            logger.warning("Config %s is not a JSON object, using defaults", config_file)
            data = {}

        config = AppConfig(
            data_file=data.get("data_file", config.data_file),
            host=data.get("host", config.host),
            port=_parse_port(data.get("port", config.port), config.port, config_file),
            debug=_coerce_bool(data.get("debug", config.debug)),
            log_level=str(data.get("log_level", config.log_level)).upper(),
            json_indent=data.get("json_indent", config.json_indent),
        )

    return _apply_env(config, os.environ if environ is None else environ)
