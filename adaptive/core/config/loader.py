"""
Configuration loader — reads config.yml into the Settings model.

Reads YAML, validates against the Pydantic schema, and returns a typed
Settings object. A missing default config file is not an error: the
defaults apply.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from adaptive.core.models.settings import Settings

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ADAPTIVE_CONFIG"
CONFIG_FILE = "config.yml"


class ConfigError(Exception):
    """Raised when the configuration file is invalid or unreadable."""


def default_config_path() -> Path:
    """``$XDG_CONFIG_HOME/adaptive/config.yml`` (``~/.config`` by default)."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "adaptive" / CONFIG_FILE


def find_config_file() -> tuple[Path | None, bool]:
    """Locate the config file.

    Returns:
        ``(path, explicit)``. ``explicit`` is True when the path came from
        ``ADAPTIVE_CONFIG`` and must therefore exist. ``path`` is None when
        no default config file exists.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser(), True

    candidate = default_config_path()
    if candidate.is_file():
        return candidate, False
    return None, False


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate user settings.

    Args:
        path: Explicit config path (must exist). If None, ``ADAPTIVE_CONFIG``
            and then the default location are tried.

    Returns:
        Validated Settings (defaults when no config file is found).

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    explicit = path is not None
    if path is None:
        path, explicit = find_config_file()

    if path is None:
        logger.debug("No config file found, using defaults")
        return Settings()

    if not path.is_file():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return Settings()

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded settings from %s (%d custom tools)", path, len(settings.tools))
    return settings
