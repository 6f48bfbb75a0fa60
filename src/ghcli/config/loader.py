"""Settings file discovery and loading."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ghcli.contracts.config import Settings
from ghcli.contracts.exceptions import ConfigError

_LOG = logging.getLogger(__name__)

APP_DIR_NAME = "gh-cli"
SETTINGS_FILE_NAME = "settings.toml"
CONFIG_DIR_ENV = "GH_CLI_CONFIG_DIR"


def config_dir() -> Path:
    """Return the directory holding ``settings.toml``.

    ``$GH_CLI_CONFIG_DIR`` wins, then ``$XDG_CONFIG_HOME/gh-cli``, then
    ``~/.config/gh-cli``.
    """
    explicit = os.getenv(CONFIG_DIR_ENV)
    if explicit:
        return Path(explicit).expanduser()

    xdg_home = os.getenv("XDG_CONFIG_HOME")
    if xdg_home:
        return Path(xdg_home).expanduser() / APP_DIR_NAME

    try:
        home = Path.home()
    except RuntimeError as exc:
        raise ConfigError("no configuration directory: cannot determine the home directory") from exc
    return home / ".config" / APP_DIR_NAME


def default_config_path() -> Path:
    return config_dir() / SETTINGS_FILE_NAME


def load_settings(path: str | Path) -> Settings:
    """Load settings from TOML. A missing file yields the defaults."""
    config_path = Path(path).expanduser()
    if not config_path.exists():
        _LOG.debug("No settings file at %s", config_path)
        return Settings()

    try:
        with config_path.open("rb") as handle:
            raw_payload: Any = tomllib.load(handle)
        return Settings.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in config file {config_path}: {exc}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
