"""Settings loading."""

from ghcli.config.loader import config_dir, default_config_path, load_settings

__all__ = ["config_dir", "default_config_path", "load_settings"]
