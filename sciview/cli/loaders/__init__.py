"""Configuration loaders."""

from .config_file import CONFIG_FILE_NAME, ConfigFileLoader, default_config_path

__all__ = ["CONFIG_FILE_NAME", "ConfigFileLoader", "default_config_path"]
