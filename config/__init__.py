# Path: config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes the settings model and config file helpers.

from .settings import AppSettings, RangeSettings, default_config_path, ensure_config_file, load_settings

__all__ = ["AppSettings", "RangeSettings", "default_config_path", "ensure_config_file", "load_settings"]
