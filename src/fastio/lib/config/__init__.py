"""Configuration discovery and parsing helpers."""

from fastio.lib.config._paths import config_path, resolve_project_root
from fastio.lib.config.settings import FastioConfig, FormatConfig, PrintConfig, load_config

__all__ = [
    "FastioConfig",
    "FormatConfig",
    "PrintConfig",
    "config_path",
    "load_config",
    "resolve_project_root",
]
