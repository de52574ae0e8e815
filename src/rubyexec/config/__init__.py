"""Configuration management for rubyexec."""

from .parser import (
    LauncherConfig,
    LoggingConfig,
    load_config,
    find_config_file,
)

__all__ = [
    "LauncherConfig",
    "LoggingConfig",
    "load_config",
    "find_config_file",
]
