"""Configuration file parser for rubyexec."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python 3.10

logger = logging.getLogger(__name__)

CONFIG_ENV = "RUBYEXEC_CONFIG"
LOG_LEVEL_ENV = "RUBYEXEC_LOG_LEVEL"
DRY_RUN_ENV = "RUBYEXEC_DRY_RUN"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class LauncherConfig:
    """Complete rubyexec configuration.

    The implementation catalog and the `ruby` selector name are fixed and
    deliberately absent here.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    # Print the command instead of replacing the process
    dry_run: bool = False

    @property
    def log_level(self) -> int:
        """Numeric logging level, WARNING for unknown names."""
        level = logging.getLevelName(self.logging.level.upper())
        return level if isinstance(level, int) else logging.WARNING


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def find_config_file(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Find the configuration file.

    Looks at $RUBYEXEC_CONFIG first, then
    $XDG_CONFIG_HOME/rubyexec/config.toml (~/.config when unset).

    Args:
        environ: Environment to read (defaults to os.environ)

    Returns:
        Path to the config file if found, None otherwise
    """
    env = os.environ if environ is None else environ

    explicit = env.get(CONFIG_ENV)
    if explicit:
        config_file = Path(explicit).expanduser()
        if config_file.is_file():
            return config_file
        logger.debug(f"{CONFIG_ENV} points to missing file {config_file}")
        return None

    config_home = env.get("XDG_CONFIG_HOME") or str(Path("~/.config").expanduser())
    config_file = Path(config_home) / "rubyexec" / "config.toml"
    if config_file.is_file():
        return config_file
    return None


def load_config(environ: Optional[Mapping[str, str]] = None) -> LauncherConfig:
    """Load configuration from file and environment, or use defaults.

    Environment variables override the file:
        RUBYEXEC_LOG_LEVEL - logging level name (e.g. "debug")
        RUBYEXEC_DRY_RUN - "1", "true", "yes" or "on" to enable dry run

    Args:
        environ: Environment to read (defaults to os.environ)

    Returns:
        LauncherConfig with loaded or default configuration
    """
    env = os.environ if environ is None else environ
    config = LauncherConfig()

    config_file = find_config_file(env)
    if config_file:
        try:
            with open(config_file, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            # If TOML parsing fails, keep defaults
            logger.debug(f"Ignoring unreadable config {config_file}: {e}")
            data = {}

        if "logging" in data:
            logging_data = data["logging"]
            config.logging.level = str(logging_data.get("level", config.logging.level))

        if "launcher" in data:
            launcher_data = data["launcher"]
            dry_run = launcher_data.get("dry_run", False)
            if isinstance(dry_run, str):
                dry_run = _parse_bool(dry_run)
            config.dry_run = bool(dry_run)

    if env.get(LOG_LEVEL_ENV):
        config.logging.level = env[LOG_LEVEL_ENV]

    if DRY_RUN_ENV in env:
        config.dry_run = _parse_bool(env[DRY_RUN_ENV])

    return config
