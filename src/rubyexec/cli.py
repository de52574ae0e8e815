"""Command line entry point for rubyexec."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .config import LauncherConfig, load_config
from .dispatcher import dispatch
from .errors import LauncherError

PROGRAM_NAME = "rubyexec"


def setup_logging(config: LauncherConfig) -> None:
    """Send log records to stderr, prefixed like every other message."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(f"{PROGRAM_NAME}: %(levelname)s: %(message)s"))

    root = logging.getLogger(PROGRAM_NAME)
    root.handlers[:] = [handler]
    root.setLevel(config.log_level)
    root.propagate = False


def fail(message: str, exit_code: int) -> int:
    print(f"{PROGRAM_NAME}: {message}", file=sys.stderr)
    return exit_code


def run(argv: Sequence[str], config: Optional[LauncherConfig] = None) -> int:
    """Launch for argv and return the exit status on failure or dry run."""
    if config is None:
        config = load_config()

    try:
        return dispatch(argv, dry_run=config.dry_run)
    except LauncherError as e:
        return fail(str(e), e.exit_code)
    except MemoryError as e:
        return fail(f"Unable to allocate memory: {e}", 1)


def main() -> None:
    """Run the launcher with the process's own arguments.

    Example:
        #!/usr/bin/rubyexec ruby31,ruby32,--autopick
    """
    config = load_config()
    setup_logging(config)
    sys.exit(run(sys.argv, config))

