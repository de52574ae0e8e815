"""Errors raised while selecting and launching an implementation.

Every error is fatal. Each class carries the exit status the command line
entry point terminates with.
"""

from __future__ import annotations

from typing import Optional


class LauncherError(Exception):
    """Base class for all launcher failures."""

    exit_code = 1


class UsageError(LauncherError):
    """Missing arguments or help requested."""

    exit_code = 2


class InvalidSpecError(LauncherError):
    """No catalog implementation left after parsing the implementation list."""

    def __init__(self) -> None:
        super().__init__("No valid implementations found.")


class ResolutionError(LauncherError):
    """A symlink or the launcher's own path could not be resolved."""

    def __init__(self, path: str, strerror: Optional[str], errno: Optional[int] = None):
        self.path = path
        self.errno = errno
        self.strerror = strerror
        super().__init__(f"Failed to resolve {path}: {strerror}")


class PathTooLongError(LauncherError):
    """A resolved path exceeds the maximum accepted length."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Resolved path of {path} is too long.")


class UnsupportedImplementationError(LauncherError):
    """The current selection is not accepted and autopick was not requested."""

    def __init__(self, selected: str):
        self.selected = selected
        super().__init__(
            "Script does not support currently selected Ruby implementation."
        )


class NoUsableImplementationError(LauncherError):
    """Autopick found none of the requested implementations on disk."""

    def __init__(self) -> None:
        super().__init__("No usable implementations found.")


class ExecError(LauncherError):
    """Replacing the process with the target failed."""

    def __init__(self, path: str, strerror: Optional[str], errno: Optional[int] = None):
        self.path = path
        self.errno = errno
        self.strerror = strerror
        super().__init__(f"{path} failed to execute: {strerror}")
