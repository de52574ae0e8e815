"""Pytest configuration and shared fixtures."""

import logging
import os
from pathlib import Path
from typing import Callable, Generator

import pytest


@pytest.fixture
def launcher_dir(tmp_path: Path) -> Path:
    """Create a directory laid out like a Ruby bin directory.

    Creates:
        tmp_path/
            bin/
                rubyexec
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    (bin_dir / "rubyexec").write_text("#!/bin/sh\n")
    return bin_dir


@pytest.fixture
def launcher_path(launcher_dir: Path) -> Path:
    """Path of the launcher inside launcher_dir."""
    return launcher_dir / "rubyexec"


@pytest.fixture
def select_ruby(launcher_dir: Path) -> Callable[[str], Path]:
    """Point the `ruby` symlink beside the launcher at a target.

    The target is stored verbatim, so relative names stay relative.
    """

    def _select(target: str) -> Path:
        link = launcher_dir / "ruby"
        if link.is_symlink() or link.exists():
            link.unlink()
        os.symlink(target, link)
        return link

    return _select


@pytest.fixture
def install_ruby(launcher_dir: Path) -> Callable[[str], Path]:
    """Create an executable implementation stand-in beside the launcher.

    The stand-in prints its $0 and arguments, one per line.
    """

    def _install(name: str) -> Path:
        path = launcher_dir / name
        path.write_text('#!/bin/sh\nprintf "%s\\n" "$0" "$@"\n')
        path.chmod(0o755)
        return path

    return _install


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo setup_logging() so handlers never outlive a captured stream."""
    yield
    logger = logging.getLogger("rubyexec")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
