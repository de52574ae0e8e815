"""Resolve the host's current Ruby selection and choose a target."""

import logging
import os
from pathlib import Path
from typing import List, Union

from ..errors import (
    InvalidSpecError,
    NoUsableImplementationError,
    PathTooLongError,
    ResolutionError,
    UnsupportedImplementationError,
)
from .specs import (
    AUTOPICK_TOKEN,
    MAX_PATH_SIZE,
    SELECTOR_NAME,
    get_implementation_spec,
    is_known_implementation,
)
from .types import CurrentSelection, ImplementationRequest, TargetInfo

logger = logging.getLogger(__name__)


def parse_implementation_list(comma_separated: str) -> ImplementationRequest:
    """Parse a comma-separated implementation list.

    Unknown names are dropped without complaint. Duplicates keep their
    first position, which defines fallback priority.

    Args:
        comma_separated: e.g. "ruby27,--autopick,ruby31"

    Returns:
        ImplementationRequest with the accepted names and autopick flag

    Raises:
        InvalidSpecError: If no known implementation remains
    """
    implementations: List[str] = []
    autopick = False

    for token in comma_separated.split(","):
        if token == AUTOPICK_TOKEN:
            autopick = True
        elif token in implementations:
            continue
        elif is_known_implementation(token):
            implementations.append(token)
        elif token:
            logger.debug(f"Ignoring unknown implementation '{token}'")

    if not implementations:
        raise InvalidSpecError()

    return ImplementationRequest(implementations=tuple(implementations), autopick=autopick)


def _check_length(resolved: str, path: str) -> str:
    if len(os.fsencode(resolved)) >= MAX_PATH_SIZE:
        raise PathTooLongError(path)
    return resolved


class ImplementationResolver:
    """Chooses which implementation binary replaces the launcher.

    Everything is looked up relative to the directory the launcher really
    lives in: the `ruby` symlink there names the host's current selection,
    and siblings named after catalog entries are the autopick candidates.
    """

    def __init__(self, launcher_path: Union[str, Path]):
        """Initialize resolver.

        Args:
            launcher_path: Path the launcher was invoked as (usually argv[0])
        """
        self.launcher_path = Path(launcher_path)

    def resolve_base_dir(self) -> Path:
        """Directory containing the launcher, with all symlinks followed.

        Raises:
            ResolutionError: If the launcher path cannot be resolved
            PathTooLongError: If the resolved path is too long
        """
        path = str(self.launcher_path)
        try:
            resolved = self.launcher_path.resolve(strict=True)
        except OSError as e:
            raise ResolutionError(path, e.strerror or str(e), e.errno) from e
        except RuntimeError as e:
            # Symlink loop on interpreters that don't report ELOOP
            raise ResolutionError(path, str(e)) from e

        _check_length(str(resolved), path)
        return resolved.parent

    def current_selection(self) -> CurrentSelection:
        """Read the `ruby` symlink beside the launcher.

        Raises:
            ResolutionError: If the launcher or the symlink cannot be resolved
            PathTooLongError: If either resolved path is too long
        """
        base_dir = self.resolve_base_dir()
        link_path = base_dir / SELECTOR_NAME

        try:
            link_target = os.readlink(link_path)
        except OSError as e:
            raise ResolutionError(str(link_path), e.strerror or str(e), e.errno) from e

        _check_length(link_target, str(link_path))
        name = os.path.basename(link_target.rstrip("/")) or link_target

        logger.debug(f"Base directory: {base_dir}")
        logger.debug(f"{link_path} -> {link_target} (selected: {name})")

        return CurrentSelection(
            base_dir=base_dir,
            link_path=link_path,
            link_target=link_target,
            name=name,
        )

    def select(self, request: ImplementationRequest) -> TargetInfo:
        """Choose the executable for a request.

        Priority:
        1. The host's current selection, if the request accepts it
        2. With autopick, the first requested implementation present on disk

        Raises:
            UnsupportedImplementationError: Selection not accepted, no autopick
            NoUsableImplementationError: Autopick found nothing on disk
        """
        selection = self.current_selection()

        if request.accepts(selection.name):
            return self._make_target(selection.name, selection.target_path, "selected")

        if not request.autopick:
            logger.debug(
                f"'{selection.name}' not in {', '.join(request.implementations)}"
            )
            raise UnsupportedImplementationError(selection.name)

        return self._autopick(selection.base_dir, request)

    def _autopick(self, base_dir: Path, request: ImplementationRequest) -> TargetInfo:
        """Return the first requested implementation that exists in base_dir."""
        for name in request.implementations:
            candidate = base_dir / name
            if candidate.exists():
                return self._make_target(name, candidate, "autopick")
            logger.debug(f"Autopick candidate {candidate} not found")

        raise NoUsableImplementationError()

    def _make_target(self, name: str, path: Path, source: str) -> TargetInfo:
        spec = get_implementation_spec(name)
        target = TargetInfo(
            implementation=name,
            path=path,
            source=source,
            display_name=spec.display_name,
        )
        logger.debug(f"Chose {target!r}")
        return target
