"""Data types for implementation selection."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class ImplementationRequest:
    """Implementations a script accepts, parsed from the first argument.

    Attributes:
        implementations: Catalog names in priority order, without duplicates
        autopick: Whether to fall back to the first installed implementation
            when the host's current selection is not acceptable
    """

    implementations: Tuple[str, ...]
    autopick: bool = False

    def accepts(self, name: str) -> bool:
        return name in self.implementations


@dataclass(frozen=True)
class CurrentSelection:
    """The implementation the host currently selects via the `ruby` symlink.

    Attributes:
        base_dir: Directory holding the launcher and its sibling entries
        link_path: Path of the `ruby` symlink
        link_target: What the symlink points to (may be relative)
        name: Final path component of link_target
    """

    base_dir: Path
    link_path: Path
    link_target: str
    name: str

    @property
    def target_path(self) -> Path:
        """Link target, joined to base_dir when relative."""
        target = Path(self.link_target)
        if target.is_absolute():
            return target
        return self.base_dir / target


@dataclass
class TargetInfo:
    """The executable chosen to replace the launcher.

    Attributes:
        implementation: Catalog name of the chosen implementation
        path: Path to execute
        source: How it was chosen ("selected" or "autopick")
        display_name: Human-readable implementation name (if known)
    """

    implementation: str
    path: Path
    source: str
    display_name: Optional[str] = None

    def __repr__(self) -> str:
        label = self.display_name or self.implementation
        return f"<TargetInfo {label} @ {self.path} ({self.source})>"
