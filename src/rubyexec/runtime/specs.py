"""Declarative catalog of known Ruby implementations.

This is DATA, not code. Supporting a new implementation means adding its
spec here and shipping a new release.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# Name of the sibling symlink that tracks the host's default implementation
SELECTOR_NAME = "ruby"

# Reserved token in the implementation list that enables fallback search
AUTOPICK_TOKEN = "--autopick"

# Longest resolved path accepted from a symlink lookup
MAX_PATH_SIZE = 1024


@dataclass(frozen=True)
class ImplementationSpec:
    """A known Ruby implementation."""
    name: str
    display_name: str
    version: Optional[str] = None  # Language version, None for alt runtimes


# Version-ordered. Order only matters for display; fallback priority comes
# from the caller's implementation list.
IMPLEMENTATION_SPECS: Dict[str, ImplementationSpec] = {
    spec.name: spec
    for spec in (
        ImplementationSpec("ruby18", "Ruby 1.8", "1.8"),
        ImplementationSpec("ruby19", "Ruby 1.9", "1.9"),
        ImplementationSpec("ruby20", "Ruby 2.0", "2.0"),
        ImplementationSpec("ruby21", "Ruby 2.1", "2.1"),
        ImplementationSpec("ruby22", "Ruby 2.2", "2.2"),
        ImplementationSpec("ruby23", "Ruby 2.3", "2.3"),
        ImplementationSpec("ruby24", "Ruby 2.4", "2.4"),
        ImplementationSpec("ruby25", "Ruby 2.5", "2.5"),
        ImplementationSpec("ruby26", "Ruby 2.6", "2.6"),
        ImplementationSpec("ruby27", "Ruby 2.7", "2.7"),
        ImplementationSpec("ruby30", "Ruby 3.0", "3.0"),
        ImplementationSpec("ruby31", "Ruby 3.1", "3.1"),
        ImplementationSpec("ruby32", "Ruby 3.2", "3.2"),
        ImplementationSpec("jruby", "JRuby"),
        ImplementationSpec("rbx", "Rubinius"),
    )
}

IMPLEMENTATIONS: Tuple[str, ...] = tuple(IMPLEMENTATION_SPECS)


def is_known_implementation(name: str) -> bool:
    """Check whether a name is in the implementation catalog."""
    return name in IMPLEMENTATION_SPECS


def get_implementation_spec(name: str) -> ImplementationSpec:
    """Get the catalog entry for an implementation.

    Args:
        name: Implementation name (e.g., "ruby31", "jruby")

    Returns:
        Implementation specification

    Raises:
        ValueError: If the implementation is not in the catalog
    """
    if name not in IMPLEMENTATION_SPECS:
        supported = ", ".join(IMPLEMENTATIONS)
        raise ValueError(
            f"Implementation '{name}' not supported. "
            f"Supported implementations: {supported}"
        )

    return IMPLEMENTATION_SPECS[name]
