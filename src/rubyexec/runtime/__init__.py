"""Ruby implementation catalog, selection and resolution."""

from .resolver import ImplementationResolver, parse_implementation_list
from .specs import IMPLEMENTATION_SPECS, IMPLEMENTATIONS
from .types import CurrentSelection, ImplementationRequest, TargetInfo

__all__ = [
    "ImplementationResolver",
    "parse_implementation_list",
    "IMPLEMENTATION_SPECS",
    "IMPLEMENTATIONS",
    "CurrentSelection",
    "ImplementationRequest",
    "TargetInfo",
]
