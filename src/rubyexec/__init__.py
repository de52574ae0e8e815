"""Launch a script under a Ruby implementation it declares support for."""

from .dispatcher import dispatch, parse_args
from .errors import LauncherError
from .runtime import ImplementationResolver, parse_implementation_list

__version__ = "0.1.0"

__all__ = [
    "dispatch",
    "parse_args",
    "LauncherError",
    "ImplementationResolver",
    "parse_implementation_list",
]
