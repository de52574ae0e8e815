"""Pick a Ruby implementation and replace the current process with it.

Usage:
    rubyexec impl[,impl...][,--autopick] [args...]

The launcher lives next to a `ruby` symlink that names the host's current
implementation. If the script accepts that implementation it runs under it;
otherwise, with `--autopick`, the first listed implementation installed
beside the launcher is used.
"""

from __future__ import annotations

import logging
import os
import shlex
import sys
from dataclasses import dataclass
from typing import List, NoReturn, Sequence, Tuple

from .errors import ExecError, UsageError
from .runtime import ImplementationResolver, ImplementationRequest, TargetInfo
from .runtime import parse_implementation_list

logger = logging.getLogger(__name__)

HELP_FLAGS = ("-h", "--help")


@dataclass(frozen=True)
class Invocation:
    """A parsed launcher command line."""

    program: str
    request: ImplementationRequest
    forwarded: List[str]


def parse_args(argv: Sequence[str]) -> Invocation:
    """Parse the launcher's full argument list (argv[0] included).

    Raises:
        UsageError: Too few arguments, or help requested
        InvalidSpecError: No known implementation in the list
    """
    if len(argv) < 2:
        raise UsageError("Invalid number of arguments.")

    program = argv[0]
    if argv[1] in HELP_FLAGS:
        raise UsageError(f"Usage: {program} impl,... [args]")

    return Invocation(
        program=program,
        request=parse_implementation_list(argv[1]),
        forwarded=list(argv[2:]),
    )


def build_argv(target: TargetInfo, forwarded: Sequence[str]) -> List[str]:
    """New argument vector: the target path followed by forwarded arguments."""
    return [str(target.path), *forwarded]


def exec_target(target: TargetInfo, argv: List[str]) -> NoReturn:
    """Replace the current process with the target.

    Never returns on success.

    Raises:
        ExecError: If the process could not be replaced
    """
    path = str(target.path)
    logger.debug(f"Executing {shlex.join(argv)}")

    # execv discards anything still sitting in Python's buffers
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        os.execv(path, argv)
    except OSError as e:
        raise ExecError(path, e.strerror or str(e), e.errno) from e

    # os.execv only returns when patched out
    raise ExecError(path, "execv returned")


def resolve_target(argv: Sequence[str]) -> Tuple[TargetInfo, List[str]]:
    """Run every check and return the chosen target and its argv."""
    invocation = parse_args(argv)
    resolver = ImplementationResolver(invocation.program)
    target = resolver.select(invocation.request)
    return target, build_argv(target, invocation.forwarded)


def dispatch(argv: Sequence[str], dry_run: bool = False) -> int:
    """Select an implementation for argv and hand control to it.

    Args:
        argv: Full launcher argument list, argv[0] being the launcher path
        dry_run: Print the command instead of executing it

    Returns:
        0 after a dry run; otherwise does not return
    """
    target, new_argv = resolve_target(argv)

    if dry_run:
        print(shlex.join(new_argv))
        return 0

    exec_target(target, new_argv)
