"""Process boundary for the greeting command.

Contents:
    * :func:`main` - Runs the command and turns the outcome into an exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime

from hello_world import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import restore_traceback_state, snapshot_traceback_state
from .root import cli

if TYPE_CHECKING:
    from hello_world.composition import AppServices


def _report(exc: BaseException) -> int:
    """Print *exc* the way lib_cli_exit_tools formats it and return its exit code."""
    verbose = bool(lib_cli_exit_tools.config.traceback)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Write the greeting and return the process exit code.

    The command itself always succeeds. A non-zero code only comes from
    the host (closed stdout, interrupt), reported through lib_cli_exit_tools.

    Args:
        argv: Command-line tokens; None uses ``sys.argv[1:]``. All are ignored.
        services_factory: Returns the AppServices the command runs with.
            Console entry points pass ``build_production``.

    Returns:
        0 after the greeting was written.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from hello_world.composition import build_testing
        >>> main(["anything"], services_factory=build_testing)
        Hello, World!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    previous_state = snapshot_traceback_state()
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
        return 0
    except BaseException as exc:  # noqa: BLE001 - boundary maps every failure to an exit code
        return _report(exc)
    finally:
        restore_traceback_state(previous_state)
        if lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
