"""Shared CLI constants.

Contents:
    * :data:`IGNORED_ARGUMENTS_CONTEXT_SETTINGS` - Click settings that accept and ignore any argument.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Character budget for truncated tracebacks.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Character budget for verbose tracebacks.
"""

from __future__ import annotations

from typing import Any, Final

#: Every token on the command line is accepted and ignored.
#: help_option_names: No -h/--help, so those tokens are ignored as well
#: ignore_unknown_options: Option-looking tokens are treated as plain arguments
#: allow_extra_args: Surplus positional arguments are allowed
IGNORED_ARGUMENTS_CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    "help_option_names": [],
    "ignore_unknown_options": True,
    "allow_extra_args": True,
}

#: Character budget used when printing truncated tracebacks.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget used when verbose tracebacks are enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "IGNORED_ARGUMENTS_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
