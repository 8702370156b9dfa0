"""Command-line interface: the greeting command and its process boundary.

Contents:
    * :func:`.root.cli` - The greeting command
    * :func:`.main.main` - Exit-code boundary used by the entry points
    * :mod:`.context` - [cli] settings and traceback state
"""

from __future__ import annotations

from .constants import IGNORED_ARGUMENTS_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CliSettings,
    TracebackState,
    apply_traceback_preferences,
    load_cli_settings,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .main import main
from .root import cli

__all__ = [
    "IGNORED_ARGUMENTS_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "CliSettings",
    "TracebackState",
    "apply_traceback_preferences",
    "load_cli_settings",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "cli",
    "main",
]
