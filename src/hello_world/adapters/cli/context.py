"""CLI settings and traceback state management."""

from __future__ import annotations

from collections.abc import Mapping

import lib_cli_exit_tools
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from hello_world.domain.errors import ConfigurationError

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


class CliSettings(BaseModel):
    """Pydantic model for the [cli] config section.

    Example:
        >>> CliSettings().traceback
        False
        >>> CliSettings.model_validate({"traceback": True}).traceback
        True
    """

    traceback: bool = False

    model_config = ConfigDict(extra="ignore", frozen=True)


def load_cli_settings(config: Config) -> CliSettings:
    """Parse the [cli] section of the layered configuration.

    Args:
        config: Loaded layered configuration.

    Returns:
        Validated CLI settings; defaults when the section is absent.

    Raises:
        ConfigurationError: If the section is not a table or fails validation.

    Example:
        >>> load_cli_settings(Config({}, {})).traceback
        False
    """
    raw: object = config.get("cli", default={})
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[cli] must be a table, got {type(raw).__name__}")
    try:
        return CliSettings.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [cli] section: {exc}") from exc


def apply_traceback_preferences(enabled: bool) -> None:
    """Synchronise shared traceback flags with the requested preference.

    Args:
        enabled: ``True`` enables full tracebacks with colour.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback configuration for later restoration.

    Example:
        >>> state = snapshot_traceback_state()
        >>> isinstance(state, tuple) and len(state) == 2
        True
    """
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply a previously captured traceback configuration.

    Args:
        state: Tuple from :func:`snapshot_traceback_state`.

    Example:
        >>> original = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> restore_traceback_state(original)
        >>> lib_cli_exit_tools.config.traceback == original[0]
        True
    """
    lib_cli_exit_tools.config.traceback = state[0]
    lib_cli_exit_tools.config.traceback_force_color = state[1]


__all__ = [
    "CliSettings",
    "TracebackState",
    "apply_traceback_preferences",
    "load_cli_settings",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
