"""Adapters that touch neither the filesystem nor the logging runtime.

Used by :func:`hello_world.composition.build_testing`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lib_layered_config import Config

if TYPE_CHECKING:
    from hello_world.application.ports import GetConfig, InitLogging


def get_config_in_memory(*, start_dir: str | None = None) -> Config:
    """Empty configuration: every section resolves to its defaults."""
    return Config({}, {})


def init_logging_in_memory(config: Config) -> None:
    """Leave the logging runtime uninitialised."""


if TYPE_CHECKING:
    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = ["get_config_in_memory", "init_logging_in_memory"]
