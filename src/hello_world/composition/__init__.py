"""Composition root: which adapters back the greeting command's ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Ports handed to the command through ``ctx.obj``."""

    get_config: GetConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Layered configuration from disk and environment, lib_log_rich logging."""
    return AppServices(get_config=get_config, init_logging=init_logging)


def build_testing() -> AppServices:
    """Empty configuration and no logging runtime; nothing outside the process is touched."""
    from ..adapters.memory import get_config_in_memory, init_logging_in_memory

    return AppServices(get_config=get_config_in_memory, init_logging=init_logging_in_memory)


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "get_config",
    "init_logging",
]
