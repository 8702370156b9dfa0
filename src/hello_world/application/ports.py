"""Ports the greeting command depends on.

Each Protocol's ``__call__`` mirrors one adapter function, so plain
module-level functions satisfy it structurally. ``Config`` is only imported
for type checking; this layer has no runtime infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Return the merged layered configuration.

    Raises ``ConfigurationError`` when a layer cannot be read.
    """

    def __call__(self, *, start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Start the logging runtime from configuration.

    Raises ``ConfigurationError`` when the runtime cannot start at all.
    """

    def __call__(self, config: Config) -> None: ...


__all__ = ["GetConfig", "InitLogging"]
