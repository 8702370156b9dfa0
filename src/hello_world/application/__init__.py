"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocols for configuration and logging
"""

from __future__ import annotations

from .ports import GetConfig, InitLogging

__all__ = ["GetConfig", "InitLogging"]
