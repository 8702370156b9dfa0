"""Domain layer - pure logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - The canonical greeting
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    build_greeting,
)
from .errors import ConfigurationError

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "build_greeting",
    # Errors
    "ConfigurationError",
]
