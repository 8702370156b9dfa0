"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

CANONICAL_GREETING: Final[str] = "Hello, World!"


def build_greeting() -> str:
    """Return the canonical greeting string.

    The greeting carries no line terminator; the CLI adapter appends exactly
    one when writing it to standard output.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello, World!'
    """
    return CANONICAL_GREETING


__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
]
