"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Invalid configuration section.

    Raised when a configuration section read from the layered sources fails
    validation. Caught at the CLI boundary and mapped to ``EX_CONFIG``.

    Example:
        >>> from hello_world.domain.errors import ConfigurationError
        >>> err = ConfigurationError("[cli] traceback must be a boolean")
        >>> str(err)
        '[cli] traceback must be a boolean'
    """


__all__ = ["ConfigurationError"]
