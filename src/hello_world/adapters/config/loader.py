"""Configuration loader with caching."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import Config, ConfigError, read_config

from hello_world import __init__conf__
from hello_world.domain.errors import ConfigurationError


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path to the bundled default configuration file.

    Returns:
        Absolute path to defaultconfig.toml.

    Example:
        >>> path = get_default_config_path()
        >>> path.name
        'defaultconfig.toml'
        >>> path.exists()
        True
    """
    return Path(__file__).parent / "defaultconfig.toml"


# Loaded once per start_dir and kept for the lifetime of the short-lived process.
@lru_cache(maxsize=4)
def _get_config_impl(*, start_dir: str | None = None) -> Config:
    try:
        return read_config(
            vendor=__init__conf__.LAYEREDCONF_VENDOR,
            app=__init__conf__.LAYEREDCONF_APP,
            slug=__init__conf__.LAYEREDCONF_SLUG,
            default_file=get_default_config_path(),
            start_dir=start_dir,
        )
    except ConfigError as exc:
        raise ConfigurationError(f"Cannot read layered configuration: {exc}") from exc


def _get_config(*, start_dir: str | None = None) -> Config:
    """Load layered configuration with application defaults.

    Sources are merged in precedence order:
    defaults → app → host → user → dotenv → env

    The vendor, app, and slug identifiers determine platform-specific paths:
    - Linux: XDG directories with slug
    - macOS: Library/Application Support with vendor/app
    - Windows: ProgramData/AppData with vendor/app

    Args:
        start_dir: Optional directory that seeds .env discovery. Defaults to
            the current working directory when None.

    Returns:
        Immutable configuration object with provenance tracking.

    Raises:
        ConfigurationError: If a layer cannot be read or parsed.

    Example:
        >>> config = get_config()
        >>> isinstance(config.as_dict(), dict)
        True
        >>> config.get("nonexistent", default="fallback")
        'fallback'
    """
    return _get_config_impl(start_dir=start_dir)


def _cache_clear() -> None:
    """Clear the internal configuration cache.

    Forces a fresh read on the next ``get_config()`` call.

    Example:
        >>> get_config.cache_clear()
    """
    _get_config_impl.cache_clear()


# lru_cache's cache_clear is invisible to type checkers once the wrapper is
# cast to a Protocol, so it is attached explicitly.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
]
