"""Static package metadata shared by the CLI, configuration, and logging layers.

Contents:
    * Distribution identifiers (:data:`name`, :data:`version`, :data:`shell_command`).
    * Identifiers handed to ``lib_layered_config`` for platform path discovery.
"""

from __future__ import annotations

from typing import Final

#: Distribution name declared in ``pyproject.toml``.
name: Final[str] = "hello_world"
#: One-line summary used as the command help text.
title: Final[str] = "Print the canonical greeting and exit successfully"
#: Version string kept in sync with ``pyproject.toml``.
version: Final[str] = "1.0.0"
#: Console script installed by the wheel.
shell_command: Final[str] = "hello-world"

#: Vendor, application, and slug used to locate layered configuration files.
LAYEREDCONF_VENDOR: Final[str] = "bitranox"
LAYEREDCONF_APP: Final[str] = "Hello World"
LAYEREDCONF_SLUG: Final[str] = "hello-world"

__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "name",
    "shell_command",
    "title",
    "version",
]
