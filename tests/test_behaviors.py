"""Behaviour-layer stories: pure domain function tests."""

from __future__ import annotations

import pytest

from hello_world.domain import behaviors


@pytest.mark.os_agnostic
def test_build_greeting_returns_canonical_text() -> None:
    """build_greeting returns the exact greeting without a line terminator."""
    assert behaviors.build_greeting() == "Hello, World!"


@pytest.mark.os_agnostic
def test_build_greeting_is_stable_across_calls() -> None:
    """Repeated calls return the same constant."""
    assert behaviors.build_greeting() is behaviors.build_greeting()
    assert behaviors.build_greeting() == behaviors.CANONICAL_GREETING


@pytest.mark.os_agnostic
def test_package_root_reexports_greeting() -> None:
    """The public package surface exposes the domain greeting."""
    import hello_world

    assert hello_world.build_greeting() == hello_world.CANONICAL_GREETING
