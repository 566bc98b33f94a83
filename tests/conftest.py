"""Shared fixtures for libaccent tests."""

from __future__ import annotations

import pytest

from libaccent.strategies import ExtensionStrategy, PortalStrategy, ThemeNameStrategy
from tests.helpers import argv


@pytest.fixture
def portal_cmd() -> tuple[str, ...]:
    return argv(PortalStrategy())


@pytest.fixture
def theme_cmd() -> tuple[str, ...]:
    return argv(ThemeNameStrategy())


@pytest.fixture
def extension_cmd() -> tuple[str, ...]:
    return argv(ExtensionStrategy())
