"""
Shared pytest fixtures for manymap tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import typing as _typing

import pytest as _pytest

import manymap.config as config
import manymap.hashing as hashing
import manymap.maps as maps

# =============================================================================
# Environment isolation
# =============================================================================


@_pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: _pytest.MonkeyPatch) -> _typing.Iterator[None]:
    """Clear MANYMAP_* env vars and the cached settings around every test."""
    for key in list(_os.environ):
        if key.startswith("MANYMAP_"):
            monkeypatch.delenv(key)
    config.reset_settings()
    yield
    config.reset_settings()


# =============================================================================
# Map fixtures
# =============================================================================


@_pytest.fixture
def hasher() -> hashing.StructuralHasher:
    """Default sha256 hasher."""
    return hashing.StructuralHasher()


@_pytest.fixture
def palette() -> maps.ListValueMap[str, str]:
    """ListValueMap with a color entry and a position entry."""
    return maps.ListValueMap(
        [
            ("color", ["red", "green", "blue"]),
            ("position", ["top", "right", "bottom", "left"]),
        ]
    )


@_pytest.fixture
def grid() -> maps.CompositeKeyMap[str, str]:
    """CompositeKeyMap with two row/column entries."""
    return maps.CompositeKeyMap(
        [
            (["row1", "col1"], "LiLei"),
            (["row2", "col2"], "HanMeimei"),
        ]
    )
