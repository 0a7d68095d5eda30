"""Shared fixtures for jsarray tests."""

import pytest

from jsarray import ArrayConfig, JSArray, config, set_config


@pytest.fixture(autouse=True)
def restore_config():
    """Every test starts from, and leaves behind, the current configuration."""
    previous = config()
    yield
    set_config(previous)


@pytest.fixture
def zero_based():
    """Switch the library to JavaScript-exact 0-based positions."""
    set_config(ArrayConfig(index_base=0))


@pytest.fixture
def numbers():
    return JSArray(1, 2, 3, 4, 5)


@pytest.fixture
def letters():
    return JSArray("a", "b", "c", "d", "e")
