"""pytest configuration and shared fixtures."""

import pytest

from casting.matrix import install_builtin_casts
from casting.traits import CastRegistry


@pytest.fixture
def registry():
    """A fresh registry holding only the default built-in matrix."""
    reg = CastRegistry()
    install_builtin_casts(reg)
    return reg


@pytest.fixture
def extended_registry():
    """A fresh registry holding the default matrix plus the extended-float casts."""
    reg = CastRegistry()
    install_builtin_casts(reg)
    install_builtin_casts(reg, extended=True)
    return reg
