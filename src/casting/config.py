"""Opt-in features.

The only feature is ``extended-floats``: the casts to and from ``f16`` and
``f128``. It is off by default and stays on once enabled.
"""

from __future__ import annotations

import logging
import threading

from casting.matrix import install_builtin_casts
from casting.traits import REGISTRY

logger = logging.getLogger(__name__)

EXTENDED_FLOATS = "extended-floats"

KNOWN_FEATURES: frozenset[str] = frozenset({EXTENDED_FLOATS})

_enabled: set[str] = set()
_lock = threading.Lock()


def enable(feature: str) -> None:
    """Enable a feature on the default registry. Enabling twice is a no-op."""
    if feature not in KNOWN_FEATURES:
        raise ValueError(f"Unknown feature '{feature}' (known: {', '.join(sorted(KNOWN_FEATURES))})")
    with _lock:
        if feature in _enabled:
            return
        if feature == EXTENDED_FLOATS:
            count = install_builtin_casts(REGISTRY, extended=True)
            logger.info("enabled %s: %d casts installed", feature, count)
        _enabled.add(feature)


def is_enabled(feature: str) -> bool:
    return feature in _enabled


def enabled_features() -> frozenset[str]:
    return frozenset(_enabled)


def enable_extended_floats() -> None:
    """Shorthand for ``enable("extended-floats")``."""
    enable(EXTENDED_FLOATS)
