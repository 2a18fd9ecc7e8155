"""The cast-from / cast-into capability pair.

A target type declares how it is built from a source type by registering a
conversion function for the ``(source, target)`` pair::

    @cast_impl(Celsius, F64)
    def _celsius_to_f64(value: Celsius) -> F64:
        return F64(value.degrees)

``cast_from(F64, c)`` (or ``F64.cast_from(c)`` on types that mix in
``CastFrom``) then looks the pair up and applies it. ``cast_into(c, F64)`` is
the same call seen from the source side: it is defined once, as a forward to
``cast_from``, and can never be implemented separately.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

CastFunction = Callable[[Any], Any]


class CastError(TypeError):
    """No conversion is registered for a (source, target) pair."""

    def __init__(self, source: type, target: type) -> None:
        self.source = source
        self.target = target
        super().__init__(
            f"No cast from '{_type_name(source)}' to '{_type_name(target)}'"
        )


def _type_name(tp: type) -> str:
    kind = getattr(tp, "kind", None)
    if kind is not None and hasattr(kind, "value"):
        return kind.value
    return tp.__qualname__


class CastRegistry:
    """Registry of cast implementations keyed by (source type, target type)."""

    def __init__(self) -> None:
        self._impls: dict[tuple[type, type], CastFunction] = {}
        self._lock = threading.Lock()

    def register(self, source: type, target: type, func: CastFunction) -> None:
        """Register the conversion from ``source`` to ``target``.

        Every type already casts from itself, and each pair takes exactly one
        implementation.
        """
        if issubclass(source, target):
            raise ValueError(f"Identity cast for '{_type_name(source)}' is implicit")
        with self._lock:
            if (source, target) in self._impls:
                raise ValueError(
                    f"Cast from '{_type_name(source)}' to '{_type_name(target)}' is already defined"
                )
            self._impls[(source, target)] = func
        logger.debug("registered cast %s -> %s", _type_name(source), _type_name(target))

    def lookup(self, source: type, target: type) -> CastFunction | None:
        """Find the conversion for a pair, trying the source's base classes in MRO order."""
        for base in source.__mro__:
            func = self._impls.get((base, target))
            if func is not None:
                return func
        return None

    def supports(self, source: type, target: type) -> bool:
        """Check whether a value of ``source`` can be cast to ``target``."""
        return issubclass(source, target) or self.lookup(source, target) is not None

    def targets_for(self, source: type) -> list[type]:
        """Types directly registered as targets of ``source``."""
        return [t for (s, t) in self._impls if s is source]

    def sources_for(self, target: type) -> list[type]:
        """Types directly registered as sources of ``target``."""
        return [s for (s, t) in self._impls if t is target]

    def pairs(self) -> Iterator[tuple[type, type]]:
        """Iterate over all registered (source, target) pairs."""
        return iter(list(self._impls))

    def __contains__(self, pair: object) -> bool:
        return pair in self._impls

    def __len__(self) -> int:
        return len(self._impls)


# Default registry, populated with the built-in matrix when the package is imported
REGISTRY = CastRegistry()


def cast_impl(
    source: type, target: type, *, registry: CastRegistry = REGISTRY
) -> Callable[[CastFunction], CastFunction]:
    """Decorator registering a function as the cast from ``source`` to ``target``."""

    def decorator(func: CastFunction) -> CastFunction:
        registry.register(source, target, func)
        return func

    return decorator


def cast_from(target: type[U], value: Any, *, registry: CastRegistry = REGISTRY) -> U:
    """Build a ``target`` from ``value`` with the registered cast."""
    source = type(value)
    if issubclass(source, target):
        return value
    func = registry.lookup(source, target)
    if func is None:
        raise CastError(source, target)
    return func(value)


def cast_into(value: Any, target: type[U], *, registry: CastRegistry = REGISTRY) -> U:
    """Cast ``value`` into ``target``; always the reverse of ``cast_from``."""
    return cast_from(target, value, registry=registry)


class CastFrom:
    """Mixin giving a target type the ``cast_from`` class method."""

    __slots__ = ()

    @classmethod
    def cast_from(cls: type[T], value: Any) -> T:
        return cast_from(cls, value)


class CastInto:
    """Mixin giving a source type the ``cast_into`` method.

    Subclasses cannot override ``cast_into``; register a cast on the target
    type instead.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "cast_into" in cls.__dict__:
            raise TypeError(
                f"{cls.__qualname__} must not define cast_into; "
                "register a cast on the target type with cast_impl instead"
            )

    def cast_into(self, target: type[U]) -> U:
        return cast_into(self, target)
