"""The built-in cast matrix.

Rows read "source => targets". Every numeric kind casts into every other
numeric kind; ``bool`` and ``char`` only cast into integers, and ``u8`` is
the only kind that casts into ``char``. Pairs touching ``f16`` or ``f128``
are installed only with the extended-floats feature.
"""

from __future__ import annotations

from collections.abc import Iterator

from casting.kinds import INTEGER_KINDS, PrimitiveKind
from casting.numeric import saturate_to_int, wrap_int
from casting.traits import REGISTRY, CastFunction, CastRegistry
from casting.values import Char, exact_value, scalar_type

_NUMERIC_KINDS: tuple[PrimitiveKind, ...] = INTEGER_KINDS + (
    PrimitiveKind.F16,
    PrimitiveKind.F32,
    PrimitiveKind.F64,
    PrimitiveKind.F128,
)

BUILTIN_MATRIX: dict[PrimitiveKind, tuple[PrimitiveKind, ...]] = {
    PrimitiveKind.BOOL: INTEGER_KINDS,
    PrimitiveKind.CHAR: INTEGER_KINDS,
    **{
        source: tuple(k for k in _NUMERIC_KINDS if k is not source)
        + ((PrimitiveKind.CHAR,) if source is PrimitiveKind.U8 else ())
        for source in _NUMERIC_KINDS
    },
}


def builtin_pairs(extended: bool = False) -> Iterator[tuple[PrimitiveKind, PrimitiveKind]]:
    """Yield the (source, target) kind pairs of the built-in matrix.

    With ``extended`` false only the default pairs are produced; with it true
    only the pairs involving an extended float kind.
    """
    for source, targets in BUILTIN_MATRIX.items():
        for target in targets:
            if (source.is_extended or target.is_extended) == extended:
                yield source, target


def converter_for(source: PrimitiveKind, target: PrimitiveKind) -> CastFunction:
    """Return the conversion function for a built-in pair."""
    target_type = scalar_type(target)

    if target is PrimitiveKind.CHAR:
        if source is not PrimitiveKind.U8:
            raise ValueError(f"No built-in cast from '{source.value}' to 'char'")
        return lambda value: Char(chr(value))

    if target.is_integer:
        if source.is_float:
            return lambda value: target_type(saturate_to_int(exact_value(value), target))
        # integers, bool and char all wrap from their exact integer value
        return lambda value: target_type(wrap_int(exact_value(value), target))

    if target.is_float and source.is_numeric:
        # float constructors round the exact source value once
        return lambda value: target_type(exact_value(value))

    raise ValueError(f"No built-in cast from '{source.value}' to '{target.value}'")


def install_builtin_casts(registry: CastRegistry = REGISTRY, extended: bool = False) -> int:
    """Register the built-in pairs on ``registry`` and return how many were added.

    Call once with ``extended=False`` for the default matrix and once more with
    ``extended=True`` to add the extended-float pairs.
    """
    count = 0
    for source, target in builtin_pairs(extended):
        registry.register(scalar_type(source), scalar_type(target), converter_for(source, target))
        count += 1
    return count
