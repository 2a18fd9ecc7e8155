"""Casting - lossy numeric conversions as a cast-from / cast-into capability pair."""

from casting.kinds import PrimitiveKind, type_range
from casting.matrix import install_builtin_casts
from casting.traits import (
    REGISTRY,
    CastError,
    CastFrom,
    CastInto,
    CastRegistry,
    cast_from,
    cast_impl,
    cast_into,
)
from casting.values import (
    F16,
    F32,
    F64,
    F128,
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    Char,
    ISize,
    Scalar,
    USize,
)

install_builtin_casts(REGISTRY)

from casting.config import enable_extended_floats  # noqa: E402

__all__ = [
    # Capabilities
    "CastFrom",
    "CastInto",
    "cast_from",
    "cast_into",
    "cast_impl",
    "CastError",
    "CastRegistry",
    "REGISTRY",
    "install_builtin_casts",
    "enable_extended_floats",
    # Kinds
    "PrimitiveKind",
    "type_range",
    # Values
    "Scalar",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USize",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISize",
    "F16",
    "F32",
    "F64",
    "F128",
    "Char",
]

__version__ = "0.1.0"
