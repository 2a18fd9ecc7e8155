"""Primitive kinds supported by the cast matrix."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum

# Width of the pointer-sized kinds on the running interpreter
POINTER_BITS = struct.calcsize("P") * 8

# Largest Unicode scalar value
MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True)
class FloatFormat:
    """IEEE 754 binary interchange format.

    ``precision`` counts the significand bits including the implicit leading
    bit; ``emax`` is the largest unbiased exponent of a normal number.
    """

    name: str
    precision: int
    emax: int

    @property
    def emin(self) -> int:
        """Exponent of the smallest normal number."""
        return 1 - self.emax

    @property
    def fits_in_double(self) -> bool:
        """Whether every value of this format is exactly a Python float."""
        return self.precision <= 53 and self.emax <= 1023


FLOAT16 = FloatFormat("binary16", precision=11, emax=15)
FLOAT32 = FloatFormat("binary32", precision=24, emax=127)
FLOAT64 = FloatFormat("binary64", precision=53, emax=1023)
FLOAT128 = FloatFormat("binary128", precision=113, emax=16383)


class PrimitiveKind(Enum):
    """Built-in primitive kinds that take part in casts."""

    BOOL = "bool"
    CHAR = "char"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    ISIZE = "isize"
    F16 = "f16"
    F32 = "f32"
    F64 = "f64"
    F128 = "f128"

    @property
    def bits(self) -> int:
        """Return the width in bits for this kind."""
        if self in (PrimitiveKind.USIZE, PrimitiveKind.ISIZE):
            return POINTER_BITS
        widths = {
            PrimitiveKind.BOOL: 8,
            PrimitiveKind.CHAR: 32,  # Unicode scalar value
            PrimitiveKind.U8: 8,
            PrimitiveKind.U16: 16,
            PrimitiveKind.U32: 32,
            PrimitiveKind.U64: 64,
            PrimitiveKind.U128: 128,
            PrimitiveKind.I8: 8,
            PrimitiveKind.I16: 16,
            PrimitiveKind.I32: 32,
            PrimitiveKind.I64: 64,
            PrimitiveKind.I128: 128,
            PrimitiveKind.F16: 16,
            PrimitiveKind.F32: 32,
            PrimitiveKind.F64: 64,
            PrimitiveKind.F128: 128,
        }
        return widths[self]

    @property
    def size_bytes(self) -> int:
        """Return the size in bytes for this kind."""
        return self.bits // 8

    @property
    def is_integer(self) -> bool:
        return self in INTEGER_KINDS

    @property
    def is_signed(self) -> bool:
        """Signed integers and all floats carry a sign."""
        return self in SIGNED_KINDS or self.is_float

    @property
    def is_float(self) -> bool:
        return self in FLOAT_KINDS

    @property
    def is_extended(self) -> bool:
        """Whether this kind is only wired up under the extended-floats feature."""
        return self in EXTENDED_FLOAT_KINDS

    @property
    def is_numeric(self) -> bool:
        return self.is_integer or self.is_float

    @property
    def float_format(self) -> FloatFormat:
        """Return the IEEE 754 format of a float kind."""
        formats = {
            PrimitiveKind.F16: FLOAT16,
            PrimitiveKind.F32: FLOAT32,
            PrimitiveKind.F64: FLOAT64,
            PrimitiveKind.F128: FLOAT128,
        }
        if self not in formats:
            raise ValueError(f"'{self.value}' is not a float kind")
        return formats[self]


UNSIGNED_KINDS: tuple[PrimitiveKind, ...] = (
    PrimitiveKind.U8,
    PrimitiveKind.U16,
    PrimitiveKind.U32,
    PrimitiveKind.U64,
    PrimitiveKind.U128,
    PrimitiveKind.USIZE,
)

SIGNED_KINDS: tuple[PrimitiveKind, ...] = (
    PrimitiveKind.I8,
    PrimitiveKind.I16,
    PrimitiveKind.I32,
    PrimitiveKind.I64,
    PrimitiveKind.I128,
    PrimitiveKind.ISIZE,
)

INTEGER_KINDS: tuple[PrimitiveKind, ...] = UNSIGNED_KINDS + SIGNED_KINDS

FLOAT_KINDS: tuple[PrimitiveKind, ...] = (
    PrimitiveKind.F16,
    PrimitiveKind.F32,
    PrimitiveKind.F64,
    PrimitiveKind.F128,
)

EXTENDED_FLOAT_KINDS: tuple[PrimitiveKind, ...] = (PrimitiveKind.F16, PrimitiveKind.F128)

# Mapping from kind name strings to PrimitiveKind enum values
PRIMITIVE_KIND_NAMES: dict[str, PrimitiveKind] = {pk.value: pk for pk in PrimitiveKind}


def kind_by_name(name: str) -> PrimitiveKind:
    """Look up a kind by its short name, raising if unknown."""
    kind = PRIMITIVE_KIND_NAMES.get(name)
    if kind is None:
        raise ValueError(f"Unknown primitive kind '{name}'")
    return kind


def type_range(kind: PrimitiveKind) -> tuple[int, int]:
    """Return the inclusive (min, max) of an integer-like kind."""
    if kind is PrimitiveKind.BOOL:
        return 0, 1
    if kind is PrimitiveKind.CHAR:
        return 0, MAX_CODE_POINT
    if kind in UNSIGNED_KINDS:
        return 0, (1 << kind.bits) - 1
    if kind in SIGNED_KINDS:
        half = 1 << (kind.bits - 1)
        return -half, half - 1
    raise ValueError(f"'{kind.value}' has no integer range")
