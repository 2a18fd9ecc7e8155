"""Python value types for the primitive kinds.

Integers and the binary16/32/64 floats subclass ``int`` and ``float`` so they
behave like ordinary numbers; arithmetic on them returns plain Python numbers,
and getting back to a fixed-width kind is always an explicit cast. Booleans
use the builtin ``bool``.
"""

from __future__ import annotations

import math
from decimal import Context, Decimal
from fractions import Fraction
from typing import Any, ClassVar

from casting.kinds import FLOAT128, PrimitiveKind, type_range
from casting.numeric import round_to_format
from casting.traits import CastFrom, CastInto

# kind -> Python type, filled in as the scalar classes are defined
_SCALAR_TYPES: dict[PrimitiveKind, type] = {PrimitiveKind.BOOL: bool}

# Enough significant digits to round-trip any binary128 value
_F128_DIGITS = Context(prec=36)


class Scalar(CastFrom, CastInto):
    """Base for the fixed-width value types."""

    __slots__ = ()

    kind: ClassVar[PrimitiveKind]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "kind" in cls.__dict__:
            _SCALAR_TYPES[cls.kind] = cls

    def literal(self) -> str:
        """Render the value as a suffixed literal, e.g. ``44u8``."""
        raise NotImplementedError


def _check_number(kind: PrimitiveKind, value: Any, allowed: tuple[type, ...]) -> None:
    if isinstance(value, bool) or not isinstance(value, allowed):
        raise TypeError(f"{kind.value} cannot be built from {type(value).__name__}")


def _float_text(value: float | Fraction, kind: PrimitiveKind) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return f"nan as {kind.value}"
        if math.isinf(value):
            return f"{'-' if value < 0 else ''}inf as {kind.value}"
        return f"{value!r}{kind.value}"
    text = str(_F128_DIGITS.divide(Decimal(value.numerator), Decimal(value.denominator)))
    return f"{text}{kind.value}"


class IntScalar(int, Scalar):
    """Fixed-width integer; construction rejects values outside the kind's range."""

    __slots__ = ()

    def __new__(cls, value: int = 0) -> IntScalar:
        _check_number(cls.kind, value, (int,))
        min_val, max_val = type_range(cls.kind)
        if value < min_val or value > max_val:
            raise ValueError(
                f"Value {int(value)} out of range for {cls.kind.value} ({min_val}..{max_val})"
            )
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return int.__repr__(self)

    def literal(self) -> str:
        return f"{int(self)}{self.kind.value}"


class U8(IntScalar):
    __slots__ = ()
    kind = PrimitiveKind.U8


class U16(IntScalar):
    __slots__ = ()
    kind = PrimitiveKind.U16


class U32(IntScalar):
    __slots__ = ()
    kind = PrimitiveKind.U32


class U64(IntScalar):
    __slots__ = ()
    kind = PrimitiveKind.U64


class U128(IntScalar):
    __slots__ = ()
    kind = PrimitiveKind.U128


class USize(IntScalar):
    """Pointer-sized unsigned integer."""

    __slots__ = ()
    kind = PrimitiveKind.USIZE


class I8(IntScalar):
    __slots__ = ()
    kind = PrimitiveKind.I8


class I16(IntScalar):
    __slots__ = ()
    kind = PrimitiveKind.I16


class I32(IntScalar):
    __slots__ = ()
    kind = PrimitiveKind.I32


class I64(IntScalar):
    __slots__ = ()
    kind = PrimitiveKind.I64


class I128(IntScalar):
    __slots__ = ()
    kind = PrimitiveKind.I128


class ISize(IntScalar):
    """Pointer-sized signed integer."""

    __slots__ = ()
    kind = PrimitiveKind.ISIZE


class FloatScalar(float, Scalar):
    """Binary float no wider than a double; construction rounds to the format."""

    __slots__ = ()

    def __new__(cls, value: int | float | Fraction = 0.0) -> FloatScalar:
        _check_number(cls.kind, value, (int, float, Fraction))
        return super().__new__(cls, round_to_format(value, cls.kind.float_format))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"

    def __str__(self) -> str:
        return float.__repr__(self)

    def literal(self) -> str:
        return _float_text(float(self), self.kind)


class F16(FloatScalar):
    """IEEE 754 half precision (extended-floats feature)."""

    __slots__ = ()
    kind = PrimitiveKind.F16


class F32(FloatScalar):
    __slots__ = ()
    kind = PrimitiveKind.F32


class F64(FloatScalar):
    __slots__ = ()
    kind = PrimitiveKind.F64


class F128(Scalar):
    """IEEE 754 quadruple precision (extended-floats feature).

    Python has no native binary128, so the value is held exactly: a Fraction
    for finite non-zero numbers, a float for NaN, infinities and signed zero.
    """

    __slots__ = ("_value",)
    kind = PrimitiveKind.F128

    def __init__(self, value: int | float | Fraction | F128 = 0) -> None:
        if isinstance(value, F128):
            self._value: float | Fraction = value._value
            return
        _check_number(self.kind, value, (int, float, Fraction))
        self._value = round_to_format(value, FLOAT128)

    @property
    def value(self) -> float | Fraction:
        """The exact value."""
        return self._value

    def is_nan(self) -> bool:
        return isinstance(self._value, float) and math.isnan(self._value)

    def __float__(self) -> float:
        return float(round_to_format(self._value, PrimitiveKind.F64.float_format))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, F128):
            return self._value == other._value
        if isinstance(other, (int, float, Fraction)):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        if isinstance(self._value, Fraction):
            return f"F128(Fraction({self._value.numerator}, {self._value.denominator}))"
        return f"F128({self._value!r})"

    def literal(self) -> str:
        return _float_text(self._value, self.kind)


_CHAR_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
    "'": "\\'",
    "\\": "\\\\",
}


class Char(str, Scalar):
    """A single Unicode scalar value (any code point except surrogates)."""

    __slots__ = ()
    kind = PrimitiveKind.CHAR

    def __new__(cls, value: str) -> Char:
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"char requires a single code point, got {value!r}")
        if 0xD800 <= ord(value) <= 0xDFFF:
            raise ValueError(f"char cannot hold surrogate U+{ord(value):04X}")
        return super().__new__(cls, value)

    @property
    def code_point(self) -> int:
        return ord(self)

    def __repr__(self) -> str:
        return f"Char({str.__repr__(self)})"

    def literal(self) -> str:
        text = str(self)
        if text in _CHAR_ESCAPES:
            return f"'{_CHAR_ESCAPES[text]}'"
        if not text.isprintable():
            return f"'\\u{{{ord(text):x}}}'"
        return f"'{text}'"


def scalar_type(kind: PrimitiveKind) -> type:
    """Return the Python type carrying values of ``kind``."""
    return _SCALAR_TYPES[kind]


def kind_of(tp: type) -> PrimitiveKind | None:
    """Return the primitive kind of a value type, or None for other types."""
    if tp is bool:
        return PrimitiveKind.BOOL
    kind = getattr(tp, "kind", None)
    return kind if isinstance(kind, PrimitiveKind) else None


def exact_value(value: Any) -> int | float | Fraction:
    """Return the exact number behind a primitive value."""
    if isinstance(value, F128):
        return value.value
    if isinstance(value, Char):
        return ord(value)
    if isinstance(value, float):
        return float(value)
    return int(value)
