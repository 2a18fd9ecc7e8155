"""Tests for the scalar value types."""

from __future__ import annotations

import math
import struct
from fractions import Fraction

import pytest

from casting.kinds import PrimitiveKind
from casting.values import (
    F16,
    F32,
    F64,
    F128,
    I8,
    U8,
    U128,
    Char,
    exact_value,
    kind_of,
    scalar_type,
)


class TestIntScalar:
    """Tests for the fixed-width integers."""

    def test_in_range(self):
        assert U8(255) == 255
        assert I8(-128) == -128
        assert U128(2**128 - 1) == 2**128 - 1

    def test_out_of_range(self):
        with pytest.raises(ValueError, match=r"Value 256 out of range for u8 \(0..255\)"):
            U8(256)
        with pytest.raises(ValueError):
            U8(-1)
        with pytest.raises(ValueError):
            I8(128)

    def test_rejects_non_integers(self):
        with pytest.raises(TypeError):
            U8(True)
        with pytest.raises(TypeError):
            U8(1.0)

    def test_rendering(self):
        assert repr(U8(5)) == "U8(5)"
        assert str(U8(5)) == "5"
        assert I8(-3).literal() == "-3i8"

    def test_arithmetic_gives_plain_int(self):
        result = U8(200) + U8(100)
        assert result == 300
        assert type(result) is int


class TestFloatScalar:
    """Tests for F16/F32/F64."""

    def test_rounds_on_construction(self):
        assert F32(0.1) == struct.unpack("<f", struct.pack("<f", 0.1))[0]
        assert F16(1.001) == struct.unpack("<e", struct.pack("<e", 1.001))[0]
        assert F64(0.1) == 0.1

    def test_from_large_int(self):
        assert F32(2**128) == math.inf
        assert F64(2**64 - 1) == 2.0**64

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            F32(True)

    def test_literal(self):
        assert F32(1.5).literal() == "1.5f32"
        assert F64(math.nan).literal() == "nan as f64"
        assert F16(-math.inf).literal() == "-inf as f16"
        assert repr(F32(1.5)) == "F32(1.5)"


class TestF128:
    """Tests for the exact binary128 holder."""

    def test_exact_double(self):
        assert F128(0.1) == 0.1
        assert F128(0.1).value == Fraction(0.1)

    def test_precision_beyond_double(self):
        third = F128(Fraction(1, 3))
        assert float(third) == 1 / 3
        assert third != 1 / 3

    def test_large_int_rounds(self):
        assert F128(2**128 - 1) == 2**128

    def test_nan(self):
        nan = F128(math.nan)
        assert nan.is_nan()
        assert nan != nan

    def test_hash_and_copy(self):
        assert hash(F128(2)) == hash(2)
        assert F128(F128(7)) == F128(7)

    def test_literal(self):
        assert F128(1).literal() == "1f128"
        assert F128(0.5).literal() == "0.5f128"
        assert F128(-0.0).literal() == "-0.0f128"


class TestChar:
    """Tests for the code point type."""

    def test_valid(self):
        assert Char("a") == "a"
        assert Char("é").code_point == 0xE9

    def test_invalid(self):
        with pytest.raises(ValueError, match="single code point"):
            Char("ab")
        with pytest.raises(ValueError, match="surrogate"):
            Char("\ud800")

    def test_literal(self):
        assert Char("a").literal() == "'a'"
        assert Char("\n").literal() == "'\\n'"
        assert Char("'").literal() == "'\\''"
        assert Char("\x01").literal() == "'\\u{1}'"


class TestKindMapping:
    """Kind <-> Python type mapping."""

    def test_scalar_type(self):
        assert scalar_type(PrimitiveKind.U8) is U8
        assert scalar_type(PrimitiveKind.BOOL) is bool
        assert scalar_type(PrimitiveKind.CHAR) is Char
        assert scalar_type(PrimitiveKind.F128) is F128

    def test_kind_of(self):
        assert kind_of(U8) is PrimitiveKind.U8
        assert kind_of(bool) is PrimitiveKind.BOOL
        assert kind_of(int) is None

    def test_exact_value(self):
        assert exact_value(True) == 1
        assert exact_value(Char("A")) == 65
        assert exact_value(F128(Fraction(1, 4))) == Fraction(1, 4)
        assert type(exact_value(F32(1.5))) is float
