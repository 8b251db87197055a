"""
Tests for the fixed-width arithmetic helpers and the conversion tables.
"""

import pytest

from byteunits.core.arithmetic import multiply, to_int64, truncating_divide
from byteunits.core.conversions import (
    BYTE_BRIDGES,
    MATRICES,
    Conversion,
    ConversionKind,
)
from byteunits.core.types import INT64_MAX, INT64_MIN, UnitFamily


class TestMultiply:
    """Test the saturating multiply."""

    def test_in_range(self):
        """Test products that fit in 64 bits."""
        over = INT64_MAX // 1024
        assert multiply(0, 1024, over) == 0
        assert multiply(10, 1024, over) == 10240
        assert multiply(-10, 1024, over) == -10240
        assert multiply(over, 1024, over) == over * 1024
        assert multiply(-over, 1024, over) == -over * 1024

    def test_saturates(self):
        """Test products just past the threshold."""
        over = INT64_MAX // 1000
        assert multiply(over + 1, 1000, over) == INT64_MAX
        assert multiply(-over - 1, 1000, over) == INT64_MIN
        assert multiply(INT64_MAX, 1000, over) == INT64_MAX
        assert multiply(INT64_MIN, 1000, over) == INT64_MIN


class TestTruncatingDivide:
    """Test division toward zero."""

    def test_positive(self):
        assert truncating_divide(999, 1000) == 0
        assert truncating_divide(1999, 1000) == 1

    def test_negative(self):
        """Test that negative quotients round toward zero."""
        assert truncating_divide(-999, 1000) == 0
        assert truncating_divide(-1999, 1000) == -1
        assert truncating_divide(-2000, 1000) == -2
        assert truncating_divide(INT64_MIN, 8) == INT64_MIN // 8


class TestToInt64:
    """Test coercion of counts into the signed 64-bit range."""

    def test_in_range(self):
        assert to_int64(0) == 0
        assert to_int64(INT64_MAX) == INT64_MAX
        assert to_int64(INT64_MIN) == INT64_MIN
        assert to_int64(True) == 1

    def test_clamps(self):
        assert to_int64(INT64_MAX + 1) == INT64_MAX
        assert to_int64(INT64_MIN - 1) == INT64_MIN

    def test_rejects_floats(self):
        with pytest.raises(TypeError):
            to_int64(1.0)


class TestConversionTables:
    """Test the precomputed conversion tables."""

    def test_between(self):
        """Test building single conversions from scales."""
        assert Conversion.between(1024, 1024).kind is ConversionKind.IDENTITY
        widen = Conversion.between(1024, 1)
        assert widen.kind is ConversionKind.WIDEN
        assert widen.factor == 1024
        assert widen.over == INT64_MAX // 1024
        narrow = Conversion.between(1, 1000)
        assert narrow.kind is ConversionKind.NARROW
        assert narrow.factor == 1000

    def test_between_rejects_uneven_scales(self):
        with pytest.raises(ValueError):
            Conversion.between(1000, 1024)

    @pytest.mark.parametrize("family", list(UnitFamily), ids=lambda f: f.name)
    def test_matrix_is_complete(self, family):
        """Test that every ordered pair has an entry."""
        matrix = MATRICES[family]
        assert len(matrix) == 36
        for source in range(6):
            for target in range(6):
                entry = matrix.entry(source, target)
                if source == target:
                    assert entry.kind is ConversionKind.IDENTITY
                elif source > target:
                    assert entry.kind is ConversionKind.WIDEN
                    assert entry.factor == family.base ** (source - target)
                else:
                    assert entry.kind is ConversionKind.NARROW
                    assert entry.factor == family.base ** (target - source)

    def test_bit_bridge_constants(self):
        """Test that bit units fold the divide-by-eight into one constant."""
        bridge = BYTE_BRIDGES[UnitFamily.BITS]
        assert bridge[0].kind is ConversionKind.NARROW
        assert bridge[0].factor == 8
        assert [c.factor for c in bridge[1:]] == [
            125,
            125_000,
            125_000_000,
            125_000_000_000,
            125_000_000_000_000,
        ]
        assert all(c.kind is ConversionKind.WIDEN for c in bridge[1:])

    def test_byte_bridge_matches_matrix(self):
        """Test that byte families convert to bytes through their own matrix."""
        for family in (UnitFamily.BINARY_BYTES, UnitFamily.DECIMAL_BYTES):
            for index in range(family.size):
                assert BYTE_BRIDGES[family][index] == MATRICES[family].entry(index, 0)

    def test_tables_are_frozen(self):
        """Test that shared conversions cannot be mutated."""
        entry = MATRICES[UnitFamily.BITS].entry(1, 0)
        with pytest.raises(AttributeError):
            entry.factor = 1
