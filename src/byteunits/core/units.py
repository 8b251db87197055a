"""
Byte and bit units.

This module provides three closed families of units, each an ``Enum`` whose
members are ordered from the finest to the coarsest granularity:

    BinaryByteUnit   B, KiB, MiB, GiB, TiB, PiB   (powers of 1024)
    DecimalByteUnit  B, KB, MB, GB, TB, PB        (powers of 1000)
    BitUnit          b, Kb, Mb, Gb, Tb, Pb        (powers of 1000)

A unit does not hold a size; it converts bare integer counts. Counts are
signed 64-bit values. Conversions to a coarser unit truncate toward zero,
conversions to a finer unit saturate at INT64_MAX / INT64_MIN instead of
overflowing, so no integer input ever raises.

Example usage:
    # 10 KiB in bytes
    BinaryByteUnit.BYTES.convert(10, BinaryByteUnit.KIBIBYTES)  # 10240

    # 1 TB in megabytes
    DecimalByteUnit.TERABYTES.to_megabytes(1)  # 1000000

    # Any unit can be turned into bytes
    BitUnit.PETABITS.to_bytes(1)  # 125000000000000

    # Human-readable sizes
    BinaryByteUnit.format(1234567)  # "1.2 MiB"
    BitUnit.format(1177171, "0.0#")  # "1.18 Mb"
"""

from enum import Enum

from byteunits.core.arithmetic import to_int64
from byteunits.core.conversions import BYTE_BRIDGES, MATRICES
from byteunits.core.formatting import FormatterLike, format_size
from byteunits.core.types import UnitFamily


class ByteUnit:
    """
    A size at a given granularity which can be converted into bytes.

    Every member of BinaryByteUnit, DecimalByteUnit and BitUnit is a
    ByteUnit, so callers can accept any of them and call to_bytes().
    """

    def __init__(self, family: UnitFamily, index: int):
        self.family = family
        self.index = index

    @property
    def symbol(self) -> str:
        """Get the display symbol for this unit."""
        return self.family.symbols[self.index]

    @property
    def scale(self) -> int:
        """Get the number of base units (bytes or bits) in one of this unit."""
        return self.family.scale(self.index)

    def convert(self, source_count: int, source_unit: "ByteUnit") -> int:
        """
        Convert a size in ``source_unit`` to this unit.

        Conversions from finer to coarser granularities truncate toward zero,
        so 999 bytes is 0 kilobytes and -999 bytes is also 0 kilobytes.
        Conversions from coarser to finer granularities that would overflow
        saturate to INT64_MIN if negative or INT64_MAX if positive.

        Args:
            source_count: The size in ``source_unit``
            source_unit: The unit of ``source_count``, from the same family

        Returns:
            The converted size in this unit

        Raises:
            TypeError: If ``source_unit`` belongs to another family
        """
        if not isinstance(source_unit, ByteUnit) or source_unit.family is not self.family:
            raise TypeError(
                f"Cannot convert from {source_unit!r} to {type(self).__name__}"
            )
        return MATRICES[self.family].convert(
            to_int64(source_count), source_unit.index, self.index
        )

    def to_bytes(self, count: int) -> int:
        """
        Convert ``count`` of this unit to bytes.

        Bits truncate toward zero (15 bits is 1 byte); coarser units saturate
        on overflow like any widening conversion.
        """
        return BYTE_BRIDGES[self.family][self.index](to_int64(count))

    def _comparable(self, other) -> bool:
        return isinstance(other, ByteUnit) and other.family is self.family

    def __lt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self.index < other.index

    def __le__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self.index <= other.index

    def __gt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self.index > other.index

    def __ge__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self.index >= other.index

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


class BinaryByteUnit(ByteUnit, Enum):
    """Byte units in powers of 1024 (IEC prefixes)."""

    BYTES = (UnitFamily.BINARY_BYTES, 0)
    KIBIBYTES = (UnitFamily.BINARY_BYTES, 1)
    MEBIBYTES = (UnitFamily.BINARY_BYTES, 2)
    GIBIBYTES = (UnitFamily.BINARY_BYTES, 3)
    TEBIBYTES = (UnitFamily.BINARY_BYTES, 4)
    PEBIBYTES = (UnitFamily.BINARY_BYTES, 5)

    def to_kibibytes(self, count: int) -> int:
        """Equivalent to ``KIBIBYTES.convert(count, self)``."""
        return BinaryByteUnit.KIBIBYTES.convert(count, self)

    def to_mebibytes(self, count: int) -> int:
        """Equivalent to ``MEBIBYTES.convert(count, self)``."""
        return BinaryByteUnit.MEBIBYTES.convert(count, self)

    def to_gibibytes(self, count: int) -> int:
        """Equivalent to ``GIBIBYTES.convert(count, self)``."""
        return BinaryByteUnit.GIBIBYTES.convert(count, self)

    def to_tebibytes(self, count: int) -> int:
        """Equivalent to ``TEBIBYTES.convert(count, self)``."""
        return BinaryByteUnit.TEBIBYTES.convert(count, self)

    def to_pebibytes(self, count: int) -> int:
        """Equivalent to ``PEBIBYTES.convert(count, self)``."""
        return BinaryByteUnit.PEBIBYTES.convert(count, self)

    @classmethod
    def format(cls, count: int, formatter: FormatterLike = None) -> str:
        """
        Return ``count`` bytes as a human-readable size, e.g. "1.2 GiB".

        Args:
            count: Number of bytes, must not be negative
            formatter: None for the default "#,##0.#" pattern, a pattern
                string, or a callable mapping the scaled float to a string

        Raises:
            NegativeSizeError: If ``count`` is negative ("bytes < 0: -1")
        """
        return format_size(count, UnitFamily.BINARY_BYTES, formatter)


class DecimalByteUnit(ByteUnit, Enum):
    """Byte units in powers of 1000 (SI prefixes)."""

    BYTES = (UnitFamily.DECIMAL_BYTES, 0)
    KILOBYTES = (UnitFamily.DECIMAL_BYTES, 1)
    MEGABYTES = (UnitFamily.DECIMAL_BYTES, 2)
    GIGABYTES = (UnitFamily.DECIMAL_BYTES, 3)
    TERABYTES = (UnitFamily.DECIMAL_BYTES, 4)
    PETABYTES = (UnitFamily.DECIMAL_BYTES, 5)

    def to_kilobytes(self, count: int) -> int:
        """Equivalent to ``KILOBYTES.convert(count, self)``."""
        return DecimalByteUnit.KILOBYTES.convert(count, self)

    def to_megabytes(self, count: int) -> int:
        """Equivalent to ``MEGABYTES.convert(count, self)``."""
        return DecimalByteUnit.MEGABYTES.convert(count, self)

    def to_gigabytes(self, count: int) -> int:
        """Equivalent to ``GIGABYTES.convert(count, self)``."""
        return DecimalByteUnit.GIGABYTES.convert(count, self)

    def to_terabytes(self, count: int) -> int:
        """Equivalent to ``TERABYTES.convert(count, self)``."""
        return DecimalByteUnit.TERABYTES.convert(count, self)

    def to_petabytes(self, count: int) -> int:
        """Equivalent to ``PETABYTES.convert(count, self)``."""
        return DecimalByteUnit.PETABYTES.convert(count, self)

    @classmethod
    def format(cls, count: int, formatter: FormatterLike = None) -> str:
        """Return ``count`` bytes as a human-readable size, e.g. "1.2 GB"."""
        return format_size(count, UnitFamily.DECIMAL_BYTES, formatter)


class BitUnit(ByteUnit, Enum):
    """Bit units in powers of 1000. Eight bits make one byte."""

    BITS = (UnitFamily.BITS, 0)
    KILOBITS = (UnitFamily.BITS, 1)
    MEGABITS = (UnitFamily.BITS, 2)
    GIGABITS = (UnitFamily.BITS, 3)
    TERABITS = (UnitFamily.BITS, 4)
    PETABITS = (UnitFamily.BITS, 5)

    def to_bits(self, count: int) -> int:
        """Equivalent to ``BITS.convert(count, self)``."""
        return BitUnit.BITS.convert(count, self)

    def to_kilobits(self, count: int) -> int:
        """Equivalent to ``KILOBITS.convert(count, self)``."""
        return BitUnit.KILOBITS.convert(count, self)

    def to_megabits(self, count: int) -> int:
        """Equivalent to ``MEGABITS.convert(count, self)``."""
        return BitUnit.MEGABITS.convert(count, self)

    def to_gigabits(self, count: int) -> int:
        """Equivalent to ``GIGABITS.convert(count, self)``."""
        return BitUnit.GIGABITS.convert(count, self)

    def to_terabits(self, count: int) -> int:
        """Equivalent to ``TERABITS.convert(count, self)``."""
        return BitUnit.TERABITS.convert(count, self)

    def to_petabits(self, count: int) -> int:
        """Equivalent to ``PETABITS.convert(count, self)``."""
        return BitUnit.PETABITS.convert(count, self)

    @classmethod
    def format(cls, count: int, formatter: FormatterLike = None) -> str:
        """
        Return ``count`` bits as a human-readable size, e.g. "1.2 Gb".

        Raises:
            NegativeSizeError: If ``count`` is negative ("bits < 0: -1")
        """
        return format_size(count, UnitFamily.BITS, formatter)
