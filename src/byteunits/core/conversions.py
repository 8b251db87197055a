"""
Conversion matrices for byte and bit unit families.

Every family gets a complete table with one precomputed ``Conversion`` per
ordered (source, target) pair, so dispatch is a single lookup and no pair
can be left unhandled. Ratios and overflow thresholds are computed once at
import time; the tables are read-only afterwards.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Tuple

from byteunits.core.arithmetic import multiply, truncating_divide
from byteunits.core.types import INT64_MAX, UnitFamily

# One byte is eight bits, regardless of family.
BITS_PER_BYTE = 8


class ConversionKind(Enum):
    """How a conversion moves between granularities."""

    NARROW = auto()  # finer to coarser, truncating division
    IDENTITY = auto()
    WIDEN = auto()  # coarser to finer, saturating multiplication


@dataclass(frozen=True)
class Conversion:
    """
    A single conversion between two granularities.

    Attributes:
        kind: Whether the conversion narrows, widens or is the identity
        factor: Ratio between the two granularities (1 for identity)
        over: Largest input magnitude that can be widened without overflow
    """

    kind: ConversionKind
    factor: int = 1
    over: int = INT64_MAX

    @classmethod
    def between(cls, source_scale: int, target_scale: int) -> "Conversion":
        """
        Build the conversion from one granularity to another.

        Scales are expressed in a common base (bytes or bits) and one must
        divide the other exactly.

        Args:
            source_scale: Size of one source unit in the common base
            target_scale: Size of one target unit in the common base

        Returns:
            The conversion for that pair
        """
        if source_scale == target_scale:
            return cls(ConversionKind.IDENTITY)
        if source_scale > target_scale:
            factor, remainder = divmod(source_scale, target_scale)
            kind = ConversionKind.WIDEN
        else:
            factor, remainder = divmod(target_scale, source_scale)
            kind = ConversionKind.NARROW
        if remainder:
            raise ValueError(
                f"Scales {source_scale} and {target_scale} are not whole multiples"
            )
        return cls(kind, factor, INT64_MAX // factor)

    def __call__(self, count: int) -> int:
        if self.kind is ConversionKind.WIDEN:
            return multiply(count, self.factor, self.over)
        if self.kind is ConversionKind.NARROW:
            return truncating_divide(count, self.factor)
        return count


class ConversionMatrix:
    """Complete pairwise conversion table for one unit family."""

    def __init__(self, family: UnitFamily):
        self.family = family
        scales = [family.scale(index) for index in range(family.size)]
        self._entries: Dict[Tuple[int, int], Conversion] = {
            (source, target): Conversion.between(scales[source], scales[target])
            for source in range(family.size)
            for target in range(family.size)
        }

    def entry(self, source_index: int, target_index: int) -> Conversion:
        """Get the conversion from the variant at ``source_index`` to ``target_index``."""
        return self._entries[(source_index, target_index)]

    def convert(self, count: int, source_index: int, target_index: int) -> int:
        """Convert ``count`` units at ``source_index`` into units at ``target_index``."""
        return self._entries[(source_index, target_index)](count)

    def __len__(self) -> int:
        return len(self._entries)


def _bytes_bridge(family: UnitFamily) -> Tuple[Conversion, ...]:
    """
    Build the per-variant conversions into bytes.

    Byte families reuse their own matrix column for BYTES. For bits, the
    bit ratio and the divide-by-eight are folded into one constant per
    variant (125 bytes per kilobit, 125000 per megabit, ...), so a single
    saturating multiply covers the whole conversion.
    """
    if family is UnitFamily.BITS:
        return tuple(
            Conversion.between(family.scale(index), BITS_PER_BYTE)
            for index in range(family.size)
        )
    return tuple(MATRICES[family].entry(index, 0) for index in range(family.size))


MATRICES: Dict[UnitFamily, ConversionMatrix] = {
    family: ConversionMatrix(family) for family in UnitFamily
}

BYTE_BRIDGES: Dict[UnitFamily, Tuple[Conversion, ...]] = {
    family: _bytes_bridge(family) for family in UnitFamily
}
