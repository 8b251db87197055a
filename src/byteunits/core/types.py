"""
Core data types for byte and bit units.

This module defines the unit families and the fixed-width integer bounds
used throughout the byteunits library.
"""

from enum import Enum
from typing import Tuple

###################################################################################
#                                                                                 #
#      IN ORDER TO AVOID CIRCULAR IMPORTS                                         #
#      THIS FILE SHOULD NEVER IMPORT ANYTHING FROM THE BYTEUNITS LIBRARY          #
#                                                                                 #
###################################################################################

INT64_MAX = (1 << 63) - 1
INT64_MIN = -(1 << 63)


class UnitFamily(Enum):
    """Represents one family of units sharing a base unit and a scale."""

    BINARY_BYTES = ("bytes", 1024, ("B", "KiB", "MiB", "GiB", "TiB", "PiB"))
    DECIMAL_BYTES = ("bytes", 1000, ("B", "KB", "MB", "GB", "TB", "PB"))
    BITS = ("bits", 1000, ("b", "Kb", "Mb", "Gb", "Tb", "Pb"))

    def __init__(self, noun: str, base: int, symbols: Tuple[str, ...]):
        self.noun = noun
        self.base = base
        self.symbols = symbols

    @property
    def threshold(self) -> float:
        """Magnitude at which the formatter steps up to the next unit."""
        return float(self.base)

    @property
    def size(self) -> int:
        """Number of variants in this family."""
        return len(self.symbols)

    def scale(self, index: int) -> int:
        """Get the number of base units in one unit at ``index``."""
        return self.base**index
