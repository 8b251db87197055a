"""
Core components for byte and bit units.

This package contains the unit families, the conversion tables and the
formatter used throughout the byteunits library.
"""

from byteunits.core import types, units
from byteunits.core.config import FormatConfig, FormatConfigBuilder
from byteunits.core.errors import (
    ByteUnitsError,
    InvalidPatternError,
    NegativeSizeError,
)
from byteunits.core.formatting import (
    DEFAULT_FORMAT_PATTERN,
    DecimalFormatter,
    NumberFormatter,
)
from byteunits.core.types import INT64_MAX, INT64_MIN, UnitFamily
from byteunits.core.units import BinaryByteUnit, BitUnit, ByteUnit, DecimalByteUnit
