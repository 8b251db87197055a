"""
byteunits: byte and bit sizes made simple

Exact integer conversions between binary byte units, decimal byte units
and bit units, plus human-readable formatting of sizes.
"""

# Import core logging first to configure it before anything else
from byteunits.core.logging import configure_logging, get_logger, update_log_level

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

__all__ = [
    # Units
    "ByteUnit",
    "BinaryByteUnit",
    "DecimalByteUnit",
    "BitUnit",
    "UnitFamily",
    "INT64_MAX",
    "INT64_MIN",
    # Formatting
    "DEFAULT_FORMAT_PATTERN",
    "DecimalFormatter",
    "NumberFormatter",
    "FormatConfig",
    "FormatConfigBuilder",
    # Errors
    "ByteUnitsError",
    "NegativeSizeError",
    "InvalidPatternError",
    # Modules and logging
    "types",
    "units",
    "configure_logging",
    "get_logger",
    "update_log_level",
]

# Configure logging once at import time
configure_logging()
log = get_logger(__name__)
