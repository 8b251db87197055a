#!/usr/bin/env python3
"""
Example demonstrating the use of the byteunits package.

This example shows how to convert sizes between units, turn any unit into
bytes, and format sizes for display with the default, pattern-based and
custom number formatters.
"""

from byteunits import (
    BinaryByteUnit,
    BitUnit,
    ByteUnit,
    DecimalByteUnit,
    FormatConfigBuilder,
    configure_logging,
    get_logger,
)

# Configure logging with desired level
configure_logging(level="info")
log = get_logger(__name__)


def total_bytes(sizes):
    """Sum (count, unit) pairs of any family into bytes."""
    total = 0
    for count, unit in sizes:
        if not isinstance(unit, ByteUnit):
            raise TypeError(f"Not a byte unit: {unit!r}")
        total += unit.to_bytes(count)
    return total


def main():
    """Demonstrate conversions and formatting."""
    log.info("byteunits Example")
    log.info("=================\n")

    # 1. Converting within a family
    log.info("1. Converting within a family")
    log.info("-----------------------------")
    log.info(f"10 KiB = {BinaryByteUnit.BYTES.convert(10, BinaryByteUnit.KIBIBYTES)} B")
    log.info(f"1 TB = {DecimalByteUnit.TERABYTES.to_megabytes(1)} MB")
    log.info(f"999 B = {DecimalByteUnit.BYTES.to_kilobytes(999)} KB (truncated)")
    log.info(f"9000 PiB = {BinaryByteUnit.PEBIBYTES.to_bytes(9000)} B (saturated)\n")

    # 2. Everything converts to bytes
    log.info("2. Mixing families through bytes")
    log.info("--------------------------------")
    sizes = [
        (1, BitUnit.PETABITS),
        (3, BinaryByteUnit.GIBIBYTES),
        (250, DecimalByteUnit.MEGABYTES),
    ]
    total = total_bytes(sizes)
    log.info(f"Total: {total} B = {BinaryByteUnit.format(total)}\n")

    # 3. Formatting
    log.info("3. Formatting sizes")
    log.info("-------------------")
    log.info(f"Default:  {BinaryByteUnit.format(1234567)}")
    log.info(f"Pattern:  {BitUnit.format(1177171, '0.0#')}")
    french = FormatConfigBuilder().pattern("#,##0.##").locale("fr").build().formatter()
    log.info(f"French:   {DecimalByteUnit.format(1177171, french)}")
    log.info(f"Callable: {DecimalByteUnit.format(1500, lambda v: f'{v:.3f}')}")


if __name__ == "__main__":
    main()
