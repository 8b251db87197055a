"""
Fixed-width integer helpers.

Python integers never overflow, so the signed 64-bit behaviour every
conversion promises is enforced here: inputs are clamped into range,
widening multiplies saturate instead of growing, and narrowing divides
truncate toward zero rather than flooring.
"""

import operator

from byteunits.core.logging import get_logger
from byteunits.core.types import INT64_MAX, INT64_MIN

log = get_logger(__name__)


def to_int64(count) -> int:
    """
    Coerce ``count`` to an integer in the signed 64-bit range.

    Args:
        count: Any object usable as an integer index (int, bool, numpy ints)

    Returns:
        The integer value, clamped to [INT64_MIN, INT64_MAX]

    Raises:
        TypeError: If ``count`` is not an integer (floats included)
    """
    value = operator.index(count)
    if value > INT64_MAX:
        log.debug(f"Clamping count {value} to INT64_MAX")
        return INT64_MAX
    if value < INT64_MIN:
        log.debug(f"Clamping count {value} to INT64_MIN")
        return INT64_MIN
    return value


def multiply(size: int, factor: int, over: int) -> int:
    """
    Multiply ``size`` by ``factor``, saturating instead of overflowing.

    ``over`` must be ``INT64_MAX // factor``. The bound is checked before the
    product is formed, so an out-of-range product is never computed.

    Args:
        size: The count to scale
        factor: Positive multiplier
        over: Largest magnitude of ``size`` that does not overflow

    Returns:
        ``size * factor``, or INT64_MAX / INT64_MIN on positive / negative overflow
    """
    if size > over:
        log.debug(f"{size} * {factor} saturates to INT64_MAX")
        return INT64_MAX
    if size < -over:
        log.debug(f"{size} * {factor} saturates to INT64_MIN")
        return INT64_MIN
    return size * factor


def truncating_divide(size: int, divisor: int) -> int:
    """Divide by a positive ``divisor``, truncating toward zero."""
    quotient = abs(size) // divisor
    return quotient if size >= 0 else -quotient
