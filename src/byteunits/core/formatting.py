"""
Human-readable formatting of byte and bit counts.

The scaling loop lives here and is shared by every unit family; rendering
of the scaled magnitude is delegated to a ``NumberFormatter``, any callable
mapping a float to its display string. The built-in formatter uses Babel's
LDML number patterns, so grouping, decimal symbols and precision follow the
pattern and locale rather than the host.
"""

import operator
from typing import Callable, Optional, Union

from babel.core import Locale, UnknownLocaleError
from babel.numbers import format_decimal, parse_pattern

from byteunits.core.arithmetic import to_int64
from byteunits.core.errors import InvalidPatternError, NegativeSizeError
from byteunits.core.logging import get_logger
from byteunits.core.types import UnitFamily

log = get_logger(__name__)

# Grouped thousands, at most one fractional digit, no trailing zero.
DEFAULT_FORMAT_PATTERN = "#,##0.#"
DEFAULT_LOCALE = "en_US"

NumberFormatter = Callable[[float], str]
FormatterLike = Union[None, str, NumberFormatter]


class DecimalFormatter:
    """
    Number formatter backed by a Babel decimal pattern.

    Attributes:
        pattern: The LDML pattern string, e.g. "#,##0.#" or "0.0#"
        locale: Locale identifier supplying the grouping and decimal symbols
    """

    def __init__(self, pattern: str = DEFAULT_FORMAT_PATTERN, locale: str = DEFAULT_LOCALE):
        self.pattern = pattern
        self.locale = locale
        try:
            self._number_pattern = parse_pattern(pattern)
            self._locale = Locale.parse(locale)
        except (ValueError, TypeError, UnknownLocaleError) as e:
            raise InvalidPatternError(f"{pattern!r} for locale {locale!r}: {e}") from e

    def __call__(self, value: float) -> str:
        return format_decimal(value, format=self._number_pattern, locale=self._locale)

    def __repr__(self) -> str:
        return f"DecimalFormatter({self.pattern!r}, {self.locale!r})"


DEFAULT_FORMATTER = DecimalFormatter()


def resolve_formatter(formatter: FormatterLike = None) -> NumberFormatter:
    """
    Turn the accepted formatter arguments into a callable.

    Args:
        formatter: None for the default, a pattern string, or a callable

    Returns:
        A callable mapping a float magnitude to a string
    """
    if formatter is None:
        return DEFAULT_FORMATTER
    if isinstance(formatter, str):
        return DecimalFormatter(formatter)
    if callable(formatter):
        return formatter
    raise TypeError(
        f"formatter must be a pattern string or a callable, not {type(formatter).__name__}"
    )


def format_size(count, family: UnitFamily, formatter: FormatterLike = None) -> str:
    """
    Return ``count`` base units of ``family`` as a human-readable string.

    The magnitude is divided by the family's threshold until it drops below
    it or the largest unit is reached, then rendered by ``formatter`` and
    joined to the unit symbol with a single space. Displayed values are
    never rounded up into the next unit: 1025 bytes is "1 KiB".

    Args:
        count: Non-negative count in the family's base unit (bytes or bits)
        family: The unit family supplying the threshold and symbols
        formatter: None, a pattern string, or a callable float -> str

    Returns:
        The formatted size, e.g. "1.2 MiB"

    Raises:
        NegativeSizeError: If ``count`` is negative
    """
    value = operator.index(count)
    if value < 0:
        log.debug(f"Rejecting negative {family.noun} count {value}")
        raise NegativeSizeError(family.noun, value)

    number_formatter = resolve_formatter(formatter)

    unit_index = 0
    magnitude = float(to_int64(value))
    last_index = family.size - 1
    while magnitude >= family.threshold and unit_index < last_index:
        magnitude /= family.threshold
        unit_index += 1

    return f"{number_formatter(magnitude)} {family.symbols[unit_index]}"
