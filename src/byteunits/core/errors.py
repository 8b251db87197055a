"""Exceptions for byte unit errors.

Conversions never raise for integer input; these exceptions cover the
formatting path, where a negative size or an unusable number pattern is a
programming error on the caller's side.
"""

###################################################################################
#                                                                                 #
#      IN ORDER TO AVOID CIRCULAR IMPORTS                                         #
#      THIS FILE SHOULD NEVER IMPORT ANYTHING FROM THE BYTEUNITS LIBRARY          #
#                                                                                 #
###################################################################################


class ByteUnitsError(Exception):
    """Base exception for byteunits errors."""

    pass


class NegativeSizeError(ByteUnitsError, ValueError):
    """Raised when a negative count is passed to a formatter."""

    def __init__(self, noun: str, count: int):
        self.noun = noun
        self.count = count
        super().__init__(f"{noun} < 0: {count}")


class InvalidPatternError(ByteUnitsError, ValueError):
    """Raised when a number pattern or locale cannot be used for formatting."""

    def __init__(self, message: str):
        super().__init__(f"Invalid number format: {message}")
