from __future__ import annotations

from typing import Optional


class CalschemaError(Exception):
    """Base error."""


class OutOfRangeError(CalschemaError, ValueError):
    """Raised when a year, month, day or day-of-year argument fails validation."""

    def __init__(self, param: str, value: int, message: Optional[str] = None):
        self.param = param
        self.value = value
        super().__init__(message or f"The value of '{param}' was out of range; value = {value}.")


class ArithmeticOverflowError(CalschemaError, OverflowError):
    """Raised when a form evaluation does not fit the working integer width."""


class DateOverflowError(CalschemaError, OverflowError):
    """Raised when a date or day count leaves the supported range."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "The computation would overflow the range of supported dates.")


class UnsupportedOperationError(CalschemaError, NotImplementedError):
    """Raised for a request that is not meaningful for a given schema or form."""
