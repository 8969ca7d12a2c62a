"""
calschema.core.arith
--------------------
Working integer width and the modulo helper of the form algebra.

Python integers never overflow, so the fixed-width contract of the
arithmetic is modelled explicitly: every form evaluation is computed
exactly, then narrowed back to the working width. The width is read once
from CALSCHEMA_INT_BITS (default 64).
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ArithmeticOverflowError

ENV_INT_BITS = "CALSCHEMA_INT_BITS"
DEFAULT_INT_BITS = 64


@dataclass(frozen=True)
class WorkingWidth:
    bits: int = DEFAULT_INT_BITS

    def __post_init__(self) -> None:
        if self.bits < 16:
            raise ValueError("bits must be >= 16")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def fits(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def narrow(self, value: int) -> int:
        """Return value unchanged if it fits the working width, else raise."""
        if not self.fits(value):
            raise ArithmeticOverflowError(
                f"Value {value} does not fit a signed {self.bits}-bit integer."
            )
        return value

    def check_wide(self, value: int) -> int:
        """Intermediate products may use twice the working width, no more."""
        bound = 1 << (2 * self.bits - 1)
        if not (-bound <= value < bound):
            raise ArithmeticOverflowError(
                f"Intermediate {value} does not fit a signed {2 * self.bits}-bit integer."
            )
        return value


def load_working_width() -> WorkingWidth:
    raw = os.environ.get(ENV_INT_BITS)
    if raw is None or raw.strip() == "":
        return WorkingWidth()
    try:
        bits = int(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_INT_BITS} must be an integer, got {raw!r}") from e
    return WorkingWidth(bits)


DEFAULT_WIDTH = load_working_width()


def modulo(x: int, n: int) -> int:
    """Non-negative remainder for n > 0."""
    return x % n
