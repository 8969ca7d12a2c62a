"""
calschema.geometry.forms
------------------------
Quasi-affine forms and their calendrical specializations.

A quasi-affine form (a, b, r) is the integer sequence

    value(x) = floor((a*x + r) / b),        a > 0, b > 0,

whose first differences (the *code*) only take the values floor(a/b) and
floor(a/b) + 1. Start of years, start of months and start of centuries of
a regular enough calendar are such sequences, provided the exceptional
period of the enclosing cycle sits last.

Numbering conventions:
  * algebraic: 0-based, the exceptional period is the last one
  * ordinal:   1-based
  * troesch:   months keep their absolute position, the first regular
               month being numbered exceptional_month + 1
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, Literal, Optional, Tuple

from ..core.arith import DEFAULT_WIDTH, WorkingWidth, modulo
from ..core.errors import UnsupportedOperationError
from ..core.types import EPOCH, Yemo, Yemoda

MonthFormNumbering = Literal["algebraic", "ordinal", "troesch"]
MONTH_FORM_NUMBERINGS = ("algebraic", "ordinal", "troesch")


@dataclass(frozen=True)
class QuasiAffineForm:
    a: int
    b: int
    remainder: int
    width: WorkingWidth = field(default=DEFAULT_WIDTH, compare=False, repr=False, kw_only=True)

    def __post_init__(self) -> None:
        if self.a <= 0 or self.b <= 0:
            raise ValueError(f"a and b must be positive, got a={self.a}, b={self.b}")

    def __iter__(self) -> Iterator[int]:
        yield self.a
        yield self.b
        yield self.remainder

    def _new(self, a: int, b: int, r: int) -> "QuasiAffineForm":
        return QuasiAffineForm(a, b, r, width=self.width)

    # ---------------------------------------------------------
    # Evaluation
    # ---------------------------------------------------------

    def value_at(self, x: int) -> int:
        w = self.width
        return w.narrow(w.check_wide(self.a * x + self.remainder) // self.b)

    def reverse(self) -> "QuasiAffineForm":
        """(a, b, r) -> (b, a, b - 1 - r)."""
        return self._new(self.b, self.a, self.b - 1 - self.remainder)

    def divide(self, n: int) -> int:
        """Largest x such that value_at(x) <= n."""
        return self.reverse().value_at(n)

    def divide_with_remainder(self, n: int) -> Tuple[int, int]:
        x = self.divide(n)
        return x, self.width.narrow(n - self.value_at(x))

    def code_at(self, x: int) -> int:
        return self.value_at(x + 1) - self.value_at(x)

    # ---------------------------------------------------------
    # Elementary plane transforms
    # ---------------------------------------------------------

    def apply_vertical_shear(self, p: int) -> "QuasiAffineForm":
        """(x, y) -> (x, y + p*x)."""
        return self._new(self.a + p * self.b, self.b, self.remainder)

    def apply_horizontal_shear(self, q: int) -> "QuasiAffineForm":
        """(x, y) -> (x + q*y, y)."""
        return self._new(self.a, self.b + q * self.a, self.remainder)

    def apply_oblique_symmetry(self) -> "QuasiAffineForm":
        """(x, y) -> (x, x - y)."""
        return self._new(self.b - self.a, self.b, self.b - 1 - self.remainder)

    def apply_orthogonal_symmetry(self) -> "QuasiAffineForm":
        """Reflection across y = x."""
        return self._new(self.b, self.a, self.a - 1 - self.remainder)

    def apply_back_orthogonal_symmetry(self) -> "QuasiAffineForm":
        return self._new(self.b, self.a, self.b - 1 - self.remainder)

    def apply_translation(self, x0: int) -> "QuasiAffineForm":
        """Translation of vector (x0, 1), the remainder reduced mod b."""
        return self._new(self.a, self.b, modulo(self.remainder - x0 * self.a, self.b))


@dataclass(frozen=True)
class CalendricalForm(QuasiAffineForm):
    """A quasi-affine form anchored at the date its numbering starts from."""
    origin: Yemoda = EPOCH

    def reverse(self) -> "CalendricalForm":
        return CalendricalForm(self.b, self.a, self.b - 1 - self.remainder, width=self.width)

    def patch_value(self, v: int):
        """Shift every value of the form by v."""
        return replace(self, remainder=self.remainder + self.b * v)

    def _normalized(self):
        y0, m0, d0 = self.origin
        if (m0, d0) != (1, 1):
            raise UnsupportedOperationError(
                f"Only a form whose origin is a start of year can be normalized, got {self.origin}."
            )
        shift = self.value_at(0) - self.value_at(1 - y0)
        return replace(
            self,
            remainder=self.remainder - self.a * y0 + self.b * shift,
            origin=EPOCH,
        )


@dataclass(frozen=True)
class YearForm(CalendricalForm):
    """Encodes the number of days from the origin to the start of a year."""

    @property
    def normal(self) -> bool:
        return self.origin == EPOCH

    def get_start_of_year(self, y: int) -> int:
        return self.value_at(y)

    def get_year(self, days: int) -> Tuple[int, int]:
        """Returns (y, d0y), d0y being the 0-based day of the year."""
        return self.divide_with_remainder(days)

    def count_days_in_year(self, y: int) -> int:
        return self.code_at(y)

    def count_days_from_epoch_to_start_of_year(self, y: int) -> int:
        y0 = self.origin.year
        return self.get_start_of_year(y - y0) - self.get_start_of_year(1 - y0)

    def normalize(self) -> "YearForm":
        """
        Re-center the form on the epoch 01/01/0001: afterwards the year
        argument is the true year and get_start_of_year(1) == 0.
        """
        return self._normalized()


@dataclass(frozen=True)
class MonthForm(CalendricalForm):
    """Encodes the number of days in a year before the start of a month."""
    numbering: MonthFormNumbering = "algebraic"
    exceptional_month: Optional[int] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.numbering not in MONTH_FORM_NUMBERINGS:
            raise ValueError(f"numbering must be one of {MONTH_FORM_NUMBERINGS}")
        if self.numbering == "troesch":
            if self.exceptional_month is None or self.exceptional_month < 1:
                raise ValueError("troesch numbering requires exceptional_month >= 1")
        elif self.exceptional_month is not None:
            raise ValueError("exceptional_month only applies to the troesch numbering")

    def count_days_in_year_before_month(self, m: int) -> int:
        return self.value_at(m)

    def get_month(self, d0y: int) -> Tuple[int, int]:
        """Returns (m, d0), d0 being the 0-based day of the month."""
        return self.divide_with_remainder(d0y)

    def count_days_in_month(self, m: int) -> int:
        return self.code_at(m)

    def with_ordinal_numbering(self) -> "MonthForm":
        self._require_algebraic()
        return replace(self, remainder=self.remainder - self.a, numbering="ordinal")

    def with_troesch_numbering(self, exceptional_month: int) -> "MonthForm":
        self._require_algebraic()
        return replace(
            self,
            remainder=self.remainder - self.a * (exceptional_month + 1),
            numbering="troesch",
            exceptional_month=exceptional_month,
        )

    def _require_algebraic(self) -> None:
        if self.numbering != "algebraic":
            raise UnsupportedOperationError(
                f"Renumbering is only defined from the algebraic numbering, not {self.numbering}."
            )


@dataclass(frozen=True)
class CenturyForm(CalendricalForm):
    """Same role as YearForm one level up (century -> year -> month)."""

    def get_start_of_century(self, c: int) -> int:
        return self.value_at(c)

    def get_century(self, days: int) -> Tuple[int, int]:
        """Returns (c, d0c), d0c being the 0-based day of the century."""
        return self.divide_with_remainder(days)

    def count_days_in_century(self, c: int) -> int:
        return self.code_at(c)


@dataclass(frozen=True)
class DayForm(CalendricalForm):
    """Switches the day of the month between 1-based and 0-based numbering."""

    def count_days_in_month_before_day(self, d: int) -> int:
        return self.value_at(d)

    def get_day(self, d0: int) -> int:
        return self.divide(d0)


DAY_FORM = DayForm(1, 1, -1)


@dataclass(frozen=True)
class YearMonthForm(CalendricalForm):
    """
    Encodes the number of months from the origin to the start of a year
    (lunisolar calendars). The unit of the values is the month, not the day.
    """

    def get_start_of_year(self, y: int) -> int:
        return self.value_at(y)

    def get_year(self, months: int) -> Tuple[int, int]:
        """Returns (y, m0), m0 being the 0-based month of the year."""
        return self.divide_with_remainder(months)

    def count_months_in_year(self, y: int) -> int:
        return self.code_at(y)

    def get_month_parts(self, months: int) -> Yemo:
        y, m0 = self.get_year(months)
        return Yemo(y, 1 + m0)

    def count_months_from_epoch_to_start_of_year(self, y: int) -> int:
        y0 = self.origin.year
        return self.get_start_of_year(y - y0) - self.get_start_of_year(1 - y0)

    def normalize(self) -> "YearMonthForm":
        return self._normalized()
