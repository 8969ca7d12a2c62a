"""
calschema.geometry.regularizer
------------------------------
Month regularization: renumber (year, month) so that the exceptional
month (the one holding the intercalary day) becomes the last month of the
previous logical year. For the Gregorian calendar (E = 2, February) the
algebraic numbering maps March to 0, ..., December to 9, January to 10
and February to 11 of the year before.

Three numberings are available and must match the numbering tag of the
month form the regularized parts are fed to:

  algebraic   m' = m - (E + 1)        if m > E,   m + (N - E - 1) otherwise
  ordinal     algebraic + 1
  troesch     m' = m                  if m > E,   m + N otherwise

In each case the year is decremented when m <= E.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .forms import MonthFormNumbering, MONTH_FORM_NUMBERINGS


@dataclass(frozen=True)
class MonthRegularizer:
    months_in_year: int
    exceptional_month: int
    numbering: MonthFormNumbering = "algebraic"

    def __post_init__(self) -> None:
        if self.months_in_year < 2:
            raise ValueError("months_in_year must be >= 2")
        if not (1 <= self.exceptional_month <= self.months_in_year):
            raise ValueError("exceptional_month must be in 1..months_in_year")
        if self.numbering not in MONTH_FORM_NUMBERINGS:
            raise ValueError(f"numbering must be one of {MONTH_FORM_NUMBERINGS}")

    @property
    def first_regular_month(self) -> int:
        """Number given to the month following the exceptional one."""
        return {"algebraic": 0, "ordinal": 1, "troesch": self.exceptional_month + 1}[self.numbering]

    def regularize(self, y: int, m: int) -> Tuple[int, int]:
        N, E = self.months_in_year, self.exceptional_month
        if m > E:
            shift = -(E + 1)
        else:
            y -= 1
            shift = N - E - 1
        return y, m + shift + self.first_regular_month

    def deregularize(self, y: int, m: int) -> Tuple[int, int]:
        N, E = self.months_in_year, self.exceptional_month
        m0 = m - self.first_regular_month
        if m0 < N - E:
            return y, m0 + E + 1
        return y + 1, m0 - (N - E - 1)
