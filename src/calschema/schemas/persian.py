"""
calschema.schemas.persian
-------------------------
Arithmetical Persian schema (Birashk): a 2820-year grand cycle made of
twenty-one 128-year cycles followed by a 132-year cycle, counting 683 leap
years. Years are shifted so that year 474 starts the grand cycle.
"""

from __future__ import annotations

from typing import Tuple

from .base import CalendricalSchema

DAYS_IN_COMMON_YEAR = 365
DAYS_PER_2820_YEAR_CYCLE = 2820 * DAYS_IN_COMMON_YEAR + 683
DAYS_PER_128_YEAR_SUBCYCLE = 128 * DAYS_IN_COMMON_YEAR + 31
DAYS_IN_YEAR_BEFORE_JULY = 186
YEAR0 = 474

_COMMON_MONTHS = (31,) * 6 + (30,) * 5 + (29,)
_LEAP_MONTHS = (31,) * 6 + (30,) * 6


class Persian2820Schema(CalendricalSchema):
    name = "persian2820"
    family = "solar"
    leap_unit = "day"
    months_in_year = 12
    min_days_in_year = DAYS_IN_COMMON_YEAR
    min_days_in_month = 29

    def is_leap_year(self, y: int) -> bool:
        Y = YEAR0 + (y - YEAR0) % 2820
        return 31 * (Y + 38) % 128 < 31

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return False

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 12 and d == 30

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_days_in_year(self, y: int) -> int:
        return DAYS_IN_COMMON_YEAR + 1 if self.is_leap_year(y) else DAYS_IN_COMMON_YEAR

    def count_days_in_month(self, y: int, m: int) -> int:
        if m < 7:
            return 31
        if m < 12:
            return 30
        return 30 if self.is_leap_year(y) else 29

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 31 * (m - 1) if m <= 7 else 6 + 30 * (m - 1)

    def get_start_of_year(self, y: int) -> int:
        C, Y = divmod(y - YEAR0, 2820)
        Y += YEAR0
        return DAYS_PER_2820_YEAR_CYCLE * C + DAYS_IN_COMMON_YEAR * (Y - 1) + (31 * Y - 5) // 128

    def _year_of(self, days_since_epoch: int) -> int:
        C, D = divmod(days_since_epoch - self.get_start_of_year(YEAR0 + 1), DAYS_PER_2820_YEAR_CYCLE)
        if D == DAYS_PER_2820_YEAR_CYCLE - 1:
            # Last day of the (leap) last year of the grand cycle.
            Y = 2820
        else:
            Y = (128 * D + DAYS_PER_128_YEAR_SUBCYCLE + 127) // DAYS_PER_128_YEAR_SUBCYCLE
        return YEAR0 + 2820 * C + Y

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        m = 1 + d0y // 31 if d0y < DAYS_IN_YEAR_BEFORE_JULY else 1 + (d0y - 6) // 30
        return m, doy - self.count_days_in_year_before_month(y, m)

    def get_days_in_month_distribution(self, leap: bool) -> Tuple[int, ...]:
        return _LEAP_MONTHS if leap else _COMMON_MONTHS
