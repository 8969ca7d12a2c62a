"""
calschema.schemas.perennial
---------------------------
Perennial (13 x 28 days) schemas.

  Positivist  thirteen months of 28 days plus one blank day at the end of
              the year (two in a Gregorian leap year), attached to month 13
  Pax         thirteen months of 28 days; a leap year inserts the one-week
              Pax month before the last month, giving 14 months
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import Yemo
from .base import DEFAULT_SUPPORTED_YEARS, CalendricalSchema
from .gregorian import GregorianSchema

DAYS_IN_COMMON_YEAR = 364
DAYS_PER_400_YEAR_CYCLE = 400 * 364 + 71 * 7
MONTHS_PER_400_YEAR_CYCLE = 400 * 13 + 71


class PositivistSchema(CalendricalSchema):
    name = "positivist"
    family = "solar"
    leap_unit = "day"
    months_in_year = 13
    min_days_in_year = 365
    min_days_in_month = 28

    _gregorian = GregorianSchema()

    def is_leap_year(self, y: int) -> bool:
        return self._gregorian.is_leap_year(y)

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return False

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return d == 30

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return self.is_blank_day(y, m, d)

    def is_blank_day(self, y: int, m: int, d: int) -> bool:
        return d > 28

    def count_days_in_year(self, y: int) -> int:
        return 366 if self.is_leap_year(y) else 365

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 13:
            return 30 if self.is_leap_year(y) else 29
        return 28

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 28 * (m - 1)

    def get_start_of_year(self, y: int) -> int:
        return self._gregorian.get_start_of_year(y)

    def _year_of(self, days_since_epoch: int) -> int:
        return self._gregorian._year_of(days_since_epoch)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if doy > 336:
            return 13, doy - 336
        m, d0 = divmod(doy - 1, 28)
        return 1 + m, 1 + d0


class PaxSchema(CalendricalSchema):
    name = "pax"
    family = "other"
    leap_unit = "week"
    min_days_in_year = DAYS_IN_COMMON_YEAR
    min_days_in_month = 7
    supported_years = DEFAULT_SUPPORTED_YEARS.with_min(1)

    def is_leap_year(self, y: int) -> bool:
        Y = y % 100
        # A century always satisfies Y % 6 == 0, but is only leap if it is
        # not a multiple of 400.
        return Y == 99 or (Y % 6 == 0 and (Y != 0 or y % 400 != 0))

    def is_pax_month(self, y: int, m: int) -> bool:
        return m == 13 and self.is_leap_year(y)

    def is_last_month_of_year(self, y: int, m: int) -> bool:
        return m == 14 or (m == 13 and not self.is_leap_year(y))

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return False

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_months_in_year(self, y: int) -> int:
        return 14 if self.is_leap_year(y) else 13

    def count_days_in_year(self, y: int) -> int:
        return 371 if self.is_leap_year(y) else DAYS_IN_COMMON_YEAR

    def count_days_in_month(self, y: int, m: int) -> int:
        return 7 if self.is_pax_month(y, m) else 28

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 343 if m == 14 else 28 * (m - 1)

    def _count_leap_years_before(self, y: int) -> int:
        y -= 1
        C, Y = divmod(y, 100)
        # 18 leap years per century, 17 when the century is a multiple of 400.
        return 18 * C - (C >> 2) + Y // 6 + Y // 99

    def get_start_of_year(self, y: int) -> int:
        return DAYS_IN_COMMON_YEAR * (y - 1) + 7 * self._count_leap_years_before(y)

    def _year_of(self, days_since_epoch: int) -> int:
        y = 1 + (400 * days_since_epoch) // DAYS_PER_400_YEAR_CYCLE
        while self.get_start_of_year(y) > days_since_epoch:
            y -= 1
        while self.get_start_of_year(y + 1) <= days_since_epoch:
            y += 1
        return y

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if doy < 337 or not self.is_leap_year(y):
            m, d0 = divmod(doy - 1, 28)
            return 1 + m, 1 + d0
        if doy < 344:
            return 13, doy - 336
        return 14, doy - 343

    def count_months_since_epoch(self, y: int, m: int) -> int:
        return 13 * (y - 1) + self._count_leap_years_before(y) + m - 1

    def get_month_parts(self, months_since_epoch: int) -> Yemo:
        y = 1 + (400 * months_since_epoch) // MONTHS_PER_400_YEAR_CYCLE
        while self.count_months_since_epoch(y, 1) > months_since_epoch:
            y -= 1
        while self.count_months_since_epoch(y + 1, 1) <= months_since_epoch:
            y += 1
        return Yemo(y, 1 + months_since_epoch - self.count_months_since_epoch(y, 1))
