"""
calschema.schemas.gregorian
---------------------------
Gregorian and Julian schemas. Both share the month structure below; they
only differ by their leap rule and their year arithmetic.

    31, 28|29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31

Counting from March, the month lengths follow the form (153, 5, 2), which
is what the fast conversions of the Gregorian schema rely on.
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import Yemoda
from .base import CalendricalSchema

DAYS_IN_COMMON_YEAR = 365
DAYS_PER_4_YEAR_CYCLE = 1461
DAYS_PER_400_YEAR_CYCLE = 146097

# Days in March..December.
DAYS_FROM_MARCH_TO_JANUARY = 306

_COMMON_MONTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_LEAP_MONTHS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class GJSchema(CalendricalSchema):
    """Month structure shared by the Gregorian-like schemas (February is exceptional)."""
    family = "solar"
    leap_unit = "day"
    months_in_year = 12
    min_days_in_year = DAYS_IN_COMMON_YEAR
    min_days_in_month = 28

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return False

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 2 and d == 29

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_days_in_year(self, y: int) -> int:
        return DAYS_IN_COMMON_YEAR + 1 if self.is_leap_year(y) else DAYS_IN_COMMON_YEAR

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 2:
            return 29 if self.is_leap_year(y) else 28
        return 30 + ((m + (m >> 3)) & 1)

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        if m < 3:
            return 31 * (m - 1)
        if self.is_leap_year(y):
            return (153 * m - 157) // 5
        return (153 * m - 162) // 5

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        days_to_march = 59 + int(self.is_leap_year(y))
        if d0y < days_to_march:
            m, d0 = divmod(d0y, 31)
            return 1 + m, 1 + d0
        # March = 0.
        d0y -= days_to_march
        m = (5 * d0y + 2) // 153
        return m + 3, 1 + d0y - (153 * m + 2) // 5

    def get_days_in_month_distribution(self, leap: bool) -> Tuple[int, ...]:
        return _LEAP_MONTHS if leap else _COMMON_MONTHS


class GregorianSchema(GJSchema):
    name = "gregorian"

    def is_leap_year(self, y: int) -> bool:
        return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)

    def get_start_of_year(self, y: int) -> int:
        y -= 1
        c = y // 100
        return DAYS_IN_COMMON_YEAR * y + (y >> 2) - c + (c >> 2)

    def _year_of(self, days_since_epoch: int) -> int:
        # Estimate, then correct by at most one year.
        y = (400 * (days_since_epoch + 2)) // DAYS_PER_400_YEAR_CYCLE
        c = y // 100
        start_of_year_after = DAYS_IN_COMMON_YEAR * y + (y >> 2) - c + (c >> 2)
        return y if days_since_epoch < start_of_year_after else y + 1

    # Fast paths: March-based years and the (146097, 4) / (1461, 4) / (153, 5) forms.

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        if m < 3:
            y -= 1
            m += 9
        else:
            m -= 3
        C, Y = divmod(y, 100)
        return (
            -DAYS_FROM_MARCH_TO_JANUARY
            + ((DAYS_PER_400_YEAR_CYCLE * C) >> 2)
            + ((DAYS_PER_4_YEAR_CYCLE * Y) >> 2)
            + (153 * m + 2) // 5
            + d - 1
        )

    def get_date_parts(self, days_since_epoch: int) -> Yemoda:
        n = days_since_epoch + DAYS_FROM_MARCH_TO_JANUARY
        C = (4 * n + 3) // DAYS_PER_400_YEAR_CYCLE
        D = n - ((DAYS_PER_400_YEAR_CYCLE * C) >> 2)
        Y = (4 * D + 3) // DAYS_PER_4_YEAR_CYCLE
        d0y = D - ((DAYS_PER_4_YEAR_CYCLE * Y) >> 2)
        m = (5 * d0y + 2) // 153
        d = 1 + d0y - (153 * m + 2) // 5
        if m > 9:
            Y += 1
            m -= 9
        else:
            m += 3
        return Yemoda(100 * C + Y, m, d)


class JulianSchema(GJSchema):
    name = "julian"

    def is_leap_year(self, y: int) -> bool:
        return y % 4 == 0

    def get_start_of_year(self, y: int) -> int:
        y -= 1
        return DAYS_IN_COMMON_YEAR * y + (y >> 2)

    def _year_of(self, days_since_epoch: int) -> int:
        return (4 * days_since_epoch + 1464) // DAYS_PER_4_YEAR_CYCLE
