"""
calschema.schemas.islamic
-------------------------
Tabular Islamic schema: 12 lunar months alternating 30 and 29 days, the
twelfth month taking a leap day 11 times in a 30-year cycle
(years 2, 5, 7, 10, 13, 16, 18, 21, 24, 26 and 29 of the cycle).
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import YearRange
from .base import CalendricalSchema

DAYS_IN_COMMON_YEAR = 354
DAYS_PER_30_YEAR_CYCLE = 30 * 354 + 11

_COMMON_MONTHS = (30, 29) * 6
_LEAP_MONTHS = (30, 29) * 5 + (30, 30)


class TabularIslamicSchema(CalendricalSchema):
    name = "tabular-islamic"
    family = "lunar"
    leap_unit = "day"
    months_in_year = 12
    min_days_in_year = DAYS_IN_COMMON_YEAR
    min_days_in_month = 29
    supported_years = YearRange(-199_999, 200_000)

    def is_leap_year(self, y: int) -> bool:
        return (14 + 11 * y) % 30 < 11

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return False

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 12 and d == 30

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_days_in_year(self, y: int) -> int:
        return DAYS_IN_COMMON_YEAR + 1 if self.is_leap_year(y) else DAYS_IN_COMMON_YEAR

    def count_days_in_month(self, y: int, m: int) -> int:
        if m % 2 == 1 or (m == 12 and self.is_leap_year(y)):
            return 30
        return 29

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 29 * (m - 1) + m // 2

    def get_start_of_year(self, y: int) -> int:
        return DAYS_IN_COMMON_YEAR * (y - 1) + (3 + 11 * y) // 30

    def _year_of(self, days_since_epoch: int) -> int:
        return (30 * days_since_epoch + 10646) // DAYS_PER_30_YEAR_CYCLE

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        m = (11 * d0y + 330) // 325
        return m, doy - self.count_days_in_year_before_month(y, m)

    def get_days_in_month_distribution(self, leap: bool) -> Tuple[int, ...]:
        return _LEAP_MONTHS if leap else _COMMON_MONTHS
