"""
calschema.schemas.lunisolar
---------------------------
A toy lunisolar schema: months alternate 30 and 29 days, and every fourth
year (y % 4 == 0) gets a thirteenth, intercalary, month of 30 days.

    common year  12 months, 354 days
    leap year    13 months, 384 days

Months since epoch follow the year-month form (49, 4, -49).
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import Yemo
from ..geometry.catalog import LUNISOLAR_ORDINAL_YEAR_MONTH_FORM
from .base import CalendricalSchema

DAYS_IN_COMMON_YEAR = 354
DAYS_IN_LEAP_YEAR = 384


class LunisolarSchema(CalendricalSchema):
    name = "lunisolar"
    family = "lunisolar"
    leap_unit = "month"
    min_days_in_year = DAYS_IN_COMMON_YEAR
    min_days_in_month = 29

    year_month_form = LUNISOLAR_ORDINAL_YEAR_MONTH_FORM

    def is_leap_year(self, y: int) -> bool:
        return y % 4 == 0

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return m == 13

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_months_in_year(self, y: int) -> int:
        return 13 if self.is_leap_year(y) else 12

    def count_days_in_year(self, y: int) -> int:
        return DAYS_IN_LEAP_YEAR if self.is_leap_year(y) else DAYS_IN_COMMON_YEAR

    def count_days_in_month(self, y: int, m: int) -> int:
        return 30 if m % 2 == 1 or m == 13 else 29

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 29 * (m - 1) + m // 2

    def get_start_of_year(self, y: int) -> int:
        y -= 1
        return DAYS_IN_COMMON_YEAR * y + 30 * (y // 4)

    def _year_of(self, days_since_epoch: int) -> int:
        # Every 4-year cycle has 4 * 354 + 30 days.
        y = 1 + (4 * days_since_epoch) // (4 * DAYS_IN_COMMON_YEAR + 30)
        while self.get_start_of_year(y) > days_since_epoch:
            y -= 1
        while self.get_start_of_year(y + 1) <= days_since_epoch:
            y += 1
        return y

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        if d0y >= DAYS_IN_COMMON_YEAR:
            return 13, 1 + d0y - DAYS_IN_COMMON_YEAR
        m = (11 * d0y + 330) // 325
        return m, doy - self.count_days_in_year_before_month(y, m)

    def count_months_since_epoch(self, y: int, m: int) -> int:
        return self.year_month_form.get_start_of_year(y) + m - 1

    def get_month_parts(self, months_since_epoch: int) -> Yemo:
        return self.year_month_form.get_month_parts(months_since_epoch)
