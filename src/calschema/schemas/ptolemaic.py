"""
calschema.schemas.ptolemaic
---------------------------
Ptolemaic schemas: twelve months of 30 days followed by 5 epagomenal days
(6 in a leap year). The epagomenal days are either appended to the twelfth
month (the "12" variants) or form a short thirteenth month (the "13"
variants).

  Coptic     leap years y % 4 == 3
  Egyptian   wandering year, no leap years
"""

from __future__ import annotations

from typing import Optional, Tuple

from .base import CalendricalSchema

DAYS_IN_COMMON_YEAR = 365
DAYS_PER_4_YEAR_CYCLE = 4 * 365 + 1


class PtolemaicSchema(CalendricalSchema):
    family = "solar"
    min_days_in_year = DAYS_IN_COMMON_YEAR

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return False

    def count_days_in_year(self, y: int) -> int:
        return DAYS_IN_COMMON_YEAR + 1 if self.is_leap_year(y) else DAYS_IN_COMMON_YEAR

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 30 * (m - 1)


class _Twelve:
    """Epagomenal days appended to the twelfth month (d > 30)."""
    months_in_year = 12
    min_days_in_month = 30

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return d == 36

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return d > 30

    def get_epagomenal_number(self, y: int, m: int, d: int) -> Optional[int]:
        return d - 30 if d > 30 else None

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 12:
            return 36 if self.is_leap_year(y) else 35
        return 30

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        m, d0 = divmod(doy - 1, 30)
        if m == 12:
            # Epagomenal days of the twelfth month.
            return 12, d0 + 31
        return 1 + m, 1 + d0


class _Thirteen:
    """Epagomenal days as a thirteenth month."""
    months_in_year = 13
    min_days_in_month = 5

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 13 and d == 6

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return m == 13

    def get_epagomenal_number(self, y: int, m: int, d: int) -> Optional[int]:
        return d if m == 13 else None

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 13:
            return 6 if self.is_leap_year(y) else 5
        return 30

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        m, d0 = divmod(doy - 1, 30)
        return 1 + m, 1 + d0


class _Coptic:
    leap_unit = "day"

    def is_leap_year(self, y: int) -> bool:
        return y % 4 == 3

    def get_start_of_year(self, y: int) -> int:
        return DAYS_IN_COMMON_YEAR * (y - 1) + y // 4

    def _year_of(self, days_since_epoch: int) -> int:
        return (4 * days_since_epoch + 1463) // DAYS_PER_4_YEAR_CYCLE


class _Egyptian:
    leap_unit = "none"

    def is_leap_year(self, y: int) -> bool:
        return False

    def get_start_of_year(self, y: int) -> int:
        return DAYS_IN_COMMON_YEAR * (y - 1)

    def _year_of(self, days_since_epoch: int) -> int:
        return 1 + days_since_epoch // DAYS_IN_COMMON_YEAR


class Coptic12Schema(_Coptic, _Twelve, PtolemaicSchema):
    name = "coptic12"


class Coptic13Schema(_Coptic, _Thirteen, PtolemaicSchema):
    name = "coptic13"


class Egyptian12Schema(_Egyptian, _Twelve, PtolemaicSchema):
    name = "egyptian12"


class Egyptian13Schema(_Egyptian, _Thirteen, PtolemaicSchema):
    name = "egyptian13"
