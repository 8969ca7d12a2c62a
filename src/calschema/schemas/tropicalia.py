"""
calschema.schemas.tropicalia
----------------------------
Tropicalia: the Gregorian month structure with a 128-year leap cycle,
leap years being the multiples of 4 that are not multiples of 128.
Mean year 365.2421875 days.
"""

from __future__ import annotations

from .gregorian import DAYS_IN_COMMON_YEAR, GJSchema

DAYS_PER_4_YEAR_CYCLE = 4 * DAYS_IN_COMMON_YEAR + 1
DAYS_PER_128_YEAR_CYCLE = 128 * DAYS_IN_COMMON_YEAR + 31


class TropicaliaSchema(GJSchema):
    name = "tropicalia"

    def is_leap_year(self, y: int) -> bool:
        return (y & 3) == 0 and (y & 127) != 0

    def get_start_of_year(self, y: int) -> int:
        y -= 1
        return DAYS_IN_COMMON_YEAR * y + (y >> 2) - (y >> 7)

    def _year_of(self, days_since_epoch: int) -> int:
        C, D = divmod(days_since_epoch, DAYS_PER_128_YEAR_CYCLE)
        return 1 + 128 * C + (4 * D + 3) // DAYS_PER_4_YEAR_CYCLE
