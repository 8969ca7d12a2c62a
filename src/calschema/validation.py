"""
calschema.validation
--------------------
Pre-validators: check a (month, day) pair or a day of year against a
schema, the year being already validated. The variant is picked from the
schema profile; the profiled ones skip the schema call whenever the day is
below the minimum length of a month (or of a year).
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from .core.errors import OutOfRangeError
from .schemas.interfaces import SchemaProtocol


class PlainPreValidator:
    """Always asks the schema."""

    def __init__(self, schema: SchemaProtocol):
        self.schema = schema

    def validate_month(self, y: int, m: int, param: str = "month") -> None:
        if m < 1 or m > self.schema.count_months_in_year(y):
            raise OutOfRangeError(param, m)

    def validate_month_day(self, y: int, m: int, d: int, param: str = "day") -> None:
        self.validate_month(y, m)
        if d < 1 or d > self.schema.count_days_in_month(y, m):
            raise OutOfRangeError(param, d)

    def validate_day_of_year(self, y: int, doy: int, param: str = "day_of_year") -> None:
        if doy < 1 or doy > self.schema.count_days_in_year(y):
            raise OutOfRangeError(param, doy)


class ProfiledPreValidator(PlainPreValidator):
    months_in_year: Optional[int] = None

    def validate_month(self, y: int, m: int, param: str = "month") -> None:
        if self.months_in_year is None:
            super().validate_month(y, m, param)
        elif m < 1 or m > self.months_in_year:
            raise OutOfRangeError(param, m)

    def validate_month_day(self, y: int, m: int, d: int, param: str = "day") -> None:
        self.validate_month(y, m)
        if d < 1 or (d > self.schema.min_days_in_month and d > self.schema.count_days_in_month(y, m)):
            raise OutOfRangeError(param, d)

    def validate_day_of_year(self, y: int, doy: int, param: str = "day_of_year") -> None:
        if doy < 1 or (doy > self.schema.min_days_in_year and doy > self.schema.count_days_in_year(y)):
            raise OutOfRangeError(param, doy)


class Solar12PreValidator(ProfiledPreValidator):
    months_in_year = 12


class Solar13PreValidator(ProfiledPreValidator):
    months_in_year = 13


class LunarPreValidator(ProfiledPreValidator):
    months_in_year = 12


class LunisolarPreValidator(ProfiledPreValidator):
    pass


PRE_VALIDATORS: Dict[str, Type[PlainPreValidator]] = {
    "solar12": Solar12PreValidator,
    "solar13": Solar13PreValidator,
    "lunar": LunarPreValidator,
    "lunisolar": LunisolarPreValidator,
}


def make_pre_validator(schema: SchemaProtocol) -> PlainPreValidator:
    return PRE_VALIDATORS.get(schema.profile, PlainPreValidator)(schema)
