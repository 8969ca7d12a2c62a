"""
calschema.scopes
----------------
A scope binds a schema to an epoch (the day number of day 0 of the schema)
and to a range of supported years. It is the validation boundary: every
validated conversion checks its arguments here, once, then hands them to
the unvalidated schema arithmetic.

    scope = StandardScope(GregorianSchema())
    scope.validate_year_month_day(2000, 2, 30)   # OutOfRangeError('day')
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple, Union

from .core.errors import DateOverflowError, OutOfRangeError
from .core.types import DayRange, Yemoda, YearRange
from .schemas.interfaces import SchemaProtocol
from .validation import PlainPreValidator, make_pre_validator

logger = logging.getLogger(__name__)

STANDARD_YEARS = YearRange(1, 9999)

YearsLike = Union[YearRange, Tuple[int, int]]


def _as_year_range(years: YearsLike) -> YearRange:
    return years if isinstance(years, YearRange) else YearRange(*years)


@dataclass(frozen=True)
class YearOverflowChecker:
    """Raises DateOverflowError for a year outside the supported range."""
    supported_years: YearRange

    def check(self, y: int) -> None:
        if y not in self.supported_years:
            raise DateOverflowError()

    def check_upper_bound(self, y: int) -> None:
        if y > self.supported_years.max_year:
            raise DateOverflowError()

    def check_lower_bound(self, y: int) -> None:
        if y < self.supported_years.min_year:
            raise DateOverflowError()


@dataclass(frozen=True)
class MinMaxYearScope:
    schema: SchemaProtocol
    epoch: int
    supported_years: YearRange
    pre_validator: PlainPreValidator = field(init=False, repr=False, compare=False)
    year_overflow_checker: YearOverflowChecker = field(init=False, repr=False, compare=False)
    domain: DayRange = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        schema = self.schema
        years = _as_year_range(self.supported_years)
        if not years.is_subset_of(schema.supported_years):
            raise ValueError(
                f"Supported years {years.endpoints} are not a subset of "
                f"the schema range {schema.supported_years.endpoints}"
            )
        lo, hi = years.endpoints
        object.__setattr__(self, "supported_years", years)
        object.__setattr__(self, "pre_validator", make_pre_validator(schema))
        object.__setattr__(self, "year_overflow_checker", YearOverflowChecker(years))
        object.__setattr__(
            self, "domain", DayRange(self.epoch + schema.get_start_of_year(lo), self.epoch + schema.get_end_of_year(hi))
        )

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------

    @staticmethod
    def create(schema: SchemaProtocol, epoch: int, years: YearsLike) -> "MinMaxYearScope":
        return MinMaxYearScope(schema, epoch, years)

    @staticmethod
    def create_maximal(schema: SchemaProtocol, epoch: int = 0) -> "MinMaxYearScope":
        return MinMaxYearScope(schema, epoch, schema.supported_years)

    @staticmethod
    def create_maximal_on_or_after_year1(schema: SchemaProtocol, epoch: int = 0) -> "MinMaxYearScope":
        years = schema.supported_years
        if 1 not in years:
            raise ValueError(f"The schema range {years.endpoints} does not contain the year 1")
        logger.debug("scope: maximal range on or after year 1 for %s", schema)
        return MinMaxYearScope(schema, epoch, years.with_min(1))

    @staticmethod
    def starting_at(schema: SchemaProtocol, epoch: int, year: int) -> "MinMaxYearScope":
        logger.debug("scope: %s starting at year %d", schema, year)
        return MinMaxYearScope(schema, epoch, YearRange(year, schema.supported_years.max_year))

    @staticmethod
    def ending_at(schema: SchemaProtocol, epoch: int, year: int) -> "MinMaxYearScope":
        logger.debug("scope: %s ending at year %d", schema, year)
        return MinMaxYearScope(schema, epoch, YearRange(schema.supported_years.min_year, year))

    # ---------------------------------------------------------
    # Validators
    # ---------------------------------------------------------

    def validate_year(self, y: int, param: str = "year") -> None:
        if y not in self.supported_years:
            raise OutOfRangeError(param, y)

    def validate_year_month(self, y: int, m: int, param: str = "month") -> None:
        self.validate_year(y)
        self.pre_validator.validate_month(y, m, param)

    def validate_year_month_day(self, y: int, m: int, d: int, param: str = "day") -> None:
        self.validate_year(y)
        self.pre_validator.validate_month_day(y, m, d, param)

    def validate_ordinal(self, y: int, doy: int, param: str = "day_of_year") -> None:
        self.validate_year(y)
        self.pre_validator.validate_day_of_year(y, doy, param)

    def validate_day_number(self, day_number: int, param: str = "day_number") -> None:
        if day_number not in self.domain:
            raise OutOfRangeError(param, day_number)

    # ---------------------------------------------------------
    # Validated conversions
    # ---------------------------------------------------------

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        self.validate_year_month_day(y, m, d)
        return self.schema.count_days_since_epoch(y, m, d)

    def get_day_number(self, y: int, m: int, d: int) -> int:
        return self.epoch + self.count_days_since_epoch(y, m, d)

    def get_date_parts(self, day_number: int) -> Yemoda:
        self.validate_day_number(day_number)
        return self.schema.get_date_parts(day_number - self.epoch)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        self.validate_ordinal(y, doy)
        return self.schema.get_month(y, doy)

    def add_days(self, y: int, m: int, d: int, days: int) -> Yemoda:
        """Date `days` days after (y, m, d); DateOverflowError outside the domain."""
        day_number = self.get_day_number(y, m, d) + days
        if day_number not in self.domain:
            raise DateOverflowError()
        parts = self.schema.get_date_parts(day_number - self.epoch)
        self.year_overflow_checker.check(parts.year)
        return parts

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.schema!r}, epoch={self.epoch}, years={self.supported_years.endpoints})"


class StandardScope(MinMaxYearScope):
    """Years 1 to 9999."""

    def __init__(self, schema: SchemaProtocol, epoch: int = 0):
        super().__init__(schema, epoch, STANDARD_YEARS)
