"""
calschema.schemas.base
----------------------
Base class of the production schemas.

A schema is *unvalidated*: every method assumes its arguments are valid
(year in supported_years, month and day in range). Validation happens once,
at the scope boundary (see calschema.scopes).

Subclasses provide the primitives

    is_leap_year, is_intercalary_month, is_intercalary_day, is_supplementary_day,
    count_days_in_year, count_days_in_month, count_days_in_year_before_month,
    get_start_of_year, _year_of, get_month

and inherit every derived conversion. Regular schemas (fixed number of
months) set `months_in_year`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Literal, Optional, Tuple

from ..core.errors import UnsupportedOperationError
from ..core.types import DayRange, Yedoy, Yemo, Yemoda, YearRange

Family = Literal["solar", "lunar", "lunisolar", "other"]
Profile = Literal["solar12", "solar13", "lunar", "lunisolar", "other"]
LeapUnit = Literal["none", "day", "week", "month"]

DEFAULT_SUPPORTED_YEARS = YearRange(-999_998, 999_999)

# Lower bounds used by the profile classification.
SOLAR_MIN_DAYS_IN_YEAR, SOLAR_MIN_DAYS_IN_MONTH = 365, 28
LUNAR_MIN_DAYS_IN_YEAR, LUNAR_MIN_DAYS_IN_MONTH = 354, 29
LUNISOLAR_MIN_DAYS_IN_YEAR, LUNISOLAR_MIN_DAYS_IN_MONTH = 353, 29


def classify_profile(min_days_in_year: int, min_days_in_month: int, months_in_year: Optional[int]) -> Profile:
    """
    Higher values of min_days_in_year are tried first. A non regular schema
    (months_in_year None) with lunar bounds is lunisolar.
    """
    if min_days_in_year >= SOLAR_MIN_DAYS_IN_YEAR and min_days_in_month >= SOLAR_MIN_DAYS_IN_MONTH:
        if months_in_year == 12:
            return "solar12"
        if months_in_year == 13:
            return "solar13"
        return "other"
    if (min_days_in_year >= LUNAR_MIN_DAYS_IN_YEAR
            and min_days_in_month >= LUNAR_MIN_DAYS_IN_MONTH
            and months_in_year == 12):
        return "lunar"
    if min_days_in_year >= LUNISOLAR_MIN_DAYS_IN_YEAR and min_days_in_month >= LUNISOLAR_MIN_DAYS_IN_MONTH:
        return "lunisolar" if months_in_year is None else "other"
    return "other"


@dataclass(frozen=True)
class SchemaCapabilities:
    """What a schema can answer beyond the base contract."""
    family: Family
    profile: Profile
    months_in_year: Optional[int]
    epagomenal_days: bool
    days_in_month_distribution: bool
    leap_unit: LeapUnit


@dataclass(frozen=True)
class RegularMonths:
    """Months since epoch for schemas with a fixed number of months per year."""
    months_in_year: int

    def __post_init__(self) -> None:
        if self.months_in_year < 1:
            raise ValueError("months_in_year must be >= 1")

    def count_months_since_epoch(self, y: int, m: int) -> int:
        return self.months_in_year * (y - 1) + m - 1

    def get_month_parts(self, months_since_epoch: int) -> Yemo:
        y0, m0 = divmod(months_since_epoch, self.months_in_year)
        return Yemo(1 + y0, 1 + m0)


class CalendricalSchema(ABC):
    name: str = "schema"
    family: Family = "other"
    leap_unit: LeapUnit = "day"
    months_in_year: Optional[int] = None
    min_days_in_year: int = 0
    min_days_in_month: int = 0
    supported_years: YearRange = DEFAULT_SUPPORTED_YEARS

    # ---------------------------------------------------------
    # Primitives
    # ---------------------------------------------------------

    @abstractmethod
    def is_leap_year(self, y: int) -> bool:
        ...

    @abstractmethod
    def is_intercalary_month(self, y: int, m: int) -> bool:
        ...

    @abstractmethod
    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        ...

    @abstractmethod
    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        ...

    @abstractmethod
    def count_days_in_year(self, y: int) -> int:
        ...

    @abstractmethod
    def count_days_in_month(self, y: int, m: int) -> int:
        ...

    @abstractmethod
    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        ...

    @abstractmethod
    def get_start_of_year(self, y: int) -> int:
        ...

    @abstractmethod
    def _year_of(self, days_since_epoch: int) -> int:
        ...

    @abstractmethod
    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        """Returns (m, d) for the day of year doy."""
        ...

    # ---------------------------------------------------------
    # Counting months and days within a year or a month
    # ---------------------------------------------------------

    def count_months_in_year(self, y: int) -> int:
        if self.months_in_year is None:
            raise UnsupportedOperationError(f"{self.name} does not have a fixed number of months.")
        return self.months_in_year

    def count_days_in_year_after_month(self, y: int, m: int) -> int:
        return (
            self.count_days_in_year(y)
            - self.count_days_in_year_before_month(y, m)
            - self.count_days_in_month(y, m)
        )

    def get_day_of_year(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_year_before_month(y, m) + d

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    @cached_property
    def _month_counter(self) -> RegularMonths:
        if self.months_in_year is None:
            raise UnsupportedOperationError(f"{self.name} does not have a fixed number of months.")
        return RegularMonths(self.months_in_year)

    def count_months_since_epoch(self, y: int, m: int) -> int:
        return self._month_counter.count_months_since_epoch(y, m)

    def get_month_parts(self, months_since_epoch: int) -> Yemo:
        return self._month_counter.get_month_parts(months_since_epoch)

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        return self.get_start_of_year(y) + self.count_days_in_year_before_month(y, m) + d - 1

    def count_days_since_epoch_ordinal(self, y: int, doy: int) -> int:
        return self.get_start_of_year(y) + doy - 1

    def get_year(self, days_since_epoch: int) -> Tuple[int, int]:
        """Returns (y, doy), doy 1-based."""
        y = self._year_of(days_since_epoch)
        return y, 1 + days_since_epoch - self.get_start_of_year(y)

    def get_date_parts(self, days_since_epoch: int) -> Yemoda:
        y, doy = self.get_year(days_since_epoch)
        m, d = self.get_month(y, doy)
        return Yemoda(y, m, d)

    def get_ordinal_parts(self, days_since_epoch: int) -> Yedoy:
        return Yedoy(*self.get_year(days_since_epoch))

    # ---------------------------------------------------------
    # Start and end of years and months
    # ---------------------------------------------------------

    def get_end_of_year(self, y: int) -> int:
        return self.get_start_of_year(y) + self.count_days_in_year(y) - 1

    def get_start_of_month(self, y: int, m: int) -> int:
        return self.get_start_of_year(y) + self.count_days_in_year_before_month(y, m)

    def get_end_of_month(self, y: int, m: int) -> int:
        return self.get_start_of_month(y, m) + self.count_days_in_month(y, m) - 1

    def get_date_parts_at_end_of_year(self, y: int) -> Yemoda:
        m = self.count_months_in_year(y)
        return Yemoda(y, m, self.count_days_in_month(y, m))

    # ---------------------------------------------------------
    # Attributes and capabilities
    # ---------------------------------------------------------

    @cached_property
    def domain(self) -> DayRange:
        lo, hi = self.supported_years.endpoints
        return DayRange(self.get_start_of_year(lo), self.get_end_of_year(hi))

    @property
    def profile(self) -> Profile:
        return classify_profile(self.min_days_in_year, self.min_days_in_month, self.months_in_year)

    def capabilities(self) -> SchemaCapabilities:
        cls = type(self)
        return SchemaCapabilities(
            family=self.family,
            profile=self.profile,
            months_in_year=self.months_in_year,
            epagomenal_days=cls.get_epagomenal_number is not CalendricalSchema.get_epagomenal_number,
            days_in_month_distribution=(
                cls.get_days_in_month_distribution is not CalendricalSchema.get_days_in_month_distribution
            ),
            leap_unit=self.leap_unit,
        )

    def get_epagomenal_number(self, y: int, m: int, d: int) -> Optional[int]:
        """The rank of an epagomenal day (1-based), None for an ordinary day."""
        raise UnsupportedOperationError(f"{self.name} does not have epagomenal days.")

    def get_days_in_month_distribution(self, leap: bool) -> Tuple[int, ...]:
        raise UnsupportedOperationError(f"{self.name} does not publish a days-in-month distribution.")

    def info(self) -> Dict[str, Any]:
        caps = self.capabilities()
        return {
            "name": self.name,
            "family": caps.family,
            "profile": caps.profile,
            "months_in_year": caps.months_in_year,
            "leap_unit": caps.leap_unit,
            "min_days_in_year": self.min_days_in_year,
            "min_days_in_month": self.min_days_in_month,
            "supported_years": self.supported_years.endpoints,
            "domain": self.domain.endpoints,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
