"""
calschema.schemas.interfaces
----------------------------
Contract between the production schemas and the scope layer. Any object
implementing it can be wrapped in a scope, CalendricalSchema being the
stock implementation.
"""

from __future__ import annotations

from typing import Protocol, Tuple

from ..core.types import DayRange, YearRange, Yemoda
from .base import Profile


class SchemaProtocol(Protocol):
    """
    Unvalidated calendrical arithmetic. Inputs are assumed to be valid:
    callers validate through a scope first.
    """

    @property
    def supported_years(self) -> YearRange:
        ...

    @property
    def domain(self) -> DayRange:
        ...

    @property
    def min_days_in_year(self) -> int:
        ...

    @property
    def min_days_in_month(self) -> int:
        ...

    @property
    def profile(self) -> Profile:
        ...

    # ---------------------------------------------------------
    # Used by the validators
    # ---------------------------------------------------------

    def count_months_in_year(self, y: int) -> int:
        ...

    def count_days_in_year(self, y: int) -> int:
        ...

    def count_days_in_month(self, y: int, m: int) -> int:
        ...

    # ---------------------------------------------------------
    # Used by the validated conversions
    # ---------------------------------------------------------

    def get_start_of_year(self, y: int) -> int:
        ...

    def get_end_of_year(self, y: int) -> int:
        ...

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        ...

    def get_date_parts(self, days_since_epoch: int) -> Yemoda:
        ...

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        ...
