"""
calschema.geometry.schemas
--------------------------
Geometric schemas: date <-> day count conversions assembled from
quasi-affine forms, in the manner of a positional numeral system.

    order 2:  days = year(y) + month(m) + day(d)
    order 3:  days = century(C) + year(Y) + month(m) + day(d),  C, Y = divmod(y, 100)

These schemas are *unvalidated*: the arithmetic assumes pre-validated
input. Epoch shifts and month renumbering are not subclasses but
transform records appended to a pipeline, see TransformedSchema.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

from ..core.errors import UnsupportedOperationError
from ..core.types import Yemoda
from .forms import DAY_FORM, CenturyForm, DayForm, MonthForm, YearForm
from .regularizer import MonthRegularizer

Parts = Tuple[int, int, int]


class GeometricSchema:
    """
    Base of the unvalidated geometric schemas.
    Subclasses implement count_days_since_epoch() and get_date_parts().
    """

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        raise NotImplementedError

    def get_date_parts(self, days_since_epoch: int) -> Yemoda:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Pipeline builders
    # ---------------------------------------------------------

    def rebase(self, offset: int) -> "TransformedSchema":
        return TransformedSchema(self).rebase(offset)

    def transpose(self, months_in_year: int, exceptional_month: int) -> "TransformedSchema":
        return TransformedSchema(self).transpose(months_in_year, exceptional_month)


@dataclass(frozen=True)
class SecondOrderSchema(GeometricSchema):
    """
    Leap-year distribution fully encoded by the year form, intercalary day
    at the end of the (possibly regularized) year. Suits the Julian and
    tabular Islamic calendars.
    """
    year_form: YearForm
    month_form: MonthForm
    day_form: DayForm = DAY_FORM

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        return (
            self.year_form.get_start_of_year(y)
            + self.month_form.count_days_in_year_before_month(m)
            + self.day_form.count_days_in_month_before_day(d)
        )

    def get_date_parts(self, days_since_epoch: int) -> Yemoda:
        y, d0y = self.year_form.get_year(days_since_epoch)
        m, d0 = self.month_form.get_month(d0y)
        return Yemoda(y, m, self.day_form.get_day(d0))

    # Only meaningful when the year form uses the epoch as its origin.

    def count_days_in_year(self, y: int) -> int:
        self._require_normal()
        return self.year_form.count_days_in_year(y)

    def get_start_of_year(self, y: int) -> int:
        self._require_normal()
        return self.year_form.get_start_of_year(y)

    def get_year(self, days_since_epoch: int) -> Tuple[int, int]:
        """Returns (y, doy), doy 1-based."""
        self._require_normal()
        y, d0y = self.year_form.get_year(days_since_epoch)
        return y, 1 + d0y

    def _require_normal(self) -> None:
        if not self.year_form.normal:
            raise UnsupportedOperationError("The year form is not normal, normalize() it first.")


@dataclass(frozen=True)
class ThirdOrderSchema(GeometricSchema):
    """Three-level cycle: century -> year of the century -> month."""
    century_form: CenturyForm
    year_form: YearForm
    month_form: MonthForm
    years_per_century: int = 100
    day_form: DayForm = DAY_FORM

    def __post_init__(self) -> None:
        if self.years_per_century <= 0:
            raise ValueError("years_per_century must be positive")

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        C, Y = divmod(y, self.years_per_century)
        return (
            self.century_form.get_start_of_century(C)
            + self.year_form.get_start_of_year(Y)
            + self.month_form.count_days_in_year_before_month(m)
            + self.day_form.count_days_in_month_before_day(d)
        )

    def get_date_parts(self, days_since_epoch: int) -> Yemoda:
        C, d0c = self.century_form.get_century(days_since_epoch)
        Y, d0y = self.year_form.get_year(d0c)
        m, d0 = self.month_form.get_month(d0y)
        return Yemoda(self.years_per_century * C + Y, m, self.day_form.get_day(d0))


@dataclass(frozen=True)
class LongCycleSchema(GeometricSchema):
    """
    Wraps a short-cycle schema, valid for the years 0..years_per_cycle-1,
    inside an outer division by a long cycle whose leap rule only repeats
    after many years (e.g. the 128-year cycle of Tropicalia).
    """
    inner: GeometricSchema
    years_per_cycle: int
    days_per_cycle: int

    def __post_init__(self) -> None:
        if self.years_per_cycle <= 0 or self.days_per_cycle <= 0:
            raise ValueError("years_per_cycle and days_per_cycle must be positive")

    @property
    def month_form(self) -> MonthForm:
        return self.inner.month_form

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        C, Y = divmod(y, self.years_per_cycle)
        return self.days_per_cycle * C + self.inner.count_days_since_epoch(Y, m, d)

    def get_date_parts(self, days_since_epoch: int) -> Yemoda:
        C, D = divmod(days_since_epoch, self.days_per_cycle)
        Y, m, d = self.inner.get_date_parts(D)
        return Yemoda(self.years_per_cycle * C + Y, m, d)


# ---------------------------------------------------------
# Transform records
# ---------------------------------------------------------

@dataclass(frozen=True)
class Rebase:
    """Shifts the epoch: public day count = inner day count - offset."""
    offset: int

    def to_inner_parts(self, y: int, m: int, d: int) -> Parts:
        return y, m, d

    def from_inner_parts(self, y: int, m: int, d: int) -> Parts:
        return y, m, d

    def to_inner_count(self, days: int) -> int:
        return days + self.offset

    def from_inner_count(self, days: int) -> int:
        return days - self.offset


@dataclass(frozen=True)
class Transpose:
    """Converts between the public ordinal months and the schema's internal numbering."""
    regularizer: MonthRegularizer

    def to_inner_parts(self, y: int, m: int, d: int) -> Parts:
        y, m = self.regularizer.regularize(y, m)
        return y, m, d

    def from_inner_parts(self, y: int, m: int, d: int) -> Parts:
        y, m = self.regularizer.deregularize(y, m)
        return y, m, d

    def to_inner_count(self, days: int) -> int:
        return days

    def from_inner_count(self, days: int) -> int:
        return days


Transform = Union[Rebase, Transpose]


@dataclass(frozen=True)
class TransformedSchema(GeometricSchema):
    """
    A base schema paired with an ordered list of transform records, the
    first record being the innermost one. Records only translate inputs and
    outputs; all the arithmetic is done by the base schema.
    """
    base: GeometricSchema
    transforms: Tuple[Transform, ...] = field(default=())

    @property
    def month_form(self) -> MonthForm:
        return self.base.month_form

    def rebase(self, offset: int) -> "TransformedSchema":
        return TransformedSchema(self.base, self.transforms + (Rebase(offset),))

    def transpose(self, months_in_year: int, exceptional_month: int) -> "TransformedSchema":
        reg = MonthRegularizer(months_in_year, exceptional_month, self.month_form.numbering)
        return self.with_transform(Transpose(reg))

    def with_transform(self, transform: Transform) -> "TransformedSchema":
        if isinstance(transform, Transpose):
            numbering = self.month_form.numbering
            if transform.regularizer.numbering != numbering:
                raise ValueError(
                    f"Regularizer numbering {transform.regularizer.numbering!r} does not match "
                    f"the month form numbering {numbering!r}"
                )
        return TransformedSchema(self.base, self.transforms + (transform,))

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        parts = (y, m, d)
        for t in reversed(self.transforms):
            parts = t.to_inner_parts(*parts)
        days = self.base.count_days_since_epoch(*parts)
        for t in self.transforms:
            days = t.from_inner_count(days)
        return days

    def get_date_parts(self, days_since_epoch: int) -> Yemoda:
        days = days_since_epoch
        for t in reversed(self.transforms):
            days = t.to_inner_count(days)
        parts = tuple(self.base.get_date_parts(days))
        for t in self.transforms:
            parts = t.from_inner_parts(*parts)
        return Yemoda(*parts)
