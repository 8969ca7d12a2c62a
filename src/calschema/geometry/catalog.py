"""
calschema.geometry.catalog
--------------------------
Named forms and geometric schemas of well-known calendars.

Gregorian / Julian forms use the regularized year starting on March 1,
so the origin of the "GJ" forms is 0000-03-01 (algebraic numbering,
March = month 0). The Alt* variants are patched to count days from
January 1 instead (-306 days, the length of March..December).
"""

from __future__ import annotations

from ..core.types import Yemoda
from .forms import CenturyForm, MonthForm, YearForm, YearMonthForm
from .schemas import LongCycleSchema, SecondOrderSchema, ThirdOrderSchema, TransformedSchema

# ============================================================
# GREGORIAN / JULIAN
# ============================================================

GJ_ORIGIN = Yemoda(0, 3, 1)

# Days in March..December.
DAYS_FROM_MARCH_TO_JANUARY = 306

GJ_YEAR_FORM = YearForm(1461, 4, 0, origin=GJ_ORIGIN)
GJ_ALT_YEAR_FORM = GJ_YEAR_FORM.patch_value(-DAYS_FROM_MARCH_TO_JANUARY)

# 31, 30, 31, 30, 31, 31, 30, 31, 30, 31, 31, (29)
GJ_MONTH_FORM = MonthForm(153, 5, 2, origin=GJ_ORIGIN)

GREGORIAN_CENTURY_FORM = CenturyForm(146097, 4, 0, origin=GJ_ORIGIN)
GREGORIAN_ALT_CENTURY_FORM = GREGORIAN_CENTURY_FORM.patch_value(-DAYS_FROM_MARCH_TO_JANUARY)

# February.
GJ_EXCEPTIONAL_MONTH = 2


def julian_geometric_schema() -> TransformedSchema:
    return (
        SecondOrderSchema(GJ_YEAR_FORM, GJ_MONTH_FORM)
        .transpose(12, GJ_EXCEPTIONAL_MONTH)
        .rebase(DAYS_FROM_MARCH_TO_JANUARY)
    )


def gregorian_geometric_schema() -> TransformedSchema:
    return (
        ThirdOrderSchema(GREGORIAN_CENTURY_FORM, GJ_YEAR_FORM, GJ_MONTH_FORM)
        .transpose(12, GJ_EXCEPTIONAL_MONTH)
        .rebase(DAYS_FROM_MARCH_TO_JANUARY)
    )


# ============================================================
# TABULAR ISLAMIC
# ============================================================

# Start of year relative to 01/01/0000; encodes the 30-year leap cycle.
ISLAMIC_YEAR_FORM0 = YearForm(10631, 30, 3, origin=Yemoda(0, 1, 1))
ISLAMIC_YEAR_FORM = ISLAMIC_YEAR_FORM0.normalize()

# 30, 29, 30, 29, ..., 29, (30): the last month takes the leap day.
ISLAMIC_MONTH_FORM = MonthForm(325, 11, 5)


def tabular_islamic_geometric_schema() -> SecondOrderSchema:
    return SecondOrderSchema(ISLAMIC_YEAR_FORM, ISLAMIC_MONTH_FORM.with_ordinal_numbering())


# ============================================================
# TROPICALIA
# ============================================================

TROPICALIA_YEARS_PER_CYCLE = 128
TROPICALIA_DAYS_PER_CYCLE = 128 * 365 + 31


def tropicalia_geometric_schema() -> TransformedSchema:
    """
    Julian-like 4-year subcycle inside a 128-year cycle that drops the last
    leap day. The long cycle runs on regularized years (March to February),
    so the dropped day (Feb 29 of years divisible by 128) is the last day
    of the cycle and is never reached.
    """
    inner = SecondOrderSchema(GJ_YEAR_FORM, GJ_MONTH_FORM)
    return (
        LongCycleSchema(inner, TROPICALIA_YEARS_PER_CYCLE, TROPICALIA_DAYS_PER_CYCLE)
        .transpose(12, GJ_EXCEPTIONAL_MONTH)
        .rebase(DAYS_FROM_MARCH_TO_JANUARY)
    )


# ============================================================
# LUNISOLAR (months per year)
# ============================================================

# 12, 12, 12, 13 months, counted from 01/01/0000.
LUNISOLAR_YEAR_MONTH_FORM0 = YearMonthForm(49, 4, 0, origin=Yemoda(0, 1, 1))
LUNISOLAR_YEAR_MONTH_FORM = LUNISOLAR_YEAR_MONTH_FORM0.normalize()

# Leap years are the multiples of 4.
LUNISOLAR_ORDINAL_YEAR_MONTH_FORM = YearMonthForm(49, 4, -49)
