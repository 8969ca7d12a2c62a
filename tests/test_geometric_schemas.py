import random

import pytest

from calschema.core.errors import UnsupportedOperationError
from calschema.core.types import Yemoda
from calschema.geometry import catalog
from calschema.geometry.regularizer import MonthRegularizer
from calschema.geometry.schemas import (
    LongCycleSchema,
    Rebase,
    SecondOrderSchema,
    ThirdOrderSchema,
    TransformedSchema,
    Transpose,
)

BUILDERS = [
    catalog.julian_geometric_schema,
    catalog.gregorian_geometric_schema,
    catalog.tabular_islamic_geometric_schema,
    catalog.tropicalia_geometric_schema,
]


@pytest.mark.parametrize("build", BUILDERS, ids=lambda b: b.__name__)
def test_day_count_round_trip(build):
    schema = build()
    random.seed(42)
    for _ in range(2000):
        n = random.randint(-400_000, 400_000)
        y, m, d = schema.get_date_parts(n)
        assert schema.count_days_since_epoch(y, m, d) == n


@pytest.mark.parametrize("build", BUILDERS, ids=lambda b: b.__name__)
def test_epoch_is_day_zero(build):
    schema = build()
    assert schema.count_days_since_epoch(1, 1, 1) == 0
    assert schema.get_date_parts(0) == Yemoda(1, 1, 1)


def test_gregorian():
    schema = catalog.gregorian_geometric_schema()
    assert schema.count_days_since_epoch(2000, 1, 1) == 730_119
    assert schema.get_date_parts(730_119) == Yemoda(2000, 1, 1)
    # 2000-02-29 exists, 1900-02-29 does not.
    assert schema.get_date_parts(730_119 + 59) == Yemoda(2000, 2, 29)
    n = schema.count_days_since_epoch(1900, 3, 1)
    assert schema.get_date_parts(n - 1) == Yemoda(1900, 2, 28)


def test_julian():
    schema = catalog.julian_geometric_schema()
    assert schema.count_days_since_epoch(2000, 1, 1) == 730_134
    n = schema.count_days_since_epoch(1900, 3, 1)
    assert schema.get_date_parts(n - 1) == Yemoda(1900, 2, 29)
    assert schema.get_date_parts(-1) == Yemoda(0, 12, 31)


def test_tabular_islamic():
    schema = catalog.tabular_islamic_geometric_schema()
    assert schema.count_days_since_epoch(2, 1, 1) == 354
    assert schema.get_year(354) == (2, 1)
    assert schema.count_days_in_year(2) == 355
    assert schema.get_start_of_year(31) == 10_631
    # Last day of the leap year 2.
    assert schema.get_date_parts(354 + 354) == Yemoda(2, 12, 30)


def test_tropicalia_long_cycle():
    schema = catalog.tropicalia_geometric_schema()
    assert schema.count_days_since_epoch(128, 3, 1) == 46_445
    assert schema.count_days_since_epoch(124, 2, 29) == 44_984
    # Year 128 is not leap: the cycle drops its last February 29.
    assert schema.get_date_parts(46_444) == Yemoda(128, 2, 28)
    assert schema.get_date_parts(44_984) == Yemoda(124, 2, 29)


def test_second_order_extras_need_a_normal_year_form():
    schema = SecondOrderSchema(catalog.GJ_YEAR_FORM, catalog.GJ_MONTH_FORM)
    with pytest.raises(UnsupportedOperationError):
        schema.count_days_in_year(1)
    with pytest.raises(UnsupportedOperationError):
        schema.get_year(0)


def test_third_order_splits_the_year():
    schema = ThirdOrderSchema(catalog.GREGORIAN_CENTURY_FORM, catalog.GJ_YEAR_FORM, catalog.GJ_MONTH_FORM)
    # Regularized 0400-03-01 is the start of the 4th century, the first of a 400-year cycle.
    assert schema.count_days_since_epoch(400, 0, 1) == 146_097
    assert schema.get_date_parts(146_097) == Yemoda(400, 0, 1)
    with pytest.raises(ValueError):
        ThirdOrderSchema(catalog.GREGORIAN_CENTURY_FORM, catalog.GJ_YEAR_FORM, catalog.GJ_MONTH_FORM, 0)


def test_long_cycle_rejects_bad_cycle():
    inner = SecondOrderSchema(catalog.GJ_YEAR_FORM, catalog.GJ_MONTH_FORM)
    with pytest.raises(ValueError):
        LongCycleSchema(inner, 0, 46_751)


# ---------------------------------------------------------
# Transform records
# ---------------------------------------------------------

def test_rebase_record():
    t = Rebase(306)
    assert t.to_inner_count(0) == 306
    assert t.from_inner_count(306) == 0
    assert t.to_inner_parts(1, 2, 3) == (1, 2, 3)
    assert t.from_inner_parts(1, 2, 3) == (1, 2, 3)


def test_transpose_record():
    t = Transpose(MonthRegularizer(12, 2))
    assert t.to_inner_parts(2000, 1, 5) == (1999, 10, 5)
    assert t.from_inner_parts(1999, 10, 5) == (2000, 1, 5)
    assert t.to_inner_count(42) == 42
    assert t.from_inner_count(42) == 42


def test_rebases_compose():
    schema = catalog.julian_geometric_schema()
    shifted = schema.rebase(-1)
    assert shifted.count_days_since_epoch(1, 1, 1) == 1
    assert shifted.get_date_parts(1) == Yemoda(1, 1, 1)
    assert shifted.rebase(1).count_days_since_epoch(1, 1, 1) == 0


def test_transforms_are_appended_not_nested():
    schema = catalog.gregorian_geometric_schema()
    assert isinstance(schema.base, ThirdOrderSchema)
    assert [type(t) for t in schema.transforms] == [Transpose, Rebase]
    assert schema.rebase(1).base is schema.base


def test_transpose_numbering_must_match_the_month_form():
    schema = TransformedSchema(SecondOrderSchema(catalog.GJ_YEAR_FORM, catalog.GJ_MONTH_FORM))
    with pytest.raises(ValueError):
        schema.with_transform(Transpose(MonthRegularizer(12, 2, "ordinal")))
