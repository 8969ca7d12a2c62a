import random

import pytest

from calschema.core.errors import UnsupportedOperationError
from calschema.core.types import Yedoy, Yemo, Yemoda
from calschema.schemas.base import CalendricalSchema, classify_profile
from calschema.schemas.gregorian import GregorianSchema, JulianSchema
from calschema.schemas.islamic import TabularIslamicSchema
from calschema.schemas.lunisolar import LunisolarSchema
from calschema.schemas.perennial import PaxSchema, PositivistSchema
from calschema.schemas.persian import Persian2820Schema
from calschema.schemas.ptolemaic import Coptic12Schema, Coptic13Schema, Egyptian12Schema, Egyptian13Schema
from calschema.schemas.tropicalia import TropicaliaSchema

SCHEMAS = [
    GregorianSchema(),
    JulianSchema(),
    TabularIslamicSchema(),
    Coptic12Schema(),
    Coptic13Schema(),
    Egyptian12Schema(),
    Egyptian13Schema(),
    Persian2820Schema(),
    TropicaliaSchema(),
    PositivistSchema(),
    PaxSchema(),
    LunisolarSchema(),
]


def year_bounds(schema):
    lo, hi = schema.supported_years.endpoints
    return max(lo, -3000), min(hi, 6000)


def random_date(schema, rng):
    y = rng.randint(*year_bounds(schema))
    m = rng.randint(1, schema.count_months_in_year(y))
    d = rng.randint(1, schema.count_days_in_month(y, m))
    return y, m, d


@pytest.fixture(params=SCHEMAS, ids=lambda s: s.name)
def schema(request):
    return request.param


# ---------------------------------------------------------
# Laws every schema obeys
# ---------------------------------------------------------

def test_date_round_trip(schema):
    rng = random.Random(42)
    for _ in range(1000):
        y, m, d = random_date(schema, rng)
        n = schema.count_days_since_epoch(y, m, d)
        assert schema.get_date_parts(n) == Yemoda(y, m, d)


def test_day_count_round_trip(schema):
    rng = random.Random(42)
    lo = schema.get_start_of_year(year_bounds(schema)[0])
    hi = schema.get_start_of_year(year_bounds(schema)[1])
    for _ in range(1000):
        n = rng.randint(lo, hi)
        assert schema.count_days_since_epoch(*schema.get_date_parts(n)) == n
        y, doy = schema.get_year(n)
        assert schema.count_days_since_epoch_ordinal(y, doy) == n
        assert schema.get_ordinal_parts(n) == Yedoy(y, doy)


def test_consecutive_days(schema):
    # Walk a few years day by day: the next day is the next date.
    y0 = max(1, schema.supported_years.min_year)
    n = schema.get_start_of_year(y0)
    prev = schema.get_date_parts(n)
    assert prev == Yemoda(y0, 1, 1)
    for n in range(n + 1, schema.get_start_of_year(y0 + 9)):
        cur = schema.get_date_parts(n)
        if cur.day == 1:
            assert prev.day == schema.count_days_in_month(prev.year, prev.month)
            if cur.month == 1:
                assert (cur.year, prev.month) == (prev.year + 1, schema.count_months_in_year(prev.year))
            else:
                assert (cur.year, cur.month) == (prev.year, prev.month + 1)
        else:
            assert (cur.year, cur.month, cur.day) == (prev.year, prev.month, prev.day + 1)
        prev = cur


def test_year_lengths_add_up(schema):
    for y in list(range(-40, 40)) + list(range(1890, 2110)):
        if y not in schema.supported_years:
            continue
        months = schema.count_months_in_year(y)
        days = schema.count_days_in_year(y)
        assert schema.get_start_of_year(y + 1) - schema.get_start_of_year(y) == days
        assert sum(schema.count_days_in_month(y, m) for m in range(1, months + 1)) == days
        assert schema.count_days_in_year_before_month(y, 1) == 0
        assert schema.get_end_of_year(y) == schema.get_start_of_year(y + 1) - 1
        assert schema.get_date_parts_at_end_of_year(y) == schema.get_date_parts(schema.get_end_of_year(y))
        assert days >= schema.min_days_in_year


def test_get_month_inverts_get_day_of_year(schema):
    rng = random.Random(7)
    for _ in range(500):
        y, m, d = random_date(schema, rng)
        doy = schema.get_day_of_year(y, m, d)
        assert schema.get_month(y, doy) == (m, d)


def test_start_and_end_of_month(schema):
    rng = random.Random(11)
    for _ in range(200):
        y, m, _ = random_date(schema, rng)
        start, end = schema.get_start_of_month(y, m), schema.get_end_of_month(y, m)
        assert schema.get_date_parts(start) == Yemoda(y, m, 1)
        assert schema.get_date_parts(end) == Yemoda(y, m, schema.count_days_in_month(y, m))
        assert schema.count_days_in_year_after_month(y, m) == schema.get_end_of_year(y) - end


def test_month_count_round_trip(schema):
    rng = random.Random(5)
    for _ in range(500):
        y, m, _ = random_date(schema, rng)
        n = schema.count_months_since_epoch(y, m)
        assert schema.get_month_parts(n) == Yemo(y, m)
        assert schema.count_months_since_epoch(y + 1, 1) - schema.count_months_since_epoch(y, 1) == (
            schema.count_months_in_year(y)
        )


def test_epoch(schema):
    if 1 in schema.supported_years:
        assert schema.get_start_of_year(1) == 0
        assert schema.get_date_parts(0) == Yemoda(1, 1, 1)
        assert schema.count_months_since_epoch(1, 1) == 0


def test_domain(schema):
    lo, hi = schema.supported_years.endpoints
    assert schema.domain.endpoints == (schema.get_start_of_year(lo), schema.get_end_of_year(hi))


# ---------------------------------------------------------
# Gregorian and Julian
# ---------------------------------------------------------

def test_gregorian_2000_01_01():
    schema = GregorianSchema()
    n = schema.count_days_since_epoch(2000, 1, 1)
    assert n == 730_119
    assert schema.get_date_parts(n) == Yemoda(2000, 1, 1)
    assert schema.is_leap_year(2000)
    assert schema.count_days_in_month(2000, 2) == 29
    assert not schema.is_leap_year(1900)
    assert schema.count_days_in_year_after_month(2000, 2) == 306
    assert schema.is_intercalary_day(2000, 2, 29)


def test_gregorian_fast_paths_agree_with_the_generic_ones():
    schema = GregorianSchema()
    rng = random.Random(42)
    for _ in range(1000):
        y, m, d = random_date(schema, rng)
        n = schema.count_days_since_epoch(y, m, d)
        assert n == CalendricalSchema.count_days_since_epoch(schema, y, m, d)
        assert schema.get_date_parts(n) == CalendricalSchema.get_date_parts(schema, n)


def test_julian():
    schema = JulianSchema()
    assert schema.count_days_since_epoch(2000, 1, 1) == 730_134
    assert schema.is_leap_year(1900)
    assert schema.get_date_parts(-1) == Yemoda(0, 12, 31)
    assert schema.count_days_in_year(0) == 366


# ---------------------------------------------------------
# Other schemas
# ---------------------------------------------------------

def test_tabular_islamic():
    schema = TabularIslamicSchema()
    leap = [y for y in range(1, 31) if schema.is_leap_year(y)]
    assert leap == [2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29]
    assert schema.get_start_of_year(31) == 10_631
    assert schema.count_days_in_month(2, 12) == 30
    assert schema.count_days_in_month(1, 12) == 29
    assert schema.is_intercalary_day(2, 12, 30)


def test_ptolemaic():
    coptic12, coptic13 = Coptic12Schema(), Coptic13Schema()
    assert [y for y in range(1, 9) if coptic12.is_leap_year(y)] == [3, 7]
    assert coptic12.count_days_in_month(3, 12) == 36
    assert coptic12.get_date_parts(coptic12.get_end_of_year(3)) == Yemoda(3, 12, 36)
    assert coptic13.get_date_parts(coptic13.get_end_of_year(3)) == Yemoda(3, 13, 6)
    # Same days, different months.
    assert coptic12.count_days_since_epoch(5, 12, 33) == coptic13.count_days_since_epoch(5, 13, 3)

    egyptian = Egyptian12Schema()
    assert not any(egyptian.is_leap_year(y) for y in range(-10, 10))
    assert egyptian.leap_unit == "none"
    assert egyptian.get_start_of_year(-1) == -730


def test_epagomenal_days():
    coptic12, coptic13 = Coptic12Schema(), Coptic13Schema()
    assert coptic12.get_epagomenal_number(3, 12, 36) == 6
    assert coptic12.get_epagomenal_number(1, 12, 31) == 1
    assert coptic12.get_epagomenal_number(1, 12, 30) is None
    assert coptic13.get_epagomenal_number(1, 13, 5) == 5
    assert coptic13.get_epagomenal_number(1, 12, 30) is None
    assert coptic12.is_supplementary_day(1, 12, 31)
    assert Egyptian13Schema().get_epagomenal_number(1, 13, 1) == 1
    with pytest.raises(UnsupportedOperationError):
        GregorianSchema().get_epagomenal_number(1, 1, 1)


def test_persian():
    schema = Persian2820Schema()
    assert sum(schema.is_leap_year(y) for y in range(475, 475 + 2820)) == 683
    assert sum(schema.is_leap_year(y) for y in range(475, 475 + 128)) == 31
    assert schema.count_days_in_month(1, 7) == 30
    assert schema.count_days_in_year_before_month(1, 7) == 186
    for y in (473, 474, 475, 3293, 3294, 3295, -2346, -2347):
        assert schema.get_start_of_year(y + 1) - schema.get_start_of_year(y) == schema.count_days_in_year(y)


def test_tropicalia():
    schema = TropicaliaSchema()
    assert schema.is_leap_year(124)
    assert not schema.is_leap_year(128)
    assert schema.count_days_since_epoch(128, 3, 1) == 46_445
    assert schema.count_days_since_epoch(124, 2, 29) == 44_984
    assert schema.get_start_of_year(129) == 46_751


def test_positivist():
    schema = PositivistSchema()
    assert schema.count_days_in_month(2000, 13) == 30
    assert schema.count_days_in_month(2001, 13) == 29
    assert schema.get_date_parts(schema.get_end_of_year(2000)) == Yemoda(2000, 13, 30)
    assert schema.is_blank_day(2001, 13, 29)
    assert not schema.is_blank_day(2001, 13, 28)
    assert [schema.is_supplementary_day(2000, 13, d) for d in (28, 29, 30)] == [False, True, True]
    assert schema.is_intercalary_day(2000, 13, 30)
    assert schema.get_start_of_year(2000) == GregorianSchema().get_start_of_year(2000)


def test_pax():
    schema = PaxSchema()
    assert [schema.is_leap_year(y) for y in (1900, 1999, 2000, 2004, 2006)] == [True, True, False, False, True]
    assert sum(schema.is_leap_year(y) for y in range(1, 401)) == 71
    assert schema.count_months_in_year(2006) == 14
    assert schema.count_days_in_year(2006) == 371
    assert schema.is_pax_month(2006, 13)
    assert not schema.is_pax_month(2005, 13)
    assert schema.count_days_in_month(2006, 13) == 7
    assert schema.get_month(2006, 337) == (13, 1)
    assert schema.get_month(2006, 344) == (14, 1)
    assert schema.get_date_parts_at_end_of_year(2006) == Yemoda(2006, 14, 28)
    assert schema.is_last_month_of_year(2006, 14)
    assert schema.is_last_month_of_year(2005, 13)
    assert not schema.is_last_month_of_year(2006, 13)


def test_lunisolar():
    schema = LunisolarSchema()
    assert [schema.count_months_in_year(y) for y in range(1, 9)] == [12, 12, 12, 13] * 2
    assert schema.count_days_in_year(4) == 384
    assert schema.get_month(4, 355) == (13, 1)
    assert schema.is_intercalary_month(4, 13)
    assert schema.count_days_since_epoch(-4, 1, 1) == -1830
    assert schema.count_months_since_epoch(5, 1) == 49
    assert schema.get_month_parts(48) == Yemo(4, 13)
    assert schema.get_date_parts_at_end_of_year(4) == Yemoda(4, 13, 30)
    assert schema.get_date_parts_at_end_of_year(1) == Yemoda(1, 12, 29)


# ---------------------------------------------------------
# Profiles and capabilities
# ---------------------------------------------------------

@pytest.mark.parametrize(
    "cls,profile",
    [
        (GregorianSchema, "solar12"),
        (JulianSchema, "solar12"),
        (Coptic12Schema, "solar12"),
        (Egyptian12Schema, "solar12"),
        (Persian2820Schema, "solar12"),
        (TropicaliaSchema, "solar12"),
        (PositivistSchema, "solar13"),
        (TabularIslamicSchema, "lunar"),
        (LunisolarSchema, "lunisolar"),
        (Coptic13Schema, "other"),
        (Egyptian13Schema, "other"),
        (PaxSchema, "other"),
    ],
)
def test_profile(cls, profile):
    assert cls().profile == profile


def test_classify_profile():
    assert classify_profile(365, 28, 14) == "other"
    assert classify_profile(354, 29, 13) == "other"
    assert classify_profile(353, 29, None) == "lunisolar"
    assert classify_profile(353, 29, 12) == "other"
    assert classify_profile(300, 30, 12) == "other"


def test_capabilities():
    caps = GregorianSchema().capabilities()
    assert caps.days_in_month_distribution and not caps.epagomenal_days
    assert (caps.family, caps.months_in_year, caps.leap_unit) == ("solar", 12, "day")

    caps = Coptic12Schema().capabilities()
    assert caps.epagomenal_days and not caps.days_in_month_distribution

    caps = PaxSchema().capabilities()
    assert (caps.months_in_year, caps.leap_unit) == (None, "week")
    assert LunisolarSchema().capabilities().leap_unit == "month"


def test_days_in_month_distribution():
    assert sum(GregorianSchema().get_days_in_month_distribution(True)) == 366
    assert sum(TabularIslamicSchema().get_days_in_month_distribution(False)) == 354
    assert Persian2820Schema().get_days_in_month_distribution(False)[-1] == 29
    with pytest.raises(UnsupportedOperationError):
        Coptic12Schema().get_days_in_month_distribution(False)


def test_info():
    info = GregorianSchema().info()
    assert info["name"] == "gregorian"
    assert info["profile"] == "solar12"
    assert info["supported_years"] == (-999_998, 999_999)
    assert info["domain"][0] == GregorianSchema().get_start_of_year(-999_998)


def test_schema_primitives_are_abstract():
    with pytest.raises(TypeError):
        CalendricalSchema()

    class NoMonths(CalendricalSchema):
        def is_leap_year(self, y):
            return False

    with pytest.raises(TypeError):
        NoMonths()


def test_irregular_schema_has_no_fixed_month_count():
    class IrregularGregorian(GregorianSchema):
        months_in_year = None

    schema = IrregularGregorian()
    with pytest.raises(UnsupportedOperationError):
        schema.count_months_in_year(2000)
    with pytest.raises(UnsupportedOperationError):
        schema.count_months_since_epoch(2000, 1)
