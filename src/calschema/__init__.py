"""calschema public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_schemas,
    get_schema,
    schema_info,
    register_schema,
    make_scope,
    derive_form,
    leap_years,
)
from .core.errors import (
    CalschemaError,
    OutOfRangeError,
    ArithmeticOverflowError,
    DateOverflowError,
    UnsupportedOperationError,
)
from .core.types import Yemoda, Yedoy, Yemo, YearRange, DayRange
from .geometry.troesch import analyze, try_convert_code_to_form
from .scopes import MinMaxYearScope, StandardScope

__all__ = [
    "list_schemas",
    "get_schema",
    "schema_info",
    "register_schema",
    "make_scope",
    "derive_form",
    "leap_years",
    "CalschemaError",
    "OutOfRangeError",
    "ArithmeticOverflowError",
    "DateOverflowError",
    "UnsupportedOperationError",
    "Yemoda",
    "Yedoy",
    "Yemo",
    "YearRange",
    "DayRange",
    "analyze",
    "try_convert_code_to_form",
    "MinMaxYearScope",
    "StandardScope",
]
