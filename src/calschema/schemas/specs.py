"""
calschema.schemas.specs
-----------------------
Pure data descriptions of the stock schemas. The bootstrap turns them into
live schema objects through make_schema().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Type

from ..geometry import catalog
from ..geometry.schemas import GeometricSchema
from .base import CalendricalSchema
from .gregorian import GregorianSchema, JulianSchema
from .islamic import TabularIslamicSchema
from .lunisolar import LunisolarSchema
from .perennial import PaxSchema, PositivistSchema
from .persian import Persian2820Schema
from .ptolemaic import Coptic12Schema, Coptic13Schema, Egyptian12Schema, Egyptian13Schema
from .tropicalia import TropicaliaSchema


@dataclass(frozen=True)
class SchemaSpec:
    """
    name         registry key
    schema_type  CalendricalSchema subclass to instantiate
    geometric    builder of the equivalent geometric schema, when the
                 calendar is regular enough to have one
    """
    name: str
    schema_type: Type[CalendricalSchema]
    description: str = ""
    geometric: Optional[Callable[[], GeometricSchema]] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must not be empty")
        if not (isinstance(self.schema_type, type) and issubclass(self.schema_type, CalendricalSchema)):
            raise TypeError(f"schema_type must be a CalendricalSchema subclass, got {self.schema_type!r}")


def make_schema(spec: SchemaSpec) -> CalendricalSchema:
    return spec.schema_type()


def make_geometric_schema(spec: SchemaSpec) -> GeometricSchema:
    if spec.geometric is None:
        raise KeyError(f"Schema '{spec.name}' has no geometric counterpart")
    return spec.geometric()


# ============================================================
# STOCK SCHEMAS
# ============================================================

GREGORIAN = SchemaSpec(
    "gregorian", GregorianSchema,
    "Proleptic Gregorian, 400-year cycle.",
    catalog.gregorian_geometric_schema,
)
JULIAN = SchemaSpec(
    "julian", JulianSchema,
    "Proleptic Julian, 4-year cycle.",
    catalog.julian_geometric_schema,
)
TABULAR_ISLAMIC = SchemaSpec(
    "tabular-islamic", TabularIslamicSchema,
    "Tabular Islamic, 30-year cycle, leap day in the twelfth month.",
    catalog.tabular_islamic_geometric_schema,
)
TROPICALIA = SchemaSpec(
    "tropicalia", TropicaliaSchema,
    "Gregorian months, 128-year leap cycle.",
    catalog.tropicalia_geometric_schema,
)
COPTIC12 = SchemaSpec("coptic12", Coptic12Schema, "Coptic, epagomenal days in month 12.")
COPTIC13 = SchemaSpec("coptic13", Coptic13Schema, "Coptic, epagomenal days as month 13.")
EGYPTIAN12 = SchemaSpec("egyptian12", Egyptian12Schema, "Wandering year, epagomenal days in month 12.")
EGYPTIAN13 = SchemaSpec("egyptian13", Egyptian13Schema, "Wandering year, epagomenal days as month 13.")
PERSIAN2820 = SchemaSpec("persian2820", Persian2820Schema, "Arithmetical Persian, 2820-year cycle.")
POSITIVIST = SchemaSpec("positivist", PositivistSchema, "13 x 28 days plus blank days.")
PAX = SchemaSpec("pax", PaxSchema, "Leap-week calendar, 13 or 14 months.")
LUNISOLAR = SchemaSpec("lunisolar", LunisolarSchema, "Toy lunisolar, leap month every fourth year.")

ALL_SPECS: Dict[str, SchemaSpec] = {
    spec.name: spec
    for spec in (
        GREGORIAN,
        JULIAN,
        TABULAR_ISLAMIC,
        TROPICALIA,
        COPTIC12,
        COPTIC13,
        EGYPTIAN12,
        EGYPTIAN13,
        PERSIAN2820,
        POSITIVIST,
        PAX,
        LUNISOLAR,
    )
}
