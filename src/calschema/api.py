from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from .core.registry import SchemaRegistry
from .core.types import YearRange
from .geometry.forms import QuasiAffineForm
from .geometry.troesch import try_convert_code_to_form
from .schemas.base import CalendricalSchema
from .scopes import MinMaxYearScope, StandardScope, YearsLike

_registry: Optional[SchemaRegistry] = None


def set_registry(reg: SchemaRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> SchemaRegistry:
    if _registry is None:
        raise RuntimeError("Schema registry not initialized")
    return _registry


def list_schemas() -> List[str]:
    return _reg().list()


def get_schema(name: str) -> CalendricalSchema:
    return _reg().get(name)


def schema_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()


def register_schema(name: str, schema: CalendricalSchema, *, overwrite: bool = False) -> None:
    _reg().register(name, schema, overwrite=overwrite)


def make_scope(name: str, *, epoch: int = 0, years: Union[YearsLike, str, None] = None) -> MinMaxYearScope:
    """
    Scope over a registered schema: years 1..9999 by default, or the given
    range, or the whole schema range with years="maximal".
    """
    schema = _reg().get(name)
    if years is None:
        return StandardScope(schema, epoch)
    if years == "maximal":
        return MinMaxYearScope.create_maximal(schema, epoch)
    return MinMaxYearScope.create(schema, epoch, years)


def derive_form(code: Sequence[int]) -> Optional[QuasiAffineForm]:
    """Quasi-affine form reproducing the period lengths `code`, or None."""
    return try_convert_code_to_form(code)


def leap_years(name: str, years: YearsLike) -> List[int]:
    schema = _reg().get(name)
    lo, hi = (years if isinstance(years, YearRange) else YearRange(*years)).endpoints
    return [y for y in range(lo, hi + 1) if schema.is_leap_year(y)]
