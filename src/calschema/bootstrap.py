from __future__ import annotations

import logging

from calschema.core.registry import SchemaRegistry
from calschema.schemas.specs import ALL_SPECS, make_schema

logger = logging.getLogger(__name__)


def build_registry() -> SchemaRegistry:
    schemas = {}
    for name, spec in ALL_SPECS.items():
        schemas[name] = make_schema(spec)
    logger.debug("schema registry built: %s", sorted(schemas))
    return SchemaRegistry(schemas)
