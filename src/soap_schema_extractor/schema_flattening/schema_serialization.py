"""Connector schema JSON rendering."""

from __future__ import annotations

import json
from typing import Any

from .schema_models import Attribute, Entity, Schema


def schema_to_dict(schema: Schema) -> dict[str, Any]:
    """Return the connector JSON shape consumed by code generation."""
    return {
        "name": schema.name,
        "version": schema.version,
        "entities": [_entity_to_dict(entity) for entity in schema.entities],
    }


def render_schema_json(schema: Schema) -> str:
    """Render the schema as indented JSON text."""
    return json.dumps(schema_to_dict(schema), indent=2, ensure_ascii=False)


def _entity_to_dict(entity: Entity) -> dict[str, Any]:
    return {
        "name": entity.name,
        "attributes": [_attribute_to_dict(attribute) for attribute in entity.attributes],
    }


def _attribute_to_dict(attribute: Attribute) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": attribute.name,
        "type": attribute.type.value,
        "MultiValue": attribute.multi_value,
    }
    if attribute.is_key:
        payload["IsKey"] = True
    return payload
