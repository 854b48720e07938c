"""Connector schema JSON rendering tests."""

from __future__ import annotations

import json

from soap_schema_extractor.schema_flattening.schema_models import (
    Attribute,
    AttributeType,
    Entity,
    Schema,
)
from soap_schema_extractor.schema_flattening.schema_serialization import (
    render_schema_json,
    schema_to_dict,
)


def _schema() -> Schema:
    return Schema(
        name="Connector",
        version="1.0.0",
        entities=(
            Entity(
                name="Order",
                attributes=(
                    Attribute(name="id", type=AttributeType.INT, is_key=True),
                    Attribute(name="sku", type=AttributeType.STRING, multi_value=True),
                ),
            ),
        ),
    )


def test_schema_to_dict_emits_is_key_only_for_key_attribute() -> None:
    payload = schema_to_dict(_schema())

    assert payload == {
        "name": "Connector",
        "version": "1.0.0",
        "entities": [
            {
                "name": "Order",
                "attributes": [
                    {"name": "id", "type": "Int", "MultiValue": False, "IsKey": True},
                    {"name": "sku", "type": "String", "MultiValue": True},
                ],
            }
        ],
    }


def test_render_schema_json_is_indented_and_parseable() -> None:
    rendered = render_schema_json(_schema())

    assert rendered.startswith('{\n  "name": "Connector"')
    assert json.loads(rendered) == schema_to_dict(_schema())


def test_empty_schema_renders_empty_entity_list() -> None:
    payload = schema_to_dict(Schema(name="Empty", version="0.1", entities=()))

    assert payload["entities"] == []
