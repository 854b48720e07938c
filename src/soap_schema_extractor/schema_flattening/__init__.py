"""Schema flattening exports."""

from .conversion import build_schema_from_documents
from .element_walker import ElementWalker, RecursionLimitExceeded, attribute_type_for
from .entity_collector import collect_entities, infer_key, merge_entities
from .schema_models import Attribute, AttributeType, Entity, Schema
from .schema_serialization import render_schema_json, schema_to_dict

__all__ = [
    "Attribute",
    "AttributeType",
    "ElementWalker",
    "Entity",
    "RecursionLimitExceeded",
    "Schema",
    "attribute_type_for",
    "build_schema_from_documents",
    "collect_entities",
    "infer_key",
    "merge_entities",
    "render_schema_json",
    "schema_to_dict",
]
