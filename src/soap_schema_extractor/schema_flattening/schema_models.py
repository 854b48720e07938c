"""Flattened schema entities."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class AttributeType(str, Enum):
    """Attribute value types understood by connector code generation."""

    STRING = "String"
    INT = "Int"
    BOOL = "Bool"
    DATETIME = "Datetime"


@dataclass(frozen=True)
class Attribute:
    """One flattened attribute of an entity."""

    name: str
    type: AttributeType
    multi_value: bool = False
    is_key: bool = False

    def as_key(self) -> Attribute:
        """Return a copy of this attribute marked as the entity key."""
        return replace(self, is_key=True)


@dataclass(frozen=True)
class Entity:
    """Named entity with attributes unique by case-insensitive name."""

    name: str
    attributes: tuple[Attribute, ...]

    @property
    def key_attribute(self) -> Attribute | None:
        """Return the attribute marked as key, if any."""
        return next((attribute for attribute in self.attributes if attribute.is_key), None)


@dataclass(frozen=True)
class Schema:
    """Connector schema produced by one conversion."""

    name: str
    version: str
    entities: tuple[Entity, ...]
