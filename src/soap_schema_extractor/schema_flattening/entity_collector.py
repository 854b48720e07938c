"""Entity selection, key inference and cross-document merging."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import replace

from soap_schema_extractor.configuration.runtime_settings import Scope
from soap_schema_extractor.symbol_resolution.conversion_context import ConversionContext
from soap_schema_extractor.symbol_resolution.qualified_names import QualifiedName

from .element_walker import ElementWalker
from .schema_models import Attribute, Entity

logger = logging.getLogger(__name__)

_KEY_NAME_PATTERN = re.compile(r"^(id|.*_id|.*Id|.*ID)$")


def collect_entities(
    context: ConversionContext, scope: Scope = Scope.ROOTS_ONLY
) -> tuple[Entity, ...]:
    """Walk every selected global element and merge entities sharing a qualified name.

    Entities are returned in first-discovery order with the namespace dropped
    from their names.
    """
    walker = ElementWalker(context)
    collected: dict[QualifiedName, Entity] = {}
    key_fields = context.symbols.key_fields
    for qualified_name in select_entity_roots(context, scope):
        for element in context.symbols.element_declarations[qualified_name]:
            attributes = deduplicate_attributes(walker.walk(element, qualified_name.namespace))
            entity = Entity(
                name=qualified_name.local_name,
                attributes=infer_key(attributes, key_fields(qualified_name)),
            )
            existing = collected.get(qualified_name)
            collected[qualified_name] = (
                entity if existing is None else merge_entities(existing, entity)
            )
        logger.debug("Collected entity %s", qualified_name)
    return tuple(collected.values())


def select_entity_roots(context: ConversionContext, scope: Scope) -> list[QualifiedName]:
    """Return the distinct global element names to walk for ``scope``, in discovery order."""
    global_elements = list(context.symbols.element_declarations)
    if scope is Scope.ALL:
        return global_elements

    entry_points: list[QualifiedName] = []
    for name in context.entry_points:
        if name in context.symbols.element_declarations:
            entry_points.append(name)
        else:
            logger.debug("Entry point %s has no global element declaration", name)

    if scope is Scope.UNION:
        return list(dict.fromkeys(entry_points + global_elements))
    return entry_points if context.entry_points else global_elements


def deduplicate_attributes(attributes: Iterable[Attribute]) -> list[Attribute]:
    """Drop attributes whose case-insensitive name was already seen."""
    seen: set[str] = set()
    unique: list[Attribute] = []
    for attribute in attributes:
        folded = attribute.name.casefold()
        if folded in seen:
            continue
        seen.add(folded)
        unique.append(attribute)
    return unique


def infer_key(attributes: Sequence[Attribute], key_fields: Iterable[str]) -> tuple[Attribute, ...]:
    """Mark the entity key from declared constraints, else from id-like names.

    Only the first marked attribute keeps the key flag.
    """
    constrained = frozenset(key_fields)
    marked = [
        attribute.as_key() if attribute.name in constrained else attribute
        for attribute in attributes
    ]
    if not any(attribute.is_key for attribute in marked):
        for index, attribute in enumerate(marked):
            if _KEY_NAME_PATTERN.match(attribute.name):
                marked[index] = attribute.as_key()
                break
    return _single_key(marked)


def merge_entities(existing: Entity, incoming: Entity) -> Entity:
    """Union two partial definitions of the same entity.

    New attributes are appended; an existing key flag always wins, otherwise the
    incoming key is carried over to the attribute with the same name.
    """
    attributes = list(existing.attributes)
    positions = {attribute.name.casefold(): index for index, attribute in enumerate(attributes)}
    for attribute in incoming.attributes:
        folded = attribute.name.casefold()
        if folded in positions:
            continue
        positions[folded] = len(attributes)
        attributes.append(replace(attribute, is_key=False))

    incoming_key = incoming.key_attribute
    if existing.key_attribute is None and incoming_key is not None:
        index = positions[incoming_key.name.casefold()]
        attributes[index] = attributes[index].as_key()
    return Entity(name=existing.name, attributes=tuple(attributes))


def _single_key(attributes: Sequence[Attribute]) -> tuple[Attribute, ...]:
    result: list[Attribute] = []
    key_seen = False
    for attribute in attributes:
        if attribute.is_key and key_seen:
            attribute = replace(attribute, is_key=False)
        key_seen = key_seen or attribute.is_key
        result.append(attribute)
    return tuple(result)
