"""Global element, type and key constraint index."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from lxml import etree

from soap_schema_extractor.document_ingestion.constants import xs_tag
from soap_schema_extractor.document_ingestion.namespace_indexer import SchemaSection

from .qualified_names import QualifiedName
from .resolution_outcomes import NOT_FOUND, Resolution, ResolutionKind

logger = logging.getLogger(__name__)

_TYPE_TAGS = (xs_tag("complexType"), xs_tag("simpleType"))
_CONSTRAINT_TAGS = (xs_tag("key"), xs_tag("unique"))


@dataclass(frozen=True)
class GlobalSymbolIndex:
    """Read-only lookup tables built once per conversion.

    Elements and types live in separate maps that share the same key space;
    ``resolve`` consults elements first because a reference does not always
    say which kind of definition it targets. Every declaration of a global
    element is kept so partial definitions from several documents can be
    merged; ``elements`` holds the first one, which references resolve to.
    """

    element_declarations: Mapping[QualifiedName, tuple[etree._Element, ...]]
    elements: Mapping[QualifiedName, etree._Element]
    types: Mapping[QualifiedName, etree._Element]
    keys: Mapping[QualifiedName, frozenset[str]]

    def resolve(self, name: QualifiedName | None) -> Resolution:
        """Look up a qualified name, preferring element declarations over types."""
        if name is None:
            return NOT_FOUND
        element = self.elements.get(name)
        if element is not None:
            return Resolution(kind=ResolutionKind.FOUND_ELEMENT, name=name, node=element)
        type_definition = self.types.get(name)
        if type_definition is not None:
            return Resolution(kind=ResolutionKind.FOUND_TYPE, name=name, node=type_definition)
        return NOT_FOUND

    def key_fields(self, name: QualifiedName) -> frozenset[str]:
        """Return the constrained field names declared for an element, if any."""
        return self.keys.get(name, frozenset())


def build_symbol_index(sections: Iterable[SchemaSection]) -> GlobalSymbolIndex:
    """Index top-level named elements and types plus single-field key constraints."""
    elements: dict[QualifiedName, list[etree._Element]] = {}
    types: dict[QualifiedName, etree._Element] = {}
    keys: dict[QualifiedName, set[str]] = {}

    for section in sections:
        namespace = section.target_namespace
        for child in section.root.iterchildren(xs_tag("element"), *_TYPE_TAGS):
            name = child.get("name")
            if not name:
                continue
            qualified_name = QualifiedName(namespace, name)
            if child.tag == xs_tag("element"):
                elements.setdefault(qualified_name, []).append(child)
            else:
                _register_type(types, qualified_name, child, section.document_name)
        for constraint in section.root.iter(*_CONSTRAINT_TAGS):
            _register_constraint(keys, constraint, namespace)

    return GlobalSymbolIndex(
        element_declarations=MappingProxyType(
            {name: tuple(declarations) for name, declarations in elements.items()}
        ),
        elements=MappingProxyType(
            {name: declarations[0] for name, declarations in elements.items()}
        ),
        types=MappingProxyType(types),
        keys=MappingProxyType({name: frozenset(fields) for name, fields in keys.items()}),
    )


def _register_type(
    types: dict[QualifiedName, etree._Element],
    name: QualifiedName,
    node: etree._Element,
    document_name: str,
) -> None:
    if name in types:
        logger.debug("Keeping first definition of %s; duplicate in %s ignored", name, document_name)
        return
    types[name] = node


def _register_constraint(
    keys: dict[QualifiedName, set[str]], constraint: etree._Element, namespace: str
) -> None:
    selectors = list(constraint.iterchildren(xs_tag("selector")))
    fields = list(constraint.iterchildren(xs_tag("field")))
    if len(selectors) != 1 or len(fields) != 1:
        logger.debug(
            "Skipping constraint %s: expected one selector and one field", constraint.get("name")
        )
        return
    selector_path = (selectors[0].get("xpath") or "").strip()
    field_path = (fields[0].get("xpath") or "").strip()
    if not _is_single_segment(selector_path) or not _is_single_segment(field_path):
        logger.debug("Skipping constraint %s: multi-segment path", constraint.get("name"))
        return
    owner = _enclosing_element_name(constraint)
    if owner is None:
        return
    keys.setdefault(QualifiedName(namespace, owner), set()).add(_field_local_name(field_path))


def _is_single_segment(path: str) -> bool:
    return bool(path) and "/" not in path and "|" not in path


def _field_local_name(path: str) -> str:
    return path.lstrip("@").rpartition(":")[2]


def _enclosing_element_name(node: etree._Element) -> str | None:
    for ancestor in node.iterancestors(xs_tag("element")):
        name = ancestor.get("name")
        if name:
            return name
    return None
