"""Recursive flattening of schema element declarations into attributes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from lxml import etree

from soap_schema_extractor.document_ingestion.constants import XS_NAMESPACE, xs_tag
from soap_schema_extractor.document_ingestion.document_parser import SchemaConversionError
from soap_schema_extractor.symbol_resolution.conversion_context import ConversionContext
from soap_schema_extractor.symbol_resolution.qualified_names import QualifiedName, resolve_qname

from .schema_models import Attribute, AttributeType

logger = logging.getLogger(__name__)

FALLBACK_ATTRIBUTE_NAME = "field"
UNBOUNDED = "unbounded"

PRIMITIVE_TYPES: Mapping[str, AttributeType] = MappingProxyType(
    {
        "string": AttributeType.STRING,
        "normalizedString": AttributeType.STRING,
        "token": AttributeType.STRING,
        "language": AttributeType.STRING,
        "Name": AttributeType.STRING,
        "NCName": AttributeType.STRING,
        "ID": AttributeType.STRING,
        "IDREF": AttributeType.STRING,
        "anyURI": AttributeType.STRING,
        "QName": AttributeType.STRING,
        "boolean": AttributeType.BOOL,
        "byte": AttributeType.INT,
        "short": AttributeType.INT,
        "int": AttributeType.INT,
        "integer": AttributeType.INT,
        "long": AttributeType.INT,
        "nonNegativeInteger": AttributeType.INT,
        "positiveInteger": AttributeType.INT,
        "nonPositiveInteger": AttributeType.INT,
        "negativeInteger": AttributeType.INT,
        "unsignedByte": AttributeType.INT,
        "unsignedShort": AttributeType.INT,
        "unsignedInt": AttributeType.INT,
        "unsignedLong": AttributeType.INT,
        "decimal": AttributeType.INT,
        "float": AttributeType.INT,
        "double": AttributeType.INT,
        "date": AttributeType.DATETIME,
        "dateTime": AttributeType.DATETIME,
        "time": AttributeType.DATETIME,
    }
)

_COMPOSITOR_TAGS = frozenset({xs_tag("sequence"), xs_tag("all"), xs_tag("choice")})
_CONTENT_TAGS = frozenset({xs_tag("complexContent"), xs_tag("simpleContent")})


class RecursionLimitExceeded(SchemaConversionError):
    """Raised when reference or type indirection nests deeper than allowed."""

    def __init__(self, element_name: str, limit: int) -> None:
        super().__init__(
            f"Recursion limit of {limit} exceeded while flattening element '{element_name}'."
        )
        self.element_name = element_name
        self.limit = limit


@dataclass(frozen=True)
class _Occurrence:
    """Declaration being walked plus the name and bounds it is used with.

    A reference or a named type is walked in place of the declaring node, with
    name and multiplicity taken from the site that used it, so indexed nodes
    are never copied or modified.
    """

    node: etree._Element
    name: str | None
    multi_value: bool


def attribute_type_for(type_name: QualifiedName | None) -> AttributeType | None:
    """Map an XML Schema built-in type to an attribute type.

    Returns None for names outside the XML Schema namespace. Built-ins without
    a dedicated mapping are treated as strings.
    """
    if type_name is None or type_name.namespace != XS_NAMESPACE:
        return None
    return PRIMITIVE_TYPES.get(type_name.local_name, AttributeType.STRING)


def is_multi_valued(node: etree._Element) -> bool:
    """Return True when ``maxOccurs`` allows more than one occurrence."""
    max_occurs = (node.get("maxOccurs") or "1").strip()
    if max_occurs == UNBOUNDED:
        return True
    try:
        return int(max_occurs) > 1
    except ValueError:
        return False


class ElementWalker:
    """Flattens element declarations using one conversion's indices."""

    def __init__(self, context: ConversionContext) -> None:
        self._context = context

    def walk(
        self, element: etree._Element, target_namespace: str, *, repeated: bool = False
    ) -> list[Attribute]:
        """Return the attributes contributed by ``element``, in declaration order.

        Args:
          element: An ``xs:element`` declaration.
          target_namespace: Namespace the declaration belongs to.
          repeated: Marks every produced attribute as multi-valued.

        Raises:
          RecursionLimitExceeded: If indirection nests deeper than the context allows.
        """
        attributes: list[Attribute] = []
        occurrence = _Occurrence(
            node=element,
            name=element.get("name"),
            multi_value=repeated or is_multi_valued(element),
        )
        try:
            self._walk_occurrence(occurrence, target_namespace, attributes, depth=0)
        except RecursionError as exc:
            # The interpreter stack ran out before max_depth was reached.
            raise RecursionLimitExceeded(
                occurrence.name or FALLBACK_ATTRIBUTE_NAME, self._context.max_depth
            ) from exc
        return attributes

    def _walk_occurrence(
        self, occurrence: _Occurrence, namespace: str, into: list[Attribute], depth: int
    ) -> None:
        if depth > self._context.max_depth:
            raise RecursionLimitExceeded(
                occurrence.name or FALLBACK_ATTRIBUTE_NAME, self._context.max_depth
            )
        element = occurrence.node
        name = occurrence.name
        multi_value = occurrence.multi_value

        reference = element.get("ref")
        if reference and not element.get("name"):
            self._walk_reference(occurrence, reference, into, depth)
            return

        declared_type = resolve_qname(element.get("type"), element)
        primitive = attribute_type_for(declared_type)
        if primitive is not None:
            into.append(_attribute(name, primitive, multi_value))
            return

        if element.find(xs_tag("simpleType")) is not None:
            into.append(_attribute(name, AttributeType.STRING, multi_value))
            return
        inline_complex = element.find(xs_tag("complexType"))
        if inline_complex is not None:
            self._walk_complex_type(inline_complex, name, namespace, multi_value, into, depth + 1)
            return

        if declared_type is not None:
            resolution = self._context.symbols.resolve(declared_type)
            if resolution.is_simple_type:
                into.append(_attribute(name, AttributeType.STRING, multi_value))
                return
            if resolution.is_complex_type and resolution.node is not None:
                self._walk_complex_type(
                    resolution.node, name, resolution.namespace, multi_value, into, depth + 1
                )
                return
            logger.debug("Unresolved type %s on element %s", declared_type, name)

        into.append(_attribute(name, AttributeType.STRING, multi_value))

    def _walk_reference(
        self, occurrence: _Occurrence, reference: str, into: list[Attribute], depth: int
    ) -> None:
        referencing = occurrence.node
        target = resolve_qname(reference, referencing)
        resolution = self._context.symbols.resolve(target)
        if resolution.is_element and resolution.node is not None:
            # Bounds come from the referencing site, never from the global declaration.
            resolved = _Occurrence(
                node=resolution.node,
                name=resolution.node.get("name"),
                multi_value=occurrence.multi_value,
            )
            self._walk_occurrence(resolved, resolution.namespace, into, depth + 1)
            return
        logger.debug("Unresolved element reference %s", reference)
        fallback_name = target.local_name if target is not None else None
        into.append(_attribute(fallback_name, AttributeType.STRING, occurrence.multi_value))

    def _walk_complex_type(
        self,
        complex_type: etree._Element,
        element_name: str | None,
        namespace: str,
        repeated: bool,
        into: list[Attribute],
        depth: int,
    ) -> None:
        if depth > self._context.max_depth:
            raise RecursionLimitExceeded(
                element_name or FALLBACK_ATTRIBUTE_NAME, self._context.max_depth
            )
        for child in complex_type.iterchildren():
            if child.tag in _COMPOSITOR_TAGS:
                self._walk_particles(child, namespace, repeated, into, depth)
            elif child.tag in _CONTENT_TAGS:
                self._walk_derivation(child, element_name, namespace, repeated, into, depth)
            elif child.tag == xs_tag("attribute"):
                self._append_attribute_declaration(child, into)

    def _walk_particles(
        self,
        compositor: etree._Element,
        namespace: str,
        repeated: bool,
        into: list[Attribute],
        depth: int,
    ) -> None:
        repeated = repeated or is_multi_valued(compositor)
        for child in compositor.iterchildren():
            if child.tag == xs_tag("element"):
                occurrence = _Occurrence(
                    node=child,
                    name=child.get("name"),
                    multi_value=repeated or is_multi_valued(child),
                )
                self._walk_occurrence(occurrence, namespace, into, depth + 1)
            elif child.tag in _COMPOSITOR_TAGS:
                self._walk_particles(child, namespace, repeated, into, depth)

    def _walk_derivation(
        self,
        content: etree._Element,
        element_name: str | None,
        namespace: str,
        repeated: bool,
        into: list[Attribute],
        depth: int,
    ) -> None:
        for derivation in content.iterchildren(xs_tag("extension"), xs_tag("restriction")):
            base = resolve_qname(derivation.get("base"), derivation)
            if content.tag == xs_tag("simpleContent"):
                value_type = attribute_type_for(base) or AttributeType.STRING
                into.append(_attribute(element_name, value_type, repeated))
            elif derivation.tag == xs_tag("extension"):
                resolution = self._context.symbols.resolve(base)
                if resolution.is_complex_type and resolution.node is not None:
                    self._walk_complex_type(
                        resolution.node,
                        element_name,
                        resolution.namespace,
                        repeated,
                        into,
                        depth + 1,
                    )
            self._walk_complex_type(derivation, element_name, namespace, repeated, into, depth + 1)

    def _append_attribute_declaration(
        self, declaration: etree._Element, into: list[Attribute]
    ) -> None:
        # XML attributes occur at most once per element, even on repeated elements.
        if declaration.get("use") == "prohibited":
            return
        name = declaration.get("name")
        if not name:
            reference = resolve_qname(declaration.get("ref"), declaration)
            if reference is None:
                return
            name = reference.local_name
        declared_type = attribute_type_for(resolve_qname(declaration.get("type"), declaration))
        into.append(_attribute(name, declared_type or AttributeType.STRING, False))


def _attribute(name: str | None, attribute_type: AttributeType, multi_value: bool) -> Attribute:
    return Attribute(
        name=name or FALLBACK_ATTRIBUTE_NAME, type=attribute_type, multi_value=multi_value
    )
