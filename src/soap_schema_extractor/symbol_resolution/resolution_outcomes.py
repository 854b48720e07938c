"""Tagged outcomes of global symbol lookups."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lxml import etree

from soap_schema_extractor.document_ingestion.constants import xs_tag

from .qualified_names import QualifiedName


class ResolutionKind(str, Enum):
    """Which table, if any, satisfied a lookup."""

    FOUND_ELEMENT = "found_element"
    FOUND_TYPE = "found_type"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Resolution:
    """Result of resolving a qualified name through the global symbol index."""

    kind: ResolutionKind
    name: QualifiedName | None = None
    node: etree._Element | None = None

    @property
    def is_element(self) -> bool:
        """Return True when the lookup produced a global element declaration."""
        return self.kind is ResolutionKind.FOUND_ELEMENT

    @property
    def is_simple_type(self) -> bool:
        """Return True when the lookup produced a named simple type."""
        return (
            self.kind is ResolutionKind.FOUND_TYPE
            and self.node is not None
            and self.node.tag == xs_tag("simpleType")
        )

    @property
    def is_complex_type(self) -> bool:
        """Return True when the lookup produced a named complex type."""
        return (
            self.kind is ResolutionKind.FOUND_TYPE
            and self.node is not None
            and self.node.tag == xs_tag("complexType")
        )

    @property
    def namespace(self) -> str:
        """Namespace the resolved definition was declared in."""
        return self.name.namespace if self.name is not None else ""


NOT_FOUND = Resolution(kind=ResolutionKind.NOT_FOUND)
