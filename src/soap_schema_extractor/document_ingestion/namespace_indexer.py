"""Namespace bindings and document classification."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from lxml import etree

from .constants import wsdl_tag, xs_tag
from .document_parser import ParsedDocument

logger = logging.getLogger(__name__)


class DocumentKind(str, Enum):
    """Role a parsed document plays in a conversion."""

    SCHEMA = "schema"
    SERVICE_DESCRIPTION = "service_description"
    IGNORED = "ignored"


@dataclass(frozen=True)
class DocumentNamespaces:
    """Namespace facts read from a document root."""

    kind: DocumentKind
    prefixes: Mapping[str, str]
    target_namespace: str


@dataclass(frozen=True)
class SchemaSection:
    """One ``xs:schema`` element and the namespace its globals belong to."""

    document_name: str
    root: etree._Element
    target_namespace: str


@dataclass(frozen=True)
class ServiceSection:
    """One ``wsdl:definitions`` element."""

    document_name: str
    root: etree._Element


@dataclass(frozen=True)
class DocumentCatalog:
    """Classified sections of one conversion's document set."""

    schemas_by_namespace: Mapping[str, tuple[SchemaSection, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    services: tuple[ServiceSection, ...] = ()

    @property
    def schema_sections(self) -> tuple[SchemaSection, ...]:
        """Return every schema section, grouped by target namespace."""
        return tuple(
            section for sections in self.schemas_by_namespace.values() for section in sections
        )


def index_namespaces(document: ParsedDocument) -> DocumentNamespaces:
    """Read prefix bindings, role and target namespace of a document root."""
    root = document.root
    prefixes = {prefix or "": uri for prefix, uri in root.nsmap.items()}
    root_namespace = etree.QName(root).namespace
    if root.tag == xs_tag("schema"):
        kind = DocumentKind.SCHEMA
    elif root.tag == wsdl_tag("definitions"):
        kind = DocumentKind.SERVICE_DESCRIPTION
    else:
        kind = DocumentKind.IGNORED
        logger.debug(
            "Ignoring document %s with root namespace %s", document.name, root_namespace or "-"
        )
    return DocumentNamespaces(
        kind=kind,
        prefixes=MappingProxyType(prefixes),
        target_namespace=root.get("targetNamespace") or "",
    )


def classify_documents(documents: Iterable[ParsedDocument]) -> DocumentCatalog:
    """Group schema sections by target namespace and collect service descriptions.

    Schemas embedded in a service description's ``wsdl:types`` block are
    registered as schema sections of their own.
    """
    grouped: dict[str, list[SchemaSection]] = {}
    services: list[ServiceSection] = []

    for document in documents:
        namespaces = index_namespaces(document)
        if namespaces.kind is DocumentKind.SCHEMA:
            _add_schema(grouped, document.name, document.root, namespaces.target_namespace)
        elif namespaces.kind is DocumentKind.SERVICE_DESCRIPTION:
            services.append(ServiceSection(document_name=document.name, root=document.root))
            for embedded in _embedded_schemas(document.root):
                _add_schema(
                    grouped, document.name, embedded, embedded.get("targetNamespace") or ""
                )

    return DocumentCatalog(
        schemas_by_namespace=MappingProxyType(
            {namespace: tuple(sections) for namespace, sections in grouped.items()}
        ),
        services=tuple(services),
    )


def _add_schema(
    grouped: dict[str, list[SchemaSection]],
    document_name: str,
    root: etree._Element,
    target_namespace: str,
) -> None:
    grouped.setdefault(target_namespace, []).append(
        SchemaSection(document_name=document_name, root=root, target_namespace=target_namespace)
    )


def _embedded_schemas(definitions: etree._Element) -> list[etree._Element]:
    return [
        schema
        for types in definitions.iterchildren(wsdl_tag("types"))
        for schema in types.iterchildren(xs_tag("schema"))
    ]
