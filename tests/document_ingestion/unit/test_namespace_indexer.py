"""Namespace indexing and document classification tests."""

from __future__ import annotations

from soap_schema_extractor.document_ingestion.document_parser import parse_document
from soap_schema_extractor.document_ingestion.namespace_indexer import (
    DocumentKind,
    classify_documents,
    index_namespaces,
)
from soap_schema_extractor.document_ingestion.source_documents import SourceDocument

XSD_WITH_TNS = """
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"
           xmlns:tns="urn:example:a"
           xmlns="urn:example:default"
           targetNamespace="urn:example:a"/>
"""

XSD_WITHOUT_TNS = '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"/>'

WSDL_WITH_EMBEDDED_SCHEMA = """
<wsdl:definitions xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/"
                  xmlns:xs="http://www.w3.org/2001/XMLSchema">
  <wsdl:types>
    <xs:schema targetNamespace="urn:example:embedded"/>
  </wsdl:types>
</wsdl:definitions>
"""


def _parse(name: str, text: str):
    return parse_document(SourceDocument(name=name, text=text))


def test_schema_document_exposes_prefixes_and_target_namespace() -> None:
    namespaces = index_namespaces(_parse("a.xsd", XSD_WITH_TNS))

    assert namespaces.kind is DocumentKind.SCHEMA
    assert namespaces.target_namespace == "urn:example:a"
    assert namespaces.prefixes["tns"] == "urn:example:a"
    assert namespaces.prefixes["xs"] == "http://www.w3.org/2001/XMLSchema"
    assert namespaces.prefixes[""] == "urn:example:default"


def test_missing_target_namespace_is_normalized_to_empty_string() -> None:
    namespaces = index_namespaces(_parse("plain.xsd", XSD_WITHOUT_TNS))

    assert namespaces.kind is DocumentKind.SCHEMA
    assert namespaces.target_namespace == ""


def test_unknown_root_is_ignored() -> None:
    namespaces = index_namespaces(_parse("note.xml", "<note><to>me</to></note>"))

    assert namespaces.kind is DocumentKind.IGNORED


def test_classification_groups_schemas_by_target_namespace() -> None:
    catalog = classify_documents(
        [
            _parse("a.xsd", XSD_WITH_TNS),
            _parse("plain.xsd", XSD_WITHOUT_TNS),
            _parse("a2.xsd", XSD_WITH_TNS),
            _parse("note.xml", "<note/>"),
        ]
    )

    assert set(catalog.schemas_by_namespace) == {"urn:example:a", ""}
    assert [section.document_name for section in catalog.schemas_by_namespace["urn:example:a"]] == [
        "a.xsd",
        "a2.xsd",
    ]
    assert catalog.services == ()


def test_service_description_registers_embedded_schemas() -> None:
    catalog = classify_documents([_parse("service.wsdl", WSDL_WITH_EMBEDDED_SCHEMA)])

    assert [service.document_name for service in catalog.services] == ["service.wsdl"]
    embedded = catalog.schemas_by_namespace["urn:example:embedded"]
    assert len(embedded) == 1
    assert embedded[0].document_name == "service.wsdl"
    assert embedded[0].root.tag == "{http://www.w3.org/2001/XMLSchema}schema"
