"""Source document normalization tests."""

from __future__ import annotations

import pytest
from soap_schema_extractor.document_ingestion.source_documents import (
    SourceDocument,
    normalize_source_documents,
)


def test_single_string_becomes_one_named_document() -> None:
    documents = normalize_source_documents("<a/>")

    assert documents == (SourceDocument(name="input.xml", text="<a/>"),)


def test_string_sequence_gets_positional_names() -> None:
    documents = normalize_source_documents(["<a/>", "<b/>"])

    assert [document.name for document in documents] == ["input-0.xml", "input-1.xml"]
    assert [document.text for document in documents] == ["<a/>", "<b/>"]


def test_mapping_and_pairs_keep_supplied_names_in_order() -> None:
    from_mapping = normalize_source_documents({"service.wsdl": "<a/>", "types.xsd": "<b/>"})
    from_pairs = normalize_source_documents([("service.wsdl", "<a/>"), ("types.xsd", "<b/>")])

    assert from_mapping == from_pairs
    assert [document.name for document in from_mapping] == ["service.wsdl", "types.xsd"]


def test_source_documents_pass_through_unchanged() -> None:
    source = SourceDocument(name="types.xsd", text="<b/>")

    assert normalize_source_documents([source]) == (source,)


def test_empty_sequence_yields_no_documents() -> None:
    assert normalize_source_documents([]) == ()


@pytest.mark.parametrize("invalid", [42, [42], [("name", 42)], {"name": None}])
def test_unsupported_input_raises_type_error(invalid) -> None:
    with pytest.raises(TypeError):
        normalize_source_documents(invalid)
