"""Document parser tests."""

from __future__ import annotations

import pytest
from soap_schema_extractor.document_ingestion.document_parser import (
    MalformedDocument,
    SchemaConversionError,
    decode_document,
    parse_document,
)
from soap_schema_extractor.document_ingestion.source_documents import SourceDocument


def test_parses_well_formed_document() -> None:
    parsed = parse_document(
        SourceDocument(
            name="types.xsd",
            text='<?xml version="1.0" encoding="UTF-8"?>'
            '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"/>',
        )
    )

    assert parsed.name == "types.xsd"
    assert parsed.root.tag == "{http://www.w3.org/2001/XMLSchema}schema"


def test_unterminated_tag_raises_malformed_document_with_name() -> None:
    with pytest.raises(MalformedDocument) as exc_info:
        parse_document(SourceDocument(name="broken.xsd", text="<xs:schema><xs:element"))

    assert exc_info.value.document_name == "broken.xsd"
    assert exc_info.value.diagnostic
    assert "broken.xsd" in str(exc_info.value)
    assert isinstance(exc_info.value, SchemaConversionError)


@pytest.mark.parametrize("text", ["", "   \n"])
def test_blank_text_is_malformed(text: str) -> None:
    with pytest.raises(MalformedDocument):
        parse_document(SourceDocument(name="empty.xml", text=text))


def test_comments_are_not_kept_as_children() -> None:
    source = SourceDocument(name="doc.xml", text="<root><!-- note --><child/></root>")
    parsed = parse_document(source)

    assert [child.tag for child in parsed.root] == ["child"]

LATIN1_SCHEMA = (
    '<?xml version="1.0" encoding="ISO-8859-1"?>'
    '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">'
    '<xs:element name="Straße" type="xs:string"/>'
    "</xs:schema>"
)


def test_decoded_text_ignores_declared_encoding() -> None:
    parsed = parse_document(SourceDocument(name="latin1.xsd", text=LATIN1_SCHEMA))

    assert parsed.root[0].get("name") == "Straße"


def test_decode_document_uses_declared_encoding() -> None:
    source = decode_document("latin1.xsd", LATIN1_SCHEMA.encode("iso-8859-1"))

    assert source == SourceDocument(name="latin1.xsd", text=LATIN1_SCHEMA)
    assert parse_document(source).root[0].get("name") == "Straße"


def test_decode_document_defaults_to_utf8_and_strips_bom() -> None:
    text = '<root name="Größe"/>'

    assert decode_document("plain.xml", text.encode("utf-8")).text == text
    assert decode_document("bom.xml", text.encode("utf-8-sig")).text == text


def test_decode_document_reads_utf16_with_bom() -> None:
    text = '<?xml version="1.0" encoding="UTF-16"?><root name="Größe"/>'

    source = decode_document("wide.xml", text.encode("utf-16"))

    assert parse_document(source).root.get("name") == "Größe"


def test_decode_document_rejects_unknown_encoding() -> None:
    data = b'<?xml version="1.0" encoding="no-such-charset"?><root/>'

    with pytest.raises(MalformedDocument) as exc_info:
        decode_document("odd.xml", data)

    assert exc_info.value.document_name == "odd.xml"


def test_decode_document_rejects_bytes_invalid_for_encoding() -> None:
    with pytest.raises(MalformedDocument):
        decode_document("bad.xml", b"<root name='\xff\xfe\xfd'/>")
