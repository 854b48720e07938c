"""XML document parsing service."""

from __future__ import annotations

import codecs
import re
from dataclasses import dataclass

from lxml import etree

from .source_documents import SourceDocument

_DECLARED_ENCODING = re.compile(
    rb"^<\?xml[^>]*?\bencoding\s*=\s*[\"']([A-Za-z][A-Za-z0-9._-]*)[\"']"
)


class SchemaConversionError(Exception):
    """Base class for fatal schema conversion failures."""


class MalformedDocument(SchemaConversionError):
    """Raised when a supplied document is not well-formed XML."""

    def __init__(self, document_name: str, diagnostic: str) -> None:
        super().__init__(f"Malformed document '{document_name}': {diagnostic}")
        self.document_name = document_name
        self.diagnostic = diagnostic


@dataclass(frozen=True)
class ParsedDocument:
    """Parsed XML tree bound to the name of its source document."""

    name: str
    root: etree._Element


def _build_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        recover=False,
        encoding="utf-8",
    )


def parse_document(source: SourceDocument) -> ParsedDocument:
    """Parse one source document, failing fast on malformed text.

    The text is already decoded, so an encoding named in its XML declaration
    is ignored.
    """
    if not source.text.strip():
        raise MalformedDocument(source.name, "Document is empty.")
    try:
        root = etree.fromstring(source.text.encode("utf-8"), parser=_build_parser())
    except etree.XMLSyntaxError as exc:
        raise MalformedDocument(source.name, str(exc)) from exc
    return ParsedDocument(name=source.name, root=root)


def decode_document(name: str, data: bytes) -> SourceDocument:
    """Decode raw document bytes into a named source document.

    The encoding is taken from a byte order mark, else from the XML
    declaration, else UTF-8.

    Raises:
      MalformedDocument: If the declared encoding is unknown or the bytes do not decode.
    """
    encoding = _detect_encoding(data)
    try:
        return SourceDocument(name=name, text=data.decode(encoding))
    except (LookupError, UnicodeDecodeError) as exc:
        raise MalformedDocument(name, f"Cannot decode document as {encoding}: {exc}") from exc


def _detect_encoding(data: bytes) -> str:
    if data.startswith(codecs.BOM_UTF8):
        return "utf-8-sig"
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return "utf-16"
    match = _DECLARED_ENCODING.match(data)
    return match.group(1).decode("ascii") if match else "utf-8"
