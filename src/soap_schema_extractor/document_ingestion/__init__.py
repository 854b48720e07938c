"""Document ingestion exports."""

from .constants import WSDL_NAMESPACE, XS_NAMESPACE
from .document_parser import (
    MalformedDocument,
    ParsedDocument,
    SchemaConversionError,
    decode_document,
    parse_document,
)
from .namespace_indexer import (
    DocumentCatalog,
    DocumentKind,
    DocumentNamespaces,
    SchemaSection,
    ServiceSection,
    classify_documents,
    index_namespaces,
)
from .source_documents import DocumentInput, SourceDocument, normalize_source_documents

__all__ = [
    "WSDL_NAMESPACE",
    "XS_NAMESPACE",
    "DocumentCatalog",
    "DocumentInput",
    "DocumentKind",
    "DocumentNamespaces",
    "MalformedDocument",
    "ParsedDocument",
    "SchemaConversionError",
    "SchemaSection",
    "ServiceSection",
    "SourceDocument",
    "classify_documents",
    "decode_document",
    "index_namespaces",
    "normalize_source_documents",
    "parse_document",
]
