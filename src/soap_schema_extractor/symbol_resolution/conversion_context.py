"""Per-conversion lookup state."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from soap_schema_extractor.configuration.runtime_settings import DEFAULT_MAX_DEPTH
from soap_schema_extractor.document_ingestion.document_parser import ParsedDocument
from soap_schema_extractor.document_ingestion.namespace_indexer import (
    DocumentCatalog,
    classify_documents,
)

from .entry_points import collect_entry_points
from .qualified_names import QualifiedName
from .symbol_index import GlobalSymbolIndex, build_symbol_index


@dataclass(frozen=True)
class ConversionContext:
    """Indices shared by the walker and collector during a single conversion."""

    catalog: DocumentCatalog
    symbols: GlobalSymbolIndex
    entry_points: tuple[QualifiedName, ...]
    max_depth: int = DEFAULT_MAX_DEPTH


def build_conversion_context(
    documents: Iterable[ParsedDocument], *, max_depth: int = DEFAULT_MAX_DEPTH
) -> ConversionContext:
    """Classify parsed documents and build every index a conversion needs."""
    if max_depth <= 0:
        raise ValueError("max_depth must be greater than zero.")
    catalog = classify_documents(documents)
    return ConversionContext(
        catalog=catalog,
        symbols=build_symbol_index(catalog.schema_sections),
        entry_points=collect_entry_points(catalog.services),
        max_depth=max_depth,
    )
