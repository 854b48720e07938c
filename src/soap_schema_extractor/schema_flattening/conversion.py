"""Schema conversion use case."""

from __future__ import annotations

import logging

from soap_schema_extractor.configuration.runtime_settings import (
    DEFAULT_SCHEMA_NAME,
    DEFAULT_SCHEMA_VERSION,
    ConversionOptions,
)
from soap_schema_extractor.document_ingestion.document_parser import parse_document
from soap_schema_extractor.document_ingestion.source_documents import (
    DocumentInput,
    normalize_source_documents,
)
from soap_schema_extractor.symbol_resolution.conversion_context import build_conversion_context

from .entity_collector import collect_entities
from .schema_models import Schema

logger = logging.getLogger(__name__)


def build_schema_from_documents(
    documents: DocumentInput, options: ConversionOptions | None = None
) -> Schema:
    """Convert XSD and WSDL document texts into a flat connector schema.

    Every call builds its own indices; nothing is shared between calls.

    Args:
      documents: Document texts, see ``normalize_source_documents``.
      options: Schema name, version, entity scope and recursion bound.

    Returns:
      The merged schema.

    Raises:
      MalformedDocument: If any document is not well-formed XML.
      RecursionLimitExceeded: If indirection nests deeper than ``options.max_depth``.
    """
    resolved_options = options or ConversionOptions()
    sources = normalize_source_documents(documents)
    parsed = [parse_document(source) for source in sources]
    context = build_conversion_context(parsed, max_depth=resolved_options.max_depth)
    logger.debug(
        "Indexed %d global elements, %d types, %d entry points from %d documents",
        len(context.symbols.elements),
        len(context.symbols.types),
        len(context.entry_points),
        len(parsed),
    )
    entities = collect_entities(context, resolved_options.scope)
    return Schema(
        name=resolved_options.name.strip() or DEFAULT_SCHEMA_NAME,
        version=resolved_options.version.strip() or DEFAULT_SCHEMA_VERSION,
        entities=entities,
    )
