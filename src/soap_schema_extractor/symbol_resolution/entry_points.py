"""Entry points discovered through service description messages."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from soap_schema_extractor.document_ingestion.constants import wsdl_tag
from soap_schema_extractor.document_ingestion.namespace_indexer import ServiceSection

from .qualified_names import QualifiedName, resolve_qname

logger = logging.getLogger(__name__)


def collect_entry_points(services: Iterable[ServiceSection]) -> tuple[QualifiedName, ...]:
    """Return element names referenced by message parts, in first-seen order.

    Parts declared with ``type=`` instead of ``element=`` do not name a global
    element and are skipped.
    """
    entry_points: dict[QualifiedName, None] = {}
    for service in services:
        for message in service.root.iter(wsdl_tag("message")):
            for part in message.iterchildren(wsdl_tag("part")):
                name = resolve_qname(part.get("element"), part)
                if name is None:
                    continue
                entry_points.setdefault(name, None)
        logger.debug("Collected %d entry points after %s", len(entry_points), service.document_name)
    return tuple(entry_points)
