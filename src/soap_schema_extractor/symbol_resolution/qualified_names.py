"""Qualified name value type and prefix resolution."""

from __future__ import annotations

from dataclasses import dataclass

from lxml import etree


@dataclass(frozen=True, order=True)
class QualifiedName:
    """Namespace plus local name; the empty namespace means "no namespace"."""

    namespace: str
    local_name: str

    def __str__(self) -> str:
        if not self.namespace:
            return self.local_name
        return f"{{{self.namespace}}}{self.local_name}"


def resolve_qname(raw: str | None, context: etree._Element) -> QualifiedName | None:
    """Resolve a ``prefix:local`` reference against the bindings in scope at ``context``.

    Unprefixed names take the in-scope default namespace. Unknown prefixes
    resolve to the empty namespace so the lookup degrades instead of failing.
    """
    if not raw:
        return None
    prefix, separator, local_name = raw.strip().partition(":")
    if not separator:
        prefix, local_name = "", prefix
    if not local_name:
        return None
    namespace = context.nsmap.get(prefix or None)
    return QualifiedName(namespace=namespace or "", local_name=local_name)
