"""Shared XML namespace constants."""

from __future__ import annotations

XS_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
WSDL_NAMESPACE = "http://schemas.xmlsoap.org/wsdl/"


def xs_tag(local_name: str) -> str:
    """Return the Clark-notation tag for an XML Schema construct."""
    return f"{{{XS_NAMESPACE}}}{local_name}"


def wsdl_tag(local_name: str) -> str:
    """Return the Clark-notation tag for a WSDL construct."""
    return f"{{{WSDL_NAMESPACE}}}{local_name}"
