"""Symbol resolution exports."""

from .conversion_context import DEFAULT_MAX_DEPTH, ConversionContext, build_conversion_context
from .entry_points import collect_entry_points
from .qualified_names import QualifiedName, resolve_qname
from .resolution_outcomes import NOT_FOUND, Resolution, ResolutionKind
from .symbol_index import GlobalSymbolIndex, build_symbol_index

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "NOT_FOUND",
    "ConversionContext",
    "GlobalSymbolIndex",
    "QualifiedName",
    "Resolution",
    "ResolutionKind",
    "build_conversion_context",
    "build_symbol_index",
    "collect_entry_points",
    "resolve_qname",
]
