"""Source document entities and input normalization."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Union

SINGLE_DOCUMENT_NAME = "input.xml"


@dataclass(frozen=True)
class SourceDocument:
    """Raw document text together with the name it was supplied under."""

    name: str
    text: str


DocumentInput = Union[
    str,
    Mapping[str, str],
    Sequence[str],
    Sequence[SourceDocument],
    Sequence[tuple[str, str]],
]


def normalize_source_documents(documents: DocumentInput) -> tuple[SourceDocument, ...]:
    """Return an ordered tuple of named documents for every supported input shape.

    Args:
      documents: One document text, a mapping of names to texts, or a sequence of
        texts, ``SourceDocument`` values or ``(name, text)`` pairs.

    Raises:
      TypeError: If the input shape is not supported.
    """
    if isinstance(documents, str):
        return (SourceDocument(name=SINGLE_DOCUMENT_NAME, text=documents),)
    if isinstance(documents, Mapping):
        return tuple(
            SourceDocument(name=str(name), text=_require_text(text, str(name)))
            for name, text in documents.items()
        )
    if not isinstance(documents, Sequence):
        raise TypeError(f"Unsupported document input: {type(documents).__name__}")

    normalized: list[SourceDocument] = []
    for index, item in enumerate(documents):
        if isinstance(item, SourceDocument):
            normalized.append(item)
        elif isinstance(item, str):
            normalized.append(SourceDocument(name=f"input-{index}.xml", text=item))
        elif isinstance(item, Sequence) and len(item) == 2:
            name, text = item
            normalized.append(SourceDocument(name=str(name), text=_require_text(text, str(name))))
        else:
            raise TypeError(f"Unsupported document entry at position {index}.")
    return tuple(normalized)


def _require_text(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Document '{name}' text must be a string.")
    return value
