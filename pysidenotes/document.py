"""
Document tree understood by the sidenote transform.

A closed set of block/inline variants covers exactly what the transform needs
to inspect. Everything else travels through in an ``Opaque*`` wrapper that
holds the original node untouched, so documents produced by a richer parser
survive the round trip.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple, Union


# ------------------------------- Inlines -------------------------------------


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Note:
    """A footnote-like annotation carrying its own block content."""

    blocks: Tuple["Block", ...]


@dataclass(frozen=True)
class RawMarkup:
    format: str
    text: str


@dataclass(frozen=True)
class OpaqueInline:
    original: Any


Inline = Union[Text, Note, RawMarkup, OpaqueInline]


# ------------------------------- Blocks --------------------------------------


@dataclass(frozen=True)
class Paragraph:
    inlines: Tuple[Inline, ...]


@dataclass(frozen=True)
class PlainBlock:
    inlines: Tuple[Inline, ...]


@dataclass(frozen=True)
class OrderedList:
    items: Tuple[Tuple["Block", ...], ...]
    # Start number / numbering style / delimiter, kept as the parser gave them.
    attributes: Any = None


@dataclass(frozen=True)
class BulletList:
    items: Tuple[Tuple["Block", ...], ...]


@dataclass(frozen=True)
class RawBlock:
    format: str
    text: str


@dataclass(frozen=True)
class OpaqueBlock:
    original: Any


Block = Union[Paragraph, PlainBlock, OrderedList, BulletList, RawBlock, OpaqueBlock]


@dataclass(frozen=True)
class Document:
    """Opaque metadata plus the ordered top-level blocks."""

    blocks: Tuple[Block, ...]
    meta: Any = field(default_factory=dict)
    api_version: Any = None
    # Unrecognised top-level envelope keys, written back unchanged.
    extras: Any = field(default_factory=dict)

    def with_blocks(self, blocks: List[Block]) -> "Document":
        return Document(
            blocks=tuple(blocks),
            meta=self.meta,
            api_version=self.api_version,
            extras=self.extras,
        )


__all__ = [
    "Block",
    "BulletList",
    "Document",
    "Inline",
    "Note",
    "OpaqueBlock",
    "OpaqueInline",
    "OrderedList",
    "Paragraph",
    "PlainBlock",
    "RawBlock",
    "RawMarkup",
    "Text",
]
