"""
Pandoc JSON <-> document tree.

Only the node kinds the sidenote transform inspects are decoded into typed
variants; every other node is kept as the original dict inside an
``OpaqueBlock``/``OpaqueInline`` and written back verbatim.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from pydantic import ValidationError

from .document import (
    Block,
    BulletList,
    Document,
    Inline,
    Note,
    OpaqueBlock,
    OpaqueInline,
    OrderedList,
    Paragraph,
    PlainBlock,
    RawBlock,
    RawMarkup,
    Text,
)
from .exceptions import DocumentFormatError
from .models.pandoc import DEFAULT_API_VERSION, PandocDocument

LOGGER = logging.getLogger(__name__)


def _node(tag: str, content: Any = None) -> Dict[str, Any]:
    return {"t": tag, "c": content}


def _expect_list(value: Any, what: str) -> List[Any]:
    if not isinstance(value, list):
        raise DocumentFormatError(f"Expected a list for {what}", payload=value)
    return value


def _expect_format_pair(value: Any, what: str) -> Tuple[str, str]:
    if (
        not isinstance(value, list)
        or len(value) != 2
        or not all(isinstance(v, str) for v in value)
    ):
        raise DocumentFormatError(
            f"Expected [format, text] for {what}", payload=value
        )
    return value[0], value[1]


class DocumentDecoder:
    """Decode pandoc JSON (already parsed) into a ``Document``."""

    def decode(self, data: Any) -> Document:
        if not isinstance(data, dict):
            raise DocumentFormatError("Pandoc document must be a JSON object", payload=data)
        try:
            envelope = PandocDocument.model_validate(data)
        except ValidationError as e:
            LOGGER.debug("sidenotes.decoder.envelope_fail %s", e)
            raise DocumentFormatError(f"Invalid pandoc document: {e}", payload=data) from e
        blocks = self.blocks(envelope.blocks)
        LOGGER.debug(
            "sidenotes.decoder.document api=%s blocks=%d",
            envelope.pandoc_api_version,
            len(blocks),
        )
        return Document(
            blocks=blocks,
            meta=envelope.meta,
            api_version=envelope.pandoc_api_version,
            extras=dict(envelope.model_extra or {}),
        )

    def blocks(self, nodes: Any) -> Tuple[Block, ...]:
        return tuple(self.block(n) for n in _expect_list(nodes, "blocks"))

    def inlines(self, nodes: Any) -> Tuple[Inline, ...]:
        return tuple(self.inline(n) for n in _expect_list(nodes, "inlines"))

    def block(self, node: Any) -> Block:
        if not isinstance(node, dict) or not isinstance(node.get("t"), str):
            raise DocumentFormatError("Block node must carry a 't' tag", payload=node)
        tag, content = node["t"], node.get("c")
        if tag == "Para":
            return Paragraph(self.inlines(content))
        if tag == "Plain":
            return PlainBlock(self.inlines(content))
        if tag == "OrderedList":
            content = _expect_list(content, "OrderedList")
            if len(content) != 2:
                raise DocumentFormatError("OrderedList needs [attrs, items]", payload=node)
            attrs, items = content
            return OrderedList(self._items(items), attributes=attrs)
        if tag == "BulletList":
            return BulletList(self._items(content))
        if tag == "RawBlock":
            fmt, text = _expect_format_pair(content, "RawBlock")
            return RawBlock(fmt, text)
        return OpaqueBlock(node)

    def inline(self, node: Any) -> Inline:
        if not isinstance(node, dict) or not isinstance(node.get("t"), str):
            raise DocumentFormatError("Inline node must carry a 't' tag", payload=node)
        tag, content = node["t"], node.get("c")
        if tag == "Str":
            if not isinstance(content, str):
                raise DocumentFormatError("Str content must be text", payload=node)
            return Text(content)
        if tag == "Note":
            return Note(self.blocks(content))
        if tag == "RawInline":
            fmt, text = _expect_format_pair(content, "RawInline")
            return RawMarkup(fmt, text)
        return OpaqueInline(node)

    def _items(self, items: Any) -> Tuple[Tuple[Block, ...], ...]:
        return tuple(self.blocks(item) for item in _expect_list(items, "list items"))


class DocumentEncoder:
    """Encode a ``Document`` back into pandoc JSON (as Python objects)."""

    def encode(self, document: Document) -> Dict[str, Any]:
        envelope = PandocDocument(
            pandoc_api_version=list(document.api_version or DEFAULT_API_VERSION),
            meta=document.meta or {},
            blocks=self.blocks(document.blocks),
            **(document.extras or {}),
        )
        return envelope.model_dump(by_alias=True)

    def blocks(self, blocks) -> List[Dict[str, Any]]:
        return [self.block(b) for b in blocks]

    def inlines(self, inlines) -> List[Dict[str, Any]]:
        return [self.inline(i) for i in inlines]

    def block(self, block: Block) -> Dict[str, Any]:
        if isinstance(block, Paragraph):
            return _node("Para", self.inlines(block.inlines))
        if isinstance(block, PlainBlock):
            return _node("Plain", self.inlines(block.inlines))
        if isinstance(block, OrderedList):
            attrs = block.attributes
            if attrs is None:
                attrs = [1, {"t": "DefaultStyle"}, {"t": "DefaultDelim"}]
            return _node("OrderedList", [attrs, [self.blocks(i) for i in block.items]])
        if isinstance(block, BulletList):
            return _node("BulletList", [self.blocks(i) for i in block.items])
        if isinstance(block, RawBlock):
            return _node("RawBlock", [block.format, block.text])
        if isinstance(block, OpaqueBlock):
            return block.original
        raise TypeError(f"Not a block: {block!r}")

    def inline(self, inline: Inline) -> Dict[str, Any]:
        if isinstance(inline, Text):
            return _node("Str", inline.text)
        if isinstance(inline, Note):
            return _node("Note", self.blocks(inline.blocks))
        if isinstance(inline, RawMarkup):
            return _node("RawInline", [inline.format, inline.text])
        if isinstance(inline, OpaqueInline):
            return inline.original
        raise TypeError(f"Not an inline: {inline!r}")


def loads_document(text: Union[str, bytes]) -> Document:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentFormatError(f"Invalid JSON: {e}") from e
    return DocumentDecoder().decode(data)


def dumps_document(document: Document) -> str:
    return json.dumps(DocumentEncoder().encode(document), ensure_ascii=False)


def load_document(path: Union[str, Path]) -> Document:
    with open(path, "r", encoding="utf-8") as f:
        return loads_document(f.read())


def dump_document(document: Document, path: Union[str, Path]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps_document(document))
