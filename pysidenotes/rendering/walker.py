"""
Block walker: document-order traversal threading the note counter.

Only paragraphs, plain blocks and ordered/bullet list items are searched for
notes. Block quotes, definition lists, tables and other containers pass
through untouched; adding them means adding a branch here that recurses with
the same ``state``.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..document import Block, BulletList, OrderedList, Paragraph, PlainBlock, Text
from .options import SidenoteOptions
from .renderer import TransformState
from .renderer_iface import SubRenderer
from .scanner import scan_inlines


def placeholder_block() -> Paragraph:
    """Empty paragraph inserted ahead of each scanned paragraph.

    It stands in for the paragraph boundary that is lost once the paragraph's
    inlines are re-emitted as plain blocks; without it, consecutive
    paragraphs would run together after serialization.
    """
    return Paragraph((Text(""),))


def _walk_items(
    state: TransformState,
    options: SidenoteOptions,
    sub_renderer: SubRenderer,
    items: Sequence[Sequence[Block]],
) -> Tuple[Tuple[Block, ...], ...]:
    return tuple(
        tuple(walk_blocks(state, options, sub_renderer, item)) for item in items
    )


def walk_blocks(
    state: TransformState,
    options: SidenoteOptions,
    sub_renderer: SubRenderer,
    blocks: Sequence[Block],
) -> List[Block]:
    """Transform ``blocks`` left to right, updating ``state`` in place."""
    out: List[Block] = []
    for block in blocks:
        if isinstance(block, Paragraph):
            out.append(placeholder_block())
            out.extend(scan_inlines(state, options, sub_renderer, block.inlines))
        elif isinstance(block, PlainBlock):
            out.extend(scan_inlines(state, options, sub_renderer, block.inlines))
        elif isinstance(block, OrderedList):
            items = _walk_items(state, options, sub_renderer, block.items)
            out.append(OrderedList(items, block.attributes))
        elif isinstance(block, BulletList):
            out.append(BulletList(_walk_items(state, options, sub_renderer, block.items)))
        else:
            out.append(block)
    return out
