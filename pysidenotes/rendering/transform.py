"""
Entry points: rewrite every note in a document as a sidenote or margin note.

Meant to run after parsing and before HTML serialization, e.g.

    doc = loads_document(pandoc_json)
    doc = using_sidenotes_html(PandocWriterConfig(), doc, PandocSubRenderer())

Each call starts from a fresh counter, so ids are ``0, 1, 2, ...`` in document
order, nested list items included. The input document is never modified; on
``RenderFailure`` nothing is returned.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from ..document import Block, Document, Paragraph, Text
from .options import DEFAULT_OPTIONS, SidenoteOptions
from .renderer import TransformState
from .renderer_iface import SubRenderer
from .walker import walk_blocks

LOGGER = logging.getLogger(__name__)


def _is_empty_paragraph(block: Block) -> bool:
    if not isinstance(block, Paragraph):
        return False
    return block.inlines in ((), (Text(""),))


def _drop_leading_artifact(blocks: List[Block]) -> List[Block]:
    # Superfluous paragraph at the very start of the document.
    if blocks and _is_empty_paragraph(blocks[0]):
        return blocks[1:]
    return blocks


def using_sidenotes_html_with(
    options: SidenoteOptions,
    document: Document,
    sub_renderer: SubRenderer,
) -> Document:
    """Transform ``document`` with explicit options."""
    state = TransformState()
    blocks = walk_blocks(state, options, sub_renderer, document.blocks)
    LOGGER.debug(
        "sidenotes.transform blocks_in=%d blocks_out=%d notes=%d",
        len(document.blocks),
        len(blocks),
        state.counter,
    )
    return document.with_blocks(_drop_leading_artifact(blocks))


def using_sidenotes_html(
    writer_config: Any,
    document: Document,
    sub_renderer: SubRenderer,
) -> Document:
    """Transform ``document`` with default tag options."""
    options = SidenoteOptions(writer_config=writer_config)
    return using_sidenotes_html_with(options, document, sub_renderer)


class SidenoteTransformer:
    """Reusable transform bound to one sub-renderer and option set."""

    def __init__(
        self, sub_renderer: SubRenderer, options: Optional[SidenoteOptions] = None
    ):
        self.sub_renderer = sub_renderer
        self.options = options or DEFAULT_OPTIONS

    def transform(self, document: Document) -> Document:
        return using_sidenotes_html_with(self.options, document, self.sub_renderer)
