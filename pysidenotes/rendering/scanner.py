"""
Inline scanner: split one block's inlines around notes.

Every note turns into a standalone raw HTML block, so the text before and
after it ends up in separate plain blocks. Serializers put exactly one
whitespace separator (a newline) between adjacent top-level blocks; to keep
that separator from showing up as a gap next to the note number, the text
before a note ends with ``<!--`` and the text after it starts with ``-->``,
while the note block itself closes and reopens those comments. If a
serializer ever emits anything other than a single separator between blocks,
this gluing breaks silently.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..document import Block, Inline, Note, PlainBlock, RawMarkup
from .options import SidenoteOptions
from .renderer import COMMENT_END, COMMENT_START, TransformState, render_note
from .renderer_iface import SubRenderer

LOGGER = logging.getLogger(__name__)


def scan_inlines(
    state: TransformState,
    options: SidenoteOptions,
    sub_renderer: SubRenderer,
    inlines: Sequence[Inline],
) -> List[Block]:
    out: List[Block] = []
    pending: List[Inline] = []
    for inline in inlines:
        if isinstance(inline, Note):
            # Start gluing before the note
            pending.append(RawMarkup("html", COMMENT_START))
            out.append(PlainBlock(tuple(pending)))
            out.append(render_note(state, options, sub_renderer, inline.blocks))
            # End gluing after it
            pending = [RawMarkup("html", COMMENT_END)]
        else:
            pending.append(inline)
    out.append(PlainBlock(tuple(pending)))
    if len(out) > 1:
        LOGGER.debug("sidenotes.scan notes=%d", (len(out) - 1) // 2)
    return out
