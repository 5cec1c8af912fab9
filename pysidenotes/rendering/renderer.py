"""
Note classifier and renderer.

Turns one note's block content into a numbered toggle/label/wrapper fragment:

    <label for="sn-N" class="margin-toggle[ sidenote-number]">[&#8853;]</label>
    <input type="checkbox" id="sn-N" class="margin-toggle"/>
    <TAG class="sidenote|marginnote" role="ROLE">BODY</TAG>

bracketed by ``-->`` / ``<!--`` so it glues to the text around it (see
``scanner``). No I/O beyond the injected sub-renderer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from ..document import Block, RawBlock
from ..exceptions import RenderFailure
from .options import DEFAULT_OPTIONS, SidenoteOptions
from .renderer_iface import SubRenderer

LOGGER = logging.getLogger(__name__)

COMMENT_START = "<!--"
COMMENT_END = "-->"

# Leading marker that turns a note into an unnumbered margin note.
MARGINNOTE_PREFIX = "{-} "
MARGINNOTE_SYMBOL = "&#8853;"


class NoteType(Enum):
    SIDENOTE = "sidenote"
    MARGINNOTE = "marginnote"


@dataclass
class TransformState:
    """Running note counter for one transform pass."""

    counter: int = 0

    def next_id(self) -> int:
        current = self.counter
        self.counter += 1
        return current


@dataclass(frozen=True)
class RenderedNote:
    id: int
    type: NoteType
    body_html: str


def classify_note(fragment: str) -> Tuple[NoteType, str]:
    if fragment.startswith(MARGINNOTE_PREFIX):
        return NoteType.MARGINNOTE, fragment[len(MARGINNOTE_PREFIX) :]
    return NoteType.SIDENOTE, fragment


def _drop_wrapper_line(text: str) -> str:
    # Everything up to and including the first line break; no break -> nothing.
    _, sep, rest = text.partition("\n")
    return rest if sep else ""


def note_label(note_type: NoteType, note_id: int) -> str:
    number_class = " sidenote-number" if note_type is NoteType.SIDENOTE else ""
    symbol = MARGINNOTE_SYMBOL if note_type is NoteType.MARGINNOTE else ""
    return (
        f'<label for="sn-{note_id}" class="margin-toggle{number_class}">'
        f"{symbol}</label>"
    )


def note_input(note_id: int) -> str:
    return f'<input type="checkbox" id="sn-{note_id}" class="margin-toggle"/>'


def note_wrapper(options: SidenoteOptions, note_type: NoteType, body: str) -> str:
    tag = options.tag_type
    return (
        f'<{tag} class="{note_type.value}" role="{options.tag_role}">'
        f"{body}</{tag}>"
    )


def render_note_html(note: RenderedNote, options: SidenoteOptions) -> str:
    """Assemble the glued markup for an already classified note."""
    return "".join(
        [
            COMMENT_END,
            note_label(note.type, note.id),
            note_input(note.id),
            note_wrapper(options, note.type, note.body_html),
            COMMENT_START,
        ]
    )


def render_note(
    state: TransformState,
    options: SidenoteOptions,
    sub_renderer: SubRenderer,
    blocks: Sequence[Block],
) -> RawBlock:
    """Number, render and classify one note; returns a raw HTML block.

    The counter is consumed before the sub-renderer runs, so ids follow the
    order in which notes are encountered. Any sub-renderer failure is fatal
    and surfaces as ``RenderFailure``.
    """
    note_id = state.next_id()
    try:
        rendered = sub_renderer(blocks, options.writer_config)
    except RenderFailure as exc:
        LOGGER.error("sidenotes.render_fail id=%d %s", note_id, exc)
        raise RenderFailure(
            f"Failed to render note sn-{note_id}: {exc}",
            note_id=note_id,
            cause=exc.cause or exc,
        ) from exc
    except Exception as exc:
        LOGGER.error("sidenotes.render_fail id=%d %s", note_id, exc)
        raise RenderFailure(
            f"Failed to render note sn-{note_id}: {exc}", note_id=note_id, cause=exc
        ) from exc
    if not isinstance(rendered, str):
        LOGGER.error(
            "sidenotes.render_fail id=%d non-text result %s", note_id, type(rendered)
        )
        raise RenderFailure(
            f"Failed to render note sn-{note_id}: sub-renderer returned "
            f"{type(rendered).__name__}, expected str",
            note_id=note_id,
        )

    note_type, body = classify_note(_drop_wrapper_line(rendered))
    LOGGER.debug(
        "sidenotes.render id=%d type=%s body_len=%d", note_id, note_type.value, len(body)
    )
    note = RenderedNote(id=note_id, type=note_type, body_html=body)
    return RawBlock("html", render_note_html(note, options))


class SidenoteRenderer:
    """Class-based interface for rendering individual notes."""

    def __init__(
        self,
        sub_renderer: SubRenderer,
        options: Optional[SidenoteOptions] = None,
        state: Optional[TransformState] = None,
    ):
        self.sub_renderer = sub_renderer
        self.options = options or DEFAULT_OPTIONS
        self.state = state or TransformState()

    def render(self, blocks: Sequence[Block]) -> RawBlock:
        """Render the next note, consuming one id."""
        return render_note(self.state, self.options, self.sub_renderer, blocks)
