"""
Sub-renderer seam for note bodies.

The transform never turns blocks into HTML by itself; it hands each note's
block content to a ``SubRenderer`` together with the caller's writer
configuration. Implementations must be synchronous and free of side effects
visible to the transform. Output is expected to start with one wrapping line,
which the note renderer discards.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from ..document import Block


class SubRenderer(Protocol):
    """Render a fragment of blocks to a markup string."""

    def __call__(self, blocks: Sequence[Block], writer_config: Any) -> str: ...
