"""
Sidenote rendering configuration.

Centralizes the knobs callers may tune without touching core logic. The
instance is immutable for the duration of one transform pass; ``writer_config``
is never inspected here and is handed verbatim to the note sub-renderer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_TAG_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9-]*")


@dataclass(frozen=True)
class SidenoteOptions:
    # Forwarded to the sub-renderer (e.g. a PandocWriterConfig)
    writer_config: Any = None

    # Element wrapping each note body, and its role attribute
    tag_type: str = "aside"
    tag_role: str = "note"

    def __post_init__(self) -> None:
        if not isinstance(self.tag_type, str) or not _TAG_NAME_RE.fullmatch(self.tag_type):
            raise ValueError(f"Invalid tag_type: {self.tag_type!r}")
        if not isinstance(self.tag_role, str):
            raise ValueError(f"Invalid tag_role: {self.tag_role!r}")


DEFAULT_OPTIONS = SidenoteOptions()
