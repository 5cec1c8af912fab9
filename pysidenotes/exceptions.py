"""Library exceptions."""

from __future__ import annotations

from typing import Optional


class SidenotesError(Exception):
    """Base sidenotes error."""


class RenderFailure(SidenotesError):
    """The note sub-renderer could not produce HTML for a note's blocks."""

    def __init__(
        self,
        message: str,
        note_id: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.note_id = note_id
        self.cause = cause


class DocumentFormatError(SidenotesError):
    """Input is not a pandoc JSON document."""

    def __init__(self, message: str, payload: Optional[object] = None):
        super().__init__(message)
        self.payload = payload
