"""Public exports for pandoc wire models."""

from __future__ import annotations

from .pandoc import DEFAULT_API_VERSION, PandocDocument

__all__ = [
    "DEFAULT_API_VERSION",
    "PandocDocument",
]
