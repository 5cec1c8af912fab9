"""
Pandoc JSON "wire" models.

Only the document envelope is validated here. Block and inline nodes are
``{"t": <tag>, "c": <content>}`` objects whose content shape depends on the
tag; ``decoding`` turns them into the document tree.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import Field, JsonValue, field_validator

from ._pandoc_base import PandocModel

# Version written when a document did not come from pandoc.
DEFAULT_API_VERSION: List[int] = [1, 23, 1]


class PandocDocument(PandocModel):
    pandoc_api_version: List[int] = Field(
        default_factory=lambda: list(DEFAULT_API_VERSION), alias="pandoc-api-version"
    )
    meta: Dict[str, JsonValue] = Field(default_factory=dict)
    blocks: List[Dict[str, Any]] = Field(default_factory=list)

    @field_validator("blocks")
    @classmethod
    def _blocks_are_nodes(cls, v: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        for node in v:
            if not isinstance(node.get("t"), str):
                raise ValueError("every block must carry a string 't' tag")
        return v


__all__ = ["DEFAULT_API_VERSION", "PandocDocument"]
