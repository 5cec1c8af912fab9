"""
Sub-renderer backed by the ``pandoc`` executable.

Note blocks are encoded as a standalone pandoc JSON document and piped
through ``pandoc -f json -t <format>``. The output is prefixed with an empty
line so that the note renderer's wrapper-line trim leaves the body intact.
"""

from __future__ import annotations

import json
import logging
import subprocess
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from ..decoding import DocumentEncoder
from ..document import Block, Document
from ..exceptions import RenderFailure

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PandocWriterConfig:
    to: str = "html5"
    extra_args: Tuple[str, ...] = ()
    executable: str = "pandoc"
    # pandoc-api-version of the enclosing document; None uses the default
    api_version: Optional[Tuple[int, ...]] = None

    def command(self) -> List[str]:
        return [self.executable, "-f", "json", "-t", self.to, *self.extra_args]


class PandocSubRenderer:
    """Render note blocks by shelling out to pandoc."""

    def __init__(self, encoder: Optional[DocumentEncoder] = None):
        self._encoder = encoder or DocumentEncoder()

    def __call__(self, blocks: Sequence[Block], writer_config: Any) -> str:
        config = writer_config if writer_config is not None else PandocWriterConfig()
        if not isinstance(config, PandocWriterConfig):
            raise RenderFailure(
                f"Unsupported writer config for pandoc: {type(config).__name__}"
            )
        note_doc = Document(blocks=tuple(blocks), api_version=config.api_version)
        payload = json.dumps(self._encoder.encode(note_doc), ensure_ascii=False)
        cmd = config.command()
        LOGGER.debug("sidenotes.pandoc.run %s", " ".join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                input=payload,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=True,
            )
        except FileNotFoundError as e:
            raise RenderFailure(
                f"pandoc executable not found: {config.executable}", cause=e
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise RenderFailure(
                f"pandoc exited with status {e.returncode}: {stderr}", cause=e
            ) from e
        return "\n" + proc.stdout.rstrip("\n")
