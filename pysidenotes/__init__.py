"""Rewrite document footnotes as Tufte-style sidenotes and margin notes."""

from .decoding import dump_document, dumps_document, load_document, loads_document
from .document import Document
from .exceptions import DocumentFormatError, RenderFailure, SidenotesError
from .rendering.options import SidenoteOptions
from .rendering.pandoc_renderer import PandocSubRenderer, PandocWriterConfig
from .rendering.transform import (
    SidenoteTransformer,
    using_sidenotes_html,
    using_sidenotes_html_with,
)

__all__ = [
    "Document",
    "DocumentFormatError",
    "PandocSubRenderer",
    "PandocWriterConfig",
    "RenderFailure",
    "SidenoteOptions",
    "SidenoteTransformer",
    "SidenotesError",
    "dump_document",
    "dumps_document",
    "load_document",
    "loads_document",
    "using_sidenotes_html",
    "using_sidenotes_html_with",
]
