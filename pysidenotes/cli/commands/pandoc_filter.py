"""Pandoc JSON filter command.

Usage in a pipeline:

    pandoc post.md -t json | pysidenotes filter | pandoc -f json -t html5
"""

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from pysidenotes.decoding import dumps_document, loads_document
from pysidenotes.exceptions import DocumentFormatError, RenderFailure
from pysidenotes.rendering.options import SidenoteOptions
from pysidenotes.rendering.pandoc_renderer import PandocSubRenderer, PandocWriterConfig
from pysidenotes.rendering.transform import using_sidenotes_html_with

app = typer.Typer(help="Rewrite notes in a pandoc JSON document")
console = Console(stderr=True)

LOGGER = logging.getLogger(__name__)


@app.callback(invoke_without_command=True)
def main(
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", help="Pandoc JSON file (default: stdin)"
    ),
    output_path: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Where to write the result (default: stdout)"
    ),
    to: str = typer.Option("html5", help="Pandoc writer used for note bodies"),
    pandoc: str = typer.Option("pandoc", help="Path to the pandoc executable"),
    pandoc_arg: Optional[List[str]] = typer.Option(
        None, "--pandoc-arg", help="Extra argument for the note writer (repeatable)"
    ),
    tag_type: str = typer.Option(
        "aside", envvar="PYSIDENOTES_TAG_TYPE", help="Element wrapping each note"
    ),
    tag_role: str = typer.Option(
        "note", envvar="PYSIDENOTES_TAG_ROLE", help="role attribute of that element"
    ),
):
    """Rewrite notes in a pandoc JSON document."""
    writer = PandocWriterConfig(
        to=to, extra_args=tuple(pandoc_arg or ()), executable=pandoc
    )
    try:
        options = SidenoteOptions(
            writer_config=writer, tag_type=tag_type, tag_role=tag_role
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    try:
        if input_path is None:
            raw = sys.stdin.read()
        else:
            raw = input_path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e

    try:
        document = loads_document(raw)
        # Notes go back to pandoc with the same API version as the document.
        if document.api_version:
            writer = replace(writer, api_version=tuple(document.api_version))
            options = replace(options, writer_config=writer)
        result = using_sidenotes_html_with(options, document, PandocSubRenderer())
    except (DocumentFormatError, RenderFailure) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e

    text = dumps_document(result)
    if output_path is None:
        typer.echo(text)
    else:
        output_path.write_text(text, encoding="utf-8")
        LOGGER.info("Wrote %s", output_path)
