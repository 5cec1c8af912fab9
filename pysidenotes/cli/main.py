#!/usr/bin/env python
"""Command line interface for pysidenotes."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from pysidenotes.cli.commands import pandoc_filter

app = typer.Typer(help="Turn pandoc footnotes into sidenotes and margin notes")
# stdout carries the document; diagnostics go to stderr
console = Console(stderr=True)

app.add_typer(pandoc_filter.app, name="filter")


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
):
    """Sidenote tooling for pandoc-based build pipelines."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
        force=True,
    )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
