"""Command modules for the pysidenotes CLI."""

from pysidenotes.cli.commands import pandoc_filter

__all__ = ["pandoc_filter"]
