"""Command line interface for pysidenotes."""
