"""Sidenote rendering, transport-agnostic.

Contains:
- renderer_iface: the sub-renderer Protocol consumed for note bodies
- renderer: note classification and the label/input/wrapper markup
- scanner: splitting a block's inlines around notes, with comment gluing
- walker: document-order block traversal threading the note counter
- transform: public entry points
- pandoc_renderer: a sub-renderer that shells out to pandoc
"""
