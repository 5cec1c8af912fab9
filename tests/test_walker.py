"""Tests for the document-order block walk."""

import re
import unittest

from pysidenotes.document import (
    BulletList,
    Note,
    OpaqueBlock,
    OrderedList,
    Paragraph,
    PlainBlock,
    RawBlock,
    Text,
)
from pysidenotes.rendering.options import SidenoteOptions
from pysidenotes.rendering.renderer import TransformState
from pysidenotes.rendering.walker import placeholder_block, walk_blocks
from stubs import RecordingRenderer


def note(text):
    return Note((PlainBlock((Text(text),)),))


def note_ids(blocks):
    """Collect sn-N ids from raw blocks, descending into lists."""
    ids = []
    for block in blocks:
        if isinstance(block, RawBlock):
            ids.extend(int(i) for i in re.findall(r'id="sn-(\d+)"', block.text))
        elif isinstance(block, (OrderedList, BulletList)):
            for item in block.items:
                ids.extend(note_ids(item))
    return ids


class WalkBlocksTest(unittest.TestCase):
    def setUp(self):
        self.state = TransformState()
        self.sub = RecordingRenderer()
        self.options = SidenoteOptions()

    def walk(self, *blocks):
        return walk_blocks(self.state, self.options, self.sub, blocks)

    def test_paragraph_gets_placeholder(self):
        out = self.walk(Paragraph((Text("plain"),)))
        self.assertEqual(out, [placeholder_block(), PlainBlock((Text("plain"),))])

    def test_plain_block_has_no_placeholder(self):
        out = self.walk(PlainBlock((Text("plain"),)))
        self.assertEqual(out, [PlainBlock((Text("plain"),))])

    def test_opaque_block_untouched(self):
        header = OpaqueBlock({"t": "HorizontalRule"})
        raw = RawBlock("html", "<hr>")
        self.assertEqual(self.walk(header, raw), [header, raw])
        self.assertEqual(self.state.counter, 0)

    def test_sibling_paragraphs_share_counter(self):
        out = self.walk(
            Paragraph((Text("a"), note("one"))), Paragraph((Text("b"), note("two")))
        )
        self.assertEqual(note_ids(out), [0, 1])
        self.assertEqual(out.count(placeholder_block()), 2)

    def test_bullet_list_items(self):
        second = (PlainBlock((Text("untouched"),)),)
        lst = BulletList(
            (
                (PlainBlock((Text("x"), note("first"))),),
                second,
                (PlainBlock((Text("y"), note("third"))),),
            )
        )
        out = self.walk(lst)
        self.assertEqual(len(out), 1)
        result = out[0]
        self.assertIsInstance(result, BulletList)
        self.assertEqual(len(result.items), 3)
        self.assertEqual(result.items[1], second)
        self.assertEqual(note_ids(out), [0, 1])

    def test_ordered_list_keeps_attributes(self):
        attrs = [3, {"t": "Decimal"}, {"t": "Period"}]
        lst = OrderedList(((PlainBlock((note("n"),)),),), attributes=attrs)
        out = self.walk(lst)
        self.assertIsInstance(out[0], OrderedList)
        self.assertEqual(out[0].attributes, attrs)

    def test_nested_lists_continue_numbering(self):
        inner = BulletList(((PlainBlock((note("deep"),)),),))
        outer = OrderedList(((Paragraph((note("outer"),)), inner),))
        out = self.walk(Paragraph((note("top"),)), outer, PlainBlock((note("last"),)))
        self.assertEqual(note_ids(out), [0, 1, 2, 3])
        self.assertEqual(
            [c[0][0].inlines[0].text for c in self.sub.calls],
            ["top", "outer", "deep", "last"],
        )

    def test_note_free_item_consumes_no_id(self):
        lst = BulletList(((PlainBlock((Text("a"),)),), (PlainBlock((note("b"),)),)))
        out = self.walk(lst)
        self.assertEqual(note_ids(out), [0])
        self.assertEqual(self.state.counter, 1)


if __name__ == "__main__":
    unittest.main()
