"""Tests for the transform entry points."""

import unittest
from unittest.mock import MagicMock

from pysidenotes.decoding import load_document
from pysidenotes.document import (
    BulletList,
    Document,
    Note,
    OpaqueBlock,
    OpaqueInline,
    OrderedList,
    Paragraph,
    PlainBlock,
    RawBlock,
    RawMarkup,
    Text,
)
from pysidenotes.exceptions import RenderFailure
from pysidenotes.rendering.options import SidenoteOptions
from pysidenotes.rendering.transform import (
    SidenoteTransformer,
    using_sidenotes_html,
    using_sidenotes_html_with,
)
from stubs import FIXTURE_PATH, RecordingRenderer

SIDENOTE_0 = (
    '--><label for="sn-0" class="margin-toggle sidenote-number"></label>'
    '<input type="checkbox" id="sn-0" class="margin-toggle"/>'
    '<aside class="sidenote" role="note">World</aside><!--'
)


def note(text):
    return Note((PlainBlock((Text(text),)),))


class TransformTest(unittest.TestCase):
    def setUp(self):
        self.sub = RecordingRenderer()

    def test_hello_world(self):
        doc = Document(
            blocks=(
                OpaqueBlock({"t": "HorizontalRule"}),
                Paragraph((Text("Hello "), note("World"))),
            ),
            meta={"title": "x"},
        )
        out = using_sidenotes_html(None, doc, self.sub)
        self.assertEqual(
            list(out.blocks),
            [
                OpaqueBlock({"t": "HorizontalRule"}),
                Paragraph((Text(""),)),
                PlainBlock((Text("Hello "), RawMarkup("html", "<!--"))),
                RawBlock("html", SIDENOTE_0),
                PlainBlock((RawMarkup("html", "-->"),)),
            ],
        )
        self.assertEqual(out.meta, {"title": "x"})

    def test_leading_placeholder_is_stripped(self):
        doc = Document(blocks=(Paragraph((Text("Hello "), note("World"))),))
        out = using_sidenotes_html(None, doc, self.sub)
        self.assertEqual(out.blocks[0], PlainBlock((Text("Hello "), RawMarkup("html", "<!--"))))
        self.assertEqual(out.blocks[1], RawBlock("html", SIDENOTE_0))

    def test_only_one_leading_artifact_removed(self):
        doc = Document(blocks=(Paragraph((Text(""),)), Paragraph((Text("x"),))))
        out = using_sidenotes_html(None, doc, self.sub)
        # The walker adds one placeholder per paragraph; the first one goes.
        self.assertEqual(
            list(out.blocks),
            [
                PlainBlock((Text(""),)),
                Paragraph((Text(""),)),
                PlainBlock((Text("x"),)),
            ],
        )

    def test_no_notes_preserves_content(self):
        space = OpaqueInline({"t": "Space"})
        item = (PlainBlock((Text("item"),)),)
        doc = Document(
            blocks=(
                Paragraph((Text("a"), space, Text("b"))),
                BulletList((item,)),
                OrderedList((item,), attributes=[1, {"t": "Decimal"}, {"t": "Period"}]),
                OpaqueBlock({"t": "CodeBlock", "c": [["", [], []], "x = 1"]}),
            )
        )
        out = using_sidenotes_html(None, doc, self.sub)
        self.assertEqual(out.blocks[0], PlainBlock((Text("a"), space, Text("b"))))
        self.assertEqual(out.blocks[1:], doc.blocks[1:])
        self.assertEqual(self.sub.calls, [])

    def test_sibling_paragraphs(self):
        doc = Document(
            blocks=(Paragraph((note("one"),)), Paragraph((note("two"),)))
        )
        out = using_sidenotes_html(None, doc, self.sub)
        raw = [b.text for b in out.blocks if isinstance(b, RawBlock)]
        self.assertIn('id="sn-0"', raw[0])
        self.assertIn(">one</aside>", raw[0])
        self.assertIn('id="sn-1"', raw[1])
        self.assertIn(">two</aside>", raw[1])

    def test_each_call_starts_at_zero(self):
        doc = Document(blocks=(PlainBlock((note("n"),)),))
        first = using_sidenotes_html(None, doc, self.sub)
        second = using_sidenotes_html(None, doc, self.sub)
        self.assertEqual(first, second)

    def test_marginnote_options(self):
        sub = MagicMock(return_value="<div>\n{-} Important")
        options = SidenoteOptions(writer_config="cfg", tag_type="div", tag_role="complementary")
        doc = Document(blocks=(PlainBlock((note("ignored"),)),))
        out = using_sidenotes_html_with(options, doc, sub)
        raw = out.blocks[1].text
        self.assertIn('<div class="marginnote" role="complementary">Important</div>', raw)
        self.assertIn('class="margin-toggle">&#8853;</label>', raw)
        sub.assert_called_once()
        self.assertEqual(sub.call_args[0][1], "cfg")

    def test_failure_aborts_and_leaves_input_alone(self):
        calls = []

        def flaky(blocks, writer_config):
            calls.append(blocks)
            if len(calls) == 2:
                raise RuntimeError("cannot render table")
            return "<div>\nok"

        doc = Document(
            blocks=(Paragraph((note("a"),)), BulletList(((PlainBlock((note("b"),)),),)))
        )
        snapshot = Document(blocks=doc.blocks, meta=doc.meta)
        with self.assertRaises(RenderFailure) as ctx:
            using_sidenotes_html(None, doc, flaky)
        self.assertEqual(ctx.exception.note_id, 1)
        self.assertEqual(doc, snapshot)

    def test_transformer_class(self):
        transformer = SidenoteTransformer(self.sub)
        doc = Document(blocks=(PlainBlock((note("World"),)),))
        out = transformer.transform(doc)
        self.assertEqual(out.blocks[1], RawBlock("html", SIDENOTE_0))


class FixtureTransformTest(unittest.TestCase):
    def setUp(self):
        self.doc = load_document(FIXTURE_PATH)
        self.sub = RecordingRenderer()
        self.out = using_sidenotes_html(None, self.doc, self.sub)

    def test_ids_follow_document_order(self):
        rendered = [c[0] for c in self.sub.calls]
        self.assertEqual(len(rendered), 4)
        texts = [c[0].inlines[0].text for c in rendered]
        self.assertEqual(texts, ["World", "first", "{-}", "deep"])

    def test_marginnote_in_list(self):
        bullet = next(b for b in self.out.blocks if isinstance(b, BulletList))
        third = bullet.items[2]
        raw = [b for b in third if isinstance(b, RawBlock)][0]
        self.assertIn('id="sn-2"', raw.text)
        self.assertIn('<aside class="marginnote" role="note">aside</aside>', raw.text)
        self.assertEqual(bullet.items[1], self.doc.blocks[2].items[1])

    def test_meta_and_version_pass_through(self):
        self.assertEqual(self.out.meta, self.doc.meta)
        self.assertEqual(self.out.api_version, [1, 23, 1])
        self.assertEqual(self.out.blocks[0], self.doc.blocks[0])


if __name__ == "__main__":
    unittest.main()
