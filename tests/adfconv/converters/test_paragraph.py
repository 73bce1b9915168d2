"""Tests for paragraph conversion into ADF inline nodes."""

import pytest

from adfconv.adf.builder import ADFBuilder
from adfconv.adf.models import CodeBlockNode, HardBreakNode, ParagraphNode, TextNode
from adfconv.converters.paragraph import ParagraphConverter, normalize_inline, resolve_href
from adfconv.dom import parse_fragment


def add_items(html: str, file_context: str = "docs/page.md", inline: bool = True):
    adf_builder = ADFBuilder()
    ParagraphConverter(adf_builder).add_items(parse_fragment(html).p, file_context, inline)
    return adf_builder.build()


def marks_of(node: TextNode) -> list[str]:
    return [mark.type for mark in node.marks or []]


class TestInlineMarks:
    def test_plain_text(self):
        assert add_items("<p>Hello world</p>") == [ParagraphNode(content=[TextNode(text="Hello world")])]

    @pytest.mark.parametrize(
        "tag,mark",
        [
            ("strong", "strong"),
            ("b", "strong"),
            ("em", "em"),
            ("i", "em"),
            ("code", "code"),
            ("s", "strike"),
            ("del", "strike"),
            ("u", "underline"),
        ],
    )
    def test_mark_tags(self, tag, mark):
        paragraph = add_items(f"<p>a <{tag}>b</{tag}></p>")[0]
        assert paragraph.content[0] == TextNode(text="a ")
        assert paragraph.content[1].text == "b"
        assert marks_of(paragraph.content[1]) == [mark]

    def test_nested_marks_accumulate(self):
        paragraph = add_items("<p><strong>bold <em>both</em></strong></p>")[0]
        assert marks_of(paragraph.content[0]) == ["strong"]
        assert marks_of(paragraph.content[1]) == ["strong", "em"]

    def test_repeated_mark_is_not_duplicated(self):
        paragraph = add_items("<p><b><strong>x</strong></b></p>")[0]
        assert marks_of(paragraph.content[0]) == ["strong"]

    def test_absolute_link(self):
        paragraph = add_items('<p><a href="https://example.com/x">site</a></p>')[0]
        link = paragraph.content[0].marks[0]
        assert link.type == "link"
        assert link.attrs.href == "https://example.com/x"

    def test_internal_link_prefers_data_href(self):
        paragraph = add_items('<p><a class="internal-link" data-href="Other.md" href="#">Other</a></p>')[0]
        assert paragraph.content[0].marks[0].attrs.href == "docs/Other.md"

    def test_unknown_elements_are_transparent(self):
        paragraph = add_items('<p><span class="tag">#label</span> text</p>')[0]
        assert paragraph.content == [TextNode(text="#label text")]

    def test_image_alt_text(self):
        paragraph = add_items('<p>see <img src="a.png" alt="diagram"></p>')[0]
        assert paragraph.content == [TextNode(text="see diagram")]

    def test_inputs_and_scripts_are_dropped(self):
        paragraph = add_items('<p><input type="checkbox">a<script>var x;</script></p>')[0]
        assert paragraph.content == [TextNode(text="a")]


class TestWhitespace:
    def test_collapses_runs(self):
        paragraph = add_items("<p>  a \n\t b  </p>")[0]
        assert paragraph.content == [TextNode(text="a b")]

    def test_space_across_mark_boundary(self):
        paragraph = add_items("<p>a <em> b</em></p>")[0]
        assert paragraph.content[0].text == "a "
        assert paragraph.content[1].text == "b"

    def test_line_break_trims_surrounding_spaces(self):
        paragraph = add_items("<p>one <br> two</p>")[0]
        assert paragraph.content == [TextNode(text="one"), HardBreakNode(), TextNode(text="two")]

    def test_merges_neighbours_with_same_marks(self):
        nodes = normalize_inline([TextNode(text="a"), TextNode(text="b")])
        assert nodes == [TextNode(text="ab")]


class TestParagraphModes:
    def test_inline_mode_keeps_empty_paragraph(self):
        assert add_items("<p>   </p>", inline=True) == [ParagraphNode(content=[])]

    def test_block_mode_drops_empty_paragraph(self):
        assert add_items("<p>   </p>", inline=False) == []

    def test_preformatted_block_follows_paragraph(self):
        nodes = add_items('<p>intro<pre><code class="language-sh">ls -la\n</code></pre></p>')
        assert isinstance(nodes[0], ParagraphNode)
        assert isinstance(nodes[1], CodeBlockNode)
        assert nodes[1].attrs.language == "sh"
        assert nodes[1].content == [TextNode(text="ls -la")]

    def test_appends_into_existing_builder(self):
        adf_builder = ADFBuilder()
        adf_builder.add_item(ParagraphNode(content=[TextNode(text="first")]))
        ParagraphConverter(adf_builder).add_items(parse_fragment("<p>second</p>").p, "", True)
        assert len(adf_builder) == 2


class TestResolveHref:
    @pytest.mark.parametrize(
        "href,file_context,expected",
        [
            ("other.md", "notes/page.md", "notes/other.md"),
            ("../up.md", "notes/deep/page.md", "notes/up.md"),
            ("other.md", "", "other.md"),
            ("https://example.com", "notes/page.md", "https://example.com"),
            ("mailto:a@b.c", "notes/page.md", "mailto:a@b.c"),
            ("/abs/path.md", "notes/page.md", "/abs/path.md"),
            ("#heading", "notes/page.md", "#heading"),
            ("", "notes/page.md", ""),
        ],
    )
    def test_resolution(self, href, file_context, expected):
        assert resolve_href(href, file_context) == expected
