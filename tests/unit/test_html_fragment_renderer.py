#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for rendering AST nodes to HTML fragments."""
import io

import pytest

from lex2pages.ast import (
    Block,
    Document,
    Heading,
    HorizontalRule,
    Link,
    List,
    ListItem,
    MediaObject,
    Paragraph,
    ResolvedMedia,
    Text,
    UnknownNode,
    UnresolvedMedia,
)
from lex2pages.exceptions import InvalidOptionsError
from lex2pages.options import HtmlFragmentRendererOptions, LexicalParserOptions
from lex2pages.renderers.html import HtmlFragmentRenderer

IMG_STYLE = ' style="display:block;max-width:100%;height:auto;"'


def _media_block(media, block_type="mediaBlock", block_id="b1"):
    return Block(block_type=block_type, block_id=block_id, media=media)


@pytest.mark.unit
class TestTextRendering:
    """Test text runs."""

    def test_plain(self) -> None:
        """Test unformatted text."""
        assert HtmlFragmentRenderer().render_node(Text(content="Hello")) == "Hello"

    def test_bold_italic(self) -> None:
        """Test the format 3 example."""
        assert HtmlFragmentRenderer().render_node(Text(content="hi", format=3)) == "<em><strong>hi</strong></em>"

    def test_escaped_before_formatting(self) -> None:
        """Test payload escaping happens inside the format tags."""
        assert HtmlFragmentRenderer().render_node(Text(content="a<b", format=16)) == "<code>a&lt;b</code>"

    def test_non_string_payload(self) -> None:
        """Test a hand-built node with a bad payload renders as empty."""
        node = Text(content=None, format=1)  # type: ignore[arg-type]
        assert HtmlFragmentRenderer().render_node(node) == "<strong></strong>"

    def test_negative_format_ignored(self) -> None:
        """Test a negative format renders plain."""
        assert HtmlFragmentRenderer().render_node(Text(content="x", format=-1)) == "x"


@pytest.mark.unit
class TestBlockElements:
    """Test paragraphs, headings and lists."""

    def test_paragraph(self) -> None:
        """Test a paragraph wraps its children."""
        node = Paragraph(children=[Text(content="Hello "), Text(content="world", format=1)])
        assert HtmlFragmentRenderer().render_node(node) == "<p>Hello <strong>world</strong></p>"

    @pytest.mark.parametrize(
        "children",
        [[], [Text(content="")], [Text(content="   ")], [UnknownNode(node_type="x")], [Text(content="\n\t")]],
    )
    def test_blank_paragraph_dropped(self, children) -> None:
        """Test paragraphs with blank content produce nothing."""
        assert HtmlFragmentRenderer().render_node(Paragraph(children=children)) == ""

    def test_paragraph_with_empty_formatting_kept(self) -> None:
        """Test formatting tags count as content."""
        node = Paragraph(children=[Text(content="", format=1)])
        assert HtmlFragmentRenderer().render_node(node) == "<p><strong></strong></p>"

    def test_heading(self) -> None:
        """Test heading level selects the tag."""
        assert HtmlFragmentRenderer().render_node(Heading(level=2, children=[Text(content="T")])) == "<h2>T</h2>"

    def test_empty_heading_kept(self) -> None:
        """Test empty headings still render."""
        assert HtmlFragmentRenderer().render_node(Heading(level=3)) == "<h3></h3>"

    @pytest.mark.parametrize("level,tag", [(0, "h1"), (9, "h6"), ("2", "h1"), (None, "h1")])
    def test_heading_level_clamped(self, level, tag: str) -> None:
        """Test out-of-range and malformed levels on hand-built nodes."""
        assert HtmlFragmentRenderer().render_node(Heading(level=level)) == f"<{tag}></{tag}>"  # type: ignore[arg-type]

    def test_unordered_list(self) -> None:
        """Test an unordered list with items."""
        node = List(children=[ListItem(children=[Text(content="a")]), ListItem(children=[Text(content="b")])])
        assert HtmlFragmentRenderer().render_node(node) == "<ul><li>a</li><li>b</li></ul>"

    def test_ordered_list(self) -> None:
        """Test an ordered list."""
        node = List(ordered=True, children=[ListItem(children=[Text(content="a")])])
        assert HtmlFragmentRenderer().render_node(node) == "<ol><li>a</li></ol>"

    def test_nested_list(self) -> None:
        """Test lists nest inside list items."""
        inner = List(children=[ListItem(children=[Text(content="b")])])
        node = List(children=[ListItem(children=[Text(content="a"), inner])])
        assert HtmlFragmentRenderer().render_node(node) == "<ul><li>a<ul><li>b</li></ul></li></ul>"

    def test_horizontal_rule(self) -> None:
        """Test dividers render as a void element."""
        assert HtmlFragmentRenderer().render_node(HorizontalRule()) == "<hr />"


@pytest.mark.unit
class TestLinks:
    """Test link rendering."""

    def test_link(self) -> None:
        """Test a same-tab link."""
        node = Link(url="https://x.com", children=[Text(content="x")])
        assert HtmlFragmentRenderer().render_node(node) == '<a href="https://x.com">x</a>'

    def test_new_tab(self) -> None:
        """Test new-tab links carry target and rel."""
        node = Link(url="https://x.com", new_tab=True, children=[Text(content="x")])
        assert HtmlFragmentRenderer().render_node(node) == (
            '<a href="https://x.com" target="_blank" rel="noopener noreferrer">x</a>'
        )

    def test_href_escaped(self) -> None:
        """Test attribute values cannot break out of quotes."""
        node = Link(url='https://x.com/?a=1&b="2"', children=[Text(content="x")])
        assert HtmlFragmentRenderer().render_node(node) == (
            '<a href="https://x.com/?a=1&amp;b=&quot;2&quot;">x</a>'
        )

    @pytest.mark.parametrize("url", ["", "  ", None])
    def test_blank_url_defaults(self, url) -> None:
        """Test blank targets render as '#'."""
        node = Link(url=url, children=[Text(content="x")])  # type: ignore[arg-type]
        assert HtmlFragmentRenderer().render_node(node) == '<a href="#">x</a>'


@pytest.mark.unit
class TestBlocks:
    """Test media images and placeholders."""

    def test_resolved_media_image(self) -> None:
        """Test a resolved media block renders an image."""
        media = MediaObject(url="cdn.example.com/a.png", width=100, alt="A")
        html = HtmlFragmentRenderer().render_node(_media_block(ResolvedMedia(media=media)))

        assert html == f'<img src="https://cdn.example.com/a.png" alt="A" width="100"{IMG_STYLE} />'

    def test_image_height_and_filename_alt(self) -> None:
        """Test height is emitted and filename stands in for missing alt."""
        media = MediaObject(url="https://x/a.png", height=40, filename="a.png")
        html = HtmlFragmentRenderer().render_node(_media_block(ResolvedMedia(media=media)))

        assert html == f'<img src="https://x/a.png" alt="a.png" height="40"{IMG_STYLE} />'

    def test_image_empty_alt(self) -> None:
        """Test images always carry an alt attribute."""
        media = MediaObject(url="https://x/a.png")
        html = HtmlFragmentRenderer().render_node(_media_block(ResolvedMedia(media=media)))

        assert 'alt=""' in html
        assert "width=" not in html

    def test_image_alt_escaped(self) -> None:
        """Test alt text is escaped."""
        media = MediaObject(url="https://x/a.png", alt='"><script>')
        html = HtmlFragmentRenderer().render_node(_media_block(ResolvedMedia(media=media)))

        assert 'alt="&quot;&gt;&lt;script&gt;"' in html

    def test_media_base_url(self) -> None:
        """Test root-relative URLs join the configured origin."""
        options = HtmlFragmentRendererOptions(media_base_url="https://cms.example.com")
        media = MediaObject(url="/media/a.png")
        html = HtmlFragmentRenderer(options).render_node(_media_block(ResolvedMedia(media=media)))

        assert 'src="https://cms.example.com/media/a.png"' in html

    def test_no_style_option(self) -> None:
        """Test an empty style omits the attribute."""
        options = HtmlFragmentRendererOptions(image_style="")
        media = MediaObject(url="https://x/a.png")
        html = HtmlFragmentRenderer(options).render_node(_media_block(ResolvedMedia(media=media)))

        assert html == '<img src="https://x/a.png" alt="" />'

    def test_unresolved_media_placeholder(self) -> None:
        """Test a bare media id renders the placeholder."""
        html = HtmlFragmentRenderer().render_node(_media_block(UnresolvedMedia(media_id=42)))
        assert html == (
            '<div data-block-type="mediaBlock" data-block-id="b1" class="block-placeholder">[mediaBlock]</div>'
        )

    def test_resolved_media_blank_url_placeholder(self) -> None:
        """Test a media object without a usable URL falls back to the placeholder."""
        html = HtmlFragmentRenderer().render_node(_media_block(ResolvedMedia(media=MediaObject(url="  "))))
        assert html.startswith('<div data-block-type="mediaBlock"')

    def test_other_block_type_placeholder(self) -> None:
        """Test non-media block types render the placeholder even with media."""
        media = ResolvedMedia(media=MediaObject(url="https://x/a.png"))
        html = HtmlFragmentRenderer().render_node(_media_block(media, block_type="gallery", block_id="g"))

        assert html == '<div data-block-type="gallery" data-block-id="g" class="block-placeholder">[gallery]</div>'

    def test_custom_media_block_types(self) -> None:
        """Test media block types are configurable."""
        options = HtmlFragmentRendererOptions(media_block_types=("imageBlock",))
        media = ResolvedMedia(media=MediaObject(url="https://x/a.png"))

        assert HtmlFragmentRenderer(options).render_node(_media_block(media, block_type="imageBlock")).startswith(
            "<img "
        )
        assert HtmlFragmentRenderer(options).render_node(_media_block(media)).startswith("<div ")

    def test_placeholder_escapes_type_and_id(self) -> None:
        """Test block type and id are escaped in attributes and text."""
        html = HtmlFragmentRenderer().render_node(Block(block_type='<x">', block_id="a&b"))
        assert html == (
            '<div data-block-type="&lt;x&quot;&gt;" data-block-id="a&amp;b" '
            'class="block-placeholder">[&lt;x&quot;&gt;]</div>'
        )

    def test_placeholder_default_type(self) -> None:
        """Test a block without a type uses the default."""
        html = HtmlFragmentRenderer().render_node(Block(block_type=""))
        assert '[custom-block]' in html
        assert 'data-block-id=""' in html

    def test_placeholder_without_class(self) -> None:
        """Test an empty class omits the attribute."""
        options = HtmlFragmentRendererOptions(placeholder_class="")
        html = HtmlFragmentRenderer(options).render_node(Block(block_type="quote", block_id="q"))
        assert html == '<div data-block-type="quote" data-block-id="q">[quote]</div>'


@pytest.mark.unit
class TestHandBuiltMediaFields:
    """Test media objects built in code with the wrong field types."""

    @pytest.mark.parametrize("value", ['1" onload="y', "12px", -3, 10**40, float("nan")])
    def test_attribute_breaking_dimensions_dropped(self, value) -> None:
        """Test width and height only ever render as plain positive ints."""
        media = MediaObject(url="a.png", width=value, height=value)  # type: ignore[arg-type]
        html = HtmlFragmentRenderer().render_node(_media_block(ResolvedMedia(media=media)))

        assert html == f'<img src="https://a.png" alt=""{IMG_STYLE} />'

    def test_digit_string_dimension_kept(self) -> None:
        """Test a numeric string dimension is normalized rather than dropped."""
        media = MediaObject(url="a.png", width=" 64 ")  # type: ignore[arg-type]
        html = HtmlFragmentRenderer().render_node(_media_block(ResolvedMedia(media=media)))

        assert ' width="64"' in html

    @pytest.mark.parametrize("alt", [5, ["x"], b"bytes"])
    def test_non_string_alt_ignored(self, alt) -> None:
        """Test a non-string alt falls back to the filename."""
        media = MediaObject(url="a.png", alt=alt, filename="a.png")  # type: ignore[arg-type]
        html = HtmlFragmentRenderer().render_node(_media_block(ResolvedMedia(media=media)))

        assert 'alt="a.png"' in html

    @pytest.mark.parametrize("url", [None, 42, ["a.png"]])
    def test_non_string_url_placeholder(self, url) -> None:
        """Test a media object without a string URL renders the placeholder."""
        media = MediaObject(url=url)  # type: ignore[arg-type]
        html = HtmlFragmentRenderer().render_node(_media_block(ResolvedMedia(media=media)))

        assert html.startswith('<div data-block-type="mediaBlock" data-block-id="b1"')

    def test_non_string_block_id(self) -> None:
        """Test a non-string block id renders as an empty attribute."""
        node = Block(block_type="quote", block_id=10**5000)  # type: ignore[arg-type]
        html = HtmlFragmentRenderer().render_node(node)
        assert 'data-block-id=""' in html


@pytest.mark.unit
class TestRenderEntryPoints:
    """Test render_node, render_children and render_to_string."""

    def test_none_renders_empty(self) -> None:
        """Test None input."""
        renderer = HtmlFragmentRenderer()
        assert renderer.render_node(None) == ""
        assert renderer.render_children(None) == ""

    def test_unknown_node_renders_empty(self) -> None:
        """Test unknown nodes produce nothing."""
        assert HtmlFragmentRenderer().render_node(UnknownNode(node_type="table")) == ""

    def test_children_concatenated(self) -> None:
        """Test fragments join without separators and skip None."""
        nodes = [Heading(level=1, children=[Text(content="T")]), None, Paragraph(children=[Text(content="p")])]
        assert HtmlFragmentRenderer().render_children(nodes) == "<h1>T</h1><p>p</p>"

    def test_renderer_is_reusable(self) -> None:
        """Test calls do not leak output into each other."""
        renderer = HtmlFragmentRenderer()
        assert renderer.render_node(Text(content="a")) == "a"
        assert renderer.render_node(Text(content="b")) == "b"

    def test_render_to_string_keeps_dividers(self) -> None:
        """Test whole-document rendering shows dividers inline."""
        doc = Document(children=[Paragraph(children=[Text(content="a")]), HorizontalRule()])
        assert HtmlFragmentRenderer().render_to_string(doc) == "<p>a</p><hr />"

    def test_render_to_stream(self) -> None:
        """Test render writes to a binary stream."""
        buffer = io.BytesIO()
        HtmlFragmentRenderer().render(Document(children=[Paragraph(children=[Text(content="é")])]), buffer)
        assert buffer.getvalue() == "<p>é</p>".encode("utf-8")

    def test_wrong_options_type(self) -> None:
        """Test passing parser options is rejected."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            HtmlFragmentRenderer(LexicalParserOptions())  # type: ignore[arg-type]
        assert exc_info.value.expected_type is HtmlFragmentRendererOptions
