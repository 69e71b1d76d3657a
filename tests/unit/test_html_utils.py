#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for HTML escaping and inline format helpers."""
import pytest

from lex2pages.constants import FORMAT_BOLD, FORMAT_CODE, FORMAT_ITALIC, FORMAT_STRIKETHROUGH, FORMAT_UNDERLINE
from lex2pages.utils.html_utils import apply_text_format, escape_html, wrap_tag


@pytest.mark.unit
class TestEscapeHtml:
    """Test escape_html."""

    def test_escapes_all_five_characters(self) -> None:
        """Test each reserved character gets its entity."""
        assert escape_html("&<>\"'") == "&amp;&lt;&gt;&quot;&#39;"

    def test_ampersand_is_not_double_escaped_in_one_pass(self) -> None:
        """Test an existing entity is escaped literally, once."""
        assert escape_html("&amp;") == "&amp;amp;"

    def test_plain_text_unchanged(self) -> None:
        """Test text without reserved characters passes through."""
        assert escape_html("Hello, world") == "Hello, world"

    def test_disabled_returns_input(self) -> None:
        """Test escaping can be switched off."""
        assert escape_html("<b>", enabled=False) == "<b>"

    def test_script_tag(self) -> None:
        """Test a script payload cannot produce markup."""
        assert escape_html("<script>alert('x')</script>") == (
            "&lt;script&gt;alert(&#39;x&#39;)&lt;/script&gt;"
        )


@pytest.mark.unit
class TestWrapTag:
    """Test wrap_tag."""

    def test_without_attributes(self) -> None:
        """Test a bare tag pair."""
        assert wrap_tag("p", "x") == "<p>x</p>"

    def test_with_attributes(self) -> None:
        """Test attributes are inserted verbatim after the tag name."""
        assert wrap_tag("a", "x", ' href="#"') == '<a href="#">x</a>'


@pytest.mark.unit
class TestApplyTextFormat:
    """Test apply_text_format nesting order."""

    @pytest.mark.parametrize(
        "bit,expected",
        [
            (FORMAT_BOLD, "<strong>t</strong>"),
            (FORMAT_ITALIC, "<em>t</em>"),
            (FORMAT_UNDERLINE, "<u>t</u>"),
            (FORMAT_STRIKETHROUGH, "<s>t</s>"),
            (FORMAT_CODE, "<code>t</code>"),
        ],
    )
    def test_single_bits(self, bit: int, expected: str) -> None:
        """Test each bit maps to its tag."""
        assert apply_text_format("t", bit) == expected

    def test_bold_italic(self) -> None:
        """Test bold sits inside italic."""
        assert apply_text_format("hi", 3) == "<em><strong>hi</strong></em>"

    def test_all_bits(self) -> None:
        """Test the full nesting order, innermost first."""
        assert apply_text_format("x", 31) == "<s><u><em><strong><code>x</code></strong></em></u></s>"

    def test_zero_is_plain(self) -> None:
        """Test no bits means no tags."""
        assert apply_text_format("x", 0) == "x"

    def test_unknown_bits_ignored(self) -> None:
        """Test bits above the known set add nothing."""
        assert apply_text_format("x", 32 | 64) == "x"
        assert apply_text_format("x", 32 | FORMAT_BOLD) == "<strong>x</strong>"
