#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_renderer.py
"""Unit tests for MarkdownRenderer block rendering.

Tests cover:
- Paragraphs, headings, block quotes, code blocks, rules and images
- Inter-block spacing and prefixes of nested blocks
- Line-start sensitive escaping
- Failures for unregistered node and mark kinds

"""

import pytest

from tree2md.ast import (
    blockquote,
    code_block,
    doc,
    em,
    hard_break,
    heading,
    horizontal_rule,
    image,
    paragraph,
    text,
)
from tree2md.ast.nodes import Mark, Node
from tree2md.exceptions import RenderingError, UnknownMarkTypeError, UnknownNodeTypeError
from tree2md.options import MarkdownRendererOptions
from tree2md.renderers.markdown import MarkdownRenderer


@pytest.mark.unit
class TestBasicRendering:
    """Tests for basic node rendering."""

    def test_render_empty_document(self, render):
        """Test rendering an empty document."""
        assert render(doc()) == ""

    def test_render_text_only(self, render):
        """Test rendering plain text."""
        assert render(doc(paragraph(text("Hello world")))) == "Hello world"

    def test_render_multiple_paragraphs(self, render):
        """Test paragraphs are separated by one blank line."""
        result = render(doc(paragraph(text("First paragraph")), paragraph(text("Second paragraph"))))
        assert result == "First paragraph\n\nSecond paragraph"

    def test_no_trailing_newline(self, render):
        """Test the output ends with the last block's content."""
        assert not render(doc(paragraph(text("a")), paragraph(text("b")))).endswith("\n")

    def test_multiline_text_in_paragraph(self, render):
        """Test line breaks inside a text run are kept."""
        assert render(doc(paragraph(text("line1\nline2")))) == "line1\nline2"

    def test_renderer_is_reusable(self):
        """Test each call starts from a fresh state."""
        renderer = MarkdownRenderer()
        tree = doc(paragraph(text("same")))
        assert renderer.render_to_string(tree) == renderer.render_to_string(tree) == "same"


@pytest.mark.unit
class TestHeadingRendering:
    """Tests for heading rendering."""

    def test_heading_level_1(self, render):
        """Test rendering h1."""
        assert render(doc(heading(1, text("Title")))) == "# Title"

    def test_heading_level_2(self, render):
        """Test rendering h2."""
        assert render(doc(heading(2, text("Title")))) == "## Title"

    def test_heading_level_6(self, render):
        """Test rendering h6."""
        assert render(doc(heading(6, text("Deep")))) == "###### Deep"

    def test_heading_missing_level_defaults_to_1(self, render):
        """Test a heading without a level attribute."""
        assert render(doc(Node("heading", content=[text("Title")]))) == "# Title"

    @pytest.mark.parametrize("level", ["2", None, 0, 2.0, True])
    def test_heading_malformed_level_defaults_to_1(self, render, level):
        """Test a level that is not a positive int falls back to h1."""
        assert render(doc(Node("heading", {"level": level}, [text("Title")]))) == "# Title"

    def test_heading_then_paragraph(self, render):
        """Test spacing after a heading."""
        assert render(doc(heading(1, text("T")), paragraph(text("body")))) == "# T\n\nbody"


@pytest.mark.unit
class TestEscaping:
    """Tests for escaping of literal text."""

    def test_emphasis_characters_escaped(self, render):
        """Test literal asterisks do not become emphasis."""
        assert render(doc(paragraph(text("Hello *world*")))) == "Hello \\*world\\*"

    def test_all_inline_specials_escaped(self, render):
        """Test every always-escaped character."""
        assert render(doc(paragraph(text("`*\\~+[]")))) == "\\`\\*\\\\\\~\\+\\[\\]"

    def test_hash_at_line_start_escaped(self, render):
        """Test a leading hash does not become a heading."""
        assert render(doc(paragraph(text("# not a heading")))) == "\\# not a heading"

    def test_dash_at_start_of_second_paragraph_escaped(self, render):
        """Test a paragraph following a closed block counts as line start."""
        assert render(doc(paragraph(text("a")), paragraph(text("- b")))) == "a\n\n\\- b"

    def test_colon_at_start_of_continuation_line_escaped(self, render):
        """Test line-start escaping applies to each line of a run."""
        assert render(doc(paragraph(text("a\n:b")))) == "a\n\\:b"

    def test_line_start_characters_mid_line_not_escaped(self, render):
        """Test ':', '#' and '-' in the middle of a line are left alone."""
        assert render(doc(paragraph(text("a "), text("# b - c: d")))) == "a # b - c: d"

    def test_heading_text_not_line_start(self, render):
        """Test heading content follows the marker on the same line."""
        assert render(doc(heading(1, text("#1 hit")))) == "# #1 hit"

    def test_underscore_not_escaped(self, render):
        """Test underscores are passed through."""
        assert render(doc(paragraph(text("snake_case")))) == "snake_case"


@pytest.mark.unit
class TestBlockQuoteRendering:
    """Tests for block quote rendering."""

    def test_blockquote_paragraph(self, render):
        """Test the quoted paragraph starts on the marker line."""
        assert render(doc(blockquote(paragraph(text("quoted"))))) == "> quoted"

    def test_blockquote_continuation_lines(self, render):
        """Test continuation lines keep the quote prefix."""
        assert render(doc(blockquote(paragraph(text("one\ntwo"))))) == "> one\n> two"

    def test_blockquote_hard_break(self, render):
        """Test a hard break inside a quote."""
        result = render(doc(blockquote(paragraph(text("one"), hard_break(), text("two")))))
        assert result == "> one\\\n> two"

    def test_blockquote_two_paragraphs(self, render):
        """Test blank lines inside a quote carry a trimmed marker."""
        result = render(doc(blockquote(paragraph(text("a")), paragraph(text("b")))))
        assert result == "> a\n>\n> b"

    def test_nested_blockquote(self, render):
        """Test prefixes accumulate for nested quotes."""
        result = render(doc(blockquote(blockquote(paragraph(text("a")), paragraph(text("b"))))))
        assert result == "> > a\n> >\n> > b"

    def test_blockquote_followed_by_paragraph(self, render):
        """Test the block after a quote has no prefix."""
        result = render(doc(blockquote(paragraph(text("a"))), paragraph(text("b"))))
        assert result == "> a\n\nb"

    def test_blockquote_with_heading(self, render):
        """Test a heading inside a quote."""
        assert render(doc(blockquote(heading(3, text("H"))))) == "> ### H"


@pytest.mark.unit
class TestCodeBlockRendering:
    """Tests for code block rendering."""

    def test_fenced_code_block(self, render):
        """Test a code block with an info string is fenced."""
        result = render(doc(code_block("x = 1\nprint(x)", "python")))
        assert result == "```python\nx = 1\nprint(x)\n```"

    def test_fenced_code_block_empty_info_string(self, render):
        """Test an empty info string still produces a fence."""
        assert render(doc(code_block("code", ""))) == "```\ncode\n```"

    def test_fenced_code_content_not_escaped(self, render):
        """Test code content is emitted raw."""
        assert render(doc(code_block("a*b [c]", "text"))) == "```text\na*b [c]\n```"

    def test_fenced_code_trailing_newline_not_doubled(self, render):
        """Test content ending in a newline gets no extra line."""
        assert render(doc(code_block("x\n", "py"))) == "```py\nx\n```"

    def test_indented_code_block(self, render):
        """Test a code block without info string is indented."""
        assert render(doc(code_block("a\nb"))) == "    a\n    b"

    def test_indented_code_block_not_escaped(self, render):
        """Test indented code content is emitted raw."""
        assert render(doc(code_block("# x *y*"))) == "    # x *y*"

    def test_code_block_between_paragraphs(self, render):
        """Test spacing around a code block."""
        result = render(doc(paragraph(text("before")), code_block("x", "sh"), paragraph(text("after"))))
        assert result == "before\n\n```sh\nx\n```\n\nafter"

    def test_code_block_in_blockquote(self, render):
        """Test every fenced line carries the quote prefix."""
        result = render(doc(blockquote(code_block("a\nb", "js"))))
        assert result == "> ```js\n> a\n> b\n> ```"


@pytest.mark.unit
class TestHorizontalRuleRendering:
    """Tests for thematic break rendering."""

    def test_default_rule(self, render):
        """Test the default rule markup."""
        result = render(doc(paragraph(text("a")), horizontal_rule(), paragraph(text("b"))))
        assert result == "a\n\n---\n\nb"

    def test_custom_rule_markup(self, render):
        """Test the node's markup attribute is used."""
        assert render(doc(horizontal_rule("* * *"))) == "* * *"

    def test_non_string_rule_markup_uses_default(self, render):
        """Test a markup attribute that is not a string is ignored."""
        assert render(doc(Node("horizontal_rule", {"markup": 3}))) == "---"


@pytest.mark.unit
class TestImageRendering:
    """Tests for image rendering."""

    def test_image_without_alt_or_title(self, render):
        """Test missing alt and title degrade to nothing."""
        assert render(doc(paragraph(image(src="a.png")))) == "![](a.png)"

    def test_image_with_alt_and_title(self, render):
        """Test alt is escaped and title quoted."""
        result = render(doc(paragraph(image(src="a.png", alt="An *alt*", title="T"))))
        assert result == '![An \\*alt\\*](a.png "T")'

    def test_image_title_with_double_quotes(self, render):
        """Test the title falls back to single quotes."""
        result = render(doc(paragraph(image(src="a.png", title='say "hi"'))))
        assert result == "![](a.png 'say \"hi\"')"

    def test_image_src_escaped(self, render):
        """Test brackets in the source are escaped."""
        assert render(doc(paragraph(image(src="a[1].png")))) == "![](a\\[1\\].png)"

    def test_image_missing_src(self, render):
        """Test a missing source degrades to an empty destination."""
        assert render(doc(paragraph(image()))) == "![]()"

    def test_image_non_string_alt(self, render):
        """Test a non-string alt degrades to empty."""
        tree = doc(paragraph(Node("image", {"src": "a.png", "alt": 5})))
        assert render(tree) == "![](a.png)"

    def test_image_non_string_title_omitted(self, render):
        """Test a non-string title is left out."""
        tree = doc(paragraph(Node("image", {"src": "a.png", "alt": "x", "title": 5})))
        assert render(tree) == "![x](a.png)"

    def test_image_non_string_src(self, render):
        """Test a non-string source degrades to an empty destination."""
        assert render(doc(paragraph(Node("image", {"src": ["a.png"]})))) == "![]()"

    def test_image_inline_with_text(self, render):
        """Test an image between text runs."""
        result = render(doc(paragraph(text("see "), image(src="i.png", alt="x"), text(" here"))))
        assert result == "see ![x](i.png) here"


@pytest.mark.unit
class TestHardBreakRendering:
    """Tests for hard break rendering."""

    def test_default_hard_break(self, render):
        """Test the default backslash break."""
        assert render(doc(paragraph(text("a"), hard_break(), text("b")))) == "a\\\nb"

    def test_custom_hard_break(self):
        """Test the hard_break option."""
        renderer = MarkdownRenderer(MarkdownRendererOptions(hard_break="  \n"))
        assert renderer.render_to_string(doc(paragraph(text("a"), hard_break(), text("b")))) == "a  \nb"


@pytest.mark.unit
class TestUnknownKinds:
    """Tests for unregistered node and mark kinds."""

    def test_unknown_block_node(self, render):
        """Test an unknown block kind aborts rendering."""
        with pytest.raises(UnknownNodeTypeError) as exc_info:
            render(doc(paragraph(text("ok")), Node("table")))
        assert exc_info.value.node_type == "table"

    def test_unknown_inline_node(self, render):
        """Test an unknown inline kind aborts rendering."""
        with pytest.raises(UnknownNodeTypeError):
            render(doc(paragraph(Node("footnote_ref"))))

    def test_unknown_mark(self, render):
        """Test an unknown mark kind aborts rendering."""
        with pytest.raises(UnknownMarkTypeError) as exc_info:
            render(doc(paragraph(text("x", em(), Mark("underline")))))
        assert exc_info.value.mark_type == "underline"

    def test_unknown_kind_is_rendering_error(self, render):
        """Test the failure is catchable as a RenderingError."""
        with pytest.raises(RenderingError):
            render(doc(Node("mystery")))

    def test_document_node_itself_not_renderable_as_child(self, render):
        """Test a nested doc node is not a registered block kind."""
        with pytest.raises(UnknownNodeTypeError):
            render(doc(doc(paragraph(text("x")))))
