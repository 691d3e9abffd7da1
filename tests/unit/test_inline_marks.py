#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_inline_marks.py
"""Unit tests for inline mark serialization.

Tests cover:
- Emphasis, strong, links and code spans
- Marks kept open across adjacent runs
- Reordering of mixable marks
- Marks on non-text inline nodes

"""

import pytest

from tree2md.ast import (
    code,
    doc,
    em,
    hard_break,
    heading,
    image,
    link,
    paragraph,
    strong,
    text,
)
from tree2md.ast.nodes import Mark


def _inline(*children):
    return doc(paragraph(*children))


@pytest.mark.unit
class TestSimpleMarks:
    """Tests for single marks."""

    def test_em(self, render):
        """Test emphasis markup."""
        assert render(_inline(text("a", em()))) == "*a*"

    def test_strong(self, render):
        """Test strong markup."""
        assert render(_inline(text("a", strong()))) == "**a**"

    def test_link(self, render):
        """Test link markup."""
        assert render(_inline(text("click", link("http://x")))) == "[click](http://x)"

    def test_link_with_title(self, render):
        """Test link title quoting."""
        assert render(_inline(text("t", link("u", "T")))) == '[t](u "T")'

    def test_link_title_with_double_quotes(self, render):
        """Test the title delimiter fallback."""
        assert render(_inline(text("t", link("u", 'a "b"')))) == "[t](u 'a \"b\"')"

    def test_link_href_escaped(self, render):
        """Test brackets in the destination are escaped."""
        assert render(_inline(text("t", link("http://x/[a]")))) == "[t](http://x/\\[a\\])"

    def test_link_non_string_title_omitted(self, render):
        """Test a non-string link title is left out."""
        assert render(_inline(text("t", Mark("link", {"href": "u", "title": 7})))) == "[t](u)"

    def test_link_non_string_href(self, render):
        """Test a non-string destination degrades to empty."""
        assert render(_inline(text("t", Mark("link", {"href": 42})))) == "[t]()"

    def test_marked_text_escaped(self, render):
        """Test text inside marks is still escaped."""
        assert render(_inline(text("2*3", strong()))) == "**2\\*3**"

    def test_marks_in_heading(self, render):
        """Test marks inside a heading."""
        assert render(doc(heading(1, text("Welcome "), text("Home", strong())))) == "# Welcome **Home**"

    def test_marked_paragraph_after_paragraph(self, render):
        """Test markup after block spacing."""
        assert render(doc(paragraph(text("a")), paragraph(text("b", strong())))) == "a\n\n**b**"


@pytest.mark.unit
class TestCodeSpans:
    """Tests for the literal code mark."""

    def test_code_span_not_escaped(self, render):
        """Test code content is emitted raw."""
        assert render(_inline(text("a "), text("x*y", code()), text(" b"))) == "a `x*y` b"

    def test_code_inside_em(self, render):
        """Test the code span sits inside the other marks."""
        assert render(_inline(text("x", em(), code()))) == "*`x`*"

    def test_adjacent_code_spans(self, render):
        """Test each run gets its own code span."""
        assert render(_inline(text("a", code()), text("b", code()))) == "`a``b`"

    def test_code_mark_on_image_ignored(self, render):
        """Test the literal mark only applies to text runs."""
        assert render(_inline(image(src="i.png", marks=[code()]))) == "![](i.png)"


@pytest.mark.unit
class TestMarkContinuity:
    """Tests for marks spanning adjacent runs."""

    def test_shared_mark_stays_open(self, render):
        """Test adjacent runs with the same mark share one span."""
        assert render(_inline(text("a", em()), text("b", em()))) == "*ab*"

    def test_mark_opened_mid_paragraph(self, render):
        """Test a mark around a middle run."""
        assert render(_inline(text("a"), text("b", strong()), text("c"))) == "a**b**c"

    def test_nested_span(self, render):
        """Test an inner mark closes before the outer one."""
        assert render(_inline(text("a", em()), text("b", em(), strong()), text("c", em()))) == "*a**b**c*"

    def test_outer_mark_added(self, render):
        """Test adding a mark to a run that keeps the open one."""
        assert render(_inline(text("a", strong()), text("b", em(), strong()))) == "**a*b***"

    def test_mixable_marks_reordered(self, render):
        """Test differing mark order does not close and reopen spans."""
        assert render(_inline(text("a", em(), strong()), text("b", strong(), em()))) == "***ab***"

    def test_link_with_partial_emphasis(self, render):
        """Test emphasis nested inside a link."""
        assert render(_inline(text("x", link("u")), text("y", link("u"), em()))) == "[x*y*](u)"

    def test_different_links_not_merged(self, render):
        """Test marks with different attributes are distinct."""
        result = render(_inline(text("a", link("u1")), text("b", link("u2"))))
        assert result == "[a](u1)[b](u2)"

    def test_mark_spans_image(self, render):
        """Test a mark stays open across an image."""
        assert render(_inline(text("a", em()), image(src="i.png", marks=[em()]))) == "*a![](i.png)*"

    def test_mark_spans_hard_break(self, render):
        """Test a mark stays open across a hard break."""
        result = render(_inline(text("a", strong()), hard_break(marks=[strong()]), text("b", strong())))
        assert result == "**a\\\nb**"

    def test_marks_closed_at_end_of_each_block(self, render):
        """Test open marks do not leak into the next block."""
        result = render(doc(paragraph(text("a", em())), paragraph(text("b", em()))))
        assert result == "*a*\n\n*b*"
