"""Tests for the Common Form markup parser."""

from __future__ import annotations

import pytest

from commonform_render.domain.errors import ParseError
from commonform_render.domain.models.form import (
    Blank,
    Child,
    Definition,
    Direction,
    Reference,
    Use,
)
from commonform_render.infrastructure.parser import CommonMarkParser


@pytest.fixture()
def parser() -> CommonMarkParser:
    return CommonMarkParser()


# ---------------------------------------------------------------------------
# Front matter
# ---------------------------------------------------------------------------


class TestFrontMatter:
    def test_parsed_as_yaml(self, parser):
        doc = parser.parse("---\ntitle: Lease\nhash: true\nblanks:\n  Rent: 100\n---\nText.\n")
        assert doc.front_matter == {"title": "Lease", "hash": True, "blanks": {"Rent": 100}}

    def test_absent(self, parser):
        assert parser.parse("Text.\n").front_matter == {}

    def test_empty_block(self, parser):
        assert parser.parse("---\n---\nText.\n").front_matter == {}

    def test_dots_close_block(self, parser):
        assert parser.parse("---\ntitle: X\n...\nText.\n").front_matter == {"title": "X"}

    def test_byte_order_mark(self, parser):
        assert parser.parse("\ufeff---\ntitle: X\n---\nText.\n").front_matter == {"title": "X"}

    def test_unterminated(self, parser):
        with pytest.raises(ParseError, match="not terminated"):
            parser.parse("---\ntitle: Lease\nText.\n")

    def test_invalid_yaml(self, parser):
        with pytest.raises(ParseError, match="Invalid front matter"):
            parser.parse("---\ntitle: [unclosed\n---\nText.\n")

    def test_not_a_mapping(self, parser):
        with pytest.raises(ParseError, match="must be a mapping"):
            parser.parse("---\n- one\n- two\n---\nText.\n")

    @pytest.mark.parametrize("key", ["2024", "true", "null", "1.5"])
    def test_keys_must_be_text(self, parser, key):
        with pytest.raises(ParseError, match="keys must be text"):
            parser.parse(f"---\n{key}: draft\ntitle: X\n---\n\nHello.\n")

    def test_quoted_keys_are_text(self, parser):
        doc = parser.parse("---\n\"2024\": draft\n---\n\nHello.\n")
        assert doc.front_matter == {"2024": "draft"}


# ---------------------------------------------------------------------------
# Inline markup
# ---------------------------------------------------------------------------


class TestInline:
    def test_all_elements(self, parser):
        form = parser.parse('""Buyer"" pays <Seller> [Price] under {Payment}.\n').form
        assert form.content == [
            Definition(definition="Buyer"),
            " pays ",
            Use(use="Seller"),
            " ",
            Blank(blank=""),
            " under ",
            Reference(reference="Payment"),
            ".",
        ]

    def test_lines_joined(self, parser):
        form = parser.parse("First line\nsecond line.\n").form
        assert form.content == ["First line second line."]

    @pytest.mark.parametrize(
        "text",
        ["An [open blank.", "A stray ] bracket.", "A {dangling reference.", 'Half ""quote.'],
    )
    def test_unbalanced(self, parser, text):
        with pytest.raises(ParseError, match="Unbalanced markup"):
            parser.parse(text + "\n")

    def test_conspicuous(self, parser):
        form = parser.parse("!!! NO WARRANTY.\n").form
        assert form.conspicuous is True
        assert form.content == ["NO WARRANTY."]


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class TestStructure:
    def test_lease(self, parser, lease_text):
        doc = parser.parse(lease_text)
        root = doc.form.content

        assert root[:5] == [
            "This lease is between ",
            Definition(definition="Landlord"),
            " and ",
            Blank(blank=""),
            ".",
        ]
        rent, term = root[5], root[6]
        assert isinstance(rent, Child) and rent.heading == "Rent"
        assert isinstance(term, Child) and term.heading == "Term"
        assert rent.form.content[0] == Use(use="Landlord")
        assert term.form.conspicuous is True
        assert doc.front_matter == {"title": "Lease", "blanks": ["Tenant Name"]}

    def test_lease_directions(self, parser, lease_text):
        assert parser.parse(lease_text).directions == (
            Direction(identifier="Tenant Name", blank=("content", 3)),
            Direction(identifier="Rent", blank=("content", 5, "form", "content", 2)),
            Direction(identifier="End Date", blank=("content", 6, "form", "content", 1)),
        )

    def test_nested_headings(self, parser):
        form = parser.parse("Intro.\n\n# Outer\n\nOuter text.\n\n## Inner\n\nInner text.\n").form
        outer = form.content[1]
        assert outer.heading == "Outer"
        inner = outer.form.content[1]
        assert inner.heading == "Inner"
        assert inner.form.content == ["Inner text."]

    def test_sibling_after_nested(self, parser):
        form = parser.parse("# A\n\na.\n\n## A1\n\na1.\n\n# B\n\nb.\n").form
        assert [child.heading for child in form.content] == ["A", "B"]

    def test_later_paragraphs_become_unheaded_children(self, parser):
        form = parser.parse("# Terms\n\nFirst.\n\nSecond.\n\nThird.\n").form
        terms = form.content[0].form
        assert terms.content[0] == "First."
        assert [c.heading for c in terms.content[1:]] == [None, None]
        assert terms.content[2].form.content == ["Third."]

    def test_level_jump(self, parser):
        with pytest.raises(ParseError, match="heading level 3 follows level 1"):
            parser.parse("# A\n\na.\n\n### Too deep\n\nx.\n")

    def test_empty_section(self, parser):
        with pytest.raises(ParseError, match="has no content"):
            parser.parse("# Empty\n\n# Full\n\nText.\n")

    @pytest.mark.parametrize("text", ["", "\n\n", "---\ntitle: X\n---\n"])
    def test_empty_form(self, parser, text):
        with pytest.raises(ParseError, match="Form has no content."):
            parser.parse(text)
