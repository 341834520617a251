"""Tests for the configuration resolver."""

from __future__ import annotations

import pytest

from commonform_render.application.resolver import ConfigurationResolver
from commonform_render.domain.errors import (
    InvalidNumberingType,
    ResolutionError,
    UnknownNumberingScheme,
)
from commonform_render.domain.models.enums import OutputFormat
from commonform_render.domain.models.form import Direction
from commonform_render.domain.models.options import BlankValue, DocxOptions, HtmlOptions
from commonform_render.domain.models.signatures import SignatureBlock
from commonform_render.infrastructure.blanks import prepare_blanks
from commonform_render.infrastructure.numbering import NUMBERINGS
from commonform_render.infrastructure.signatures import signature_pages

DIRECTIONS = (
    Direction(identifier="Tenant Name", blank=("content", 1)),
    Direction(identifier="Rent", blank=("content", 3, "form", "content", 1)),
)


@pytest.fixture()
def resolver() -> ConfigurationResolver:
    return ConfigurationResolver(NUMBERINGS, signature_pages, prepare_blanks)


def _docx(resolver: ConfigurationResolver, front_matter: dict) -> DocxOptions:
    return resolver.resolve(OutputFormat.DOCX, front_matter, DIRECTIONS).options


def _html(resolver: ConfigurationResolver, front_matter: dict) -> HtmlOptions:
    return resolver.resolve(OutputFormat.HTML, front_matter, DIRECTIONS).options


# ---------------------------------------------------------------------------
# Numbering
# ---------------------------------------------------------------------------


class TestNumbering:
    def test_absent_uses_outline(self, resolver):
        assert _docx(resolver, {}).numbering is NUMBERINGS["outline"]

    def test_null_counts_as_absent(self, resolver):
        assert _docx(resolver, {"numbering": None}).numbering is NUMBERINGS["outline"]

    def test_registered_name(self, resolver):
        assert _docx(resolver, {"numbering": "decimal"}).numbering is NUMBERINGS["decimal"]

    def test_unknown_name(self, resolver):
        with pytest.raises(UnknownNumberingScheme) as info:
            _docx(resolver, {"numbering": "roman"})
        assert isinstance(info.value, ResolutionError)
        assert str(info.value) == "No such numbering scheme: roman"
        assert info.value.name == "roman"

    @pytest.mark.parametrize("value", [3, True, ["outline"], {"name": "outline"}])
    def test_non_string(self, resolver, value):
        with pytest.raises(InvalidNumberingType, match="Numbering is not a string."):
            _docx(resolver, {"numbering": value})

    @pytest.mark.parametrize("value", [False, 0])
    def test_falsy_non_string_is_not_absent(self, resolver, value):
        with pytest.raises(InvalidNumberingType):
            _docx(resolver, {"numbering": value})

    def test_empty_name_is_unknown(self, resolver):
        with pytest.raises(UnknownNumberingScheme, match="No such numbering scheme: "):
            _docx(resolver, {"numbering": ""})

    def test_configured_default(self):
        resolver = ConfigurationResolver(
            NUMBERINGS, signature_pages, prepare_blanks, default_numbering="decimal"
        )
        assert _docx(resolver, {}).numbering is NUMBERINGS["decimal"]

    def test_unregistered_default_rejected(self):
        with pytest.raises(ValueError):
            ConfigurationResolver(
                NUMBERINGS, signature_pages, prepare_blanks, default_numbering="roman"
            )


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------

FLAGS = [
    ("hash", "hash"),
    ("leftAlignBody", "left_align_body"),
    ("a4", "a4"),
    ("markFilled", "mark_filled"),
    ("centerTitle", "center_title"),
    ("indentMargins", "indent_margins"),
]


class TestFlags:
    @pytest.mark.parametrize("key, field", FLAGS)
    def test_absent_is_false(self, resolver, key, field):
        assert getattr(_docx(resolver, {}), field) is False

    @pytest.mark.parametrize("key, field", FLAGS)
    @pytest.mark.parametrize("value", [True, 1, "yes", ["x"]])
    def test_truthy_is_true(self, resolver, key, field, value):
        assert getattr(_docx(resolver, {key: value}), field) is True

    @pytest.mark.parametrize("key, field", FLAGS)
    @pytest.mark.parametrize("value", [False, 0, "", None])
    def test_falsy_is_false(self, resolver, key, field, value):
        assert getattr(_docx(resolver, {key: value}), field) is False

    @pytest.mark.parametrize("front_matter", [{}, {"smartify": True}, {"smartify": "yes"},
                                              {"smartify": 0}, {"smartify": None}])
    def test_smartify_enabled_unless_false(self, resolver, front_matter):
        assert _docx(resolver, front_matter).smartify is True

    def test_smartify_disabled_by_false(self, resolver):
        assert _docx(resolver, {"smartify": False}).smartify is False


# ---------------------------------------------------------------------------
# Title, edition, styles, signatures
# ---------------------------------------------------------------------------


class TestPassThrough:
    def test_default_title(self, resolver):
        assert _docx(resolver, {}).title == "Untitled Form"
        assert _html(resolver, {}).title == "Untitled Form"

    def test_empty_title_uses_default(self, resolver):
        assert _docx(resolver, {"title": ""}).title == "Untitled Form"

    def test_title(self, resolver):
        assert _docx(resolver, {"title": "Lease"}).title == "Lease"

    def test_configured_default_title(self):
        resolver = ConfigurationResolver(
            NUMBERINGS, signature_pages, prepare_blanks, default_title="Draft"
        )
        assert _docx(resolver, {}).title == "Draft"

    def test_edition_absent_is_unset(self, resolver):
        assert _docx(resolver, {}).edition is None

    def test_edition_passes_through(self, resolver):
        assert _docx(resolver, {"edition": "2nd Edition"}).edition == "2nd Edition"

    def test_styles_verbatim(self, resolver):
        styles = {"heading": {"bold": True}}
        assert _docx(resolver, {"styles": styles}).styles == styles

    def test_styles_absent(self, resolver):
        assert _docx(resolver, {}).styles is None

    def test_signatures_attached_as_after(self, resolver):
        options = _docx(resolver, {"signatures": [{"term": "Tenant"}, {"term": "Landlord"}]})
        assert isinstance(options.after, SignatureBlock)
        assert [page.term for page in options.after.pages] == ["Tenant", "Landlord"]

    def test_signatures_absent(self, resolver):
        assert _docx(resolver, {}).after is None

    def test_invalid_signatures(self, resolver):
        with pytest.raises(ResolutionError, match="Unknown field 'signer'"):
            _docx(resolver, {"signatures": {"signer": "Jane"}})

    def test_signatures_wrong_type(self, resolver):
        with pytest.raises(ResolutionError, match="Invalid signature pages"):
            _docx(resolver, {"signatures": "Jane Doe"})

    def test_signature_generator_failure_is_resolution_error(self):
        def broken(spec):
            raise ValueError("boom")

        resolver = ConfigurationResolver(NUMBERINGS, broken, prepare_blanks)
        with pytest.raises(ResolutionError, match="boom"):
            _docx(resolver, {"signatures": {"term": "Tenant"}})

    def test_unexpected_signature_failure_is_resolution_error(self):
        def broken(spec):
            raise KeyError("entities")

        resolver = ConfigurationResolver(NUMBERINGS, broken, prepare_blanks)
        with pytest.raises(ResolutionError, match="Invalid signature pages"):
            _docx(resolver, {"signatures": {"term": "Tenant"}})


# ---------------------------------------------------------------------------
# HTML options
# ---------------------------------------------------------------------------


class TestHtmlOptions:
    def test_fixed_flags(self, resolver):
        options = _html(resolver, {"html5": False, "ids": False, "lists": False})
        assert options.html5 is True
        assert options.ids is True
        assert options.lists is True

    def test_edition_and_depth_unset(self, resolver):
        options = _html(resolver, {"title": "Lease"})
        assert options.edition is None
        assert options.depth is None

    def test_depth_copies_edition(self, resolver):
        options = _html(resolver, {"edition": "3", "depth": 7})
        assert options.edition == "3"
        assert options.depth == "3"

    def test_class_names(self, resolver):
        assert _html(resolver, {"classNames": ["lease"]}).class_names == ["lease"]
        assert _html(resolver, {}).class_names is None

    def test_document_only_keys_ignored(self, resolver):
        options = _html(resolver, {"numbering": "roman", "signatures": "junk"})
        assert not hasattr(options, "numbering")


# ---------------------------------------------------------------------------
# Blanks
# ---------------------------------------------------------------------------


class TestBlanks:
    @pytest.mark.parametrize("fmt", list(OutputFormat))
    def test_absent_is_empty(self, resolver, fmt):
        assert resolver.resolve(fmt, {}, DIRECTIONS).blanks == []

    @pytest.mark.parametrize("fmt", list(OutputFormat))
    def test_sequence_is_verbatim(self, resolver, fmt):
        blanks = ["Tenant Name", {"blank": ["content", 1], "value": "Jane"}]
        assert resolver.resolve(fmt, {"blanks": blanks}, DIRECTIONS).blanks == blanks

    def test_mapping_is_derived(self, resolver):
        resolved = resolver.resolve(
            OutputFormat.DOCX, {"blanks": {"Rent": "$1,200"}}, DIRECTIONS
        )
        assert resolved.blanks == prepare_blanks({"Rent": "$1,200"}, DIRECTIONS)
        assert resolved.blanks == [
            BlankValue(blank=("content", 3, "form", "content", 1), value="$1,200")
        ]

    def test_preparer_receives_spec_and_directions(self):
        calls = []

        def preparer(spec, directions):
            calls.append((spec, directions))
            return ["derived"]

        resolver = ConfigurationResolver(NUMBERINGS, signature_pages, preparer)
        resolved = resolver.resolve(OutputFormat.HTML, {"blanks": {"Rent": "1"}}, DIRECTIONS)
        assert resolved.blanks == ["derived"]
        assert calls == [({"Rent": "1"}, DIRECTIONS)]

    def test_directions_untouched(self, resolver):
        directions = list(DIRECTIONS)
        resolver.resolve(OutputFormat.DOCX, {"blanks": {"Tenant Name": "Jane"}}, directions)
        assert directions == list(DIRECTIONS)

    def test_preparer_failure_is_resolution_error(self, resolver):
        with pytest.raises(ResolutionError, match="Blanks must be a list"):
            resolver.resolve(OutputFormat.DOCX, {"blanks": "Tenant Name"}, DIRECTIONS)

    def test_unexpected_preparer_failure_is_resolution_error(self):
        def preparer(spec, directions):
            raise AttributeError("'int' object has no attribute 'items'")

        resolver = ConfigurationResolver(NUMBERINGS, signature_pages, preparer)
        with pytest.raises(ResolutionError, match="has no attribute"):
            resolver.resolve(OutputFormat.DOCX, {"blanks": 7}, DIRECTIONS)
