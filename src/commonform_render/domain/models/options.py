"""Render option models: validated, format-specific configuration.

Each model is consumed by exactly one generator. The configuration
resolver builds them from loosely typed front matter; see
``application/resolver.py`` for the coercion rules.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from commonform_render.domain.models.signatures import SignatureBlock
from commonform_render.domain.ports.numbering import NumberingScheme

DEFAULT_TITLE = "Untitled Form"


# ---------------------------------------------------------------------------
# Blanks
# ---------------------------------------------------------------------------


class BlankValue(BaseModel):
    """A value for the blank found at ``blank`` (a path into the form tree)."""

    model_config = ConfigDict(frozen=True)

    blank: tuple[Union[str, int], ...]
    value: str


# ---------------------------------------------------------------------------
# Per-format options
# ---------------------------------------------------------------------------


class DocxOptions(BaseModel):
    """Options for the word-processor generator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    numbering: NumberingScheme
    title: str = DEFAULT_TITLE
    edition: Optional[Any] = None
    hash: bool = False
    left_align_body: bool = False
    a4: bool = False
    mark_filled: bool = False
    smartify: bool = True
    center_title: bool = False
    indent_margins: bool = False
    styles: Optional[Any] = Field(None, description="Opaque style overrides, passed through")
    after: Optional[SignatureBlock] = Field(None, description="Trailing signature pages")


class HtmlOptions(BaseModel):
    """Options for the HTML generator."""

    model_config = ConfigDict(frozen=True)

    title: str = DEFAULT_TITLE
    edition: Optional[Any] = None
    depth: Optional[Any] = Field(
        None,
        description="Heading depth offset. Populated from front matter 'edition'.",
    )
    class_names: Optional[Any] = None
    html5: bool = True
    ids: bool = True
    lists: bool = True


RenderOptions = Union[DocxOptions, HtmlOptions]


class ResolvedRender(BaseModel):
    """Resolver output: options for one format plus the blanks list."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    options: RenderOptions
    blanks: list[Any] = Field(default_factory=list)
