"""Form tree models.

A form is an ordered list of content elements: plain text, defined terms,
uses of defined terms, references to headings, blanks, and child forms
(optionally headed). The markup parser produces these once per invocation
and nothing downstream mutates them.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (typing)
- Pydantic (pragmatic exception for validation)
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Definition(BaseModel):
    """A term defined in place: ``""Term""``."""

    model_config = ConfigDict(frozen=True)

    definition: str


class Use(BaseModel):
    """A use of a defined term: ``<Term>``."""

    model_config = ConfigDict(frozen=True)

    use: str


class Reference(BaseModel):
    """A cross-reference to a headed child: ``{Heading}``."""

    model_config = ConfigDict(frozen=True)

    reference: str


class Blank(BaseModel):
    """A fill-in field. Its value comes from the resolved blanks list."""

    model_config = ConfigDict(frozen=True)

    blank: str = Field(..., description="Always empty in the tree; filled at render time")


class Child(BaseModel):
    """A nested form, optionally with a heading."""

    model_config = ConfigDict(frozen=True)

    heading: Optional[str] = None
    form: Form


ContentElement = Union[str, Definition, Use, Reference, Blank, Child]


class Form(BaseModel):
    """A form or sub-form."""

    model_config = ConfigDict(frozen=True)

    content: list[ContentElement] = Field(default_factory=list)
    conspicuous: bool = False


Child.model_rebuild()


# ---------------------------------------------------------------------------
# Parser output
# ---------------------------------------------------------------------------


class Direction(BaseModel):
    """Where a labelled blank sits inside the form tree.

    ``blank`` is the path of keys and indexes leading from the root form to
    the blank element, e.g. ``["content", 1, "form", "content", 0]``.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str
    blank: tuple[Union[str, int], ...]


class ParsedDocument(BaseModel):
    """Everything the parser extracts from one source document."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    form: Form
    front_matter: dict[str, Any] = Field(default_factory=dict)
    directions: tuple[Direction, ...] = ()
