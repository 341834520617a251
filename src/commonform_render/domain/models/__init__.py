"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from commonform_render.domain.models.enums import OutputFormat, StyleRole
from commonform_render.domain.models.form import (
    Blank,
    Child,
    Definition,
    Direction,
    Form,
    ParsedDocument,
    Reference,
    Use,
)
from commonform_render.domain.models.options import (
    DEFAULT_TITLE,
    BlankValue,
    DocxOptions,
    HtmlOptions,
    RenderOptions,
    ResolvedRender,
)
from commonform_render.domain.models.signatures import (
    SignatureBlock,
    SignatureEntity,
    SignaturePage,
)

__all__ = [
    # Form tree
    "Blank",
    "Child",
    "Definition",
    "Direction",
    "Form",
    "ParsedDocument",
    "Reference",
    "Use",
    # Enums
    "OutputFormat",
    "StyleRole",
    # Options
    "DEFAULT_TITLE",
    "BlankValue",
    "DocxOptions",
    "HtmlOptions",
    "RenderOptions",
    "ResolvedRender",
    # Signatures
    "SignatureBlock",
    "SignatureEntity",
    "SignaturePage",
]
