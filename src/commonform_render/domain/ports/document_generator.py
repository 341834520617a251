"""Port: Document generator, rendering a form tree to output bytes or text.

This is a domain-level contract. Infrastructure renderers (docx, html)
implement this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence, Union

from commonform_render.domain.models.form import Form

# A finished string, or an iterable of byte chunks produced on demand.
GeneratorOutput = Union[str, bytes, Iterable[bytes]]


class DocumentGeneratorPort(ABC):
    """Contract for rendering a form with its blanks and options."""

    @abstractmethod
    def render(self, form: Form, blanks: Sequence[Any], options: Any) -> GeneratorOutput:
        """Render the form, raising ``GenerationError`` when it is rejected."""
        ...
