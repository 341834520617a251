"""Port: Markup parser, turning raw source text into a parsed document."""

from abc import ABC, abstractmethod

from commonform_render.domain.models.form import ParsedDocument


class MarkupParserPort(ABC):
    """Contract for parsing Common Form markup."""

    @abstractmethod
    def parse(self, text: str) -> ParsedDocument:
        """Parse *text*, raising ``ParseError`` on malformed input."""
        ...
