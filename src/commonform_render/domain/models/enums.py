"""Enumerations for Common Form rendering."""

from enum import Enum


class OutputFormat(str, Enum):
    """Supported output formats."""

    DOCX = "docx"
    HTML = "html"

    @property
    def extension(self) -> str:
        return f".{self.value}"


class StyleRole(str, Enum):
    """Text roles that ``styles`` overrides may target in .docx output."""

    TEXT = "text"
    TITLE = "title"
    HEADING = "heading"
    DEFINITION = "definition"
    USE = "use"
    REFERENCE = "reference"
    FILLED = "filled"
    BLANK = "blank"
    SIGNATURE = "signature"
