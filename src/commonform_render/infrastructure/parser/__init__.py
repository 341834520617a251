"""Common Form markup parsing."""

from commonform_render.infrastructure.parser.commonmark_parser import CommonMarkParser

__all__ = ["CommonMarkParser"]
