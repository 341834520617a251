"""Blanks preparation from front-matter values."""

from commonform_render.infrastructure.blanks.prepare_blanks import prepare_blanks

__all__ = ["prepare_blanks"]
