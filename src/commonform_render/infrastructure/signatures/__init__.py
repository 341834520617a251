"""Signature page generation."""

from commonform_render.infrastructure.signatures.signature_pages import signature_pages

__all__ = ["signature_pages"]
