"""Document renderers for .docx and HTML output."""

from commonform_render.infrastructure.renderers.docx_renderer import ByteStream, DocxRenderer
from commonform_render.infrastructure.renderers.html_renderer import HtmlRenderer

__all__ = ["ByteStream", "DocxRenderer", "HtmlRenderer"]
