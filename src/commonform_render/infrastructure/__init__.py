"""Infrastructure layer: parser, renderers and other concrete collaborators."""

from commonform_render.infrastructure.blanks import prepare_blanks
from commonform_render.infrastructure.numbering import NUMBERINGS
from commonform_render.infrastructure.parser import CommonMarkParser
from commonform_render.infrastructure.renderers import DocxRenderer, HtmlRenderer
from commonform_render.infrastructure.reporting import LoggingChannelSink, RichNoticeSink
from commonform_render.infrastructure.signatures import signature_pages
from commonform_render.infrastructure.sources import FileSource

__all__ = [
    "NUMBERINGS",
    "CommonMarkParser",
    "DocxRenderer",
    "FileSource",
    "HtmlRenderer",
    "LoggingChannelSink",
    "RichNoticeSink",
    "prepare_blanks",
    "signature_pages",
]
