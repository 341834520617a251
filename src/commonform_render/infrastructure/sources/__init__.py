"""Document sources."""

from commonform_render.infrastructure.sources.file_source import FileSource

__all__ = ["FileSource"]
