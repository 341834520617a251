"""Read the current document from disk."""

from __future__ import annotations

import os
from pathlib import Path

from commonform_render.domain.errors import SourceError
from commonform_render.domain.ports.source_provider import SourceDocument, SourceProviderPort


class FileSource(SourceProviderPort):
    """Treat a file on disk as the current document."""

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        self._path = Path(os.path.normpath(path))
        self._encoding = encoding

    def acquire(self) -> SourceDocument:
        try:
            text = self._path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            raise SourceError(f"Could not read {self._path}: {exc}") from exc
        return SourceDocument(text=text, path=self._path)
