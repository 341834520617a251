"""Port: Source provider, supplying the document being rendered."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SourceDocument:
    """Raw text of the current document and the path it came from."""

    text: str
    path: Path


class SourceProviderPort(ABC):
    """Contract for acquiring the current document."""

    @abstractmethod
    def acquire(self) -> SourceDocument:
        """Return the current document's text and path."""
        ...
