"""Port: Numbering scheme, assigning numbers to headed sections."""

from abc import ABC, abstractmethod
from typing import Sequence


class NumberingScheme(ABC):
    """Contract for a section numbering algorithm.

    ``path`` holds the one-based position of the child at every depth, from
    the outermost form inwards. ``[2, 1]`` is the first child of the second
    top-level child.
    """

    name: str = ""

    @abstractmethod
    def number(self, path: Sequence[int]) -> str:
        """Return the number label for the child at *path*."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
