"""Port: Report sink, where a result message is delivered."""

from abc import ABC, abstractmethod


class ReportSinkPort(ABC):
    """Contract for a single reporting channel.

    Two channels are wired in practice: an ephemeral notice shown to the
    user and a persistent, append-only log.
    """

    @abstractmethod
    def error(self, message: str) -> None:
        """Deliver a failure message."""
        ...

    @abstractmethod
    def info(self, message: str) -> None:
        """Deliver a success or progress message."""
        ...
