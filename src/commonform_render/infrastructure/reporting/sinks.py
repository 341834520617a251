"""Report sinks: the console notice and the persistent log channel."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel

from commonform_render.domain.ports.report_sink import ReportSinkPort

CHANNEL_LOGGER = "commonform_render.channel"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


class RichNoticeSink(ReportSinkPort):
    """Ephemeral notices printed to the terminal with Rich."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console or Console(stderr=True)

    def error(self, message: str) -> None:
        self._console.print(f"[bold red]❌ {message}[/]", markup=True, highlight=False)

    def info(self, message: str) -> None:
        self._console.print(Panel(message, title="Common Form", border_style="green"))


class LoggingChannelSink(ReportSinkPort):
    """Append-only log channel built on stdlib logging.

    When *log_file* is given, a file handler in append mode is attached for
    the lifetime of the sink; without one, messages are discarded. Call
    ``close()`` to detach the handler.
    """

    def __init__(self, log_file: Optional[Path] = None, name: str = CHANNEL_LOGGER) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False
        self._handler: Optional[logging.Handler] = None
        if log_file is not None:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            self._handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        else:
            self._handler = logging.NullHandler()
        self._logger.addHandler(self._handler)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def close(self) -> None:
        if self._handler is not None:
            self._logger.removeHandler(self._handler)
            self._handler.close()
            self._handler = None
