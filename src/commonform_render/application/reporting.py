"""Result reporting: one message per invocation, delivered to both sinks."""

from __future__ import annotations

from pathlib import Path

from commonform_render.domain.ports.report_sink import ReportSinkPort


class Reporter:
    """Normalise results into messages for the notice and log sinks.

    Failures go to both sinks as ``stderr: <message>``. Successes go to
    the log and to console output as ``Wrote <path>``.
    """

    def __init__(self, notice: ReportSinkPort, log: ReportSinkPort) -> None:
        self._notice = notice
        self._log = log

    def failure(self, message: str) -> str:
        text = f"stderr: {message}"
        self._notice.error(text)
        self._log.error(text)
        return text

    def success(self, path: Path) -> str:
        text = f"Wrote {path}"
        self._log.info(text)
        self._notice.info(text)
        return text
