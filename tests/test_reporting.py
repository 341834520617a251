"""Tests for the reporter and its sinks."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from commonform_render.application.reporting import Reporter
from commonform_render.infrastructure.reporting import LoggingChannelSink, RichNoticeSink


class TestReporter:
    def test_failure_goes_to_both_sinks(self, notice, log):
        reporter = Reporter(notice=notice, log=log)

        text = reporter.failure("No such numbering scheme: roman")

        assert text == "stderr: No such numbering scheme: roman"
        assert notice.errors == [text]
        assert log.errors == [text]
        assert notice.infos == []
        assert log.infos == []

    def test_success_goes_to_log_and_console(self, notice, log):
        reporter = Reporter(notice=notice, log=log)

        text = reporter.success(Path("/forms/lease.docx"))

        assert text == f"Wrote {Path('/forms/lease.docx')}"
        assert log.infos == [text]
        assert notice.infos == [text]
        assert notice.errors == []
        assert log.errors == []


class TestLoggingChannelSink:
    def test_appends_to_file(self, tmp_path):
        log_file = tmp_path / "logs" / "commonform.log"
        log_file.parent.mkdir()
        log_file.write_text("earlier line\n", encoding="utf-8")

        sink = LoggingChannelSink(log_file, name="commonform_render.test.append")
        sink.error("stderr: Error parsing markup.")
        sink.info("Wrote lease.docx")
        sink.close()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "earlier line"
        assert "ERROR stderr: Error parsing markup." in lines[1]
        assert "INFO Wrote lease.docx" in lines[2]

    def test_creates_parent_directories(self, tmp_path):
        log_file = tmp_path / "a" / "b" / "commonform.log"
        sink = LoggingChannelSink(log_file, name="commonform_render.test.mkdir")
        sink.info("hello")
        sink.close()
        assert log_file.exists()

    def test_without_file_discards(self, tmp_path):
        sink = LoggingChannelSink(None, name="commonform_render.test.null")
        sink.error("nothing to see")
        sink.close()
        assert list(tmp_path.iterdir()) == []

    def test_close_detaches_handler(self, tmp_path):
        log_file = tmp_path / "commonform.log"
        sink = LoggingChannelSink(log_file, name="commonform_render.test.close")
        sink.close()
        sink.close()
        sink.info("after close")
        assert log_file.read_text(encoding="utf-8") == ""


class TestRichNoticeSink:
    def test_prints_messages(self):
        console = Console(record=True, width=120)
        sink = RichNoticeSink(console=console)

        sink.error("stderr: Error parsing markup.")
        sink.info("Wrote lease.html")

        output = console.export_text()
        assert "stderr: Error parsing markup." in output
        assert "Wrote lease.html" in output
