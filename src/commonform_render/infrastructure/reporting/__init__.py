"""Reporting sinks."""

from commonform_render.infrastructure.reporting.sinks import LoggingChannelSink, RichNoticeSink

__all__ = ["LoggingChannelSink", "RichNoticeSink"]
