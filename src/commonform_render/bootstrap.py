"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import platformdirs

from commonform_render.application.dispatcher import OutputDispatcher
from commonform_render.application.reporting import Reporter
from commonform_render.application.resolver import ConfigurationResolver
from commonform_render.application.use_cases.render_form import RenderFormUseCase
from commonform_render.config.loader import load_config
from commonform_render.config.models import RenderSettings
from commonform_render.domain.models.enums import OutputFormat
from commonform_render.domain.ports.markup_parser import MarkupParserPort
from commonform_render.domain.ports.report_sink import ReportSinkPort
from commonform_render.domain.ports.source_provider import SourceProviderPort

from commonform_render.infrastructure.blanks import prepare_blanks
from commonform_render.infrastructure.numbering import NUMBERINGS
from commonform_render.infrastructure.parser import CommonMarkParser
from commonform_render.infrastructure.renderers import DocxRenderer, HtmlRenderer
from commonform_render.infrastructure.reporting import LoggingChannelSink, RichNoticeSink
from commonform_render.infrastructure.signatures import signature_pages
from commonform_render.infrastructure.sources import FileSource

logger = logging.getLogger(__name__)

_APP_NAME = "commonform_render"
_LOG_FILENAME = "commonform.log"


class Container:
    """Simple dependency injection container.

    The reporter and its sinks live as long as the container; everything
    touched by a single render (resolver, dispatcher, use case) is built
    fresh per call.

    Usage::

        container = Container()
        uc = container.render_form()
        result = uc.execute(container.source_for(Path("lease.md")), OutputFormat.DOCX)
    """

    def __init__(
        self,
        config_path: str | None = None,
        notice_sink: Optional[ReportSinkPort] = None,
        log_sink: Optional[ReportSinkPort] = None,
    ) -> None:
        self._settings = load_config(Path(config_path) if config_path else None)

        self._parser = CommonMarkParser()
        self._generators = {
            OutputFormat.DOCX: DocxRenderer(),
            OutputFormat.HTML: HtmlRenderer(),
        }

        self._owned_log_sink: Optional[LoggingChannelSink] = None
        if log_sink is None:
            self._owned_log_sink = LoggingChannelSink(self._log_file())
            log_sink = self._owned_log_sink
        self._reporter = Reporter(notice=notice_sink or RichNoticeSink(), log=log_sink)
        logger.debug("Loaded commonform_render container.")

    # -- Accessors -----------------------------------------------------------

    @property
    def settings(self) -> RenderSettings:
        return self._settings

    @property
    def parser(self) -> MarkupParserPort:
        return self._parser

    @property
    def reporter(self) -> Reporter:
        return self._reporter

    def source_for(self, path: Path) -> SourceProviderPort:
        """Return a source that reads *path* with the configured encoding."""
        return FileSource(path, encoding=self._settings.encoding)

    # -- Use Case factories --------------------------------------------------

    def resolver(self) -> ConfigurationResolver:
        """Create a resolver seeded with the configured defaults."""
        return ConfigurationResolver(
            numberings=NUMBERINGS,
            signature_generator=signature_pages,
            blanks_preparer=prepare_blanks,
            default_title=self._settings.default_title,
            default_numbering=self._settings.default_numbering,
        )

    def dispatcher(self) -> OutputDispatcher:
        return OutputDispatcher(self._generators)

    def render_form(self) -> RenderFormUseCase:
        """Create a use case for one render invocation."""
        return RenderFormUseCase(
            parser=self._parser,
            resolver=self.resolver(),
            dispatcher=self.dispatcher(),
            reporter=self._reporter,
        )

    def close(self) -> None:
        """Release the log file handle, if this container opened one."""
        if self._owned_log_sink is not None:
            self._owned_log_sink.close()

    # -- Helpers -------------------------------------------------------------

    def _log_file(self) -> Optional[Path]:
        reporting = self._settings.reporting
        if not reporting.persist_log:
            return None
        if reporting.log_file is not None:
            return reporting.log_file
        return platformdirs.user_log_path(_APP_NAME, ensure_exists=True) / _LOG_FILENAME
