"""Use Case: Render a form to .docx or HTML.

Orchestrates the pipeline for one invocation:

    source → parse → resolve → dispatch → report

Each stage's failure is caught where it happens and handed to the
reporter; nothing propagates to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from commonform_render.application.dispatcher import OutputDispatcher, output_target
from commonform_render.application.reporting import Reporter
from commonform_render.application.resolver import ConfigurationResolver
from commonform_render.domain.errors import (
    GenerationError,
    ParseError,
    ResolutionError,
    SourceError,
    WriteError,
)
from commonform_render.domain.models.enums import OutputFormat
from commonform_render.domain.ports.markup_parser import MarkupParserPort
from commonform_render.domain.ports.source_provider import SourceProviderPort

logger = logging.getLogger(__name__)

PARSE_FAILURE_MESSAGE = "Error parsing markup."


@dataclass(frozen=True)
class RenderResult:
    """Outcome of one invocation."""

    succeeded: bool
    message: str
    output_path: Optional[Path] = None


class RenderFormUseCase:
    """Render the current document in one output format."""

    def __init__(
        self,
        parser: MarkupParserPort,
        resolver: ConfigurationResolver,
        dispatcher: OutputDispatcher,
        reporter: Reporter,
    ) -> None:
        self._parser = parser
        self._resolver = resolver
        self._dispatcher = dispatcher
        self._reporter = reporter

    def execute(self, source: SourceProviderPort, fmt: OutputFormat) -> RenderResult:
        """Run the pipeline and report the outcome.

        Args:
            source: Supplies the document text and its path.
            fmt: Output format to produce.

        Returns:
            A ``RenderResult``; failures are reported, never raised.
        """
        try:
            document = source.acquire()
        except SourceError as exc:
            return self._fail(str(exc))

        try:
            parsed = self._parser.parse(document.text)
        except ParseError as exc:
            logger.debug("Parse failure in %s: %s", document.path, exc)
            return self._fail(PARSE_FAILURE_MESSAGE)

        try:
            resolved = self._resolver.resolve(fmt, parsed.front_matter, parsed.directions)
        except ResolutionError as exc:
            return self._fail(str(exc))

        target = output_target(document.path, fmt)
        try:
            written = self._dispatcher.dispatch(
                fmt, parsed.form, resolved.blanks, resolved.options, target
            )
        except (GenerationError, WriteError) as exc:
            return self._fail(str(exc))

        message = self._reporter.success(written)
        return RenderResult(succeeded=True, message=message, output_path=written)

    def _fail(self, message: str) -> RenderResult:
        return RenderResult(succeeded=False, message=self._reporter.failure(message))
