"""Output dispatcher — route a resolved form to its generator and write it.

Both generators are driven through one contract: ``produce`` returns a
finished payload (an iterable of byte chunks) and ``deliver`` pipes it
into the output file. The .docx generator hands back a byte stream, the
HTML generator a string that is encoded as UTF-8 into a single chunk.
The payload is always complete before the destination is opened, so a
rejected form never creates or truncates an output file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from commonform_render.domain.errors import GenerationError, WriteError
from commonform_render.domain.models.enums import OutputFormat
from commonform_render.domain.models.form import Form
from commonform_render.domain.ports.document_generator import (
    DocumentGeneratorPort,
    GeneratorOutput,
)

logger = logging.getLogger(__name__)

OUTPUT_ENCODING = "utf-8"


def output_target(source: Path, fmt: OutputFormat) -> Path:
    """Same directory, same base name, extension replaced."""
    return Path(source).with_suffix(fmt.extension)


class OutputDispatcher:
    """Produce output with the generator for a format and write it to disk."""

    def __init__(
        self,
        generators: Mapping[OutputFormat, DocumentGeneratorPort],
    ) -> None:
        self._generators = dict(generators)

    def dispatch(
        self,
        fmt: OutputFormat,
        form: Form,
        blanks: Sequence[Any],
        options: Any,
        target: Path,
    ) -> Path:
        """Generate and write; return the path written.

        Raises:
            GenerationError: If the generator rejects its input.
            WriteError: If the destination cannot be written.
        """
        payload = self.produce(fmt, form, blanks, options)
        return self.deliver(payload, target)

    def produce(
        self,
        fmt: OutputFormat,
        form: Form,
        blanks: Sequence[Any],
        options: Any,
    ) -> Iterable[bytes]:
        try:
            generator = self._generators[fmt]
        except KeyError:
            raise GenerationError(f"No generator registered for {fmt.value}.") from None

        try:
            return _as_chunks(generator.render(form, blanks, options))
        except GenerationError:
            raise
        except Exception as exc:
            raise GenerationError(f"Failed to generate {fmt.value}: {exc}") from exc

    def deliver(self, payload: Iterable[bytes], target: Path) -> Path:
        """Write every chunk to *target*, overwriting any previous output."""
        target = Path(target)
        written = 0
        try:
            with target.open("wb") as fh:
                for chunk in payload:
                    fh.write(chunk)
                    written += len(chunk)
        except OSError as exc:
            raise WriteError(f"Could not write {target}: {exc.strerror or exc}") from exc
        logger.debug("Wrote %d bytes to %s", written, target)
        return target


def _as_chunks(output: GeneratorOutput) -> Iterable[bytes]:
    # Text output is always UTF-8; the HTML page declares that charset.
    if isinstance(output, str):
        return [output.encode(OUTPUT_ENCODING)]
    if isinstance(output, (bytes, bytearray)):
        return [bytes(output)]
    return output
