"""DOCX renderer — implements DocumentGeneratorPort using python-docx.

The document is built in memory and handed back as a ``ByteStream`` the
dispatcher pipes to disk, so a failure while building never touches the
output file.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Iterator, Mapping, Optional, Sequence

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_BREAK, WD_COLOR_INDEX
from docx.shared import Inches, Mm, Pt, RGBColor

from commonform_render.domain.errors import GenerationError
from commonform_render.domain.models.enums import StyleRole
from commonform_render.domain.models.form import (
    Blank,
    Child,
    Definition,
    Form,
    Reference,
    Use,
)
from commonform_render.domain.models.options import DocxOptions
from commonform_render.domain.models.signatures import SignatureBlock, SignaturePage
from commonform_render.domain.ports.document_generator import DocumentGeneratorPort
from commonform_render.infrastructure.renderers.form_walk import (
    UNFILLED_BLANK,
    Path,
    blank_values,
    form_hash,
    heading_numbers,
    iter_children,
    smarten,
)

logger = logging.getLogger(__name__)

FONT_NAME = "Times New Roman"
FONT_SIZE_PT = 12
TITLE_SIZE_PT = 14
HASH_SIZE_PT = 8
MARGIN_INCHES = 1.0
INDENT_INCHES = 0.5
SIGNATURE_LINE = "_" * 32
CHUNK_SIZE = 64 * 1024

_STYLE_KEYS = {"bold", "italic", "underline", "font", "size", "color", "caps"}


class ByteStream:
    """Iterable of byte chunks over a finished in-memory document."""

    def __init__(self, buffer: io.BytesIO, chunk_size: int = CHUNK_SIZE) -> None:
        self._buffer = buffer
        self._chunk_size = chunk_size

    def __iter__(self) -> Iterator[bytes]:
        self._buffer.seek(0)
        while True:
            chunk = self._buffer.read(self._chunk_size)
            if not chunk:
                return
            yield chunk

    def getvalue(self) -> bytes:
        return self._buffer.getvalue()


class DocxRenderer(DocumentGeneratorPort):
    """Render forms as .docx byte streams."""

    def render(self, form: Form, blanks: Sequence[Any], options: DocxOptions) -> ByteStream:
        """Build the document and return it as a byte stream.

        Raises:
            GenerationError: If the blanks, styles or form cannot be rendered.
        """
        values = blank_values(blanks)
        try:
            builder = _DocxBuilder(form, values, options)
            buffer = builder.build()
        except GenerationError:
            raise
        except (ValueError, TypeError, KeyError) as exc:
            raise GenerationError(f"Failed to generate document: {exc}") from exc
        return ByteStream(buffer)


class _DocxBuilder:
    """Single-use builder holding the python-docx document for one render."""

    def __init__(self, form: Form, values: dict[Path, str], options: DocxOptions) -> None:
        self._form = form
        self._values = values
        self._options = options
        self._styles = _parse_styles(options.styles)
        self._headings = heading_numbers(form)
        self._docx = Document()

    def build(self) -> io.BytesIO:
        self._setup_page_layout()
        self._setup_default_style()
        self._build_title()
        self._build_form(self._form, path=(), numbering=(), conspicuous=False)
        if self._options.after:
            self._build_signature_pages(self._options.after)

        buffer = io.BytesIO()
        self._docx.save(buffer)
        logger.debug("Built .docx document (%d bytes)", buffer.tell())
        return buffer

    # ------------------------------------------------------------------
    # Page Layout
    # ------------------------------------------------------------------

    def _setup_page_layout(self) -> None:
        """Configure page size and margins."""
        section = self._docx.sections[0]
        if self._options.a4:
            section.page_width = Mm(210)
            section.page_height = Mm(297)
        else:
            section.page_width = Inches(8.5)
            section.page_height = Inches(11)

        section.top_margin = Inches(MARGIN_INCHES)
        section.bottom_margin = Inches(MARGIN_INCHES)
        section.left_margin = Inches(MARGIN_INCHES)
        section.right_margin = Inches(MARGIN_INCHES)

    def _setup_default_style(self) -> None:
        style = self._docx.styles["Normal"]
        style.font.name = FONT_NAME
        style.font.size = Pt(FONT_SIZE_PT)
        style.font.color.rgb = RGBColor(0, 0, 0)
        style.paragraph_format.space_after = Pt(FONT_SIZE_PT)

    # ------------------------------------------------------------------
    # Title, edition, hash
    # ------------------------------------------------------------------

    def _build_title(self) -> None:
        title_p = self._docx.add_paragraph(style="Normal")
        if self._options.center_title:
            title_p.alignment = WD_ALIGN_PARAGRAPH.CENTER
        run = self._add_run(title_p, self._options.title, StyleRole.TITLE, bold=True)
        run.font.size = Pt(TITLE_SIZE_PT)

        if self._options.edition:
            edition_p = self._docx.add_paragraph(style="Normal")
            if self._options.center_title:
                edition_p.alignment = WD_ALIGN_PARAGRAPH.CENTER
            self._add_run(edition_p, str(self._options.edition), StyleRole.TITLE, italic=True)

        if self._options.hash:
            hash_p = self._docx.add_paragraph(style="Normal")
            if self._options.center_title:
                hash_p.alignment = WD_ALIGN_PARAGRAPH.CENTER
            run = hash_p.add_run(f"Form hash: {form_hash(self._form)}")
            run.font.name = "Courier New"
            run.font.size = Pt(HASH_SIZE_PT)

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    def _build_form(
        self,
        form: Form,
        path: Path,
        numbering: tuple[int, ...],
        conspicuous: bool,
        heading_paragraph=None,
    ) -> None:
        """Render a form's content; inline runs share one paragraph."""
        conspicuous = conspicuous or form.conspicuous
        paragraph = heading_paragraph
        ordinals = {index: ordinal for index, ordinal, _child in iter_children(form)}

        for index, element in enumerate(form.content):
            element_path = path + ("content", index)
            if isinstance(element, Child):
                paragraph = None
                child_numbering = numbering + (ordinals[index],)
                child_p = self._add_body_paragraph(len(child_numbering))
                label = self._options.numbering.number(child_numbering)
                self._add_run(child_p, f"{label}\t", StyleRole.HEADING)
                if element.heading:
                    self._add_run(child_p, element.heading, StyleRole.HEADING, underline=True)
                    self._add_run(child_p, ". ", StyleRole.TEXT)
                self._build_form(
                    element.form,
                    element_path + ("form",),
                    child_numbering,
                    conspicuous,
                    heading_paragraph=child_p,
                )
                continue

            if paragraph is None:
                paragraph = self._add_body_paragraph(len(numbering))
            self._add_inline(paragraph, element, element_path, conspicuous)

    def _add_body_paragraph(self, depth: int):
        p = self._docx.add_paragraph(style="Normal")
        p.alignment = (
            WD_ALIGN_PARAGRAPH.LEFT if self._options.left_align_body else WD_ALIGN_PARAGRAPH.JUSTIFY
        )
        if self._options.indent_margins and depth > 1:
            p.paragraph_format.left_indent = Inches(INDENT_INCHES * (depth - 1))
        return p

    def _add_inline(self, paragraph, element, path: Path, conspicuous: bool) -> None:
        caps = {"bold": True, "caps": True} if conspicuous else {}

        if isinstance(element, str):
            self._add_run(paragraph, self._text(element), StyleRole.TEXT, **caps)
        elif isinstance(element, Definition):
            term = self._text(f'"{element.definition}"')
            self._add_run(paragraph, term, StyleRole.DEFINITION, bold=True)
        elif isinstance(element, Use):
            self._add_run(paragraph, element.use, StyleRole.USE, **caps)
        elif isinstance(element, Reference):
            self._add_run(paragraph, self._reference_text(element.reference), StyleRole.REFERENCE)
        elif isinstance(element, Blank):
            value = self._values.get(path)
            if value is None:
                self._add_run(paragraph, UNFILLED_BLANK, StyleRole.BLANK)
            else:
                run = self._add_run(paragraph, self._text(value), StyleRole.FILLED, **caps)
                if self._options.mark_filled:
                    run.font.highlight_color = WD_COLOR_INDEX.YELLOW
        else:
            raise GenerationError(f"Unsupported content element: {element!r}")

    def _reference_text(self, heading: str) -> str:
        number = self._headings.get(heading)
        if number is None:
            logger.warning("Reference to unknown heading: %s", heading)
            return heading
        return f"Section {self._options.numbering.number(number)} ({heading})"

    def _text(self, text: str) -> str:
        return smarten(text) if self._options.smartify else text

    # ------------------------------------------------------------------
    # Signature pages
    # ------------------------------------------------------------------

    def _build_signature_pages(self, block: SignatureBlock) -> None:
        for page in block.pages:
            if not page.same_page:
                self._docx.add_paragraph().add_run().add_break(WD_BREAK.PAGE)
            self._build_signature_page(page)

    def _build_signature_page(self, page: SignaturePage) -> None:
        if page.header:
            self._add_run(self._docx.add_paragraph(), self._text(page.header), StyleRole.SIGNATURE)

        if page.term:
            self._add_run(
                self._docx.add_paragraph(), f"{page.term.upper()}:", StyleRole.SIGNATURE, bold=True
            )

        for entity in page.entities:
            description = entity.name
            if entity.form:
                kind = " ".join(part for part in (entity.jurisdiction, entity.form) if part)
                description += f", a {kind}"
            self._add_run(self._docx.add_paragraph(), description, StyleRole.SIGNATURE, bold=True)

        self._add_signature_line("By", SIGNATURE_LINE)
        self._add_signature_line("Name", page.name or SIGNATURE_LINE)
        title = page.title or (page.entities[-1].by if page.entities else None)
        if title or page.entities:
            self._add_signature_line("Title", title or SIGNATURE_LINE)
        for field in page.information:
            self._add_signature_line(field.capitalize(), SIGNATURE_LINE)

    def _add_signature_line(self, label: str, value: str) -> None:
        p = self._docx.add_paragraph(style="Normal")
        self._add_run(p, f"{label}:\t", StyleRole.SIGNATURE)
        self._add_run(p, value, StyleRole.SIGNATURE)

    # ------------------------------------------------------------------
    # Runs and style overrides
    # ------------------------------------------------------------------

    def _add_run(self, paragraph, text: str, role: StyleRole, **formatting):
        """Add a run, then apply defaults and any override for *role*."""
        run = paragraph.add_run(text)
        run.font.name = FONT_NAME
        _apply_formatting(run, formatting)
        override = self._styles.get(role.value)
        if override:
            _apply_formatting(run, override)
        return run


def _apply_formatting(run, formatting: Mapping[str, Any]) -> None:
    if formatting.get("bold") is not None:
        run.bold = bool(formatting["bold"])
    if formatting.get("italic") is not None:
        run.italic = bool(formatting["italic"])
    if formatting.get("underline") is not None:
        run.underline = bool(formatting["underline"])
    if formatting.get("caps") is not None:
        run.font.all_caps = bool(formatting["caps"])
    if formatting.get("font"):
        run.font.name = str(formatting["font"])
    if formatting.get("size"):
        run.font.size = Pt(float(formatting["size"]))
    if formatting.get("color"):
        run.font.color.rgb = RGBColor.from_string(str(formatting["color"]).lstrip("#").upper())


def _parse_styles(styles: Optional[Any]) -> dict[str, dict[str, Any]]:
    """Check the opaque ``styles`` override against the known roles."""
    if styles is None:
        return {}
    if not isinstance(styles, Mapping):
        raise GenerationError("Styles must be a mapping of text roles to formatting.")

    known = {role.value for role in StyleRole}
    parsed: dict[str, dict[str, Any]] = {}
    for role, formatting in styles.items():
        if role not in known:
            logger.warning("Ignoring style override for unknown role: %s", role)
            continue
        if not isinstance(formatting, Mapping):
            raise GenerationError(f"Style for '{role}' must be a mapping.")
        unknown = set(formatting) - _STYLE_KEYS
        if unknown:
            logger.warning("Ignoring style keys for '%s': %s", role, ", ".join(sorted(unknown)))
        parsed[role] = {key: value for key, value in formatting.items() if key in _STYLE_KEYS}
    return parsed
