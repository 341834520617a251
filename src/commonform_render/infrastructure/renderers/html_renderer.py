"""HTML renderer — implements DocumentGeneratorPort as a styled HTML page."""

from __future__ import annotations

import logging
from html import escape
from typing import Any, Optional, Sequence

from commonform_render.domain.errors import GenerationError
from commonform_render.domain.models.form import (
    Blank,
    Child,
    Definition,
    Form,
    Reference,
    Use,
)
from commonform_render.domain.models.options import HtmlOptions
from commonform_render.domain.ports.document_generator import DocumentGeneratorPort
from commonform_render.infrastructure.renderers.form_walk import (
    UNFILLED_BLANK,
    Path,
    blank_values,
    slugify,
)

logger = logging.getLogger(__name__)

_STYLESHEET = """
body { font-family: Georgia, "Times New Roman", serif; line-height: 1.5;
       max-width: 48rem; margin: 2rem auto; padding: 0 1rem; color: #111; }
.title { text-align: center; }
.edition { text-align: center; font-style: italic; }
ol { padding-left: 1.5rem; }
dfn { font-style: normal; font-weight: bold; }
.conspicuous { font-weight: bold; text-transform: uppercase; }
.blank { background: #ffeb99; padding: 0 .2em; }
.blank.filled { background: #d7f5d7; }
a.reference { text-decoration: none; border-bottom: 1px dotted; }
""".strip()


class HtmlRenderer(DocumentGeneratorPort):
    """Render forms as complete HTML documents."""

    def render(self, form: Form, blanks: Sequence[Any], options: HtmlOptions) -> str:
        """Return the HTML page as a string.

        Raises:
            GenerationError: If a blank descriptor or ``class_names`` is invalid.
        """
        builder = _HtmlBuilder(form, blank_values(blanks), options)
        return builder.build()


class _HtmlBuilder:
    def __init__(self, form: Form, values: dict[Path, str], options: HtmlOptions) -> None:
        self._form = form
        self._values = values
        self._options = options
        self._offset = _heading_offset(options.depth)
        self._ids: dict[str, str] = {}
        self._used_ids: set[str] = set()
        self._container = "section" if options.html5 else "div"
        if options.ids:
            self._assign_ids(form)

    def build(self) -> str:
        root_tag = "article" if self._options.html5 else "div"
        classes = " ".join(["commonform", *_class_names(self._options.class_names)])

        parts = [f'<{root_tag} class="{escape(classes)}">']
        parts.append(f'<h1 class="title">{escape(self._options.title)}</h1>')
        if self._options.edition:
            parts.append(f'<p class="edition">{escape(str(self._options.edition))}</p>')
        parts.append(self._render_form(self._form, (), level=1))
        parts.append(f"</{root_tag}>")

        return (
            "<!doctype html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{escape(self._options.title)}</title>\n"
            f"<style>\n{_STYLESHEET}\n</style>\n"
            "</head>\n"
            "<body>\n"
            + "\n".join(parts)
            + "\n</body>\n</html>\n"
        )

    # ------------------------------------------------------------------
    # Tree
    # ------------------------------------------------------------------

    def _render_form(self, form: Form, path: Path, level: int) -> str:
        chunks: list[str] = []
        inline: list[str] = []
        children: list[str] = []

        def flush_inline() -> None:
            if inline:
                klass = ' class="conspicuous"' if form.conspicuous else ""
                chunks.append(f"<p{klass}>{''.join(inline)}</p>")
                inline.clear()

        def flush_children() -> None:
            if children:
                if self._options.lists:
                    chunks.append("<ol>" + "".join(f"<li>{c}</li>" for c in children) + "</ol>")
                else:
                    chunks.extend(children)
                children.clear()

        for index, element in enumerate(form.content):
            element_path = path + ("content", index)
            if isinstance(element, Child):
                flush_inline()
                children.append(self._render_child(element, element_path + ("form",), level))
            else:
                flush_children()
                inline.append(self._render_inline(element, element_path))
        flush_inline()
        flush_children()
        return "".join(chunks)

    def _render_child(self, child: Child, path: Path, level: int) -> str:
        parts = [f"<{self._container}>"]
        if child.heading:
            tag = f"h{min(6, 1 + self._offset + level)}"
            id_attr = ""
            if self._options.ids:
                id_attr = f' id="{self._ids.get(child.heading, slugify(child.heading))}"'
            parts.append(f"<{tag}{id_attr}>{escape(child.heading)}</{tag}>")
        parts.append(self._render_form(child.form, path, level + 1))
        parts.append(f"</{self._container}>")
        return "".join(parts)

    def _render_inline(self, element, path: Path) -> str:
        if isinstance(element, str):
            return escape(element)
        if isinstance(element, Definition):
            return f"&ldquo;<dfn>{escape(element.definition)}</dfn>&rdquo;"
        if isinstance(element, Use):
            return f'<span class="use">{escape(element.use)}</span>'
        if isinstance(element, Reference):
            target = self._ids.get(element.reference)
            if target:
                return f'<a class="reference" href="#{target}">{escape(element.reference)}</a>'
            return f'<span class="reference">{escape(element.reference)}</span>'
        if isinstance(element, Blank):
            value = self._values.get(path)
            if value is None:
                return f'<span class="blank">{escape(UNFILLED_BLANK)}</span>'
            return f'<span class="blank filled">{escape(value)}</span>'
        raise GenerationError(f"Unsupported content element: {element!r}")

    def _assign_ids(self, form: Form) -> None:
        for element in form.content:
            if isinstance(element, Child):
                if element.heading and element.heading not in self._ids:
                    slug = f"heading-{slugify(element.heading)}"
                    candidate, suffix = slug, 2
                    while candidate in self._used_ids:
                        candidate = f"{slug}-{suffix}"
                        suffix += 1
                    self._used_ids.add(candidate)
                    self._ids[element.heading] = candidate
                self._assign_ids(element.form)


def _heading_offset(depth: Optional[Any]) -> int:
    """Interpret ``depth`` as a heading-level offset; non-numbers mean none."""
    if depth is None or isinstance(depth, bool):
        return 0
    if isinstance(depth, int):
        return max(0, depth)
    if isinstance(depth, str) and depth.strip().isdigit():
        return int(depth.strip())
    logger.warning("Ignoring non-numeric heading depth: %r", depth)
    return 0


def _class_names(value: Optional[Any]) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    raise GenerationError("classNames must be a string or a list of strings.")
