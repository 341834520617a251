"""Common Form markup parser.

Source documents are Markdown-flavoured text with an optional YAML front
matter block::

    ---
    title: Lease
    blanks:
      Tenant Name: Jane Doe
    ---

    This lease is between ""Landlord"" and [Tenant Name].

    # Rent

    <Tenant> pays rent monthly. See {Term}.

    # Term

    !!! THE LEASE ENDS ON [End Date].

Syntax:

- ``#`` headings open headed child forms; deeper ``#`` levels nest.
- The first paragraph of a section is that form's own text; every later
  paragraph becomes an unheaded child form.
- ``""Term""`` defines a term, ``<Term>`` uses one, ``{Heading}`` refers
  to a headed section and ``[Label]`` marks a blank. Each blank produces a
  direction recording its label and its path in the form tree.
- A paragraph beginning with ``!!!`` makes its form conspicuous.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Optional, Union

import yaml

from commonform_render.domain.errors import ParseError
from commonform_render.domain.models.form import (
    Blank,
    Child,
    Definition,
    Direction,
    Form,
    ParsedDocument,
    Reference,
    Use,
)
from commonform_render.domain.ports.markup_parser import MarkupParserPort

logger = logging.getLogger(__name__)

_FRONT_MATTER_OPEN = "---"
_FRONT_MATTER_CLOSE = ("---", "...")
_HEADING_RE = re.compile(r"^(#{1,6})(?:\s+(.*?))?\s*#*\s*$")
_INLINE_RE = re.compile(
    r'""(?P<definition>[^"]+)""'
    r"|<(?P<use>[^<>\n]+)>"
    r"|\{(?P<reference>[^{}\n]+)\}"
    r"|\[(?P<blank>[^\[\]\n]*)\]"
)
_CONSPICUOUS_MARK = "!!!"


@dataclass
class _BlankMark:
    label: str


_Inline = Union[str, Definition, Use, Reference, _BlankMark]


@dataclass
class _Section:
    level: int
    heading: Optional[str] = None
    content: list[Any] = field(default_factory=list)
    conspicuous: bool = False


class CommonMarkParser(MarkupParserPort):
    """Parse Common Form markup into a form tree, front matter and directions."""

    def parse(self, text: str) -> ParsedDocument:
        front_matter, body, offset = self._split_front_matter(text)
        root = self._parse_body(body, offset)
        if not root.content:
            raise ParseError("Form has no content.")

        directions: list[Direction] = []
        form = self._freeze(root, (), directions)
        logger.debug(
            "Parsed form: %d top-level elements, %d directions",
            len(form.content),
            len(directions),
        )
        return ParsedDocument(form=form, front_matter=front_matter, directions=tuple(directions))

    # ------------------------------------------------------------------
    # Front matter
    # ------------------------------------------------------------------

    def _split_front_matter(self, text: str) -> tuple[dict[str, Any], list[str], int]:
        lines = text.lstrip("\ufeff").splitlines()
        if not lines or lines[0].strip() != _FRONT_MATTER_OPEN:
            return {}, lines, 0

        for index in range(1, len(lines)):
            if lines[index].strip() in _FRONT_MATTER_CLOSE:
                raw = "\n".join(lines[1:index])
                return self._load_front_matter(raw), lines[index + 1 :], index + 1

        raise ParseError("Front matter is not terminated.")

    @staticmethod
    def _load_front_matter(raw: str) -> dict[str, Any]:
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ParseError(f"Invalid front matter: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ParseError("Front matter must be a mapping.")
        for key in data:
            if not isinstance(key, str):
                raise ParseError(f"Front matter keys must be text, not {key!r}.")
        return data

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    def _parse_body(self, lines: list[str], offset: int) -> _Section:
        root = _Section(level=0)
        stack = [root]
        paragraph: list[str] = []

        def flush() -> None:
            if paragraph:
                self._add_paragraph(stack[-1], " ".join(paragraph))
                paragraph.clear()

        for number, line in enumerate(lines, start=offset + 1):
            stripped = line.strip()
            match = _HEADING_RE.match(stripped)
            if match:
                flush()
                level = len(match.group(1))
                if level > stack[-1].level + 1:
                    raise ParseError(
                        f"Line {number}: heading level {level} follows level {stack[-1].level}."
                    )
                while stack[-1].level >= level:
                    stack.pop()
                section = _Section(level=level, heading=(match.group(2) or None))
                stack[-1].content.append(section)
                stack.append(section)
            elif not stripped:
                flush()
            else:
                paragraph.append(stripped)
        flush()
        return root

    def _add_paragraph(self, section: _Section, text: str) -> None:
        target = section
        if section.content:
            target = _Section(level=section.level + 1)
            section.content.append(target)

        if text.startswith(_CONSPICUOUS_MARK):
            target.conspicuous = True
            text = text[len(_CONSPICUOUS_MARK) :].lstrip()

        target.content.extend(self._parse_inline(text))

    @staticmethod
    def _parse_inline(text: str) -> list[_Inline]:
        items: list[_Inline] = []
        position = 0
        for match in _INLINE_RE.finditer(text):
            if match.start() > position:
                items.append(text[position : match.start()])
            kind = match.lastgroup
            value = match.group(kind).strip()
            if kind == "definition":
                items.append(Definition(definition=value))
            elif kind == "use":
                items.append(Use(use=value))
            elif kind == "reference":
                items.append(Reference(reference=value))
            else:
                items.append(_BlankMark(label=value))
            position = match.end()
        if position < len(text):
            items.append(text[position:])

        for item in items:
            if isinstance(item, str) and any(mark in item for mark in ('""', "[", "]", "{", "}")):
                raise ParseError(f"Unbalanced markup in: {text!r}")
        return items

    # ------------------------------------------------------------------
    # Freezing into domain models
    # ------------------------------------------------------------------

    def _freeze(
        self,
        section: _Section,
        path: tuple[Union[str, int], ...],
        directions: list[Direction],
    ) -> Form:
        content: list[Any] = []
        for item in section.content:
            index = len(content)
            if isinstance(item, _Section):
                child_path = path + ("content", index, "form")
                content.append(
                    Child(heading=item.heading, form=self._freeze(item, child_path, directions))
                )
            elif isinstance(item, _BlankMark):
                directions.append(Direction(identifier=item.label, blank=path + ("content", index)))
                content.append(Blank(blank=""))
            else:
                content.append(item)

        if not content:
            raise ParseError(f"Section '{section.heading or '(untitled)'}' has no content.")
        return Form(content=content, conspicuous=section.conspicuous)
