"""Helpers shared by the .docx and HTML renderers."""

from __future__ import annotations

import hashlib
import json
import logging
import re
from typing import Any, Iterator, Mapping, Sequence, Union

from commonform_render.domain.errors import GenerationError
from commonform_render.domain.models.form import Child, Form
from commonform_render.domain.models.options import BlankValue

logger = logging.getLogger(__name__)

Path = tuple[Union[str, int], ...]

UNFILLED_BLANK = "[•]"


# ---------------------------------------------------------------------------
# Blanks
# ---------------------------------------------------------------------------


def blank_values(blanks: Sequence[Any]) -> dict[Path, str]:
    """Index blank values by their path into the form.

    Accepts ``BlankValue`` models and ``{"blank": path, "value": text}``
    mappings. Other entries carry no path and are skipped.

    Raises:
        GenerationError: If a descriptor's value is not text.
    """
    values: dict[Path, str] = {}
    for entry in blanks:
        if isinstance(entry, BlankValue):
            values[tuple(entry.blank)] = entry.value
            continue
        if isinstance(entry, Mapping) and "blank" in entry:
            path, value = entry.get("blank"), entry.get("value")
            if not isinstance(path, (list, tuple)):
                raise GenerationError(f"Blank path must be a list, not {path!r}.")
            if not isinstance(value, str):
                raise GenerationError(f"Blank value must be text, not {value!r}.")
            values[tuple(path)] = value
            continue
        logger.debug("Skipping blank entry without a path: %r", entry)
    return values


# ---------------------------------------------------------------------------
# Headings and numbering
# ---------------------------------------------------------------------------


def iter_children(form: Form) -> Iterator[tuple[int, int, Child]]:
    """Yield ``(content_index, ordinal, child)``; ordinals start at 1."""
    ordinal = 0
    for index, element in enumerate(form.content):
        if isinstance(element, Child):
            ordinal += 1
            yield index, ordinal, element


def heading_numbers(form: Form, prefix: tuple[int, ...] = ()) -> dict[str, tuple[int, ...]]:
    """Map each heading to the numbering path of its first occurrence."""
    found: dict[str, tuple[int, ...]] = {}
    for _index, ordinal, child in iter_children(form):
        path = prefix + (ordinal,)
        if child.heading and child.heading not in found:
            found[child.heading] = path
        for heading, nested in heading_numbers(child.form, path).items():
            found.setdefault(heading, nested)
    return found


def slugify(text: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug or "section"


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

_DOUBLE_OPEN = re.compile(r'(^|[\s(\[{])"')
_SINGLE_OPEN = re.compile(r"(^|[\s(\[{])'")


def smarten(text: str) -> str:
    """Replace straight quotes and apostrophes with typographic ones."""
    text = _DOUBLE_OPEN.sub("\\1\u201c", text)
    text = text.replace('"', "\u201d")
    text = _SINGLE_OPEN.sub("\\1\u2018", text)
    return text.replace("'", "\u2019")


def form_hash(form: Form) -> str:
    """SHA-256 of the form's canonical JSON serialisation."""
    serialised = json.dumps(form.model_dump(mode="json"), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(serialised.encode("utf-8")).hexdigest()
