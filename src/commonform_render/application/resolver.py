"""Configuration resolver — front matter to validated render options.

Front matter is an untyped mapping written by hand at the top of a form.
Every coercion rule lives in the per-format field tables below; one
generic routine walks the table for the requested format, builds the
options model and resolves the blanks list.

Default table (document format):

============== ================================= ==================
key            rule                              default
============== ================================= ==================
numbering      registered scheme name            ``outline``
title          any non-empty value               ``Untitled Form``
edition        any non-empty value               unset
hash, a4,      truthiness                        ``False``
leftAlignBody,
markFilled,
centerTitle,
indentMargins
smartify       ``False`` only if literally false ``True``
styles         passed through                    unset
signatures     signature-page generator          unset (``after``)
============== ================================= ==================

The HTML table keeps ``title`` and ``edition``, copies ``edition`` into
``depth``, passes ``classNames`` through and fixes ``html5``, ``ids``
and ``lists`` on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from pydantic import ValidationError

from commonform_render.application.error_messages import format_validation_errors
from commonform_render.domain.errors import (
    InvalidNumberingType,
    ResolutionError,
    UnknownNumberingScheme,
)
from commonform_render.domain.models.enums import OutputFormat
from commonform_render.domain.models.form import Direction
from commonform_render.domain.models.options import (
    DEFAULT_TITLE,
    DocxOptions,
    HtmlOptions,
    ResolvedRender,
)
from commonform_render.domain.models.signatures import SignatureBlock
from commonform_render.domain.ports.numbering import NumberingScheme

logger = logging.getLogger(__name__)

SignatureGenerator = Callable[[Any], SignatureBlock]
BlanksPreparer = Callable[[Any, Sequence[Direction]], list]

_UNSET = object()


@dataclass(frozen=True)
class _Context:
    front_matter: Mapping[str, Any]
    resolver: ConfigurationResolver


Rule = Callable[[_Context], Any]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _flag(key: str) -> Rule:
    """Truthiness; absent means False."""
    return lambda ctx: bool(ctx.front_matter.get(key))


def _enabled_unless_false(key: str) -> Rule:
    return lambda ctx: ctx.front_matter.get(key) is not False


def _present(key: str) -> Rule:
    """Pass a non-empty value through; otherwise leave the option unset."""

    def rule(ctx: _Context) -> Any:
        value = ctx.front_matter.get(key)
        return value if value else _UNSET

    return rule


def _verbatim(key: str) -> Rule:
    def rule(ctx: _Context) -> Any:
        return ctx.front_matter[key] if key in ctx.front_matter else _UNSET

    return rule


def _constant(value: Any) -> Rule:
    return lambda ctx: value


def _title(ctx: _Context) -> str:
    value = ctx.front_matter.get("title")
    return str(value) if value else ctx.resolver.default_title


def _numbering(ctx: _Context) -> NumberingScheme:
    return ctx.resolver.numbering_for(ctx.front_matter.get("numbering"))


def _signatures(ctx: _Context) -> Any:
    spec = ctx.front_matter.get("signatures")
    if not spec:
        return _UNSET
    return ctx.resolver.signature_pages_for(spec)


# ---------------------------------------------------------------------------
# Per-format field tables (option field → rule), evaluated in order
# ---------------------------------------------------------------------------

DOCX_FIELDS: dict[str, Rule] = {
    "numbering": _numbering,
    "title": _title,
    "edition": _present("edition"),
    "hash": _flag("hash"),
    "left_align_body": _flag("leftAlignBody"),
    "a4": _flag("a4"),
    "mark_filled": _flag("markFilled"),
    "smartify": _enabled_unless_false("smartify"),
    "center_title": _flag("centerTitle"),
    "indent_margins": _flag("indentMargins"),
    "styles": _verbatim("styles"),
    "after": _signatures,
}

HTML_FIELDS: dict[str, Rule] = {
    "title": _title,
    "edition": _present("edition"),
    # Reads 'edition', not a 'depth' key. Kept as-is; see DESIGN.md.
    "depth": _present("edition"),
    "class_names": _present("classNames"),
    "html5": _constant(True),
    "ids": _constant(True),
    "lists": _constant(True),
}

FIELD_TABLES: dict[OutputFormat, tuple[type, dict[str, Rule]]] = {
    OutputFormat.DOCX: (DocxOptions, DOCX_FIELDS),
    OutputFormat.HTML: (HtmlOptions, HTML_FIELDS),
}


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class ConfigurationResolver:
    """Turn front matter into ``ResolvedRender`` for one output format.

    Collaborators are injected so tests can substitute them; the container
    wires the numbering registry, signature-page generator and blanks
    preparer from ``infrastructure``.
    """

    def __init__(
        self,
        numberings: Mapping[str, NumberingScheme],
        signature_generator: SignatureGenerator,
        blanks_preparer: BlanksPreparer,
        default_title: str = DEFAULT_TITLE,
        default_numbering: str = "outline",
    ) -> None:
        if default_numbering not in numberings:
            raise ValueError(f"Default numbering '{default_numbering}' is not registered.")
        self._numberings = numberings
        self._signature_generator = signature_generator
        self._blanks_preparer = blanks_preparer
        self.default_title = default_title
        self.default_numbering = default_numbering

    def resolve(
        self,
        fmt: OutputFormat,
        front_matter: Mapping[str, Any],
        directions: Sequence[Direction],
    ) -> ResolvedRender:
        """Resolve options and blanks.

        Raises:
            ResolutionError: On an unknown or mistyped numbering scheme, or
                when signature pages or blanks cannot be prepared.
        """
        options = self.resolve_options(fmt, front_matter)
        blanks = self.resolve_blanks(front_matter, directions)
        logger.debug("Resolved %s options with %d blanks", fmt.value, len(blanks))
        return ResolvedRender(options=options, blanks=blanks)

    def resolve_options(self, fmt: OutputFormat, front_matter: Mapping[str, Any]):
        model, table = FIELD_TABLES[fmt]
        ctx = _Context(front_matter=front_matter, resolver=self)
        values: dict[str, Any] = {}
        for field, rule in table.items():
            value = rule(ctx)
            if value is not _UNSET:
                values[field] = value
        return model(**values)

    def resolve_blanks(
        self,
        front_matter: Mapping[str, Any],
        directions: Sequence[Direction],
    ) -> list[Any]:
        """Use a blanks list verbatim, or derive one from a values mapping."""
        spec = front_matter.get("blanks")
        if not spec:
            return []
        if isinstance(spec, (list, tuple)):
            return list(spec)
        try:
            return list(self._blanks_preparer(spec, directions))
        except Exception as exc:
            raise ResolutionError(str(exc)) from exc

    # -- collaborators -------------------------------------------------------

    def numbering_for(self, name: Optional[Any]) -> NumberingScheme:
        if name is None:
            return self._numberings[self.default_numbering]
        if not isinstance(name, str):
            raise InvalidNumberingType()
        scheme = self._numberings.get(name)
        if scheme is None:
            raise UnknownNumberingScheme(name)
        return scheme

    def signature_pages_for(self, spec: Any) -> SignatureBlock:
        try:
            return self._signature_generator(spec)
        except ValidationError as exc:
            details = "; ".join(format_validation_errors(exc.errors()))
            raise ResolutionError(f"Invalid signature pages: {details}") from exc
        except Exception as exc:
            raise ResolutionError(f"Invalid signature pages: {exc}") from exc
