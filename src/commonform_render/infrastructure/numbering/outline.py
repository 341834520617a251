"""Outline numbering: ``1.``, ``(a)``, ``(i)``, ``(A)``, ``(I)``, ``(1)``.

Only the child's own position is shown; the style cycles by depth.
"""

from __future__ import annotations

from typing import Callable, Sequence

from commonform_render.domain.ports.numbering import NumberingScheme

_ROMAN = [
    (1000, "m"),
    (900, "cm"),
    (500, "d"),
    (400, "cd"),
    (100, "c"),
    (90, "xc"),
    (50, "l"),
    (40, "xl"),
    (10, "x"),
    (9, "ix"),
    (5, "v"),
    (4, "iv"),
    (1, "i"),
]


def to_alpha(n: int) -> str:
    """1 → a, 26 → z, 27 → aa, 28 → bb (letter repeated per round)."""
    letter = chr(ord("a") + (n - 1) % 26)
    return letter * ((n - 1) // 26 + 1)


def to_roman(n: int) -> str:
    result = []
    for value, numeral in _ROMAN:
        count, n = divmod(n, value)
        result.append(numeral * count)
    return "".join(result)


_LEVELS: list[tuple[Callable[[int], str], str]] = [
    (str, "{}."),
    (to_alpha, "({})"),
    (to_roman, "({})"),
    (lambda n: to_alpha(n).upper(), "({})"),
    (lambda n: to_roman(n).upper(), "({})"),
    (str, "({})"),
]


class OutlineNumbering(NumberingScheme):
    """Legal outline numbering."""

    name = "outline"

    def number(self, path: Sequence[int]) -> str:
        if not path:
            raise ValueError("Numbering path must not be empty.")
        depth = len(path) - 1
        convert, template = _LEVELS[depth % len(_LEVELS)]
        return template.format(convert(path[-1]))
