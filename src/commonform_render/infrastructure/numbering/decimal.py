"""Decimal numbering: ``1``, ``1.2``, ``1.2.3``."""

from __future__ import annotations

from typing import Sequence

from commonform_render.domain.ports.numbering import NumberingScheme


class DecimalNumbering(NumberingScheme):
    """Full-path decimal numbering."""

    name = "decimal"

    def number(self, path: Sequence[int]) -> str:
        if not path:
            raise ValueError("Numbering path must not be empty.")
        return ".".join(str(n) for n in path)
