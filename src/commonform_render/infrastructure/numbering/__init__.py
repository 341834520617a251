"""Numbering scheme registry.

Schemes are looked up by the name used in front matter (``numbering:``).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from commonform_render.domain.ports.numbering import NumberingScheme
from commonform_render.infrastructure.numbering.decimal import DecimalNumbering
from commonform_render.infrastructure.numbering.outline import OutlineNumbering

DEFAULT_NUMBERING = "outline"

NUMBERINGS: Mapping[str, NumberingScheme] = MappingProxyType(
    {
        OutlineNumbering.name: OutlineNumbering(),
        DecimalNumbering.name: DecimalNumbering(),
    }
)

__all__ = [
    "DEFAULT_NUMBERING",
    "NUMBERINGS",
    "DecimalNumbering",
    "OutlineNumbering",
]
