"""Derive a blanks list from front-matter values and parser directions.

Front matter may give blank values keyed by the label written in the
markup (``[Tenant Name]``)::

    blanks:
      Tenant Name: Jane Doe
      Rent: $1,200

Each direction whose identifier has a value yields one ``BlankValue``
pointing at that direction's path. Directions without a value are left
blank. Output order follows the directions.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from commonform_render.domain.models.form import Direction
from commonform_render.domain.models.options import BlankValue

logger = logging.getLogger(__name__)


def prepare_blanks(values: Any, directions: Sequence[Direction]) -> list[BlankValue]:
    """Build blank values for every direction that has a matching entry.

    Raises:
        TypeError: If *values* is not a mapping of label to value.
    """
    if not isinstance(values, Mapping):
        raise TypeError(
            f"Blanks must be a list or a mapping of labels to values, not {type(values).__name__}."
        )

    result: list[BlankValue] = []
    for direction in directions:
        value = values.get(direction.identifier)
        if value is None:
            continue
        if isinstance(value, (Mapping, list, tuple)):
            raise TypeError(f"Value for blank '{direction.identifier}' must be text.")
        result.append(BlankValue(blank=direction.blank, value=str(value)))

    unused = set(values) - {d.identifier for d in directions}
    if unused:
        logger.debug("Blank values with no matching blank: %s", ", ".join(sorted(map(str, unused))))
    return result
