"""Base enum and coercion helpers shared by the models.

State enums inherit from :class:`PinpointEnum` which requires an
``UNKNOWN`` member at ``-1`` and a ``_missing_`` hook that returns
``UNKNOWN`` for any value without a mapped member, so platform states
added after this library was written never raise.
"""

from __future__ import annotations

import enum
import math
from typing import Any


class PinpointEnum(enum.IntEnum):
    """Base for host-supplied state enums.

    Every subclass **must** define ``UNKNOWN = -1``.
    """

    @classmethod
    def _missing_(cls, value: object) -> PinpointEnum:
        # pylint: disable=no-member
        unknown: PinpointEnum = cls.UNKNOWN  # type: ignore[attr-defined]
        return unknown


def attribute_value(value: Any) -> str | None:
    """Coerce a scalar payload value to an attribute string.

    Returns ``None`` for nested structures, ``None`` and NaN so callers
    can drop them instead of recording a meaningless attribute.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None
