"""
Array constraints.

Usage:
    # accept a list of pairs
    pairs = IsArrayRef(HasArraySize(2, 2))
"""

from __future__ import annotations

from typing import Any, Callable

from ..registry import Library
from ..result import Result, false, true, undefined
from .scalar import check_bounds

ARRAY = Library("array")


@ARRAY.constraint
def HasArraySize(
    min_size: int = 1, max_size: int | None = None
) -> Callable[[Any], Result]:
    """
    Valid if the value is a list or tuple with at least `min_size` elements
    and, if `max_size` is given, at most that many.

    Usage:
        HasArraySize()       # at least one element
        HasArraySize(3, 3)   # exactly three elements
    """
    minimum = 1 if min_size is None else min_size
    check_bounds("HasArraySize", minimum, max_size)

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        if not isinstance(value, (list, tuple)):
            return false("Not an ArrayRef")
        if len(value) < minimum:
            return false(f"Less than {minimum} Array elements")
        if not max_size:
            return true()
        if len(value) > max_size:
            return false(f"More than {max_size} Array elements")
        return true()

    return check
