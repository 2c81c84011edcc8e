"""
ScalarRef box for single-value references.
"""

from typing import Any


class ScalarRef:
    """
    Reference to a single value, for use with `IsScalarRef`.

    Examples:
        ScalarRef(23)       # IsScalarRef(IsInt()) accepts it
        ScalarRef(None)     # a reference to a missing value
    """

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __repr__(self) -> str:
        return f"ScalarRef({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ScalarRef):
            return self.value == other.value
        return False
