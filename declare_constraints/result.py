"""
Result type returned by every constraint invocation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from .context import current_default, current_override

UNDEFINED_MESSAGE = "Undefined Value"

# A raw check: one value in, one Result out.
CheckFn = Callable[[Any], "Result"]


@dataclass(frozen=True, slots=True)
class Result:
    """
    Outcome of a constraint: validity, failure message and failure stack.

    Validity and message are fixed at construction. The stack lists constraint
    names from the outermost constraint to the innermost one that failed. It
    only grows, from the front, as the result travels back up through the
    invocation wrappers.
    """

    valid: bool
    message: str | None = None
    stack: list[str] = field(default_factory=list)

    @classmethod
    def make(cls, valid: Any, message: str | None = None) -> Result:
        """
        Build a result from any truthy/falsy verdict.

        An invalid result takes the active `Message` override first, then
        `message`, then the scoped default message.
        """
        if valid:
            return cls(valid=True)
        return cls(
            valid=False,
            message=current_override() or message or current_default(),
        )

    def is_valid(self) -> bool:
        return self.valid

    def __bool__(self) -> bool:
        return self.valid

    def append_to_path(self, token: str) -> None:
        self.stack.insert(0, token)

    @property
    def path(self) -> str:
        return ".".join(self.stack)

    def __repr__(self) -> str:
        if self.valid:
            return "Result(valid=True)"
        return f"Result(valid=False, message={self.message!r}, path={self.path!r})"


def true() -> Result:
    return Result.make(True)


def false(message: str | None = None) -> Result:
    return Result.make(False, message)


def undefined() -> Result:
    """Failure for a missing (None) value."""
    return false(UNDEFINED_MESSAGE)
