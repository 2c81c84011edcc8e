"""
Core constraint class for declare_constraints.

Provides the Constraint dataclass (the invocation wrapper every generated
constraint goes through) and the projection helpers shared by every
constraint that steps down into a container.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .context import close_info_slot, open_info_slot, set_info
from .result import CheckFn, Result, false, true


@dataclass(frozen=True, slots=True)
class Constraint:
    """
    Immutable, named constraint.

    Wraps the check closure built by a generator. Calling the constraint runs
    the check inside a fresh failure-info slot and, on failure, prepends the
    constraint name (plus any `[info]` the check recorded) to the result path.
    """

    name: str
    check: CheckFn

    def __call__(self, value: Any) -> Result:
        token = open_info_slot()
        try:
            result = self.check(value)
        except Exception as e:
            result = false(f"Validation error: {e}")
        finally:
            info = close_info_slot(token)

        if not result.is_valid():
            token_name = self.name if info is None else f"{self.name}[{info}]"
            result.append_to_path(token_name)
        return result

    def __and__(self, other: Constraint) -> Constraint:
        """
        Combine with AND logic: both must pass.

        Usage:
            IsDefined() & IsInt()
        """
        from .library.operators import And

        return And(self, to_constraint(other))

    def __or__(self, other: Constraint) -> Constraint:
        """
        Combine with OR logic: at least one must pass.

        Usage:
            IsInt() | IsRegex()
        """
        from .library.operators import Or

        return Or(self, to_constraint(other))

    def __xor__(self, other: Constraint) -> Constraint:
        """Exactly one of the two must pass."""
        from .library.operators import XOr

        return XOr(self, to_constraint(other))

    def __invert__(self) -> Constraint:
        from .library.operators import Not

        return Not(self)

    def with_message(self, msg: str) -> Constraint:
        """Return a `Message` constraint forcing `msg` on every failure inside self."""
        from .library.operators import Message

        return Message(msg, self)

    def __repr__(self) -> str:
        return f"Constraint({self.name})"


def to_constraint(c: Any) -> Constraint:
    """Ensure `c` is a constraint, raising TypeError otherwise."""
    if isinstance(c, Constraint):
        return c
    raise TypeError(f"Expected a constraint, got {type(c).__name__}: {c!r}")


def listify(c: Any) -> tuple[Constraint, ...]:
    """
    Normalize sub-constraint arguments into a tuple.

    Conversion rules:
        None -> ()
        Constraint -> (c,)
        list | tuple of constraints -> tuple of the same constraints
    """
    if c is None:
        return ()
    if isinstance(c, (list, tuple)):
        return tuple(to_constraint(item) for item in c)
    return (to_constraint(c),)


def listify_all(*args: Any) -> tuple[Constraint, ...]:
    """Flatten several `listify` arguments into one tuple, keeping order."""
    return tuple(c for arg in args for c in listify(arg))


def unpack_args(args: tuple[Any, ...]) -> tuple[Any, ...]:
    """
    Accept generator arguments spread out or as a single list.

        HasAllKeys("foo", "bar") == HasAllKeys(["foo", "bar"])
    """
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return tuple(args[0])
    return args


def apply_checks(
    value: Any, checks: Iterable[Constraint], info: Any | None = None
) -> Result:
    """
    Run every check on `value`, returning the first failing result.

    `info` is recorded in the caller's failure-info slot first, so a failure
    here shows up as `CallerName[info]` in the path.
    """
    if info is not None:
        set_info(info)
    for check in checks:
        result = check(value)
        if not result.is_valid():
            return result
    return true()
