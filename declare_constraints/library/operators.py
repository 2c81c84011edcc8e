"""
Operators: constraints that act on the validity of other constraints.

Usage:
    # all have to be valid
    And(IsInt(), Matches(re.compile(r"0$")))

    # at least one has to be valid
    Or(IsInt(), HasLength())

    # only one can be valid
    XOr(IsClass(), IsObject())

    # reverse validity
    Not(IsInt())
"""

from __future__ import annotations

from typing import Any, Callable

from ..context import override_message
from ..core import Constraint, apply_checks, listify, listify_all
from ..registry import Library
from ..result import Result, false, true

OPERATORS = Library("operators")


@OPERATORS.constraint
def And(*constraints: Any) -> Callable[[Any], Result]:
    """Valid if every constraint is valid; fails with the first failing result."""
    checks = listify_all(*constraints)

    def check(value: Any) -> Result:
        return apply_checks(value, checks)

    return check


@OPERATORS.constraint
def Or(*constraints: Any) -> Callable[[Any], Result]:
    """
    Valid if at least one constraint is valid.

    Fails with the last constraint's result when none pass. With no
    constraints at all it always fails.
    """
    checks = listify_all(*constraints)

    def check(value: Any) -> Result:
        last: Result | None = None
        for c in checks:
            last = c(value)
            if last.is_valid():
                return true()
        return last if last is not None else false()

    return check


@OPERATORS.constraint
def XOr(*constraints: Any) -> Callable[[Any], Result]:
    """Valid if exactly one constraint is valid. Every constraint is evaluated."""
    checks = listify_all(*constraints)

    def check(value: Any) -> Result:
        passed = sum(1 for c in checks if c(value).is_valid())
        return Result.make(passed == 1, f"Got {passed} true returns")

    return check


@OPERATORS.constraint
def Not(constraint: Constraint | None = None) -> Callable[[Any], Result]:
    """
    Valid if `constraint` is invalid on the value.

    `Not()` without a constraint accepts everything.
    """
    if constraint is not None and not isinstance(constraint, Constraint):
        raise TypeError(
            f"'Not' only accepts a constraint as argument, got {constraint!r}"
        )

    def check(value: Any) -> Result:
        if constraint is None:
            return true()
        if constraint(value).is_valid():
            return false("Constraint returned true")
        return true()

    return check


@OPERATORS.constraint
def Message(text: str, constraint: Any) -> Callable[[Any], Result]:
    """
    Force `text` as the message of every failure inside `constraint`.

    Usage:
        Message("Definition Error", IsDefined())
    """
    if not isinstance(text, str):
        raise TypeError(f"Message text must be a string, got {text!r}")
    checks = listify(constraint)
    if not checks:
        raise ValueError("Message needs a constraint to wrap")

    def check(value: Any) -> Result:
        with override_message(text):
            return apply_checks(value, checks)

    return check
