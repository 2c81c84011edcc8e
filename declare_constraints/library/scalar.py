"""
Scalar constraints: definedness, truth, numbers, patterns, lengths, choices.
"""

from __future__ import annotations

import re
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable

from ..core import unpack_args
from ..registry import Library
from ..result import UNDEFINED_MESSAGE, Result, false, true, undefined

SCALAR = Library("scalar")

_INT_PATTERN = re.compile(r"-?\d+", re.ASCII)


def check_bounds(name: str, minimum: int, maximum: int | None) -> None:
    """Reject bound combinations no value could satisfy."""
    if minimum < 0:
        raise ValueError(f"{name} needs a non-negative minimum, got {minimum}")
    if maximum and maximum < minimum:
        raise ValueError(f"{name} maximum {maximum} is below minimum {minimum}")


@SCALAR.constraint
def IsDefined() -> Callable[[Any], Result]:
    """
    Valid if the value is not None.

    Usage:
        IsDefined()
    """

    def check(value: Any) -> Result:
        return Result.make(value is not None, UNDEFINED_MESSAGE)

    return check


@SCALAR.constraint
def IsTrue() -> Callable[[Any], Result]:
    """Valid if the value is truthy."""

    def check(value: Any) -> Result:
        return true() if value else false("Value evaluates to False")

    return check


def looks_like_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal, Fraction)):
        return True
    if isinstance(value, (str, bytes)):
        try:
            float(value)
        except ValueError:
            return False
        return True
    return False


@SCALAR.constraint
def IsNumber() -> Callable[[Any], Result]:
    """
    Valid if the value is a number or a string that reads as one.

    Usage:
        IsNumber()("23.5")  # valid
        IsNumber()("23a")   # invalid
    """

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        return Result.make(looks_like_number(value), "Does not look like Number")

    return check


@SCALAR.constraint
def IsInt() -> Callable[[Any], Result]:
    """
    Valid if the value is written as an integer (optional minus, digits only).

    Booleans are rejected, and so are floats such as 3.0.
    """

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        if isinstance(value, bool):
            return false("Not an Integer")
        if isinstance(value, int):
            return true()
        return Result.make(_INT_PATTERN.fullmatch(str(value)), "Not an Integer")

    return check


@SCALAR.constraint
def Matches(*patterns: re.Pattern) -> Callable[[Any], Result]:
    """
    Valid if at least one of the compiled patterns matches the value.

    Patterns are searched for anywhere in the string form of the value.

    Usage:
        Matches(re.compile(r"foo"), re.compile(r"^bar"))
    """
    if not patterns:
        raise ValueError("Matches needs at least one Regexp as argument")
    for pattern in patterns:
        if not isinstance(pattern, re.Pattern):
            raise TypeError(
                f"Matches only takes compiled Regexps as arguments, got {pattern!r}"
            )

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        text = value if isinstance(value, (str, bytes)) else str(value)
        for pattern in patterns:
            try:
                if pattern.search(text):
                    return true()
            except TypeError:
                # str pattern against bytes value, or the reverse
                continue
        return false("Regex does not match")

    return check


def length_of(value: Any) -> int:
    try:
        return len(value)
    except TypeError:
        return len(str(value))


@SCALAR.constraint
def HasLength(
    min_length: int = 1, max_length: int | None = None
) -> Callable[[Any], Result]:
    """
    Valid if the value's length is at least `min_length` and, if given, at most
    `max_length`.

    Sized values use len(); anything else is measured through str().

    Usage:
        HasLength()       # at least one character
        HasLength(2, 8)   # between 2 and 8 characters
    """
    minimum = 1 if min_length is None else min_length
    check_bounds("HasLength", minimum, max_length)

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        length = length_of(value)
        if length < minimum:
            return false("Value too short")
        if not max_length:
            return true()
        return Result.make(length <= max_length, "Value too long")

    return check


@SCALAR.constraint
def IsOneOf(*candidates: Any) -> Callable[[Any], Result]:
    """
    Valid if the value equals one of the candidates.

    Candidates can be spread out or given as one list.

    A None candidate accepts a missing value:
        IsOneOf("a", "b", None)(None)  # valid
    """
    candidates = unpack_args(candidates)

    def check(value: Any) -> Result:
        for candidate in candidates:
            if candidate is None:
                if value is None:
                    return true()
                continue
            if value is None:
                continue
            if value == candidate:
                return true()
        return false("No Value matches")

    return check


@SCALAR.constraint
def IsRegex() -> Callable[[Any], Result]:
    """Valid if the value is a compiled pattern; plain strings do not count."""

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        return Result.make(isinstance(value, re.Pattern), "Not a Regular Expression")

    return check


@SCALAR.constraint
def Predicate(
    fn: Callable[[Any], Any], message: str | None = None
) -> Callable[[Any], Result]:
    """
    Constraint from an arbitrary predicate function.

    Usage:
        Predicate(lambda x: x > 0, "Must be positive")
    """
    if not callable(fn):
        raise TypeError(f"Predicate needs a callable, got {fn!r}")

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        return Result.make(fn(value), message)

    return check
