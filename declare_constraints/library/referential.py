"""
Referential constraints: structural kind checks that can step into containers.

Projection annotations:
    IsArrayRef[<index>]        failing element index
    IsHashRef[val <key>]       value under <key> failed the `values` checks
    IsHashRef[key <key>]       <key> itself failed the `keys` checks
"""

from __future__ import annotations

import functools
import inspect
import re
from collections.abc import Mapping
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable

from ..core import Constraint, apply_checks, listify, listify_all, unpack_args
from ..refs import ScalarRef
from ..registry import Library
from ..result import Result, false, true, undefined

REFERENTIAL = Library("referential")

_PLAIN_SCALARS = (str, bytes, int, float, complex, Decimal, Fraction)

RefTag = str | type


def ref_type(value: Any) -> str:
    """
    Structural kind of a value.

    Returns one of "HASH", "ARRAY", "SCALAR", "CODE", "Regexp", the class name
    for any other object, or "" for None, plain scalars and classes.
    """
    if value is None or isinstance(value, (_PLAIN_SCALARS, type)):
        return ""
    if isinstance(value, ScalarRef):
        return "SCALAR"
    if isinstance(value, Mapping):
        return "HASH"
    if isinstance(value, (list, tuple)):
        return "ARRAY"
    if isinstance(value, re.Pattern):
        return "Regexp"
    if is_code(value):
        return "CODE"
    return type(value).__name__


def is_code(value: Any) -> bool:
    return isinstance(value, (Constraint, functools.partial)) or inspect.isroutine(
        value
    )


@REFERENTIAL.constraint
def IsRefType(*tags: RefTag) -> Callable[[Any], Result]:
    """
    Valid if the value's structural kind matches one of `tags`.

    String tags are compared against `ref_type(value)`; type tags match by
    isinstance.

    Usage:
        IsRefType("HASH", "ARRAY")
        IsRefType(Mapping, "SCALAR")
    """
    tags = unpack_args(tags)
    for tag in tags:
        if not isinstance(tag, (str, type)):
            raise TypeError(f"IsRefType tags must be strings or types, got {tag!r}")

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        kind = ref_type(value)
        for tag in tags:
            if isinstance(tag, type):
                if isinstance(value, tag):
                    return true()
            elif kind == tag:
                return true()
        return false("No matching RefType")

    return check


@REFERENTIAL.constraint
def IsScalarRef(*constraints: Any) -> Callable[[Any], Result]:
    """
    Valid if the value is a ScalarRef; given constraints apply to its target.

    Usage:
        IsScalarRef(IsInt())
    """
    checks = listify_all(*constraints)

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        if not isinstance(value, ScalarRef):
            return false("Not a ScalarRef")
        return apply_checks(value.value, checks)

    return check


@REFERENTIAL.constraint
def IsArrayRef(*constraints: Any) -> Callable[[Any], Result]:
    """
    Valid if the value is a list or tuple whose elements pass every constraint.

    Usage:
        IsArrayRef()                        # any list
        IsArrayRef(IsInt())                 # a list of integers
        IsArrayRef(IsDefined(), IsInt())    # same as passing [IsDefined(), IsInt()]
    """
    checks = listify_all(*constraints)

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        if not isinstance(value, (list, tuple)):
            return false("Not an ArrayRef")
        for index, item in enumerate(value):
            result = apply_checks(item, checks, index)
            if not result.is_valid():
                return result
        return true()

    return check


@REFERENTIAL.constraint
def IsHashRef(
    *,
    keys: Any = None,
    values: Any = None,
) -> Callable[[Any], Result]:
    """
    Valid if the value is a mapping; optionally checks all its values and keys.

    Values are checked before keys, each in the mapping's iteration order.

    Usage:
        IsHashRef()
        IsHashRef(keys=HasLength(), values=IsArrayRef(IsObject()))
    """
    key_checks = listify(keys)
    value_checks = listify(values)

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        if not isinstance(value, Mapping):
            return false("Not a HashRef")
        if value_checks:
            for key, item in value.items():
                result = apply_checks(item, value_checks, f"val {key}")
                if not result.is_valid():
                    return result
        if key_checks:
            for key in value:
                result = apply_checks(key, key_checks, f"key {key}")
                if not result.is_valid():
                    return result
        return true()

    return check


@REFERENTIAL.constraint
def IsCodeRef() -> Callable[[Any], Result]:
    """Valid if the value is a function, method, partial or constraint."""

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        return Result.make(is_code(value), "Not a CodeRef")

    return check
