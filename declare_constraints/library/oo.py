"""
Object-oriented constraints: objects, loaded classes, ancestry and methods.

Classes can be given either as type objects or as dotted names
("collections.OrderedDict"); names only resolve for modules that are already
imported.
"""

from __future__ import annotations

import builtins
import sys
from typing import Any, Callable

from ..context import set_info
from ..core import unpack_args
from ..registry import Library
from ..result import Result, false, true, undefined
from .referential import ref_type

OO = Library("oo")

ClassRef = str | type

_NOT_OBJECTS = ("", "HASH", "ARRAY", "SCALAR", "CODE")


def resolve_class(value: Any) -> type | None:
    """Return the loaded class `value` is or names, else None."""
    if isinstance(value, type):
        return value
    if not isinstance(value, str) or not value:
        return None

    if "." not in value:
        found = getattr(builtins, value, None)
        return found if isinstance(found, type) else None

    parts = value.split(".")
    for split in range(len(parts) - 1, 0, -1):
        module = sys.modules.get(".".join(parts[:split]))
        if module is None:
            continue
        target: Any = module
        for attr in parts[split:]:
            target = getattr(target, attr, None)
            if target is None:
                break
        return target if isinstance(target, type) else None
    return None


def is_object(value: Any) -> bool:
    return (
        ref_type(value) not in _NOT_OBJECTS
        and type(value).__module__ != "builtins"
    )


@OO.constraint
def IsObject() -> Callable[[Any], Result]:
    """Valid if the value is an instance of a user-level class."""

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        return Result.make(is_object(value), "Not an Object")

    return check


@OO.constraint
def IsClass() -> Callable[[Any], Result]:
    """
    Valid if the value is a class, or the dotted name of a loaded one.

    Usage:
        IsClass()(OrderedDict)                 # valid
        IsClass()("collections.OrderedDict")   # valid once collections is imported
    """

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        return Result.make(resolve_class(value) is not None, "Not a loaded Class")

    return check


@OO.constraint
def IsA(*classes: ClassRef) -> Callable[[Any], Result]:
    """
    Valid if the object, class or class name is-a one of `classes`.
    """
    classes = unpack_args(classes)
    for cls in classes:
        if not isinstance(cls, (str, type)):
            raise TypeError(f"IsA takes classes or class names, got {cls!r}")

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        as_class = resolve_class(value)
        for cls in classes:
            expected = resolve_class(cls)
            if expected is None:
                continue
            if as_class is not None and issubclass(as_class, expected):
                return true()
            if isinstance(value, expected):
                return true()
        return false("No matching Class")

    return check


@OO.constraint
def HasMethods(*methods: str) -> Callable[[Any], Result]:
    """
    Valid if the object or class provides every method in `methods`.

    Path annotation: the first missing method, e.g. `HasMethods[close]`.
    """
    methods = unpack_args(methods)
    for method in methods:
        if not isinstance(method, str):
            raise TypeError(f"HasMethods takes method names, got {method!r}")

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        target = value if is_object(value) else resolve_class(value)
        if target is None:
            return false("Not a Class or Object")
        for method in methods:
            if not callable(getattr(target, method, None)):
                set_info(method)
                return false(f"Method {method} not implemented")
        return true()

    return check
