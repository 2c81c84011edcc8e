"""
Hash constraints, for mappings only.

`OnHashKeys` skips configured keys that are missing from the value; combine
it with `HasAllKeys` to make keys required:

    And(
        HasAllKeys("foo", "bar"),
        OnHashKeys(foo=IsInt(), bar=Matches(re.compile("bar"))),
    )
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any, Callable

from ..context import set_info
from ..core import apply_checks, listify, unpack_args
from ..registry import Library
from ..result import Result, false, true, undefined

HASH = Library("hash")


@HASH.constraint
def HasAllKeys(*keys: Hashable) -> Callable[[Any], Result]:
    """
    Valid if the value is a mapping containing every key in `keys`.

    Keys can be spread out or given as one list: `HasAllKeys(["foo", "bar"])`.

    Path annotation: the first missing key, e.g. `HasAllKeys[foo]`.
    """
    keys = unpack_args(keys)
    for key in keys:
        if not isinstance(key, Hashable):
            raise TypeError(f"HasAllKeys keys must be hashable, got {key!r}")

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        if not isinstance(value, Mapping):
            return false("Not a HashRef")
        for key in keys:
            if key not in value:
                set_info(key)
                return false(f"No '{key}' key present")
        return true()

    return check


@HASH.constraint
def OnHashKeys(
    definition: Mapping | None = None, /, **by_key: Any
) -> Callable[[Any], Result]:
    """
    Apply constraints to the values under specific keys.

    Keys can be given as a mapping (any hashable keys) and/or as keyword
    arguments. Configured keys absent from the value are not checked.

    Usage:
        OnHashKeys(foo=IsInt(), bar=[IsDefined(), HasLength(3)])
        OnHashKeys({42: IsInt()})

    Path annotation: the key of the failing value, e.g. `OnHashKeys[foo]`.
    """
    if definition is not None and not isinstance(definition, Mapping):
        raise TypeError(
            f"OnHashKeys takes a mapping of key to constraints, got {definition!r}"
        )
    merged = {**(definition or {}), **by_key}
    checks = {key: listify(constraints) for key, constraints in merged.items()}
    for key, key_checks in checks.items():
        if not key_checks:
            raise TypeError(f"OnHashKeys needs a constraint for key {key!r}")

    def check(value: Any) -> Result:
        if value is None:
            return undefined()
        if not isinstance(value, Mapping):
            return false("Not a HashRef")
        for key, key_checks in checks.items():
            if key not in value:
                continue
            result = apply_checks(value[key], key_checks, key)
            if not result.is_valid():
                return result
        return true()

    return check
