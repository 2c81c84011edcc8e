"""
declare_constraints - declarative validation of data structures.

Usage:
    from declare_constraints import (
        And, HasAllKeys, IsArrayRef, IsHashRef, IsInt, OnHashKeys,
    )

    profile = And(
        IsHashRef(),
        HasAllKeys("foo"),
        OnHashKeys(foo=IsArrayRef(IsInt())),
    )

    result = profile({"foo": [1, 2, "x"]})
    result.is_valid()  # False
    result.path        # "And.OnHashKeys[foo].IsArrayRef[2].IsInt"
    result.message     # "Not an Integer"

Or bind the generators by bare name:
    from declare_constraints import export
    export(globals(), "IsInt", "Matches", "And")
"""

from typing import Any

from .context import DEFAULT_MESSAGE, message_context
from .core import Constraint, apply_checks, listify, to_constraint
from .interop import as_validator, to_pydantic
from .library import (
    LIBRARY,
    And,
    HasAllKeys,
    HasArraySize,
    HasLength,
    HasMethods,
    IsA,
    IsArrayRef,
    IsClass,
    IsCodeRef,
    IsDefined,
    IsHashRef,
    IsInt,
    IsNumber,
    IsObject,
    IsOneOf,
    IsRefType,
    IsRegex,
    IsScalarRef,
    IsTrue,
    Matches,
    Message,
    Not,
    OnHashKeys,
    Or,
    Predicate,
    XOr,
    ref_type,
)
from .refs import ScalarRef
from .registry import Library, UnknownConstraintError
from .result import Result


def export(target: Any, *names: str) -> Any:
    """Bind the named (default: all) built-in generators onto `target`."""
    return LIBRARY.bind(target, names or None)


__all__ = [
    # Result types
    "Result",
    "DEFAULT_MESSAGE",
    "message_context",
    # Core
    "Constraint",
    "ScalarRef",
    "to_constraint",
    "listify",
    "apply_checks",
    "ref_type",
    # Registry
    "Library",
    "LIBRARY",
    "UnknownConstraintError",
    "export",
    # Constraints
    "IsDefined",
    "IsTrue",
    "IsNumber",
    "IsInt",
    "Matches",
    "HasLength",
    "IsOneOf",
    "IsRegex",
    "Predicate",
    "IsRefType",
    "IsScalarRef",
    "IsArrayRef",
    "IsHashRef",
    "IsCodeRef",
    "HasArraySize",
    "HasAllKeys",
    "OnHashKeys",
    "IsObject",
    "IsClass",
    "IsA",
    "HasMethods",
    # Operators
    "And",
    "Or",
    "XOr",
    "Not",
    "Message",
    # Pydantic
    "as_validator",
    "to_pydantic",
]
