"""
The built-in constraint library.

`LIBRARY` aggregates every built-in group; each group is also available on
its own (`SCALAR`, `REFERENTIAL`, `ARRAY`, `HASH`, `OO`, `OPERATORS`).
"""

from ..registry import Library
from .array import ARRAY, HasArraySize
from .hash import HASH, HasAllKeys, OnHashKeys
from .oo import OO, HasMethods, IsA, IsClass, IsObject
from .operators import OPERATORS, And, Message, Not, Or, XOr
from .referential import (
    REFERENTIAL,
    IsArrayRef,
    IsCodeRef,
    IsHashRef,
    IsRefType,
    IsScalarRef,
    ref_type,
)
from .scalar import (
    SCALAR,
    HasLength,
    IsDefined,
    IsInt,
    IsNumber,
    IsOneOf,
    IsRegex,
    IsTrue,
    Matches,
    Predicate,
)

LIBRARY = Library(
    "default", parents=[SCALAR, REFERENTIAL, ARRAY, HASH, OO, OPERATORS]
)

__all__ = [
    "LIBRARY",
    "SCALAR",
    "REFERENTIAL",
    "ARRAY",
    "HASH",
    "OO",
    "OPERATORS",
    "ref_type",
    # Scalar
    "IsDefined",
    "IsTrue",
    "IsNumber",
    "IsInt",
    "Matches",
    "HasLength",
    "IsOneOf",
    "IsRegex",
    "Predicate",
    # Referential
    "IsRefType",
    "IsScalarRef",
    "IsArrayRef",
    "IsHashRef",
    "IsCodeRef",
    # Array
    "HasArraySize",
    # Hash
    "HasAllKeys",
    "OnHashKeys",
    # OO
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
]
