"""
Pydantic interop for declare_constraints.

Provides as_validator() and to_pydantic() functions.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, Mapping

from pydantic import AfterValidator, create_model

from .core import Constraint, to_constraint


def as_validator(constraint: Constraint) -> Callable[[Any], Any]:
    """
    Turn a constraint into a Pydantic after-validator.

    The returned function hands the value back untouched when it passes and
    raises ValueError with the failure message and path otherwise.

    Usage:
        PortList = Annotated[list, AfterValidator(as_validator(IsArrayRef(IsInt())))]
    """
    constraint = to_constraint(constraint)

    def validator(value: Any) -> Any:
        result = constraint(value)
        if not result.is_valid():
            raise ValueError(f"{result.message} (at {result.path})")
        return value

    validator.__name__ = f"validate_{constraint.name}"
    return validator


def to_pydantic(name: str, fields: Mapping[str, Constraint]) -> type:
    """
    Compile named constraints to a Pydantic model.

    Args:
        name: Name of the generated model class
        fields: Field name to the constraint its value has to satisfy

    Returns:
        A Pydantic BaseModel subclass; every field is required and typed Any

    Usage:
        Profile = to_pydantic("Profile", {
            "foo": IsArrayRef(IsInt()),
            "bar": Message("Definition Error", IsDefined()),
        })
        Profile(foo=[1, 2], bar="x")
    """
    model_fields: dict[str, Any] = {}

    for key, constraint in fields.items():
        annotated = Annotated[Any, AfterValidator(as_validator(constraint))]
        model_fields[key] = (annotated, ...)

    return create_model(name, **model_fields)
