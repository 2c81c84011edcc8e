"""
Constraint registry: named generators, lookup and binding into namespaces.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from functools import wraps
from types import SimpleNamespace
from typing import Any, Callable, Iterable

from .core import Constraint

logger = logging.getLogger(__name__)

Generator = Callable[..., Constraint]


class UnknownConstraintError(KeyError):
    """Raised when a library has no generator for the requested name."""

    def __init__(self, name: str, library: str):
        super().__init__(name)
        self.name = name
        self.library = library

    def __str__(self) -> str:
        return f"Unable to find generator for {self.name} in library {self.library!r}"


def prepare_generator(name: str, factory: Callable[..., Callable]) -> Generator:
    """
    Turn a raw generator into one that returns a named Constraint.

    The raw generator takes the constraint configuration and returns the
    check closure (value -> Result). The prepared generator wraps that closure
    in a Constraint so every invocation annotates failures with `name`.
    """

    @wraps(factory)
    def generator(*args: Any, **kwargs: Any) -> Constraint:
        check = factory(*args, **kwargs)
        if not callable(check):
            raise TypeError(
                f"Constraint generator for {name} did not return a callable"
            )
        return Constraint(name=name, check=check)

    generator.constraint_name = name  # type: ignore[attr-defined]
    return generator


class Library:
    """
    A named collection of constraint generators.

    Libraries can build on others: `names()` and `get()` fall back to the
    parents in order, and a library's own definitions shadow inherited ones.

    Usage:
        mine = Library("mine", parents=[LIBRARY])

        @mine.constraint
        def IsEven():
            def check(value):
                ...
            return check

        mine.bind(globals(), ["IsEven", "IsInt"])
    """

    def __init__(self, name: str, parents: Iterable[Library] = ()):
        self.name = name
        self.parents = tuple(parents)
        self._generators: dict[str, Generator] = {}

    def constraint(
        self, name_or_factory: str | Callable | None = None
    ) -> Any:
        """
        Decorator registering a raw generator under its function name.

        Can be used with or without an explicit name:
            @library.constraint
            def IsInt(): ...

            @library.constraint("XOr")
            def exclusive_or(*constraints): ...
        """

        def decorator(factory: Callable, name: str | None = None) -> Generator:
            cname = name or factory.__name__
            if cname in self._generators:
                raise ValueError(
                    f"Constraint {cname} is already defined in library {self.name!r}"
                )
            if any(cname in parent for parent in self.parents):
                logger.debug(
                    "Constraint %s in library %s shadows an inherited definition",
                    cname,
                    self.name,
                )
            generator = prepare_generator(cname, factory)
            self._generators[cname] = generator
            logger.debug("Registered constraint %s in library %s", cname, self.name)
            return generator

        if callable(name_or_factory):
            return decorator(name_or_factory)
        return lambda factory: decorator(factory, name_or_factory)

    def names(self) -> set[str]:
        """All constraint names available from this library and its parents."""
        found = set(self._generators)
        for parent in self.parents:
            found |= parent.names()
        return found

    def get(self, name: str) -> Generator:
        """Return the generator registered as `name`."""
        if name in self._generators:
            return self._generators[name]
        for parent in self.parents:
            if name in parent:
                return parent.get(name)
        raise UnknownConstraintError(name, self.name)

    def __contains__(self, name: object) -> bool:
        return name in self._generators or any(name in p for p in self.parents)

    def bind(self, target: Any, names: Iterable[str] | None = None) -> Any:
        """
        Bind generators onto `target` so they can be called by bare name.

        Mutable mappings (e.g. `globals()`) get item assignment, anything else
        (modules, namespaces) gets attribute assignment. Binds every known
        generator when `names` is None. Returns `target`.
        """
        selected = sorted(self.names()) if names is None else list(names)
        generators = {name: self.get(name) for name in selected}

        for name, generator in generators.items():
            if isinstance(target, MutableMapping):
                target[name] = generator
            else:
                setattr(target, name, generator)

        logger.debug(
            "Bound %d constraint(s) from library %s onto %s",
            len(generators),
            self.name,
            type(target).__name__,
        )
        return target

    def namespace(self, *names: str) -> SimpleNamespace:
        """Return a fresh namespace holding the named (default: all) generators."""
        return self.bind(SimpleNamespace(), names or None)

    def __repr__(self) -> str:
        return f"Library({self.name!r}, constraints={len(self.names())})"
