"""
Context variables for per-evaluation state (failure info, message overrides).
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Any, Iterator

DEFAULT_MESSAGE = "Validation Error"

# Positional detail (array index, hash key, ...) recorded by the constraint
# currently being invoked. Every invocation opens its own slot.
_fail_info: ContextVar[Any | None] = ContextVar("fail_info", default=None)

# Message forced onto every failure inside a `Message` subtree.
_fail_message: ContextVar[str | None] = ContextVar("fail_message", default=None)

# Fallback for failures that carry no message of their own.
_default_message: ContextVar[str] = ContextVar(
    "default_message", default=DEFAULT_MESSAGE
)


def open_info_slot() -> Token:
    """Start a fresh failure-info slot; pass the token to `close_info_slot`."""
    return _fail_info.set(None)


def close_info_slot(token: Token) -> Any | None:
    """Return what was recorded in the slot and restore the outer one."""
    info = _fail_info.get()
    _fail_info.reset(token)
    return info


def set_info(info: Any) -> None:
    _fail_info.set(info)


def current_override() -> str | None:
    return _fail_message.get()


def current_default() -> str:
    return _default_message.get()


@contextmanager
def override_message(message: str) -> Iterator[None]:
    token = _fail_message.set(message)
    try:
        yield
    finally:
        _fail_message.reset(token)


@contextmanager
def message_context(
    *, default: str | None = None, override: str | None = None
) -> Iterator[None]:
    """
    Context manager for failure message configuration.

    Args:
        default: Message used for failures that do not carry one of their own.
        override: Message forced onto every failure produced inside the block,
                  the same way a `Message(...)` constraint does for its subtree.

    Example:
        from declare_constraints import Or, message_context

        with message_context(default="Bad input"):
            Or()(42).message  # "Bad input"

        with message_context(override="Profile rejected"):
            IsInt()("x").message  # "Profile rejected"
    """
    default_token = _default_message.set(default) if default is not None else None
    override_token = _fail_message.set(override) if override is not None else None
    try:
        yield
    finally:
        if override_token is not None:
            _fail_message.reset(override_token)
        if default_token is not None:
            _default_message.reset(default_token)
