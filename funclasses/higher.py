"""Container types with a single type hole, and lookup of a value's kind.

A *kind* is the type constructor a value was built with. Optional values
(``Some`` and ``Nothing``) report ``Some`` as their kind, and results (``Ok``
and ``Err``) report ``Ok``. Built-in containers report their own type. A
tuple reports the tuple of its items' kinds, so the unit value ``()`` has
the kind ``()``.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Some(Generic[T]):
    """An optional value that is present."""

    value: T


@dataclass(frozen=True)
class Nothing:
    """An optional value that is absent."""


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful result."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed result carrying its error."""

    error: E


@dataclass(frozen=True)
class Phantom:
    """A container that holds no value at all, only its type."""


@dataclass(frozen=True)
class Box(Generic[T]):
    """A container holding exactly one value."""

    value: T


_KINDS: dict[type, Any] = {
    Some: Some,
    Nothing: Some,
    Ok: Ok,
    Err: Ok,
    Phantom: Phantom,
    Box: Box,
    list: list,
    deque: deque,
    set: set,
    frozenset: frozenset,
    dict: dict,
    bool: bool,
    int: int,
    float: float,
    str: str,
}


def kind_of(value: Any) -> Any:
    """Return the kind of ``value``; raise TypeError for unknown types."""
    if isinstance(value, tuple):
        return tuple(kind_of(item) for item in value)
    try:
        return _KINDS[type(value)]
    except KeyError:
        raise TypeError(f"no kind is known for {type(value).__name__}") from None