"""Lifting plain values into a context."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import Any

from funclasses.higher import Box, Err, Nothing, Ok, Some

_PURE: dict[Any, Callable[[Any], Any]] = {
    Some: Some,
    Nothing: Some,
    Ok: Ok,
    Err: Ok,
    Box: Box,
    list: lambda value: [value],
    deque: lambda value: deque([value]),
    set: lambda value: {value},
    frozenset: lambda value: frozenset([value]),
}


def pure(kind: Any, value: Any) -> Any:
    """Lift ``value`` into a container of ``kind``."""
    try:
        factory = _PURE[kind]
    except (KeyError, TypeError):
        raise TypeError(f"cannot lift a value into {kind!r}") from None
    return factory(value)


def unit(kind: Any) -> Any:
    """Lift the unit value ``()`` into a container of ``kind``."""
    return pure(kind, ())