"""Monoids: semigroups that have an identity element."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from functools import reduce
from typing import Any

from funclasses.higher import Nothing, Phantom, Some, kind_of
from funclasses.semigroup import combine

_EMPTY: dict[Any, Callable[[], Any]] = {
    int: int,
    float: float,
    str: str,
    Phantom: Phantom,
    Some: Nothing,
    Nothing: Nothing,
    list: list,
    deque: deque,
    set: set,
    frozenset: frozenset,
    dict: dict,
}


def empty(kind: Any) -> Any:
    """Return the identity element of ``kind``; a tuple of kinds gives a tuple."""
    if isinstance(kind, tuple):
        return tuple(empty(item) for item in kind)
    try:
        factory = _EMPTY[kind]
    except (KeyError, TypeError):
        raise TypeError(f"{kind!r} is not a monoid") from None
    return factory()


def is_empty(value: Any) -> bool:
    """Tell whether ``value`` is the identity element of its kind."""
    return value == empty(kind_of(value))


def combine_all(values: Iterable[Any], kind: Any = None) -> Any:
    """Combine all values, starting from the identity of ``kind``.

    Without ``kind`` it is taken from the first value, so the values must
    not be empty then.
    """
    items = iter(values)
    if kind is None:
        try:
            first = next(items)
        except StopIteration:
            raise ValueError("the kind of an empty sequence must be given") from None
        return reduce(combine, items, combine(empty(kind_of(first)), first))
    return reduce(combine, items, empty(kind))