"""Semigroups: values with an associative way of combining two of them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from functools import reduce, singledispatch
from typing import Any

from funclasses.higher import Box, Nothing, Phantom, Some


def _require(a: Any, b: Any, *kinds: type) -> None:
    if type(b) is bool or not isinstance(b, kinds):
        raise TypeError(
            f"cannot combine {type(a).__name__} with {type(b).__name__}"
        )


@singledispatch
def combine(a: Any, b: Any) -> Any:
    """Combine two values of the same kind associatively."""
    raise TypeError(f"{type(a).__name__} values do not form a semigroup")


@combine.register(int)
def _(a: int, b: Any) -> int:
    if isinstance(a, bool):
        raise TypeError("bool values do not form a semigroup")
    _require(a, b, int)
    return a + b


@combine.register(float)
def _(a: float, b: Any) -> float:
    _require(a, b, float)
    return a + b


@combine.register(str)
def _(a: str, b: Any) -> str:
    _require(a, b, str)
    return a + b


@combine.register(tuple)
def _(a: tuple, b: Any) -> tuple:
    _require(a, b, tuple)
    if len(a) != len(b):
        raise TypeError(f"cannot combine tuples of length {len(a)} and {len(b)}")
    return tuple(combine(x, y) for x, y in zip(a, b))


@combine.register(Phantom)
def _(a: Phantom, b: Any) -> Phantom:
    _require(a, b, Phantom)
    return Phantom()


@combine.register(Some)
def _(a: Some, b: Any) -> Some:
    _require(a, b, Some, Nothing)
    if isinstance(b, Some):
        return Some(combine(a.value, b.value))
    return a


@combine.register(Nothing)
def _(a: Nothing, b: Any) -> Any:
    _require(a, b, Some, Nothing)
    return b


@combine.register(Box)
def _(a: Box, b: Any) -> Box:
    _require(a, b, Box)
    return Box(combine(a.value, b.value))


@combine.register(list)
def _(a: list, b: Any) -> list:
    _require(a, b, list)
    return a + b


@combine.register(deque)
def _(a: deque, b: Any) -> deque:
    _require(a, b, deque)
    result = deque(a)
    result.extend(b)
    return result


@combine.register(set)
def _(a: set, b: Any) -> set:
    _require(a, b, set)
    return a | b


@combine.register(frozenset)
def _(a: frozenset, b: Any) -> frozenset:
    _require(a, b, frozenset)
    return a | b


@combine.register(dict)
def _(a: dict, b: Any) -> dict:
    _require(a, b, dict)
    # The larger map is the accumulator; values of the smaller one go first.
    acc, rest = (a, b) if len(a) > len(b) else (b, a)
    merged = dict(acc)
    for key, value in rest.items():
        merged[key] = combine(value, merged[key]) if key in merged else value
    return merged


def combine_n(value: Any, n: int) -> Any:
    """Combine ``value`` with itself ``n`` times; ``n == 0`` gives ``value``."""
    if n < 0:
        raise ValueError(f"repetition count must not be negative, got {n}")
    result = value
    for _ in range(n):
        result = combine(result, value)
    return result


def combine_all_option(values: Iterable[Any]) -> Some | Nothing:
    """Combine all values; ``Nothing()`` when there are none."""
    items = iter(values)
    try:
        first = next(items)
    except StopIteration:
        return Nothing()
    return Some(reduce(combine, items, first))