"""Covariant functors: containers whose contents can be mapped over."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from functools import singledispatch
from typing import Any

from funclasses.higher import Box, Err, Nothing, Ok, Phantom, Some


@singledispatch
def fmap(fa: Any, f: Callable[[Any], Any]) -> Any:
    """Apply ``f`` to every value held by ``fa``, keeping its structure."""
    raise TypeError(f"{type(fa).__name__} is not a functor")


@fmap.register(Some)
@fmap.register(Nothing)
def _(fa: Some | Nothing, f: Callable[[Any], Any]) -> Some | Nothing:
    if isinstance(fa, Some):
        return Some(f(fa.value))
    return fa


@fmap.register(Ok)
@fmap.register(Err)
def _(fa: Ok | Err, f: Callable[[Any], Any]) -> Ok | Err:
    if isinstance(fa, Ok):
        return Ok(f(fa.value))
    return fa


@fmap.register(Phantom)
def _(fa: Phantom, f: Callable[[Any], Any]) -> Phantom:
    return Phantom()


@fmap.register(Box)
def _(fa: Box, f: Callable[[Any], Any]) -> Box:
    return Box(f(fa.value))


@fmap.register(list)
def _(fa: list, f: Callable[[Any], Any]) -> list:
    return [f(item) for item in fa]


@fmap.register(deque)
def _(fa: deque, f: Callable[[Any], Any]) -> deque:
    return deque(f(item) for item in fa)


@fmap.register(set)
def _(fa: set, f: Callable[[Any], Any]) -> set:
    return {f(item) for item in fa}


@fmap.register(frozenset)
def _(fa: frozenset, f: Callable[[Any], Any]) -> frozenset:
    return frozenset(f(item) for item in fa)


@fmap.register(dict)
def _(fa: dict, f: Callable[[Any], Any]) -> dict:
    return {key: f(value) for key, value in fa.items()}


def lift(f: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Turn ``f`` into a function that maps over any functor."""

    def lifted(fa: Any) -> Any:
        return fmap(fa, f)

    return lifted


def fproduct(fa: Any, f: Callable[[Any], Any]) -> Any:
    """Pair every value with the result of ``f`` on it, the value first."""
    return fmap(fa, lambda a: (a, f(a)))


def fproduct_left(fa: Any, f: Callable[[Any], Any]) -> Any:
    """Pair the result of ``f`` with every value, the result first."""
    return fmap(fa, lambda a: (f(a), a))


def map_const(fa: Any, b: Any) -> Any:
    """Replace every value with ``b``."""
    return fmap(fa, lambda _: b)


def void(fa: Any) -> Any:
    """Replace every value with ``()``, keeping the structure."""
    return fmap(fa, lambda _: ())


def tuple_left(fa: Any, b: Any) -> Any:
    """Pair ``b`` with every value, ``b`` on the left."""
    return fmap(fa, lambda a: (b, a))


def tuple_right(fa: Any, b: Any) -> Any:
    """Pair every value with ``b``, ``b`` on the right."""
    return fmap(fa, lambda a: (a, b))


def unzip(fa: Any) -> tuple[Any, Any]:
    """Split a container of pairs into a pair of containers."""
    return fmap(fa, lambda pair: pair[0]), fmap(fa, lambda pair: pair[1])


def if_f(
    fa: Any, if_true: Callable[[], Any], if_false: Callable[[], Any]
) -> Any:
    """Map each boolean to the result of ``if_true`` or ``if_false``."""
    return fmap(fa, lambda flag: if_true() if flag else if_false())