"""Combining several effectful values with a function of several arguments."""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import Any

from funclasses.functor import fmap
from funclasses.semigroupal import product

MAX_ARITY = 12


def map2(fa: Any, fb: Any, f: Callable[[Any, Any], Any]) -> Any:
    """Combine two containers with a binary function."""
    return fmap(product(fa, fb), lambda pair: f(pair[0], pair[1]))


def map3(fa: Any, fb: Any, fc: Any, f: Callable[[Any, Any, Any], Any]) -> Any:
    """Combine three containers with a ternary function."""
    return fmap(
        product(product(fa, fb), fc),
        lambda nested: f(nested[0][0], nested[0][1], nested[1]),
    )


def _flatten(nested: Any, count: int) -> tuple:
    """Unpack left-nested pairs ``((a, b), c)`` into ``(a, b, c)``."""
    items: list[Any] = []
    for _ in range(count - 1):
        nested, last = nested
        items.append(last)
    items.append(nested)
    return tuple(reversed(items))


def map_n(f: Callable[..., Any], *args: Any) -> Any:
    """Combine between 2 and 12 containers with a function of as many arguments."""
    count = len(args)
    if not 2 <= count <= MAX_ARITY:
        raise ValueError(
            f"between 2 and {MAX_ARITY} containers are needed, got {count}"
        )
    combined = reduce(product, args[1:], args[0])
    return fmap(combined, lambda nested: f(*_flatten(nested, count)))


def product_r(fa: Any, fb: Any) -> Any:
    """Compose two containers, keeping the values of the second."""
    return map2(fa, fb, lambda _, b: b)


def product_l(fa: Any, fb: Any) -> Any:
    """Compose two containers, keeping the values of the first."""
    return map2(fa, fb, lambda a, _: a)