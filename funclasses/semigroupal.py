"""Semigroupal: composing independent effectful values."""

from __future__ import annotations

from collections import deque
from functools import singledispatch
from itertools import product as _cartesian
from typing import Any

from funclasses.higher import Box, Err, Nothing, Ok, Phantom, Some, kind_of


def product(fa: Any, fb: Any) -> Any:
    """Combine two containers of the same kind into one holding pairs."""
    if kind_of(fa) != kind_of(fb):
        raise TypeError(
            f"cannot take the product of {type(fa).__name__} and {type(fb).__name__}"
        )
    return _product(fa, fb)


@singledispatch
def _product(fa: Any, fb: Any) -> Any:
    raise TypeError(f"{type(fa).__name__} is not semigroupal")


@_product.register(Phantom)
def _(fa: Phantom, fb: Any) -> Phantom:
    return Phantom()


@_product.register(Some)
@_product.register(Nothing)
def _(fa: Some | Nothing, fb: Any) -> Some | Nothing:
    if isinstance(fa, Some) and isinstance(fb, Some):
        return Some((fa.value, fb.value))
    return Nothing()


@_product.register(Ok)
@_product.register(Err)
def _(fa: Ok | Err, fb: Any) -> Ok | Err:
    if isinstance(fa, Err):
        return fa
    if isinstance(fb, Err):
        return fb
    return Ok((fa.value, fb.value))


@_product.register(Box)
def _(fa: Box, fb: Any) -> Box:
    return Box((fa.value, fb.value))


@_product.register(list)
def _(fa: list, fb: Any) -> list:
    return list(_cartesian(fa, fb))


@_product.register(deque)
def _(fa: deque, fb: Any) -> deque:
    return deque(_cartesian(fa, fb))


@_product.register(set)
def _(fa: set, fb: Any) -> set:
    return set(_cartesian(fa, fb))


@_product.register(frozenset)
def _(fa: frozenset, fb: Any) -> frozenset:
    return frozenset(_cartesian(fa, fb))


@_product.register(dict)
def _(fa: dict, fb: Any) -> dict:
    return {key: (value, fb[key]) for key, value in fa.items() if key in fb}