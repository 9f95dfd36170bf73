"""Natural transformations between containers of the same element type.

A transformation turns one container shape into another, such as a list
into an optional value, without looking at the elements themselves.
Transformations compose with ``compose`` and ``and_then``. A plain function
becomes one through ``natural``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from itertools import islice
from typing import Any

from funclasses.higher import Err, Nothing, Ok, Some
from funclasses.monoid import empty
from funclasses.pure import pure

_MISSING = object()


class FnK(ABC):
    """A transformation from one container kind to another."""

    @abstractmethod
    def apply(self, a: Any) -> Any:
        """Apply this transformation to ``a``."""

    def __call__(self, a: Any) -> Any:
        return self.apply(a)

    def compose(self, f: FnK | Callable[[Any], Any]) -> Composition:
        """Return a transformation that applies ``f`` first, then this one."""
        return Composition(_as_fnk(f), self)

    def and_then(self, f: FnK | Callable[[Any], Any]) -> Composition:
        """Return a transformation that applies this one first, then ``f``."""
        return Composition(self, _as_fnk(f))


def _as_fnk(f: FnK | Callable[[Any], Any]) -> FnK:
    if isinstance(f, FnK):
        return f
    if callable(f):
        return natural(f)
    raise TypeError(f"{type(f).__name__} is not a transformation")


@dataclass(frozen=True)
class _Natural(FnK):
    function: Callable[[Any], Any]

    def apply(self, a: Any) -> Any:
        return self.function(a)


def natural(f: Callable[[Any], Any]) -> FnK:
    """Wrap a plain function as a transformation."""
    if not callable(f):
        raise TypeError(f"{type(f).__name__} is not callable")
    return _Natural(f)


@dataclass(frozen=True)
class Composition(FnK):
    """Applies ``first`` and then ``second`` to its result."""

    first: FnK
    second: FnK

    def apply(self, a: Any) -> Any:
        return self.second.apply(self.first.apply(a))


def _check_index(n: int) -> None:
    if n < 0:
        raise ValueError(f"index must not be negative, got {n}")


def _first(a: Iterable[Any]) -> Any:
    return next(iter(a), _MISSING)


def _last(a: Iterable[Any]) -> Any:
    tail = deque(a, maxlen=1)
    return tail[0] if tail else _MISSING


def _nth(a: Iterable[Any], n: int) -> Any:
    return next(islice(a, n, None), _MISSING)


def _to_option(found: Any) -> Some | Nothing:
    return Nothing() if found is _MISSING else Some(found)


def _to_result(found: Any, error: Any) -> Ok | Err:
    return Err(error) if found is _MISSING else Ok(found)


@dataclass(frozen=True)
class FirstToOption(FnK):
    """The first element of an iterable, or ``Nothing()`` when it is empty."""

    def apply(self, a: Iterable[Any]) -> Some | Nothing:
        return _to_option(_first(a))


@dataclass(frozen=True)
class LastToOption(FnK):
    """The last element of an iterable, or ``Nothing()`` when it is empty."""

    def apply(self, a: Iterable[Any]) -> Some | Nothing:
        return _to_option(_last(a))


@dataclass(frozen=True)
class NthToOption(FnK):
    """The element at ``index``, or ``Nothing()`` when there are too few."""

    index: int

    def __post_init__(self) -> None:
        _check_index(self.index)

    def apply(self, a: Iterable[Any]) -> Some | Nothing:
        return _to_option(_nth(a, self.index))


@dataclass(frozen=True)
class FirstToResult(FnK):
    """The first element as ``Ok``, or ``Err(error)`` when it is empty."""

    error: Any

    def apply(self, a: Iterable[Any]) -> Ok | Err:
        return _to_result(_first(a), self.error)


@dataclass(frozen=True)
class LastToResult(FnK):
    """The last element as ``Ok``, or ``Err(error)`` when it is empty."""

    error: Any

    def apply(self, a: Iterable[Any]) -> Ok | Err:
        return _to_result(_last(a), self.error)


@dataclass(frozen=True)
class NthToResult(FnK):
    """The element at ``index`` as ``Ok``, or ``Err(error)`` when missing."""

    index: int
    error: Any

    def __post_init__(self) -> None:
        _check_index(self.index)

    def apply(self, a: Iterable[Any]) -> Ok | Err:
        return _to_result(_nth(a, self.index), self.error)


@dataclass(frozen=True)
class OptionToVec(FnK):
    """A one-element list for ``Some``, an empty list for ``Nothing``."""

    def apply(self, a: Some | Nothing) -> list:
        if isinstance(a, Some):
            return [a.value]
        if isinstance(a, Nothing):
            return []
        raise TypeError(f"expected an optional value, got {type(a).__name__}")


@dataclass(frozen=True)
class ResultToVec(FnK):
    """A one-element list for ``Ok``, an empty list for ``Err``."""

    def apply(self, a: Ok | Err) -> list:
        if isinstance(a, Ok):
            return [a.value]
        if isinstance(a, Err):
            return []
        raise TypeError(f"expected a result, got {type(a).__name__}")


@dataclass(frozen=True)
class OptionToF(FnK):
    """Lift ``Some`` into ``kind``; map ``Nothing`` to the empty ``kind``."""

    kind: Any

    def apply(self, a: Some | Nothing) -> Any:
        if isinstance(a, Some):
            return pure(self.kind, a.value)
        if isinstance(a, Nothing):
            return empty(self.kind)
        raise TypeError(f"expected an optional value, got {type(a).__name__}")