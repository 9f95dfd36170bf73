"""Invariant functors: mapping given a transformation in both directions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from funclasses.functor import fmap


def imap(fa: Any, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Any:
    """Transform ``fa`` with ``f``, given ``g`` as the way back.

    Every supported container is covariant, so only ``f`` is applied.
    """
    return fmap(fa, f)