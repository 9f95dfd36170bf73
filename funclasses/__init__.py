"""Functional type classes: semigroups, monoids, functors, semigroupals and natural transformations."""

__version__ = "0.1.0"

__all__ = [
    "higher",
    "semigroup",
    "monoid",
    "pure",
    "invariant",
    "functor",
    "semigroupal",
    "map_n",
    "transform",
]