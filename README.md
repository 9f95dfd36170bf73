# funclasses

Functional type classes for plain Python values: semigroups, monoids,
functors, semigroupals, `map2`/`map3`/`map_n` and natural transformations
between container kinds.

The library works on Python's own values (`list`, `tuple`, `set`,
`frozenset`, `dict`, `collections.deque`, `str`, `int`, `float`) and on a few
small wrapper types from `funclasses.higher`: `Some` and `Nothing` for
optional values, `Ok` and `Err` for results, `Box` for a single boxed value
and `Phantom` for a value-less marker.

## Installation

```
pip install funclasses
```

## Kinds

`funclasses.higher.kind_of(value)` returns the type constructor a value was
built with. `Some` and `Nothing` both report `Some`; `Ok` and `Err` both
report `Ok`; a tuple reports the tuple of its items' kinds. Unknown types
raise `TypeError`.

```python
from funclasses.higher import kind_of, Nothing, Err

kind_of(Nothing())      # Some
kind_of(Err("x"))       # Ok
kind_of((1, "a"))       # (int, str)
```

## Semigroups and monoids

```python
from funclasses.semigroup import combine, combine_n, combine_all_option
from funclasses.monoid import empty, is_empty, combine_all
from funclasses.higher import Some, Nothing

combine(1, 2)                       # 3
combine(Some(1), Nothing())         # Some(1)
combine((1, "a"), (2, "b"))         # (3, "ab")
combine({0: "a"}, {0: "b", 1: "c"}) # {0: "ab", 1: "c"}
combine_n(1, 2)                     # 3
combine_all_option([])              # Nothing()
combine_all_option(["hey"] * 3)     # Some("heyheyhey")

empty(int)                          # 0
empty((int, str))                   # (0, "")
is_empty("")                        # True
combine_all([1, 2, 3], int)         # 6
combine_all([], int)                # 0
```

Combining values of different kinds, or `bool` values, raises `TypeError`.
When two dicts share a key, the value from the smaller dict goes first.
`combine_all` without a kind takes it from the first value and raises
`ValueError` on an empty sequence.

## Pure values

```python
from funclasses.pure import pure, unit
from funclasses.higher import Some

pure(Some, 1)      # Some(1)
pure(list, 1)      # [1]
unit(Some)         # Some(())
```

## Functors

```python
from funclasses.functor import fmap, lift, fproduct, map_const, void, unzip, if_f
from funclasses.invariant import imap
from funclasses.higher import Some

fmap(Some("1"), int)                       # Some(1)
lift(lambda x: x + 1)(Some(1))             # Some(2)
fproduct(Some(1), str)                     # Some((1, "1"))
map_const(Some(1), "foo")                  # Some("foo")
void(Some(1))                              # Some(())
unzip(Some((1, "foo")))                    # (Some(1), Some("foo"))
if_f(Some(True), lambda: 1, lambda: 0)     # Some(1)
imap(Some("1"), int, str)                  # Some(1)
```

`fmap` on a dict maps its values and keeps its keys. `Nothing`, `Err` and
`Phantom` pass through unchanged.

## Products and mapN

```python
from funclasses.semigroupal import product
from funclasses.map_n import map2, map3, map_n, product_l, product_r
from funclasses.higher import Some

product(Some(1), Some("1"))                          # Some((1, "1"))
product([1, 2], [3, 4])                              # [(1, 3), (1, 4), (2, 3), (2, 4)]
map2(Some(1), Some(2), lambda a, b: a + b)           # Some(3)
map3(Some(1), Some(2), Some(3), lambda a, b, c: a + b + c)  # Some(6)
map_n(lambda *xs: sum(xs), Some(1), Some(2), Some(3), Some(4))  # Some(10)
product_r(Some(1), Some(2))                          # Some(2)
product_l(Some(1), Some(2))                          # Some(1)
```

`product` raises `TypeError` when the two values are of different kinds. For
results, the first `Err` wins; for dicts, only keys present in both are kept.
`map_n` takes between 2 and 12 containers and raises `ValueError` otherwise.

## Natural transformations

```python
from funclasses.transform import (
    FirstToOption, NthToResult, OptionToF, OptionToVec, ResultToVec, natural,
)
from funclasses.higher import Some, Nothing

FirstToOption().apply([1, 2, 3])                            # Some(1)
OptionToVec().apply(Nothing())                              # []
OptionToF(set).apply(Some(1))                               # {1}
NthToResult(1, "err").and_then(ResultToVec()).apply([1, 2]) # [2]
NthToResult(1, "err").and_then(ResultToVec()).apply([])     # []
first_or_zero = natural(lambda xs: xs[0] if xs else 0)
first_or_zero([])                                           # 0
```

Every transformation is a subclass of `FnK` and is callable. `compose(f)`
applies `f` first; `and_then(f)` applies `f` afterwards; plain functions are
accepted in both. `NthToOption` and `NthToResult` reject negative indexes
with `ValueError`.

## What is not included

There is no `flat_map`, monad or applicative `ap`, no do-style binding, and
no bifunctor or contravariant functor support. Only the wrapper types and
built-in containers listed above are supported.

## Running the tests

```
pip install -e ".[test]"
pytest
```