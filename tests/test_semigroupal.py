from collections import deque

from hypothesis import given
from hypothesis import strategies as st
import pytest

from funclasses.functor import fmap
from funclasses.higher import Box, Err, Nothing, Ok, Phantom, Some
from funclasses.semigroupal import product


def reassociate(nested):
    (a, b), c = nested
    return a, (b, c)


def associative(fa, fb, fc):
    left = fmap(product(product(fa, fb), fc), reassociate)
    return left == product(fa, product(fb, fc))


def opt(inner):
    return st.one_of(st.just(Nothing()), st.builds(Some, inner))


def res(inner, error=st.integers()):
    return st.one_of(st.builds(Ok, inner), st.builds(Err, error))


@given(opt(st.booleans()), opt(st.integers()), opt(res(st.text(), st.integers(0, 255))))
def test_option_associativity(fa, fb, fc):
    assert associative(fa, fb, fc)


@given(res(st.booleans()), res(st.text()), res(opt(st.text())))
def test_result_associativity(fa, fb, fc):
    assert associative(fa, fb, fc)


@given(
    st.lists(st.booleans(), max_size=4),
    st.lists(st.integers(), max_size=4),
    st.lists(res(st.text(), st.integers(0, 255)), max_size=4),
)
def test_list_associativity(fa, fb, fc):
    assert associative(fa, fb, fc)


@given(
    st.dictionaries(st.integers(), st.booleans()),
    st.dictionaries(st.integers(), st.integers(min_value=0)),
    st.dictionaries(st.integers(), res(st.text(), st.integers(0, 255))),
)
def test_dict_associativity(fa, fb, fc):
    assert associative(fa, fb, fc)


def test_box_associativity():
    assert associative(Box(1), Box("box"), Box(Ok("ok")))
    assert product(Box(1), Box("a")) == Box((1, "a"))


def test_phantom():
    assert associative(Phantom(), Phantom(), Phantom())
    assert product(Phantom(), Phantom()) == Phantom()


def test_examples():
    assert product(Some(1), Some("1")) == Some((1, "1"))
    assert product(Some(1), Nothing()) == Nothing()
    assert product([1, 2], [3, 4]) == [(1, 3), (1, 4), (2, 3), (2, 4)]
    assert product(deque([1]), deque([2, 3])) == deque([(1, 2), (1, 3)])
    assert product({1}, {2, 3}) == {(1, 2), (1, 3)}


def test_result_first_error_wins():
    assert product(Err("a"), Err("b")) == Err("a")
    assert product(Ok(1), Err("b")) == Err("b")
    assert product(Ok(1), Ok(2)) == Ok((1, 2))


def test_dict_keeps_common_keys():
    assert product({1: "a", 2: "b"}, {2: 20, 3: 30}) == {2: ("b", 20)}


def test_mismatched_kinds():
    with pytest.raises(TypeError):
        product(Some(1), [1])


def test_not_semigroupal():
    with pytest.raises(TypeError):
        product(1, 2)