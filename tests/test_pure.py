from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from funclasses.higher import Box, Err, Nothing, Ok, Phantom, Some, kind_of
from funclasses.pure import pure, unit


def test_documented_examples():
    assert pure(Some, 1) == Some(1)
    assert unit(Some) == Some(())


def test_box():
    assert pure(Box, 1) == Box(1)
    assert unit(Box) == Box(())


def test_result():
    assert pure(Ok, "ok") == Ok("ok")
    assert pure(Err, 1) == Ok(1)


def test_option_kind_given_as_nothing():
    assert pure(Nothing, 1) == Some(1)


def test_collections():
    assert pure(list, 1) == [1]
    assert pure(deque, 1) == deque([1])
    assert pure(set, 1) == {1}
    assert pure(frozenset, 1) == frozenset({1})
    assert unit(list) == [()]


def test_unsupported_kinds_are_rejected():
    with pytest.raises(TypeError):
        pure(int, 1)
    with pytest.raises(TypeError):
        pure(dict, 1)
    with pytest.raises(TypeError):
        pure(Phantom, 1)
    with pytest.raises(TypeError):
        pure([], 1)


@pytest.mark.parametrize("kind", [Some, Ok, Box, list, deque, set, frozenset])
@given(value=st.integers())
def test_lifted_value_has_requested_kind(kind, value):
    assert kind_of(pure(kind, value)) is kind


@given(st.integers())
def test_single_element_collections_hold_the_value(value):
    assert list(pure(list, value)) == [value]
    assert list(pure(deque, value)) == [value]
    assert pure(Some, value).value == value