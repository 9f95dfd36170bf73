from hypothesis import given
from hypothesis import strategies as st
import pytest

from funclasses.higher import Box, Err, Nothing, Ok, Phantom, Some
from funclasses.invariant import imap


def parse_bool(text):
    return {"True": True, "False": False}[text]


def identity(x):
    return x


options = st.one_of(st.just(Nothing()), st.builds(Some, st.booleans()))
results = st.one_of(st.builds(Ok, st.booleans()), st.builds(Err, st.integers()))
lists = st.lists(st.booleans())
dicts = st.dictionaries(st.integers(), st.booleans())


def check_composition(fa, f1, f2, g1, g2):
    left = imap(imap(fa, f1, f2), g1, g2)
    right = imap(fa, lambda x: g1(f1(x)), lambda x: f2(g2(x)))
    return left == right


@given(st.one_of(options, results, lists, dicts))
def test_identity(fa):
    assert imap(fa, identity, identity) == fa


@given(st.one_of(options, results, lists, dicts))
def test_composition(fa):
    assert check_composition(fa, str, parse_bool, parse_bool, str)


def test_imap_example():
    assert imap(Some("1"), int, str) == Some(1)


def test_box():
    assert imap(Box("id"), identity, identity) == Box("id")
    assert check_composition(Box(1), str, int, int, str)
    assert imap(Box(1), str, int) == Box("1")


def test_phantom():
    assert imap(Phantom(), identity, identity) == Phantom()
    assert check_composition(Phantom(), str, int, int, str)


def test_err_untouched():
    assert imap(Err(-1), str, int) == Err(-1)


def test_unknown_type():
    with pytest.raises(TypeError):
        imap(object(), str, int)