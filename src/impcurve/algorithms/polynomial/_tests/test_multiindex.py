import pytest

from impcurve.algorithms.polynomial.multiindex import (MultiIndex,
                                                       as_multi_index,
                                                       is_equal,
                                                       make_multi_index,
                                                       make_multi_index_at,
                                                       multi_index_zero, shift)
from impcurve.algorithms.utils.exceptions import RangeError


def test_equality_and_hash():
    I = MultiIndex([1, 2, 3])
    J = make_multi_index(1, 2, 3)
    assert I == J
    assert I == (1, 2, 3)
    assert hash(I) == hash(J)
    assert {I: "a"}[J] == "a"
    assert I != MultiIndex([1, 2])
    assert is_equal(I, [1, 2, 3])
    assert not is_equal(I, [1, 2])


def test_negative_entries_rejected():
    with pytest.raises(RangeError):
        MultiIndex([0, -1])


def test_elementwise_arithmetic():
    I = MultiIndex([1, 2])
    assert I + (3, 4) == (4, 6)
    assert (I + I) - I == I
    with pytest.raises(RangeError):
        I - (2, 0)
    with pytest.raises(RangeError):
        I + (1, 2, 3)


def test_zero_and_single_position():
    assert multi_index_zero(3) == (0, 0, 0)
    assert make_multi_index_at(3, 1, 5) == (0, 5, 0)
    with pytest.raises(RangeError):
        make_multi_index_at(3, 3, 1)


def test_shift_drops_leading_entries():
    I = make_multi_index(4, 5, 6)
    assert shift(I) == (5, 6)
    assert I.shift(2) == (6,)
    assert shift(I, 3) == ()
    with pytest.raises(RangeError):
        shift(I, 4)


def test_misc_helpers():
    I = as_multi_index([2, 0, 1])
    assert as_multi_index(I) is I
    assert I.total_degree() == 3
    assert I.replace(1, 7) == (2, 7, 1)
    assert I[1:] == (0, 1)
    assert str(I) == "[2, 0, 1]"
    assert repr(I) == "MultiIndex([2, 0, 1])"
