"""Multi-indices: exponent tuples of multivariate monomials.

Given a monomial ``x_0^i_0 * x_1^i_1 * ... * x_(N-1)^i_(N-1)`` we write it in
the shorter form ``X^I`` where ``X = (x_0, ..., x_(N-1))`` and
``I = (i_0, ..., i_(N-1))`` is a multi-index. The same type is used for
exponents, lexicographic degrees and coefficient addresses.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence, Union

from impcurve.algorithms.utils.exceptions import RangeError


class MultiIndex:
    """Immutable, fixed-length sequence of non-negative integers.

    Parameters
    ----------
    values : Iterable[int]
        Exponents, one per indeterminate.

    Raises
    ------
    RangeError
        If any value is negative.

    Notes
    -----
    Instances are hashable and compare element-wise, so two multi-indices
    with the same entries are interchangeable as dictionary keys. ``+`` and
    ``-`` act element-wise (not as tuple concatenation).
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int] = ()):
        vals = tuple(int(v) for v in values)
        for v in vals:
            if v < 0:
                raise RangeError(f"multi-index entries must be non-negative, got {vals}")
        self._values = vals

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return MultiIndex(self._values[i])
        return self._values[i]

    def __eq__(self, other) -> bool:
        if isinstance(other, MultiIndex):
            return self._values == other._values
        if isinstance(other, tuple):
            return self._values == other
        return NotImplemented

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self) -> int:
        return hash(self._values)

    def __add__(self, other: Sequence[int]) -> "MultiIndex":
        other = as_multi_index(other)
        if len(other) != len(self):
            raise RangeError("multi-index with wrong length")
        return MultiIndex(a + b for a, b in zip(self._values, other._values))

    def __sub__(self, other: Sequence[int]) -> "MultiIndex":
        other = as_multi_index(other)
        if len(other) != len(self):
            raise RangeError("multi-index with wrong length")
        return MultiIndex(a - b for a, b in zip(self._values, other._values))

    def shift(self, k: int = 1) -> "MultiIndex":
        """Drop the first *k* entries: ``(i0, ..., iN) -> (ik, ..., iN)``."""
        return shift(self, k)

    def replace(self, i: int, value: int) -> "MultiIndex":
        """Return a copy with entry *i* set to *value*."""
        vals = list(self._values)
        vals[i] = value
        return MultiIndex(vals)

    def total_degree(self) -> int:
        return sum(self._values)

    def as_tuple(self) -> tuple:
        return self._values

    def __str__(self) -> str:
        if not self._values:
            return ""
        return "[" + ", ".join(str(v) for v in self._values) + "]"

    def __repr__(self) -> str:
        return f"MultiIndex({list(self._values)})"


MultiIndexLike = Union[MultiIndex, Sequence[int]]


def as_multi_index(values: MultiIndexLike) -> MultiIndex:
    """Coerce a sequence of ints into a :class:`MultiIndex` (no copy if it
    already is one)."""
    if isinstance(values, MultiIndex):
        return values
    return MultiIndex(values)


def multi_index_zero(n: int) -> MultiIndex:
    """Make up a multi-index of size *n* filled with zeroes."""
    return MultiIndex((0,) * n)


def make_multi_index(*values: int) -> MultiIndex:
    """Make up a multi-index from a list of values."""
    return MultiIndex(values)


def make_multi_index_at(n: int, i: int, v: int) -> MultiIndex:
    """Make up a multi-index of size *n* with the single value *v* placed at
    position *i* and zeroes elsewhere.

    Raises
    ------
    RangeError
        If ``i`` is not in ``[0, n)``.
    """
    if not 0 <= i < n:
        raise RangeError("make_multi_index_at: out of range position")
    vals = [0] * n
    vals[i] = v
    return MultiIndex(vals)


def shift(I: MultiIndexLike, k: int = 1) -> MultiIndex:
    """Transform a size-N multi-index into a size-(N-k) one by removing the
    first *k* entries."""
    I = as_multi_index(I)
    if k > len(I):
        raise RangeError(f"cannot drop {k} entries from a multi-index of length {len(I)}")
    return MultiIndex(I.as_tuple()[k:])


def is_equal(I: MultiIndexLike, J: MultiIndexLike) -> bool:
    """Element-wise equality; multi-indices of different length differ."""
    return tuple(I) == tuple(J)
