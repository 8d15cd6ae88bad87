"""Multivariate polynomials of arbitrary rank.

:class:`MultiPoly` represents a polynomial in N indeterminates
``x_0, ..., x_(N-1)`` with no attached symbols; it wraps a rank-N nested
:class:`~impcurve.algorithms.polynomial.univariate.Polynomial` and adds
multi-index addressing, lexicographic degree, nested evaluation and
mixed-rank arithmetic.

Notes
-----
A lower-rank operand always broadcasts into the higher rank, never the other
way round: a rank-M polynomial combined with a rank-N one (M < N) is first
embedded as a rank-N polynomial in the last M indeterminates, i.e. placed at
multi-index zero of the N-M leading ones (see :meth:`MultiPoly.embed`).
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Literal, Mapping, Tuple, Union

import numpy as np

from impcurve.algorithms.polynomial import ring
from impcurve.algorithms.polynomial.multiindex import (MultiIndex,
                                                       MultiIndexLike,
                                                       make_multi_index_at,
                                                       multi_index_zero)
from impcurve.algorithms.polynomial.operations import (multi_index_arg,
                                                       polynomial_evaluate,
                                                       polynomial_extents,
                                                       polynomial_for_each,
                                                       polynomial_get,
                                                       polynomial_get_safe,
                                                       polynomial_lex_degree,
                                                       polynomial_max_degree,
                                                       polynomial_monomial,
                                                       polynomial_normalize,
                                                       polynomial_real_degree,
                                                       polynomial_set_safe,
                                                       polynomial_shift,
                                                       polynomial_terms,
                                                       polynomial_zero)
from impcurve.algorithms.polynomial.univariate import (Polynomial,
                                                       parse_polynomial)
from impcurve.algorithms.utils.exceptions import RangeError

Ordering = Literal["lex", "ilex", "max_lex"]

# ilex and max_lex are declared for API compatibility; only lex is implemented.
_UNSUPPORTED_ORDERINGS = ("ilex", "max_lex")


class MultiPoly:
    """Polynomial in ``rank`` indeterminates.

    Parameters
    ----------
    rank : int, default 1
        Number of indeterminates, at least 1.
    poly : Polynomial, optional
        Nested polynomial of matching rank; it is copied. When omitted the
        zero polynomial is built.
    coeff : type or scalar, default float
        Coefficient ring used for the zero polynomial.

    Raises
    ------
    RangeError
        If ``poly`` does not have rank ``rank``.

    Examples
    --------
    >>> x, y = MultiPoly.variable(2, 0), MultiPoly.variable(2, 1)
    >>> F = y - x * x
    >>> F(2.0, 4.0)
    0.0
    >>> F.degree()
    MultiIndex([2, 0])
    """

    __slots__ = ("_poly",)

    def __init__(self, rank: int = 1, poly: Polynomial | None = None, *, coeff: Any = float):
        if poly is None:
            poly = polynomial_zero(rank, coeff)
        else:
            if not isinstance(poly, Polynomial) or poly.rank != rank:
                raise RangeError(f"expected a rank-{rank} polynomial, got {poly!r}")
            poly = poly.copy()
        self._poly = poly

    @classmethod
    def _wrap(cls, poly: Polynomial) -> "MultiPoly":
        obj = cls.__new__(cls)
        obj._poly = poly
        return obj

    @classmethod
    def monomial(cls, rank: int, c: Any, I: MultiIndexLike | None = None) -> "MultiPoly":
        """Build ``c * X^I``."""
        I = multi_index_zero(rank) if I is None else multi_index_arg(I, rank)
        return cls._wrap(polynomial_monomial(I, c))

    @classmethod
    def constant(cls, rank: int, c: Any) -> "MultiPoly":
        return cls.monomial(rank, c)

    @classmethod
    def variable(cls, rank: int, i: int, coeff: Any = 1.0) -> "MultiPoly":
        """The indeterminate ``x_i`` (times *coeff*)."""
        return cls.monomial(rank, coeff, make_multi_index_at(rank, i, 1))

    @classmethod
    def embed(cls, p: Any, rank: int, I: MultiIndexLike | None = None) -> "MultiPoly":
        """Embed a lower-rank polynomial *p* as ``p(x_(N-M), ..., x_(N-1)) * X'^I``
        where ``X' = (x_0, ..., x_(N-M-1))``.

        Parameters
        ----------
        p : MultiPoly, Polynomial or scalar
            Polynomial of rank ``M <= rank`` (scalars have rank 0).
        rank : int
            Target rank N.
        I : MultiIndexLike, optional
            Exponents of the ``N - M`` leading indeterminates, zero by default.

        Raises
        ------
        RangeError
            If ``M > N`` or ``len(I) != N - M``.
        """
        if isinstance(p, MultiPoly):
            p = p._poly
        m = ring.rank_of(p)
        if m > rank:
            raise RangeError(f"cannot embed a rank-{m} polynomial into rank {rank}")
        I = multi_index_zero(rank - m) if I is None else multi_index_arg(I, rank - m)
        if m == rank:
            return cls._wrap(p.copy())
        return cls._wrap(polynomial_monomial(I, p))

    @classmethod
    def from_terms(cls, rank: int, terms: Union[Mapping, Iterable[Tuple[MultiIndexLike, Any]]],
                   coeff: Any = float) -> "MultiPoly":
        """Build a polynomial from ``{I: c}`` or an iterable of ``(I, c)``
        pairs; repeated multi-indices are summed."""
        items = terms.items() if isinstance(terms, Mapping) else terms
        out = cls(rank, coeff=coeff)
        for I, c in items:
            I = multi_index_arg(I, rank)
            out.set_coefficient(I, out.coefficient(I) + c)
        return out

    @classmethod
    def from_dense(cls, array: np.ndarray) -> "MultiPoly":
        """Inverse of :meth:`to_dense`: ``array[I]`` is the coefficient of
        ``X^I`` and ``array.ndim`` the rank."""
        array = np.asarray(array)
        out = cls(array.ndim, coeff=float)
        for idx in zip(*np.nonzero(array)):
            out.set_coefficient(idx, array[idx].item())
        return out

    @classmethod
    def from_string(cls, text: str, rank: int | None = None) -> "MultiPoly":
        """Rebuild a polynomial from the brace text of ``str(p)``."""
        poly = parse_polynomial(text)
        if rank is not None and poly.rank != rank:
            raise RangeError(f"text describes a rank-{poly.rank} polynomial, expected {rank}")
        return cls._wrap(poly)

    @property
    def rank(self) -> int:
        return self._poly.rank

    @property
    def poly(self) -> Polynomial:
        """Underlying nested polynomial (shared, not copied)."""
        return self._poly

    def zero_like(self) -> "MultiPoly":
        return MultiPoly._wrap(self._poly.zero_like())

    def one_like(self) -> "MultiPoly":
        return MultiPoly._wrap(self._poly.one_like())

    def copy(self) -> "MultiPoly":
        return MultiPoly._wrap(self._poly.copy())

    def degree(self, ordering: Ordering = "lex") -> MultiIndex:
        """Degree with respect to a monomial ordering.

        Raises
        ------
        NotImplementedError
            For ``"ilex"`` and ``"max_lex"``; only lexicographic ordering is
            supported.
        """
        if ordering == "lex":
            return polynomial_lex_degree(self._poly)
        if ordering in _UNSUPPORTED_ORDERINGS:
            raise NotImplementedError(f"{ordering!r} ordering is not supported, use 'lex'")
        raise ValueError(f"unknown monomial ordering {ordering!r}")

    def leading_coefficient(self, ordering: Ordering = "lex") -> Any:
        return self[self.degree(ordering)]

    def trailing_coefficient(self) -> Any:
        """Coefficient of the degree-0 term."""
        return self.coefficient(multi_index_zero(self.rank))

    def __getitem__(self, key: Union[int, MultiIndexLike]) -> Any:
        """Unchecked access: an int selects the rank-(N-1) part (a view), a
        multi-index selects a scalar coefficient."""
        if isinstance(key, (int, np.integer)):
            part = self._poly[key]
            return MultiPoly._wrap(part) if isinstance(part, Polynomial) else part
        return polynomial_get(self._poly, key)

    def coefficient(self, I: MultiIndexLike) -> Any:
        """Safe getter: the coefficient of ``X^I``, or a zero when it was
        never allocated. Never mutates the polynomial."""
        I = multi_index_arg(I, self.rank)
        return polynomial_get_safe(self._poly, I)

    def set_coefficient(self, I: MultiIndexLike, c: Any) -> None:
        """Safe setter: storage for ``X^I`` is created on demand."""
        I = multi_index_arg(I, self.rank)
        polynomial_set_safe(self._poly, I, c)

    def sub_poly(self, i: int) -> Any:
        """Copy of the rank-(N-1) coefficient of ``x_0^i`` (zero when out of
        range); a scalar for rank-1 polynomials."""
        part = self._poly.coefficient(i)
        if isinstance(part, Polynomial):
            return MultiPoly._wrap(part.copy())
        return part

    def select(self, I: MultiIndexLike) -> "MultiPoly":
        """Copy of the rank-M sub-polynomial characterised by *I*, with
        ``M = N - len(I)`` and ``0 < M < N``."""
        if not 0 < len(I) < self.rank:
            raise RangeError(f"select needs 0 < len(I) < {self.rank}, got {len(I)}")
        return MultiPoly._wrap(polynomial_get_safe(self._poly, tuple(I)).copy())

    def max_degree(self, I: MultiIndexLike) -> Tuple[bool, MultiIndex]:
        return polynomial_max_degree(self._poly, I)

    def real_degree(self, I: MultiIndexLike) -> Tuple[bool, MultiIndex]:
        return polynomial_real_degree(self._poly, I)

    def __call__(self, *X: Any) -> Any:
        """Evaluate with nested Horner passes.

        Accepts ``p(x0, ..., xN-1)`` or ``p(point)`` with a length-N sequence.
        Values may be numbers, numpy arrays (vectorised evaluation) or
        polynomials (substitution).
        """
        if len(X) == 1 and (isinstance(X[0], (tuple, list))
                            or (self.rank > 1 and isinstance(X[0], np.ndarray))):
            X = tuple(X[0])
        if len(X) != self.rank:
            raise RangeError(f"expected {self.rank} evaluation points, got {len(X)}")
        return polynomial_evaluate(self._poly, X)

    def normalize(self) -> None:
        polynomial_normalize(self._poly)

    def is_zero(self) -> bool:
        return self._poly.is_zero()

    def for_each(self, M: int, op) -> None:
        """Replace every rank-*M* sub-polynomial ``s`` by ``op(s)``."""
        if M == 0:
            polynomial_for_each(self._poly, 0, op)
        else:
            polynomial_for_each(self._poly, M, lambda s: op(MultiPoly._wrap(s))._poly)

    def terms(self) -> Iterator[Tuple[MultiIndex, Any]]:
        return polynomial_terms(self._poly)

    def as_dict(self) -> Dict[Tuple[int, ...], Any]:
        return {I.as_tuple(): c for I, c in self.terms()}

    def to_dense(self, shape: Tuple[int, ...] | None = None, dtype=np.float64) -> np.ndarray:
        """Dense coefficient grid with ``grid[I]`` the coefficient of ``X^I``.

        Parameters
        ----------
        shape : tuple of int, optional
            Grid shape; defaults to the smallest one holding every non-zero
            term. Terms outside a given shape raise ``RangeError``.
        dtype : numpy dtype, default float64
        """
        if shape is None:
            shape = tuple(e + 1 for e in polynomial_extents(self._poly))
        out = np.zeros(shape, dtype=dtype)
        for I, c in self.terms():
            if any(i >= s for i, s in zip(I, shape)):
                raise RangeError(f"term {I} does not fit a grid of shape {shape}")
            out[I.as_tuple()] = c
        return out

    def _lift(self, other: Any) -> Any:
        """Explicit broadcast embedding of a lower-rank operand; scalars are
        returned unchanged."""
        if isinstance(other, Polynomial):
            other = MultiPoly._wrap(other)
        if isinstance(other, MultiPoly):
            if other.rank == self.rank:
                return other
            if other.rank < self.rank:
                return MultiPoly.embed(other, self.rank)
            raise RangeError(
                f"cannot combine a rank-{other.rank} polynomial into a rank-{self.rank} one"
            )
        return other

    def __neg__(self) -> "MultiPoly":
        return MultiPoly._wrap(-self._poly)

    def __pos__(self) -> "MultiPoly":
        return self.copy()

    def __iadd__(self, other: Any) -> "MultiPoly":
        other = self._lift(other)
        self._poly += other._poly if isinstance(other, MultiPoly) else other
        return self

    def __isub__(self, other: Any) -> "MultiPoly":
        other = self._lift(other)
        self._poly -= other._poly if isinstance(other, MultiPoly) else other
        return self

    def __imul__(self, other: Any) -> "MultiPoly":
        other = self._lift(other)
        self._poly *= other._poly if isinstance(other, MultiPoly) else other
        return self

    def __itruediv__(self, c: Any) -> "MultiPoly":
        if isinstance(c, (MultiPoly, Polynomial)):
            raise TypeError("division is only defined by a scalar")
        self._poly /= c
        return self

    def __ilshift__(self, I: MultiIndexLike) -> "MultiPoly":
        """Multiply by ``X^I`` in place."""
        polynomial_shift(self._poly, multi_index_arg(I, self.rank))
        return self

    def _higher_rank(self, other: Any) -> bool:
        return isinstance(other, MultiPoly) and other.rank > self.rank

    def __add__(self, other: Any) -> "MultiPoly":
        if self._higher_rank(other):
            return other + self
        r = self.copy()
        r += other
        return r

    def __radd__(self, other: Any) -> "MultiPoly":
        return self + other

    def __sub__(self, other: Any) -> "MultiPoly":
        if self._higher_rank(other):
            r = -other
            r += self
            return r
        r = self.copy()
        r -= other
        return r

    def __rsub__(self, other: Any) -> "MultiPoly":
        r = -self
        r += other
        return r

    def __mul__(self, other: Any) -> "MultiPoly":
        if self._higher_rank(other):
            return other * self
        r = self.copy()
        r *= other
        return r

    def __rmul__(self, other: Any) -> "MultiPoly":
        return self * other

    def __truediv__(self, c: Any) -> "MultiPoly":
        r = self.copy()
        r /= c
        return r

    def __lshift__(self, I: MultiIndexLike) -> "MultiPoly":
        r = self.copy()
        r <<= I
        return r

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (MultiPoly, Polynomial)):
            try:
                other = self._lift(other)
            except RangeError:
                return False
            return self._poly == other._poly
        if isinstance(other, (int, float, complex, np.generic)):
            return self._poly == other
        return NotImplemented

    __hash__ = None

    def __str__(self) -> str:
        return str(self._poly)

    def __repr__(self) -> str:
        return f"MultiPoly(rank={self.rank}, {self._poly})"
