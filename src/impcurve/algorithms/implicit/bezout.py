"""Bezout matrix of the two microbasis generators.

The generators ``p(t; x, y)`` and ``q(t; x, y)`` are rank-3 polynomials whose
first indeterminate is ``t``; seen as univariate polynomials in ``t`` with
bivariate coefficients, their bezoutian

    (p(t) q(s) - p(s) q(t)) / (t - s)

is a symmetric bilinear form whose ``n x n`` coefficient matrix has the
implicit equation of the curve as determinant.
"""

from __future__ import annotations

from typing import Any

from impcurve.algorithms.implicit.types import BasisVector
from impcurve.algorithms.linalg.matrix import Matrix
from impcurve.algorithms.polynomial.multivariate import MultiPoly
from impcurve.algorithms.polynomial.univariate import Polynomial
from impcurve.algorithms.utils.exceptions import RangeError


def poly1_to_poly3(p1: Polynomial, i: int, j: int) -> MultiPoly:
    """Rank-3 polynomial ``p1(t) * x^i * y^j`` in ``(t, x, y)``."""
    p3 = MultiPoly(3, coeff=p1.zero_coefficient())
    for k, c in enumerate(p1):
        p3.set_coefficient((k, i, j), c)
    return p3


def basis_to_poly(v: BasisVector) -> MultiPoly:
    """Dot product of a basis vector with ``(x, y, 1)``."""
    p = poly1_to_poly3(v[0], 1, 0)
    p += poly1_to_poly3(v[1], 0, 1)
    p += poly1_to_poly3(v[2], 0, 0)
    return p


def _order(p: MultiPoly, q: MultiPoly) -> int:
    for r in (p, q):
        if r.rank != 3:
            raise RangeError(f"Bezout generators must have rank 3, got {r.rank}")
    return max(p.poly.real_degree(), q.poly.real_degree())


def _bezout_entry(p: MultiPoly, q: MultiPoly, n: int, i: int, j: int) -> Any:
    """Entry of the bezoutian for the 1-based pair ``(i, j)`` with ``j >= i``."""
    m = min(i, n + 1 - j)
    entry = MultiPoly(2)
    for k in range(1, m + 1):
        entry += (p.sub_poly(j - 1 + k) * q.sub_poly(i - k)
                  - p.sub_poly(i - k) * q.sub_poly(j - 1 + k))
    return entry


def make_bezout_matrix(p: MultiPoly, q: MultiPoly) -> Matrix:
    """Symmetric ``n x n`` Bezout matrix of *p* and *q* with respect to ``t``.

    Parameters
    ----------
    p, q : MultiPoly
        Rank-3 polynomials in ``(t, x, y)``.

    Returns
    -------
    Matrix
        Entries are rank-2 :class:`MultiPoly` in ``(x, y)``; ``n`` is the
        larger of the two degrees in ``t``.
    """
    n = _order(p, q)
    BM = Matrix(n, n, zero=MultiPoly(2))
    for i in range(n, 0, -1):
        for j in range(n, i - 1, -1):
            BM[n - i, n - j] = _bezout_entry(p, q, n, i, j)

    # upper triangle by symmetry
    for i in range(n):
        for j in range(i):
            BM[j, i] = BM[i, j].copy()
    return BM


def make_bezout_main_minor(p: MultiPoly, q: MultiPoly, h: int) -> Matrix:
    """Principal ``(n-1) x (n-1)`` minor of the Bezout matrix.

    Parameters
    ----------
    p, q : MultiPoly
        Rank-3 generators.
    h : int
        0-based row/column of :func:`make_bezout_matrix` to delete.

    Returns
    -------
    Matrix
        The Bezout matrix without row ``h`` and column ``h``.

    Raises
    ------
    RangeError
        If ``h`` is not in ``[0, n)``.
    """
    n = _order(p, q)
    if not 0 <= h < n:
        raise RangeError(f"minor index {h} out of range for a Bezout matrix of order {n}")
    keep = [k for k in range(n) if k != h]
    BM = Matrix(n - 1, n - 1, zero=MultiPoly(2))
    for a, r in enumerate(keep):
        for b, c in enumerate(keep[:a + 1]):
            # row r of the full matrix is i = n - r in the bezoutian indexing
            i, j = n - r, n - c
            BM[a, b] = _bezout_entry(p, q, n, i, j)

    for a in range(n - 1):
        for b in range(a):
            BM[b, a] = BM[a, b].copy()
    return BM
