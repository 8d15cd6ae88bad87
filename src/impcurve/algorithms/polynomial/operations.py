"""Recursive helpers over nested polynomials of explicit rank.

A rank-N multivariate polynomial is a :class:`Polynomial` whose coefficients
are rank-(N-1) polynomials, down to plain scalars at rank 0. The functions
below walk such a structure one nesting level per multi-index entry; they
are the building blocks of :class:`~impcurve.algorithms.polynomial.multivariate.MultiPoly`.

Notes
-----
The outermost nesting level corresponds to the first indeterminate
``x_0``; a multi-index ``I`` addresses ``p[I[0]][I[1]]...[I[N-1]]``.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Sequence, Tuple

from impcurve.algorithms.polynomial import ring
from impcurve.algorithms.polynomial.multiindex import MultiIndex, as_multi_index
from impcurve.algorithms.polynomial.univariate import Polynomial
from impcurve.algorithms.utils.exceptions import RangeError


def _check_length(I: Sequence[int], n: int) -> None:
    if len(I) != n:
        raise RangeError(f"multi-index with wrong length: expected {n}, got {len(I)}")


def _zero_at_depth(p: Polynomial, depth: int) -> Any:
    z = p
    for _ in range(depth):
        z = z.zero_coefficient()
    return z


def polynomial_zero(rank: int, coeff: Any = float) -> Polynomial:
    """Zero polynomial with *rank* nesting levels over the ring of *coeff*
    (a numeric type or a scalar prototype)."""
    if rank < 1:
        raise RangeError(f"polynomial rank must be positive, got {rank}")
    z = ring.zero(coeff)
    for _ in range(rank):
        z = Polynomial([z])
    return z


def polynomial_monomial(I: Sequence[int], c: Any, start: int = 0) -> Any:
    """Build ``c * X^J`` where ``J = I[start:]``.

    With ``start == len(I)`` the (copied) coefficient itself is returned.
    """
    if start == len(I):
        return ring.clone(c)
    inner = polynomial_monomial(I, c, start + 1)
    return Polynomial.monomial(inner, I[start])


def polynomial_lex_degree(p: Polynomial) -> MultiIndex:
    """Lexicographic degree: at each level follow the branch of highest
    non-zero degree and record that degree."""
    D = []
    q = p
    while isinstance(q, Polynomial):
        d = q.real_degree()
        D.append(d)
        q = q[d]
    return MultiIndex(D)


def _degree_along(p: Polynomial, I: Sequence[int], real: bool) -> Tuple[bool, MultiIndex]:
    _check_length(I, p.rank)
    D = [0] * len(I)
    q = p
    for k, i in enumerate(I):
        D[k] = q.real_degree() if real else q.max_degree()
        if i > D[k]:
            return False, MultiIndex(D)
        q = q[i]
    return True, MultiIndex(D)


def polynomial_max_degree(p: Polynomial, I: Sequence[int]) -> Tuple[bool, MultiIndex]:
    """Return ``(ok, D)`` where ``D[k]`` is the max degree of the polynomial
    reached after following ``I[:k]``; ``ok`` is False as soon as an entry of
    ``I`` exceeds it, i.e. ``I`` does not address an allocated coefficient."""
    return _degree_along(p, I, real=False)


def polynomial_real_degree(p: Polynomial, I: Sequence[int]) -> Tuple[bool, MultiIndex]:
    """Like :func:`polynomial_max_degree` with real degrees; ``ok`` tells
    whether ``I`` can address a non-zero coefficient."""
    return _degree_along(p, I, real=True)


def polynomial_get(p: Polynomial, I: Sequence[int]) -> Any:
    """Coefficient of ``X^I`` with no out-of-range checking (an
    ``IndexError`` surfaces if ``I`` runs past the storage)."""
    _check_length(I, p.rank)
    q = p
    for i in I:
        q = q[i]
    return q


def polynomial_get_safe(p: Polynomial, I: Sequence[int]) -> Any:
    """Sub-polynomial (or coefficient when ``len(I) == rank``) addressed by
    *I*; a fresh zero of the right type when *I* is out of range."""
    if not 0 < len(I) <= p.rank:
        raise RangeError(f"multi-index with wrong length: {len(I)} for rank {p.rank}")
    q = p
    for k, i in enumerate(I):
        if i > q.max_degree():
            return _zero_at_depth(q, len(I) - k)
        q = q[i]
    return q


def polynomial_set_safe(p: Polynomial, I: Sequence[int], c: Any) -> None:
    """Set the coefficient (or sub-polynomial) addressed by *I* to *c*.

    Missing intermediate levels are created, and every lexicographically
    earlier sibling that did not exist yet is set to zero.
    """
    if not 0 < len(I) <= p.rank:
        raise RangeError(f"multi-index with wrong length: {len(I)} for rank {p.rank}")
    q = p
    last = len(I) - 1
    for k, i in enumerate(I):
        if k == last:
            q.set_coefficient(i, c)
            return
        if i > q.max_degree():
            q.set_coefficient(i, polynomial_monomial(I, c, k + 1))
            return
        q = q[i]


def polynomial_shift(p: Polynomial, I: Sequence[int], start: int = 0) -> None:
    """Multiply *p* by ``X^I`` in place."""
    if start == 0:
        _check_length(I, p.rank)
    p <<= I[start]
    if start + 1 < len(I):
        for k in range(len(p)):
            polynomial_shift(p[k], I, start + 1)


def polynomial_evaluate(p: Any, X: Sequence[Any], start: int = 0) -> Any:
    """Nested Horner evaluation at the point *X*.

    The outermost polynomial is evaluated in ``X[start]`` treating its
    coefficients, themselves evaluated recursively, as constants.
    """
    if not isinstance(p, Polynomial):
        return ring.clone(p)
    n = p.max_degree()
    r = polynomial_evaluate(p[n], X, start + 1)
    for k in range(n - 1, -1, -1):
        r *= X[start]
        r += polynomial_evaluate(p[k], X, start + 1)
    return r


def polynomial_normalize(p: Polynomial) -> None:
    """Trim leading zero coefficients at every nesting level."""
    p.normalize()
    if p.rank > 1:
        for c in p:
            polynomial_normalize(c)


def polynomial_for_each(p: Polynomial, M: int, op: Callable[[Any], Any]) -> None:
    """Replace each rank-*M* sub-polynomial ``s`` of *p* by ``op(s)``.

    Only the branches up to each level's real degree are visited. ``M = 0``
    visits the scalar coefficients.
    """
    if not 0 <= M < p.rank:
        raise RangeError(f"for_each rank {M} out of range for a rank-{p.rank} polynomial")
    for k in range(p.real_degree() + 1):
        if p.rank - 1 == M:
            p[k] = op(p[k])
        else:
            polynomial_for_each(p[k], M, op)


def polynomial_terms(p: Polynomial, prefix: Tuple[int, ...] = ()) -> Iterator[Tuple[MultiIndex, Any]]:
    """Yield ``(I, c)`` for every non-zero scalar coefficient, in
    lexicographic order of ``I``."""
    for k, c in enumerate(p):
        if isinstance(c, Polynomial):
            yield from polynomial_terms(c, prefix + (k,))
        elif not ring.is_zero(c):
            yield MultiIndex(prefix + (k,)), c


def polynomial_extents(p: Polynomial) -> Tuple[int, ...]:
    """Per-level maximum real degree over all non-zero terms (zeros for the
    zero polynomial)."""
    ext = [0] * p.rank
    for I, _ in polynomial_terms(p):
        for k, i in enumerate(I):
            if i > ext[k]:
                ext[k] = i
    return tuple(ext)


def multi_index_arg(I: Any, rank: int) -> MultiIndex:
    """Validate a multi-index argument against *rank*."""
    I = as_multi_index(I)
    _check_length(I, rank)
    return I
