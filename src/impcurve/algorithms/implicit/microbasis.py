"""Microbasis of the moving-line ideal of a parametric plane curve.

A parametric curve ``x = f(t), y = g(t)`` is generated by the two moving
lines ``x - f(t)`` and ``y - g(t)``, written as vectors over ``(x, y, 1)``:
``[1, 0, -f]`` and ``[0, 1, -g]``. The reduction below lowers the degree of
the generators until the sum of their degrees equals ``n = max(deg f, deg g)``
(a micro-basis), which halves the order of the elimination matrix built from
them.

References
----------
Sederberg, T., Goldman, R., Du, H. (1997). "Implicitizing rational curves by
the method of moving algebraic curves". Journal of Symbolic Computation.
"""

from __future__ import annotations

from typing import Any, Tuple

from impcurve.algorithms.implicit.config import ImplicitizationConfig
from impcurve.algorithms.implicit.types import Basis, BasisVector
from impcurve.algorithms.polynomial import ring
from impcurve.algorithms.polynomial.univariate import Polynomial
from impcurve.algorithms.utils.exceptions import (ConvergenceError,
                                                  DegenerateCurveError)
from impcurve.utils.log_config import logger


def vector_degree(v: BasisVector) -> Tuple[int, int]:
    """Dominant degree of a basis vector.

    Parameters
    ----------
    v : list of Polynomial
        Three polynomials in t.

    Returns
    -------
    tuple of int
        ``(degree, index)``: the highest real degree among the non-zero
        entries and the lowest index reaching it. ``(0, 0)`` for the zero
        vector.
    """
    best = (0, 0)
    found = False
    for i, p in enumerate(v):
        if p.is_zero():
            continue
        d = p.real_degree()
        if not found or d > best[0]:
            best = (d, i)
            found = True
    return best


def make_initial_basis(f: Polynomial, g: Polynomial) -> Basis:
    """Initial generators ``[1, 0, -f]`` and ``[0, 1, -g]``."""
    f = f.copy()
    g = g.copy()
    f.normalize()
    g.normalize()
    zero = f.zero_coefficient()
    one = ring.one(zero)
    b0 = [Polynomial([one], zero=zero), Polynomial([ring.zero(zero)], zero=zero), -f]
    b1 = [Polynomial([ring.zero(zero)], zero=zero), Polynomial([one], zero=zero), -g]
    n = max(f.real_degree(), g.real_degree())
    return Basis(b0, b1, n)


def _magnitude(c: Any) -> float:
    return abs(c)


def _chop(v: BasisVector, eps: float) -> None:
    """Drop top-degree coefficients of magnitude at most *eps*, degree by
    degree, as long as every entry reaching the top degree is negligible.

    A layer holding at least one significant coefficient is kept whole,
    small entries included.
    """
    for p in v:
        p.normalize()
    while True:
        top = max(p.max_degree() for p in v)
        if top == 0:
            return
        lead = [p for p in v if p.max_degree() == top]
        if any(_magnitude(p[top]) > eps for p in lead):
            return
        for p in lead:
            p[top] = p.zero_coefficient()
            p.normalize()


def _reduce(high: BasisVector, low: BasisVector, deg_h: int, deg_l: int, tol: float) -> None:
    """Cancel the dominant degree of *high* against the shifted *low*, in place.

    Each entry is first scaled by the pivot of *low*, the shifted multiple of
    *low* is subtracted, and the result is divided back by the pivot; the
    division keeps the coefficient magnitudes from growing step after step.
    """
    d = deg_h - deg_l
    pivot = max(range(len(low)), key=lambda i: _magnitude(low[i].coefficient(deg_l)))
    r_low = low[pivot][deg_l]
    r_high = high[pivot].coefficient(deg_h)
    scale = max(_magnitude(p.coefficient(deg_h)) for p in high)

    for i in range(len(high)):
        high[i] *= r_low
        high[i] -= (r_high * low[i]) << d
        high[i] /= r_low

    # the leading vectors are parallel, so the whole degree-deg_h layer cancels
    residue = 0.0
    for p in high:
        if deg_h <= p.max_degree():
            residue = max(residue, _magnitude(p[deg_h]))
            p[deg_h] = p.zero_coefficient()
    if residue > tol * scale:
        logger.warning("microbasis: discarded cancellation residue %.3e (relative %.3e)",
                       float(residue), float(residue / scale))
    _chop(high, tol * scale)


def microbasis(f: Polynomial, g: Polynomial, config: ImplicitizationConfig | None = None) -> Basis:
    """Reduce the initial basis of ``(f, g)`` to a micro-basis.

    Parameters
    ----------
    f, g : Polynomial
        Coordinate polynomials of the parametrization.
    config : ImplicitizationConfig, optional
        Iteration cap and round-off tolerance.

    Returns
    -------
    Basis
        Generators whose dominant degrees sum to at most ``n``.

    Raises
    ------
    DegenerateCurveError
        If both ``f`` and ``g`` are constant (``n == 0``).
    ConvergenceError
        If the degree sum is still above ``n`` after ``config.max_iter``
        reduction steps.

    Notes
    -----
    The pivot is the largest leading coefficient of the vector that is *not*
    reduced, so the divisor is never zero. In exact arithmetic the leading
    coefficient vectors of the two generators are parallel while the degree
    sum exceeds ``n``, so the choice of entry does not change the result
    and every entry of the reduced vector loses its dominant degree; the
    floating-point residue left there is cleared and reported when it
    exceeds ``config.tol``.
    """
    if config is None:
        config = ImplicitizationConfig()
    basis = make_initial_basis(f, g)
    n = basis.n
    if n == 0:
        raise DegenerateCurveError("both coordinate polynomials are constant; the curve is a point")

    b0, b1 = basis.b0, basis.b1
    n0 = vector_degree(b0)
    n1 = vector_degree(b1)
    iterations = 0
    while n0[0] + n1[0] > n:
        if iterations >= config.max_iter:
            raise ConvergenceError(
                f"microbasis reduction did not converge after {config.max_iter} iterations "
                f"(degrees {n0[0]} + {n1[0]} > {n})",
                iterations=iterations,
            )
        iterations += 1
        if n0[0] < n1[0]:
            _reduce(b1, b0, n1[0], n0[0], config.tol)
            n1 = vector_degree(b1)
        else:
            _reduce(b0, b1, n0[0], n1[0], config.tol)
            n0 = vector_degree(b0)
        logger.debug("microbasis iteration %d: degrees (%d, %d), n = %d", iterations, n0[0], n1[0], n)

    basis.iterations = iterations
    return basis
