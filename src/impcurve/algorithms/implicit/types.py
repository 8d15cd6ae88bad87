"""Types and dataclasses for the implicitization module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from impcurve.algorithms.implicit.config import ImplicitizationConfig
from impcurve.algorithms.linalg.matrix import Matrix
from impcurve.algorithms.polynomial.multivariate import MultiPoly
from impcurve.algorithms.polynomial.univariate import Polynomial

BasisVector = List[Polynomial]
"""Three polynomials in t, the coordinates over ``(x, y, 1)``."""


@dataclass
class Basis:
    """Pair of generators of the moving-line ideal of a parametric curve.

    Parameters
    ----------
    b0, b1 : list of Polynomial
        Vectors ``(a, b, c)`` standing for the moving lines
        ``a(t) x + b(t) y + c(t)``.
    n : int
        Degree of the parametrization, ``max(deg f, deg g)``.
    iterations : int
        Number of reduction steps performed (0 for the initial basis).
    """

    b0: BasisVector
    b1: BasisVector
    n: int
    iterations: int = 0

    def __getitem__(self, i: int) -> BasisVector:
        return (self.b0, self.b1)[i]

    def __iter__(self):
        return iter((self.b0, self.b1))


@dataclass
class ImplicitizationResults:
    """Everything produced by one :func:`~impcurve.algorithms.implicit.base.implicitize` run.

    Parameters
    ----------
    basis : Basis
        The reduced microbasis.
    p, q : MultiPoly
        The two generators as rank-3 polynomials in ``(t, x, y)``.
    bezout : Matrix
        Symmetric Bezout matrix of ``p`` and ``q`` with rank-2 entries in
        ``(x, y)``.
    equation : MultiPoly
        Implicit equation ``F(x, y)``, the determinant of ``bezout``.
    config : ImplicitizationConfig, optional
        Options the run used; kept so the basis can be rebuilt identically.
    """

    basis: Basis
    p: MultiPoly
    q: MultiPoly
    bezout: Matrix
    equation: MultiPoly
    config: ImplicitizationConfig | None = None

    @property
    def is_degenerate(self) -> bool:
        """True when the implicit equation is identically zero."""
        return self.equation.is_zero()
