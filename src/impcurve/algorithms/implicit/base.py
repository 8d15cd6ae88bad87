"""User-facing implicitization of parametric polynomial plane curves.

:func:`implicitize` runs the whole pipeline (initial basis, microbasis,
generators, Bezout matrix, determinant) and :class:`ImplicitCurve` wraps its
result with evaluation, inspection and verification helpers.

Examples
--------
>>> curve = ImplicitCurve.from_parametric([0.0, 1.0], [0.0, 0.0, 1.0])   # (t, t^2)
>>> curve.coefficients()
{(0, 1): -1.0, (2, 0): 1.0}
>>> curve(2.0, 4.0)
0.0
"""

from __future__ import annotations

from typing import Any, Dict, Sequence, Tuple, Union

import numpy as np
import sympy as sp

from impcurve.algorithms.implicit.bezout import (basis_to_poly,
                                                 make_bezout_main_minor,
                                                 make_bezout_matrix)
from impcurve.algorithms.implicit.config import ImplicitizationConfig
from impcurve.algorithms.implicit.microbasis import microbasis
from impcurve.algorithms.implicit.types import ImplicitizationResults
from impcurve.algorithms.linalg.determinant import determinant_minor
from impcurve.algorithms.linalg.matrix import (Matrix,
                                               polynomial_matrix_evaluate_batch,
                                               polynomial_matrix_evaluate_numeric)
from impcurve.algorithms.polynomial.conversion import multipoly2sympy
from impcurve.algorithms.polynomial.dense import (_as_points,
                                                  _dense_evaluate_2d_points)
from impcurve.algorithms.polynomial.multivariate import MultiPoly
from impcurve.algorithms.polynomial.univariate import Polynomial
from impcurve.algorithms.utils.exceptions import DegenerateCurveError
from impcurve.utils.log_config import logger

ParametricLike = Union[Polynomial, MultiPoly, Sequence[Any], np.ndarray]


def _as_univariate(p: ParametricLike, name: str) -> Polynomial:
    """Coerce a coordinate polynomial to a rank-1 :class:`Polynomial` (copied)."""
    if isinstance(p, MultiPoly):
        if p.rank != 1:
            raise TypeError(f"{name} must be univariate, got a rank-{p.rank} polynomial")
        return p.poly.copy()
    if isinstance(p, Polynomial):
        if p.rank != 1:
            raise TypeError(f"{name} must be univariate, got a rank-{p.rank} polynomial")
        return p.copy()
    coeffs = np.asarray(p, dtype=np.float64) if isinstance(p, np.ndarray) else list(p)
    if len(coeffs) == 0:
        raise ValueError(f"{name} has no coefficients")
    return Polynomial(coeffs)


def implicitize(f: ParametricLike, g: ParametricLike,
                config: ImplicitizationConfig | None = None) -> ImplicitizationResults:
    """Implicit equation of the curve ``x = f(t), y = g(t)``.

    Parameters
    ----------
    f, g : Polynomial, MultiPoly, sequence or numpy.ndarray
        Coordinate polynomials; sequences list coefficients by exponent.
    config : ImplicitizationConfig, optional
        Microbasis and post-processing options.

    Returns
    -------
    ImplicitizationResults
        Microbasis, generators, Bezout matrix and implicit equation
        ``F(x, y)`` with ``F(f(t), g(t)) == 0``.

    Raises
    ------
    DegenerateCurveError
        If both ``f`` and ``g`` are constant.
    ConvergenceError
        If the microbasis reduction exceeds ``config.max_iter``.

    Notes
    -----
    A curve traced ``k`` times by the parametrization (e.g. ``f(t) = t^2,
    g(t) = t^4``) yields the ``k``-th power of its implicit equation. A Bezout
    determinant that vanishes identically yields the zero polynomial, which
    is reported through :attr:`ImplicitizationResults.is_degenerate` and a
    warning, not an exception.
    """
    if config is None:
        config = ImplicitizationConfig()
    f = _as_univariate(f, "f")
    g = _as_univariate(g, "g")

    basis = microbasis(f, g, config)
    p = basis_to_poly(basis.b0)
    q = basis_to_poly(basis.b1)
    bezout = make_bezout_matrix(p, q)
    logger.info("Implicitizing curve of degree %d (Bezout order %d, %d microbasis steps)",
                basis.n, bezout.rows, basis.iterations)
    if bezout.rows == 0:
        raise DegenerateCurveError("the microbasis generators do not depend on t")

    equation = determinant_minor(bezout)
    if config.normalize:
        equation.normalize()
    results = ImplicitizationResults(basis=basis, p=p, q=q, bezout=bezout, equation=equation,
                                     config=config)
    if results.is_degenerate:
        logger.warning("Implicit equation is identically zero: the parametrization is degenerate")
    return results


class ImplicitCurve:
    """Implicitized parametric curve.

    Parameters
    ----------
    f, g : Polynomial
        Coordinate polynomials.
    results : ImplicitizationResults
        Output of :func:`implicitize` for ``(f, g)``.

    Notes
    -----
    Use :meth:`from_parametric` to build an instance; the constructor does
    not recompute anything.
    """

    def __init__(self, f: Polynomial, g: Polynomial, results: ImplicitizationResults):
        self._f = f
        self._g = g
        self._results = results
        self._dense: np.ndarray | None = None

    @classmethod
    def from_parametric(cls, f: ParametricLike, g: ParametricLike,
                        config: ImplicitizationConfig | None = None) -> "ImplicitCurve":
        f = _as_univariate(f, "f")
        g = _as_univariate(g, "g")
        return cls(f, g, implicitize(f, g, config))

    def __repr__(self) -> str:
        return f"ImplicitCurve(f={self._f}, g={self._g}, equation={self.equation})"

    def __str__(self) -> str:
        return str(self.to_sympy())

    @property
    def f(self) -> Polynomial:
        return self._f

    @property
    def g(self) -> Polynomial:
        return self._g

    @property
    def results(self) -> ImplicitizationResults:
        return self._results

    @property
    def config(self) -> ImplicitizationConfig | None:
        """Options used to implicitize the curve."""
        return self._results.config

    @property
    def equation(self) -> MultiPoly:
        """Implicit equation ``F(x, y)`` as a rank-2 polynomial."""
        return self._results.equation

    @property
    def bezout_matrix(self) -> Matrix:
        return self._results.bezout

    @property
    def degree(self) -> int:
        """Degree of the parametrization, ``max(deg f, deg g)``."""
        return self._results.basis.n

    @property
    def is_degenerate(self) -> bool:
        return self._results.is_degenerate

    def __call__(self, x: Any, y: Any) -> Any:
        """``F(x, y)``; numpy arrays are evaluated element-wise."""
        return self.equation(x, y)

    def evaluate(self, points: Any) -> np.ndarray:
        """``F`` at every row of an ``(k, 2)`` array of points."""
        return _dense_evaluate_2d_points(self.to_dense(), _as_points(points))

    def coefficients(self) -> Dict[Tuple[int, int], Any]:
        """Non-zero coefficients keyed by ``(exponent of x, exponent of y)``."""
        return self.equation.as_dict()

    def to_dense(self) -> np.ndarray:
        """Coefficient grid ``c`` with ``F(x, y) = sum c[i, j] x^i y^j``."""
        if self._dense is None:
            self._dense = self.equation.to_dense()
        return self._dense

    def to_sympy(self, x: sp.Symbol | None = None, y: sp.Symbol | None = None) -> sp.Expr:
        if x is None or y is None:
            x, y = sp.symbols("x y")
        return multipoly2sympy(self.equation, [x, y])

    def evaluate_bezout(self, point: Sequence[float]) -> np.ndarray:
        """Numeric Bezout matrix at ``(x, y)``."""
        return polynomial_matrix_evaluate_numeric(self.bezout_matrix, point)

    def evaluate_bezout_batch(self, points: Any) -> np.ndarray:
        """Numeric Bezout matrices at many points, shape ``(k, n, n)``."""
        return polynomial_matrix_evaluate_batch(self.bezout_matrix, points)

    def bezout_minor(self, h: int) -> Matrix:
        """Bezout matrix without row and column *h*."""
        return make_bezout_main_minor(self._results.p, self._results.q, h)

    def substitute_parametrization(self) -> Polynomial:
        """``F(f(t), g(t))`` as a polynomial in t; zero up to round-off."""
        r = self.equation(self._f, self._g)
        if not isinstance(r, Polynomial):
            r = Polynomial([r])
        return r
