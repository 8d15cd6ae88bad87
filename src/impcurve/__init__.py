"""Symbolic implicitization of parametric polynomial plane curves.

>>> from impcurve import ImplicitCurve
>>> ImplicitCurve.from_parametric([0.0, 1.0], [0.0, 0.0, 1.0]).coefficients()
{(0, 1): -1.0, (2, 0): 1.0}
"""

from impcurve.algorithms import (ConvergenceError, DegenerateCurveError,
                                 ImpcurveError, ImplicitCurve,
                                 ImplicitizationConfig, Matrix, MultiIndex,
                                 MultiPoly, Polynomial, RangeError,
                                 determinant_minor, implicitize)
from impcurve.utils.io import load_implicit_curve, save_implicit_curve

__all__ = [
    "ImplicitCurve",
    "ImplicitizationConfig",
    "implicitize",
    "Matrix",
    "determinant_minor",
    "MultiIndex",
    "MultiPoly",
    "Polynomial",
    "ImpcurveError",
    "RangeError",
    "ConvergenceError",
    "DegenerateCurveError",
    "save_implicit_curve",
    "load_implicit_curve",
]
