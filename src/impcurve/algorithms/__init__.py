""" Public API for the :mod:`~impcurve.algorithms` package.
"""

from .implicit import ImplicitCurve, ImplicitizationConfig, implicitize
from .linalg import Matrix, determinant_minor
from .polynomial import MultiIndex, MultiPoly, Polynomial
from .utils.exceptions import (ConvergenceError, DegenerateCurveError,
                               ImpcurveError, RangeError)

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
]
