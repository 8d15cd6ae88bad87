"""Polynomial module public API.

Exposes the univariate and multivariate polynomial types, multi-indices and
the sympy conversion helpers.
"""

from .conversion import multipoly2sympy, sympy2multipoly
from .multiindex import (MultiIndex, make_multi_index, make_multi_index_at,
                         multi_index_zero, shift)
from .multivariate import MultiPoly
from .univariate import Polynomial, parse_polynomial

__all__ = [
    "MultiIndex",
    "make_multi_index",
    "make_multi_index_at",
    "multi_index_zero",
    "shift",
    "MultiPoly",
    "Polynomial",
    "parse_polynomial",
    "multipoly2sympy",
    "sympy2multipoly",
]
