"""Implicitization module public API."""

from .base import ImplicitCurve, implicitize
from .bezout import basis_to_poly, make_bezout_main_minor, make_bezout_matrix
from .config import ImplicitizationConfig
from .microbasis import make_initial_basis, microbasis, vector_degree
from .types import Basis, ImplicitizationResults

__all__ = [
    "ImplicitCurve",
    "implicitize",
    "ImplicitizationConfig",
    "ImplicitizationResults",
    "Basis",
    "make_initial_basis",
    "microbasis",
    "vector_degree",
    "basis_to_poly",
    "make_bezout_matrix",
    "make_bezout_main_minor",
]
