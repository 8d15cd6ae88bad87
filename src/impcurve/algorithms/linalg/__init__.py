"""Linear algebra module public API.

Exposes the generic matrix container, the polynomial-matrix evaluation
helpers and the determinant by memoized minors.
"""

from .determinant import determinant_minor
from .matrix import (Matrix, polynomial_matrix_evaluate,
                     polynomial_matrix_evaluate_batch,
                     polynomial_matrix_evaluate_numeric)

__all__ = [
    "Matrix",
    "determinant_minor",
    "polynomial_matrix_evaluate",
    "polynomial_matrix_evaluate_numeric",
    "polynomial_matrix_evaluate_batch",
]
