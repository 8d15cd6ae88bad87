"""Numba kernels for bivariate polynomials stored as dense grids.

A bivariate polynomial ``F(x, y) = sum c[i, j] x^i y^j`` is stored as a 2-D
float array ``c`` (see :meth:`MultiPoly.to_dense`). These kernels evaluate
such grids with nested Horner passes over many points at once, which is the
hot path when an implicit equation or a symbolic Bezout matrix is sampled.
"""

from __future__ import annotations

import numpy as np
from numba import njit

from impcurve.algorithms.utils.config import FASTMATH


@njit(fastmath=FASTMATH, cache=False)
def _dense_evaluate_2d(coeffs: np.ndarray, x: float, y: float) -> float:
    """Evaluate one bivariate grid at ``(x, y)``.

    Parameters
    ----------
    coeffs : numpy.ndarray
        Grid of shape ``(nx, ny)``; ``coeffs[i, j]`` multiplies ``x^i y^j``.
    x, y : float
        Evaluation point.

    Returns
    -------
    float
        ``F(x, y)``.
    """
    nx, ny = coeffs.shape
    r = 0.0
    for i in range(nx - 1, -1, -1):
        s = 0.0
        for j in range(ny - 1, -1, -1):
            s = s * y + coeffs[i, j]
        r = r * x + s
    return r


@njit(fastmath=FASTMATH, cache=False)
def _dense_evaluate_2d_points(coeffs: np.ndarray, points: np.ndarray) -> np.ndarray:
    """Evaluate one bivariate grid at every row of *points* (shape ``(k, 2)``)."""
    k = points.shape[0]
    out = np.empty(k, dtype=np.float64)
    for m in range(k):
        out[m] = _dense_evaluate_2d(coeffs, points[m, 0], points[m, 1])
    return out


@njit(fastmath=FASTMATH, cache=False)
def _dense_evaluate_2d_matrix_batch(grids: np.ndarray, points: np.ndarray) -> np.ndarray:
    """Evaluate a matrix of bivariate grids at a batch of points.

    Parameters
    ----------
    grids : numpy.ndarray
        Array of shape ``(rows, cols, nx, ny)``; ``grids[r, c]`` is the grid
        of entry ``(r, c)``.
    points : numpy.ndarray
        Array of shape ``(k, 2)``.

    Returns
    -------
    numpy.ndarray
        Array of shape ``(k, rows, cols)`` holding one numeric matrix per point.
    """
    rows, cols = grids.shape[0], grids.shape[1]
    k = points.shape[0]
    out = np.empty((k, rows, cols), dtype=np.float64)
    for m in range(k):
        x = points[m, 0]
        y = points[m, 1]
        for r in range(rows):
            for c in range(cols):
                out[m, r, c] = _dense_evaluate_2d(grids[r, c], x, y)
    return out


def _as_points(points) -> np.ndarray:
    """Coerce a point or a sequence of points to a contiguous ``(k, 2)``
    float array."""
    pts = np.ascontiguousarray(np.asarray(points, dtype=np.float64))
    if pts.ndim == 1:
        pts = pts.reshape(1, -1)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"points must have shape (k, 2), got {np.shape(points)}")
    return pts
