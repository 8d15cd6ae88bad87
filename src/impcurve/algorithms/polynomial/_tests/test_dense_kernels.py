import numpy as np
import pytest

from impcurve.algorithms.polynomial.dense import (
    _as_points, _dense_evaluate_2d, _dense_evaluate_2d_matrix_batch,
    _dense_evaluate_2d_points)


def _direct(grid, x, y):
    nx, ny = grid.shape
    return sum(grid[i, j] * x**i * y**j for i in range(nx) for j in range(ny))


def test_single_point():
    rng = np.random.default_rng(0)
    grid = rng.normal(size=(4, 3))
    for x, y in [(0.0, 0.0), (1.5, -0.5), (-2.0, 0.25)]:
        assert _dense_evaluate_2d(grid, x, y) == pytest.approx(_direct(grid, x, y))


def test_points():
    rng = np.random.default_rng(1)
    grid = rng.normal(size=(3, 5))
    pts = rng.uniform(-1.0, 1.0, size=(10, 2))
    out = _dense_evaluate_2d_points(grid, pts)
    expected = np.array([_direct(grid, px, py) for px, py in pts])
    np.testing.assert_allclose(out, expected, rtol=1e-12, atol=1e-12)


def test_matrix_batch():
    rng = np.random.default_rng(2)
    grids = rng.normal(size=(2, 3, 3, 3))
    pts = rng.uniform(-1.0, 1.0, size=(4, 2))
    out = _dense_evaluate_2d_matrix_batch(grids, pts)
    assert out.shape == (4, 2, 3)
    for m, (px, py) in enumerate(pts):
        for r in range(2):
            for c in range(3):
                assert out[m, r, c] == pytest.approx(_direct(grids[r, c], px, py))


def test_as_points():
    assert _as_points((1.0, 2.0)).shape == (1, 2)
    assert _as_points([[1, 2], [3, 4]]).dtype == np.float64
    with pytest.raises(ValueError):
        _as_points([[1.0, 2.0, 3.0]])
