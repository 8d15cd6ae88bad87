"""Dense generic matrices and the polynomial-matrix evaluation helpers.

:class:`Matrix` is a plain row-major container: element access only, no
algebra. Entries may be numbers or polynomials; the symbolic Bezout matrix
of :mod:`impcurve.algorithms.implicit.bezout` is a ``Matrix`` of rank-2
:class:`~impcurve.algorithms.polynomial.multivariate.MultiPoly` entries.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from impcurve.algorithms.polynomial import ring
from impcurve.algorithms.polynomial.dense import (
    _as_points, _dense_evaluate_2d_matrix_batch)
from impcurve.algorithms.utils.exceptions import RangeError


class Matrix:
    """Dense ``rows x columns`` matrix of arbitrary ring elements.

    Parameters
    ----------
    rows, columns : int
        Shape; both may be zero.
    zero : Any, default 0.0
        Prototype element. Every entry starts as an independent copy of it.
    """

    __slots__ = ("_rows", "_columns", "_data")

    def __init__(self, rows: int = 0, columns: int = 0, zero: Any = 0.0):
        if rows < 0 or columns < 0:
            raise RangeError(f"matrix shape must be non-negative, got ({rows}, {columns})")
        self._rows = rows
        self._columns = columns
        self._data: List[Any] = [ring.clone(zero) for _ in range(rows * columns)]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> "Matrix":
        """Build a matrix from a sequence of equally long rows (copied)."""
        rows = [list(r) for r in rows]
        ncols = len(rows[0]) if rows else 0
        if any(len(r) != ncols for r in rows):
            raise RangeError("all rows must have the same length")
        out = cls.__new__(cls)
        out._rows = len(rows)
        out._columns = ncols
        out._data = [ring.clone(c) for r in rows for c in r]
        return out

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Matrix":
        array = np.asarray(array)
        if array.ndim != 2:
            raise RangeError(f"expected a 2-D array, got shape {array.shape}")
        return cls.from_rows(array.tolist())

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    def resize(self, rows: int, columns: int, zero: Any = 0.0) -> None:
        """Reshape to ``rows x columns``; entries are reset to copies of *zero*."""
        if rows < 0 or columns < 0:
            raise RangeError(f"matrix shape must be non-negative, got ({rows}, {columns})")
        self._rows = rows
        self._columns = columns
        self._data = [ring.clone(zero) for _ in range(rows * columns)]

    def _offset(self, key: Tuple[int, int]) -> int:
        i, j = key
        if not (0 <= i < self._rows and 0 <= j < self._columns):
            raise RangeError(f"index ({i}, {j}) out of range for a {self._rows}x{self._columns} matrix")
        return i * self._columns + j

    def __getitem__(self, key: Tuple[int, int]) -> Any:
        return self._data[self._offset(key)]

    def __setitem__(self, key: Tuple[int, int], value: Any) -> None:
        self._data[self._offset(key)] = value

    def row(self, i: int) -> List[Any]:
        """Entries of row *i* (shared, not copied)."""
        if not 0 <= i < self._rows:
            raise RangeError(f"row {i} out of range for {self._rows} rows")
        start = i * self._columns
        return self._data[start:start + self._columns]

    def __iter__(self) -> Iterator[List[Any]]:
        for i in range(self._rows):
            yield self.row(i)

    def map(self, fn: Callable[[Any], Any]) -> "Matrix":
        """New matrix with *fn* applied to every entry."""
        out = Matrix.__new__(Matrix)
        out._rows = self._rows
        out._columns = self._columns
        out._data = [fn(c) for c in self._data]
        return out

    def copy(self) -> "Matrix":
        return self.map(ring.clone)

    def is_square(self) -> bool:
        return self._rows == self._columns

    def is_symmetric(self) -> bool:
        if not self.is_square():
            return False
        n = self._rows
        return all(self[i, j] == self[j, i] for i in range(n) for j in range(i + 1, n))

    def to_numpy(self, dtype=np.float64) -> np.ndarray:
        """Numeric entries as a 2-D array; polynomial entries raise ``TypeError``."""
        return np.array(self._data, dtype=dtype).reshape(self._rows, self._columns)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and all(a == b for a, b in zip(self._data, other._data))

    __hash__ = None

    def __str__(self) -> str:
        return "{" + ", ".join("{" + ", ".join(str(c) for c in r) + "}" for r in self) + "}"

    def __repr__(self) -> str:
        return f"Matrix({self._rows}x{self._columns}, {self})"


def polynomial_matrix_evaluate(M: Matrix, X: Sequence[Any]) -> Matrix:
    """Evaluate every polynomial entry of *M* at the point *X*.

    Parameters
    ----------
    M : Matrix
        Matrix of polynomials of rank ``len(X)``.
    X : Sequence
        Evaluation point.

    Returns
    -------
    Matrix
        Matrix of the evaluated entries (numbers for numeric points).
    """
    X = tuple(X)
    return M.map(lambda p: p(*X) if callable(p) else ring.clone(p))


def polynomial_matrix_evaluate_numeric(M: Matrix, point: Sequence[float]) -> np.ndarray:
    """Like :func:`polynomial_matrix_evaluate` but returns a float ndarray,
    ready for ``numpy.linalg`` routines."""
    return polynomial_matrix_evaluate(M, point).to_numpy()


def _entry_grid(p: Any, nx: int, ny: int) -> np.ndarray:
    if hasattr(p, "to_dense"):
        return p.to_dense(shape=(nx, ny))
    grid = np.zeros((nx, ny), dtype=np.float64)
    grid[0, 0] = p
    return grid


def polynomial_matrix_to_dense(M: Matrix) -> np.ndarray:
    """Stack the coefficient grids of a matrix of bivariate polynomials into
    one ``(rows, columns, nx, ny)`` float array with a common grid shape."""
    nx = ny = 1
    for p in M._data:
        if hasattr(p, "to_dense"):
            if p.rank != 2:
                raise RangeError(f"expected bivariate entries, got rank {p.rank}")
            gx, gy = p.to_dense().shape
            nx, ny = max(nx, gx), max(ny, gy)
    grids = np.zeros((M.rows, M.columns, nx, ny), dtype=np.float64)
    for i in range(M.rows):
        for j in range(M.columns):
            grids[i, j] = _entry_grid(M[i, j], nx, ny)
    return grids


def polynomial_matrix_evaluate_batch(M: Matrix, points: Any) -> np.ndarray:
    """Evaluate a matrix of real bivariate polynomials at many points.

    Parameters
    ----------
    M : Matrix
        Matrix whose entries are rank-2 polynomials (or real constants).
    points : array_like
        A single ``(x, y)`` pair or an array of shape ``(k, 2)``.

    Returns
    -------
    numpy.ndarray
        Array of shape ``(k, rows, columns)``; slice ``m`` is the numeric
        matrix at ``points[m]``.
    """
    pts = _as_points(points)
    grids = polynomial_matrix_to_dense(M)
    return _dense_evaluate_2d_matrix_batch(grids, pts)
