"""Determinant by Laplace expansion with memoized minors.

The expansion sweeps the columns from right to left. After processing column
``c`` the cache holds, for every set of ``n - c`` rows, the determinant of the
sub-matrix made of those rows and of the columns ``c..n-1``. Each such minor is
computed once from the minors of the previous column, and terms whose matrix
entry is zero are skipped, so sparse matrices (such as Bezout matrices of
polynomials) only ever store the few minors that are non-zero.

Notes
-----
The working cache lives for a single call; nothing is shared across
matrices.
"""

from __future__ import annotations

from itertools import combinations
from typing import Any, Dict, Tuple

from impcurve.algorithms.linalg.matrix import Matrix
from impcurve.algorithms.polynomial import ring
from impcurve.algorithms.utils.exceptions import RangeError
from impcurve.utils.log_config import logger

RowSet = Tuple[int, ...]


class _MinorCache:
    """Two maps from sorted row subsets to minors: the minors of the column
    just processed (``current``) and the ones being built (``next``)."""

    __slots__ = ("current", "next")

    def __init__(self):
        self.current: Dict[RowSet, Any] = {}
        self.next: Dict[RowSet, Any] = {}

    def get(self, rows: RowSet) -> Any:
        """Minor over *rows*, or ``None`` when it is zero (never stored)."""
        return self.current.get(rows)

    def store(self, rows: RowSet, value: Any) -> None:
        if not ring.is_zero(value):
            self.next[rows] = value

    def swap(self) -> None:
        self.current, self.next = self.next, self.current
        self.next.clear()


def _determinant_2x2(M: Matrix) -> Any:
    return M[0, 0] * M[1, 1] - M[0, 1] * M[1, 0]


def _determinant_3x3(M: Matrix) -> Any:
    r = M[0, 0] * M[1, 1] * M[2, 2]
    r += M[0, 2] * M[1, 0] * M[2, 1]
    r += M[0, 1] * M[1, 2] * M[2, 0]
    r -= M[0, 2] * M[1, 1] * M[2, 0]
    r -= M[0, 0] * M[1, 2] * M[2, 1]
    r -= M[0, 1] * M[1, 0] * M[2, 2]
    return r


def _determinant_laplace(M: Matrix) -> Any:
    n = M.rows
    zero = ring.zero(M[0, 0])
    cache = _MinorCache()
    for i in range(n):
        cache.store((i,), ring.clone(M[i, n - 1]))
    cache.swap()
    logger.debug("determinant: column %d holds %d non-zero minors", n - 1, len(cache.current))

    det = cache.get((0,)) if n == 1 else None
    if det is None:
        det = ring.zero(zero)
    for c in range(n - 2, -1, -1):
        for rows in combinations(range(n), n - c):
            det = ring.zero(zero)
            for r, row in enumerate(rows):
                m = M[row, c]
                if ring.is_zero(m):
                    continue
                minor = cache.get(rows[:r] + rows[r + 1:])
                if minor is None:
                    continue
                if r % 2 == 0:
                    det += m * minor
                else:
                    det -= m * minor
            cache.store(rows, det)
        cache.swap()
        logger.debug("determinant: column %d holds %d non-zero minors", c, len(cache.current))
    return det


def determinant_minor(M: Matrix) -> Any:
    """Determinant of a square matrix whose entries support ``+``, ``-``,
    ``*`` and a zero test.

    Parameters
    ----------
    M : Matrix
        Square matrix of numbers or polynomials.

    Returns
    -------
    Any
        The determinant, of the entry type. A zero result is a valid value
        (singular matrix), not an error.

    Raises
    ------
    RangeError
        If *M* is empty or not square.

    Examples
    --------
    >>> determinant_minor(Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]]))
    -2.0
    """
    if M.rows == 0 or M.columns == 0:
        raise RangeError("determinant of an empty matrix")
    if not M.is_square():
        raise RangeError(f"determinant of a non-square {M.rows}x{M.columns} matrix")
    n = M.rows
    logger.debug("determinant_minor: order %d", n)
    if n == 1:
        return ring.clone(M[0, 0])
    if n == 2:
        return _determinant_2x2(M)
    if n == 3:
        return _determinant_3x3(M)
    return _determinant_laplace(M)
