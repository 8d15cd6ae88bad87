"""Input/output utilities for implicitized curves.

An :class:`~impcurve.algorithms.implicit.base.ImplicitCurve` is stored as
its two coordinate polynomials and the dense coefficient grid of its
implicit equation. The Bezout matrix is rebuilt on load from the stored
parametrization; the equation itself is read back as stored.
"""

from pathlib import Path
from typing import TYPE_CHECKING

import h5py
import numpy as np

from impcurve.algorithms.implicit.config import ImplicitizationConfig
from impcurve.utils.io.common import _ensure_dir, _write_dataset
from impcurve.utils.log_config import logger

if TYPE_CHECKING:
    from impcurve.algorithms.implicit.base import ImplicitCurve

HDF5_VERSION = "1.0"
"""HDF5 format version for implicit curve data."""


def save_implicit_curve(curve: "ImplicitCurve", path: str | Path, *, compression: str = "gzip", level: int = 4) -> None:
    """Save an implicit curve to an HDF5 file.

    Parameters
    ----------
    curve : :class:`~impcurve.algorithms.implicit.base.ImplicitCurve`
        The curve to serialize.
    path : str or pathlib.Path
        Destination file; parent directories are created.
    compression : str, default "gzip"
        Compression algorithm for the datasets.
    level : int, default 4
        Compression level (0-9).

    Notes
    -----
    Coefficients are stored as float64: exact types such as
    :class:`fractions.Fraction` are rounded, and complex coefficients raise
    ``TypeError``. The microbasis options (``max_iter``, ``tol``,
    ``normalize``) are stored as attributes so that loading rebuilds the same
    basis.

    Examples
    --------
    >>> curve = ImplicitCurve.from_parametric([0.0, 1.0], [0.0, 0.0, 1.0])
    >>> save_implicit_curve(curve, "parabola.h5")
    """
    path = Path(path)
    _ensure_dir(path.parent)

    with h5py.File(path, "w") as f:
        f.attrs["format_version"] = HDF5_VERSION
        f.attrs["class"] = curve.__class__.__name__
        f.attrs["degree"] = int(curve.degree)
        config = curve.config if curve.config is not None else ImplicitizationConfig()
        f.attrs["max_iter"] = int(config.max_iter)
        f.attrs["tol"] = float(config.tol)
        f.attrs["normalize"] = bool(config.normalize)
        _write_dataset(f, "f", np.asarray(list(curve.f), dtype=np.float64), compression=compression, level=level)
        _write_dataset(f, "g", np.asarray(list(curve.g), dtype=np.float64), compression=compression, level=level)
        _write_dataset(f, "equation", curve.to_dense(), compression=compression, level=level)
    logger.info("Saved implicit curve of degree %d to %s", curve.degree, path)


def load_implicit_curve(path: str | Path) -> "ImplicitCurve":
    """Load an implicit curve written by :func:`save_implicit_curve`.

    Raises
    ------
    FileNotFoundError
        If the specified file does not exist.

    Notes
    -----
    The microbasis and Bezout matrix are rebuilt from the stored ``f`` and
    ``g`` with the stored options; files without them use the defaults of
    :class:`~impcurve.algorithms.implicit.config.ImplicitizationConfig`.
    """
    from impcurve.algorithms.implicit.base import ImplicitCurve
    from impcurve.algorithms.implicit.bezout import (basis_to_poly,
                                                     make_bezout_matrix)
    from impcurve.algorithms.implicit.microbasis import microbasis
    from impcurve.algorithms.implicit.types import ImplicitizationResults
    from impcurve.algorithms.polynomial.multivariate import MultiPoly
    from impcurve.algorithms.polynomial.univariate import Polynomial

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    with h5py.File(path, "r") as f:
        f_coeffs = f["f"][()]
        g_coeffs = f["g"][()]
        grid = f["equation"][()]
        defaults = ImplicitizationConfig()
        config = ImplicitizationConfig(
            max_iter=int(f.attrs.get("max_iter", defaults.max_iter)),
            tol=float(f.attrs.get("tol", defaults.tol)),
            normalize=bool(f.attrs.get("normalize", defaults.normalize)),
        )

    fp = Polynomial(f_coeffs)
    gp = Polynomial(g_coeffs)
    basis = microbasis(fp, gp, config)
    p = basis_to_poly(basis.b0)
    q = basis_to_poly(basis.b1)
    equation = MultiPoly.from_dense(grid)
    results = ImplicitizationResults(basis=basis, p=p, q=q, bezout=make_bezout_matrix(p, q),
                                     equation=equation, config=config)
    return ImplicitCurve(fp, gp, results)
