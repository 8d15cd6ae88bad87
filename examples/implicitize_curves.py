"""Example script: implicit equations of a few classic parametric curves
(parabola, nodal cubic, cusp, a quartic), checked on sample points and saved
to HDF5.

Run with
    python examples/implicitize_curves.py
"""

import os
import sys

import numpy as np

sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from impcurve import ImplicitCurve, load_implicit_curve, save_implicit_curve
from impcurve.utils.io.common import _ensure_dir
from impcurve.utils.log_config import logger

_RESULTS_DIR = os.path.join("results", "curves")


def main() -> None:
    _ensure_dir(_RESULTS_DIR)

    # coefficients by increasing power of t
    curve_specs = [
        {"name": "parabola", "f": [0.0, 1.0], "g": [0.0, 0.0, 1.0]},
        {"name": "nodal_cubic", "f": [-1.0, 0.0, 1.0], "g": [0.0, -1.0, 0.0, 1.0]},
        {"name": "cusp", "f": [0.0, 0.0, 1.0], "g": [0.0, 0.0, 0.0, 1.0]},
        {"name": "quartic", "f": [1.0, -2.0, 0.0, 1.0, 3.0], "g": [0.0, 1.0, 1.0, 0.0, -1.0]},
    ]

    t = np.linspace(-2.0, 2.0, 9)
    for spec in curve_specs:
        logger.info("\n================  %s  ================", spec["name"])
        curve = ImplicitCurve.from_parametric(spec["f"], spec["g"])
        logger.info("F(x, y) = %s", curve)
        logger.info("Bezout matrix of order %d", curve.bezout_matrix.rows)

        points = np.column_stack([curve.f(t), curve.g(t)])
        residual = np.max(np.abs(curve.evaluate(points)))
        logger.info("max |F| on the parametrization: %.3e", residual)

        filepath = os.path.join(_RESULTS_DIR, f"{spec['name']}.h5")
        save_implicit_curve(curve, filepath)
        reloaded = load_implicit_curve(filepath)
        logger.info("Reloaded %s: %s", filepath, reloaded.coefficients())


if __name__ == "__main__":
    main()
