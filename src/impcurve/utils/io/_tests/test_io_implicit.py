import h5py
import numpy as np
import pytest

from impcurve.algorithms.implicit.base import ImplicitCurve
from impcurve.algorithms.implicit.config import ImplicitizationConfig
from impcurve.algorithms.utils.exceptions import ConvergenceError
from impcurve.utils.io.implicit import (HDF5_VERSION, load_implicit_curve,
                                        save_implicit_curve)


@pytest.fixture
def nodal_cubic():
    return ImplicitCurve.from_parametric([-1.0, 0.0, 1.0], [0.0, -1.0, 0.0, 1.0])


def test_roundtrip(tmp_path, nodal_cubic):
    path = tmp_path / "cubic.h5"
    save_implicit_curve(nodal_cubic, path)
    loaded = load_implicit_curve(path)

    assert isinstance(loaded, ImplicitCurve)
    assert loaded.coefficients() == nodal_cubic.coefficients()
    assert [float(c) for c in loaded.f] == [float(c) for c in nodal_cubic.f]
    assert [float(c) for c in loaded.g] == [float(c) for c in nodal_cubic.g]
    assert loaded.degree == nodal_cubic.degree
    assert loaded.bezout_matrix == nodal_cubic.bezout_matrix
    np.testing.assert_array_equal(loaded.to_dense(), nodal_cubic.to_dense())
    assert loaded(0.0, 0.0) == 0.0


def test_file_attributes(tmp_path, nodal_cubic):
    path = tmp_path / "cubic.h5"
    save_implicit_curve(nodal_cubic, path, compression=None)
    with h5py.File(path, "r") as f:
        assert f.attrs["format_version"] == HDF5_VERSION
        assert f.attrs["class"] == "ImplicitCurve"
        assert f.attrs["degree"] == 3
        assert f["equation"].shape == (4, 3)
        assert f["equation"].compression is None


def test_creates_parent_directories(tmp_path):
    curve = ImplicitCurve.from_parametric([0.0, 1.0], [0.0, 0.0, 1.0])
    path = tmp_path / "a" / "b" / "parabola.h5"
    save_implicit_curve(curve, str(path))
    assert path.exists()
    with h5py.File(path, "r") as f:
        assert f["equation"].compression == "gzip"
    assert load_implicit_curve(path).coefficients() == {(0, 1): -1.0, (2, 0): 1.0}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_implicit_curve(tmp_path / "nope.h5")


def test_config_roundtrip(tmp_path):
    config = ImplicitizationConfig(max_iter=40, tol=1e-9, normalize=False)
    curve = ImplicitCurve.from_parametric([0.0, 1.0, 0.0, 0.0, 1.0], [0.0, 0.0, 1.0, 0.0, 1.0], config)
    path = tmp_path / "quartic.h5"
    save_implicit_curve(curve, path)
    with h5py.File(path, "r") as f:
        assert f.attrs["max_iter"] == 40
        assert f.attrs["tol"] == 1e-9
        assert not f.attrs["normalize"]
    loaded = load_implicit_curve(path)
    assert loaded.config == config
    assert loaded.results.basis.iterations == curve.results.basis.iterations
    assert loaded.bezout_matrix == curve.bezout_matrix


def test_load_uses_stored_iteration_cap(tmp_path):
    curve = ImplicitCurve.from_parametric([0.0, 1.0, 0.0, 0.0, 1.0], [0.0, 0.0, 1.0, 0.0, 1.0])
    path = tmp_path / "quartic.h5"
    save_implicit_curve(curve, path)
    with h5py.File(path, "a") as f:
        f.attrs["max_iter"] = 1
    with pytest.raises(ConvergenceError):
        load_implicit_curve(path)


def test_files_without_config_use_defaults(tmp_path, nodal_cubic):
    path = tmp_path / "cubic.h5"
    save_implicit_curve(nodal_cubic, path)
    with h5py.File(path, "a") as f:
        for key in ("max_iter", "tol", "normalize"):
            del f.attrs[key]
    assert load_implicit_curve(path).config == ImplicitizationConfig()
