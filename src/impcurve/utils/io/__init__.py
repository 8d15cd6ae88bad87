"""HDF5 persistence helpers."""

from .implicit import load_implicit_curve, save_implicit_curve

__all__ = ["save_implicit_curve", "load_implicit_curve"]
