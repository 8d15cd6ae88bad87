"""Shared helpers for HDF5 serialization."""

from pathlib import Path

import h5py
import numpy as np


def _ensure_dir(path: str | Path) -> None:
    """Create *path* (and its parents) if it does not exist yet."""
    Path(path).mkdir(parents=True, exist_ok=True)


def _write_dataset(group: h5py.Group, name: str, data: np.ndarray, *, compression: str | None = "gzip", level: int = 4) -> None:
    """Write *data* as dataset *name* of *group*.

    Scalars and empty arrays are stored uncompressed since HDF5 filters need
    chunked, non-empty storage.
    """
    data = np.asarray(data)
    if compression is None or data.ndim == 0 or data.size == 0:
        group.create_dataset(name, data=data)
        return
    opts = level if compression == "gzip" else None
    group.create_dataset(name, data=data, compression=compression, compression_opts=opts)
