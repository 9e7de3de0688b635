from __future__ import annotations

from typing import Any

import numpy as np


def to_numpy(matrix: Any, dtype: Any = None) -> np.ndarray:
    """Copy a matrix into a 2D NumPy array.

    Without ``dtype`` the array has object dtype and absent entries are None.
    """

    out = np.empty(matrix.shape, dtype=object)
    for i, row in enumerate(matrix.to_lists()):
        for j, value in enumerate(row):
            out[i, j] = value
    if dtype is not None:
        return out.astype(dtype)
    return out


def _array(self: Any, dtype: Any = None, copy: Any = None) -> np.ndarray:
    # Always a fresh array; copy=False cannot be honoured.
    if copy is False:
        raise ValueError(f"{type(self).__name__} cannot be exposed to NumPy without a copy")
    return to_numpy(self, dtype=dtype)


def patch_interop(cls: Any) -> None:
    """Patch __array__ onto the given class."""
    cls.__array__ = _array
