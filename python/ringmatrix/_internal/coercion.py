from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def coerce_sequence_rows(candidate: Any) -> list[list[Any]]:
    """Copy a nested sequence into a list of row lists.

    Rows may be ragged; deciding what a short row means is left to the caller.
    """

    if not is_sequence_like(candidate):
        raise TypeError("Matrix data must be provided as a nested sequence or a 2D NumPy array.")
    rows: list[list[Any]] = []
    for row in candidate:
        if not is_sequence_like(row):
            raise TypeError("Each matrix row must be a sequence of entries.")
        rows.append(list(row))
    return rows


def coerce_rows(candidate: Any) -> list[list[Any]]:
    if isinstance(candidate, np.ndarray):
        if candidate.ndim != 2:
            raise ValueError(f"Matrix input must be a 2D structure, got {candidate.ndim}D array.")
        return candidate.tolist()

    if callable(getattr(candidate, "to_lists", None)) and callable(getattr(candidate, "size", None)):
        raise TypeError(
            f"{type(candidate).__name__} is already a matrix; use make_sparse() or matrix() to change storage."
        )

    return coerce_sequence_rows(candidate)
