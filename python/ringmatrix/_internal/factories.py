from __future__ import annotations

from typing import Any, Callable

from .dense import DenseMatrix
from .index import Index
from .matrix_api import MatrixBase
from .sparse import SparseMatrix


_STORAGE: dict[str, type[MatrixBase]] = {
    "dense": DenseMatrix,
    "sparse": SparseMatrix,
}


def storage_class(storage: str) -> type[MatrixBase]:
    if not isinstance(storage, str):
        raise TypeError(f"storage must be a string, got {type(storage).__name__}")
    key = storage.strip().lower()
    try:
        return _STORAGE[key]
    except KeyError:
        raise ValueError(
            f"Unknown storage {storage!r}; expected one of {sorted(_STORAGE)}"
        ) from None


def instance(
    rows: int,
    columns: int,
    generator: Callable[[Index], Any],
    *,
    storage: str = "dense",
    **options: Any,
) -> MatrixBase:
    return storage_class(storage).instance(rows, columns, generator, **options)


def of_size(
    size: Index,
    generator: Callable[[Index], Any],
    *,
    storage: str = "dense",
    **options: Any,
) -> MatrixBase:
    return storage_class(storage).of_size(size, generator, **options)


def constant(size: int, value: Any, *, storage: str = "dense", **options: Any) -> MatrixBase:
    return storage_class(storage).constant(size, value, **options)


def identity(size: int, zero: Any, one: Any, *, storage: str = "dense", **options: Any) -> MatrixBase:
    return storage_class(storage).identity(size, zero, one, **options)


def from_array(data: Any, *, storage: str = "dense", **options: Any) -> MatrixBase:
    return storage_class(storage).from_array(data, **options)


def matrix(source: Any, *, storage: str | None = None, **options: Any) -> MatrixBase:
    """Coerce ``source`` into a matrix.

    Existing matrices are returned as-is unless a different storage is
    requested. Dense matrices convert to sparse through ``make_sparse``;
    there is no sparse -> dense conversion. Anything else goes through
    ``from_array``.
    """

    if isinstance(source, MatrixBase):
        if storage is None:
            if options:
                raise TypeError("storage options require an explicit storage")
            return source
        target = storage_class(storage)
        if isinstance(source, target):
            if options:
                raise TypeError(f"{type(source).__name__} is already built; storage options cannot change")
            return source
        if isinstance(source, DenseMatrix) and target is SparseMatrix:
            return source.make_sparse(**options)
        raise TypeError(f"cannot convert {type(source).__name__} to {storage!r} storage")

    return from_array(source, storage=storage or "dense", **options)
