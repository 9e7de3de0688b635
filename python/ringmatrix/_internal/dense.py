from __future__ import annotations

from typing import Any, TYPE_CHECKING

from .errors import require_not_none
from .index import Index
from .matrix_api import Generator, MatrixBase, S

if TYPE_CHECKING:
    from .sparse import SparseMatrix


class DenseMatrix(MatrixBase[S]):
    """Totally populated matrix backed by a flat row-major list.

    Every coordinate in the rectangle owns a slot; a slot holds None only when
    the generator produced None (or a ragged literal left it unset).
    """

    __slots__ = ("_data", "_size", "_cols")

    def __init__(self, data: list[Any], size: Index):
        rows, cols = size.shape()
        data = list(data)
        if len(data) != rows * cols:
            raise ValueError(
                f"DenseMatrix data has {len(data)} slots, expected {rows * cols} for shape ({rows}, {cols})"
            )
        self._data = data
        self._size = size
        self._cols = cols

    @classmethod
    def _build(cls, size: Index, generator: Generator, **options: Any) -> "DenseMatrix[S]":
        if options:
            raise TypeError(f"DenseMatrix takes no storage options, got {sorted(options)}")
        rows, cols = size.shape()
        data = [generator(Index(row, col)) for row in range(rows) for col in range(cols)]
        return cls(data, size)

    def _like(self, size: Index, generator: Generator) -> "DenseMatrix[S]":
        return type(self)._build(size, generator)

    def size(self) -> Index:
        return self._size

    def _offset(self, index: Index) -> int | None:
        if not (0 <= index.row <= self._size.row and 0 <= index.column <= self._size.column):
            return None
        return index.row * self._cols + index.column

    def value(self, index: Index) -> S | None:
        require_not_none(index, "index")
        offset = self._offset(index)
        if offset is None:
            return None
        return self._data[offset]

    def has_absent(self) -> bool:
        return any(v is None for v in self._data)

    def to_lists(self) -> list[list[S | None]]:
        cols = self._cols
        return [self._data[start:start + cols] for start in range(0, len(self._data), cols)]

    def make_sparse(self, default: Any = None) -> "SparseMatrix[S]":
        """Project every coordinate into sparse storage, dropping ``default`` entries."""
        from .sparse import SparseMatrix

        return SparseMatrix._build(self._size, self.value, default=default)
