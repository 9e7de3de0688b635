"""
Sparse storage: only coordinates whose value differs from ``default`` are kept.

Retention policy
----------------
The builder scans every coordinate of the requested shape in row-major order
and calls the value function once per coordinate. An entry is omitted iff it
is ``default`` (identity) or compares equal to it. ``default`` is chosen per
matrix and is None unless given, so by default absent entries are the ones
dropped.

When ``default`` is not None, None entries are kept explicitly. Projecting a
dense matrix therefore never changes what any in-range coordinate resolves to.

Lookups
-------
- in range and stored: the stored value
- in range, not stored: ``default``
- out of range: None
"""

from __future__ import annotations

from typing import Any, Iterator

from .errors import require_not_none
from .index import Index
from .matrix_api import Generator, MatrixBase, S


def _is_default(value: Any, default: Any) -> bool:
    if value is default:
        return True
    if value is None or default is None:
        return False
    return bool(value == default)


def create_sparse_entries(
    rows: int,
    columns: int,
    value_fn: Generator,
    default: Any = None,
) -> dict[Index, Any]:
    entries: dict[Index, Any] = {}
    for row in range(rows):
        for col in range(columns):
            index = Index(row, col)
            value = value_fn(index)
            if not _is_default(value, default):
                entries[index] = value
    return entries


class SparseMatrix(MatrixBase[S]):
    __slots__ = ("_entries", "_size", "_default")

    def __init__(self, entries: dict[Index, Any], size: Index, default: Any = None):
        self._entries = dict(entries)
        self._size = size
        self._default = default

    @classmethod
    def _build(cls, size: Index, generator: Generator, **options: Any) -> "SparseMatrix[S]":
        default = options.pop("default", None)
        if options:
            raise TypeError(f"SparseMatrix got unexpected storage options {sorted(options)}")
        rows, cols = size.shape()
        return cls(create_sparse_entries(rows, cols, generator, default), size, default)

    def _like(self, size: Index, generator: Generator) -> "SparseMatrix[S]":
        return type(self)._build(size, generator, default=self._default)

    @property
    def default(self) -> Any:
        return self._default

    def size(self) -> Index:
        return self._size

    def _in_range(self, index: Index) -> bool:
        return 0 <= index.row <= self._size.row and 0 <= index.column <= self._size.column

    def value(self, index: Index) -> S | None:
        require_not_none(index, "index")
        if not self._in_range(index):
            return None
        return self._entries.get(index, self._default)

    def stored_count(self) -> int:
        return len(self._entries)

    def entries(self) -> Iterator[tuple[Index, S]]:
        """Stored (index, value) pairs in row-major order."""
        for index in sorted(self._entries, key=lambda i: (i.row, i.column)):
            yield index, self._entries[index]

    def has_absent(self) -> bool:
        rows, cols = self.shape
        if self._default is None and len(self._entries) < rows * cols:
            return True
        return any(v is None for v in self._entries.values())

    def _repr_info(self) -> list[tuple[str, Any]]:
        return [("default", self._default), ("stored", len(self._entries))]
