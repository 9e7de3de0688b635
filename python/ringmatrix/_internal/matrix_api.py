from __future__ import annotations

import abc
import warnings
from typing import Any, Callable, Generic, Iterator, TypeVar

from . import formatting as _formatting
from .config import get_config
from .coercion import coerce_rows
from .errors import (
    LengthCause,
    require_diagonal,
    require_dimension,
    require_matching_size,
    require_non_empty,
    require_not_none,
)
from .index import Index
from .ring import Ring
from .warnings import RingMatrixAbsentValueWarning, RingMatrixPerformanceWarning


S = TypeVar("S")

Generator = Callable[[Index], Any]

MatrixMixin = _formatting.MatrixMixin


def _warn_if_absent(op: str, *operands: "MatrixBase") -> None:
    if not get_config().warn_on_absent:
        return
    if any(m.has_absent() for m in operands):
        warnings.warn(
            f"{op}: operand has unset coordinates; the ring will receive None operands",
            RingMatrixAbsentValueWarning,
            stacklevel=3,
        )


def _warn_if_large_product(dimension: int) -> None:
    threshold = get_config().product_warn_dimension
    if threshold and dimension > threshold:
        warnings.warn(
            f"times: {dimension}x{dimension} product performs {dimension ** 3} ring products",
            RingMatrixPerformanceWarning,
            stacklevel=3,
        )


class MatrixBase(MatrixMixin, Generic[S], metaclass=abc.ABCMeta):
    """Operations shared by every storage strategy.

    Construction protocols are classmethods: ``DenseMatrix.constant(...)``
    builds dense storage, ``SparseMatrix.constant(...)`` builds sparse
    storage. Strategy options (such as the sparse ``default``) are passed as
    keyword arguments and forwarded to ``_build``.

    Matrices are immutable; ``plus`` and ``times`` return new instances of the
    receiver's storage strategy.
    """

    __slots__ = ()

    # --- storage hooks ---

    @classmethod
    @abc.abstractmethod
    def _build(cls, size: Index, generator: Generator, **options: Any) -> "MatrixBase[S]":
        """Populate a new matrix by calling ``generator`` once per coordinate, row-major."""

    @abc.abstractmethod
    def _like(self, size: Index, generator: Generator) -> "MatrixBase[S]":
        """Build a matrix with this instance's storage strategy and options."""

    @abc.abstractmethod
    def size(self) -> Index:
        ...

    @abc.abstractmethod
    def value(self, index: Index) -> S | None:
        ...

    @abc.abstractmethod
    def has_absent(self) -> bool:
        """True if some in-range coordinate resolves to None."""

    # --- construction protocols ---

    @classmethod
    def instance(cls, rows: int, columns: int, generator: Generator, **options: Any) -> "MatrixBase[S]":
        require_dimension(rows, "rows")
        require_dimension(columns, "columns")
        require_non_empty(LengthCause.ROW, rows)
        require_non_empty(LengthCause.COLUMN, columns)
        require_not_none(generator, "generator")
        return cls._build(Index.for_shape(rows, columns), generator, **options)

    @classmethod
    def of_size(cls, size: Index, generator: Generator, **options: Any) -> "MatrixBase[S]":
        require_not_none(size, "size")
        require_not_none(generator, "generator")
        return cls.instance(size.row + 1, size.column + 1, generator, **options)

    @classmethod
    def constant(cls, size: int, value: S, **options: Any) -> "MatrixBase[S]":
        require_dimension(size, "size")
        require_non_empty(LengthCause.ROW, size)
        require_not_none(value, "value")
        return cls._build(Index.for_shape(size, size), lambda _index: value, **options)

    @classmethod
    def identity(cls, size: int, zero: S, identity: S, **options: Any) -> "MatrixBase[S]":
        require_dimension(size, "size")
        require_non_empty(LengthCause.ROW, size)
        return cls._build(
            Index.for_shape(size, size),
            lambda index: identity if index.are_diagonal() else zero,
            **options,
        )

    @classmethod
    def from_array(cls, data: Any, **options: Any) -> "MatrixBase[S]":
        """Build from a 2D literal (nested sequences or a NumPy array).

        The column count is the length of the first row. Shorter rows leave
        their trailing coordinates unset; extra entries in longer rows are
        ignored.
        """

        require_not_none(data, "data")
        rows = coerce_rows(data)
        n_rows = len(rows)
        n_cols = len(rows[0]) if n_rows > 0 else 0
        require_non_empty(LengthCause.ROW, n_rows)
        require_non_empty(LengthCause.COLUMN, n_cols)

        def _lookup(index: Index) -> Any:
            row = rows[index.row]
            return row[index.column] if index.column < len(row) else None

        return cls._build(Index.for_shape(n_rows, n_cols), _lookup, **options)

    # --- accessors ---

    def rows(self) -> int:
        return self.size().row + 1

    def cols(self) -> int:
        return self.size().column + 1

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows(), self.cols())

    def value_at(self, row: int, column: int) -> S | None:
        """Look up by plain coordinates. Negative arguments are clamped to 0."""
        if row < 0:
            row = 0
        if column < 0:
            column = 0
        return self.value(Index(row, column))

    def value_in(self, matrix: "MatrixBase[S]", index: Index) -> S | None:
        require_not_none(index, "index")
        require_not_none(matrix, "matrix")
        return matrix.value(index)

    def __getitem__(self, key: Any) -> S | None:
        if isinstance(key, Index):
            return self.value(key)
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be provided as [row, col] or an Index")
        i, j = key
        return self.value_at(int(i), int(j))

    def coordinates(self) -> Iterator[Index]:
        size = self.size()
        for row in range(size.row + 1):
            for col in range(size.column + 1):
                yield Index(row, col)

    def to_lists(self) -> list[list[S | None]]:
        rows, cols = self.shape
        return [[self.value(Index(i, j)) for j in range(cols)] for i in range(rows)]

    # --- arithmetic ---

    def plus(self, other: "MatrixBase[S]", ring: Ring[S]) -> "MatrixBase[S]":
        require_not_none(other, "other")
        require_not_none(ring, "ring")
        size = require_matching_size(self, other)
        _warn_if_absent("plus", self, other)

        def _entry(index: Index) -> S:
            return ring.sum(self.value(index), other.value(index))

        return self._like(size, _entry)

    def times(self, other: "MatrixBase[S]", ring: Ring[S]) -> "MatrixBase[S]":
        """Ring product of two square matrices of the same dimension.

        Rectangular operands are rejected even when their inner dimensions
        agree; only equal-size square products are supported.
        """

        require_not_none(other, "other")
        require_not_none(ring, "ring")
        size = require_matching_size(self, other)
        require_diagonal(size)

        n = size.column + 1
        _warn_if_large_product(n)
        _warn_if_absent("times", self, other)

        def _entry(index: Index) -> S:
            acc = ring.zero()
            for k in range(n):
                product = ring.product(self.value(Index(index.row, k)), other.value(Index(k, index.column)))
                acc = ring.sum(acc, product)
            return acc

        return self._like(size, _entry)
