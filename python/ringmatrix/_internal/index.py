from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Index:
    """A (row, column) coordinate pair.

    The same type doubles as a size descriptor: a matrix of ``r`` rows and
    ``c`` columns reports its size as ``Index(r - 1, c - 1)``, the largest
    coordinate it holds. No range checks happen here.
    """

    row: int
    column: int

    @classmethod
    def for_shape(cls, rows: int, columns: int) -> "Index":
        return cls(rows - 1, columns - 1)

    def are_diagonal(self) -> bool:
        return self.row == self.column

    def shape(self) -> tuple[int, int]:
        """Interpret this index as a size descriptor and return (rows, cols)."""
        return (self.row + 1, self.column + 1)

    def __repr__(self) -> str:
        return f"Index({self.row}, {self.column})"
