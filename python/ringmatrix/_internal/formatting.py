from __future__ import annotations

from typing import Any

from .config import get_config


def _edge_indices(length: int, edge_items: int) -> tuple[list[int], list[int], bool]:
    if length <= edge_items * 2:
        return list(range(length)), [], False
    head = list(range(edge_items))
    tail = list(range(length - edge_items, length))
    return head, tail, True


def _render_value(value: Any) -> str:
    return "" if value is None else str(value)


def _preview_value(value: Any) -> str:
    if value is None:
        return "."
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def render(matrix: Any) -> str:
    """Tab-terminated rendering: every value is followed by a tab, every row
    by a newline. Absent entries render as an empty string.

    Intended for diagnostics; it is not a parseable storage format.
    """

    rows, cols = matrix.shape
    lines: list[str] = []
    for row in range(rows):
        for col in range(cols):
            lines.append(_render_value(matrix.value_at(row, col)))
            lines.append("\t")
        lines.append("\n")
    return "".join(lines)


def _preview_row(
    matrix: Any,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries: list[str] = [_preview_value(matrix.value_at(row_index, col)) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(_preview_value(matrix.value_at(row_index, col)) for col in col_tail)
    return " ".join(entries)


def matrix_repr(matrix: Any) -> str:
    rows, cols = matrix.shape
    info = [f"shape=({rows}, {cols})"]
    info.extend(f"{key}={value!r}" for key, value in matrix._repr_info())

    header = f"{matrix.__class__.__name__}({', '.join(info)})"

    edge_items = get_config().edge_items
    row_head, row_tail, rows_truncated = _edge_indices(rows, edge_items)
    col_head, col_tail, cols_truncated = _edge_indices(cols, edge_items)

    lines = [header, "["]
    for row_index in row_head:
        lines.append(f" [{_preview_row(matrix, row_index, col_head, col_tail, cols_truncated)}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        lines.append(f" [{_preview_row(matrix, row_index, col_head, col_tail, cols_truncated)}]")
    lines.append("]")
    return "\n".join(lines)


class MatrixMixin:
    __slots__ = ()

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return matrix_repr(self)

    def _repr_info(self) -> list[tuple[str, Any]]:
        return []
