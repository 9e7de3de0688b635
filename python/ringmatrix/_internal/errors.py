"""Error taxonomy for ringmatrix.

Every validation failure raises :class:`MatrixError`. Callers branch on
``error.kind`` (and on ``error.cause`` for length failures) instead of on
exception subclasses. The payload attributes that do not apply to a kind are
left as ``None``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .index import Index


class MatrixErrorKind(Enum):
    INVALID_LENGTH = "invalid_length"
    INCONSISTENT_SIZE = "inconsistent_size"
    NON_SQUARE = "non_square"
    NULL_ARGUMENT = "null_argument"


class LengthCause(Enum):
    ROW = "ROW"
    COLUMN = "COLUMN"


_ERROR_MESSAGES = {
    MatrixErrorKind.INVALID_LENGTH: "Length is invalid",
    MatrixErrorKind.INCONSISTENT_SIZE: "Matrix sizes do not match",
    MatrixErrorKind.NON_SQUARE: "Matrix is not square",
    MatrixErrorKind.NULL_ARGUMENT: "Required argument is missing",
}


class MatrixError(ValueError):
    """Single exception type for all matrix validation failures.

    Attributes:
        kind: Which condition failed.
        cause: ``LengthCause`` for ``INVALID_LENGTH``.
        length: Offending length for ``INVALID_LENGTH``.
        this_size, other_size: Operand sizes for ``INCONSISTENT_SIZE``.
        size: Offending size for ``NON_SQUARE``.
        argument: Parameter name for ``NULL_ARGUMENT``.
    """

    def __init__(
        self,
        kind: MatrixErrorKind,
        message: str | None = None,
        *,
        cause: LengthCause | None = None,
        length: int | None = None,
        this_size: "Index | None" = None,
        other_size: "Index | None" = None,
        size: "Index | None" = None,
        argument: str | None = None,
    ) -> None:
        self.kind = kind
        self.cause = cause
        self.length = length
        self.this_size = this_size
        self.other_size = other_size
        self.size = size
        self.argument = argument
        if message is None:
            message = _ERROR_MESSAGES[kind]
        self.message = message
        super().__init__(message)

    @classmethod
    def invalid_length(cls, cause: LengthCause, length: int) -> "MatrixError":
        return cls(
            MatrixErrorKind.INVALID_LENGTH,
            f"Invalid length for {cause.value}: {length}",
            cause=cause,
            length=length,
        )

    @classmethod
    def inconsistent_size(cls, this_size: "Index", other_size: "Index") -> "MatrixError":
        return cls(
            MatrixErrorKind.INCONSISTENT_SIZE,
            f"Matrix sizes do not match: {this_size!r} vs {other_size!r}",
            this_size=this_size,
            other_size=other_size,
        )

    @classmethod
    def non_square(cls, size: "Index") -> "MatrixError":
        return cls(
            MatrixErrorKind.NON_SQUARE,
            f"Matrix is not square: {size!r}",
            size=size,
        )

    @classmethod
    def null_argument(cls, argument: str) -> "MatrixError":
        return cls(
            MatrixErrorKind.NULL_ARGUMENT,
            f"Argument '{argument}' must not be None",
            argument=argument,
        )


# =============================================================================
# Validation helpers
# =============================================================================


def require_non_empty(cause: LengthCause, length: int) -> int:
    if length <= 0:
        raise MatrixError.invalid_length(cause, length)
    return length


def require_matching_size(this_matrix: Any, other_matrix: Any) -> "Index":
    this_size = this_matrix.size()
    other_size = other_matrix.size()
    if this_size != other_size:
        raise MatrixError.inconsistent_size(this_size, other_size)
    return this_size


def require_diagonal(size: "Index") -> "Index":
    if not size.are_diagonal():
        raise MatrixError.non_square(size)
    return size


def require_not_none(value: Any, argument: str) -> Any:
    if value is None:
        raise MatrixError.null_argument(argument)
    return value


def require_dimension(value: Any, argument: str) -> int:
    # bool is an int subclass but never a sensible dimension
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{argument} must be an integer, got {type(value).__name__}")
    return value
