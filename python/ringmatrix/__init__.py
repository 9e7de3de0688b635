"""Generic matrices whose arithmetic is supplied by a caller-provided Ring."""
from __future__ import annotations

from ._version import version as __version__

from ._internal import interop as _interop
from ._internal.config import Config, configure, get_config, reset_config
from ._internal.dense import DenseMatrix
from ._internal.errors import LengthCause, MatrixError, MatrixErrorKind
from ._internal.factories import (
    constant,
    from_array,
    identity,
    instance,
    matrix,
    of_size,
)
from ._internal.formatting import render
from ._internal.index import Index
from ._internal.interop import to_numpy
from ._internal.matrix_api import MatrixBase
from ._internal.ring import Ring
from ._internal.sparse import SparseMatrix
from ._internal.warnings import (
    RingMatrixAbsentValueWarning,
    RingMatrixPerformanceWarning,
    RingMatrixWarning,
)

_interop.patch_interop(MatrixBase)

__all__ = [
    "__version__",
    # Core types
    "Index",
    "Ring",
    "MatrixBase",
    "DenseMatrix",
    "SparseMatrix",
    # Errors
    "MatrixError",
    "MatrixErrorKind",
    "LengthCause",
    # Warnings
    "RingMatrixWarning",
    "RingMatrixAbsentValueWarning",
    "RingMatrixPerformanceWarning",
    # Configuration
    "Config",
    "configure",
    "get_config",
    "reset_config",
    # Factories
    "instance",
    "of_size",
    "constant",
    "identity",
    "from_array",
    "matrix",
    # Rendering / interop
    "render",
    "to_numpy",
]
