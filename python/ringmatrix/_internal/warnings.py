"""ringmatrix warning categories.

These exist so users can filter/suppress ringmatrix warnings without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class RingMatrixWarning(UserWarning):
    """Base warning category for all ringmatrix user-facing warnings."""


class RingMatrixAbsentValueWarning(RingMatrixWarning):
    """An operand has unset coordinates that will reach the ring as None."""


class RingMatrixPerformanceWarning(RingMatrixWarning):
    """Warnings about likely performance pitfalls (e.g., large cubic products)."""
