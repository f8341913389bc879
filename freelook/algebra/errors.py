"""Exceptions raised by the algebra subpackage.

All of them derive from :class:`AlgebraError`, which is a :class:`ValueError`
so callers that already guard numeric input with ``except ValueError`` keep
working.
"""


class AlgebraError(ValueError):
    """Base class for matrix, vector and quaternion errors."""


class DimensionMismatchError(AlgebraError):
    """Operands have incompatible shapes (e.g. a 3-vector dotted with a 4-vector)."""


class DegenerateVectorError(AlgebraError):
    """A zero-length vector or quaternion was normalised, inverted or used as an axis."""


class MalformedMatrixError(AlgebraError):
    """A matrix was constructed from a grid that is not rectangular."""
