"""Scalar helpers shared by the matrix, vector and quaternion modules."""

import math

from .errors import DegenerateVectorError


def degrees_to_radians(degrees):
    """Convert an angle from degrees to radians."""
    return (degrees / 180.0) * math.pi


def radians_to_degrees(radians):
    """Convert an angle from radians to degrees."""
    return (radians / math.pi) * 180.0


def clamp(value, lower, upper):
    """Clamp ``value`` to the closed interval ``[lower, upper]``."""
    return max(lower, min(upper, value))


def direction_cosine(axis, unit_vector):
    """Return the cosine of the angle between ``axis`` and ``unit_vector``.

    Parameters
    ----------
    axis : Vector
        Arbitrary (not necessarily normalised) direction.
    unit_vector : Vector
        Unit basis vector of the same dimension as ``axis``.

    Returns
    -------
    float
        ``axis · unit_vector / |axis|``.

    Raises
    ------
    DegenerateVectorError
        If ``axis`` has zero length.
    """
    length = axis.length
    if length == 0:
        raise DegenerateVectorError("Cannot compute a direction cosine for a zero-length axis.")
    return axis.dot(unit_vector) / length


def multiply_matrices(matrices):
    """Multiply two or more matrices in the order given.

    Parameters
    ----------
    matrices : sequence of Matrix
        Factors, leftmost first.

    Returns
    -------
    Matrix
        ``matrices[0] @ matrices[1] @ ... @ matrices[-1]``.

    Raises
    ------
    ValueError
        If fewer than two matrices are given.
    """
    matrices = list(matrices)
    if len(matrices) < 2:
        raise ValueError("Multiplication requires at least two matrices.")
    result = matrices[0]
    for matrix in matrices[1:]:
        result = result.multiply(matrix)
    return result


class Polar:
    """A 2-D point in polar form.

    Parameters
    ----------
    r : float
        Distance from the origin.
    theta : float
        Angle from the positive x axis, in radians.
    """

    __slots__ = ("r", "theta")

    def __init__(self, r, theta):
        self.r = float(r)
        self.theta = float(theta)

    def __repr__(self):
        return f"Polar(r={self.r!r}, theta={self.theta!r})"

    def __str__(self):
        return f"{self.r:.1f} {radians_to_degrees(self.theta):.1f}\N{DEGREE SIGN}"

    def to_cartesian(self):
        """Return this point as a :class:`~freelook.algebra.vector.Vector2`."""
        from .vector import Vector2  # noqa: PLC0415

        return Vector2(math.cos(self.theta) * self.r, math.sin(self.theta) * self.r)
