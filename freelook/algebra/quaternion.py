"""Quaternions as the intermediate form of rotation matrices.

A quaternion is stored as a scalar part ``s`` and a :class:`Vector3` part
``v``. A rotation of ``θ`` about the unit axis ``a`` is
``(cos(θ/2), sin(θ/2)·a)``. Unit length is not enforced; call
:meth:`Quaternion.normalized` where it matters.
"""

import math
import numbers

from .errors import DegenerateVectorError, DimensionMismatchError
from .utils import clamp, degrees_to_radians, direction_cosine, radians_to_degrees
from .vector import Vector3, as_vector3


class Quaternion:
    """Quaternion ``s + xi + yj + zk``.

    Parameters
    ----------
    s : float
        Scalar (real) part.
    v : Vector3
        Vector (imaginary) part.
    """

    __slots__ = ("s", "v")

    def __init__(self, s, v):
        if not isinstance(v, Vector3):
            raise TypeError(f"Quaternion vector part must be a Vector3, got {type(v).__name__!r}.")
        self.s = float(s)
        self.v = v

    def __repr__(self):
        return f"Quaternion({self.s!r}, {self.v!r})"

    def __str__(self):
        return f"{self.s:.2f} + {self.v.x:.2f}i + {self.v.y:.2f}j + {self.v.z:.2f}k"

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.s == other.s and self.v == other.v

    def __hash__(self):
        return hash((self.s, self.v))

    def __mul__(self, other):
        if not isinstance(other, (Quaternion, numbers.Number)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self.multiply(other)

    def __add__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.add(other)

    @property
    def components(self):
        """tuple of float: ``(s, x, y, z)``."""
        return (self.s, self.v.x, self.v.y, self.v.z)

    @property
    def length(self):
        """float: Euclidean 4-norm, same as :meth:`norm`."""
        return self.norm()

    def add(self, other):
        return Quaternion(self.s + other.s, self.v.add(other.v))

    def multiply(self, other):
        """Hamilton product with another quaternion, or scale by a number.

        ``s = s1·s2 − v1·v2`` and ``v = s1·v2 + s2·v1 + v1×v2``, with ``self``
        on the left.
        """
        if isinstance(other, Quaternion):
            s = self.s * other.s - self.v.dot(other.v)
            v = other.v.multiply(self.s).add(self.v.multiply(other.s)).add(self.v.cross(other.v))
            return Quaternion(s, v)
        if isinstance(other, numbers.Number):
            return Quaternion(self.s * other, self.v.multiply(other))
        raise TypeError(f"Cannot multiply a quaternion by {type(other).__name__!r}.")

    def norm(self):
        return math.sqrt(sum(c * c for c in self.components))

    def is_unit(self, atol=1e-9):
        """Return True if ``s² + |v|²`` equals one within ``atol``."""
        return math.isclose(self.norm(), 1.0, rel_tol=0.0, abs_tol=atol)

    def normalized(self):
        """Return this quaternion scaled to unit length.

        Raises
        ------
        DegenerateVectorError
            If this is the zero quaternion.
        """
        length = self.length
        if length == 0:
            raise DegenerateVectorError("Cannot normalise the zero quaternion.")
        return self.multiply(1.0 / length)

    def conjugate(self):
        return Quaternion(self.s, self.v.multiply(-1.0))

    def inverse(self):
        """Return ``conjugate() / length²``.

        Raises
        ------
        DegenerateVectorError
            If this is the zero quaternion.
        """
        length = self.length
        if length == 0:
            raise DegenerateVectorError("The zero quaternion has no inverse.")
        return self.conjugate().multiply(1.0 / length ** 2)

    def allclose(self, other, atol=1e-9):
        return math.isclose(self.s, other.s, rel_tol=0.0, abs_tol=atol) and self.v.allclose(other.v, atol=atol)

    def rotate_vector(self, vector):
        """Rotate ``vector`` by this quaternion (``q · v · q⁻¹``).

        Parameters
        ----------
        vector : Vector3
            Vector to rotate.

        Returns
        -------
        Vector3
            The rotated vector.
        """
        return self.multiply(Quaternion.pure(vector)).multiply(self.inverse()).v

    def to_axis_angle(self):
        """Return ``(degrees, axis)`` for the rotation this quaternion encodes.

        The identity rotation returns ``(0.0, Vector3.unit_x())``.
        """
        q = self.normalized()
        if q.s < 0:
            q = q.multiply(-1.0)
        sin_half = math.sqrt(max(0.0, 1.0 - q.s * q.s))
        if sin_half < 1e-12:
            return 0.0, Vector3.unit_x()
        angle = 2.0 * math.acos(clamp(q.s, -1.0, 1.0))
        return radians_to_degrees(angle), q.v.divide(sin_half)

    def to_matrix(self):
        """Expand this quaternion into a 4×4 homogeneous rotation matrix.

        The quaternion is used as given; pass a unit quaternion for a pure
        rotation.

        Returns
        -------
        Matrix
            4×4 rotation matrix acting on column vectors.
        """
        from .matrix import Matrix  # noqa: PLC0415

        q0, q1, q2, q3 = self.components
        return Matrix([
            [1 - 2 * (q2 ** 2 + q3 ** 2), 2 * (q1 * q2 - q0 * q3), 2 * (q0 * q2 + q1 * q3), 0.0],
            [2 * (q1 * q2 + q0 * q3), 1 - 2 * (q1 ** 2 + q3 ** 2), 2 * (q2 * q3 - q0 * q1), 0.0],
            [2 * (q1 * q3 - q0 * q2), 2 * (q0 * q1 + q2 * q3), 1 - 2 * (q1 ** 2 + q2 ** 2), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    # ------------------------------------------------------------------
    # constructors
    # ------------------------------------------------------------------

    @classmethod
    def pure(cls, v):
        """Quaternion with zero scalar part (a vector quaternion)."""
        return cls(0.0, v)

    @classmethod
    def scalar(cls, s):
        """Quaternion with zero vector part (a real quaternion)."""
        return cls(s, Vector3.zero())

    @classmethod
    def identity(cls):
        return cls(1.0, Vector3.zero())

    @classmethod
    def from_rotation(cls, degrees, axis):
        """Build the unit quaternion rotating by ``degrees`` about ``axis``.

        Parameters
        ----------
        degrees : float
            Rotation angle in degrees (right-hand rule).
        axis : Vector3
            Rotation axis. It is normalised through its direction cosines, so
            any non-zero length works.

        Returns
        -------
        Quaternion
            Unit quaternion.

        Raises
        ------
        DegenerateVectorError
            If ``axis`` has zero length.
        """
        axis = as_vector3(axis)
        half = degrees_to_radians(degrees) / 2.0
        sin_half = math.sin(half)
        return cls(
            math.cos(half),
            Vector3(
                sin_half * direction_cosine(axis, Vector3.unit_x()),
                sin_half * direction_cosine(axis, Vector3.unit_y()),
                sin_half * direction_cosine(axis, Vector3.unit_z()),
            ),
        )

    @classmethod
    def from_matrix(cls, matrix):
        """Recover the unit quaternion of a 3×3 or 4×4 rotation matrix.

        Uses the numerically stable branch on the largest diagonal term. The
        result has a non-negative scalar part.

        Parameters
        ----------
        matrix : Matrix
            Rotation matrix; only the upper-left 3×3 block is read.

        Returns
        -------
        Quaternion
        """
        if matrix.rows < 3 or matrix.columns < 3:
            raise DimensionMismatchError(
                f"Need at least a 3x3 matrix, got {matrix.rows}x{matrix.columns}."
            )
        m = matrix.values
        trace = m[0, 0] + m[1, 1] + m[2, 2]
        if trace > 0:
            k = math.sqrt(trace + 1.0) * 2.0
            s, x, y, z = 0.25 * k, (m[2, 1] - m[1, 2]) / k, (m[0, 2] - m[2, 0]) / k, (m[1, 0] - m[0, 1]) / k
        elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
            k = math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2]) * 2.0
            s, x, y, z = (m[2, 1] - m[1, 2]) / k, 0.25 * k, (m[0, 1] + m[1, 0]) / k, (m[0, 2] + m[2, 0]) / k
        elif m[1, 1] > m[2, 2]:
            k = math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2]) * 2.0
            s, x, y, z = (m[0, 2] - m[2, 0]) / k, (m[0, 1] + m[1, 0]) / k, 0.25 * k, (m[1, 2] + m[2, 1]) / k
        else:
            k = math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1]) * 2.0
            s, x, y, z = (m[1, 0] - m[0, 1]) / k, (m[0, 2] + m[2, 0]) / k, (m[1, 2] + m[2, 1]) / k, 0.25 * k
        q = cls(s, Vector3(x, y, z))
        if q.s < 0:
            q = q.multiply(-1.0)
        return q
