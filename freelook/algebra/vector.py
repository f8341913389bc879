"""Fixed-dimension vectors.

Vectors hold an immutable tuple of float components and implement their own
arithmetic; they are not matrices. Use :meth:`Vector.to_matrix` when a
single-column :class:`~freelook.algebra.matrix.Matrix` is needed, and
:meth:`Matrix.multiply` to transform a vector by a matrix.

Every operation returns a new vector. The "constant" constructors
(:meth:`Vector3.zero`, :meth:`Vector3.unit_x`, ...) are class methods that
build a fresh instance on each call.
"""

import math

import numpy as np

from .errors import DegenerateVectorError, DimensionMismatchError
from .utils import Polar


def vector_from(components):
    """Build the most specific vector type (``Vector2``/``3``/``4`` or ``Vector``) for ``components``."""
    components = tuple(components)
    cls = _BY_DIMENSION.get(len(components))
    if cls is None:
        return Vector(components)
    return cls(*components)


class Vector:
    """An n-dimensional real vector.

    Parameters
    ----------
    components : iterable of float
        Vector components, in order.
    """

    __slots__ = ("_components",)
    DIMENSION = None

    def __init__(self, components):
        values = tuple(float(c) for c in components)
        if self.DIMENSION is not None and len(values) != self.DIMENSION:
            raise DimensionMismatchError(
                f"{type(self).__name__} needs {self.DIMENSION} components, got {len(values)}."
            )
        self._components = values

    # ------------------------------------------------------------------
    # container protocol
    # ------------------------------------------------------------------

    @property
    def components(self):
        """tuple of float: the components of this vector."""
        return self._components

    @property
    def dimension(self):
        """int: number of components."""
        return len(self._components)

    def __len__(self):
        return len(self._components)

    def __iter__(self):
        return iter(self._components)

    def __getitem__(self, index):
        return self._components[index]

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._components == other._components

    def __hash__(self):
        return hash(self._components)

    def __repr__(self):
        if self.DIMENSION is None:
            return f"Vector({list(self._components)!r})"
        return f"{type(self).__name__}({', '.join(repr(c) for c in self._components)})"

    def __str__(self):
        return "(" + ", ".join(f"{c:.2f}" for c in self._components) + ")"

    # ------------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------------

    def _check_compatible(self, other, operation):
        if not isinstance(other, Vector):
            raise TypeError(
                f"Cannot {operation} a vector and {type(other).__name__!r}."
            )
        if other.dimension != self.dimension:
            raise DimensionMismatchError(
                f"Cannot {operation} a {self.dimension}-vector and a {other.dimension}-vector."
            )

    @property
    def length(self):
        """float: Euclidean norm."""
        return math.sqrt(sum(c * c for c in self._components))

    def dot(self, other):
        """Return the dot product of this vector and ``other``.

        Raises
        ------
        DimensionMismatchError
            If the vectors have different dimensions.
        """
        self._check_compatible(other, "dot")
        return sum(a * b for a, b in zip(self._components, other._components))

    def add(self, other):
        """Elementwise sum with another vector of the same dimension."""
        self._check_compatible(other, "add")
        return vector_from(a + b for a, b in zip(self._components, other._components))

    def subtract(self, other):
        """Elementwise difference with another vector of the same dimension."""
        self._check_compatible(other, "subtract")
        return vector_from(a - b for a, b in zip(self._components, other._components))

    def multiply(self, scalar):
        """Scale every component by ``scalar``."""
        return vector_from(c * scalar for c in self._components)

    def divide(self, scalar):
        """Divide every component by ``scalar``."""
        return vector_from(c / scalar for c in self._components)

    def normalised(self):
        """Return the unit vector pointing in the same direction.

        Raises
        ------
        DegenerateVectorError
            If this vector has zero length.
        """
        length = self.length
        if length == 0:
            raise DegenerateVectorError(f"Cannot normalise zero-length vector {self!r}.")
        return self.divide(length)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar):
        if isinstance(scalar, Vector):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return self.divide(scalar)

    def __neg__(self):
        return self.multiply(-1.0)

    # ------------------------------------------------------------------
    # conversion
    # ------------------------------------------------------------------

    def allclose(self, other, atol=1e-9):
        """Return True if ``other`` has the same dimension and all components within ``atol``."""
        if not isinstance(other, Vector) or other.dimension != self.dimension:
            return False
        return all(
            math.isclose(a, b, rel_tol=0.0, abs_tol=atol)
            for a, b in zip(self._components, other._components)
        )

    def to_array(self):
        """Return the components as a 1-D float64 numpy array."""
        return np.array(self._components, dtype=np.float64)

    def to_matrix(self):
        """Return this vector as a single-column :class:`~freelook.algebra.matrix.Matrix`."""
        from .matrix import Matrix  # noqa: PLC0415

        return Matrix([[c] for c in self._components])


class Vector2(Vector):
    """A 2-component vector with ``x`` and ``y`` accessors."""

    __slots__ = ()
    DIMENSION = 2

    def __init__(self, x, y):
        super().__init__((x, y))

    @property
    def x(self):
        return self._components[0]

    @property
    def y(self):
        return self._components[1]

    def to_polar(self):
        """Return this point in polar form as a :class:`~freelook.algebra.utils.Polar`."""
        return Polar(self.length, math.atan2(self.y, self.x))

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)

    @classmethod
    def one(cls):
        return cls(1.0, 1.0)

    @classmethod
    def unit_x(cls):
        return cls(1.0, 0.0)

    @classmethod
    def unit_y(cls):
        return cls(0.0, 1.0)


class Vector3(Vector):
    """A 3-component vector with ``x``, ``y`` and ``z`` accessors."""

    __slots__ = ()
    DIMENSION = 3

    def __init__(self, x, y, z):
        super().__init__((x, y, z))

    @property
    def x(self):
        return self._components[0]

    @property
    def y(self):
        return self._components[1]

    @property
    def z(self):
        return self._components[2]

    def cross(self, other):
        """Return the right-handed cross product ``self × other``.

        Raises
        ------
        DimensionMismatchError
            If ``other`` is not a 3-vector.
        """
        self._check_compatible(other, "cross")
        ax, ay, az = self._components
        bx, by, bz = other._components
        return Vector3(
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        )

    def to_homogeneous(self, w=1.0):
        """Return ``(x, y, z, w)``; use ``w=0`` for directions and ``w=1`` for points."""
        return Vector4(self.x, self.y, self.z, w)

    def rotate(self, degrees, axis):
        """Rotate this vector by ``degrees`` about ``axis`` (right-hand rule).

        Parameters
        ----------
        degrees : float
            Rotation angle in degrees.
        axis : Vector3
            Rotation axis; need not be normalised but must be non-zero.

        Returns
        -------
        Vector3
            The rotated vector.
        """
        from .matrix import Matrix  # noqa: PLC0415

        return Matrix.rotate(degrees, axis).multiply(self.to_homogeneous(0.0)).xyz

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls):
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def unit_x(cls):
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls):
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls):
        return cls(0.0, 0.0, 1.0)


class Vector4(Vector):
    """A 4-component (homogeneous) vector with ``x``, ``y``, ``z`` and ``w`` accessors."""

    __slots__ = ()
    DIMENSION = 4

    def __init__(self, x, y, z, w):
        super().__init__((x, y, z, w))

    @property
    def x(self):
        return self._components[0]

    @property
    def y(self):
        return self._components[1]

    @property
    def z(self):
        return self._components[2]

    @property
    def w(self):
        return self._components[3]

    @property
    def xyz(self):
        """Vector3: the first three components (``w`` dropped, no division)."""
        return Vector3(self.x, self.y, self.z)

    def rotate(self, degrees, axis):
        """Rotate the ``xyz`` part by ``degrees`` about ``axis``; ``w`` is preserved."""
        from .matrix import Matrix  # noqa: PLC0415

        return Matrix.rotate(degrees, axis).multiply(self)

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def one(cls):
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def unit_x(cls):
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls):
        return cls(0.0, 1.0, 0.0, 0.0)

    @classmethod
    def unit_z(cls):
        return cls(0.0, 0.0, 1.0, 0.0)

    @classmethod
    def unit_w(cls):
        return cls(0.0, 0.0, 0.0, 1.0)


_BY_DIMENSION = {2: Vector2, 3: Vector3, 4: Vector4}


def as_vector3(value):
    """Coerce ``value`` to a :class:`Vector3`.

    Parameters
    ----------
    value : Vector or sequence of float or numpy.ndarray
        Any 3-component vector-like.

    Returns
    -------
    Vector3
        ``value`` itself when it already is a ``Vector3``.

    Raises
    ------
    TypeError
        If ``value`` is not a vector or iterable of numbers.
    ValueError
        If ``value`` does not have exactly three components.
    """
    if isinstance(value, Vector3):
        return value
    if isinstance(value, (Vector, np.ndarray, tuple, list)):
        values = np.asarray(list(value) if isinstance(value, Vector) else value, dtype=np.float64)
    else:
        raise TypeError(
            f"Expected a Vector3 or a sequence of three numbers, got {type(value).__name__!r}."
        )
    if values.shape != (3,):
        raise ValueError(f"Expected three components, got shape {values.shape}.")
    return Vector3(*values.tolist())
