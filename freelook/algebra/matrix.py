"""Immutable rectangular matrices and homogeneous 4×4 transform factories.

Matrices act on column vectors: ``M @ v``. Values are kept in a read-only
float64 numpy array, so no operation can mutate a matrix in place; every
product or sum returns a new :class:`Matrix`.

:meth:`Matrix.to_array` linearises column-major (column by column), which is
the layout ``glUniformMatrix4fv`` expects with ``transpose=GL_FALSE``.
"""

import numbers

import numpy as np
import pyrr

from .errors import DimensionMismatchError, MalformedMatrixError
from .quaternion import Quaternion
from .vector import Vector, as_vector3, vector_from


class Matrix:
    """A real ``rows × columns`` matrix.

    Parameters
    ----------
    values : sequence of sequences of float or numpy.ndarray or Matrix
        Row-major grid. All rows must have the same length.

    Raises
    ------
    MalformedMatrixError
        If ``values`` is ragged or not two-dimensional.
    """

    __slots__ = ("_values",)

    def __init__(self, values):
        if isinstance(values, Matrix):
            array = values._values
        elif isinstance(values, np.ndarray):
            if values.ndim != 2:
                raise MalformedMatrixError(
                    f"Matrix values must be two-dimensional, got shape {values.shape}."
                )
            array = values.astype(np.float64, copy=True)
        else:
            try:
                rows = [list(row) for row in values]
            except TypeError as exc:
                raise MalformedMatrixError("Matrix values must be a sequence of rows.") from exc
            columns = len(rows[0]) if rows else 0
            if any(len(row) != columns for row in rows):
                raise MalformedMatrixError(
                    f"Matrix values must be a rectangular array, got row lengths "
                    f"{[len(row) for row in rows]}."
                )
            array = np.array(rows, dtype=np.float64).reshape(len(rows), columns)
        array.flags.writeable = False
        self._values = array

    # ------------------------------------------------------------------
    # shape and access
    # ------------------------------------------------------------------

    @property
    def rows(self):
        return self._values.shape[0]

    @property
    def columns(self):
        return self._values.shape[1]

    @property
    def shape(self):
        """tuple of int: ``(rows, columns)``."""
        return self._values.shape

    @property
    def values(self):
        """numpy.ndarray: read-only ``rows × columns`` float64 view of the data."""
        return self._values

    def __getitem__(self, index):
        """Return the element at ``(row, column)``, or row ``index`` as a vector."""
        if isinstance(index, numbers.Integral):
            return self.get_row_vector(index)
        return float(self._values[index])

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._values, other._values))

    def __hash__(self):
        return hash((self.shape, self._values.tobytes()))

    def __repr__(self):
        return f"Matrix({self.to_list()!r})"

    def __str__(self):
        cells = [[f"{value:.1f}" for value in row] for row in self._values]
        if not cells or not cells[0]:
            return ""
        padding = max(len(cell) for row in cells for cell in row)
        return "\n".join(" ".join(cell.rjust(padding) for cell in row) for row in cells)

    def get_row_vector(self, index):
        """Return row ``index`` as a new vector."""
        return vector_from(self._values[index].tolist())

    def get_column_vector(self, index):
        """Return column ``index`` as a new vector."""
        return vector_from(self._values[:, index].tolist())

    def to_list(self):
        """Return the values as a nested (row-major) list."""
        return self._values.tolist()

    def to_array(self):
        """Return the values as a 1-D float64 array in column-major order.

        Returns
        -------
        numpy.ndarray
            ``rows * columns`` values; column 0 first, then column 1, ...
        """
        return self._values.flatten(order="F")

    def transpose(self):
        return Matrix(self._values.T)

    def allclose(self, other, atol=1e-9):
        """Return True if ``other`` has the same shape and all values within ``atol``."""
        other = other if isinstance(other, Matrix) else Matrix(other)
        return self.shape == other.shape and bool(np.allclose(self._values, other._values, rtol=0.0, atol=atol))

    # ------------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------------

    def multiply(self, other):
        """Multiply by a scalar, a matrix or a vector.

        With a matrix or vector, ``self`` is on the left.

        Parameters
        ----------
        other : float or Matrix or Vector
            A vector is treated as a single column.

        Returns
        -------
        Matrix or Vector
            A vector when ``other`` is a vector, otherwise a matrix of shape
            ``self.rows × other.columns``.

        Raises
        ------
        DimensionMismatchError
            If ``self.columns`` differs from the number of rows of ``other``.
        """
        if isinstance(other, Vector):
            if self.columns != other.dimension:
                raise DimensionMismatchError(
                    f"Cannot multiply a {self.rows}x{self.columns} matrix by a {other.dimension}-vector."
                )
            return vector_from((self._values @ other.to_array()).tolist())
        if isinstance(other, Matrix):
            if self.columns != other.rows:
                raise DimensionMismatchError(
                    f"Cannot multiply a {self.rows}x{self.columns} matrix by a "
                    f"{other.rows}x{other.columns} matrix."
                )
            return Matrix(self._values @ other._values)
        if isinstance(other, numbers.Number):
            return Matrix(self._values * other)
        raise TypeError(f"Cannot multiply a matrix by {type(other).__name__!r}.")

    def add(self, other):
        """Add a scalar to every element, or add a matrix of the same shape.

        Raises
        ------
        DimensionMismatchError
            If ``other`` is a matrix with a different shape.
        """
        if isinstance(other, Matrix):
            if self.shape != other.shape:
                raise DimensionMismatchError(
                    f"Cannot add a {self.rows}x{self.columns} matrix to a "
                    f"{other.rows}x{other.columns} matrix."
                )
            return Matrix(self._values + other._values)
        if isinstance(other, numbers.Number):
            return Matrix(self._values + other)
        raise TypeError(f"Cannot add {type(other).__name__!r} to a matrix.")

    def __matmul__(self, other):
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __add__(self, other):
        if not isinstance(other, (Matrix, numbers.Number)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, (Matrix, numbers.Number)):
            return NotImplemented
        return self.add(other * -1)

    def __neg__(self):
        return self.multiply(-1.0)

    # ------------------------------------------------------------------
    # factories
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls, size):
        """Create a ``size × size`` identity matrix."""
        return cls(np.eye(size, dtype=np.float64))

    @classmethod
    def scale(cls, x, y, z):
        """Create a homogeneous 4×4 scaling matrix."""
        return cls([
            [x, 0, 0, 0],
            [0, y, 0, 0],
            [0, 0, z, 0],
            [0, 0, 0, 1],
        ])

    @classmethod
    def translate(cls, x, y, z):
        """Create a homogeneous 4×4 translation matrix."""
        return cls([
            [1, 0, 0, x],
            [0, 1, 0, y],
            [0, 0, 1, z],
            [0, 0, 0, 1],
        ])

    @classmethod
    def rotate(cls, degrees, axis):
        """Create a homogeneous 4×4 rotation of ``degrees`` about ``axis``.

        The matrix is the expansion of
        :meth:`Quaternion.from_rotation(degrees, axis) <freelook.algebra.quaternion.Quaternion.from_rotation>`.

        Parameters
        ----------
        degrees : float
            Angle in degrees, counter-clockwise when looking down ``axis``
            towards the origin.
        axis : Vector3 or sequence of float
            Non-zero rotation axis.

        Returns
        -------
        Matrix
            4×4 rotation matrix.

        Raises
        ------
        DegenerateVectorError
            If ``axis`` has zero length.
        """
        return Quaternion.from_rotation(degrees, axis).to_matrix()

    @classmethod
    def perspective(cls, fov, aspect, near, far):
        """Create an OpenGL-style perspective projection matrix.

        Parameters
        ----------
        fov : float
            Vertical field of view in degrees, in ``(0, 180)``.
        aspect : float
            Viewport width divided by height; positive.
        near, far : float
            Clipping planes, ``0 < near < far``.

        Returns
        -------
        Matrix
            4×4 projection matrix acting on column vectors.

        Raises
        ------
        ValueError
            If any parameter is out of range.
        """
        if not 0 < fov < 180:
            raise ValueError(f"fov must be in (0, 180) degrees, got {fov}.")
        if aspect <= 0:
            raise ValueError(f"aspect must be positive, got {aspect}.")
        if not 0 < near < far:
            raise ValueError(f"Clipping planes must satisfy 0 < near < far, got near={near}, far={far}.")
        # pyrr builds matrices for row vectors
        projection = pyrr.matrix44.create_perspective_projection(fov, aspect, near, far, dtype=np.float64)
        return cls(np.asarray(projection).T)

    @classmethod
    def view(cls, position, u, v, n):
        """Create the world-to-view matrix of a camera with basis ``u, v, n``.

        Parameters
        ----------
        position : Vector3
            Camera position in world space.
        u, v, n : Vector3
            Orthonormal right, up and forward axes.

        Returns
        -------
        Matrix
            4×4 matrix whose rows are ``u``, ``v``, ``n`` with translation
            ``(-p·u, -p·v, -p·n)``.
        """
        position, u, v, n = (as_vector3(vec) for vec in (position, u, v, n))
        return cls([
            [u.x, u.y, u.z, -position.dot(u)],
            [v.x, v.y, v.z, -position.dot(v)],
            [n.x, n.y, n.z, -position.dot(n)],
            [0, 0, 0, 1],
        ])
