"""Model and projection transforms.

Model matrices are composed from a translation, three single-axis rotations
and a scale. The composition order is an explicit parameter; the default,
:data:`~freelook.utils.types.DEFAULT_TRANSFORM_ORDER`, yields
``translate @ rotate_x @ rotate_y @ rotate_z @ scale``.
"""

import logging
import numbers
from dataclasses import dataclass

from ..algebra import Matrix, Vector3, as_vector3, multiply_matrices
from ..utils.types import DEFAULT_TRANSFORM_ORDER, TransformStep

# Module logger
logger = logging.getLogger(__name__)


def _check_order(order):
    """Return ``order`` as a tuple of :class:`TransformStep`, each listed exactly once."""
    steps = tuple(TransformStep(step) for step in order)
    if len(steps) != len(TransformStep) or set(steps) != set(TransformStep):
        raise ValueError(
            f"Transform order must list each of {[s.value for s in TransformStep]} exactly once, "
            f"got {[s.value for s in steps]}."
        )
    return steps


def _as_scale(scale):
    if isinstance(scale, numbers.Number):
        return Vector3(scale, scale, scale)
    return as_vector3(scale)


def make_transform(translation, rotation, scale, order=DEFAULT_TRANSFORM_ORDER):
    """Build a model matrix from translation, Euler rotation and scale.

    Parameters
    ----------
    translation : Vector3 or sequence of float
        3-element translation vector.
    rotation : Vector3 or sequence of float
        Rotation about the x, y and z axes, in degrees.
    scale : float or Vector3 or sequence of float
        Uniform scale factor or per-axis scale.
    order : sequence of TransformStep, optional
        Factors from left to right; each step must appear exactly once.
        Default is translate, rotate x, rotate y, rotate z, scale.

    Returns
    -------
    Matrix
        4×4 model matrix.

    Raises
    ------
    ValueError
        If ``order`` does not list every :class:`TransformStep` exactly once.
    """
    translation = as_vector3(translation)
    rotation = as_vector3(rotation)
    scale = _as_scale(scale)
    factors = {
        TransformStep.TRANSLATE: Matrix.translate(*translation),
        TransformStep.ROTATE_X: Matrix.rotate(rotation.x, Vector3.unit_x()),
        TransformStep.ROTATE_Y: Matrix.rotate(rotation.y, Vector3.unit_y()),
        TransformStep.ROTATE_Z: Matrix.rotate(rotation.z, Vector3.unit_z()),
        TransformStep.SCALE: Matrix.scale(*scale),
    }
    return multiply_matrices(factors[step] for step in _check_order(order))


def make_model():
    """Create a default model matrix (identity).

    Returns
    -------
    Matrix
        4×4 identity matrix.
    """
    return Matrix.identity(4)


def make_projection(width, height, fov=90.0, near=0.1, far=100.0):
    """Create a 4x4 perspective projection matrix.

    Parameters
    ----------
    width, height : int
        Viewport dimensions in pixels (used to compute aspect ratio).
    fov : float, optional, default 90.0
        Vertical field of view in degrees.
    near, far : float, optional, default 0.1, 100.0
        Near and far clipping planes.

    Returns
    -------
    Matrix
        4x4 projection matrix.

    Raises
    ------
    ValueError
        If the viewport is empty or a projection parameter is out of range.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport must be non-empty, got {width}x{height}.")
    return Matrix.perspective(fov, width / height, near, far)


@dataclass
class ProjectionSettings:
    """Perspective projection parameters.

    Attributes
    ----------
    fov : float
        Vertical field of view in degrees.
    aspect_ratio : float
        Viewport width divided by height.
    near, far : float
        Clipping planes.
    """
    fov: float = 90.0
    aspect_ratio: float = 4.0 / 3.0
    near: float = 0.1
    far: float = 100.0

    def matrix(self):
        """Return the projection :class:`~freelook.algebra.matrix.Matrix` for these settings."""
        return Matrix.perspective(self.fov, self.aspect_ratio, self.near, self.far)


class ModelTransform:
    """Position, rotation and scale of one scene object.

    Every setter recomputes :attr:`model_matrix` and
    :attr:`model_matrix_array` immediately.

    Parameters
    ----------
    position : Vector3 or sequence of float, optional, default (0, 0, 0)
        World-space translation.
    rotation : Vector3 or sequence of float, optional, default (0, 0, 0)
        Euler angles about x, y and z, in degrees.
    scale : float or Vector3 or sequence of float, optional, default (1, 1, 1)
        Uniform or per-axis scale.
    order : sequence of TransformStep, optional
        Composition order, see :func:`make_transform`.
    """

    def __init__(self, position=(0.0, 0.0, 0.0), rotation=(0.0, 0.0, 0.0), scale=(1.0, 1.0, 1.0),
                 order=DEFAULT_TRANSFORM_ORDER):
        self._position = as_vector3(position)
        self._rotation = as_vector3(rotation)
        self._scale = _as_scale(scale)
        self._order = _check_order(order)
        self._update_model_matrix()

    def __repr__(self):
        return (
            f"ModelTransform(position={self._position!r}, rotation={self._rotation!r}, "
            f"scale={self._scale!r})"
        )

    @property
    def position(self):
        return self._position

    @property
    def rotation(self):
        return self._rotation

    @property
    def scale(self):
        return self._scale

    @property
    def order(self):
        """tuple of TransformStep: composition order, leftmost factor first."""
        return self._order

    @property
    def model_matrix(self):
        return self._model_matrix

    @property
    def model_matrix_array(self):
        """numpy.ndarray: :attr:`model_matrix` flattened column-major (read-only)."""
        return self._model_matrix_array

    def _update_model_matrix(self):
        self._model_matrix = make_transform(self._position, self._rotation, self._scale, self._order)
        array = self._model_matrix.to_array()
        array.flags.writeable = False
        self._model_matrix_array = array
        logger.debug("Model matrix updated: %r", self)

    def set_position(self, position):
        self._position = as_vector3(position)
        self._update_model_matrix()

    def set_rotation(self, rotation):
        self._rotation = as_vector3(rotation)
        self._update_model_matrix()

    def set_scale(self, scale):
        self._scale = _as_scale(scale)
        self._update_model_matrix()

    def set_order(self, order):
        self._order = _check_order(order)
        self._update_model_matrix()
