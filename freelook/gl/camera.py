"""First-person UVN camera.

The camera keeps a position, a horizontal reference heading, a cumulative
yaw about world up and a pitch measured from the horizontal plane, so the
pitch clamp bounds the true elevation of the view. Every mutator
recomputes the orthonormal basis ``u`` (right), ``v`` (up), ``n`` (forward)
and the cached view matrix before returning, so a render loop can read
:attr:`Camera.view_matrix_array` at any time.
"""

import dataclasses
import logging
from dataclasses import dataclass

import numpy as np

from ..algebra import DegenerateVectorError, Matrix, Vector, Vector3, as_vector3, clamp
from ..utils.types import Movement
from .views import derive_basis, derive_orientation, split_heading

# Module logger
logger = logging.getLogger(__name__)


@dataclass
class CameraSettings:
    """Tunable camera behaviour.

    Attributes
    ----------
    speed : float
        World units travelled per unit of ``delta_time`` by the movement
        methods.
    max_pitch : float
        Bound, in degrees, on the cumulative pitch; must lie in ``(0, 90)``
        so the view never flips over a pole.
    invert_y : bool
        Negate the pitch component of :meth:`Camera.rotate` input.
    mouse_sensitivity : float
        Degrees of rotation per unit of mouse movement, used by
        :func:`freelook.gl.controls.apply_input`.
    world_up : tuple of float
        Axis that yaw rotates about and that ``move_up``/``move_down``
        follow.
    """
    speed: float = 5.0
    max_pitch: float = 89.0
    invert_y: bool = False
    mouse_sensitivity: float = 1.0
    world_up: tuple = (0.0, 1.0, 0.0)

    def __post_init__(self):
        if not 0 < self.max_pitch < 90:
            raise ValueError(f"max_pitch must be in (0, 90) degrees, got {self.max_pitch}.")
        if self.speed < 0:
            raise ValueError(f"speed must be non-negative, got {self.speed}.")
        if self.mouse_sensitivity < 0:
            raise ValueError(f"mouse_sensitivity must be non-negative, got {self.mouse_sensitivity}.")
        self.world_up = tuple(as_vector3(self.world_up).normalised())


def _as_yaw_pitch(delta):
    """Return ``(yaw, pitch)`` from a 2- or 3-component vector-like."""
    if isinstance(delta, Vector):
        values = delta.components
    elif isinstance(delta, (tuple, list, np.ndarray)):
        values = tuple(float(c) for c in np.asarray(delta, dtype=np.float64).ravel())
    else:
        raise TypeError(
            f"Rotation must be a vector or a (yaw, pitch) sequence, got {type(delta).__name__!r}."
        )
    if len(values) not in (2, 3):
        raise ValueError(f"Rotation needs 2 or 3 components, got {len(values)}.")
    return values[0], values[1]


class Camera:
    """Free-look camera using the UVN convention.

    Parameters
    ----------
    position : Vector3 or sequence of float, optional, default (0, 0, 0)
        Camera position in world space.
    target : Vector3 or sequence of float, optional, default (0, 0, 1)
        Look direction (not a point). Its horizontal part is the heading
        that zero yaw refers to; its elevation becomes the initial pitch,
        clamped to ``max_pitch``.
    up : Vector3 or sequence of float, optional, default (0, 1, 0)
        Up hint. The camera has no roll, so it only needs to lie in the
        plane of ``target`` and world up, on the world-up side; the actual
        up vector is derived from world up.
    settings : CameraSettings, optional
        Behaviour settings; defaults to :class:`CameraSettings`.
    **overrides
        Individual :class:`CameraSettings` fields, e.g. ``speed=10``.

    Raises
    ------
    DegenerateVectorError
        If ``target`` is zero or parallel to ``up`` or to the world up axis.
    ValueError
        If ``up`` would roll the camera or turn it upside down.
    """

    def __init__(self, position=(0.0, 0.0, 0.0), target=(0.0, 0.0, 1.0), up=(0.0, 1.0, 0.0),
                 settings=None, **overrides):
        settings = settings if settings is not None else CameraSettings()
        if overrides:
            settings = dataclasses.replace(settings, **overrides)
        self.settings = settings
        self._world_up = Vector3(*settings.world_up)

        target = as_vector3(target)
        self._check_heading(target)
        self._position = as_vector3(position)
        self._rotation = Vector3.zero()
        self._aim(target)
        self._check_up(as_vector3(up))

    def __repr__(self):
        return (
            f"Camera(position={self._position!r}, target={self._target!r}, "
            f"rotation={self._rotation!r})"
        )
    # ------------------------------------------------------------------
    # read-only state
    # ------------------------------------------------------------------

    @property
    def position(self):
        return self._position

    @property
    def rotation(self):
        """Vector3: ``(yaw, pitch, 0)`` in degrees; pitch is the elevation above the horizontal."""
        return self._rotation

    @property
    def delta_rotation(self):
        """Vector3: rotation actually applied by the last rotate call (after clamping)."""
        return self._delta_rotation

    @property
    def initial_target(self):
        """Vector3: horizontal heading that zero yaw refers to."""
        return self._initial_target

    @property
    def target(self):
        return self._target

    @property
    def up(self):
        return self._up

    @property
    def world_up(self):
        return self._world_up

    @property
    def u(self):
        """Vector3: unit right axis."""
        return self._u

    @property
    def v(self):
        """Vector3: unit up axis."""
        return self._v

    @property
    def n(self):
        """Vector3: unit forward axis."""
        return self._n

    @property
    def view_matrix(self):
        """Matrix: 4×4 world-to-view transform."""
        return self._view_matrix

    @property
    def view_matrix_array(self):
        """numpy.ndarray: :attr:`view_matrix` flattened column-major (16 values, read-only)."""
        return self._view_matrix_array

    # ------------------------------------------------------------------
    # recomputation
    # ------------------------------------------------------------------

    def _check_heading(self, target):
        if self._world_up.cross(target).length == 0:
            raise DegenerateVectorError(
                f"Camera target {target!r} must be non-zero and not parallel to world up "
                f"{self._world_up!r}."
            )

    def _check_up(self, up):
        right = up.cross(self._n)
        if right.length == 0:
            raise DegenerateVectorError(f"Up hint {up!r} must be non-zero and not parallel to the target.")
        if not right.normalised().allclose(self._u, atol=1e-6):
            raise ValueError(
                f"Up hint {up!r} must lie in the plane of the target and world up {self._world_up!r}, "
                f"on the world-up side; the camera has no roll."
            )

    def _aim(self, direction):
        """Take the heading and elevation of ``direction`` as the new reference."""
        horizontal, elevation = split_heading(direction, self._world_up)
        self._initial_target = horizontal
        self._set_rotation(0.0, elevation)
        self._delta_rotation = Vector3.zero()
        self._update_orientation()

    def _update_view_matrix(self):
        u, v, n = derive_basis(self._up, self._target)
        self._u, self._v, self._n = u, v, n
        self._view_matrix = Matrix.view(self._position, u, v, n)
        array = self._view_matrix.to_array()
        array.flags.writeable = False
        self._view_matrix_array = array
        logger.debug("View matrix updated: position=%s n=%s", self._position, n)

    def _update_orientation(self):
        self._target, self._up = derive_orientation(
            self._initial_target, self._rotation.x, self._rotation.y, self._world_up
        )
        self._update_view_matrix()

    def _set_rotation(self, yaw, pitch):
        limit = self.settings.max_pitch
        clamped = clamp(pitch, -limit, limit)
        if clamped != pitch:
            logger.debug("Pitch %.3f clamped to %.3f", pitch, clamped)
        rotation = Vector3(yaw, clamped, 0.0)
        self._delta_rotation = rotation - self._rotation
        self._rotation = rotation

    # ------------------------------------------------------------------
    # orientation
    # ------------------------------------------------------------------

    def rotate(self, delta):
        """Apply an incremental yaw and pitch.

        Yaw accumulates freely. Pitch accumulates and is clamped to
        ``[-max_pitch, max_pitch]``; input that would push past the bound
        is dropped, so no error is raised at the poles.

        Parameters
        ----------
        delta : Vector2 or Vector3 or sequence of float
            ``(yaw, pitch)`` increment in degrees. A third component is
            ignored. Positive pitch looks towards world up unless
            ``settings.invert_y`` is set.
        """
        yaw, pitch = _as_yaw_pitch(delta)
        if self.settings.invert_y:
            pitch = -pitch
        self._set_rotation(self._rotation.x + yaw, self._rotation.y + pitch)
        self._update_orientation()

    def set_rotation(self, rotation):
        """Replace the cumulative yaw and pitch (degrees, pitch clamped).

        ``settings.invert_y`` does not apply: the values are taken in the
        camera's own convention.
        """
        yaw, pitch = _as_yaw_pitch(rotation)
        self._set_rotation(yaw, pitch)
        self._update_orientation()

    def set_target(self, point):
        """Aim the camera at a world-space point.

        The horizontal part of the direction from the camera to ``point``
        becomes the reference heading, yaw resets to zero and pitch is set to
        the elevation of ``point``, clamped to ``max_pitch``.

        Raises
        ------
        DegenerateVectorError
            If ``point`` coincides with the camera or lies straight above
            or below it.
        """
        direction = as_vector3(point) - self._position
        self._check_heading(direction)
        self._aim(direction)

    # ------------------------------------------------------------------
    # position
    # ------------------------------------------------------------------

    def set_position(self, position):
        """Move the camera to ``position``; orientation is unchanged."""
        self._position = as_vector3(position)
        self._update_view_matrix()

    def _translate(self, direction, delta_time):
        self._position = self._position + direction.multiply(self.settings.speed * delta_time)
        self._update_view_matrix()

    def forward(self, delta_time):
        self._translate(self._target.normalised(), delta_time)

    def backward(self, delta_time):
        self._translate(self._target.normalised(), -delta_time)

    def strafe_left(self, delta_time):
        self._translate(self._target.cross(self._up).normalised(), delta_time)

    def strafe_right(self, delta_time):
        self._translate(self._up.cross(self._target).normalised(), delta_time)

    def strafe_up(self, delta_time):
        self._translate(self._up.normalised(), delta_time)

    def strafe_down(self, delta_time):
        self._translate(self._up.normalised(), -delta_time)

    def move_up(self, delta_time):
        self._translate(self._world_up, delta_time)

    def move_down(self, delta_time):
        self._translate(self._world_up, -delta_time)

    def move(self, movement, delta_time):
        """Apply one :class:`~freelook.utils.types.Movement` for ``delta_time``.

        Parameters
        ----------
        movement : Movement or str
            Movement member or its value (e.g. ``"strafe_left"``).
        delta_time : float
            Elapsed time; the displacement is ``speed * delta_time``.
        """
        getattr(self, Movement(movement).value)(delta_time)
