"""Pure orientation, basis and view-matrix derivation for the UVN camera.

These functions hold no state. :class:`~freelook.gl.camera.Camera` calls
them after every mutation so its cached matrices can never go stale.
"""

import math

from ..algebra import Matrix, as_vector3, radians_to_degrees

# ---------------------------------------------------------------------------
# Orientation from cumulative yaw/pitch
# ---------------------------------------------------------------------------

def _horizontal(direction, world_up):
    """Return ``direction`` without its component along the unit ``world_up``."""
    return direction - world_up.multiply(direction.dot(world_up))


def split_heading(direction, world_up):
    """Split a look direction into its horizontal part and its elevation.

    Parameters
    ----------
    direction : Vector3
        Look direction; must not be zero or parallel to ``world_up``.
    world_up : Vector3
        World up axis.

    Returns
    -------
    horizontal : Vector3
        ``direction`` projected onto the plane perpendicular to ``world_up``.
    elevation : float
        Angle in degrees between ``direction`` and that plane, positive
        towards ``world_up``.

    Raises
    ------
    DegenerateVectorError
        If ``world_up`` is zero.
    """
    direction = as_vector3(direction)
    world_up = as_vector3(world_up).normalised()
    horizontal = _horizontal(direction, world_up)
    elevation = radians_to_degrees(math.atan2(direction.dot(world_up), horizontal.length))
    return horizontal, elevation


def derive_orientation(initial_target, yaw, pitch, world_up):
    """Return the ``(target, up)`` pair for a cumulative yaw and pitch.

    The initial target is rotated about ``world_up`` by ``yaw`` and
    flattened onto the horizontal plane (the horizontal target). The
    horizontal axis is ``normalise(world_up × horizontal)``; rotating the
    horizontal target about it by ``pitch`` gives the forward direction.
    Yawing about the world axis and pitching about the yawed axis keeps roll
    at zero, and ``|pitch| < 90`` keeps ``up`` on the world-up side.

    Parameters
    ----------
    initial_target : Vector3
        Heading at zero rotation; its component along ``world_up`` is
        ignored, so it must not be parallel to ``world_up``.
    yaw : float
        Cumulative rotation about ``world_up``, in degrees (right-hand rule).
    pitch : float
        Elevation above the horizontal plane in degrees; positive tilts the
        view towards ``world_up``.
    world_up : Vector3
        World up axis.

    Returns
    -------
    target : Vector3
        Unit forward direction.
    up : Vector3
        Unit up vector, perpendicular to ``target`` and to the horizontal axis.

    Raises
    ------
    DegenerateVectorError
        If ``initial_target`` is zero or parallel to ``world_up``.
    """
    initial_target = as_vector3(initial_target)
    world_up = as_vector3(world_up).normalised()

    heading = initial_target.rotate(yaw, world_up)
    horizontal_target = _horizontal(heading, world_up).normalised()
    horizontal_axis = world_up.cross(horizontal_target).normalised()
    # rotating about world_up × h by +θ tilts h away from world_up
    target = horizontal_target.rotate(-pitch, horizontal_axis).normalised()
    up = target.cross(horizontal_axis)
    return target, up


# ---------------------------------------------------------------------------
# UVN basis and view matrix
# ---------------------------------------------------------------------------

def derive_basis(up, target):
    """Return the orthonormal camera basis ``(u, v, n)``.

    ``n = normalise(target)``, ``u = normalise(up × n)``, ``v = n × u``.

    Parameters
    ----------
    up : Vector3
        Up hint; need not be perpendicular to ``target``.
    target : Vector3
        Look direction.

    Returns
    -------
    tuple of Vector3
        Right, up and forward unit vectors.

    Raises
    ------
    DegenerateVectorError
        If ``target`` is zero or ``up`` is parallel to it.
    """
    n = as_vector3(target).normalised()
    u = as_vector3(up).cross(n).normalised()
    v = n.cross(u)
    return u, v, n


def derive_view_matrix(position, up, target):
    """Return the 4×4 world-to-view matrix of a camera.

    Parameters
    ----------
    position : Vector3
        Camera position in world space.
    up, target : Vector3
        Up hint and look direction, see :func:`derive_basis`.

    Returns
    -------
    Matrix
        View matrix with rows ``u``, ``v``, ``n`` and translation
        ``(-p·u, -p·v, -p·n)``.
    """
    u, v, n = derive_basis(up, target)
    return Matrix.view(position, u, v, n)
