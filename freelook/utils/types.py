"""Contains the enumeration types used in FreeLook.

Classes
-------
TransformStep
    One factor of a model transform (translation, a single-axis rotation,
    or scale).
Movement
    A camera displacement triggered by a held key.

Constants
---------
DEFAULT_TRANSFORM_ORDER
    Translate, then rotate about x, y and z, then scale.
"""

import enum


class TransformStep(enum.Enum):
    """Factors that make up a model matrix.

    The model matrix is the product of one matrix per step, taken left to
    right in the order the steps are listed; for column vectors the
    rightmost step is applied first.

    Attributes
    ----------
    TRANSLATE : str
        Translation by the object's position.
    ROTATE_X, ROTATE_Y, ROTATE_Z : str
        Rotation about the named world axis by the matching Euler angle.
    SCALE : str
        Per-axis scaling.
    """
    TRANSLATE = "translate"
    ROTATE_X = "rotate_x"
    ROTATE_Y = "rotate_y"
    ROTATE_Z = "rotate_z"
    SCALE = "scale"


DEFAULT_TRANSFORM_ORDER = (
    TransformStep.TRANSLATE,
    TransformStep.ROTATE_X,
    TransformStep.ROTATE_Y,
    TransformStep.ROTATE_Z,
    TransformStep.SCALE,
)


class Movement(enum.Enum):
    """Camera displacements, named after the :class:`~freelook.gl.camera.Camera` method they call.

    Attributes
    ----------
    FORWARD, BACKWARD : str
        Along the look direction.
    STRAFE_LEFT, STRAFE_RIGHT : str
        Along the camera's horizontal axis.
    STRAFE_UP, STRAFE_DOWN : str
        Along the camera's up vector.
    MOVE_UP, MOVE_DOWN : str
        Along the world up axis.
    """
    FORWARD = "forward"
    BACKWARD = "backward"
    STRAFE_LEFT = "strafe_left"
    STRAFE_RIGHT = "strafe_right"
    STRAFE_UP = "strafe_up"
    STRAFE_DOWN = "strafe_down"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
