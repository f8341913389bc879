"""FreeLook: matrices, quaternions and a first-person UVN camera for render loops.

FreeLook computes the numbers a WebGL/OpenGL render loop uploads every frame:

- **Linear algebra**: immutable :class:`Matrix`, :class:`Vector2`,
  :class:`Vector3`, :class:`Vector4` and :class:`Quaternion`
- **Camera**: :class:`Camera`, a free-look UVN camera with clamped pitch
  and keyboard-style movement
- **Transforms**: model matrices with an explicit composition order and
  perspective projection
- **Uniforms**: 16-float column-major arrays ready for ``glUniformMatrix4fv``

Typical frame::

    from freelook import Camera, ProjectionSettings, camera_uniforms

    camera = Camera(position=(2, 2, -2), speed=5)
    camera.rotate((-45, -20))
    camera.forward(delta_time)
    uniforms = camera_uniforms(camera, ProjectionSettings(aspect_ratio=800 / 600))

"""

from ._config import sys_info  # noqa: F401
from ._version import __version__  # noqa: F401
from .algebra import (
    DegenerateVectorError,
    DimensionMismatchError,
    MalformedMatrixError,
    Matrix,
    Quaternion,
    Vector,
    Vector2,
    Vector3,
    Vector4,
)
from .gl import (
    Camera,
    CameraSettings,
    InputState,
    ModelTransform,
    ProjectionSettings,
    apply_input,
    camera_uniforms,
    make_projection,
    make_transform,
)
from .utils.types import DEFAULT_TRANSFORM_ORDER, Movement, TransformStep

# Export list
__all__ = [
    "__version__",
    "sys_info",
    "Matrix",
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "Quaternion",
    "DimensionMismatchError",
    "DegenerateVectorError",
    "MalformedMatrixError",
    "Camera",
    "CameraSettings",
    "InputState",
    "apply_input",
    "ModelTransform",
    "ProjectionSettings",
    "make_projection",
    "make_transform",
    "camera_uniforms",
    "Movement",
    "TransformStep",
    "DEFAULT_TRANSFORM_ORDER",
]
