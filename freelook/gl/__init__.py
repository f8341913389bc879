"""Camera and transform helpers (gl package).

Everything here produces plain numbers for a render loop; no OpenGL calls
are made. Functions are re-exported at package level for convenience, e.g.:

    from freelook.gl import Camera, camera_uniforms, make_projection

"""

from .camera import Camera, CameraSettings
from .controls import DEFAULT_KEY_BINDINGS, InputState, apply_input
from .transforms import ModelTransform, ProjectionSettings, make_model, make_projection, make_transform
from .uniforms import as_uniform, camera_uniforms
from .views import derive_basis, derive_orientation, derive_view_matrix, split_heading

__all__ = [
    'Camera', 'CameraSettings',
    'InputState', 'apply_input', 'DEFAULT_KEY_BINDINGS',
    'ModelTransform', 'ProjectionSettings', 'make_model', 'make_projection', 'make_transform',
    'as_uniform', 'camera_uniforms',
    'derive_basis', 'derive_orientation', 'derive_view_matrix', 'split_heading',
]
