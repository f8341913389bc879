"""Packing of matrices into shader-uniform layout.

Nothing here talks to a GPU. The returned arrays can be passed straight to
``glUniformMatrix4fv(location, 1, GL_FALSE, array)``.
"""

import numpy as np

from ..algebra import DimensionMismatchError, Matrix
from .transforms import make_model


def as_uniform(matrix):
    """Return a 4×4 matrix as 16 column-major float32 values.

    Parameters
    ----------
    matrix : Matrix
        4×4 matrix.

    Returns
    -------
    numpy.ndarray
        Contiguous float32 array of shape ``(16,)``.

    Raises
    ------
    DimensionMismatchError
        If ``matrix`` is not 4×4.
    """
    if not isinstance(matrix, Matrix):
        matrix = Matrix(matrix)
    if matrix.shape != (4, 4):
        raise DimensionMismatchError(f"Uniform matrices must be 4x4, got {matrix.rows}x{matrix.columns}.")
    return np.ascontiguousarray(matrix.to_array(), dtype=np.float32)


def camera_uniforms(camera, projection, model=None):
    """Return the ``view``, ``projection`` and ``model`` uniforms for one draw.

    Parameters
    ----------
    camera : Camera
        Source of the view matrix.
    projection : Matrix or ProjectionSettings
        Projection matrix, or settings to build it from.
    model : Matrix or ModelTransform, optional
        Model matrix; identity when omitted.

    Returns
    -------
    dict
        Mapping of uniform name to float32 array of 16 values.
    """
    if hasattr(projection, "matrix") and callable(projection.matrix):
        projection = projection.matrix()
    if model is None:
        model = make_model()
    elif hasattr(model, "model_matrix"):
        model = model.model_matrix
    return {
        "view": as_uniform(camera.view_matrix),
        "projection": as_uniform(projection),
        "model": as_uniform(model),
    }
