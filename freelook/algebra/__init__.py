"""Linear algebra for homogeneous 3-D transforms.

Modules
-------
* :mod:`~freelook.algebra.matrix`: immutable :class:`Matrix` with
  identity, scale, translate, rotate, perspective and view factories.
* :mod:`~freelook.algebra.vector`: :class:`Vector`, :class:`Vector2`,
  :class:`Vector3`, :class:`Vector4`.
* :mod:`~freelook.algebra.quaternion`: :class:`Quaternion`, the
  intermediate form of every rotation matrix.
* :mod:`~freelook.algebra.utils`: angle conversion, direction cosines,
  chained products and :class:`Polar`.
* :mod:`~freelook.algebra.errors`: exception hierarchy.
"""
from .errors import AlgebraError, DegenerateVectorError, DimensionMismatchError, MalformedMatrixError
from .matrix import Matrix
from .quaternion import Quaternion
from .utils import Polar, clamp, degrees_to_radians, direction_cosine, multiply_matrices, radians_to_degrees
from .vector import Vector, Vector2, Vector3, Vector4, as_vector3, vector_from

__all__ = [
    'Matrix',
    'Vector',
    'Vector2',
    'Vector3',
    'Vector4',
    'Quaternion',
    'Polar',
    'as_vector3',
    'vector_from',
    'clamp',
    'degrees_to_radians',
    'radians_to_degrees',
    'direction_cosine',
    'multiply_matrices',
    'AlgebraError',
    'DimensionMismatchError',
    'DegenerateVectorError',
    'MalformedMatrixError',
]
