"""Tests for freelook/gl/uniforms.py."""

import numpy as np
import pytest

from freelook.algebra import DimensionMismatchError, Matrix
from freelook.gl import Camera, ModelTransform, ProjectionSettings, as_uniform, camera_uniforms


def test_as_uniform_layout():
    array = as_uniform(Matrix.translate(1, 2, 3))
    assert array.dtype == np.float32
    assert array.shape == (16,)
    assert array.flags.c_contiguous
    np.testing.assert_array_equal(array[12:16], [1, 2, 3, 1])


def test_as_uniform_accepts_nested_lists():
    np.testing.assert_array_equal(as_uniform(np.eye(4).tolist()), np.eye(4, dtype=np.float32).flatten())


def test_as_uniform_requires_4x4():
    with pytest.raises(DimensionMismatchError):
        as_uniform(Matrix.identity(3))


def test_camera_uniforms_defaults():
    camera = Camera(position=(0, 0, -3))
    uniforms = camera_uniforms(camera, ProjectionSettings())
    assert set(uniforms) == {"view", "projection", "model"}
    np.testing.assert_allclose(uniforms["view"], camera.view_matrix_array)
    np.testing.assert_allclose(uniforms["projection"], ProjectionSettings().matrix().to_array(), rtol=1e-6)
    np.testing.assert_array_equal(uniforms["model"], np.eye(4, dtype=np.float32).flatten())


def test_camera_uniforms_explicit_matrices():
    camera = Camera()
    projection = Matrix.perspective(60, 1.0, 0.5, 20)
    model = ModelTransform(position=(4, 5, 6), rotation=(0, 30, 0))
    uniforms = camera_uniforms(camera, projection, model)
    np.testing.assert_allclose(uniforms["projection"], projection.to_array(), rtol=1e-6)
    np.testing.assert_allclose(uniforms["model"], model.model_matrix_array, rtol=1e-6, atol=1e-7)
    assert all(value.dtype == np.float32 for value in uniforms.values())
