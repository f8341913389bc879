"""Tests for the free-look camera (freelook/gl/camera.py and freelook/gl/views.py)."""

import numpy as np
import pytest

from freelook.algebra import DegenerateVectorError, Vector3, Vector4
from freelook.gl import Camera, CameraSettings, derive_basis, derive_orientation, derive_view_matrix, split_heading
from freelook.utils.types import Movement


def _assert_orthonormal(camera, atol=1e-6):
    u, v, n = camera.u, camera.v, camera.n
    for axis in (u, v, n):
        assert axis.length == pytest.approx(1.0, abs=atol)
    assert u.dot(v) == pytest.approx(0.0, abs=atol)
    assert u.dot(n) == pytest.approx(0.0, abs=atol)
    assert v.dot(n) == pytest.approx(0.0, abs=atol)


# ---------------------------------------------------------------------------
# Basis and orientation
# ---------------------------------------------------------------------------

class TestOrientation:
    def test_default_basis(self):
        camera = Camera()
        assert camera.u == Vector3(1, 0, 0)
        assert camera.v == Vector3(0, 1, 0)
        assert camera.n == Vector3(0, 0, 1)

    def test_yaw_quarter_turn(self):
        camera = Camera()
        camera.rotate((90, 0))
        assert camera.n.allclose(Vector3(1, 0, 0))
        assert camera.v.allclose(Vector3(0, 1, 0))
        assert camera.rotation == Vector3(90, 0, 0)

    def test_positive_pitch_looks_up(self):
        camera = Camera()
        camera.rotate((0, 30))
        assert camera.n.allclose(Vector3(0, 0.5, np.sqrt(0.75)))
        assert camera.v.y > 0

    def test_invert_y(self):
        camera = Camera(invert_y=True)
        camera.rotate((0, 30))
        assert camera.rotation.y == -30.0
        assert camera.n.y < 0

    def test_yaw_is_unbounded(self):
        camera = Camera()
        for _ in range(5):
            camera.rotate((90, 0))
        assert camera.rotation.x == 450.0
        assert camera.n.allclose(Vector3(1, 0, 0))

    def test_pitch_clamps_to_limit(self):
        camera = Camera()
        camera.rotate((0, 60))
        assert camera.delta_rotation == Vector3(0, 60, 0)
        camera.rotate((0, 60))
        assert camera.rotation.y == 89.0
        assert camera.delta_rotation == Vector3(0, 29, 0)
        camera.rotate((0, 10))
        assert camera.rotation.y == 89.0
        assert camera.delta_rotation == Vector3(0, 0, 0)
        _assert_orthonormal(camera)

    def test_pitch_clamps_downward(self):
        camera = Camera(max_pitch=45)
        camera.rotate((0, -100))
        assert camera.rotation.y == -45.0
        assert camera.n.allclose(Vector3(0, -np.sqrt(0.5), np.sqrt(0.5)))

    def test_stays_orthonormal(self):
        rng = np.random.default_rng(0)
        camera = Camera(position=(1, -2, 3))
        for yaw, pitch in rng.uniform(-200, 200, size=(200, 2)):
            camera.rotate((yaw, pitch))
            assert abs(camera.rotation.y) <= 89.0
            _assert_orthonormal(camera)

    def test_third_component_ignored(self):
        a, b = Camera(), Camera()
        a.rotate(Vector3(20, 10, 99))
        b.rotate((20, 10))
        assert a.view_matrix == b.view_matrix

    def test_set_rotation_is_absolute(self):
        camera = Camera()
        camera.rotate((40, 20))
        camera.set_rotation((90, 100))
        assert camera.rotation == Vector3(90, 89, 0)
        expected = Camera()
        expected.rotate((90, 89))
        assert camera.n.allclose(expected.n)

    @pytest.mark.parametrize("delta", [(1,), (1, 2, 3, 4)])
    def test_rotate_wrong_length_raises(self, delta):
        with pytest.raises(ValueError):
            Camera().rotate(delta)

    def test_rotate_wrong_type_raises(self):
        with pytest.raises(TypeError):
            Camera().rotate(5)


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

class TestViews:
    def test_derive_basis(self):
        u, v, n = derive_basis(Vector3(0, 1, 0), Vector3(0, 0, 4))
        assert (u, v, n) == (Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1))

    def test_derive_basis_parallel_raises(self):
        with pytest.raises(DegenerateVectorError):
            derive_basis(Vector3(0, 1, 0), Vector3(0, 2, 0))

    def test_derive_orientation_keeps_roll_zero(self):
        target, up = derive_orientation(Vector3(0, 0, 1), 35, 20, Vector3(0, 1, 0))
        right = up.cross(target)
        assert right.y == pytest.approx(0.0, abs=1e-12)

    def test_split_heading(self):
        horizontal, elevation = split_heading(Vector3(0, 3, 3), Vector3(0, 2, 0))
        assert horizontal == Vector3(0, 0, 3)
        assert elevation == pytest.approx(45.0)

    def test_derive_view_matrix(self):
        view = derive_view_matrix(Vector3(0, 0, -5), Vector3(0, 1, 0), Vector3(0, 0, 1))
        assert view.multiply(Vector4(0, 0, 0, 1)).allclose(Vector4(0, 0, 5, 1))


# ---------------------------------------------------------------------------
# Movement
# ---------------------------------------------------------------------------

class TestMovement:
    def test_forward_and_backward(self):
        camera = Camera(speed=5)
        camera.forward(0.1)
        assert camera.position.allclose(Vector3(0, 0, 0.5))
        camera.backward(0.1)
        assert camera.position.allclose(Vector3(0, 0, 0))

    def test_forward_follows_heading(self):
        camera = Camera(speed=1)
        camera.rotate((90, 0))
        camera.forward(2)
        assert camera.position.allclose(Vector3(2, 0, 0))

    def test_strafe_right_is_u(self):
        camera = Camera(speed=1)
        camera.rotate((30, 15))
        camera.strafe_right(1)
        assert camera.position.allclose(camera.u)

    def test_strafe_left(self):
        camera = Camera(speed=1)
        camera.strafe_left(1)
        assert camera.position.allclose(Vector3(-1, 0, 0))

    def test_strafe_up_follows_camera_up(self):
        camera = Camera(speed=1)
        camera.rotate((0, 45))
        camera.strafe_up(1)
        assert camera.position.allclose(camera.v)
        camera.strafe_down(1)
        assert camera.position.allclose(Vector3.zero())

    def test_move_up_follows_world_up(self):
        camera = Camera(speed=5)
        camera.rotate((0, 45))
        camera.move_up(1)
        assert camera.position == Vector3(0, 5, 0)
        camera.move_down(1)
        assert camera.position == Vector3(0, 0, 0)

    def test_move_dispatch(self):
        camera = Camera()
        camera.move("strafe_left", 1)
        assert camera.position.allclose(Vector3(-5, 0, 0))
        camera.move(Movement.FORWARD, 1)
        assert camera.position.allclose(Vector3(-5, 0, 5))

    def test_move_unknown_raises(self):
        with pytest.raises(ValueError):
            Camera().move("jump", 1)

    def test_movement_keeps_orientation(self):
        camera = Camera()
        camera.rotate((10, 20))
        n = camera.n
        camera.forward(1)
        camera.set_position((4, 5, 6))
        assert camera.n == n
        assert camera.position == Vector3(4, 5, 6)


# ---------------------------------------------------------------------------
# View matrix
# ---------------------------------------------------------------------------

class TestViewMatrix:
    def test_position_maps_to_origin(self):
        camera = Camera(position=(2, 2, -2))
        camera.rotate((-45, -20))
        origin = camera.view_matrix.multiply(camera.position.to_homogeneous())
        assert origin.allclose(Vector4(0, 0, 0, 1))

    def test_target_maps_to_positive_z(self):
        camera = Camera(position=(1, 1, 1))
        camera.rotate((70, 10))
        ahead = camera.position + camera.n.multiply(3)
        assert camera.view_matrix.multiply(ahead.to_homogeneous()).allclose(Vector4(0, 0, 3, 1))

    def test_array_is_column_major_and_read_only(self):
        camera = Camera(position=(1, 2, 3))
        array = camera.view_matrix_array
        assert array.shape == (16,)
        np.testing.assert_allclose(array[12:15], [-1, -2, -3])
        with pytest.raises(ValueError):
            array[0] = 2.0

    def test_array_refreshed_after_move(self):
        camera = Camera()
        before = camera.view_matrix_array
        camera.forward(1)
        assert not np.array_equal(before, camera.view_matrix_array)


# ---------------------------------------------------------------------------
# Targeting and settings
# ---------------------------------------------------------------------------

class TestTargeting:
    def test_set_target(self):
        camera = Camera(position=(1, 0, 0))
        camera.rotate((30, 30))
        camera.set_target((1, 0, -4))
        assert camera.n.allclose(Vector3(0, 0, -1))
        assert camera.rotation == Vector3.zero()
        assert camera.initial_target == Vector3(0, 0, -4)

    @pytest.mark.parametrize("point", [(1, 2, 3), (1, 10, 3), (1, -1, 3)])
    def test_degenerate_target_leaves_state(self, point):
        camera = Camera(position=(1, 2, 3))
        camera.rotate((15, 5))
        view = camera.view_matrix
        with pytest.raises(DegenerateVectorError):
            camera.set_target(point)
        assert camera.view_matrix == view
        assert camera.rotation == Vector3(15, 5, 0)

    @pytest.mark.parametrize("target", [(0, 0, 0), (0, 3, 0)])
    def test_degenerate_initial_target_raises(self, target):
        with pytest.raises(DegenerateVectorError):
            Camera(target=target)


class TestSettings:
    def test_defaults(self):
        settings = Camera().settings
        assert settings.speed == 5.0
        assert settings.max_pitch == 89.0
        assert settings.invert_y is False

    def test_overrides_do_not_touch_shared_settings(self):
        shared = CameraSettings(speed=2)
        camera = Camera(settings=shared, speed=3)
        assert camera.settings.speed == 3
        assert shared.speed == 2

    @pytest.mark.parametrize(
        "kwargs", [dict(max_pitch=90), dict(max_pitch=0), dict(speed=-1), dict(mouse_sensitivity=-0.5)]
    )
    def test_invalid_settings_raise(self, kwargs):
        with pytest.raises(ValueError):
            CameraSettings(**kwargs)

    def test_world_up_is_normalised(self):
        assert CameraSettings(world_up=(0, 0, 2)).world_up == (0.0, 0.0, 1.0)

    def test_zero_world_up_raises(self):
        with pytest.raises(DegenerateVectorError):
            CameraSettings(world_up=(0, 0, 0))

    def test_custom_world_up(self):
        camera = Camera(target=(1, 0, 0), up=(0, 0, 1), world_up=(0, 0, 1), speed=1)
        camera.move_up(2)
        assert camera.position == Vector3(0, 0, 2)
        camera.rotate((90, 0))
        assert camera.n.allclose(Vector3(0, 1, 0))


# ---------------------------------------------------------------------------
# Tilted headings and the up hint
# ---------------------------------------------------------------------------

class TestTiltedHeading:
    def test_tilted_target_seeds_pitch(self):
        camera = Camera(target=(0, 1, 1))
        assert camera.rotation.y == pytest.approx(45.0)
        assert camera.initial_target.allclose(Vector3(0, 0, 1))
        assert camera.n.allclose(Vector3(0, 1, 1).normalised())

    def test_tilted_target_cannot_flip(self):
        camera = Camera(target=(0, 1, 1))
        camera.rotate((0, 60))
        assert camera.rotation.y == 89.0
        assert camera.v.y > 0
        _assert_orthonormal(camera)

    def test_set_target_above_cannot_flip(self):
        camera = Camera()
        camera.set_target((0, 10, 1))
        assert camera.n.allclose(Vector3(0, 10, 1).normalised())
        camera.rotate((0, 89))
        assert camera.rotation.y == 89.0
        assert camera.v.y > 0
        assert camera.n.z > 0

    def test_set_target_below_cannot_flip(self):
        camera = Camera(position=(0, 5, 0))
        camera.set_target((1, -20, 0))
        camera.rotate((0, -30))
        assert camera.rotation.y == -89.0
        assert camera.v.y > 0

    def test_set_target_past_limit_is_clamped(self):
        camera = Camera(max_pitch=60)
        camera.set_target((0, 100, 1))
        assert camera.rotation.y == 60.0
        assert camera.delta_rotation == Vector3.zero()
        assert camera.n.y == pytest.approx(np.sin(np.radians(60)))

    def test_up_hint_only_needs_to_be_on_world_up_side(self):
        camera = Camera(up=(0, 2, -3))
        assert camera.v == Vector3(0, 1, 0)
        before = camera.v
        camera.rotate((0, 0))
        assert camera.v.allclose(before)

    @pytest.mark.parametrize("up", [(1, 1, 0), (0, -1, 0), (-1, 0, 0)])
    def test_rolled_up_hint_raises(self, up):
        with pytest.raises(ValueError):
            Camera(up=up)

    def test_up_hint_parallel_to_target_raises(self):
        with pytest.raises(DegenerateVectorError):
            Camera(up=(0, 0, 1))
