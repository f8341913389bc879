"""Tests for freelook/gl/controls.py."""

import numpy as np

from freelook.algebra import Vector3
from freelook.gl import Camera, InputState, apply_input
from freelook.utils.types import Movement


def _locked_state(*keys):
    state = InputState(pointer_locked=True)
    for key in keys:
        state.press(key)
    return state


def test_unlocked_input_is_ignored():
    camera = Camera()
    state = InputState()
    state.press("KeyW")
    state.move_mouse(30, 10)
    assert apply_input(camera, state, 1.0) == []
    assert camera.position == Vector3.zero()
    assert camera.rotation == Vector3.zero()
    np.testing.assert_array_equal(state.mouse_delta, [0, 0])


def test_held_key_moves_camera():
    camera = Camera(speed=2)
    applied = apply_input(camera, _locked_state("KeyW"), 0.5)
    assert applied == [Movement.FORWARD]
    assert camera.position.allclose(Vector3(0, 0, 1))


def test_keys_apply_in_binding_order():
    camera = Camera()
    state = _locked_state("KeyD", "KeyW", "Escape")
    assert apply_input(camera, state, 0.1) == [Movement.FORWARD, Movement.STRAFE_RIGHT]


def test_mouse_motion_rotates_and_is_consumed():
    camera = Camera()
    state = _locked_state()
    state.move_mouse(6, -2)
    state.move_mouse(4, -3)
    apply_input(camera, state, 0.016)
    # moving the mouse up (negative screen dy) looks up
    assert camera.rotation == Vector3(10, 5, 0)
    np.testing.assert_array_equal(state.mouse_delta, [0, 0])
    apply_input(camera, state, 0.016)
    assert camera.rotation == Vector3(10, 5, 0)


def test_mouse_sensitivity():
    camera = Camera(mouse_sensitivity=0.5)
    state = _locked_state()
    state.move_mouse(10, 4)
    apply_input(camera, state, 0.016)
    assert camera.rotation == Vector3(5, -2, 0)


def test_custom_bindings():
    camera = Camera(speed=1)
    state = _locked_state("ArrowUp", "KeyW")
    applied = apply_input(camera, state, 1.0, bindings={"ArrowUp": "move_up"})
    assert applied == [Movement.MOVE_UP]
    assert camera.position == Vector3(0, 1, 0)


def test_release_and_clear():
    state = _locked_state("KeyW", "KeyA")
    state.release("KeyW")
    state.release("KeyQ")
    assert state.pressed == {"KeyA"}
    state.move_mouse(3, 3)
    state.clear()
    assert state.pressed == set()
    np.testing.assert_array_equal(state.mouse_delta, [0, 0])
