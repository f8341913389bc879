"""Mapping of held keys and mouse motion onto camera commands.

The host application records events into an :class:`InputState`; once per
frame :func:`apply_input` turns that state into :class:`Camera` calls. No
window or event library is involved, keys are plain strings such as
``"KeyW"`` (DOM ``KeyboardEvent.code`` names, also used by GLFW wrappers).
"""

import logging
from dataclasses import dataclass, field

import numpy as np

from ..utils.types import Movement

# Module logger
logger = logging.getLogger(__name__)

DEFAULT_KEY_BINDINGS = {
    "KeyW": Movement.FORWARD,
    "KeyA": Movement.STRAFE_LEFT,
    "KeyS": Movement.BACKWARD,
    "KeyD": Movement.STRAFE_RIGHT,
    "Space": Movement.STRAFE_UP,
    "ControlLeft": Movement.STRAFE_DOWN,
}


# ---------------------------------------------------------------------------
# InputState
# ---------------------------------------------------------------------------

@dataclass
class InputState:
    """Keyboard and mouse state accumulated between frames.

    Attributes
    ----------
    pressed : set of str
        Codes of keys currently held down.
    mouse_delta : np.ndarray
        (dx, dy) mouse movement in pixels since the last frame; screen y
        grows downward.
    pointer_locked : bool
        Whether the host has captured the pointer; input is ignored otherwise.
    """
    pressed: set = field(default_factory=set)
    mouse_delta: np.ndarray = field(
        default_factory=lambda: np.zeros(2, dtype=np.float64)
    )
    pointer_locked: bool = False

    def press(self, key):
        self.pressed.add(key)

    def release(self, key):
        self.pressed.discard(key)

    def move_mouse(self, dx, dy):
        """Accumulate a mouse movement event."""
        self.mouse_delta += (dx, dy)

    def clear(self):
        """Forget held keys and pending mouse motion (e.g. on window blur)."""
        self.pressed.clear()
        self.mouse_delta[:] = 0.0


def apply_input(camera, state, delta_time, bindings=None):
    """Apply one frame of input to ``camera``.

    Mouse motion is applied first as ``camera.rotate((dx, -dy) * sensitivity)``
    so moving the mouse up looks up, then each held key with a binding moves
    the camera for ``delta_time``. The pending mouse delta is consumed.

    Parameters
    ----------
    camera : Camera
        Camera to update.
    state : InputState
        Current input state.
    delta_time : float
        Seconds since the previous frame.
    bindings : dict, optional
        Key code to :class:`~freelook.utils.types.Movement` (or its value).
        Defaults to :data:`DEFAULT_KEY_BINDINGS`.

    Returns
    -------
    list of Movement
        Movements applied this frame, in key-binding order.
    """
    bindings = DEFAULT_KEY_BINDINGS if bindings is None else bindings
    if not state.pointer_locked:
        state.mouse_delta[:] = 0.0
        return []

    dx, dy = state.mouse_delta
    if dx or dy:
        sensitivity = camera.settings.mouse_sensitivity
        camera.rotate((dx * sensitivity, -dy * sensitivity))
    state.mouse_delta[:] = 0.0

    applied = []
    for key, movement in bindings.items():
        if key in state.pressed:
            movement = Movement(movement)
            camera.move(movement, delta_time)
            applied.append(movement)
    if applied:
        logger.debug("Applied %s for dt=%.4f", [m.value for m in applied], delta_time)
    return applied
