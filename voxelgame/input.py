"""Keyboard, mouse and scroll handling that feeds the camera."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

MOUSE_SENSITIVITY = 0.1
PITCH_LIMIT = 89.0

# Key names as used by pyglet.window.key.
FORWARD_KEY = "W"
BACKWARD_KEY = "S"
LEFT_KEY = "A"
RIGHT_KEY = "D"
EXIT_KEY = "ESCAPE"


@dataclass
class InputState:
    """Snapshot of the controls the camera reads each frame."""

    move_forward: bool = False
    move_backward: bool = False
    move_left: bool = False
    move_right: bool = False
    yaw: float = -90.0
    pitch: float = 0.0
    zoom: float = 0.0


class InputHandler:
    """Turns raw key, cursor and scroll events into an :class:`InputState`."""

    def __init__(self) -> None:
        self.state = InputState()
        self.last_x = 640.0
        self.last_y = 360.0
        self.first_mouse = True

    def process_input(self, is_pressed: Callable[[str], bool]) -> bool:
        """Read the movement keys; return True when the exit key is held."""
        self.state.move_forward = bool(is_pressed(FORWARD_KEY))
        self.state.move_backward = bool(is_pressed(BACKWARD_KEY))
        self.state.move_left = bool(is_pressed(LEFT_KEY))
        self.state.move_right = bool(is_pressed(RIGHT_KEY))
        return bool(is_pressed(EXIT_KEY))

    def mouse_callback(self, xpos: float, ypos: float) -> None:
        """Update yaw and pitch from an absolute cursor position."""
        xpos = float(xpos)
        ypos = float(ypos)
        if self.first_mouse:
            self.last_x = xpos
            self.last_y = ypos
            self.first_mouse = False

        offset_x = (xpos - self.last_x) * MOUSE_SENSITIVITY
        offset_y = (self.last_y - ypos) * MOUSE_SENSITIVITY
        self.last_x = xpos
        self.last_y = ypos

        self.state.yaw += offset_x
        self.state.pitch = min(
            PITCH_LIMIT, max(-PITCH_LIMIT, self.state.pitch + offset_y)
        )

    def scroll_callback(self, xoffset: float, yoffset: float) -> None:
        """Adjust zoom by the vertical scroll, kept within [0, 1]."""
        self.state.zoom = min(1.0, max(0.0, self.state.zoom - float(yoffset)))