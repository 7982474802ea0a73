"""Free-fly camera and the 4x4 matrix helpers it relies on."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from voxelgame.input import InputState

BASE_FOV = 65.0
ZOOM_RANGE = 55.0


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


def _vec3(*values: float) -> np.ndarray:
    return np.array(values, dtype=np.float64)


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=np.float64)
    center = np.asarray(center, dtype=np.float64)
    up = np.asarray(up, dtype=np.float64)
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    result = np.identity(4)
    result[0, :3] = s
    result[1, :3] = u
    result[2, :3] = -f
    result[0, 3] = -np.dot(s, eye)
    result[1, 3] = -np.dot(u, eye)
    result[2, 3] = np.dot(f, eye)
    return result


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with clip depth in [-1, 1]."""
    tan_half = math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


def translate(matrix, offset) -> np.ndarray:
    """Return ``matrix`` followed by a translation by ``offset``."""
    translation = np.identity(4)
    translation[:3, 3] = np.asarray(offset, dtype=np.float64)
    return np.asarray(matrix, dtype=np.float64) @ translation


def scale(matrix, factors) -> np.ndarray:
    """Return ``matrix`` followed by a per-axis scale by ``factors``."""
    scaling = np.diag([*np.asarray(factors, dtype=np.float64), 1.0])
    return np.asarray(matrix, dtype=np.float64) @ scaling


@dataclass
class Camera:
    """Camera moved by WASD and aimed by yaw/pitch from the input state."""

    position: np.ndarray = field(default_factory=lambda: _vec3(0.0, 0.0, 3.0))
    front: np.ndarray = field(default_factory=lambda: _vec3(0.0, 0.0, -1.0))
    up: np.ndarray = field(default_factory=lambda: _vec3(0.0, 1.0, 0.0))
    speed: float = 2.5
    fov: float = BASE_FOV

    def update(self, delta_time: float, input_state: InputState) -> None:
        """Move, rotate and zoom according to one frame of input."""
        velocity = self.speed * delta_time
        right = _normalize(np.cross(self.front, self.up))

        if input_state.move_forward:
            self.position = self.position + self.front * velocity
        if input_state.move_backward:
            self.position = self.position - self.front * velocity
        if input_state.move_left:
            self.position = self.position - right * velocity
        if input_state.move_right:
            self.position = self.position + right * velocity

        yaw = math.radians(input_state.yaw)
        pitch = math.radians(input_state.pitch)
        direction = _vec3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )
        self.front = _normalize(direction)

        self.fov = BASE_FOV - ZOOM_RANGE * input_state.zoom

    def view_matrix(self) -> np.ndarray:
        """View matrix for the current position and orientation."""
        return look_at(self.position, self.position + self.front, self.up)