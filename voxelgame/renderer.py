"""Scene rendering: lighting set-up and drawing the loaded model."""

from __future__ import annotations

import math
from typing import Optional, Union

from voxelgame.camera import Camera, perspective, scale, translate
from voxelgame.filesystem import get_path
from voxelgame.model import Model
from voxelgame.shader import Shader

SHADER_DIR = "../shaders"
DEFAULT_MODEL = "game/assets/objects/backpack/backpack.obj"

ASPECT_RATIO = 1280.0 / 720.0
NEAR_PLANE = 0.1
FAR_PLANE = 100.0
CLEAR_COLOR = (0.1, 0.1, 0.1, 1.0)

POINT_LIGHT_POSITIONS = (
    (0.7, 0.2, 2.0),
    (2.3, -3.3, -4.0),
    (-4.0, 2.0, -12.0),
    (0.0, 0.2, -3.0),
)

_CONSTANT = 1.0
_LINEAR = 0.09
_QUADRATIC = 0.032

UniformValue = Union[float, tuple[float, float, float]]


def _vec(values) -> tuple[float, float, float]:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


def lighting_uniforms(camera: Camera) -> dict[str, UniformValue]:
    """Lighting uniforms for one frame, in the order they are set."""
    uniforms: dict[str, UniformValue] = {
        "dirLight.direction": (-0.2, -1.0, -0.3),
        "dirLight.ambient": (0.05, 0.05, 0.05),
        "dirLight.diffuse": (0.4, 0.4, 0.4),
        "dirLight.specular": (0.5, 0.5, 0.5),
    }
    for index, position in enumerate(POINT_LIGHT_POSITIONS):
        prefix = f"pointLights[{index}]."
        uniforms[prefix + "position"] = _vec(position)
        uniforms[prefix + "ambient"] = (0.05, 0.05, 0.05)
        uniforms[prefix + "diffuse"] = (0.8, 0.8, 0.8)
        uniforms[prefix + "specular"] = (1.0, 1.0, 1.0)
        uniforms[prefix + "constant"] = _CONSTANT
        uniforms[prefix + "linear"] = _LINEAR
        uniforms[prefix + "quadratic"] = _QUADRATIC

    uniforms.update(
        {
            "spotLight.position": _vec(camera.position),
            "spotLight.direction": _vec(camera.front),
            "spotLight.ambient": (0.0, 0.0, 0.0),
            "spotLight.diffuse": (1.0, 1.0, 1.0),
            "spotLight.specular": (1.0, 1.0, 1.0),
            "spotLight.constant": _CONSTANT,
            "spotLight.linear": _LINEAR,
            "spotLight.quadratic": _QUADRATIC,
            "spotLight.cutOff": math.cos(math.radians(12.5)),
            "spotLight.outerCutOff": math.cos(math.radians(15.0)),
        }
    )
    return uniforms


class Renderer:
    """Owns the shaders and the model, and draws them each frame."""

    def __init__(self, model_path: Optional[str] = None) -> None:
        self.model_path = model_path if model_path is not None else get_path(DEFAULT_MODEL)
        self.lighting_shader: Optional[Shader] = None
        self.lighting_shader2: Optional[Shader] = None
        self.depth_shader: Optional[Shader] = None
        self.outline_shader: Optional[Shader] = None
        self.model: Optional[Model] = None

    def init(self) -> None:
        """Set up GL state, build the shaders and load the model."""
        from pyglet import gl

        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glDepthFunc(gl.GL_LESS)
        gl.glEnable(gl.GL_BLEND)
        gl.glEnable(gl.GL_CULL_FACE)

        self.lighting_shader = Shader(f"{SHADER_DIR}/shader.vs", f"{SHADER_DIR}/shader.fs")
        self.lighting_shader2 = Shader(f"{SHADER_DIR}/shader.vs", f"{SHADER_DIR}/shader.fs")
        self.depth_shader = Shader(
            f"{SHADER_DIR}/depthShader.vs", f"{SHADER_DIR}/depthShader.fs"
        )
        self.outline_shader = Shader(
            f"{SHADER_DIR}/depthShader.vs", f"{SHADER_DIR}/outlineShader.fs"
        )
        self.model = Model(self.model_path)

    def render(self, camera: Camera) -> None:
        """Clear the frame and draw the model lit from the camera's view."""
        shader = self.lighting_shader
        model = self.model
        if shader is None or model is None:
            raise RuntimeError("renderer is not initialised")

        from pyglet import gl

        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glEnable(gl.GL_STENCIL_TEST)
        gl.glClearColor(*CLEAR_COLOR)
        gl.glClear(
            gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT | gl.GL_STENCIL_BUFFER_BIT
        )

        shader.use()
        for name, value in lighting_uniforms(camera).items():
            if isinstance(value, tuple):
                shader.set_vec3(name, *value)
            else:
                shader.set_float(name, value)

        projection = perspective(
            math.radians(camera.fov), ASPECT_RATIO, NEAR_PLANE, FAR_PLANE
        )
        view = camera.view_matrix()
        model_matrix = scale(translate(_identity(), (0.0, 0.0, 0.0)), (1.0, 1.0, 1.0))

        gl.glStencilFunc(gl.GL_ALWAYS, 1, 0xFF)
        gl.glStencilOp(gl.GL_KEEP, gl.GL_KEEP, gl.GL_REPLACE)
        gl.glStencilMask(0xFF)
        gl.glDepthMask(gl.GL_TRUE)
        gl.glEnable(gl.GL_DEPTH_TEST)

        shader.set_mat4("projection", projection)
        shader.set_mat4("view", view)
        shader.set_mat4("model", model_matrix)
        model.draw(shader)

        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glStencilMask(0xFF)
        gl.glStencilFunc(gl.GL_ALWAYS, 1, 0xFF)
        gl.glDepthMask(gl.GL_TRUE)

    def shutdown(self) -> None:
        """Drop the shaders and the model."""
        self.lighting_shader = None
        self.lighting_shader2 = None
        self.depth_shader = None
        self.outline_shader = None
        self.model = None


def _identity():
    import numpy as np

    return np.identity(4)