import math

import numpy as np
import pytest

from voxelgame.camera import Camera
from voxelgame.input import InputState
from voxelgame.renderer import (
    DEFAULT_MODEL,
    POINT_LIGHT_POSITIONS,
    Renderer,
    lighting_uniforms,
)


def test_spot_light_follows_camera():
    camera = Camera()
    uniforms = lighting_uniforms(camera)
    assert uniforms["spotLight.position"] == tuple(float(v) for v in camera.position)
    assert uniforms["spotLight.direction"] == tuple(float(v) for v in camera.front)


def test_spot_light_tracks_camera_after_movement():
    camera = Camera()
    camera.update(1.0, InputState(move_forward=True))
    uniforms = lighting_uniforms(camera)
    assert np.allclose(uniforms["spotLight.position"], camera.position)
    assert np.allclose(uniforms["spotLight.direction"], camera.front)


def test_point_lights_in_order():
    uniforms = lighting_uniforms(Camera())
    for index, position in enumerate(POINT_LIGHT_POSITIONS):
        assert uniforms[f"pointLights[{index}].position"] == pytest.approx(position)


def test_directional_light_direction():
    uniforms = lighting_uniforms(Camera())
    assert uniforms["dirLight.direction"] == pytest.approx((-0.2, -1.0, -0.3))


def test_uniform_count():
    uniforms = lighting_uniforms(Camera())
    assert len(uniforms) == 4 + 7 * len(POINT_LIGHT_POSITIONS) + 10


def test_attenuation_constants_are_one():
    uniforms = lighting_uniforms(Camera())
    constants = [v for k, v in uniforms.items() if k.endswith(".constant")]
    assert len(constants) == len(POINT_LIGHT_POSITIONS) + 1
    assert all(value == 1.0 for value in constants)


def test_spot_cutoffs():
    uniforms = lighting_uniforms(Camera())
    assert uniforms["spotLight.cutOff"] == pytest.approx(math.cos(math.radians(12.5)))
    assert uniforms["spotLight.outerCutOff"] < uniforms["spotLight.cutOff"]


def test_default_model_path_uses_root(monkeypatch):
    monkeypatch.setenv("LOGL_ROOT_PATH", "/assets-root")
    assert Renderer().model_path == "/assets-root/" + DEFAULT_MODEL


def test_explicit_model_path_kept():
    assert Renderer("models/cube.obj").model_path == "models/cube.obj"


def test_render_before_init_raises():
    with pytest.raises(RuntimeError):
        Renderer("models/cube.obj").render(Camera())


def test_render_after_shutdown_raises():
    renderer = Renderer("models/cube.obj")
    renderer.shutdown()
    assert renderer.model is None
    with pytest.raises(RuntimeError):
        renderer.render(Camera())