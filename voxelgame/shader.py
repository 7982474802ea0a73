"""GLSL shader programs built from source files."""

from __future__ import annotations

from pathlib import Path

import numpy as np


class ShaderError(Exception):
    """A shader could not be read, compiled or linked."""


def _read(path) -> str:
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise ShaderError(f"shader file not successfully read: {path}") from exc


def read_shader_sources(vertex_path, fragment_path, geometry_path=None):
    """Read the stage sources; the geometry source is None when not given."""
    vertex_code = _read(vertex_path)
    fragment_code = _read(fragment_path)
    geometry_code = _read(geometry_path) if geometry_path is not None else None
    return vertex_code, fragment_code, geometry_code


class Shader:
    """A linked program of vertex, fragment and optional geometry shaders."""

    def __init__(self, vertex_path, fragment_path, geometry_path=None) -> None:
        vertex_code, fragment_code, geometry_code = read_shader_sources(
            vertex_path, fragment_path, geometry_path
        )

        from pyglet.graphics import shader as gl_shader

        self._missing_uniform = gl_shader.ShaderException
        stages = [("vertex", vertex_code), ("fragment", fragment_code)]
        if geometry_code is not None:
            stages.append(("geometry", geometry_code))

        compiled = []
        try:
            for kind, code in stages:
                compiled.append(gl_shader.Shader(code, kind))
            self._program = gl_shader.ShaderProgram(*compiled)
        except gl_shader.ShaderException as exc:
            raise ShaderError(str(exc)) from exc
        finally:
            # Stages are no longer needed once linked into the program.
            for stage in compiled:
                stage.delete()

    @property
    def id(self) -> int:
        return self._program.id

    def use(self) -> None:
        """Make this program the active one."""
        self._program.use()

    def _set(self, name: str, value) -> None:
        try:
            self._program[name] = value
        except self._missing_uniform:
            # Like an unknown uniform location, unused names are ignored.
            pass

    def set_bool(self, name: str, value: bool) -> None:
        self._set(name, int(bool(value)))

    def set_int(self, name: str, value: int) -> None:
        self._set(name, int(value))

    def set_float(self, name: str, value: float) -> None:
        self._set(name, float(value))

    def set_vec3(self, name: str, *args) -> None:
        """Set a vec3 from one three-element vector or three floats."""
        if len(args) == 1:
            values = tuple(float(v) for v in np.asarray(args[0]).ravel())
        elif len(args) == 3:
            values = tuple(float(v) for v in args)
        else:
            raise TypeError("set_vec3 takes a vector or three components")
        if len(values) != 3:
            raise ValueError("a vec3 needs exactly three components")
        self._set(name, values)

    def set_mat4(self, name: str, matrix) -> None:
        """Set a mat4 uniform from a 4x4 row-major matrix."""
        array = np.asarray(matrix, dtype=np.float64)
        if array.shape != (4, 4):
            raise ValueError("a mat4 needs a 4x4 matrix")
        self._set(name, tuple(float(v) for v in array.flatten(order="F")))