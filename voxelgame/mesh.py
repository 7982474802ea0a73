"""Indexed triangle meshes with their material textures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

import numpy as np

SHININESS = 32.0
MATERIAL_PREFIX = "material."

_FLOAT_SIZE = 4
_FLOATS_PER_VERTEX = 8
_VERTEX_STRIDE = _FLOATS_PER_VERTEX * _FLOAT_SIZE
# (attribute location, component count, byte offset) for position, normal, uv.
_ATTRIBUTES = ((0, 3, 0), (1, 3, 3 * _FLOAT_SIZE), (2, 2, 6 * _FLOAT_SIZE))


@dataclass(frozen=True)
class Vertex:
    """One mesh vertex: position, normal and texture coordinates."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)
    tex_coords: tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class Texture:
    """A loaded GL texture and the material slot it fills."""

    id: int
    type: str
    path: str


def texture_uniform_names(textures: Iterable[Texture]) -> list[str]:
    """Sampler uniform name for each texture, in texture-unit order."""
    return [MATERIAL_PREFIX + texture.type for texture in textures]


@dataclass
class Mesh:
    """Vertices, triangle indices and textures, uploaded to the GPU on first draw."""

    vertices: list[Vertex]
    indices: list[int]
    textures: list[Texture] = field(default_factory=list)
    _vao: Any = field(default=None, init=False, repr=False, compare=False)
    _buffers: tuple = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.vertices = list(self.vertices)
        self.indices = list(self.indices)
        self.textures = list(self.textures)

    def vertex_data(self) -> np.ndarray:
        """Interleaved float32 vertex array, one row of eight floats per vertex."""
        rows = [
            (*vertex.position, *vertex.normal, *vertex.tex_coords)
            for vertex in self.vertices
        ]
        return np.array(rows, dtype=np.float32).reshape(-1, _FLOATS_PER_VERTEX)

    def _index_data(self) -> np.ndarray:
        return np.array(self.indices, dtype=np.uint32)

    def _setup(self) -> None:
        from pyglet import gl

        vao = gl.GLuint()
        vbo = gl.GLuint()
        ebo = gl.GLuint()
        gl.glGenVertexArrays(1, vao)
        gl.glGenBuffers(1, vbo)
        gl.glGenBuffers(1, ebo)

        vertex_data = np.ascontiguousarray(self.vertex_data())
        index_data = np.ascontiguousarray(self._index_data())

        gl.glBindVertexArray(vao)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER,
            vertex_data.nbytes,
            vertex_data.ctypes.data,
            gl.GL_STATIC_DRAW,
        )
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, ebo)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER,
            index_data.nbytes,
            index_data.ctypes.data,
            gl.GL_STATIC_DRAW,
        )

        for location, size, offset in _ATTRIBUTES:
            gl.glEnableVertexAttribArray(location)
            gl.glVertexAttribPointer(
                location, size, gl.GL_FLOAT, gl.GL_FALSE, _VERTEX_STRIDE, offset
            )

        gl.glBindVertexArray(0)
        self._vao = vao
        self._buffers = (vbo, ebo, vertex_data, index_data)

    def draw(self, shader) -> None:
        """Bind the textures to consecutive units and draw the triangles."""
        from pyglet import gl

        if self._vao is None:
            self._setup()

        names = texture_uniform_names(self.textures)
        for unit, (texture, name) in enumerate(zip(self.textures, names)):
            gl.glActiveTexture(gl.GL_TEXTURE0 + unit)
            shader.set_int(name, unit)
            shader.set_float(MATERIAL_PREFIX + "shininess", SHININESS)
            gl.glBindTexture(gl.GL_TEXTURE_2D, texture.id)
        gl.glActiveTexture(gl.GL_TEXTURE0)

        gl.glBindVertexArray(self._vao)
        gl.glDrawElements(gl.GL_TRIANGLES, len(self.indices), gl.GL_UNSIGNED_INT, 0)
        gl.glBindVertexArray(0)