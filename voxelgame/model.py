"""Wavefront OBJ models split into textured meshes."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, Optional

from voxelgame.mesh import Mesh, Texture, Vertex
from voxelgame.texture import texture_from_file

DIFFUSE_TYPE = "texture_diffuse"
SPECULAR_TYPE = "texture_specular"

Corner = tuple[int, Optional[int], Optional[int]]


class ModelLoadError(Exception):
    """A model file could not be read or understood."""


@dataclass
class FaceGroup:
    """Faces that share one object name and one material."""

    name: str
    material: str
    faces: list[list[Corner]] = field(default_factory=list)


@dataclass
class ObjScene:
    """The contents of an OBJ file with indices made zero-based."""

    positions: list[tuple[float, float, float]] = field(default_factory=list)
    tex_coords: list[tuple[float, float]] = field(default_factory=list)
    normals: list[tuple[float, float, float]] = field(default_factory=list)
    material_libraries: list[str] = field(default_factory=list)
    groups: list[FaceGroup] = field(default_factory=list)


@dataclass
class Material:
    """Texture maps named by one material of an MTL file."""

    name: str
    diffuse_maps: list[str] = field(default_factory=list)
    specular_maps: list[str] = field(default_factory=list)


def _floats(values: list[str], count: int, line_no: int) -> tuple[float, ...]:
    if len(values) < count:
        raise ModelLoadError(f"line {line_no}: expected {count} numbers")
    try:
        return tuple(float(v) for v in values[:count])
    except ValueError:
        raise ModelLoadError(f"line {line_no}: invalid number") from None


def _resolve(token: str, available: int, line_no: int) -> int:
    try:
        index = int(token)
    except ValueError:
        raise ModelLoadError(f"line {line_no}: invalid index {token!r}") from None
    resolved = index - 1 if index > 0 else available + index
    if index == 0 or not 0 <= resolved < available:
        raise ModelLoadError(f"line {line_no}: index {index} out of range")
    return resolved


def _parse_corner(token: str, scene: ObjScene, line_no: int) -> Corner:
    parts = token.split("/")
    if len(parts) > 3 or not parts[0]:
        raise ModelLoadError(f"line {line_no}: malformed face corner {token!r}")
    position = _resolve(parts[0], len(scene.positions), line_no)
    tex = None
    normal = None
    if len(parts) > 1 and parts[1]:
        tex = _resolve(parts[1], len(scene.tex_coords), line_no)
    if len(parts) > 2 and parts[2]:
        normal = _resolve(parts[2], len(scene.normals), line_no)
    return position, tex, normal


def parse_obj(text: str) -> ObjScene:
    """Parse OBJ text into vertex lists and material-separated face groups."""
    scene = ObjScene()
    current = FaceGroup("", "")
    scene.groups.append(current)

    def start_group(name: str, material: str) -> FaceGroup:
        if not current.faces:
            current.name = name
            current.material = material
            return current
        group = FaceGroup(name, material)
        scene.groups.append(group)
        return group

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, *args = line.split()
        rest = line[len(keyword):].strip()

        if keyword == "v":
            scene.positions.append(_floats(args, 3, line_no))
        elif keyword == "vt":
            coords = _floats(args, 1, line_no)
            u = coords[0]
            v = _floats(args, 2, line_no)[1] if len(args) > 1 else 0.0
            scene.tex_coords.append((u, v))
        elif keyword == "vn":
            scene.normals.append(_floats(args, 3, line_no))
        elif keyword == "f":
            if len(args) < 3:
                raise ModelLoadError(f"line {line_no}: a face needs three corners")
            current.faces.append(
                [_parse_corner(token, scene, line_no) for token in args]
            )
        elif keyword in ("o", "g"):
            current = start_group(rest, current.material)
        elif keyword == "usemtl":
            current = start_group(current.name, rest)
        elif keyword == "mtllib":
            scene.material_libraries.extend(args)

    scene.groups = [group for group in scene.groups if group.faces]
    return scene


def parse_mtl(text: str) -> dict[str, Material]:
    """Parse MTL text into materials keyed by name."""
    materials: dict[str, Material] = {}
    current: Optional[Material] = None
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, *args = line.split()
        keyword = keyword.lower()
        if keyword == "newmtl":
            name = line[len("newmtl"):].strip()
            current = Material(name)
            materials[name] = current
        elif current is not None and args:
            # Options may precede the file name; the file name comes last.
            if keyword == "map_kd":
                current.diffuse_maps.append(args[-1])
            elif keyword == "map_ks":
                current.specular_maps.append(args[-1])
    return materials


def _directory_of(path: str) -> str:
    head, sep, _ = path.rpartition("/")
    return head if sep else path


class Model:
    """A model file loaded as a list of meshes sharing a texture cache."""

    def __init__(
        self,
        path: str,
        texture_loader: Optional[Callable[[str, str], int]] = None,
    ) -> None:
        self.textures_loaded: list[Texture] = []
        self.meshes: list[Mesh] = []
        self._load_texture = texture_loader or texture_from_file
        self.directory = ""
        self._load(str(path))

    def draw(self, shader) -> None:
        """Draw every mesh with ``shader``."""
        for mesh in self.meshes:
            mesh.draw(shader)

    def _load(self, path: str) -> None:
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                text = handle.read()
        except OSError as exc:
            raise ModelLoadError(f"cannot read model {path}: {exc}") from exc

        scene = parse_obj(text)
        if not scene.groups:
            raise ModelLoadError(f"model {path} contains no faces")

        self.directory = _directory_of(path)
        materials = self._load_materials(scene, os.path.dirname(path))
        self.meshes = [
            self._process_group(group, scene, materials) for group in scene.groups
        ]

    @staticmethod
    def _load_materials(scene: ObjScene, base: str) -> dict[str, Material]:
        materials: dict[str, Material] = {}
        for library in scene.material_libraries:
            try:
                with open(os.path.join(base, library), encoding="utf-8") as handle:
                    materials.update(parse_mtl(handle.read()))
            except OSError:
                # A missing material library leaves the default material.
                continue
        return materials

    def _process_group(
        self, group: FaceGroup, scene: ObjScene, materials: dict[str, Material]
    ) -> Mesh:
        vertices: list[Vertex] = []
        for face in group.faces:
            first = face[0]
            for second, third in zip(face[1:], face[2:]):
                vertices.extend(
                    self._vertex(scene, corner) for corner in (first, second, third)
                )
        indices = list(range(len(vertices)))

        textures: list[Texture] = []
        material = materials.get(group.material)
        if material is not None:
            textures.extend(self._material_textures(material.diffuse_maps, DIFFUSE_TYPE))
            textures.extend(
                self._material_textures(material.specular_maps, SPECULAR_TYPE)
            )
        return Mesh(vertices, indices, textures)

    @staticmethod
    def _vertex(scene: ObjScene, corner: Corner) -> Vertex:
        position_index, tex_index, normal_index = corner
        normal = scene.normals[normal_index] if normal_index is not None else (0.0, 0.0, 0.0)
        if tex_index is not None:
            u, v = scene.tex_coords[tex_index]
            tex_coords = (u, 1.0 - v)
        else:
            tex_coords = (0.0, 0.0)
        return Vertex(scene.positions[position_index], normal, tex_coords)

    def _material_textures(self, paths: list[str], type_name: str) -> list[Texture]:
        textures: list[Texture] = []
        for path in paths:
            cached = next((t for t in self.textures_loaded if t.path == path), None)
            if cached is not None:
                textures.append(cached)
                continue
            texture = Texture(self._load_texture(path, self.directory), type_name, path)
            textures.append(texture)
            self.textures_loaded.append(texture)
        return textures