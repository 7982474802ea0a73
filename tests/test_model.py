import pytest

from voxelgame.model import Model, ModelLoadError, parse_mtl, parse_obj

TRIANGLE = """\
v 0 0 0
v 1 0 0
v 0 1 0
vt 0.25 0.75
vn 0 0 1
f 1/1/1 2/1/1 3/1/1
"""

MATERIALS = """\
newmtl first
map_Kd diffuse.png
map_Ks specular.png
newmtl second
map_Kd diffuse.png
"""

TWO_MATERIALS = """\
mtllib scene.mtl
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
usemtl first
f 1 2 3 4
usemtl second
f 1 2 3
"""


class RecordingLoader:
    def __init__(self):
        self.calls = []

    def __call__(self, path, directory):
        self.calls.append((path, directory))
        return len(self.calls)


def test_parse_obj_counts_and_zero_based_indices():
    scene = parse_obj(TRIANGLE)
    assert len(scene.positions) == 3
    assert len(scene.tex_coords) == 1
    assert len(scene.normals) == 1
    assert len(scene.groups) == 1
    assert scene.groups[0].faces == [[(0, 0, 0), (1, 0, 0), (2, 0, 0)]]


def test_negative_indices_match_positive_ones():
    positive = parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
    negative = parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\n")
    assert positive.groups[0].faces == negative.groups[0].faces


def test_corner_without_texture_coordinate():
    scene = parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nvn 0 0 1\nf 1//1 2//1 3//1\n")
    assert all(tex is None for _, tex, _ in scene.groups[0].faces[0])


def test_index_out_of_range_raises():
    with pytest.raises(ModelLoadError):
        parse_obj("v 0 0 0\nf 1 2 3\n")


def test_face_with_two_corners_raises():
    with pytest.raises(ModelLoadError):
        parse_obj("v 0 0 0\nv 1 0 0\nf 1 2\n")


def test_invalid_number_raises():
    with pytest.raises(ModelLoadError):
        parse_obj("v 0 zero 0\n")


def test_usemtl_splits_groups():
    scene = parse_obj(TWO_MATERIALS)
    assert [group.material for group in scene.groups] == ["first", "second"]
    assert scene.material_libraries == ["scene.mtl"]


def test_parse_mtl_collects_maps():
    materials = parse_mtl(MATERIALS)
    assert set(materials) == {"first", "second"}
    assert materials["first"].diffuse_maps == ["diffuse.png"]
    assert materials["first"].specular_maps == ["specular.png"]
    assert materials["second"].specular_maps == []


def test_model_flips_uvs_and_keeps_normals(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text(TRIANGLE)
    model = Model(str(path), RecordingLoader())
    assert len(model.meshes) == 1
    mesh = model.meshes[0]
    assert mesh.indices == [0, 1, 2]
    assert mesh.vertices[0].tex_coords == pytest.approx((0.25, 0.25))
    assert mesh.vertices[1].position == (1.0, 0.0, 0.0)
    assert mesh.vertices[2].normal == (0.0, 0.0, 1.0)


def test_model_triangulates_and_shares_textures(tmp_path):
    (tmp_path / "scene.obj").write_text(TWO_MATERIALS)
    (tmp_path / "scene.mtl").write_text(MATERIALS)
    loader = RecordingLoader()
    model = Model(str(tmp_path / "scene.obj"), loader)

    assert model.directory == str(tmp_path)
    quad, triangle = model.meshes
    assert len(quad.vertices) == 6
    assert quad.indices == list(range(6))
    assert len(triangle.vertices) == 3

    assert [t.type for t in quad.textures] == ["texture_diffuse", "texture_specular"]
    assert triangle.textures[0] == quad.textures[0]
    assert loader.calls == [
        ("diffuse.png", str(tmp_path)),
        ("specular.png", str(tmp_path)),
    ]
    assert [t.path for t in model.textures_loaded] == ["diffuse.png", "specular.png"]


def test_missing_material_library_gives_untextured_meshes(tmp_path):
    (tmp_path / "scene.obj").write_text(TWO_MATERIALS)
    loader = RecordingLoader()
    model = Model(str(tmp_path / "scene.obj"), loader)
    assert all(mesh.textures == [] for mesh in model.meshes)
    assert loader.calls == []


def test_missing_model_file_raises(tmp_path):
    with pytest.raises(ModelLoadError):
        Model(str(tmp_path / "absent.obj"), RecordingLoader())


def test_model_without_faces_raises(tmp_path):
    path = tmp_path / "points.obj"
    path.write_text("v 0 0 0\nv 1 1 1\n")
    with pytest.raises(ModelLoadError):
        Model(str(path), RecordingLoader())