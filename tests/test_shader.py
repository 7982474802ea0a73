import pytest

from voxelgame.shader import Shader, ShaderError, read_shader_sources


@pytest.fixture
def sources(tmp_path):
    vertex = tmp_path / "shader.vs"
    fragment = tmp_path / "shader.fs"
    geometry = tmp_path / "shader.gs"
    vertex.write_text("void main() { gl_Position = vec4(0.0); }\n")
    fragment.write_text("out vec4 c; void main() { c = vec4(1.0); }\n")
    geometry.write_text("layout(points) in; void main() {}\n")
    return vertex, fragment, geometry


def test_reads_vertex_and_fragment(sources):
    vertex, fragment, _ = sources
    vertex_code, fragment_code, geometry_code = read_shader_sources(vertex, fragment)
    assert vertex_code == vertex.read_text()
    assert fragment_code == fragment.read_text()
    assert geometry_code is None


def test_reads_geometry_when_given(sources):
    vertex, fragment, geometry = sources
    _, _, geometry_code = read_shader_sources(vertex, fragment, geometry)
    assert geometry_code == geometry.read_text()


def test_missing_vertex_file_raises(sources, tmp_path):
    _, fragment, _ = sources
    with pytest.raises(ShaderError):
        read_shader_sources(tmp_path / "absent.vs", fragment)


def test_missing_geometry_file_raises(sources, tmp_path):
    vertex, fragment, _ = sources
    with pytest.raises(ShaderError):
        read_shader_sources(vertex, fragment, tmp_path / "absent.gs")


def test_shader_with_missing_file_raises(tmp_path):
    with pytest.raises(ShaderError):
        Shader(tmp_path / "absent.vs", tmp_path / "absent.fs")