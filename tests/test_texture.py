import pytest
from PIL import Image

from voxelgame.texture import (
    PixelFormat,
    load_image,
    pixel_format,
    texture_from_file,
)


@pytest.mark.parametrize(
    "components, expected",
    [(1, PixelFormat.RED), (3, PixelFormat.RGB), (4, PixelFormat.RGBA)],
)
def test_pixel_format(components, expected):
    assert pixel_format(components) is expected


@pytest.mark.parametrize("components", [0, 2, 5])
def test_pixel_format_rejects_other_counts(components):
    with pytest.raises(ValueError):
        pixel_format(components)


@pytest.fixture
def rgb_file(tmp_path):
    image = Image.new("RGB", (2, 3))
    image.putdata([(i * 10, i * 20, i * 30) for i in range(6)])
    path = tmp_path / "tex.png"
    image.save(path)
    return path, image


def test_load_image_unflipped(rgb_file):
    path, image = rgb_file
    width, height, components, data = load_image(path, flip=False)
    assert (width, height, components) == (2, 3, 3)
    assert data == image.tobytes()


def test_load_image_flipped_reverses_rows(rgb_file):
    path, image = rgb_file
    _, _, _, data = load_image(path, flip=True)
    assert data == image.transpose(Image.Transpose.FLIP_TOP_BOTTOM).tobytes()
    row = 2 * 3
    original = image.tobytes()
    assert data[:row] == original[-row:]


def test_load_grey_and_alpha_images(tmp_path):
    grey = tmp_path / "grey.png"
    Image.new("L", (4, 4), 128).save(grey)
    rgba = tmp_path / "rgba.png"
    Image.new("RGBA", (1, 1), (1, 2, 3, 4)).save(rgba)
    assert load_image(grey)[2] == 1
    _, _, components, data = load_image(rgba)
    assert components == 4
    assert data == bytes([1, 2, 3, 4])


def test_load_missing_image_raises(tmp_path):
    with pytest.raises(OSError):
        load_image(tmp_path / "absent.png")


def test_texture_from_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        texture_from_file("absent.png", str(tmp_path))