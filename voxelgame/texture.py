"""Loading image files into 2D OpenGL textures."""

from __future__ import annotations

from enum import Enum

from PIL import Image

# The renderer loads every texture flipped so UV origin matches OpenGL.
FLIP_VERTICALLY = True

_NATIVE_MODES = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}
_GREY_MODES = {"1", "I", "I;16", "F"}

# Keeps GL texture objects alive for as long as their ids are in use.
_live_textures: dict = {}


class PixelFormat(Enum):
    RED = "R"
    RGB = "RGB"
    RGBA = "RGBA"


def pixel_format(components: int) -> PixelFormat:
    """Pixel format for an image with the given number of channels."""
    formats = {1: PixelFormat.RED, 3: PixelFormat.RGB, 4: PixelFormat.RGBA}
    try:
        return formats[components]
    except KeyError:
        raise ValueError(f"unsupported channel count: {components}") from None


def _native_image(image: Image.Image) -> Image.Image:
    if image.mode in _NATIVE_MODES:
        return image
    if image.mode == "P":
        return image.convert("RGBA" if "transparency" in image.info else "RGB")
    if image.mode in _GREY_MODES:
        return image.convert("L")
    return image.convert("RGB")


def load_image(filename, flip=False):
    """Decode an image file into (width, height, components, pixel bytes)."""
    with Image.open(filename) as opened:
        image = _native_image(opened)
        if flip:
            image = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        image.load()
        return image.width, image.height, _NATIVE_MODES[image.mode], image.tobytes()


def texture_from_file(path, directory, gamma=False) -> int:
    """Load ``directory/path`` into a mipmapped, repeating texture; return its id."""
    filename = f"{directory}/{path}"
    width, height, components, data = load_image(filename, flip=FLIP_VERTICALLY)
    fmt = pixel_format(components)

    from pyglet import gl, image

    texture = image.ImageData(
        width, height, fmt.value, data, pitch=width * components
    ).get_mipmapped_texture()

    gl.glBindTexture(gl.GL_TEXTURE_2D, texture.id)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
    gl.glTexParameteri(
        gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR_MIPMAP_LINEAR
    )
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)

    _live_textures[texture.id] = texture
    return texture.id