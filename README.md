# voxelgame

A small real-time 3D engine built on pyglet, numpy and Pillow. It opens a
1280×720 window with an OpenGL 4.1 core context, loads a Wavefront OBJ model
with its MTL materials and textures, and draws it lit by a directional light,
four point lights and a spotlight that follows the camera.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
voxelgame
```

The command runs `voxelgame.engine.main`. If the window, a shader or the model
cannot be set up, it prints the error to standard error and exits with status 1;
otherwise it runs until the window is closed and exits with status 0.

Controls:

- `W` / `S` – move forward / backward
- `A` / `D` – strafe left / right
- mouse – look around (the mouse is captured; pitch is clamped to ±89°)
- scroll wheel – zoom, between a field of view of 65° and 10°
- `Esc` – quit

## Where assets are found

Asset paths are resolved by `voxelgame.filesystem.get_path`. When the
`LOGL_ROOT_PATH` environment variable is set, a path is taken relative to it
(`<root>/<path>`); otherwise it is prefixed with `../../../`. The default model
is `game/assets/objects/backpack/backpack.obj`, resolved that way.

Shaders are read from `../shaders/`, relative to the working directory:
`shader.vs`, `shader.fs`, `depthShader.vs`, `depthShader.fs` and
`outlineShader.fs`. The lighting shader is expected to declare the uniforms
`dirLight.*`, `pointLights[0..3].*`, `spotLight.*`, `material.*`,
`projection`, `view` and `model`; uniforms a shader does not use are ignored.

## What is not included

The package ships no shader files and no model or texture assets; they must be
provided at the paths above. Only Wavefront OBJ models (with MTL files for
`map_Kd` and `map_Ks` textures) can be loaded. There is no voxel world, terrain
or game logic: the engine draws one model and a camera to fly around it.

## Using the pieces

The engine's parts can be used on their own:

- `voxelgame.input` – `InputState` and `InputHandler`. `process_input` takes a
  function that tells whether a key (`"W"`, `"A"`, `"S"`, `"D"`, `"ESCAPE"`)
  is held and returns `True` when the exit key is down; `mouse_callback` and
  `scroll_callback` update yaw, pitch and zoom.
- `voxelgame.camera` – `Camera` with `update` and `view_matrix`, plus the
  matrix helpers `look_at`, `perspective`, `translate` and `scale`.
- `voxelgame.filesystem` – `root_directory` and `get_path`.
- `voxelgame.shader` – `Shader` (with `use`, `set_bool`, `set_int`,
  `set_float`, `set_vec3`, `set_mat4`), `read_shader_sources` and
  `ShaderError`.
- `voxelgame.texture` – `load_image`, `pixel_format` and `texture_from_file`.
- `voxelgame.mesh` – `Vertex`, `Texture`, `Mesh` (with `vertex_data` and
  `draw`) and `texture_uniform_names`.
- `voxelgame.model` – `Model`, `parse_obj`, `parse_mtl` and `ModelLoadError`.
  `Model` accepts a `texture_loader` so models can be loaded without a GL
  context.
- `voxelgame.window` – `Window` and `WindowError`.
- `voxelgame.renderer` – `Renderer` and `lighting_uniforms`.
- `voxelgame.engine` – `Engine` and `main`.

```python
from voxelgame.camera import Camera
from voxelgame.input import InputHandler

handler = InputHandler()
handler.process_input(lambda key: key == "W")
camera = Camera()
camera.update(0.016, handler.state)
print(camera.position, camera.view_matrix())
```