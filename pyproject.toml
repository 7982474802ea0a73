[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelgame"
version = "0.1.0"
description = "A small OpenGL engine with a free-flying camera, lit model rendering and OBJ loading"
requires-python = ">=3.10"
keywords = ["opengl", "3d", "rendering", "camera", "game-engine", "obj", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pyglet",
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
voxelgame = "voxelgame.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["voxelgame"]

[tool.pytest.ini_options]
addopts = "-ra"
