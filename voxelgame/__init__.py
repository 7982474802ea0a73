"""A small OpenGL engine with a free-flying camera, OBJ loading and lit model rendering."""

__version__ = "0.1.0"