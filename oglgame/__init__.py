"""A small OpenGL 3D game framework: window, game loop, GPU resources, matrix math and demos."""

__version__ = "0.1.0"
__all__ = [
    "prerequisites",
    "geometry",
    "vertex_array",
    "uniform_buffer",
    "shader_program",
    "engine",
    "window",
    "game",
    "demos",
]