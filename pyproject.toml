[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oglgame"
version = "0.1.0"
description = "A small OpenGL 3D game framework with shaders, uniform buffers and matrix transforms"
requires-python = ">=3.10"
keywords = ["opengl", "game", "3d", "shaders", "graphics", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oglgame = "oglgame.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["oglgame"]

[tool.pytest.ini_options]
addopts = "-ra"
