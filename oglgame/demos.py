"""Demo games: a coloured triangle, a pulsing quad and a spinning quad."""

from __future__ import annotations

import argparse
import math
import struct
import sys

from .game import Game
from .geometry import Mat4, Vec4
from .prerequisites import (
    FLOAT_SIZE,
    ShaderProgramDesc,
    TriangleType,
    UniformBufferDesc,
    VertexAttribute,
    VertexBufferDesc,
)

VERTEX_SHADER_PATH = "Assets/Shaders/BasicShader.vert"
FRAGMENT_SHADER_PATH = "Assets/Shaders/BasicShader.frag"

_POSITION_AND_COLOR = (VertexAttribute(3), VertexAttribute(3))

TRIANGLE_VERTICES = (
    -0.5, -0.5, 0.0,  1.0, 0.0, 0.0,
    0.5, -0.5, 0.0,   0.0, 1.0, 0.0,
    0.0, 0.5, 0.0,    0.0, 0.0, 1.0,
)

QUAD_VERTICES = (
    -0.5, -0.5, 0.0,  1.0, 0.0, 0.0,
    -0.5, 0.5, 0.0,   0.0, 1.0, 0.0,
    0.5, -0.5, 0.0,   0.0, 0.0, 1.0,
    0.5, 0.5, 0.0,    1.0, 1.0, 0.0,
)

CLEAR_COLOR = Vec4(0, 0, 0, 1)


def pulse_scale(phase: float) -> float:
    """The scale a pulsing shape has at ``phase``: ``|sin(phase)|``."""
    return abs(math.sin(phase))


def world_matrix(angle: float) -> Mat4:
    """World transform: unit scale, rotations about Z, Y, X by ``angle``, no translation."""
    world = Mat4()
    steps = (
        lambda m: m.set_scale(Vec4(1, 1, 1, 1)),
        lambda m: m.set_rotation_z(angle),
        lambda m: m.set_rotation_y(angle),
        lambda m: m.set_rotation_x(angle),
        lambda m: m.set_translation(Vec4(0, 0, 0, 1)),
    )
    for step in steps:
        temp = Mat4()
        step(temp)
        world *= temp
    return world


def _shader_desc() -> ShaderProgramDesc:
    return ShaderProgramDesc(VERTEX_SHADER_PATH, FRAGMENT_SHADER_PATH)


class TriangleGame(Game):
    """Draws a single triangle with a colour at each corner."""

    def on_create(self) -> None:
        self.vao = self._own(
            self.engine.create_vertex_array_object(
                VertexBufferDesc(
                    vertices=TRIANGLE_VERTICES,
                    vertex_size=FLOAT_SIZE * 6,
                    list_size=3,
                    attributes=_POSITION_AND_COLOR,
                )
            )
        )
        self.shader = self._own(self.engine.create_shader_program(_shader_desc()))

    def on_update(self) -> None:
        self.engine.clear(CLEAR_COLOR)
        self.engine.set_vertex_array_object(self.vao)
        self.engine.set_shader_program(self.shader)
        self.engine.draw_triangles(
            TriangleType.TRIANGLE_LIST, self.vao.vertex_buffer_size, 0
        )
        self.display.present(False)


class AnimationGame(Game):
    """Draws a quad whose size pulses with time through a uniform buffer."""

    SCALE_START = 0.0
    SCALE_RATE = 3.14
    UNIFORM_SIZE = FLOAT_SIZE

    def on_create(self) -> None:
        self.scale = self.SCALE_START
        self.vao = self._own(
            self.engine.create_vertex_array_object(
                VertexBufferDesc(
                    vertices=QUAD_VERTICES,
                    vertex_size=FLOAT_SIZE * 6,
                    list_size=4,
                    attributes=_POSITION_AND_COLOR,
                )
            )
        )
        self.uniform = self._own(
            self.engine.create_uniform_buffer(UniformBufferDesc(self.UNIFORM_SIZE))
        )
        self.shader = self._own(self.engine.create_shader_program(_shader_desc()))
        self.shader.set_uniform_buffer_slot("UniformData", 0)

    def on_update(self) -> None:
        self._advance()
        self.uniform.set_data(struct.pack("f", pulse_scale(self.scale)))
        self._draw()

    def _advance(self) -> None:
        self.scale += self.SCALE_RATE * self.clock.tick()

    def _draw(self) -> None:
        self.engine.clear(CLEAR_COLOR)
        self.engine.set_vertex_array_object(self.vao)
        self.engine.set_uniform_buffer(self.uniform, 0)
        self.engine.set_shader_program(self.shader)
        self.engine.draw_triangles(
            TriangleType.TRIANGLE_STRIP, self.vao.vertex_buffer_size, 0
        )
        self.display.present(False)


class MatrixGame(AnimationGame):
    """Draws a quad spinning about all three axes through a world matrix."""

    SCALE_START = -3.0
    SCALE_RATE = 1.14
    UNIFORM_SIZE = FLOAT_SIZE * 16

    def on_update(self) -> None:
        self._advance()
        self.uniform.set_data(world_matrix(self.scale))
        self._draw()


DEMOS = {
    "triangle": TriangleGame,
    "animation": AnimationGame,
    "matrix": MatrixGame,
}


def main(argv: list[str] | None = None) -> int:
    """Run a demo; return 0 on success and -1 if the game failed."""
    parser = argparse.ArgumentParser(prog="oglgame", description="Run an OpenGL demo.")
    parser.add_argument("--demo", choices=sorted(DEMOS), default="matrix")
    args = parser.parse_args(argv)
    try:
        DEMOS[args.demo]().run()
    except Exception as exc:  # noqa: BLE001 - report any failure and exit
        print(exc, file=sys.stderr)
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())