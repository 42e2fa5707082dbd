"""The graphics engine: creates GPU resources and issues draw state and calls."""

from __future__ import annotations

from typing import Any

from .geometry import Rect, Vec4
from .prerequisites import (
    EngineError,
    ShaderProgramDesc,
    TriangleType,
    UniformBufferDesc,
    VertexBufferDesc,
)
from .shader_program import ShaderProgram
from .uniform_buffer import UniformBuffer
from .vertex_array import VertexArrayObject


def _load_gl() -> Any:
    try:
        from pyglet import gl
    except ImportError as exc:
        raise EngineError("GraphicsEngine - loading OpenGL failed") from exc
    return gl


class GraphicsEngine:
    """Front end to the OpenGL state machine.

    ``gl`` is the OpenGL function namespace to issue calls on; by default
    the one from pyglet is loaded on first use.
    """

    def __init__(self, gl: Any = None) -> None:
        self._gl = gl

    @property
    def gl(self) -> Any:
        """The OpenGL function namespace in use."""
        if self._gl is None:
            self._gl = _load_gl()
        return self._gl

    def create_vertex_array_object(self, desc: VertexBufferDesc) -> VertexArrayObject:
        """Upload vertex data and return its vertex array object."""
        return VertexArrayObject(desc)

    def create_uniform_buffer(self, desc: UniformBufferDesc) -> UniformBuffer:
        """Allocate a uniform buffer of ``desc.size`` bytes."""
        return UniformBuffer(desc)

    def create_shader_program(self, desc: ShaderProgramDesc) -> ShaderProgram:
        """Compile and link a shader program from the files in ``desc``."""
        return ShaderProgram(desc)

    def clear(self, color: Vec4) -> None:
        """Clear the colour buffer to ``color``."""
        gl = self.gl
        gl.glClearColor(color.x, color.y, color.z, color.w)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)

    def set_viewport(self, rect: Rect) -> None:
        """Set the viewport to ``rect``."""
        self.gl.glViewport(rect.left, rect.top, rect.width, rect.height)

    def set_vertex_array_object(self, vao: VertexArrayObject) -> None:
        """Bind ``vao`` for the following draw calls."""
        self.gl.glBindVertexArray(vao.id)

    def set_uniform_buffer(self, buffer: UniformBuffer, slot: int) -> None:
        """Bind ``buffer`` to uniform binding point ``slot``."""
        gl = self.gl
        gl.glBindBufferBase(gl.GL_UNIFORM_BUFFER, slot, buffer.id)

    def set_shader_program(self, program: ShaderProgram) -> None:
        """Use ``program`` for the following draw calls."""
        self.gl.glUseProgram(program.id)

    def draw_triangles(
        self, triangle_type: TriangleType, vertex_count: int, offset: int
    ) -> None:
        """Draw ``vertex_count`` vertices from ``offset`` as a list or a strip."""
        gl = self.gl
        modes = {
            TriangleType.TRIANGLE_LIST: gl.GL_TRIANGLES,
            TriangleType.TRIANGLE_STRIP: gl.GL_TRIANGLE_STRIP,
        }
        gl.glDrawArrays(modes[TriangleType(triangle_type)], offset, vertex_count)