"""Vertex array objects: interleaved float vertices uploaded to the GPU."""

from __future__ import annotations

from .prerequisites import EngineError, VertexBufferDesc


def _gl():
    from pyglet import gl

    return gl


class VertexArrayObject:
    """A vertex array with its vertex buffer and attribute layout."""

    def __init__(self, desc: VertexBufferDesc) -> None:
        if not desc.list_size:
            raise EngineError("VertexArrayObject | list_size is NULL")
        if not desc.vertex_size:
            raise EngineError("VertexArrayObject | vertex_size is NULL")
        if len(desc.vertices) == 0:
            raise EngineError("VertexArrayObject | vertices is NULL")

        data = desc.vertex_bytes()
        gl = _gl()

        vao = gl.GLuint(0)
        gl.glGenVertexArrays(1, vao)
        gl.glBindVertexArray(vao.value)

        vbo = gl.GLuint(0)
        gl.glGenBuffers(1, vbo)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo.value)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, len(data), data, gl.GL_STATIC_DRAW)

        layout = zip(desc.attributes, desc.attribute_offsets())
        for index, (attribute, offset) in enumerate(layout):
            gl.glVertexAttribPointer(
                index,
                attribute.num_elements,
                gl.GL_FLOAT,
                gl.GL_FALSE,
                desc.vertex_size,
                offset,
            )
            gl.glEnableVertexAttribArray(index)

        gl.glBindVertexArray(0)

        self._id = vao.value
        self._buffer_id = vbo.value
        self._desc = desc
        self._released = False

    @property
    def id(self) -> int:
        """The vertex array object name."""
        return self._id

    @property
    def buffer_id(self) -> int:
        """The name of the vertex buffer backing this array."""
        return self._buffer_id

    @property
    def vertex_buffer_size(self) -> int:
        """Number of vertices in the buffer."""
        return self._desc.list_size

    @property
    def vertex_size(self) -> int:
        """Size in bytes of one vertex."""
        return self._desc.vertex_size

    def release(self) -> None:
        """Delete the vertex buffer and the vertex array; safe to call twice."""
        if self._released:
            return
        gl = _gl()
        gl.glDeleteBuffers(1, gl.GLuint(self._buffer_id))
        gl.glDeleteVertexArrays(1, gl.GLuint(self._id))
        self._released = True

    def __enter__(self) -> VertexArrayObject:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()