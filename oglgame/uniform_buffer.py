"""Uniform buffers holding per-frame shader data."""

from __future__ import annotations

from typing import Any

from .prerequisites import EngineError, UniformBufferDesc


def _gl():
    from pyglet import gl

    return gl


def _as_bytes(data: Any) -> bytes:
    try:
        return memoryview(data).tobytes()
    except TypeError:
        return bytes(data.to_bytes())


class UniformBuffer:
    """A fixed-size GPU uniform buffer."""

    def __init__(self, desc: UniformBufferDesc) -> None:
        gl = _gl()
        buffer_id = gl.GLuint(0)
        gl.glGenBuffers(1, buffer_id)
        gl.glBindBuffer(gl.GL_UNIFORM_BUFFER, buffer_id.value)
        gl.glBufferData(gl.GL_UNIFORM_BUFFER, desc.size, None, gl.GL_STATIC_DRAW)
        gl.glBindBuffer(gl.GL_UNIFORM_BUFFER, 0)
        self._id = buffer_id.value
        self._size = desc.size
        self._released = False

    @property
    def id(self) -> int:
        """The buffer name."""
        return self._id

    @property
    def size(self) -> int:
        """Size of the buffer in bytes."""
        return self._size

    def set_data(self, data: Any) -> None:
        """Overwrite the whole buffer with the first ``size`` bytes of ``data``.

        ``data`` is any bytes-like object, or an object with ``to_bytes()``.
        """
        payload = _as_bytes(data)
        if len(payload) < self._size:
            raise EngineError(
                f"UniformBuffer | data holds {len(payload)} bytes, {self._size} required"
            )
        chunk = payload[: self._size]
        gl = _gl()
        gl.glBindBuffer(gl.GL_UNIFORM_BUFFER, self._id)
        gl.glBufferSubData(gl.GL_UNIFORM_BUFFER, 0, self._size, chunk)
        gl.glBindBuffer(gl.GL_UNIFORM_BUFFER, 0)

    def release(self) -> None:
        """Delete the buffer; safe to call twice."""
        if self._released:
            return
        gl = _gl()
        gl.glDeleteBuffers(1, gl.GLuint(self._id))
        self._released = True

    def __enter__(self) -> UniformBuffer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()