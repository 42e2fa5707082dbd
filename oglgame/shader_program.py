"""Shader programs built from vertex and fragment shader source files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .prerequisites import ShaderProgramDesc, ShaderType, info, warn

_STAGE_NAMES = {ShaderType.VERTEX: "vertex", ShaderType.FRAGMENT: "fragment"}


def _gl():
    from pyglet import gl

    return gl


def _shader_api():
    from pyglet.graphics import shader

    return shader


def read_shader_source(path: str | Path) -> str:
    """Return the text of a shader source file; raises OSError if unreadable."""
    return Path(path).read_text(encoding="utf-8")


class ShaderProgram:
    """A linked GPU program made of a vertex and a fragment shader.

    A shader that is missing or fails to compile is reported as a warning
    and left out of the program, as is a link failure.
    """

    def __init__(self, desc: ShaderProgramDesc) -> None:
        gl = _gl()
        self._id = gl.glCreateProgram()
        self._shaders: dict[ShaderType, Any] = {
            ShaderType.VERTEX: None,
            ShaderType.FRAGMENT: None,
        }
        self._released = False
        self._attach(desc.vertex_shader_path, ShaderType.VERTEX)
        self._attach(desc.fragment_shader_path, ShaderType.FRAGMENT)
        self._link()

    @property
    def id(self) -> int:
        """The program name."""
        return self._id

    @property
    def attached_shaders(self) -> dict[ShaderType, int]:
        """Shader names by stage; zero where no shader was attached."""
        return {
            stage: (shader.id if shader is not None else 0)
            for stage, shader in self._shaders.items()
        }

    def set_uniform_buffer_slot(self, name: str, slot: int) -> None:
        """Bind the uniform block called ``name`` to binding point ``slot``."""
        gl = _gl()
        encoded = name.encode("utf-8")
        block_name = (gl.GLchar * (len(encoded) + 1))()
        block_name.value = encoded
        index = gl.glGetUniformBlockIndex(self._id, block_name)
        gl.glUniformBlockBinding(self._id, index, slot)

    def release(self) -> None:
        """Detach and delete the shaders, then the program; safe to call twice."""
        if self._released:
            return
        gl = _gl()
        for shader in self._shaders.values():
            shader_id = shader.id if shader is not None else 0
            gl.glDetachShader(self._id, shader_id)
            if shader is not None:
                shader.delete()
        gl.glDeleteProgram(self._id)
        self._released = True

    def __enter__(self) -> ShaderProgram:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def _attach(self, path: str | Path, shader_type: ShaderType) -> None:
        try:
            source = read_shader_source(path)
        except OSError:
            warn(f"ShaderProgram | {path} not found")
            return

        api = _shader_api()
        try:
            shader = api.Shader(source, _STAGE_NAMES[shader_type])
        except api.ShaderException as exc:
            warn(f"ShaderProgram | {path} compiled with errors:\n{exc}")
            return

        _gl().glAttachShader(self._id, shader.id)
        self._shaders[shader_type] = shader
        info(f"ShaderProgram | {path} compiled successfully")

    def _link(self) -> None:
        gl = _gl()
        gl.glLinkProgram(self._id)

        log_length = gl.GLint(0)
        gl.glGetProgramiv(self._id, gl.GL_INFO_LOG_LENGTH, log_length)
        if log_length.value > 0:
            log = (gl.GLchar * (log_length.value + 1))()
            gl.glGetProgramInfoLog(self._id, log_length.value, None, log)
            warn(f"ShaderProgram | {log.value.decode('utf-8', errors='replace')}")