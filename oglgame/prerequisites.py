"""Shared descriptors, enumerations, errors and log helpers for the engine."""

from __future__ import annotations

import sys
from array import array
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Sequence

FLOAT_SIZE = 4


class EngineError(RuntimeError):
    """Raised when the engine cannot carry out a request."""

    def __init__(self, message: str) -> None:
        self.detail = message
        super().__init__(f"OGL3D Error: {message}")


@dataclass(frozen=True)
class VertexAttribute:
    """One attribute of a vertex: how many floats it spans."""

    num_elements: int = 0


@dataclass
class VertexBufferDesc:
    """Interleaved float vertex data and its attribute layout.

    ``vertex_size`` is the stride of one vertex in bytes and ``list_size``
    the number of vertices.
    """

    vertices: Sequence[float] = ()
    vertex_size: int = 0
    list_size: int = 0
    attributes: Sequence[VertexAttribute] = field(default_factory=tuple)

    def attribute_offsets(self) -> tuple[int, ...]:
        """Byte offset of each attribute inside a vertex.

        The first attribute starts at zero; every later one starts right
        after the attribute preceding it, measured by that attribute's size.
        """
        return tuple(
            0 if previous is None else previous.num_elements * FLOAT_SIZE
            for previous, _ in zip((None, *self.attributes), self.attributes)
        )

    def vertex_bytes(self) -> bytes:
        """The vertex data packed as 32-bit floats, ``vertex_size * list_size`` bytes long."""
        packed = array("f", self.vertices).tobytes()
        wanted = self.vertex_size * self.list_size
        if len(packed) < wanted:
            raise EngineError(
                f"VertexBufferDesc | vertices hold {len(packed)} bytes, {wanted} required"
            )
        return packed[:wanted]


@dataclass(frozen=True)
class ShaderProgramDesc:
    """Paths of the vertex and fragment shader sources."""

    vertex_shader_path: str | Path
    fragment_shader_path: str | Path


@dataclass(frozen=True)
class UniformBufferDesc:
    """Size in bytes of a uniform buffer."""

    size: int = 0


class TriangleType(IntEnum):
    """How a vertex list is assembled into triangles."""

    TRIANGLE_LIST = 0
    TRIANGLE_STRIP = 1


class ShaderType(IntEnum):
    """Stage a shader belongs to."""

    VERTEX = 0
    FRAGMENT = 1


def warn(message: object) -> None:
    """Write a warning line to standard error."""
    print(f"OGL3D Warning: {message}", file=sys.stderr)


def info(message: object) -> None:
    """Write an informational line to standard error."""
    print(f"OGL3D Info: {message}", file=sys.stderr)