"""Vectors, rectangles and 4x4 matrices used by the renderer."""

from __future__ import annotations

import math
from array import array
from dataclasses import dataclass, field


@dataclass
class Vec4:
    """A four-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass
class Rect:
    """An integer rectangle: size first, then position."""

    width: int = 0
    height: int = 0
    left: int = 0
    top: int = 0


def _identity() -> list[list[float]]:
    return [[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)]


@dataclass
class Mat4:
    """A row-major 4x4 matrix, identity by default.

    Vectors are treated as rows, so translation lives in the last row.
    """

    mat: list[list[float]] = field(default_factory=_identity)

    def set_identity(self) -> None:
        """Reset to the identity matrix."""
        self.mat = _identity()

    def set_scale(self, scale: Vec4) -> None:
        """Write the scale factors onto the diagonal."""
        self.mat[0][0] = scale.x
        self.mat[1][1] = scale.y
        self.mat[2][2] = scale.z

    def set_translation(self, translation: Vec4) -> None:
        """Write the translation into the last row."""
        self.mat[3][0] = translation.x
        self.mat[3][1] = translation.y
        self.mat[3][2] = translation.z

    def set_rotation_x(self, x: float) -> None:
        """Write a rotation of ``x`` radians about the X axis."""
        c, s = math.cos(x), math.sin(x)
        self.mat[1][1] = c
        self.mat[1][2] = s
        self.mat[2][1] = -s
        self.mat[2][2] = c

    def set_rotation_y(self, y: float) -> None:
        """Write a rotation of ``y`` radians about the Y axis."""
        c, s = math.cos(y), math.sin(y)
        self.mat[0][0] = c
        self.mat[0][2] = -s
        self.mat[2][0] = s
        self.mat[2][2] = c

    def set_rotation_z(self, z: float) -> None:
        """Write a rotation of ``z`` radians about the Z axis."""
        c, s = math.cos(z), math.sin(z)
        self.mat[0][0] = c
        self.mat[0][1] = s
        self.mat[1][0] = -s
        self.mat[1][1] = c

    def __matmul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        columns = list(zip(*other.mat))
        return Mat4(
            [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self.mat]
        )

    def __imul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        self.mat = (self @ other).mat
        return self

    def to_bytes(self) -> bytes:
        """The matrix as 16 native 32-bit floats in row-major order."""
        return array("f", (value for row in self.mat for value in row)).tobytes()