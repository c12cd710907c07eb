"""Scalar conventions, physical constants and the quaternion type."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

SCALAR = np.float64
"""Floating point type used for all vectors and matrices."""

FrameID = int
SceneID = int

GZ = -9.81
"""Gravitational acceleration along the world z axis in m/s^2."""

GVEC = np.array([0.0, 0.0, GZ])
GVEC.setflags(write=False)


@dataclass(frozen=True)
class Quaternion:
    """Hamilton quaternion stored as (w, x, y, z)."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        for name in ("w", "x", "y", "z"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_rotation_matrix(cls, matrix) -> Quaternion:
        """Build the quaternion of a 3x3 rotation matrix."""
        m = np.asarray(matrix, dtype=SCALAR)
        if m.shape != (3, 3):
            raise ValueError(f"expected a 3x3 matrix, got shape {m.shape}")
        trace = m[0, 0] + m[1, 1] + m[2, 2]
        if trace > 0.0:
            s = math.sqrt(trace + 1.0)
            w = 0.5 * s
            s = 0.5 / s
            return cls(
                w,
                (m[2, 1] - m[1, 2]) * s,
                (m[0, 2] - m[2, 0]) * s,
                (m[1, 0] - m[0, 1]) * s,
            )
        i = 1 if m[1, 1] > m[0, 0] else 0
        if m[2, 2] > m[i, i]:
            i = 2
        j = (i + 1) % 3
        k = (j + 1) % 3
        s = math.sqrt(m[i, i] - m[j, j] - m[k, k] + 1.0)
        vec = [0.0, 0.0, 0.0]
        vec[i] = 0.5 * s
        s = 0.5 / s
        w = (m[k, j] - m[j, k]) * s
        vec[j] = (m[j, i] + m[i, j]) * s
        vec[k] = (m[k, i] + m[i, k]) * s
        return cls(w, *vec)

    def to_rotation_matrix(self) -> np.ndarray:
        """Rotation matrix of this (assumed unit) quaternion."""
        w, x, y, z = self.w, self.x, self.y, self.z
        tx, ty, tz = 2.0 * x, 2.0 * y, 2.0 * z
        twx, twy, twz = tx * w, ty * w, tz * w
        txx, txy, txz = tx * x, ty * x, tz * x
        tyy, tyz, tzz = ty * y, tz * y, tz * z
        return np.array(
            [
                [1.0 - (tyy + tzz), txy - twz, txz + twy],
                [txy + twz, 1.0 - (txx + tzz), tyz - twx],
                [txz - twy, tyz + twx, 1.0 - (txx + tyy)],
            ],
            dtype=SCALAR,
        )

    def vec(self) -> np.ndarray:
        """Imaginary part (x, y, z)."""
        return np.array([self.x, self.y, self.z], dtype=SCALAR)

    def coeffs(self) -> np.ndarray:
        """Coefficients in storage order (x, y, z, w)."""
        return np.array([self.x, self.y, self.z, self.w], dtype=SCALAR)

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def norm(self) -> float:
        return math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)

    def normalized(self) -> Quaternion:
        n = self.norm()
        if n == 0.0:
            raise ZeroDivisionError("cannot normalize a zero quaternion")
        return Quaternion(self.w / n, self.x / n, self.y / n, self.z / n)

    def __mul__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z
        return Quaternion(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )