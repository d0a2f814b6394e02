"""Affine transforms for placing a primitive in the world.

An AffineTransform is a 3x3 linear part M plus a translation T, standing in
for the homogeneous matrix

    | M  T |
    | 0  1 |

Points are carried as M p + T, directions as M d (no translation), and
surface normals by the inverse transpose of M. Because the map is affine,
a ray mapped through it keeps its parameterisation: if p = o + t d then
A(p) = A(o) + t M d, so a t found in one frame is valid in the other.

Rotation angles are in radians and follow the right-hand rule.

Example:
    >>> from raysphere.core.transform import AffineTransform
    >>> from raysphere.core.vector import Vector3
    >>> place = AffineTransform.translate(0, 0, 5) @ AffineTransform.uniform_scale(2)
    >>> place.apply_point(Vector3(0, 0, 1))
    Vector3(x=0.0, y=0.0, z=7.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from raysphere.core.matrix import Matrix3, Matrix4
from raysphere.core.ray import Ray
from raysphere.core.vector import Vector3


@dataclass(frozen=True)
class AffineTransform:
    """An immutable affine transform.

    Attributes:
        linear: The 3x3 linear part.
        translation: The translation applied to points after the linear part.
    """

    linear: Matrix3 = field(default_factory=Matrix3.identity)
    translation: Vector3 = field(default_factory=Vector3.zero)

    @classmethod
    def identity(cls) -> AffineTransform:
        return cls()

    @classmethod
    def translate(cls, x: float, y: float, z: float) -> AffineTransform:
        return cls(translation=Vector3(x, y, z))

    @classmethod
    def scale(cls, sx: float, sy: float, sz: float) -> AffineTransform:
        return cls(linear=Matrix3(np.diag([sx, sy, sz])))

    @classmethod
    def uniform_scale(cls, s: float) -> AffineTransform:
        return cls.scale(s, s, s)

    @classmethod
    def rotate_x(cls, angle: float) -> AffineTransform:
        c, s = math.cos(angle), math.sin(angle)
        return cls(linear=Matrix3([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]]))

    @classmethod
    def rotate_y(cls, angle: float) -> AffineTransform:
        c, s = math.cos(angle), math.sin(angle)
        return cls(linear=Matrix3([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]]))

    @classmethod
    def rotate_z(cls, angle: float) -> AffineTransform:
        c, s = math.cos(angle), math.sin(angle)
        return cls(linear=Matrix3([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]))

    def compose(self, other: AffineTransform) -> AffineTransform:
        """Return the transform that applies other first, then self."""
        return AffineTransform(
            linear=self.linear @ other.linear,
            translation=self.linear @ other.translation + self.translation,
        )

    def __matmul__(self, other: AffineTransform) -> AffineTransform:
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return self.compose(other)

    def inverse(self) -> AffineTransform:
        """Return the inverse transform.

        Raises:
            SingularMatrixError: If the linear part is not invertible.
        """
        inv = self.linear.inverse()
        return AffineTransform(linear=inv, translation=-(inv @ self.translation))

    def apply_point(self, p: Vector3) -> Vector3:
        return self.linear @ p + self.translation

    def apply_direction(self, d: Vector3) -> Vector3:
        return self.linear @ d

    def apply_normal(self, n: Vector3) -> Vector3:
        """Carry a surface normal. The result is not renormalized."""
        return self.linear.inverse_transpose() @ n

    def apply_ray(self, ray: Ray) -> Ray:
        return Ray(self.apply_point(ray.origin), self.apply_direction(ray.direction))

    def to_matrix4(self) -> Matrix4:
        m = np.identity(4, dtype=np.float64)
        m[:3, :3] = self.linear.to_array()
        m[:3, 3] = self.translation.to_array()
        return Matrix4(m)

    def is_close(self, other: AffineTransform, **tolerances: float) -> bool:
        if not isinstance(other, AffineTransform):
            raise TypeError(f"Cannot compare AffineTransform with {type(other).__name__}")
        return self.linear.is_close(other.linear, **tolerances) and self.translation.is_close(
            other.translation, **tolerances
        )
