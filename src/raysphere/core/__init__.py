"""Core linear algebra module.

Components:
    vector: Vector3 and homogeneous Vector4 value types
    matrix: Matrix3 and Matrix4 backed by read-only NumPy arrays
    transform: AffineTransform (3x3 linear part plus translation)
    ray: Ray data structure
    errors: Exception hierarchy
    constants: Default intersection window and tolerances
"""

from .errors import InvalidDirectionError, RaysphereError, SingularMatrixError
from .matrix import Matrix3, Matrix4
from .ray import Ray
from .transform import AffineTransform
from .vector import Vector3, Vector4

__all__ = [
    "AffineTransform",
    "InvalidDirectionError",
    "Matrix3",
    "Matrix4",
    "Ray",
    "RaysphereError",
    "SingularMatrixError",
    "Vector3",
    "Vector4",
]
