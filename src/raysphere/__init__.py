"""Geometry kernel for ray tracing experiments.

This package provides the vector algebra and ray-sphere intersection that a
ray tracer is built on:
- Fixed-size vector and matrix value types (Vector3, Vector4, Matrix3, Matrix4)
- Affine transforms for placing a primitive in the world
- Ray-sphere intersection returning the nearest non-negative ray parameter

Subpackages:
    core: Vectors, matrices, transforms, rays and the error types
    geometry: Sphere primitive and intersection routines

Every type is an immutable value and every routine is a pure function, so
the package is safe to use from any number of threads.
"""

import logging

from .core import (
    AffineTransform,
    InvalidDirectionError,
    Matrix3,
    Matrix4,
    Ray,
    RaysphereError,
    SingularMatrixError,
    Vector3,
    Vector4,
)
from .geometry import (
    HitRecord,
    Sphere,
    hit_sphere,
    intersect_ray_sphere,
    intersect_transformed_sphere,
    solve_quadratic,
)

__version__ = "0.1.0"

# Library logging stays silent unless the application configures it.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AffineTransform",
    "HitRecord",
    "InvalidDirectionError",
    "Matrix3",
    "Matrix4",
    "Ray",
    "RaysphereError",
    "SingularMatrixError",
    "Sphere",
    "Vector3",
    "Vector4",
    "hit_sphere",
    "intersect_ray_sphere",
    "intersect_transformed_sphere",
    "solve_quadratic",
]
