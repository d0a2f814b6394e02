"""Geometry module for shape primitives.

Components:
    sphere: Sphere primitive with ray-sphere intersection

Ray-object intersection follows the pattern:
    t = intersect_ray_sphere(ray, sphere)        # float or None
    record = hit_sphere(ray, sphere)             # HitRecord or None
"""

from .sphere import (
    HitRecord,
    Sphere,
    hit_sphere,
    intersect_ray_sphere,
    intersect_transformed_sphere,
    solve_quadratic,
)

__all__ = [
    "Sphere",
    "HitRecord",
    "hit_sphere",
    "intersect_ray_sphere",
    "intersect_transformed_sphere",
    "solve_quadratic",
]
