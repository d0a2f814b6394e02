"""Sphere primitive with ray-sphere intersection.

The intersection is found by substituting the ray into the implicit sphere
equation |p - center|^2 = radius^2:

    |oc + t d|^2 = r^2,  oc = origin - center

which expands to the quadratic a t^2 + b t + c = 0 with

    a = d . d
    b = 2 (oc . d)
    c = oc . oc - r^2

The discriminant b^2 - 4ac decides the outcome: negative means a miss, zero a
tangent ray, positive a ray that crosses the surface twice. Of the real roots
the smallest one inside [t_min, t_max] is the hit.

Roots are computed with the cancellation-free form q = -(b + sign(b) sqrt(disc)) / 2,
t = q / a and t = c / q, which keeps the near root accurate when b^2 >> 4ac.

Example:
    >>> from raysphere.core.ray import Ray
    >>> from raysphere.core.vector import Vector3
    >>> from raysphere.geometry.sphere import Sphere, intersect_ray_sphere
    >>> ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
    >>> intersect_ray_sphere(ray, Sphere(Vector3(0, 0, 0), 1.0))
    4.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from raysphere.core.constants import T_MAX, T_MIN
from raysphere.core.ray import Ray
from raysphere.core.transform import AffineTransform
from raysphere.core.vector import Vector3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere. Must be finite and non-negative;
            a zero radius is a degenerate point that no ray hits.
    """

    center: Vector3
    radius: float

    def __post_init__(self) -> None:
        radius = float(self.radius)
        if not math.isfinite(radius):
            raise ValueError(f"Sphere radius = {radius} is not finite.")
        if radius < 0.0:
            raise ValueError(f"Sphere radius = {radius} is negative.")
        object.__setattr__(self, "radius", radius)

    @classmethod
    def unit(cls) -> Sphere:
        """The unit sphere x^2 + y^2 + z^2 = 1."""
        return cls(Vector3.zero(), 1.0)

    @property
    def is_degenerate(self) -> bool:
        return self.radius == 0.0


@dataclass(frozen=True)
class HitRecord:
    """Record of a ray-sphere intersection.

    Attributes:
        t: The ray parameter at the intersection.
        point: The intersection point, origin + t * direction.
        normal: Unit surface normal, flipped so it always points against
            the incoming ray.
        front_face: True when the ray hits the outside of the sphere,
            False when it starts inside and hits the back face.
    """

    t: float
    point: Vector3
    normal: Vector3
    front_face: bool


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, ...]:
    """Return the real roots of a t^2 + b t + c = 0 in ascending order.

    Args:
        a: Quadratic coefficient. Must be non-zero.
        b: Linear coefficient.
        c: Constant term.

    Returns:
        An empty tuple when there is no real root, a single root when the
        discriminant is exactly zero, and two roots otherwise.

    Raises:
        ValueError: If a is zero.
    """
    if a == 0.0:
        raise ValueError("Quadratic coefficient a must be non-zero")

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return ()
    if discriminant == 0.0:
        return (-b / (2.0 * a),)

    sqrt_d = math.sqrt(discriminant)
    # sqrt_d > 0 here, so q cannot be zero.
    q = -0.5 * (b + math.copysign(sqrt_d, b))
    t0 = q / a
    t1 = c / q
    if t0 > t1:
        t0, t1 = t1, t0
    return (t0, t1)


def intersect_ray_sphere(
    ray: Ray,
    sphere: Sphere,
    *,
    t_min: float = T_MIN,
    t_max: float = T_MAX,
) -> float | None:
    """Find the nearest intersection of a ray with a sphere.

    The ray direction does not need to be normalized; the returned t is in
    units of the given direction, so ray.at(t) is the hit point either way.

    Args:
        ray: The ray to test.
        sphere: The sphere to test against.
        t_min: Smallest accepted ray parameter (inclusive). The default of
            0 rejects hits behind the ray origin.
        t_max: Largest accepted ray parameter (inclusive).

    Returns:
        The smallest root in [t_min, t_max], or None if the ray misses,
        every root is outside the window, or the sphere has zero radius.

    Raises:
        InvalidDirectionError: If the ray direction has zero length or
            non-finite components.
    """
    ray.validate()

    if sphere.is_degenerate:
        logger.debug("Zero-radius sphere at %s is never hit", sphere.center)
        return None

    # Solve with the direction scaled to unit max component so d . d can neither
    # underflow to 0 nor overflow to inf, then map the roots back by the same scale.
    scale = ray.direction.max_abs()
    direction = ray.direction / scale

    oc = ray.origin - sphere.center
    a = direction.dot(direction)
    b = 2.0 * oc.dot(direction)
    c = oc.dot(oc) - sphere.radius * sphere.radius

    for root in solve_quadratic(a, b, c):
        t = root / scale
        if t_min <= t <= t_max and math.isfinite(t):
            return t
    return None


def hit_sphere(
    ray: Ray,
    sphere: Sphere,
    *,
    t_min: float = T_MIN,
    t_max: float = T_MAX,
) -> HitRecord | None:
    """Intersect a ray with a sphere and describe the hit.

    Takes the same arguments and raises the same errors as
    intersect_ray_sphere().

    Returns:
        A HitRecord for the nearest hit in [t_min, t_max], or None.
    """
    t = intersect_ray_sphere(ray, sphere, t_min=t_min, t_max=t_max)
    if t is None:
        return None

    point = ray.at(t)
    outward_normal = (point - sphere.center) / sphere.radius

    # Front face: ray direction and outward normal point in opposite directions
    front_face = ray.direction.dot(outward_normal) < 0.0
    normal = outward_normal if front_face else -outward_normal
    return HitRecord(t=t, point=point, normal=normal, front_face=front_face)


def intersect_transformed_sphere(
    ray: Ray,
    sphere: Sphere,
    transform: AffineTransform,
    *,
    t_min: float = T_MIN,
    t_max: float = T_MAX,
) -> float | None:
    """Intersect a world-space ray with a sphere placed by an affine transform.

    The sphere is defined in its own frame and transform maps that frame to
    the world. The ray is pulled back through the inverse transform; since
    affine maps preserve the ray parameter, the t found in the sphere's frame
    is returned unchanged for the world-space ray. A non-uniform scale turns
    the sphere into an ellipsoid, which this handles exactly.

    Raises:
        InvalidDirectionError: If the world ray direction is unusable.
        SingularMatrixError: If the transform cannot be inverted.
    """
    ray.validate()
    local_ray = transform.inverse().apply_ray(ray)
    return intersect_ray_sphere(local_ray, sphere, t_min=t_min, t_max=t_max)
