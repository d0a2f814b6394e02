"""Ray value type.

A ray is the set of points origin + t * direction. The direction is not
required to be unit length; everything in the kernel is written so that the
hit point does not depend on the direction's scale.

Example:
    >>> from raysphere.core.ray import Ray
    >>> from raysphere.core.vector import Vector3
    >>> ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 2))
    >>> ray.at(2.0)
    Vector3(x=0.0, y=0.0, z=-1.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from raysphere.core.errors import InvalidDirectionError
from raysphere.core.vector import Vector3


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector. Any length is accepted here; a
            zero-length direction is rejected by the operations that need
            a real direction.
    """

    origin: Vector3
    direction: Vector3

    def at(self, t: float) -> Vector3:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def validate(self) -> None:
        """Raise InvalidDirectionError unless the direction is usable."""
        if not self.direction.is_finite():
            raise InvalidDirectionError(
                f"Ray direction {self.direction} has non-finite components"
            )
        # Compare components, not length_squared(), which underflows for tiny directions
        if self.direction.max_abs() == 0.0:
            raise InvalidDirectionError("Ray direction has zero length")

    def normalized(self) -> Ray:
        """Return the same ray with a unit-length direction."""
        return Ray(self.origin, self.direction.normalize())
