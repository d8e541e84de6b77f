"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
Ray(t) = origin + t * direction
"""

from __future__ import annotations
from .vec3 import Vec3, Point3


class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction.
    Any real t is valid; negative values give points behind the origin.
    The direction is stored as given, normalizing it is up to the caller.
    The accessors return copies, so a ray never changes after construction.
    """

    __slots__ = ('_origin', '_direction')

    def __init__(self, origin: Point3 = None, direction: Vec3 = None):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray (zero if omitted)
            direction: The direction vector (zero if omitted)
        """
        # Copies, so later in-place ops on the arguments don't move the ray
        self._origin = origin.copy() if origin is not None else Vec3()
        self._direction = direction.copy() if direction is not None else Vec3()

    @property
    def origin(self) -> Point3:
        return self._origin.copy()

    @property
    def direction(self) -> Vec3:
        return self._direction.copy()

    def at(self, t: float) -> Point3:
        """Get the point along the ray at parameter t.

        Args:
            t: The parameter value (distance if direction is normalized)

        Returns:
            The point at origin + t * direction
        """
        return self._origin + t * self._direction

    __call__ = at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self._origin == other._origin and self._direction == other._direction

    __hash__ = None

    def __repr__(self) -> str:
        return f"Ray(origin={self._origin}, direction={self._direction})"
