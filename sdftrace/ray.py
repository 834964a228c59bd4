"""Ray data structure used by the sphere tracer."""

from __future__ import annotations

from .errors import DegenerateVectorError
from .vector import Vector3, VectorLike


class Ray:
    """A ray with an origin point and a unit direction.

    Attributes
    ----------
    origin:
        Current position.  Marching advances it in place, so a ray belongs
        to the traversal that created it.
    direction:
        Unit direction, normalized at construction.

    Raises
    ------
    DegenerateVectorError
        If *direction* has zero length.
    """

    __slots__ = ("origin", "direction")

    def __init__(self, origin: VectorLike, direction: VectorLike) -> None:
        direction = Vector3.of(direction)
        if direction.norm() == 0.0:
            raise DegenerateVectorError("ray direction must be non-zero")
        self.origin = Vector3.of(origin)
        self.direction = direction.normalized()

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"

    def clone(self) -> Ray:
        ray = Ray.__new__(Ray)
        ray.origin = self.origin.clone()
        ray.direction = self.direction.clone()
        return ray

    def at(self, t: float) -> Vector3:
        """Point ``origin + t * direction``."""
        return self.origin + self.direction * t

    def advance(self, distance: float) -> None:
        """Move the origin *distance* units along the direction."""
        self.origin = self.at(distance)
