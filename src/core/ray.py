# core/ray.py
from core.vector import Point3, Vector3, scale


class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction is stored as given; it is not normalized.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Point3, direction: Vector3):
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "direction", direction)

    def __setattr__(self, name, value):
        raise AttributeError("Ray is immutable")

    def __delattr__(self, name):
        raise AttributeError("Ray is immutable")

    def __reduce__(self):
        return (Ray, (self.origin, self.direction))

    @staticmethod
    def zero() -> "Ray":
        return Ray(Vector3.zero(), Vector3.zero())

    def at(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t: origin + t * direction.
        t = 0 gives the origin, negative t lies behind it.
        """
        return self.origin + scale(self.direction, t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.origin == other.origin and self.direction == other.direction

    def __hash__(self) -> int:
        return hash((self.origin, self.direction))

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
