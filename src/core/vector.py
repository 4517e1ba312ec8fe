# core/vector.py
import math


def _component(value) -> float:
    if isinstance(value, (str, bytes)):
        raise TypeError(f"Vector3 components must be numbers, got {type(value).__name__}")
    return float(value)


class Vector3:
    """
    An immutable 3D vector used for points, directions and RGB colors.

    Every operation returns a new Vector3; instances are never modified in place.
    Arithmetic is available both as operators (a + b, v * k, -v) and as the
    module-level functions below (add, scale, negate, ...).
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, "x", _component(x))
        object.__setattr__(self, "y", _component(y))
        object.__setattr__(self, "z", _component(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vector3 is immutable")

    def __delattr__(self, name):
        raise AttributeError("Vector3 is immutable")

    def __reduce__(self):
        return (Vector3, (self.x, self.y, self.z))

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    def __add__(self, other: "Vector3") -> "Vector3":
        return add(self, other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return sub(self, other)

    def __mul__(self, other):
        # Vector operand means the component-wise (Hadamard) product.
        if isinstance(other, Vector3):
            return mul(self, other)
        if isinstance(other, (int, float)):
            return scale(self, other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        if isinstance(other, (int, float)):
            return scale(self, other)
        return NotImplemented

    def __truediv__(self, t: float) -> "Vector3":
        return div(self, t)

    def __neg__(self) -> "Vector3":
        return negate(self)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def negate(self) -> "Vector3":
        return negate(self)

    def dot(self, other: "Vector3") -> float:
        return dot(self, other)

    def cross(self, other: "Vector3") -> "Vector3":
        return cross(self, other)

    def length_squared(self) -> float:
        return length_squared(self)

    def length(self) -> float:
        return length(self)

    def unit(self) -> "Vector3":
        return unit(self)

    def format(self) -> str:
        return format_vector(self)

    def __str__(self) -> str:
        return f"{self.x!r} {self.y!r} {self.z!r}"

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"


# Semantic aliases; same type, same behaviour.
Point3 = Vector3
Color = Vector3


def zero() -> Vector3:
    return Vector3(0.0, 0.0, 0.0)


def make(x: float, y: float, z: float) -> Vector3:
    return Vector3(x, y, z)


def negate(v: Vector3) -> Vector3:
    return Vector3(-v.x, -v.y, -v.z)


def length_squared(v: Vector3) -> float:
    """
    Squared magnitude. Cheaper than length() when only comparing sizes
    or testing for zero.
    """
    return v.x * v.x + v.y * v.y + v.z * v.z


def length(v: Vector3) -> float:
    return math.sqrt(length_squared(v))


def add(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x + b.x, a.y + b.y, a.z + b.z)


def sub(a: Vector3, b: Vector3) -> Vector3:
    """
    Subtract b from a component-wise.
    """
    return Vector3(a.x - b.x, a.y - b.y, a.z - b.z)


def mul(a: Vector3, b: Vector3) -> Vector3:
    """
    Multiply two vectors component-wise (Hadamard product).
    This is NOT the dot or cross product; it is used to attenuate colors.
    """
    return Vector3(a.x * b.x, a.y * b.y, a.z * b.z)


def scale(v: Vector3, k: float) -> Vector3:
    return Vector3(k * v.x, k * v.y, k * v.z)


def div(v: Vector3, k: float) -> Vector3:
    """
    Divide by a scalar.

    Raises:
        ZeroDivisionError: if k is zero. Callers must pass a non-zero divisor.
    """
    if k == 0:
        raise ZeroDivisionError("cannot divide Vector3 by zero")
    return scale(v, 1.0 / k)


def dot(a: Vector3, b: Vector3) -> float:
    """
    Returns 0 if a and b are perpendicular, a positive value if they point
    the same general way and a negative value if they point opposite ways.
    """
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector3, b: Vector3) -> Vector3:
    """
    Returns a vector perpendicular to both inputs (right-hand rule).
    """
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x
    )


def unit(v: Vector3) -> Vector3:
    """
    Returns a unit-length vector pointing the same way as v.
    Raises ZeroDivisionError for the zero vector.
    """
    return div(v, length(v))


def format_vector(v: Vector3) -> str:
    # Debug output only; pixel lines are written by core.color.
    return f"{v}\n"
