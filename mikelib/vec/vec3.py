"""3D vector value type."""

from __future__ import annotations

from dataclasses import dataclass
from math import acos, hypot
from numbers import Real

from .. import config
from .errors import VectorDivideByZeroError, ZeroLengthVectorError, require_same_type
from .scalar import clamp, clamp01, lerp, within


@dataclass(frozen=True)
class Vec3:
    """Immutable 3D vector. Same algebra as Vec2 plus the cross product."""

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> "Vec3":
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: "Vec3") -> "Vec3":
        if type(other) is not type(self):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if type(other) is not type(self):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Vec3":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise VectorDivideByZeroError(f"Cannot divide {self} by zero.")
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def dot(self, other: "Vec3") -> float:
        require_same_type(self, other)
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        require_same_type(self, other)
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        return hypot(self.x, self.y, self.z)

    def normalized(self) -> "Vec3":
        mag = self.magnitude()
        if mag == 0:
            raise ZeroLengthVectorError("Cannot normalize a zero-length vector.")
        return Vec3(self.x / mag, self.y / mag, self.z / mag)

    def angle(self, other: "Vec3") -> float:
        require_same_type(self, other)
        mag_a = self.magnitude()
        if mag_a == 0:
            raise ZeroLengthVectorError("First vector has zero length, cannot compute angle.")
        mag_b = other.magnitude()
        if mag_b == 0:
            raise ZeroLengthVectorError("Second vector has zero length, cannot compute angle.")
        return acos(clamp(self.dot(other) / (mag_a * mag_b), -1.0, 1.0))

    def lerp(self, other: "Vec3", t: float) -> "Vec3":
        require_same_type(self, other)
        return Vec3(
            lerp(self.x, other.x, t),
            lerp(self.y, other.y, t),
            lerp(self.z, other.z, t),
        )

    def lerp_clamped(self, other: "Vec3", t: float) -> "Vec3":
        """lerp with t clamped to [0, 1]."""
        return self.lerp(other, clamp01(t))

    def almost_equals(self, other: "Vec3", tolerance: float = config.DEFAULT_TOLERANCE) -> bool:
        require_same_type(self, other)
        return (
            within(self.x, other.x, tolerance)
            and within(self.y, other.y, tolerance)
            and within(self.z, other.z, tolerance)
        )
