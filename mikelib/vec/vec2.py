"""2D vector value type."""

from __future__ import annotations

from dataclasses import dataclass
from math import acos, hypot
from numbers import Real

from .. import config
from .errors import VectorDivideByZeroError, ZeroLengthVectorError, require_same_type
from .scalar import clamp, clamp01, lerp, within


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D vector.

    Every operation returns a new Vec2; the operands are never modified.
    Components are not validated, so inf and NaN pass through arithmetic
    unchanged.
    """

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vec2":
        return cls(0.0, 0.0)

    def __add__(self, other: "Vec2") -> "Vec2":
        if type(other) is not type(self):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if type(other) is not type(self):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vec2":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vec2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vec2":
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise VectorDivideByZeroError(f"Cannot divide {self} by zero.")
        return Vec2(self.x / scalar, self.y / scalar)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def dot(self, other: "Vec2") -> float:
        require_same_type(self, other)
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        return hypot(self.x, self.y)

    def normalized(self) -> "Vec2":
        mag = self.magnitude()
        if mag == 0:
            raise ZeroLengthVectorError("Cannot normalize a zero-length vector.")
        return Vec2(self.x / mag, self.y / mag)

    def angle(self, other: "Vec2") -> float:
        """Angle between the two vectors in radians, in [0, pi]."""
        require_same_type(self, other)
        mag_a = self.magnitude()
        if mag_a == 0:
            raise ZeroLengthVectorError("First vector has zero length, cannot compute angle.")
        mag_b = other.magnitude()
        if mag_b == 0:
            raise ZeroLengthVectorError("Second vector has zero length, cannot compute angle.")
        return acos(clamp(self.dot(other) / (mag_a * mag_b), -1.0, 1.0))

    def lerp(self, other: "Vec2", t: float) -> "Vec2":
        """Interpolate towards other by factor t.

        t is not restricted: values outside [0, 1] extrapolate along the
        line through both vectors. Use lerp_clamped to stay on the segment.
        """
        require_same_type(self, other)
        return Vec2(lerp(self.x, other.x, t), lerp(self.y, other.y, t))

    def lerp_clamped(self, other: "Vec2", t: float) -> "Vec2":
        return self.lerp(other, clamp01(t))

    def almost_equals(self, other: "Vec2", tolerance: float = config.DEFAULT_TOLERANCE) -> bool:
        """Per-axis comparison; each |delta| must be <= tolerance."""
        require_same_type(self, other)
        return within(self.x, other.x, tolerance) and within(self.y, other.y, tolerance)
