"""Vector value types."""

from .errors import VectorDivideByZeroError, VectorMathError, ZeroLengthVectorError
from .vec2 import Vec2
from .vec3 import Vec3

__all__ = [
    "Vec2",
    "Vec3",
    "VectorDivideByZeroError",
    "VectorMathError",
    "ZeroLengthVectorError",
]
