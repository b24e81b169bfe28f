"""Vector math primitives and sequence helpers."""

from .streams import collect, drain, filter_items, fold, foreach, map_items, to_channel
from .vec import Vec2, Vec3, VectorDivideByZeroError, VectorMathError, ZeroLengthVectorError

__all__ = [
    "Vec2",
    "Vec3",
    "VectorDivideByZeroError",
    "VectorMathError",
    "ZeroLengthVectorError",
    "collect",
    "drain",
    "filter_items",
    "fold",
    "foreach",
    "map_items",
    "to_channel",
]
