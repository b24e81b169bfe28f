"""Scalar helpers shared by Vec2 and Vec3."""

from __future__ import annotations


def clamp(v, lo, hi):
    return lo if v < lo else hi if v > hi else v


def clamp01(t):
    return 0.0 if t < 0.0 else 1.0 if t > 1.0 else t


def lerp(a, b, t):
    # exact at both endpoints for finite inputs
    return a * (1.0 - t) + b * t


def within(a: float, b: float, tolerance: float) -> bool:
    """True when |a - b| <= tolerance (NaN is never within)."""
    return abs(a - b) <= tolerance
