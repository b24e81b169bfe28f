"""Command line entrypoint: build two vectors and print an operation result."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import config
from .logging_utils import VecLogger
from .settings_schema import load_last_used, save_last_used
from .vec import Vec2, Vec3, VectorMathError

OPERATIONS = (
    "add",
    "sub",
    "dot",
    "cross",
    "angle",
    "lerp",
    "lerp-clamped",
    "normalize",
    "magnitude",
    "almost-equals",
)


def _vec(values):
    if len(values) == 2:
        return Vec2(*values)
    return Vec3(*values)


def _format(result, precision: int) -> str:
    if isinstance(result, bool):
        return str(result).lower()
    if hasattr(result, "to_tuple"):
        return "(" + ", ".join("%.*g" % (precision, c) for c in result.to_tuple()) + ")"
    return "%.*g" % (precision, result)


def run(op: str, a, b, t: float, tolerance: float):
    if op == "add":
        return a + b
    if op == "sub":
        return a - b
    if op == "dot":
        return a.dot(b)
    if op == "cross":
        return a.cross(b)
    if op == "angle":
        return a.angle(b)
    if op == "lerp":
        return a.lerp(b, t)
    if op == "lerp-clamped":
        return a.lerp_clamped(b, t)
    if op == "normalize":
        return a.normalized()
    if op == "magnitude":
        return a.magnitude()
    # op is one of OPERATIONS; argparse enforces the choices
    return a.almost_equals(b, tolerance)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mikelib", description="Vector math on two operands")
    parser.add_argument("--a", nargs="+", type=float, metavar="C", help="first vector (2 or 3 components)")
    parser.add_argument("--b", nargs="+", type=float, metavar="C", help="second vector (2 or 3 components)")
    parser.add_argument("--op", choices=OPERATIONS, default=config.DEFAULT_OPERATION, help="operation to run")
    parser.add_argument("--t", type=float, default=config.DEFAULT_T, help="interpolation factor")
    parser.add_argument("--tolerance", type=float, default=None, help="per-axis tolerance for almost-equals")
    parser.add_argument("--precision", type=int, default=None, help="significant digits in output")
    parser.add_argument("--settings", type=Path, default=None, help="settings JSON path")
    parser.add_argument("--save-settings", action="store_true", help="store precision and tolerance as last used")
    parser.add_argument("--log", type=Path, default=None, help="write the operation to a CSV file")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = load_last_used(args.settings)
    if args.precision is not None:
        settings.precision = args.precision
    if args.tolerance is not None:
        settings.tolerance = args.tolerance

    a_values = args.a if args.a is not None else list(config.DEFAULT_A)
    b_values = args.b if args.b is not None else list(config.DEFAULT_B)
    for name, values in (("--a", a_values), ("--b", b_values)):
        if len(values) not in (2, 3):
            parser.error(f"{name} takes 2 or 3 components, got {len(values)}")
    if len(a_values) != len(b_values):
        parser.error("--a and --b must have the same number of components")
    if args.op == "cross" and len(a_values) != 3:
        parser.error("cross needs 3D vectors")

    a = _vec(a_values)
    b = _vec(b_values)

    try:
        result = run(args.op, a, b, args.t, settings.tolerance)
    except VectorMathError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(_format(result, settings.precision))

    if args.log is not None:
        t = args.t if args.op in ("lerp", "lerp-clamped") else None
        operand_b = None if args.op in ("normalize", "magnitude") else b
        with VecLogger(args.log) as logger:
            logger.log(args.op, a, operand_b, result, t=t)

    if args.save_settings:
        save_last_used(settings, args.settings)

    return 0


if __name__ == "__main__":
    sys.exit(main())
