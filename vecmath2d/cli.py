"""Command line runner evaluating a single Vector2 operation."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from random import Random
from typing import Any, Callable, Sequence

from . import config
from .math.vec2 import Vector2


@dataclass(frozen=True)
class OperationSpec:
    # "v" for a vector operand, "s" for a scalar operand.
    operands: str
    run: Callable[..., Any]
    help: str


OPERATIONS: dict[str, OperationSpec] = {
    "add": OperationSpec("vv", lambda a, b: a.add(b), "a + b"),
    "sub": OperationSpec("vv", lambda a, b: a.sub(b), "a - b"),
    "neg": OperationSpec("v", lambda a: a.neg(), "-a"),
    "scale": OperationSpec("vs", lambda a, s: a.scale(s), "a * s"),
    "prod": OperationSpec("vv", lambda a, b: a.prod(b), "component-wise product"),
    "dot": OperationSpec("vv", lambda a, b: a.dot(b), "dot product"),
    "cross": OperationSpec("vv", lambda a, b: a.cross(b), "2D cross product"),
    "perp": OperationSpec("v", lambda a: a.perp(), "rotate 90 degrees counter-clockwise"),
    "project-to": OperationSpec("vv", lambda a, b: a.project_to(b), "projection of a onto b"),
    "reject-from": OperationSpec("vv", lambda a, b: a.reject_from(b), "rejection of a from b"),
    "reflect": OperationSpec("vv", lambda a, b: a.reflect(b), "reflection of a across b"),
    "refract": OperationSpec("vvs", lambda d, n, eta: d.refract(n, eta), "refraction of d through normal n"),
    "angle": OperationSpec("v", lambda a: a.angle(), "atan2(y, x)"),
    "norm": OperationSpec("v", lambda a: a.norm(), "Euclidean length"),
    "norm2": OperationSpec("v", lambda a: a.norm2(), "squared length"),
    "normalize": OperationSpec("v", lambda a: a.normalize(), "unit vector"),
    "distance": OperationSpec("vv", lambda a, b: a.distance(b), "distance between a and b"),
    "rotate": OperationSpec("vs", lambda a, angle: a.rotate(angle), "rotate a by an angle in radians"),
    "lerp": OperationSpec("vvs", lambda a, b, t: a.lerp(b, t), "a + t * (b - a)"),
    "equals": OperationSpec("vv", lambda a, b: a.equals(b), "tolerant equality"),
    "is-parallel": OperationSpec("vv", lambda a, b: a.is_parallel(b), "parallel test"),
    "is-unit": OperationSpec("v", lambda a: a.is_unit(), "unit length test"),
    "from-points": OperationSpec("vv", Vector2.from_points, "displacement from a to b"),
    "from-barycentric": OperationSpec(
        "vvvss",
        Vector2.from_barycentric,
        "point for barycentric (u, v) over triangle abc",
    ),
}


def parse_vector(text: str) -> Vector2:
    """Parse ``x,y`` strictly; the CLI rejects input the library would coerce."""
    parts = text.split(config.CLI_PAIR_SEPARATOR)
    if len(parts) != 2:
        raise ValueError(f"Expected a vector written as x{config.CLI_PAIR_SEPARATOR}y, got {text!r}.")
    try:
        return Vector2(float(parts[0]), float(parts[1]))
    except ValueError as exc:
        raise ValueError(f"Invalid vector coordinates: {text!r}") from exc


def parse_scalar(text: str) -> float:
    try:
        return float(text)
    except ValueError as exc:
        raise ValueError(f"Invalid scalar: {text!r}") from exc


def format_result(value: Any) -> str:
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Vector2):
        return str(value)
    return repr(float(value))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vecmath2d",
        description="Evaluate a 2D vector operation. Vectors are written as x,y.",
        epilog="Operations: " + ", ".join(f"{name} ({spec.help})" for name, spec in OPERATIONS.items()),
    )
    parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED, help="Seed used by the random operation.")
    parser.add_argument("operation", choices=sorted([*OPERATIONS, "random"]), help="Operation to evaluate.")
    parser.add_argument("operands", nargs=argparse.REMAINDER, help="Vector (x,y) and scalar operands.")
    return parser


def _parse_operands(kinds: str, raw: Sequence[str]) -> list[Any]:
    if len(raw) != len(kinds):
        raise ValueError(f"Expected {len(kinds)} operand(s), got {len(raw)}.")
    return [parse_vector(text) if kind == "v" else parse_scalar(text) for kind, text in zip(kinds, raw)]


def run(operation: str, operands: Sequence[str], seed: int | None = None) -> str:
    """Evaluate ``operation`` on textual operands and return the printed form."""
    if operation == "random":
        if operands:
            raise ValueError("random takes no operands.")
        return format_result(Vector2.random(Random(seed)))
    spec = OPERATIONS.get(operation)
    if spec is None:
        raise ValueError(f"Unknown operation: {operation}")
    values = _parse_operands(spec.operands, operands)
    return format_result(spec.run(*values))


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        output = run(args.operation, args.operands, seed=args.seed)
    except ValueError as exc:
        parser.error(str(exc))
    print(output)
    return 0
