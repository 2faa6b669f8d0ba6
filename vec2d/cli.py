"""Command-line calculator over the :class:`Vector2` operations.

Usage:
    vec2d magnitude 3 4
    vec2d --angle-unit degrees rotate 1 0 90
    vec2d rotate-over 2 0 1 0 3.14159
    vec2d point-towards 1 0 0 1

Vectors are passed as two numbers. Angles are read and printed in the
configured ``ANGLE_UNIT``.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Callable, Dict, Sequence, Union

from .config import settings
from .vector import Vector2

logger = logging.getLogger("vec2d.cli")

Result = Union[Vector2, float, bool]


def _initialise_logger() -> logging.Logger:
    package_logger = logging.getLogger("vec2d")
    level_name = str(settings.DEBUG_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.WARNING)
    package_logger.setLevel(level)
    if package_logger.handlers:
        return package_logger

    if settings.DEBUG_LOG_FILE:
        log_dir = settings.LOG_DIRECTORY
        if not isinstance(log_dir, Path):
            log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_dir / settings.DEBUG_LOG_FILE, mode="w", encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)
    package_logger.propagate = False

    package_logger.debug("Logging initialised at level %s", level_name)
    return package_logger


def _angle_in(value: float) -> float:
    if settings.ANGLE_UNIT == "degrees":
        return math.radians(value)
    return value


def _angle_out(value: float) -> float:
    if settings.ANGLE_UNIT == "degrees":
        return math.degrees(value)
    return value


def _vector(parsed: argparse.Namespace) -> Vector2:
    return Vector2.from_pair(parsed.vector)


def _magnitude(parsed: argparse.Namespace) -> float:
    return _vector(parsed).magnitude()


def _direction(parsed: argparse.Namespace) -> float:
    return _angle_out(_vector(parsed).direction())


def _normalize(parsed: argparse.Namespace) -> Vector2:
    return _vector(parsed).normalize()


def _scale(parsed: argparse.Namespace) -> Vector2:
    return _vector(parsed).scale(parsed.factor)


def _dot(parsed: argparse.Namespace) -> float:
    return _vector(parsed).dot(parsed.other)


def _cross(parsed: argparse.Namespace) -> float:
    return _vector(parsed).cross(parsed.other)


def _add(parsed: argparse.Namespace) -> Vector2:
    return _vector(parsed) + parsed.other


def _sub(parsed: argparse.Namespace) -> Vector2:
    return _vector(parsed) - parsed.other


def _equals(parsed: argparse.Namespace) -> bool:
    return _vector(parsed) == parsed.other


def _set_direction(parsed: argparse.Namespace) -> Vector2:
    return _vector(parsed).set_direction(_angle_in(parsed.angle))


def _rotate(parsed: argparse.Namespace) -> Vector2:
    return _vector(parsed).rotate(_angle_in(parsed.angle))


def _rotate_over(parsed: argparse.Namespace) -> Vector2:
    return _vector(parsed).rotate_over(parsed.origin, _angle_in(parsed.angle))


def _point_towards(parsed: argparse.Namespace) -> Vector2:
    return _vector(parsed).point_towards(parsed.target)


def _add_pair(parser: argparse.ArgumentParser, name: str, help_text: str) -> None:
    parser.add_argument(name, type=float, nargs=2, help=help_text)


# name -> (handler, extra pair arguments, extra scalar argument, help)
_COMMANDS: Dict[str, tuple[Callable[[argparse.Namespace], Result], Sequence[str], str | None, str]] = {
    "magnitude": (_magnitude, (), None, "Euclidean length"),
    "direction": (_direction, (), None, "Angle from the positive x-axis"),
    "normalize": (_normalize, (), None, "Scale to unit length"),
    "scale": (_scale, (), "factor", "Multiply both components by a scalar"),
    "dot": (_dot, ("other",), None, "Dot product"),
    "cross": (_cross, ("other",), None, "Scalar 2D cross product"),
    "add": (_add, ("other",), None, "Component-wise sum"),
    "sub": (_sub, ("other",), None, "Component-wise difference"),
    "equals": (_equals, ("other",), None, "Tolerant equality"),
    "set-direction": (_set_direction, (), "angle", "Keep the magnitude, replace the direction"),
    "rotate": (_rotate, (), "angle", "Rotate about the origin"),
    "rotate-over": (_rotate_over, ("origin",), "angle", "Rotate about a pivot point"),
    "point-towards": (_point_towards, ("target",), None, "Aim along the bearing to a target point"),
}


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vec2d", description="Evaluate 2D vector operations")
    settings.add_runtime_arguments(parser)
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for name, (handler, pairs, scalar, help_text) in _COMMANDS.items():
        sub = subparsers.add_parser(name, help=help_text)
        _add_pair(sub, "vector", "Vector components")
        for pair_name in pairs:
            _add_pair(sub, pair_name, f"{pair_name.capitalize()} components")
        if scalar is not None:
            sub.add_argument(scalar, type=float, help=scalar.capitalize())
        sub.set_defaults(handler=handler)
    return parser


def _format(result: Result) -> str:
    if isinstance(result, bool):
        return str(result)
    if isinstance(result, Vector2):
        return str(result)
    return repr(float(result))


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_arg_parser()
    parsed = parser.parse_args(args=argv)
    try:
        runtime_settings = settings.settings_from_namespace(parsed)
    except (ValueError, OSError) as error:
        logger.error("Invalid settings: %s", error)
        return 1
    settings.apply_runtime_settings(runtime_settings)
    _initialise_logger()

    logger.debug("Running %s with %s", parsed.command, vars(parsed))
    result = parsed.handler(parsed)
    print(_format(result))
    return 0
