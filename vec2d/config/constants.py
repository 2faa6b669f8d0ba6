"""Constant values for the vec2d package."""

from __future__ import annotations

# Machine epsilon of an IEEE-754 single-precision float.
FLOAT32_EPSILON = 1.1920929e-07

ANGLE_UNITS = ("radians", "degrees")

DEFAULTS = {
    "EQUALITY_EPSILON": FLOAT32_EPSILON,
    "ANGLE_UNIT": "radians",
    "DEBUG_LOG_LEVEL": "WARNING",
}
