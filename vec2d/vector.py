"""Mutable 2D vector with tolerant equality and coordinate-pair interop.

Tuples and lists of two numbers are interchangeable with :class:`Vector2`
in either operand order. A :class:`pygame.math.Vector2` is accepted as an
argument or right-hand operand, but as a left operand pygame's own operators
run: ``==`` then uses pygame's epsilon and ``+``/``-`` return a pygame vector.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from .config import settings

logger = logging.getLogger("vec2d.vector")

Pair = Tuple[float, float]
VectorLike = Union["Vector2", Iterable[float]]


def pair_components(value: VectorLike) -> Pair:
    if isinstance(value, Vector2):
        return value.x, value.y
    if isinstance(value, (str, bytes)):
        raise TypeError(f"Expected a vector or coordinate pair, got {type(value).__name__}")
    try:
        x, y = value
        return float(x), float(y)
    except (TypeError, ValueError) as error:
        raise TypeError(f"Expected a vector or coordinate pair, got {value!r}") from error


def as_vector2(value: VectorLike) -> "Vector2":
    """Return ``value`` as a :class:`Vector2`.

    Vectors are returned as-is; coordinate pairs are converted losslessly.
    Raises :class:`TypeError` for anything that is not a 2-item numeric
    iterable.
    """

    if isinstance(value, Vector2):
        return value
    return Vector2(*pair_components(value))


@dataclass(eq=False, repr=False)
class Vector2:
    """2D vector whose mutators work in place and return ``self``."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    # Construction ---------------------------------------------------------
    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def from_pair(cls, pair: VectorLike) -> "Vector2":
        return cls(*pair_components(pair))

    def to_pair(self) -> Pair:
        return (self.x, self.y)

    def copy(self) -> "Vector2":
        return type(self)(self.x, self.y)

    # In-place mutators ----------------------------------------------------
    def add(self, other: VectorLike) -> "Vector2":
        ox, oy = pair_components(other)
        self.x += ox
        self.y += oy
        return self

    def sub(self, other: VectorLike) -> "Vector2":
        ox, oy = pair_components(other)
        self.x -= ox
        self.y -= oy
        return self

    def scale(self, value: float) -> "Vector2":
        self.x *= value
        self.y *= value
        return self

    def normalize(self) -> "Vector2":
        """Scale to unit length; a zero vector is left untouched."""

        mag = self.magnitude()
        if mag == 0:
            logger.debug("normalize() on a zero vector left it unchanged")
            return self
        return self.scale(1.0 / mag)

    def set_direction(self, rad: float) -> "Vector2":
        """Point along ``rad`` radians while keeping the current magnitude.

        A zero vector has no magnitude to keep and is left untouched.
        """

        mag = self.magnitude()
        if mag == 0:
            logger.debug("set_direction(%s) on a zero vector left it unchanged", rad)
            return self
        self.x = math.cos(rad) * mag
        self.y = math.sin(rad) * mag
        return self

    def rotate(self, rad: float) -> "Vector2":
        """Rotate ``rad`` radians counter-clockwise about the origin."""

        return self.set_direction(self.direction() + rad)

    def rotate_over(self, origin: VectorLike, rad: float) -> "Vector2":
        """Rotate ``rad`` radians counter-clockwise about ``origin``."""

        pivot = pair_components(origin)
        self.sub(pivot)
        self.rotate(rad)
        return self.add(pivot)

    def point_towards(self, target: VectorLike) -> "Vector2":
        """Aim along the bearing from this position to ``target``.

        Only the direction changes; the magnitude is kept.
        """

        bearing = (as_vector2(target) - self).direction()
        return self.set_direction(bearing)

    # Pure computations ----------------------------------------------------
    def dot(self, other: VectorLike) -> float:
        ox, oy = pair_components(other)
        return self.x * ox + self.y * oy

    def cross(self, other: VectorLike) -> float:
        """2D cross product returning a scalar (z-component)."""
        ox, oy = pair_components(other)
        return self.x * oy - self.y * ox

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def direction(self) -> float:
        """Angle in radians from the positive x-axis, ``0.0`` for a zero vector."""

        # atan2 of signed zeros can return +/-pi, so the zero case is explicit.
        if self.x == 0 and self.y == 0:
            return 0.0
        return math.atan2(self.y, self.x)

    def isclose(self, other: VectorLike, tolerance: float | None = None) -> bool:
        """Component-wise comparison within an absolute tolerance.

        ``tolerance`` defaults to the active ``EQUALITY_EPSILON`` setting.
        """

        eps = settings.EQUALITY_EPSILON if tolerance is None else tolerance
        ox, oy = pair_components(other)
        return abs(self.x - ox) < eps and abs(self.y - oy) < eps

    # Operators ------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        try:
            return self.isclose(other)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: VectorLike) -> "Vector2":
        try:
            ox, oy = pair_components(other)
        except TypeError:
            return NotImplemented
        return Vector2(self.x + ox, self.y + oy)

    def __radd__(self, other: VectorLike) -> "Vector2":
        try:
            ox, oy = pair_components(other)
        except TypeError:
            return NotImplemented
        return Vector2(ox + self.x, oy + self.y)

    def __sub__(self, other: VectorLike) -> "Vector2":
        try:
            ox, oy = pair_components(other)
        except TypeError:
            return NotImplemented
        return Vector2(self.x - ox, self.y - oy)

    def __rsub__(self, other: VectorLike) -> "Vector2":
        try:
            ox, oy = pair_components(other)
        except TypeError:
            return NotImplemented
        return Vector2(ox - self.x, oy - self.y)

    def __iadd__(self, other: VectorLike) -> "Vector2":
        try:
            return self.add(other)
        except TypeError:
            return NotImplemented

    def __isub__(self, other: VectorLike) -> "Vector2":
        try:
            return self.sub(other)
        except TypeError:
            return NotImplemented

    def __mul__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    # Sequence protocol ----------------------------------------------------
    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int) -> float:
        return self.to_pair()[index]

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"


__all__ = ["Pair", "Vector2", "VectorLike", "as_vector2", "pair_components"]
