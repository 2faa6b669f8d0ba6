"""Free functions for mixing :class:`Vector2` with other pair representations.

Callers that keep points as tuples, lists or :class:`pygame.math.Vector2`
can combine them with :class:`Vector2` here without converting first. These
helpers coerce both operands themselves, so unlike the bare operators their
result does not depend on which side a pygame vector is on.
"""

from __future__ import annotations

from typing import Any, List, Tuple, Union

from pygame.math import Vector2 as PygameVector2

from .vector import Vector2, VectorLike, pair_components, as_vector2

PairTarget = Union[Vector2, PygameVector2, List[float], Tuple[float, float]]


def add(lhs: VectorLike, rhs: VectorLike) -> Vector2:
    """Return ``lhs + rhs`` as a new vector, whatever the operand types."""

    return as_vector2(lhs).copy().add(rhs)


def sub(lhs: VectorLike, rhs: VectorLike) -> Vector2:
    """Return ``lhs - rhs`` as a new vector, whatever the operand types."""

    return as_vector2(lhs).copy().sub(rhs)


def _accumulate(target: Any, dx: float, dy: float) -> PairTarget:
    if isinstance(target, Vector2):
        target.x += dx
        target.y += dy
        return target
    if isinstance(target, (list, PygameVector2)):
        if len(target) != 2:
            raise TypeError(f"Expected a coordinate pair, got {target!r}")
        target[0] += dx
        target[1] += dy
        return target
    if isinstance(target, tuple):
        x, y = pair_components(target)
        return (x + dx, y + dy)
    raise TypeError(f"Cannot accumulate into {type(target).__name__}")


def add_into(target: PairTarget, other: VectorLike) -> PairTarget:
    """Add ``other`` to ``target`` in place and return ``target``.

    A tuple ``target`` cannot change, so a new tuple is returned instead.
    """

    dx, dy = pair_components(other)
    return _accumulate(target, dx, dy)


def sub_into(target: PairTarget, other: VectorLike) -> PairTarget:
    """Subtract ``other`` from ``target`` in place and return ``target``.

    A tuple ``target`` cannot change, so a new tuple is returned instead.
    """

    dx, dy = pair_components(other)
    return _accumulate(target, -dx, -dy)


def to_pygame(value: VectorLike) -> PygameVector2:
    x, y = pair_components(value)
    return PygameVector2(x, y)


def from_pygame(value: PygameVector2) -> Vector2:
    return Vector2(value.x, value.y)


__all__ = [
    "add",
    "add_into",
    "from_pygame",
    "sub",
    "sub_into",
    "to_pygame",
]
