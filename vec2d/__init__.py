"""2D vector arithmetic with coordinate-pair interoperability."""

from __future__ import annotations

from .config import settings as settings
from .vector import Pair, Vector2, VectorLike, as_vector2

__all__ = ["Pair", "Vector2", "VectorLike", "as_vector2", "settings"]
