"""A mutable two-dimensional vector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T", int, float)


@dataclass
class Vector2D(Generic[T]):
    """A point or displacement that can be updated in place."""

    x: T = 0
    y: T = 0

    def __iadd__(self, other: Vector2D[T]) -> Vector2D[T]:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2D[T]) -> Vector2D[T]:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: T) -> Vector2D[T]:
        self.x *= scalar
        self.y *= scalar
        return self