"""Two-dimensional float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vec2:
    """A mutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def mul(self, m: float) -> Vec2:
        return Vec2(self.x * m, self.y * m)

    def div(self, m: float) -> Vec2:
        """Divide by a scalar; raises ZeroDivisionError when it is zero."""
        if m == 0:
            raise ZeroDivisionError("cannot divide a vector by zero")
        return Vec2(self.x / m, self.y / m)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def normalize(self) -> Vec2:
        """Return the unit vector; raises ZeroDivisionError for a zero vector."""
        return self.div(self.length())

    def copy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def __add__(self, other: Vec2) -> Vec2:
        return self.add(other)

    def __sub__(self, other: Vec2) -> Vec2:
        return self.sub(other)

    def __mul__(self, m: float) -> Vec2:
        return self.mul(m)

    __rmul__ = __mul__

    def __truediv__(self, m: float) -> Vec2:
        return self.div(m)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y