"""Two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from .errors import DivideByZeroError


@dataclass
class Vector2:
    """A mutable 2D vector with float components."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise DivideByZeroError("division of a vector by zero")
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self):
        return Vector2(-self.x, -self.y)

    def magnitude(self):
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self):
        """Scale this vector in place to unit length."""
        length = self.magnitude()
        if length == 0:
            raise DivideByZeroError("cannot normalize a zero vector")
        self.x /= length
        self.y /= length

    def normalized(self):
        """Return a unit-length copy of this vector."""
        copy = Vector2(self.x, self.y)
        copy.normalize()
        return copy