"""Two-component vector used for positions, velocities and directions."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Optional, Tuple


@dataclass(slots=True)
class Vector2:
    """A mutable vector with an x and a y component."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vector2"]
    ONE: ClassVar["Vector2"]
    UNIT_X: ClassVar["Vector2"]
    UNIT_Y: ClassVar["Vector2"]

    def set(self, x: float, y: float) -> None:
        """Set both components."""
        self.x = x
        self.y = y

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> None:
        """Scale the vector to unit length in place; the zero vector is left alone."""
        if not self.is_zero():
            size = self.length()
            self.x /= size
            self.y /= size

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        return self.x * other.y - self.y * other.x

    @staticmethod
    def distance(first: Vector2, second: Vector2) -> float:
        return math.sqrt(Vector2.distance_squared(first, second))

    @staticmethod
    def distance_squared(first: Vector2, second: Vector2) -> float:
        return (second.x - first.x) ** 2 + (second.y - first.y) ** 2

    @staticmethod
    def lerp(start: Vector2, end: Vector2, value: float) -> Vector2:
        """Interpolate linearly; values outside [0, 1] clamp to the ends."""
        if value < 0:
            return start.copy()
        if value > 1:
            return end.copy()
        return start + (end - start) * value

    @staticmethod
    def random(normalize: bool = False, rng: Optional[_random.Random] = None) -> Vector2:
        """Create a vector with components in [-1, 1), optionally of unit length."""
        source = rng if rng is not None else _random
        result = Vector2(source.random() * 2 - 1, source.random() * 2 - 1)
        if normalize:
            result.normalize()
        return result

    def left(self) -> Vector2:
        """The left-hand orthogonal vector."""
        return Vector2(-self.y, self.x)

    def right(self) -> Vector2:
        """The right-hand orthogonal vector."""
        return Vector2(self.y, -self.x)

    def to_point(self) -> Tuple[int, int]:
        """Integer point with each component truncated toward zero."""
        return int(self.x), int(self.y)

    @classmethod
    def parse(cls, text: str) -> Vector2:
        """Read a vector from two whitespace-separated numbers."""
        parts = text.split()
        if len(parts) != 2:
            raise ValueError(f"expected two numbers, got {text!r}")
        return cls(float(parts[0]), float(parts[1]))

    def copy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iadd__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x /= scalar
        self.y /= scalar
        return self

    def __str__(self) -> str:
        return f"{{ {self.x:g}, {self.y:g} }}"


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.UNIT_X = Vector2(1.0, 0.0)
Vector2.UNIT_Y = Vector2(0.0, 1.0)