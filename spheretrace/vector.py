"""Three-component vectors used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Union

Scalar = Union[int, float]


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | Scalar) -> Vec3:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> Vec3:
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: Vec3 | Scalar) -> Vec3:
        """Divide by a number, or component-wise by another vector."""
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, Real):
            inverse = 1.0 / other
            return Vec3(self.x * inverse, self.y * inverse, self.z * inverse)
        return NotImplemented

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __abs__(self) -> Vec3:
        """Component-wise absolute value."""
        return Vec3(abs(self.x), abs(self.y), abs(self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length > 0.0:
            return self / length
        return ZERO

    def distance(self, other: Vec3) -> float:
        return (self - other).length()

    def distance_squared(self, other: Vec3) -> float:
        return (self - other).length_squared()

    def lerp(self, other: Vec3, t: float) -> Vec3:
        """Linear interpolation from this vector towards ``other``."""
        return self + (other - self) * t

    def is_close(self, other: Vec3, epsilon: float) -> bool:
        """True if every component differs by less than ``epsilon``."""
        return all(abs(a - b) < epsilon for a, b in zip(self, other))

    def is_zero(self, epsilon: float) -> bool:
        return self.length_squared() < epsilon * epsilon

    def minimum(self, other: Vec3) -> Vec3:
        return Vec3(*(min(a, b) for a, b in zip(self, other)))

    def maximum(self, other: Vec3) -> Vec3:
        return Vec3(*(max(a, b) for a, b in zip(self, other)))

    def clamp(self, lower: Vec3, upper: Vec3) -> Vec3:
        return self.maximum(lower).minimum(upper)

    def reflect(self, normal: Vec3) -> Vec3:
        return self - normal * (2.0 * self.dot(normal))

    def project(self, onto: Vec3) -> Vec3:
        """Projection of this vector onto ``onto``; zero if ``onto`` is zero."""
        length_sq = onto.length_squared()
        if length_sq > 0.0:
            return onto * (self.dot(onto) / length_sq)
        return ZERO


ZERO = Vec3(0.0, 0.0, 0.0)
ONE = Vec3(1.0, 1.0, 1.0)
UP = Vec3(0.0, 1.0, 0.0)
DOWN = Vec3(0.0, -1.0, 0.0)
LEFT = Vec3(-1.0, 0.0, 0.0)
RIGHT = Vec3(1.0, 0.0, 0.0)
FORWARD = Vec3(0.0, 0.0, 1.0)
BACK = Vec3(0.0, 0.0, -1.0)