"""Colour helpers: clamping, gamma and conversion to bytes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from spheretrace.vector import Vec3

Color = Vec3


def clamp(x: float, min_val: float, max_val: float) -> float:
    """Limit ``x`` to the range ``[min_val, max_val]``."""
    if x < min_val:
        return min_val
    if x > max_val:
        return max_val
    return x


@dataclass(frozen=True, slots=True)
class Interval:
    """A closed range of real numbers."""

    min: float
    max: float

    def clamp(self, x: float) -> float:
        return clamp(x, self.min, self.max)


def linear_to_gamma(linear_component: float) -> float:
    """Gamma-2 transform; non-positive values map to zero."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def color_to_bytes(pixel_color: Color, samples_per_pixel: int) -> bytes:
    """Average accumulated samples, gamma-correct and return RGB bytes."""
    if samples_per_pixel <= 0:
        raise ValueError("samples_per_pixel must be positive")
    scale = 1.0 / samples_per_pixel
    return bytes(
        int(256 * clamp(linear_to_gamma(component * scale), 0.0, 0.999))
        for component in pixel_color
    )