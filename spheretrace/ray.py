"""Rays with an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from spheretrace.vector import Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line ``origin + t * direction``."""

    origin: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)

    def at(self, t: float) -> Vec3:
        """The point reached after travelling ``t`` along the direction."""
        return self.origin + self.direction * t