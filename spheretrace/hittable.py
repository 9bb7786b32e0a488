"""Intersection records and the interface of objects rays can hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from spheretrace.ray import Ray
from spheretrace.vector import Vec3


@dataclass(frozen=True, slots=True)
class HitRecord:
    """Where and how a ray met a surface."""

    point: Vec3
    normal: Vec3
    t: float
    front_face: bool

    @classmethod
    def with_face_normal(
        cls, ray: Ray, point: Vec3, t: float, outward_normal: Vec3
    ) -> HitRecord:
        """Build a record whose normal always opposes the incoming ray."""
        front_face = 0.0 > ray.direction.dot(outward_normal)
        normal = outward_normal if front_face else -outward_normal
        return cls(point=point, normal=normal, t=t, front_face=front_face)


class Hittable(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, ray_tmin: float, ray_tmax: float) -> HitRecord | None:
        """Return the nearest hit with ``ray_tmin < t < ray_tmax``, or None."""