"""Spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass

from spheretrace.hittable import HitRecord, Hittable
from spheretrace.ray import Ray
from spheretrace.vector import Vec3


@dataclass
class Sphere(Hittable):
    """A sphere; negative radii are treated as zero."""

    center: Vec3
    radius: float

    def __post_init__(self) -> None:
        self.radius = max(0.0, self.radius)

    def hit(self, ray: Ray, ray_tmin: float, ray_tmax: float) -> HitRecord | None:
        oc = self.center - ray.origin
        a = ray.direction.length_squared()
        if a == 0.0 or self.radius == 0.0:
            return None
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0.0:
            return None
        sqrtd = math.sqrt(discriminant)

        root = (h - sqrtd) / a
        if root <= ray_tmin or ray_tmax <= root:
            root = (h + sqrtd) / a
            if root <= ray_tmin or ray_tmax <= root:
                return None

        point = ray.at(root)
        outward_normal = (point - self.center) / self.radius
        return HitRecord.with_face_normal(ray, point, root, outward_normal)