"""A positionable thin-lens camera that generates primary rays."""

from __future__ import annotations

import math
import random

from spheretrace.ray import Ray
from spheretrace.vector import UP, Vec3


def random_in_unit_disk(rng: random.Random) -> Vec3:
    """A uniformly random point strictly inside the unit disk in the xy-plane."""
    while True:
        p = Vec3(rng.random() * 2.0 - 1.0, rng.random() * 2.0 - 1.0, 0.0)
        if p.length_squared() < 1.0:
            return p


class Camera:
    """A camera looking from ``position`` towards ``target`` with depth of field.

    Screen coordinates ``(s, t)`` run from 0 to 1, with ``(0, 0)`` at the
    top-left corner of the image.
    """

    def __init__(
        self,
        aspect_ratio: float,
        vertical_fov_deg: float,
        position: Vec3,
        target: Vec3,
        world_up: Vec3 = UP,
        aperture: float = 0.0,
        focal_distance: float = 1.0,
        rng: random.Random | None = None,
    ) -> None:
        self.aspect_ratio = aspect_ratio
        self.vertical_fov_deg = vertical_fov_deg
        self.position = position
        self.target = target
        self.world_up = world_up
        self.aperture = aperture
        self.focal_distance = focal_distance
        self.rng = rng if rng is not None else random.Random()

        self.lens_radius = aperture / 2.0
        self.origin = position

        theta = math.radians(vertical_fov_deg)
        viewport_height = 2.0 * math.tan(theta / 2.0)
        viewport_width = aspect_ratio * viewport_height

        self.forward = (target - position).normalized()
        self.right = self.forward.cross(world_up).normalized()
        self.up = self.right.cross(self.forward)

        self.viewport_width = self.right * (viewport_width * focal_distance)
        self.viewport_height = self.up * (viewport_height * focal_distance)

        focus_center = self.origin + self.forward * focal_distance
        self.viewport_origin = (
            focus_center - self.viewport_width / 2.0 + self.viewport_height / 2.0
        )

    def get_ray(self, s: float, t: float) -> Ray:
        """A ray from a random point on the lens through screen point ``(s, t)``."""
        viewport_point = (
            self.viewport_origin + self.viewport_width * s + self.viewport_height * (-t)
        )
        lens_sample = random_in_unit_disk(self.rng) * self.lens_radius
        lens_offset = self.right * lens_sample.x + self.up * lens_sample.y
        ray_start = self.origin + lens_offset
        return Ray(ray_start, viewport_point - ray_start)