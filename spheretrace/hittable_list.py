"""A collection of hittable objects that reports the closest hit."""

from __future__ import annotations

from typing import Iterable, Iterator

from spheretrace.hittable import HitRecord, Hittable
from spheretrace.ray import Ray


class HittableList(Hittable):
    """An ordered group of hittables, itself hittable."""

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self._objects: list[Hittable] = []
        for obj in objects:
            self.add(obj)

    def add(self, obj: Hittable) -> None:
        if not isinstance(obj, Hittable):
            raise TypeError(f"expected a Hittable, got {type(obj).__name__}")
        self._objects.append(obj)

    def clear(self) -> None:
        self._objects.clear()

    def hit(self, ray: Ray, ray_tmin: float, ray_tmax: float) -> HitRecord | None:
        closest: HitRecord | None = None
        closest_so_far = ray_tmax
        for obj in self._objects:
            rec = obj.hit(ray, ray_tmin, closest_so_far)
            if rec is not None:
                closest = rec
                closest_so_far = rec.t
        return closest

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self._objects)