"""Rendering a scene of spheres and the command that writes it to disk."""

from __future__ import annotations

import argparse
import math
import random
import sys
from typing import Callable, Sequence

from spheretrace.camera import Camera
from spheretrace.color import Color, color_to_bytes
from spheretrace.hittable import Hittable
from spheretrace.hittable_list import HittableList
from spheretrace.ray import Ray
from spheretrace.sphere import Sphere
from spheretrace.tga import write_tga
from spheretrace.vector import ZERO, Vec3

ASPECT_RATIO = 16.0 / 9.0
IMAGE_WIDTH = 800
SAMPLES_PER_PIXEL = 100
MAX_DEPTH = 50
OUTPUT_FILE = "output.tga"

_T_MIN = 0.001  # avoids shadow acne
_WHITE = Vec3(1.0, 1.0, 1.0)
_SKY_BLUE = Vec3(0.5, 0.7, 1.0)


def ray_color(ray: Ray, world: Hittable, depth: int) -> Color:
    """Shade by surface normal on a hit, otherwise a vertical sky gradient."""
    if depth <= 0:
        return ZERO
    rec = world.hit(ray, _T_MIN, math.inf)
    if rec is not None:
        return (rec.normal + _WHITE) * 0.5
    unit_direction = ray.direction.normalized()
    a = 0.5 * (unit_direction.y + 1.0)
    return _WHITE * (1.0 - a) + _SKY_BLUE * a


def default_world() -> HittableList:
    """A ground sphere with three small spheres resting on it."""
    return HittableList(
        [
            Sphere(Vec3(0.0, -100.5, -1.0), 100.0),
            Sphere(Vec3(0.0, 0.0, -1.0), 0.5),
            Sphere(Vec3(-1.0, 0.0, -1.0), 0.5),
            Sphere(Vec3(1.0, 0.0, -1.0), 0.5),
        ]
    )


def default_camera(aspect_ratio: float = ASPECT_RATIO) -> Camera:
    """A pinhole camera looking down at the default world from above-left."""
    position = Vec3(-2.0, 2.0, 1.0)
    lookat = Vec3(0.0, 0.0, -1.0)
    return Camera(
        aspect_ratio=aspect_ratio,
        vertical_fov_deg=20.0,
        position=position,
        target=lookat,
        world_up=Vec3(0.0, 1.0, 0.0),
        aperture=0.0,
        focal_distance=position.distance(lookat),
    )


def render(
    world: Hittable,
    camera: Camera,
    width: int,
    height: int,
    samples_per_pixel: int = SAMPLES_PER_PIXEL,
    max_depth: int = MAX_DEPTH,
    rng: random.Random | None = None,
    progress: Callable[[int], None] | None = None,
) -> bytes:
    """Render top-down RGB pixel bytes, ``width * height * 3`` long.

    ``progress`` is called before each scanline with the number of
    scanlines remaining after it.
    """
    if width < 1 or height < 1:
        raise ValueError(f"invalid image size {width}x{height}")
    if samples_per_pixel < 1:
        raise ValueError("samples_per_pixel must be positive")
    rng = rng if rng is not None else random.Random()
    u_span = max(width - 1, 1)
    v_span = max(height - 1, 1)

    image = bytearray()
    for j in range(height):
        if progress is not None:
            progress(height - j - 1)
        for i in range(width):
            pixel_color = ZERO
            for _ in range(samples_per_pixel):
                u = (i + rng.random()) / u_span
                v = (j + rng.random()) / v_span
                pixel_color = pixel_color + ray_color(camera.get_ray(u, v), world, max_depth)
            image += color_to_bytes(pixel_color, samples_per_pixel)
    return bytes(image)


def _report_progress(remaining: int) -> None:
    print(f"\rScanlines remaining: {remaining} ", end="", file=sys.stderr, flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Render the default scene and write it as a TGA image."""
    parser = argparse.ArgumentParser(description="Render a small sphere scene.")
    parser.add_argument("-o", "--output", default=OUTPUT_FILE, help="output TGA file")
    parser.add_argument("--width", type=int, default=IMAGE_WIDTH, help="image width")
    parser.add_argument(
        "--samples", type=int, default=SAMPLES_PER_PIXEL, help="samples per pixel"
    )
    parser.add_argument("--max-depth", type=int, default=MAX_DEPTH, help="ray bounce limit")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    if args.width < 1:
        parser.error("--width must be positive")
    if args.samples < 1:
        parser.error("--samples must be positive")

    height = max(int(args.width / ASPECT_RATIO), 1)
    rng = random.Random(args.seed)

    pixels = render(
        default_world(),
        default_camera(ASPECT_RATIO),
        args.width,
        height,
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        rng=rng,
        progress=_report_progress,
    )
    print("\rDone." + " " * 48, file=sys.stderr)

    try:
        write_tga(args.output, args.width, height, pixels)
    except (OSError, ValueError):
        print("Failed to write output image", file=sys.stderr)
        return 1

    print(f"Successfully wrote output image to {args.output}")
    return 0