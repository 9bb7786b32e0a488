# spheretrace

A small ray tracer in pure Python. It builds a scene from spheres and shoots
antialiased camera rays through a thin-lens camera. Each hit is shaded by its
surface normal, with a sky gradient behind the scene. The picture is written
as an uncompressed 24-bit TGA file.

## Installing

    pip install .

No third-party libraries are needed. To run the tests, install the `test`
extra (`pip install .[test]`) and run `pytest`.

## Rendering from the command line

    spheretrace

The command renders the default scene: a large ground sphere with three small
spheres on it, seen from a camera at (-2, 2, 1) that looks at (0, 0, -1) with a
20° vertical field of view. The image has a 16:9 aspect ratio. While it works,
the command reports the number of scanlines still to render on standard error.
When it has finished it writes the image and prints where it was saved. It
exits with status 1 if the file cannot be written.

Options:

- `-o`, `--output`: output file (default `output.tga`)
- `--width`: image width in pixels (default 800). The height is the width
  divided by 16/9, and at least 1.
- `--samples`: samples per pixel (default 100)
- `--max-depth`: depth limit passed to `ray_color` (default 50). A value of 0
  or less makes every pixel black.
- `--seed`: seed for the random number generator, to get repeatable output

Rendering at the defaults takes a long time, because every pixel is sampled
many times in pure Python. A quick preview:

    spheretrace --width 200 --samples 10 --seed 1 -o preview.tga

## Using the library

    import math
    import random

    from spheretrace.vector import Vec3
    from spheretrace.ray import Ray
    from spheretrace.sphere import Sphere
    from spheretrace.hittable_list import HittableList
    from spheretrace.render import default_camera, render
    from spheretrace.tga import write_tga

    world = HittableList()
    world.add(Sphere(Vec3(0.0, 0.0, -1.0), 0.5))
    world.add(Sphere(Vec3(0.0, -100.5, -1.0), 100.0))

    hit = world.hit(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)), 0.001, math.inf)
    if hit is not None:
        print(hit.t, hit.point, hit.normal, hit.front_face)

    pixels = render(world, default_camera(), 160, 90,
                    samples_per_pixel=8, rng=random.Random(1))
    write_tga("scene.tga", 160, 90, pixels)

The modules:

- `spheretrace.vector`: `Vec3`, an immutable 3D vector. It supports `+`, `-`,
  `*` and `/` with numbers or component-wise with other vectors, negation, and
  `abs` per component. It also has `dot`, `cross`, `length`, `normalized`,
  `distance`, `lerp`, `is_close`, `is_zero`, `minimum`, `maximum`, `clamp`,
  `reflect` and `project`. The constants are `ZERO`, `ONE`, `UP`, `DOWN`,
  `LEFT`, `RIGHT`, `FORWARD` and `BACK`.
- `spheretrace.ray`: `Ray(origin, direction)`, with `Ray.at(t)`.
- `spheretrace.hittable`: the abstract base class `Hittable` and `HitRecord`,
  which holds `point`, `normal`, `t` and `front_face`. The normal always faces
  against the incoming ray.
- `spheretrace.sphere`: `Sphere(center, radius)`. A negative radius is treated
  as zero.
- `spheretrace.hittable_list`: `HittableList`, which reports the closest hit
  of its members. It supports `add`, `clear`, `len()` and iteration, and
  `add` raises `TypeError` for anything that is not a `Hittable`.
  `Hittable.hit(ray, ray_tmin, ray_tmax)` returns the nearest `HitRecord` with
  `ray_tmin < t < ray_tmax`, or `None`.
- `spheretrace.camera`: `Camera(aspect_ratio, vertical_fov_deg, position,
  target, world_up, aperture, focal_distance, rng)`.
  `Camera.get_ray(s, t)` takes image coordinates normalised to [0, 1], with
  (0, 0) at the top left. `random_in_unit_disk(rng)` samples the lens.
- `spheretrace.color`: `clamp`, `Interval`, `linear_to_gamma` and
  `color_to_bytes`. `color_to_bytes` averages the accumulated samples, applies
  gamma 2 and converts the result to three bytes.
- `spheretrace.render`: `ray_color`, `default_world`, `default_camera`,
  `render` and the command's `main`. `render` returns top-down RGB bytes and
  raises `ValueError` for a non-positive size or sample count.
- `spheretrace.tga`: `encode_tga` and `write_tga` for uncompressed TGA output.
  Both raise `ValueError` if the size is out of range or the pixel data has the
  wrong length.

## What it does not do

There are no materials, lights or shadows. A hit is coloured only by its
surface normal, and rays do not bounce. The depth limit only decides whether a
ray gets any colour at all. Spheres are the only shapes, and TGA is the only
output format. The command always renders the built-in scene; there is no way
to load a scene from a file.