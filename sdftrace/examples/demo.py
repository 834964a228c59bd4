"""Checkerboard floor with a carved, tilted cube.

Usage::

    from sdftrace.examples import demo_scene

    image = demo_scene().render(160, 90, num_samples=4)
"""

from __future__ import annotations

import math
from typing import Tuple

from sdftrace.geometry import Cube, DistanceField, Sphere, YPlane
from sdftrace.scene import Scene
from sdftrace.shaders import Checkerboard, Lambertian


def checkerboard_floor(
    height: float = -math.sqrt(2.0),
    tile_size: float = 1.0,
) -> DistanceField:
    """White and black Lambertian tiles on the plane ``y = height``."""
    tiles = Checkerboard(Lambertian((1.0, 1.0, 1.0)), Lambertian((0.0, 0.0, 0.0)), tile_size)
    return YPlane(height, tiles)


def carved_cube(
    edge_length: float = 2.0,
    cutter_radius: float = 1.3,
    core_radius: float = 0.7,
    position: Tuple[float, float, float] = (0.0, 0.0, -10.0),
) -> DistanceField:
    """A green cube hollowed by a red sphere, tilted onto a corner.

    The cube minus the cutter is turned 45 degrees about Y, then tipped
    45 degrees about X; a smaller sphere fills the hollow.
    The whole assembly is moved to *position*.
    """
    cube = Cube(edge_length, Lambertian((0.2, 0.8, 0.2)))
    cutter = Sphere(cutter_radius, Lambertian((0.7, 0.1, 0.2)))
    core = Sphere(core_radius, Lambertian((0.2, 0.5, 0.4)))

    shell = cube.subtract(cutter).rotate_y(math.pi / 4).rotate_x(-math.pi / 4)
    return shell.union(core).translate(position)


def demo_scene() -> Scene:
    """Floor plus carved cube under the default sky and camera."""
    return Scene(checkerboard_floor().union(carved_cube()))
