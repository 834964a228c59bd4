"""Surface shaders.

A shader turns a ray that has converged onto a surface into a colour.  It gets
the marched ray (whose origin is the hit point) and the tracer, through which
it can query normals, the light and the distance field for secondary rays.
Colours are :class:`~sdftrace.vector.Vector3` triples, nominally in
``[0, 1]`` and never clamped here.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from .errors import DegenerateTileError
from .ray import Ray
from .vector import Vector3, VectorLike

if TYPE_CHECKING:
    from .tracer import SphereTracer


class Shader:
    """Base class for surface shaders."""

    def shade(self, ray: Ray, tracer: "SphereTracer") -> Vector3:
        raise NotImplementedError


class ConstantColor(Shader):
    """Flat colour, independent of geometry and light."""

    def __init__(self, color: VectorLike) -> None:
        self.color = Vector3.of(color)

    def shade(self, ray: Ray, tracer: "SphereTracer") -> Vector3:
        return self.color


class Lambertian(Shader):
    """Diffuse surface lit by the tracer's directional light.

    A single shadow ray decides visibility: lit points get the full cosine
    term, occluded ones keep ``config.shadow_multiplier`` of it.
    """

    def __init__(self, color: VectorLike) -> None:
        self.color = Vector3.of(color)

    def shade(self, ray: Ray, tracer: "SphereTracer") -> Vector3:
        light_dir, light_color = tracer.sample_directional_light()
        normal = tracer.normal(ray.origin)
        visibility = self.light_visibility(ray, light_dir, tracer)
        cosine = max(0.0, normal.dot(light_dir))
        return self.color.comp_product(light_color) * (cosine * visibility)

    @staticmethod
    def light_visibility(ray: Ray, light_dir: Vector3, tracer: "SphereTracer") -> float:
        """March a shadow ray from the hit point towards the light.

        Returns 1 if it reaches the background distance, otherwise the
        configured shadow multiplier.  The shadow ray starts
        ``shadow_bias`` back along the incoming direction so it does not
        converge on the surface it leaves.  A march that runs out of steps
        counts as unoccluded.
        """
        cfg = tracer.config
        shadow_ray = Ray(ray.origin - ray.direction * cfg.shadow_bias, light_dir)
        distance = tracer.distance(shadow_ray.origin)
        steps = 0

        while (shadow_ray.origin.norm() < cfg.background_distance
               and abs(distance) > cfg.shadow_epsilon):
            if steps >= cfg.max_steps:
                return 1.0
            shadow_ray.advance(distance)
            distance = tracer.distance(shadow_ray.origin)
            steps += 1

        if shadow_ray.origin.norm() >= cfg.background_distance:
            return 1.0
        return cfg.shadow_multiplier


class Checkerboard(Shader):
    """3-D checker pattern alternating between two shaders.

    Each axis contributes ``mod(coord, 2 * tile_size) > tile_size``; the three
    flags are XOR-ed and ``shader_a`` is used when the result is true.

    Raises
    ------
    DegenerateTileError
        If *tile_size* is zero or not finite.
    """

    def __init__(self, shader_a: Shader, shader_b: Shader, tile_size: float = 1.0) -> None:
        if tile_size == 0 or not math.isfinite(tile_size):
            raise DegenerateTileError(f"tile_size must be non-zero and finite, got {tile_size}")
        self.shader_a = shader_a
        self.shader_b = shader_b
        self.tile_size = tile_size

    def select(self, point) -> Shader:
        """Sub-shader for the tile containing *point*."""
        p = np.asarray(point, dtype=np.float64)
        period = 2.0 * self.tile_size
        odd = np.mod(p, period) > self.tile_size
        return self.shader_a if np.logical_xor.reduce(odd) else self.shader_b

    def shade(self, ray: Ray, tracer: "SphereTracer") -> Vector3:
        return self.select(ray.origin).shade(ray, tracer)
