"""Sphere tracing of rays through a distance field.

A ray is marched by repeatedly stepping the distance the field reports at the
current position.  That distance must be a lower bound on the distance to the
nearest surface for the walk not to tunnel through geometry; boolean
combinators only guarantee a bound, so very thin features may be overstepped.

Each march ends in one of three states:

``HIT``
    ``|distance| <= hit_epsilon``; the sample's shader colours the ray.
``ESCAPED``
    the ray got ``background_distance`` away from the world origin.
``EXHAUSTED``
    ``max_steps`` advances without either; rendered like ``ESCAPED``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .background import Background
from .config import TracerConfig
from .geometry import DistanceField, FieldSample
from .ray import Ray
from .vector import Vector3

_LOG = logging.getLogger("sdftrace.tracer")


class TraceStatus(Enum):
    """How a march terminated."""
    HIT = "hit"
    ESCAPED = "escaped"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class TraceResult:
    """Outcome of marching one ray.

    Attributes
    ----------
    status:
        Terminal state of the march.
    ray:
        The marched copy of the input ray; its origin is the final position
        (the hit point for ``HIT``).
    sample:
        Field sample at the final position, ``None`` for ``ESCAPED``.
    steps:
        Number of advances taken.
    """
    status: TraceStatus
    ray: Ray
    sample: Optional[FieldSample]
    steps: int


@dataclass(frozen=True)
class DirectionalLight:
    """Infinitely distant light; *direction* points towards the light."""
    direction: Vector3 = field(default_factory=lambda: Vector3(-1.0, 1.0, 1.0).normalized())
    color: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))

    def __post_init__(self):
        direction = Vector3.of(self.direction)
        if direction.norm() == 0.0:
            raise ValueError("light direction must be non-zero")
        object.__setattr__(self, "direction", direction.normalized())
        object.__setattr__(self, "color", Vector3.of(self.color))


class SphereTracer:
    """March rays through *field*, shading hits and falling back to *background*.

    The tracer holds no per-ray state and can be shared by any number of
    concurrent traversals.
    """

    def __init__(
        self,
        field: DistanceField,
        background: Background,
        config: Optional[TracerConfig] = None,
        light: Optional[DirectionalLight] = None,
    ) -> None:
        self.field = field
        self.background = background
        self.config = config if config is not None else TracerConfig()
        self.light = light if light is not None else DirectionalLight()

    @property
    def background_distance(self) -> float:
        return self.config.background_distance

    def distance(self, point) -> float:
        """Signed distance of the field at *point*."""
        return float(self.field.sdf(point))

    def march(self, ray: Ray) -> TraceResult:
        """Walk a copy of *ray* until it hits, escapes or runs out of steps."""
        cfg = self.config
        r = ray.clone()
        sample = self.field.sample(r.origin)
        steps = 0

        while abs(sample.distance) > cfg.hit_epsilon:
            if steps >= cfg.max_steps:
                _LOG.debug(
                    "ray %r did not converge after %d steps (distance %g); "
                    "treating as escaped", ray, steps, sample.distance,
                )
                return TraceResult(TraceStatus.EXHAUSTED, r, sample, steps)

            r.advance(sample.distance)
            steps += 1
            if r.origin.norm() >= cfg.background_distance:
                return TraceResult(TraceStatus.ESCAPED, r, None, steps)
            sample = self.field.sample(r.origin)

        return TraceResult(TraceStatus.HIT, r, sample, steps)

    def project(self, ray: Ray) -> Vector3:
        """Colour seen along *ray*."""
        result = self.march(ray)
        if result.status is TraceStatus.HIT:
            return result.sample.shader.shade(result.ray, self)
        return self.background.project(result.ray)

    def normal(self, point) -> Vector3:
        """Unit surface normal at *point* by central differences.

        Only distances are used; the six offset points are evaluated as one
        batch.
        """
        p = np.asarray(point, dtype=np.float64)
        offsets = np.eye(3) * self.config.normal_offset
        d = self.field.sdf(np.concatenate([p + offsets, p - offsets]))
        return Vector3.from_array(d[:3] - d[3:]).normalized()

    def sample_directional_light(self) -> Tuple[Vector3, Vector3]:
        """``(direction, color)`` of the scene light."""
        return self.light.direction, self.light.color
