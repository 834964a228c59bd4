"""Perspective camera mapping sensor coordinates to primary rays.

The camera sits at the origin looking down ``-Z``.  A sensor of
``sensor_width x sensor_height`` sits ``focal_length`` in front of it (all in
the same units, millimetres by convention: the defaults describe a 50 mm lens
on a 32x18 sensor).  Sensor coordinates ``(u, v)`` run over ``[0, 1]`` with
``(0.5, 0.5)`` at the centre and ``v`` growing downwards like image rows.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ray import Ray
from .vector import Vector3

_ORIGIN = Vector3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class PerspectiveCamera:
    """Pinhole camera at the origin; all three parameters must be positive."""

    focal_length: float = 50.0
    sensor_width: float = 32.0
    sensor_height: float = 18.0

    def __post_init__(self):
        for name in ("focal_length", "sensor_width", "sensor_height"):
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value}")

    def project(self, u: float, v: float) -> Ray:
        """Primary ray through sensor coordinate ``(u, v)``.

        Coordinates outside ``[0, 1]`` are accepted and simply produce rays
        outside the nominal frustum.
        """
        return Ray(
            _ORIGIN,
            Vector3(
                (u - 0.5) * self.sensor_width,
                -(v - 0.5) * self.sensor_height,
                -self.focal_length,
            ),
        )
