"""Colours returned for rays that leave the scene."""

from __future__ import annotations

from .ray import Ray
from .vector import Vector3, VectorLike


class Background:
    """Base class: map an escaped ray to a colour."""

    def project(self, ray: Ray) -> Vector3:
        raise NotImplementedError


class SkyBackground(Background):
    """Flat green ground below the horizon, a blue gradient sky above it."""

    GROUND = Vector3(0.1, 0.4, 0.1)

    def project(self, ray: Ray) -> Vector3:
        dy = ray.direction.y
        if dy < 0:
            return self.GROUND
        return Vector3(dy * 2.0, dy * 4.0, 1.0)


class ConstantBackground(Background):
    """Same colour in every direction."""

    def __init__(self, color: VectorLike) -> None:
        self.color = Vector3.of(color)

    def project(self, ray: Ray) -> Vector3:
        return self.color
