"""Tests for sdftrace.shaders."""

import math

import pytest

from sdftrace import (
    Checkerboard, ConstantBackground, ConstantColor, DegenerateTileError,
    DirectionalLight, Lambertian, Ray, Sphere, SphereTracer, TracerConfig,
    Vector3, YPlane,
)

A = ConstantColor((1, 1, 1))
B = ConstantColor((0, 0, 0))
BLACK = ConstantBackground((0, 0, 0))
LIGHT = Vector3(-1, 1, 1).normalized()
COSINE = 1.0 / math.sqrt(3.0)


def _floor_hit() -> Ray:
    """Ray that has converged onto the plane y = 0 coming from above."""
    return Ray((0, 0, 0), (0, -1, 0))


def _floor_tracer(*extra, **kwargs) -> SphereTracer:
    floor = YPlane(0.0, Lambertian((1.0, 0.5, 0.25)))
    for f in extra:
        floor = floor.union(f)
    return SphereTracer(floor, BLACK, **kwargs)


class TestConstantColor:
    def test_returns_color(self):
        assert ConstantColor((0.2, 0.3, 0.4)).shade(_floor_hit(), None) == Vector3(0.2, 0.3, 0.4)


# ===========================================================================
# Lambertian
# ===========================================================================

class TestLambertian:
    def test_lit_surface(self):
        tracer = _floor_tracer()
        color = Lambertian((1.0, 0.5, 0.25)).shade(_floor_hit(), tracer)
        assert color.isclose(Vector3(1.0, 0.5, 0.25) * COSINE)

    def test_occluded_surface_keeps_shadow_floor(self):
        blocker = Sphere(1.0, A).translate(tuple(LIGHT * 5.0))
        tracer = _floor_tracer(blocker)
        color = Lambertian((1.0, 0.5, 0.25)).shade(_floor_hit(), tracer)
        assert color.isclose(Vector3(1.0, 0.5, 0.25) * (COSINE * 0.3))

    def test_custom_shadow_multiplier(self):
        blocker = Sphere(1.0, A).translate(tuple(LIGHT * 5.0))
        tracer = _floor_tracer(blocker, config=TracerConfig(shadow_multiplier=0.0))
        color = Lambertian((1.0, 1.0, 1.0)).shade(_floor_hit(), tracer)
        assert color == Vector3(0, 0, 0)

    def test_light_from_behind_is_black(self):
        tracer = _floor_tracer(light=DirectionalLight(Vector3(0, -1, 0)))
        color = Lambertian((1.0, 1.0, 1.0)).shade(_floor_hit(), tracer)
        assert color.isclose(Vector3(0, 0, 0))

    def test_light_color_modulates(self):
        light = DirectionalLight(Vector3(0, 1, 0), Vector3(0.5, 1.0, 0.0))
        tracer = _floor_tracer(light=light)
        color = Lambertian((1.0, 0.5, 0.25)).shade(_floor_hit(), tracer)
        assert color.isclose(Vector3(0.5, 0.5, 0.0))

    def test_visibility(self):
        blocker = Sphere(1.0, A).translate(tuple(LIGHT * 5.0))
        assert Lambertian.light_visibility(_floor_hit(), LIGHT, _floor_tracer()) == 1.0
        assert Lambertian.light_visibility(_floor_hit(), LIGHT, _floor_tracer(blocker)) == 0.3

    def test_unfinished_shadow_march_counts_as_lit(self):
        blocker = Sphere(1.0, A).translate(tuple(LIGHT * 5.0))
        tracer = _floor_tracer(blocker, config=TracerConfig(max_steps=1))
        assert Lambertian.light_visibility(_floor_hit(), LIGHT, tracer) == 1.0

    def test_hit_ray_untouched(self):
        ray = _floor_hit()
        Lambertian((1, 1, 1)).shade(ray, _floor_tracer())
        assert ray.origin == Vector3(0, 0, 0)


# ===========================================================================
# Checkerboard
# ===========================================================================

class TestCheckerboard:
    def test_parity_flips_every_tile(self):
        board = Checkerboard(A, B, tile_size=1.0)
        assert board.select((0.5, 0, 0)) is not board.select((1.5, 0, 0))

    def test_parity_along_each_axis(self):
        board = Checkerboard(A, B, tile_size=1.0)
        assert board.select((0.5, 0.5, 0.5)) is B
        assert board.select((1.5, 0.5, 0.5)) is A
        assert board.select((0.5, 1.5, 0.5)) is A
        assert board.select((0.5, 0.5, 1.5)) is A
        assert board.select((1.5, 1.5, 0.5)) is B
        assert board.select((1.5, 1.5, 1.5)) is A

    def test_negative_coordinates(self):
        board = Checkerboard(A, B, tile_size=1.0)
        assert board.select((-0.5, 0, 0)) is A
        assert board.select((-1.5, 0, 0)) is B

    def test_tile_size_scales_pattern(self):
        board = Checkerboard(A, B, tile_size=2.5)
        assert board.select((2.0, 0, 0)) is B
        assert board.select((3.0, 0, 0)) is A

    def test_shade_delegates(self):
        board = Checkerboard(A, B)
        assert board.shade(Ray((1.5, 0, 0), (0, -1, 0)), None) == Vector3(1, 1, 1)
        assert board.shade(Ray((0.5, 0, 0), (0, -1, 0)), None) == Vector3(0, 0, 0)

    def test_nested_shaders_get_tracer(self):
        tracer = _floor_tracer()
        board = Checkerboard(Lambertian((1, 1, 1)), B)
        color = board.shade(Ray((1.5, 0, 0.5), (0, -1, 0)), tracer)
        assert color.isclose(Vector3(1, 1, 1) * COSINE)

    @pytest.mark.parametrize("tile", [0, 0.0, float("inf"), float("nan")])
    def test_degenerate_tile_rejected(self, tile):
        with pytest.raises(DegenerateTileError):
            Checkerboard(A, B, tile_size=tile)

    def test_degenerate_tile_is_value_error(self):
        with pytest.raises(ValueError):
            Checkerboard(A, B, tile_size=0)
