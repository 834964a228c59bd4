"""Tests for sdftrace.tracer."""

import math

import numpy as np
import numpy.testing as npt
import pytest

from sdftrace import (
    ConstantBackground, ConstantColor, DirectionalLight, DistanceField, Ray, SkyBackground,
    Sphere, SphereTracer, TracerConfig, TraceStatus, Vector3, YPlane,
)

RED = ConstantColor((1, 0, 0))
BLACK = ConstantBackground((0, 0, 0))


def _unit_sphere_tracer(background=BLACK, config=None) -> SphereTracer:
    return SphereTracer(Sphere(1.0, RED), background, config)


# ===========================================================================
# Marching
# ===========================================================================

class TestMarch:
    def test_head_on_hit(self):
        result = _unit_sphere_tracer().march(Ray((0, 0, 5), (0, 0, -1)))
        assert result.status is TraceStatus.HIT
        assert abs(result.sample.distance) <= 1e-8
        assert result.ray.origin.isclose(Vector3(0, 0, 1))

    def test_oblique_hit_converges(self):
        origin = Vector3(2.0, 3.0, 4.0)
        # Aim slightly off-centre so convergence takes several steps.
        direction = Vector3(-2.0, -2.6, -4.0)
        result = _unit_sphere_tracer().march(Ray(origin, direction))
        assert result.status is TraceStatus.HIT
        assert abs(result.ray.origin.norm() - 1.0) <= 1e-8
        assert result.steps > 1

    def test_input_ray_untouched(self):
        ray = Ray((0, 0, 5), (0, 0, -1))
        _unit_sphere_tracer().march(ray)
        assert ray.origin == Vector3(0, 0, 5)

    def test_escape(self):
        result = _unit_sphere_tracer().march(Ray((0, 0, 5), (0, 0, 1)))
        assert result.status is TraceStatus.ESCAPED
        assert result.ray.origin.norm() >= 1000.0

    def test_custom_background_distance(self):
        cfg = TracerConfig(background_distance=50.0)
        result = _unit_sphere_tracer(config=cfg).march(Ray((0, 0, 5), (0, 0, 1)))
        assert result.status is TraceStatus.ESCAPED
        assert 50.0 <= result.ray.origin.norm() < 1000.0

    def test_step_cap_exhausts(self):
        # Grazing a plane converges geometrically and very slowly.
        tracer = SphereTracer(YPlane(-1.0, RED), BLACK, TracerConfig(max_steps=5))
        result = tracer.march(Ray((0, 0, 0), (1.0, -0.001, 0.0)))
        assert result.status is TraceStatus.EXHAUSTED
        assert result.steps == 5

    def test_grazing_ray_converges_with_default_cap(self):
        tracer = SphereTracer(YPlane(-1.0, RED), BLACK)
        result = tracer.march(Ray((0, 0, 0), (1.0, -0.01, 0.0)))
        assert result.status is TraceStatus.HIT


# ===========================================================================
# Projection
# ===========================================================================

class TestProject:
    def test_hit_is_shaded(self):
        color = _unit_sphere_tracer().project(Ray((0, 0, 5), (0, 0, -1)))
        assert color == Vector3(1, 0, 0)

    def test_escape_above_horizon_returns_sky(self):
        tracer = _unit_sphere_tracer(SkyBackground())
        color = tracer.project(Ray((0, 0, 5), (0, 1, 1)))
        dy = 1.0 / math.sqrt(2.0)
        assert color.isclose(Vector3(dy * 2, dy * 4, 1.0))

    def test_escape_below_horizon_returns_ground(self):
        tracer = _unit_sphere_tracer(SkyBackground())
        color = tracer.project(Ray((0, 0, 5), (0, -1, 1)))
        assert color.isclose(Vector3(0.1, 0.4, 0.1))

    def test_exhausted_ray_gets_background(self):
        grey = ConstantBackground((0.5, 0.5, 0.5))
        tracer = SphereTracer(YPlane(-1.0, RED), grey, TracerConfig(max_steps=5))
        assert tracer.project(Ray((0, 0, 0), (1.0, -0.001, 0.0))) == Vector3(0.5, 0.5, 0.5)

    def test_field_errors_propagate(self):
        def _boom(p):
            raise RuntimeError("bad field")

        tracer = SphereTracer(DistanceField(_boom, _boom), BLACK)
        with pytest.raises(RuntimeError):
            tracer.project(Ray((0, 0, 0), (0, 0, -1)))


# ===========================================================================
# Normals and light
# ===========================================================================

class TestNormal:
    @pytest.mark.parametrize("point", [(0, 0, 1), (0.6, 0.8, 0), (-1, 0, 0)])
    def test_sphere_normal_is_radial(self, point):
        n = _unit_sphere_tracer().normal(Vector3(*point))
        assert n.dot(Vector3(*point).normalized()) == pytest.approx(1.0, abs=1e-6)
        assert n.norm() == pytest.approx(1.0)

    def test_normal_at_traced_hit(self):
        tracer = _unit_sphere_tracer()
        hit = tracer.march(Ray((0, 0, 5), (0, 0, -1))).ray.origin
        assert tracer.normal(hit).dot(hit.normalized()) == pytest.approx(1.0, abs=1e-6)

    def test_plane_normal(self):
        tracer = SphereTracer(YPlane(-2.0, RED), BLACK)
        npt.assert_allclose(np.asarray(tracer.normal((3.0, -2.0, 1.0))), [0, 1, 0], atol=1e-9)

    def test_distance_query(self):
        assert _unit_sphere_tracer().distance(Vector3(0, 3, 0)) == pytest.approx(2.0)


class TestLight:
    def test_default_light(self):
        direction, color = _unit_sphere_tracer().sample_directional_light()
        assert direction.isclose(Vector3(-1, 1, 1).normalized())
        assert color == Vector3(1, 1, 1)

    def test_custom_light_is_normalized(self):
        light = DirectionalLight(Vector3(0, 2, 0), Vector3(0.5, 0.5, 0.5))
        tracer = SphereTracer(Sphere(1.0, RED), BLACK, light=light)
        direction, color = tracer.sample_directional_light()
        assert direction == Vector3(0, 1, 0)
        assert color == Vector3(0.5, 0.5, 0.5)

    def test_zero_light_direction_rejected(self):
        with pytest.raises(ValueError):
            DirectionalLight(Vector3(0, 0, 0))
