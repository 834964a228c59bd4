"""Distance fields: primitives, transforms and boolean combinators.

A :class:`DistanceField` answers two questions about space:

* :meth:`~DistanceField.sdf` -- the signed distance at every point of a
  ``(..., 3)`` array (vectorised, distance only);
* :meth:`~DistanceField.sample` -- the :class:`FieldSample` at one point, i.e.
  the distance *and* the shader of the surface that distance belongs to.

Combinators never split a sample: a union, intersection or subtraction
returns the winning side's sample whole, so the shader always matches the
distance it came with.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Sequence

import numpy as np
import numpy.typing as npt

from . import sdf_lib as sdf

if TYPE_CHECKING:
    from .shaders import Shader

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_SDFFunc = Callable[[_Array], _Array]
_SampleFunc = Callable[[_Array], "FieldSample"]


@dataclass(frozen=True)
class FieldSample:
    """Signed distance to the nearest surface and that surface's shader."""

    distance: float
    shader: "Shader"

    def negated(self) -> FieldSample:
        return FieldSample(-self.distance, self.shader)


def _nearer(a: FieldSample, b: FieldSample) -> FieldSample:
    return a if a.distance < b.distance else b


def _farther(a: FieldSample, b: FieldSample) -> FieldSample:
    return a if a.distance > b.distance else b


# ===========================================================================
# Base class
# ===========================================================================

class DistanceField:
    """Base class for signed distance fields.

    Wraps a vectorised distance function ``func(p) -> distances`` and a
    per-point function ``sample(p) -> FieldSample``.  Both receive ``float64``
    arrays; :class:`~sdftrace.vector.Vector3` points are accepted anywhere a
    point array is.

    Implements:
    - Boolean operations: :meth:`union`, :meth:`intersect`, :meth:`subtract`
    - Transforms:         :meth:`translate`, :meth:`rotate_x`, :meth:`rotate_y`
    """

    def __init__(self, func: _SDFFunc, sample: _SampleFunc) -> None:
        self._func = func
        self._sample = sample

    def sdf(self, p) -> _Array:
        """Signed distances at *p* (shape ``(..., 3)``)."""
        return self._func(np.asarray(p, dtype=np.float64))

    def sample(self, p) -> FieldSample:
        """Distance and shader at the single point *p*."""
        return self._sample(np.asarray(p, dtype=np.float64))

    def __call__(self, p) -> FieldSample:
        return self.sample(p)

    # ------------------------------------------------------------------
    # Boolean operations
    # ------------------------------------------------------------------

    def union(self, other: DistanceField) -> DistanceField:
        """Return the union (nearer surface) of this field and *other*."""
        return Union(self, other)

    def intersect(self, other: DistanceField) -> DistanceField:
        """Return the intersection (farther surface) of this field and *other*."""
        return Intersection(self, other)

    def subtract(self, other: DistanceField) -> DistanceField:
        """Carve *other* out of this field."""
        return Subtraction(self, other)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def translate(self, offset: Sequence[float]) -> DistanceField:
        """Move the field by *offset* in world space."""
        t = np.asarray(offset, dtype=np.float64)
        if t.shape != (3,):
            raise ValueError(f"offset must have 3 components, got shape {t.shape}")
        return DistanceField(
            lambda p: sdf.opTranslate(p, t, self._func),
            lambda p: sdf.opTranslate(p, t, self._sample),
        )

    def rotate_x(self, angle_rad: float) -> DistanceField:
        """Rotate the field about the X axis by *angle_rad* radians."""
        return self._rotated(sdf.rotation_x(angle_rad))

    def rotate_y(self, angle_rad: float) -> DistanceField:
        """Rotate the field about the Y axis by *angle_rad* radians."""
        return self._rotated(sdf.rotation_y(angle_rad))

    def _rotated(self, rot: _Array) -> DistanceField:
        return DistanceField(
            lambda p: sdf.opRotate(p, rot, self._func),
            lambda p: sdf.opRotate(p, rot, self._sample),
        )


# ===========================================================================
# Primitive shapes
# ===========================================================================

class Primitive(DistanceField):
    """A closed-form distance function carrying a single shader."""

    def __init__(self, func: _SDFFunc, shader: "Shader") -> None:
        self.shader = shader
        super().__init__(func, lambda p: FieldSample(float(func(p)), shader))


class Sphere(Primitive):
    """Sphere centred at origin with given *radius*."""

    def __init__(self, radius: float, shader: "Shader") -> None:
        super().__init__(lambda p: sdf.sdSphere(p, radius), shader)


class YPlane(Primitive):
    """Horizontal plane at height *y*; distances are positive above it."""

    def __init__(self, y: float, shader: "Shader") -> None:
        super().__init__(lambda p: sdf.sdPlaneY(p, y), shader)


class Rect(Primitive):
    """Axis-aligned box with full edge lengths along X, Y and Z."""

    def __init__(self, x_length: float, y_length: float, z_length: float,
                 shader: "Shader") -> None:
        b = np.array([x_length, y_length, z_length], dtype=float) / 2.0
        super().__init__(lambda p: sdf.sdBox(p, b), shader)


class Cube(Rect):
    """Axis-aligned cube with the given *edge_length*."""

    def __init__(self, edge_length: float, shader: "Shader") -> None:
        super().__init__(edge_length, edge_length, edge_length, shader)


# ===========================================================================
# Boolean operation classes
# ===========================================================================

class Union(DistanceField):
    """Union of one or more fields (nearest surface wins).

    On equal distances the later field wins.
    """

    def __init__(self, *fields: DistanceField) -> None:
        if not fields:
            raise ValueError("Union needs at least one field")

        def _sdf(p: _Array) -> _Array:
            d = fields[0]._func(p)
            for f in fields[1:]:
                d = sdf.opUnion(d, f._func(p))
            return d

        def _sample(p: _Array) -> FieldSample:
            s = fields[0]._sample(p)
            for f in fields[1:]:
                s = _nearer(s, f._sample(p))
            return s

        super().__init__(_sdf, _sample)


class Intersection(DistanceField):
    """Intersection of one or more fields (farthest surface wins)."""

    def __init__(self, *fields: DistanceField) -> None:
        if not fields:
            raise ValueError("Intersection needs at least one field")

        def _sdf(p: _Array) -> _Array:
            d = fields[0]._func(p)
            for f in fields[1:]:
                d = sdf.opIntersection(d, f._func(p))
            return d

        def _sample(p: _Array) -> FieldSample:
            s = fields[0]._sample(p)
            for f in fields[1:]:
                s = _farther(s, f._sample(p))
            return s

        super().__init__(_sdf, _sample)


class Subtraction(DistanceField):
    """Subtract *cutter* from *base*.

    Where the carved surface wins, the sample carries the cutter's shader
    with its distance negated.
    """

    def __init__(self, base: DistanceField, cutter: DistanceField) -> None:
        super().__init__(
            lambda p: sdf.opSubtraction(base._func(p), cutter._func(p)),
            lambda p: _farther(base._sample(p), cutter._sample(p).negated()),
        )
