"""Vectorised SDF math used by :mod:`sdftrace.geometry`.

All functions accept and return ``numpy.ndarray`` objects and broadcast over
arbitrary leading batch dimensions.  A "point array" *p* has shape
``(..., 3)``; scalar SDF results have shape ``(...,)`` (a 0-d array for a
single point).

Formulas follow Inigo Quilez's distance function reference:
https://iquilezles.org/articles/distfunctions/
"""

from __future__ import annotations

from typing import Callable

import numpy as np
import numpy.typing as npt

_F = npt.NDArray[np.floating]
_SDFFunc = Callable[[_F], _F]

__all__ = [
    "length",
    "sdSphere", "sdPlaneY", "sdBox",
    "opUnion", "opIntersection", "opSubtraction",
    "opTranslate", "rotation_x", "rotation_y", "opRotate",
]


# ===========================================================================
# Vector helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


# ===========================================================================
# Primitives
# ===========================================================================

def sdSphere(p: _F, s: float) -> _F:
    """Sphere of radius *s* centred at the origin."""
    return length(p) - s


def sdPlaneY(p: _F, h: float) -> _F:
    """Horizontal plane ``y = h``; positive above it."""
    return p[..., 1] - h


def sdBox(p: _F, b: _F) -> _F:
    """Axis-aligned box with half-extents *b* ``(bx, by, bz)``.

    Exact both inside (``min(max(q), 0)``) and outside
    (``length(max(q, 0))``).
    """
    q = np.abs(p) - b
    return length(np.maximum(q, 0.0)) + np.minimum(np.max(q, axis=-1), 0.0)


# ===========================================================================
# Boolean operators
# ===========================================================================

def opUnion(d1: _F, d2: _F) -> _F:
    """Union of two SDFs: ``min(d1, d2)``."""
    return np.minimum(d1, d2)


def opIntersection(d1: _F, d2: _F) -> _F:
    """Intersection of two SDFs: ``max(d1, d2)``."""
    return np.maximum(d1, d2)


def opSubtraction(d1: _F, d2: _F) -> _F:
    """Carve *d2* out of *d1*: ``max(d1, -d2)``."""
    return np.maximum(d1, -d2)


# ===========================================================================
# Rigid transforms
# ===========================================================================

def rotation_x(angle_rad: float) -> _F:
    """Right-handed rotation matrix about X."""
    c = np.cos(angle_rad)
    s = np.sin(angle_rad)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def rotation_y(angle_rad: float) -> _F:
    """Right-handed rotation matrix about Y."""
    c = np.cos(angle_rad)
    s = np.sin(angle_rad)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def opTranslate(p: _F, t: _F, primitive3d: _SDFFunc):
    """Evaluate *primitive3d* moved by *t*: ``primitive3d(p - t)``."""
    return primitive3d(p - t)


def opRotate(p: _F, rot: _F, primitive3d: _SDFFunc):
    """Evaluate *primitive3d* rotated by the ``(3, 3)`` matrix *rot*.

    The query point is mapped into the primitive's frame with the inverse
    rotation; ``p @ rot`` applies ``rot.T`` to every row of *p*.  Rotations
    are rigid, so exact distances stay exact.
    """
    return primitive3d(p @ rot)
