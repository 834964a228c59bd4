"""
sdftrace: sphere-traced rendering of signed distance fields
============================================================

Renders still images of scenes described implicitly by signed distance
functions.  Every primary ray is marched through the field by the distance
the field reports until it lands on a surface or leaves the scene; surfaces
are coloured by per-surface shaders that can march shadow rays through the
same field.

Implemented features
--------------------
- Vector and ray types: :class:`Vector3`, :class:`Ray`
- Camera: :class:`PerspectiveCamera`
- Primitive fields: Sphere, YPlane, Cube, Rect
- Boolean operations: Union, Intersection, Subtraction
- Transforms: translate, rotate_x, rotate_y
- Tracing: :class:`SphereTracer` (hits, normals, directional light)
- Shaders: ConstantColor, Lambertian (with shadows), Checkerboard
- Film supersampling, PNG export
- Example scene: :func:`sdftrace.examples.demo_scene`

Quick start
-----------
::

    from sdftrace import (
        Lambertian, PerspectiveCamera, SkyBackground, Sphere, SphereTracer, Film,
    )

    ball = Sphere(1.0, Lambertian((0.7, 0.1, 0.2))).translate((0.0, 0.0, -5.0))
    tracer = SphereTracer(ball, SkyBackground())
    image = Film(64, 36).trigger(PerspectiveCamera(), tracer, num_samples=4)
"""

from .background import Background, ConstantBackground, SkyBackground
from .camera import PerspectiveCamera
from .config import TracerConfig
from .errors import DegenerateTileError, DegenerateVectorError, SdfTraceError
from .export import save_png, to_rgb8
from .film import Film
from .geometry import (
    DistanceField,
    FieldSample,
    Primitive,
    Sphere,
    YPlane,
    Cube,
    Rect,
    Union,
    Intersection,
    Subtraction,
)
from .ray import Ray
from .scene import Scene
from .shaders import Checkerboard, ConstantColor, Lambertian, Shader
from .tracer import DirectionalLight, SphereTracer, TraceResult, TraceStatus
from .vector import Vector3

__version__ = "0.1.0"

__all__ = [
    # Values
    "Vector3",
    "Ray",
    "PerspectiveCamera",

    # Fields
    "DistanceField",
    "FieldSample",
    "Primitive",
    "Sphere",
    "YPlane",
    "Cube",
    "Rect",
    "Union",
    "Intersection",
    "Subtraction",

    # Tracing
    "TracerConfig",
    "SphereTracer",
    "TraceResult",
    "TraceStatus",
    "DirectionalLight",
    "Background",
    "SkyBackground",
    "ConstantBackground",

    # Shaders
    "Shader",
    "ConstantColor",
    "Lambertian",
    "Checkerboard",

    # Output
    "Film",
    "Scene",
    "to_rgb8",
    "save_png",

    # Errors
    "SdfTraceError",
    "DegenerateVectorError",
    "DegenerateTileError",
]
