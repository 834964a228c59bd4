"""Ready-made scenes.

Provides:
- :func:`demo_scene` -- checkerboard floor with a carved, tilted cube
- :func:`checkerboard_floor`, :func:`carved_cube` -- its parts
"""

from .demo import carved_cube, checkerboard_floor, demo_scene

__all__ = ["carved_cube", "checkerboard_floor", "demo_scene"]
