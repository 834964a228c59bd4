"""Numerical constants of the sphere tracer.

The primary-ray and shadow-ray tolerances are separate settings;
collapsing them changes rendered images.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

#: Primary rays stop once ``|distance|`` is at or below this.
HIT_EPSILON = 1e-8
#: Shadow rays stop once ``|distance|`` is at or below this.
SHADOW_EPSILON = 1e-6
#: Shadow rays start this far back along the incoming ray to clear the surface.
SHADOW_BIAS = 0.1
#: Brightness factor applied to Lambertian points whose shadow ray is blocked.
SHADOW_MULTIPLIER = 0.3
#: Central-difference offset for normal estimation.
NORMAL_OFFSET = 1e-3
#: Rays whose origin gets this far from the world origin have escaped.
BACKGROUND_DISTANCE = 1000.0
#: Steps after which a ray that neither hit nor escaped is treated as escaped.
MAX_STEPS = 10_000


@dataclass(frozen=True)
class TracerConfig:
    hit_epsilon: float = HIT_EPSILON
    shadow_epsilon: float = SHADOW_EPSILON
    shadow_bias: float = SHADOW_BIAS
    shadow_multiplier: float = SHADOW_MULTIPLIER
    normal_offset: float = NORMAL_OFFSET
    background_distance: float = BACKGROUND_DISTANCE
    max_steps: int = MAX_STEPS

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "shadow_multiplier":
                if not value >= 0:
                    raise ValueError(f"shadow_multiplier must be non-negative, got {value}")
            elif not value > 0:
                raise ValueError(f"{f.name} must be positive, got {value}")
        if int(self.max_steps) != self.max_steps:
            raise ValueError(f"max_steps must be an integer, got {self.max_steps}")
