"""Bundle of everything needed to render one picture."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional

from .background import Background, SkyBackground
from .camera import PerspectiveCamera
from .config import TracerConfig
from .film import Film
from .geometry import DistanceField
from .tracer import SphereTracer


@dataclass(frozen=True)
class Scene:
    """A composed distance field with its background and camera."""

    field: DistanceField
    background: Background = dataclasses.field(default_factory=SkyBackground)
    camera: PerspectiveCamera = dataclasses.field(default_factory=PerspectiveCamera)

    def tracer(self, config: Optional[TracerConfig] = None) -> SphereTracer:
        return SphereTracer(self.field, self.background, config)

    def render(
        self,
        width: int,
        height: int,
        num_samples: int = 1,
        config: Optional[TracerConfig] = None,
        jitter: Optional[float] = None,
        seed: Optional[int] = None,
    ):
        """Render to a ``(height, width, 3)`` array; see :meth:`Film.trigger`."""
        return Film(width, height).trigger(
            self.camera, self.tracer(config), num_samples, jitter=jitter, seed=seed,
        )
