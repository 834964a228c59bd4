"""Supersampled image accumulation.

:class:`Film` owns no rendering logic: for every pixel it asks the camera for
``num_samples`` jittered primary rays, has the tracer colour them and stores
the mean.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from .camera import PerspectiveCamera
    from .tracer import SphereTracer

_LOG = logging.getLogger("sdftrace.film")
_Array = npt.NDArray[np.floating]


class Film:
    """Pixel grid of *width* x *height*."""

    def __init__(self, width: int, height: int) -> None:
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"film size must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def trigger(
        self,
        camera: "PerspectiveCamera",
        tracer: "SphereTracer",
        num_samples: int,
        jitter: Optional[float] = None,
        seed: Optional[int] = None,
    ) -> _Array:
        """Render the image.

        Parameters
        ----------
        camera, tracer:
            Ray generator and ray colourer.
        num_samples:
            Samples averaged per pixel.
        jitter:
            Fixed sub-pixel offset in ``[0, 1)`` used for every sample on both
            axes.  ``None`` draws uniform random offsets instead.
        seed:
            Seed for the random offsets; ignored when *jitter* is given.

        Returns
        -------
        numpy.ndarray
            Shape ``(height, width, 3)`` array of linear colours, row 0 at the
            top of the picture.
        """
        num_samples = int(num_samples)
        if num_samples <= 0:
            raise ValueError(f"num_samples must be positive, got {num_samples}")

        rng = np.random.default_rng(seed)
        img = np.zeros((self.height, self.width, 3), dtype=np.float64)
        start = time.perf_counter()

        for y in range(self.height):
            for x in range(self.width):
                color_sum = np.zeros(3)
                for _ in range(num_samples):
                    if jitter is None:
                        jx, jy = rng.random(2)
                    else:
                        jx = jy = jitter
                    ray = camera.project((x + jx) / self.width, (y + jy) / self.height)
                    color_sum += np.asarray(tracer.project(ray))
                img[y, x] = color_sum / num_samples
            _LOG.debug("row %d/%d done", y + 1, self.height)

        _LOG.info(
            "rendered %dx%d at %d samples/pixel in %.2fs",
            self.width, self.height, num_samples, time.perf_counter() - start,
        )
        return img
