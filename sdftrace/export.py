"""Image presentation helpers."""

from __future__ import annotations

import os

import matplotlib.image as mpimg
import numpy as np
import numpy.typing as npt

_Array = npt.NDArray[np.floating]


def to_rgb8(image: _Array) -> npt.NDArray[np.uint8]:
    """Clamp linear colours to ``[0, 1]`` and scale to 8-bit channels."""
    return np.round(np.clip(image, 0.0, 1.0) * 255.0).astype(np.uint8)


def save_png(path: str, image: _Array) -> None:
    """Write a ``(height, width, 3)`` colour array to *path* as PNG.

    Creates parent directories if needed.
    """
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    mpimg.imsave(path, to_rgb8(image))
