"""Render the demo scene: checkerboard floor with a carved, tilted cube.

Usage::

    python examples/render_demo.py                       # saves examples/demo.png
    python examples/render_demo.py --width 320 --height 180 --samples 16
    python examples/render_demo.py --show                # also open a window

Requirements: numpy, matplotlib
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys

# Ensure the repo root (parent of examples/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sdftrace import TracerConfig, save_png
from sdftrace.examples import demo_scene

_DIR = os.path.dirname(os.path.abspath(__file__))


def _parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("--width", type=int, default=160)
    ap.add_argument("--height", type=int, default=90)
    ap.add_argument("--samples", type=int, default=4, help="samples per pixel")
    ap.add_argument("--seed", type=int, default=None, help="jitter seed")
    ap.add_argument("--max-steps", type=int, default=None,
                    help="march step cap per ray")
    ap.add_argument("--out", default=os.path.join(_DIR, "demo.png"))
    ap.add_argument("--show", action="store_true", help="display the image")
    ap.add_argument("--log-level", default="INFO")
    return ap.parse_args(argv)


def main(argv=None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = TracerConfig()
    if args.max_steps is not None:
        config = dataclasses.replace(config, max_steps=args.max_steps)

    image = demo_scene().render(
        args.width, args.height, args.samples, config=config, seed=args.seed,
    )
    save_png(args.out, image)
    print(f"  Saved: {args.out}")

    if args.show:
        import matplotlib.pyplot as plt

        plt.imshow(image.clip(0.0, 1.0))
        plt.axis("off")
        plt.show()


if __name__ == "__main__":
    main()
