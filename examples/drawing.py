#!/usr/bin/env python3
"""Draw a diagonal line and a circle with the fluent API and save the result.

Usage:
    python examples/drawing.py --output drawing.png
    python examples/drawing.py --size 200 --radius 60 --filled -v
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from genial import Image, colors


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output", type=Path, default=Path("drawing.png"))
    parser.add_argument("--size", type=int, default=100, help="Image width and height")
    parser.add_argument("--radius", type=int, default=30)
    parser.add_argument("--filled", action="store_true", help="Fill the circle")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    center = args.size // 2
    image = Image.new(args.size, args.size)
    circle = image.filled_circle() if args.filled else image.circle()

    (
        image.line()
        .from_(0, 0)
        .to(args.size, args.size)
        .with_color(colors.WHITE)
        .draw()
    )
    circle.origin(center, center).radius(args.radius).with_color(colors.CYAN).draw()
    image.save(args.output)

    print(f"[OK] Saved {args.size}x{args.size} drawing to {args.output}")


if __name__ == "__main__":
    main()
