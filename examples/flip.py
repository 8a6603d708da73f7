#!/usr/bin/env python3
"""Draw a line, flip the image vertically and save it.

Pass --input to flip an existing image file instead.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from genial import DecodeError, Image, colors, draw_line, flip_horizontal, flip_vertical


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--input", type=Path, default=None, help="Image to flip")
    parser.add_argument("--output", type=Path, default=Path("flip.png"))
    parser.add_argument("--horizontal", action="store_true", help="Flip left-right instead")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.input is not None:
        try:
            image = Image.open(args.input)
        except DecodeError as e:
            parser.error(str(e))
    else:
        image = Image.new(100, 100)
        draw_line(image, (0, 0), (100, 100), colors.CYAN)

    flipped = flip_horizontal(image) if args.horizontal else flip_vertical(image)
    flipped.save(args.output)

    print(f"[OK] Saved flipped {flipped.width}x{flipped.height} image to {args.output}")


if __name__ == "__main__":
    main()
