"""genial: a small raster-image library.

This package provides:
- An in-memory pixel buffer with upward-y addressing and pluggable
  color formats
- Integer rasterizers for lines, circles and filled circles
- Vertical and horizontal flips
- File I/O through Pillow, always persisted as 24-bit RGB

Quick Start:
    >>> from genial import Image, draw_line, flip_vertical, colors
    >>>
    >>> img = Image.new(100, 100)
    >>> draw_line(img, (0, 0), (100, 100), colors.CYAN)
    >>> flip_vertical(img).save("flip.png")

Or chain shapes with the fluent API:
    >>> (
    ...     Image.new(100, 100)
    ...     .line().start(0, 0).end(100, 100).with_color(colors.WHITE).draw()
    ...     .circle().origin(50, 50).radius(30).with_color(colors.CYAN).draw()
    ...     .save("drawing.png")
    ... )
"""

__version__ = "0.1.0"

from genial import colors
from genial.components.color import RGB, ColorFormat, Pixel, channel_count, rgb
from genial.components.shapes import Circle, FilledCircle, Line, Shape
from genial.core.errors import (
    ConfigError,
    DecodeError,
    EncodeError,
    GenialError,
    SizeMismatchError,
    UnsupportedFormatError,
)
from genial.core.image import Image
from genial.systems.draw import draw_circle, draw_filled_circle, draw_line
from genial.systems.ops import (
    flip_horizontal,
    flip_horizontal_inplace,
    flip_vertical,
    flip_vertical_inplace,
)

__all__ = [
    "__version__",
    "colors",
    "ColorFormat",
    "Pixel",
    "RGB",
    "rgb",
    "channel_count",
    "Image",
    "Shape",
    "Line",
    "Circle",
    "FilledCircle",
    "draw_line",
    "draw_circle",
    "draw_filled_circle",
    "flip_vertical",
    "flip_horizontal",
    "flip_vertical_inplace",
    "flip_horizontal_inplace",
    "GenialError",
    "DecodeError",
    "EncodeError",
    "SizeMismatchError",
    "UnsupportedFormatError",
    "ConfigError",
]
