"""Integer rasterizers: Bresenham line, midpoint circle, filled circle.

All functions draw through :meth:`Image.set_pixel` and rely on its
lenient bounds policy, so shapes may extend past the image edges.
Coordinates use the upward-y convention of :class:`Image`.
"""

from __future__ import annotations

from genial.components.color import Pixel
from genial.core.image import Image

Point = tuple[int, int]


def draw_line(image: Image, start: Point, end: Point, color: Pixel) -> None:
    """Draw a line from ``start`` towards ``end`` (Bresenham).

    The major axis is walked over the half-open range [start, end), so the
    terminal endpoint is not drawn and exactly ``max(|dx|, |dy|)`` pixels
    are written. A line from (0, 0) to (3, 3) sets (0, 0), (1, 1), (2, 2).
    """
    x0, y0 = start
    x1, y1 = end

    # Transpose steep lines so x is always the major axis
    steep = abs(x0 - x1) < abs(y0 - y1)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    derror = abs(y1 - y0) * 2
    ystep = 1 if y1 > y0 else -1
    error = 0
    y = y0
    for x in range(x0, x1):
        if steep:
            image.set_pixel(y, x, color)
        else:
            image.set_pixel(x, y, color)
        error += derror
        if error > dx:
            y += ystep
            error -= dx * 2


def draw_circle(image: Image, center: Point, radius: int, color: Pixel) -> None:
    """Draw a one-pixel circle outline (midpoint algorithm).

    Each iteration writes all eight octant reflections, including
    coincident ones on the axes and diagonals.

    Raises:
        ValueError: If radius is negative
    """
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    x0, y0 = center
    x = radius
    y = 0
    err = 0
    while x >= y:
        image.set_pixel(x0 + x, y0 + y, color)
        image.set_pixel(x0 + y, y0 + x, color)
        image.set_pixel(x0 - y, y0 + x, color)
        image.set_pixel(x0 - x, y0 + y, color)
        image.set_pixel(x0 - x, y0 - y, color)
        image.set_pixel(x0 - y, y0 - x, color)
        image.set_pixel(x0 + y, y0 - x, color)
        image.set_pixel(x0 + x, y0 - y, color)

        y += 1
        if err <= 0:
            err += 2 * y + 1
        if err > 0:
            x -= 1
            err -= 2 * x + 1


def draw_filled_circle(image: Image, center: Point, radius: int, color: Pixel) -> None:
    """Draw a filled disc, then stamp the outline over it.

    The interior scan covers the square [-r, r) x [-r, r) around the
    center and keeps points with tx^2 + ty^2 <= r^2. The outline pass runs
    last so its pixels are never overwritten.

    Raises:
        ValueError: If radius is negative
    """
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    x0, y0 = center
    r2 = radius * radius
    for ty in range(-radius, radius):
        for tx in range(-radius, radius):
            if tx * tx + ty * ty <= r2:
                image.set_pixel(x0 + tx, y0 + ty, color)
    draw_circle(image, center, radius, color)
