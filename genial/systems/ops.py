"""Flip transforms.

``flip_vertical``/``flip_horizontal`` return a new image filled from
mirrored source coordinates. The ``*_inplace`` variants swap pixel pairs
in the given image. Both move raw pixel bytes, so they work for every
ColorFormat, and produce identical content.
"""

from __future__ import annotations

from genial.core.image import Image


def flip_vertical(image: Image) -> Image:
    """Mirror top-to-bottom into a new image."""
    width, height = image.dimensions
    result = Image(width, height, image.format)
    for y in range(height):
        for x in range(width):
            result.set_raw(x, height - 1 - y, image.get_raw(x, y))
    return result


def flip_horizontal(image: Image) -> Image:
    """Mirror left-to-right into a new image."""
    width, height = image.dimensions
    result = Image(width, height, image.format)
    for y in range(height):
        for x in range(width):
            result.set_raw(width - 1 - x, y, image.get_raw(x, y))
    return result


def flip_vertical_inplace(image: Image) -> Image:
    """Swap row y with row height-1-y for the lower half of the rows.

    The middle row of an odd height is left untouched.

    Returns:
        The same image
    """
    width, height = image.dimensions
    for y in range(height // 2):
        mirror = height - 1 - y
        for x in range(width):
            lower = image.get_raw(x, y)
            image.set_raw(x, y, image.get_raw(x, mirror))
            image.set_raw(x, mirror, lower)
    return image


def flip_horizontal_inplace(image: Image) -> Image:
    """Swap column x with column width-1-x for the left half of the columns.

    The middle column of an odd width is left untouched.

    Returns:
        The same image
    """
    width, height = image.dimensions
    for x in range(width // 2):
        mirror = width - 1 - x
        for y in range(height):
            left = image.get_raw(x, y)
            image.set_raw(x, y, image.get_raw(mirror, y))
            image.set_raw(mirror, y, left)
    return image
