"""Shape parameter models.

Each shape holds validated parameters and knows which rasterizer draws it.

Example:
    >>> Circle(origin=(50, 50), radius=30, color=CYAN).draw(img)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from genial.colors import WHITE
from genial.components.color import Pixel

if TYPE_CHECKING:
    from genial.core.image import Image


class Shape(BaseModel, ABC):
    """Base class for drawable shapes.

    Attributes:
        color: Pixel value written for every rasterized point (default WHITE)
    """

    model_config = {"frozen": True}

    color: Pixel = Field(default=WHITE)

    @abstractmethod
    def draw(self, image: Image) -> Image:
        """Rasterize into ``image`` and return it."""


class Line(Shape):
    """Line segment; the end point itself is not drawn.

    Attributes:
        start: (x, y) of the first pixel
        end: (x, y) the line runs towards
    """

    start: tuple[int, int]
    end: tuple[int, int]

    def draw(self, image: Image) -> Image:
        from genial.systems.draw import draw_line

        draw_line(image, self.start, self.end, self.color)
        return image


class Circle(Shape):
    """Circle outline.

    Attributes:
        origin: (x, y) center
        radius: Radius in pixels (>= 0)
    """

    origin: tuple[int, int]
    radius: int = Field(ge=0)

    def draw(self, image: Image) -> Image:
        from genial.systems.draw import draw_circle

        draw_circle(image, self.origin, self.radius, self.color)
        return image


class FilledCircle(Circle):
    """Filled disc with a crisp outline."""

    def draw(self, image: Image) -> Image:
        from genial.systems.draw import draw_filled_circle

        draw_filled_circle(image, self.origin, self.radius, self.color)
        return image
