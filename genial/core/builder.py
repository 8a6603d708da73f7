"""Fluent drawing API.

Builders collect shape parameters through chained setters and rasterize on
``draw()``, which returns the image so further shapes can be chained:

    >>> (
    ...     Image.new(100, 100)
    ...     .line().start(0, 0).end(100, 100).with_color(WHITE).draw()
    ...     .circle().origin(50, 50).radius(30).with_color(CYAN).draw()
    ...     .save("drawing.png")
    ... )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from genial.colors import WHITE
from genial.components.color import Pixel
from genial.components.shapes import Circle, FilledCircle, Line, Shape

if TYPE_CHECKING:
    from genial.core.image import Image


class _ShapeBuilder:
    """Shared state for shape builders."""

    def __init__(self, image: Image) -> None:
        self.image = image
        self._color: Pixel = WHITE

    def with_color(self, color: Pixel) -> Any:
        """Set the drawing color.

        Returns:
            Self for method chaining
        """
        self._color = color
        return self

    def build(self) -> Shape:
        raise NotImplementedError

    def draw(self) -> Image:
        """Rasterize the configured shape.

        Returns:
            The image being drawn on

        Raises:
            ValueError: If a required parameter was never set
        """
        return self.build().draw(self.image)

    @staticmethod
    def _require(value: Any, name: str, shape: str) -> Any:
        if value is None:
            raise ValueError(f"{shape} is missing {name}; call .{name}() before .draw()")
        return value


class LineBuilder(_ShapeBuilder):
    """Builder for :class:`Line`."""

    def __init__(self, image: Image) -> None:
        super().__init__(image)
        self._start: tuple[int, int] | None = None
        self._end: tuple[int, int] | None = None

    def start(self, x: int, y: int) -> LineBuilder:
        self._start = (x, y)
        return self

    def end(self, x: int, y: int) -> LineBuilder:
        self._end = (x, y)
        return self

    def from_(self, x: int, y: int) -> LineBuilder:
        """Alias for :meth:`start`."""
        return self.start(x, y)

    def to(self, x: int, y: int) -> LineBuilder:
        """Alias for :meth:`end`."""
        return self.end(x, y)

    def build(self) -> Line:
        return Line(
            start=self._require(self._start, "start", "line"),
            end=self._require(self._end, "end", "line"),
            color=self._color,
        )


class CircleBuilder(_ShapeBuilder):
    """Builder for :class:`Circle` and :class:`FilledCircle`."""

    def __init__(self, image: Image, filled: bool = False) -> None:
        super().__init__(image)
        self.filled = filled
        self._origin: tuple[int, int] | None = None
        self._radius: int | None = None

    def origin(self, x: int, y: int) -> CircleBuilder:
        self._origin = (x, y)
        return self

    def radius(self, r: int) -> CircleBuilder:
        self._radius = r
        return self

    def build(self) -> Circle:
        shape = FilledCircle if self.filled else Circle
        return shape(
            origin=self._require(self._origin, "origin", shape.__name__),
            radius=self._require(self._radius, "radius", shape.__name__),
            color=self._color,
        )
