"""Image: a flat pixel buffer with upward-y addressing.

The buffer is a contiguous bytearray holding ``width * height`` pixels of
``format.channels`` bytes each, stored top row first. Coordinates follow
the mathematical convention: ``x`` grows to the right, ``y`` grows upward,
so ``(0, 0)`` is the bottom-left pixel and the row in storage is
``height - y - 1``.

Pixel access is lenient:
- Writes outside ``[0, width) x [0, height)`` are dropped
- Reads outside the image return the zero (black) color
- Writing a pixel whose format differs from the image format is a no-op

This keeps rasterizers free of bounds checks.

Example:
    >>> img = Image.new(4, 3)
    >>> img.set_pixel(0, 0, rgb(255, 0, 0))
    >>> img.get_pixel(0, 0)
    rgb(255, 0, 0)
    >>> img.as_array()[2, 0]  # bottom row is the last stored row
    array([255,   0,   0], dtype=uint8)
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

import numpy as np

from genial.components.color import RGB, ColorFormat, Pixel
from genial.core.errors import SizeMismatchError

if TYPE_CHECKING:
    from genial.core.builder import CircleBuilder, LineBuilder

logger = logging.getLogger(__name__)

# Source channel for each of R, G, B when converting a format to RGB.
# Alpha is dropped without compositing.
_RGB_CHANNELS: dict[ColorFormat, list[int]] = {
    ColorFormat.Y: [0, 0, 0],
    ColorFormat.YA: [0, 0, 0],
    ColorFormat.AY: [1, 1, 1],
    ColorFormat.RGB: [0, 1, 2],
    ColorFormat.RGBA: [0, 1, 2],
    ColorFormat.ARGB: [1, 2, 3],
    ColorFormat.BGR: [2, 1, 0],
    ColorFormat.BGRA: [2, 1, 0],
    ColorFormat.ABGR: [3, 2, 1],
}

_FORMAT_BY_CHANNELS: dict[int, ColorFormat] = {
    1: ColorFormat.Y,
    2: ColorFormat.YA,
    3: ColorFormat.RGB,
    4: ColorFormat.RGBA,
}


class Image:
    """In-memory raster image.

    Attributes:
        width: Number of columns
        height: Number of rows
        format: ColorFormat of every pixel in the buffer
        channels: Bytes per pixel

    Example:
        >>> img = Image(100, 100, ColorFormat.RGB)
        >>> img.set_pixel(10, 20, WHITE)
        >>> img.set_pixel(100, 0, WHITE)  # dropped, x is out of range
        >>> img.save("out.png")
    """

    def __init__(
        self,
        width: int,
        height: int,
        format: ColorFormat = ColorFormat.RGB,
    ) -> None:
        """Create a zero-filled (black) image.

        Args:
            width: Number of columns (>= 0)
            height: Number of rows (>= 0)
            format: Pixel encoding (default RGB)

        Raises:
            ValueError: If a dimension is negative
        """
        if width < 0 or height < 0:
            raise ValueError(f"dimensions must be non-negative, got {width}x{height}")

        self._width = width
        self._height = height
        self._format = ColorFormat(format)
        self._channels = self._format.channels
        self._data = bytearray(width * height * self._channels)

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        format: ColorFormat = ColorFormat.RGB,
    ) -> Image:
        """Alias for the constructor, reads better at the head of a chain."""
        return cls(width, height, format)

    @classmethod
    def from_decoded(
        cls,
        width: int,
        height: int,
        format: ColorFormat,
        data: bytes | bytearray | memoryview,
    ) -> Image:
        """Wrap externally decoded pixel bytes (top row first).

        The bytes are copied; the returned image owns its buffer.

        Raises:
            SizeMismatchError: If ``len(data) != width * height * channels``
        """
        fmt = ColorFormat(format)
        expected = width * height * fmt.channels
        if len(data) != expected:
            raise SizeMismatchError(
                f"expected {expected} bytes for {width}x{height} {fmt.value}, "
                f"got {len(data)}"
            )
        image = cls(width, height, fmt)
        image._data[:] = data
        return image

    @classmethod
    def from_array(cls, arr: np.ndarray, format: ColorFormat | None = None) -> Image:
        """Copy an (H, W) or (H, W, C) uint8 array, row 0 being the top row.

        Args:
            arr: Pixel array
            format: Pixel encoding; inferred from C when omitted
                (1=Y, 2=YA, 3=RGB, 4=RGBA)

        Raises:
            ValueError: If the array is not uint8 or has the wrong rank
            SizeMismatchError: If C does not match ``format.channels``
        """
        if not isinstance(arr, np.ndarray):
            raise TypeError(f"Expected ndarray, got {type(arr)}")
        if arr.dtype != np.uint8:
            raise ValueError(f"Expected dtype uint8, got {arr.dtype}")
        if arr.ndim == 2:
            arr = arr[:, :, np.newaxis]
        if arr.ndim != 3:
            raise ValueError(f"Expected shape (H, W) or (H, W, C), got {arr.shape}")

        height, width, channels = arr.shape
        if format is None:
            if channels not in _FORMAT_BY_CHANNELS:
                raise SizeMismatchError(f"cannot infer a format for {channels} channels")
            fmt = _FORMAT_BY_CHANNELS[channels]
        else:
            fmt = ColorFormat(format)
        if channels != fmt.channels:
            raise SizeMismatchError(
                f"{fmt.value} needs {fmt.channels} channels, array has {channels}"
            )
        return cls.from_decoded(width, height, fmt, np.ascontiguousarray(arr).tobytes())

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> Image:
        """Decode an image file.

        Raises:
            DecodeError: If the file cannot be read
        """
        from genial.core.codec import decode

        decoded = decode(path)
        return cls.from_decoded(decoded.width, decoded.height, decoded.format, decoded.data)

    def copy(self) -> Image:
        """Independent copy with its own buffer."""
        return Image.from_decoded(self._width, self._height, self._format, self._data)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def format(self) -> ColorFormat:
        return self._format

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def dimensions(self) -> tuple[int, int]:
        """``(width, height)``."""
        return (self._width, self._height)

    @property
    def data(self) -> memoryview:
        """Read-only view of the raw buffer."""
        return memoryview(self._data).toreadonly()

    def tobytes(self) -> bytes:
        return bytes(self._data)

    # =========================================================================
    # Addressing & pixel ops
    # =========================================================================

    def _index(self, x: int, y: int) -> int | None:
        """Byte offset of pixel (x, y), or None when out of range."""
        if x < 0 or x >= self._width or y < 0 or y >= self._height:
            return None
        ch = self._channels
        return (self._height - y - 1) * self._width * ch + x * ch

    def set_pixel(self, x: int, y: int, color: Pixel) -> None:
        """Write one pixel.

        Dropped when (x, y) is outside the image or when the color's format
        differs from the image format (no implicit conversion).
        """
        if color.color_format != self._format:
            logger.debug(
                "ignoring %s write to %s image", color.color_format.value, self._format.value
            )
            return
        idx = self._index(x, y)
        if idx is None:
            return
        self._data[idx:idx + self._channels] = color.as_bytes()

    def get_pixel(self, x: int, y: int, pixel_type: type[Pixel] = RGB) -> Any:
        """Read one pixel as ``pixel_type`` (RGB by default).

        Returns ``pixel_type.zero()`` when (x, y) is outside the image.

        Raises:
            UnsupportedFormatError: If ``pixel_type`` cannot decode the
                image format
        """
        idx = self._index(x, y)
        if idx is None:
            return pixel_type.zero()
        return pixel_type.from_bytes(self._format, self._data[idx:idx + self._channels])

    def get_raw(self, x: int, y: int) -> bytes:
        """Raw bytes of one pixel in the image format (zeros when out of range)."""
        idx = self._index(x, y)
        if idx is None:
            return bytes(self._channels)
        return bytes(self._data[idx:idx + self._channels])

    def set_raw(self, x: int, y: int, raw: bytes | bytearray | memoryview) -> None:
        """Write raw pixel bytes in the image format (dropped when out of range).

        Raises:
            SizeMismatchError: If ``len(raw) != channels``
        """
        if len(raw) != self._channels:
            raise SizeMismatchError(
                f"{self._format.value} pixel needs {self._channels} bytes, got {len(raw)}"
            )
        idx = self._index(x, y)
        if idx is None:
            return
        self._data[idx:idx + self._channels] = raw

    # =========================================================================
    # Array views & conversion
    # =========================================================================

    def as_array(self) -> np.ndarray:
        """Zero-copy (H, W, C) uint8 view, row 0 being the top row.

        Writes through the view modify the image.
        """
        shape = (self._height, self._width, self._channels)
        if not self._data:
            return np.zeros(shape, dtype=np.uint8)
        return np.ndarray(shape=shape, dtype=np.uint8, buffer=self._data)

    def to_rgb_array(self) -> np.ndarray:
        """(H, W, 3) uint8 copy converted to RGB (alpha dropped)."""
        # Fancy indexing always copies
        return np.ascontiguousarray(self.as_array()[..., _RGB_CHANNELS[self._format]])

    def to_rgb(self) -> Image:
        """New RGB image with the same pixels."""
        if self._format == ColorFormat.RGB:
            return self.copy()
        return Image.from_array(self.to_rgb_array(), ColorFormat.RGB)

    # =========================================================================
    # Persistence
    # =========================================================================

    def save(
        self,
        path: str | os.PathLike[str],
        image_format: str | None = None,
        config_path: str | None = None,
    ) -> Image:
        """Encode as 24-bit RGB and write to ``path``.

        Args:
            path: Output file
            image_format: Pillow format name; inferred from the extension
                or taken from the config when None
            config_path: Path to genial.toml (auto-detected if None)

        Returns:
            Self, so a drawing chain can end with ``.save(...)``

        Raises:
            EncodeError: If the codec fails
        """
        from genial.core.codec import encode

        encode(
            path,
            self._width,
            self._height,
            self.to_rgb_array().tobytes(),
            image_format=image_format,
            config_path=config_path,
        )
        return self

    # =========================================================================
    # Fluent drawing
    # =========================================================================

    def line(self) -> LineBuilder:
        """Start a fluent line: ``img.line().start(0, 0).end(9, 9).draw()``."""
        from genial.core.builder import LineBuilder

        return LineBuilder(self)

    def circle(self) -> CircleBuilder:
        """Start a fluent circle outline."""
        from genial.core.builder import CircleBuilder

        return CircleBuilder(self, filled=False)

    def filled_circle(self) -> CircleBuilder:
        """Start a fluent filled circle."""
        from genial.core.builder import CircleBuilder

        return CircleBuilder(self, filled=True)

    # =========================================================================
    # Dunder
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self._format == other._format
            and self._width == other._width
            and self._height == other._height
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height}, format={self._format.value})"
