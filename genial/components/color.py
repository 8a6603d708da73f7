"""Color formats and typed pixel values.

ColorFormat tags describe how a pixel is laid out in an image buffer.
Pixel types convert between a typed color and its raw bytes. Only RGB is
implemented as a typed pixel; other formats can still be stored in an
Image, but reading them through RGB raises UnsupportedFormatError.

Example:
    >>> red = rgb(255, 0, 0)
    >>> red.as_bytes()
    b'\\xff\\x00\\x00'
    >>> channel_count(ColorFormat.RGBA)
    4
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field

from genial.core.errors import UnsupportedFormatError


class ColorFormat(str, Enum):
    """Pixel encodings an Image buffer can hold."""

    Y = "Y"
    YA = "YA"
    AY = "AY"
    RGB = "RGB"
    RGBA = "RGBA"
    ARGB = "ARGB"
    BGR = "BGR"
    BGRA = "BGRA"
    ABGR = "ABGR"

    @property
    def channels(self) -> int:
        """Bytes per pixel."""
        return _CHANNELS[self]

    @property
    def has_alpha(self) -> bool:
        return "A" in self.value


_CHANNELS: dict[ColorFormat, int] = {
    ColorFormat.Y: 1,
    ColorFormat.YA: 2,
    ColorFormat.AY: 2,
    ColorFormat.RGB: 3,
    ColorFormat.BGR: 3,
    ColorFormat.RGBA: 4,
    ColorFormat.ARGB: 4,
    ColorFormat.BGRA: 4,
    ColorFormat.ABGR: 4,
}


def channel_count(fmt: ColorFormat) -> int:
    """Return the number of bytes one pixel occupies in ``fmt``."""
    return _CHANNELS[ColorFormat(fmt)]


class Pixel(BaseModel, ABC):
    """Base class for typed pixel values.

    Subclasses declare their ColorFormat and know how to build themselves
    from an RGB triple or from raw bytes of a given format.
    """

    model_config = {"frozen": True}

    color_format: ClassVar[ColorFormat]

    @abstractmethod
    def as_bytes(self) -> bytes:
        """Raw channel bytes in ``color_format`` order."""

    @classmethod
    @abstractmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Pixel:
        """Build a pixel from an RGB triple."""

    @classmethod
    @abstractmethod
    def from_bytes(cls, fmt: ColorFormat, raw: bytes | bytearray | memoryview) -> Pixel:
        """Decode one pixel stored in ``fmt``.

        Raises:
            UnsupportedFormatError: If this pixel type cannot decode ``fmt``
        """

    @classmethod
    def zero(cls) -> Pixel:
        """The value returned for out-of-range reads."""
        return cls.from_rgb(0, 0, 0)


class RGB(Pixel):
    """24-bit RGB color.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """

    color_format: ClassVar[ColorFormat] = ColorFormat.RGB

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    def as_bytes(self) -> bytes:
        return bytes((self.r, self.g, self.b))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> RGB:
        return cls(r=r, g=g, b=b)

    @classmethod
    def from_bytes(cls, fmt: ColorFormat, raw: bytes | bytearray | memoryview) -> RGB:
        if fmt != ColorFormat.RGB:
            raise UnsupportedFormatError(
                f"{cls.__name__} cannot decode pixels stored as {ColorFormat(fmt).value}"
            )
        if len(raw) != 3:
            raise ValueError(f"RGB pixel needs 3 bytes, got {len(raw)}")
        return cls(r=raw[0], g=raw[1], b=raw[2])

    def __repr__(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"


def rgb(r: int, g: int, b: int) -> RGB:
    """Shorthand for ``RGB(r=r, g=g, b=b)``."""
    return RGB(r=r, g=g, b=b)
