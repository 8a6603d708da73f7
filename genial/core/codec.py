"""Image file codec backed by Pillow.

Decoding maps Pillow modes onto ColorFormat:

    L    -> Y
    LA   -> YA
    RGB  -> RGB
    RGBA -> RGBA

Any other mode is converted first: to RGBA when it carries alpha (a
transparency key or an alpha band), otherwise to RGB.

Encoding always writes 24-bit RGB. Callers holding another format convert
with :meth:`genial.core.image.Image.to_rgb_array` first.
"""

from __future__ import annotations

import io
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from PIL import Image as PILImage

from genial.components.color import ColorFormat
from genial.core.config import CodecConfig, load_codec_config
from genial.core.errors import DecodeError, EncodeError, SizeMismatchError

logger = logging.getLogger(__name__)

_MODE_TO_FORMAT: dict[str, ColorFormat] = {
    "L": ColorFormat.Y,
    "LA": ColorFormat.YA,
    "RGB": ColorFormat.RGB,
    "RGBA": ColorFormat.RGBA,
}

# Pillow raises these for unreadable, truncated or oversized input
_DECODE_ERRORS = (OSError, ValueError, SyntaxError, PILImage.DecompressionBombError)


@dataclass(frozen=True)
class DecodedImage:
    """Raw result of decoding a file.

    Attributes:
        width: Number of columns
        height: Number of rows
        format: ColorFormat of ``data``
        data: Interleaved pixel bytes, top row first
    """

    width: int
    height: int
    format: ColorFormat
    data: bytes

    def __post_init__(self) -> None:
        expected = self.width * self.height * self.format.channels
        if len(self.data) != expected:
            raise SizeMismatchError(
                f"decoded {len(self.data)} bytes, expected {expected} for "
                f"{self.width}x{self.height} {self.format.value}"
            )


def _has_alpha(img: PILImage.Image) -> bool:
    bands = img.getbands()
    return "A" in bands or "a" in bands or "transparency" in img.info


def _from_pil(img: PILImage.Image) -> DecodedImage:
    if img.mode not in _MODE_TO_FORMAT:
        target = "RGBA" if _has_alpha(img) else "RGB"
        logger.debug("converting Pillow mode %s to %s", img.mode, target)
        img = img.convert(target)
    width, height = img.size
    return DecodedImage(
        width=width,
        height=height,
        format=_MODE_TO_FORMAT[img.mode],
        data=img.tobytes(),
    )


def decode(path: str | os.PathLike[str]) -> DecodedImage:
    """Read an image file into raw pixel bytes.

    Raises:
        DecodeError: If the file is missing or cannot be parsed
    """
    try:
        with PILImage.open(path) as img:
            img.load()
            decoded = _from_pil(img)
    except _DECODE_ERRORS as e:
        raise DecodeError(f"Failed to decode {path}: {e}") from e
    logger.debug(
        "decoded %s: %dx%d %s", path, decoded.width, decoded.height, decoded.format.value
    )
    return decoded


def decode_bytes(blob: bytes) -> DecodedImage:
    """Decode an in-memory image file.

    Raises:
        DecodeError: If the bytes cannot be parsed
    """
    try:
        with PILImage.open(io.BytesIO(blob)) as img:
            img.load()
            return _from_pil(img)
    except _DECODE_ERRORS as e:
        raise DecodeError(f"Failed to decode image bytes: {e}") from e


def _rgb_image(width: int, height: int, rgb_data: bytes | bytearray | memoryview) -> PILImage.Image:
    expected = width * height * 3
    if len(rgb_data) != expected:
        raise SizeMismatchError(
            f"expected {expected} RGB bytes for {width}x{height}, got {len(rgb_data)}"
        )
    if width <= 0 or height <= 0:
        raise EncodeError(f"cannot encode an empty {width}x{height} image")
    return PILImage.frombytes("RGB", (width, height), bytes(rgb_data))


def _save_options(image_format: str, config: CodecConfig) -> dict[str, Any]:
    if image_format == "PNG":
        return {"compress_level": config.png_compress_level}
    return {}


def _resolve_format(path: Path, image_format: str | None, config: CodecConfig) -> str:
    if image_format:
        return image_format.upper()
    ext = PILImage.registered_extensions().get(path.suffix.lower())
    return ext if ext else config.default_format


def encode(
    path: str | os.PathLike[str],
    width: int,
    height: int,
    rgb_data: bytes | bytearray | memoryview,
    image_format: str | None = None,
    config_path: str | None = None,
) -> None:
    """Write 24-bit RGB pixel bytes (top row first) to ``path``.

    Args:
        path: Output file
        width: Number of columns
        height: Number of rows
        rgb_data: ``width * height * 3`` bytes
        image_format: Pillow format name (e.g. 'PNG', 'BMP'); inferred from
            the extension, then from the config, when None
        config_path: Path to genial.toml (auto-detected if None)

    Raises:
        SizeMismatchError: If ``rgb_data`` has the wrong length
        EncodeError: If Pillow cannot write the file
    """
    config = load_codec_config(config_path)
    img = _rgb_image(width, height, rgb_data)
    out = Path(path)
    fmt = _resolve_format(out, image_format, config)
    try:
        img.save(out, format=fmt, **_save_options(fmt, config))
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(f"Failed to encode {out} as {fmt}: {e}") from e
    logger.debug("encoded %s: %dx%d as %s", out, width, height, fmt)


def encode_bytes(
    width: int,
    height: int,
    rgb_data: bytes | bytearray | memoryview,
    image_format: str = "PNG",
) -> bytes:
    """Encode 24-bit RGB pixel bytes into an in-memory image file.

    Raises:
        SizeMismatchError: If ``rgb_data`` has the wrong length
        EncodeError: If Pillow cannot encode the format
    """
    img = _rgb_image(width, height, rgb_data)
    fmt = image_format.upper()
    buffer = io.BytesIO()
    try:
        img.save(buffer, format=fmt, **_save_options(fmt, CodecConfig()))
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(f"Failed to encode image as {fmt}: {e}") from e
    return buffer.getvalue()
