"""Exception hierarchy for genial.

Constructive failures (decoding, encoding, size mismatches, bad config)
are raised to the caller. Out-of-range pixel access never raises; see
:class:`genial.core.image.Image`.
"""

from __future__ import annotations


class GenialError(Exception):
    """Base class for all genial errors."""


class DecodeError(GenialError, ValueError):
    """The codec could not read an image file or buffer."""


class EncodeError(GenialError, ValueError):
    """The codec could not write an image."""


class SizeMismatchError(GenialError, ValueError):
    """Pixel data length disagrees with width * height * channels."""


class UnsupportedFormatError(GenialError, NotImplementedError):
    """A pixel type has no conversion for the requested color format."""


class ConfigError(GenialError, ValueError):
    """Configuration file contains invalid values."""
