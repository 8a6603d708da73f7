"""Named RGB colors."""

from genial.components.color import rgb

WHITE = rgb(255, 255, 255)
BLACK = rgb(0, 0, 0)
RED = rgb(255, 0, 0)
LIME = rgb(0, 255, 0)
BLUE = rgb(0, 0, 255)
YELLOW = rgb(255, 255, 0)
CYAN = rgb(0, 255, 255)
MAGENTA = rgb(255, 0, 255)
SILVER = rgb(192, 192, 192)
GRAY = rgb(128, 128, 128)
MAROON = rgb(218, 0, 0)
OLIVE = rgb(128, 128, 0)
GREEN = rgb(0, 128, 0)
PURPLE = rgb(128, 0, 128)
TEAL = rgb(0, 128, 128)
NAVY = rgb(0, 0, 128)

__all__ = [
    "WHITE",
    "BLACK",
    "RED",
    "LIME",
    "BLUE",
    "YELLOW",
    "CYAN",
    "MAGENTA",
    "SILVER",
    "GRAY",
    "MAROON",
    "OLIVE",
    "GREEN",
    "PURPLE",
    "TEAL",
    "NAVY",
]
