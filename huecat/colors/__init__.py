"""
Huecat Color Classes
====================

Immutable 8-bit RGB colors and the parser for user-supplied color strings.

Scalar Usage
-----------
>>> from huecat.colors import RGB, parse_color
>>>
>>> color = RGB((255, 128, 0))
>>> color.value  # (255, 128, 0)
>>> color.ansi_code()  # '\\x1b[38;2;255;128;0m'
>>> parse_color("#FF8000") == color  # True

Array Usage
-----------
>>> import numpy as np
>>> colors = RGB(np.array([[255, 0, 0], [0, 0, 255]]))
>>> colors.is_array  # True
>>> colors.ansi_codes()  # one escape per color

Notes
-----
- Channel values are clamped to 0..255 during initialization
- Arrays are stored as uint8 with shape (n, 3)
- Instances are frozen after ``__init__``
"""

from .rgb import ColorRGB, RGB, RED, BLUE, ANSI_RESET
from .parse import (
    ColorParseError,
    InvalidFormat,
    InvalidValues,
    parse_color,
    try_parse_color,
)

__all__ = [
    "ColorRGB",
    "RGB",
    "RED",
    "BLUE",
    "ANSI_RESET",
    "ColorParseError",
    "InvalidFormat",
    "InvalidValues",
    "parse_color",
    "try_parse_color",
]
