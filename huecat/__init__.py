"""
Huecat - gradient-colored text viewer
=====================================

Prints text line by line with a true-color ANSI gradient across every line:
either a three-phase sine "rainbow" or a linear blend between two colors.

Quick Start
-----------
>>> from huecat import RenderConfig, GradientMode, render_line, parse_color
>>>
>>> render_line("hello", 0, RenderConfig())
>>> config = RenderConfig(
...     mode=GradientMode.LINEAR,
...     start_color=parse_color("#00FF00"),
...     end_color=parse_color("0, 0, 255"),
... )
>>> render_line("hello", 0, config)

Modules
-------
- colors: immutable RGB colors, ANSI escapes, color string parsing
- gradients: rainbow and linear gradients, per-line strategy resolution
- render: line rendering
- stream: input sources and the driver loop
- config: render settings and their builder
- cli: command-line entrypoint
"""

__version__ = "0.1.0"

from .colors import (
    ColorRGB, RGB, ANSI_RESET,
    ColorParseError, InvalidFormat, InvalidValues,
    parse_color,
)
from .types import GradientMode
from .gradients import linear, linear_factors, rainbow, resolve_gradient
from .config import RenderConfig, ConfigError, build_config
from .render import LineRenderer, render_line
from .stream import StreamDriver, InputError, iter_lines

__all__ = [
    # Colors
    "ColorRGB", "RGB", "ANSI_RESET",
    "ColorParseError", "InvalidFormat", "InvalidValues",
    "parse_color",

    # Gradients
    "GradientMode",
    "linear", "linear_factors", "rainbow", "resolve_gradient",

    # Rendering
    "RenderConfig", "ConfigError", "build_config",
    "LineRenderer", "render_line",
    "StreamDriver", "InputError", "iter_lines",

    # Version
    "__version__",
]
