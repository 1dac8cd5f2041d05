"""Per-character gradients: the sine rainbow and two-color linear interpolation."""

from .linear import linear, linear_factors
from .rainbow import rainbow, AMPLITUDE, CENTER, PHASES
from .strategy import (
    LineGradient,
    RainbowGradient,
    LinearGradient,
    GRADIENTS,
    resolve_gradient,
)

__all__ = [
    "linear",
    "linear_factors",
    "rainbow",
    "AMPLITUDE",
    "CENTER",
    "PHASES",
    "LineGradient",
    "RainbowGradient",
    "LinearGradient",
    "GRADIENTS",
    "resolve_gradient",
]
