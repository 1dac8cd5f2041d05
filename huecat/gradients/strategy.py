from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, Type
import numpy as np

from ..colors.rgb import ColorRGB
from ..types.gradient_mode import GradientMode
from .linear import linear, linear_factors
from .rainbow import rainbow

if TYPE_CHECKING:
    from ..config import RenderConfig


class LineGradient(ABC):
    """Maps every column of one line to a color, in a single vectorized call."""

    mode: GradientMode

    @abstractmethod
    def __call__(self, length: int, row_index: int) -> ColorRGB:
        ...


class RainbowGradient(LineGradient):
    mode = GradientMode.RAINBOW

    def __init__(self, offset: float, frequency: float, spread: float) -> None:
        self.offset = offset
        self.frequency = frequency
        self.spread = spread

    @classmethod
    def from_config(cls, config: RenderConfig) -> RainbowGradient:
        return cls(config.offset, config.frequency, config.spread)

    def __call__(self, length: int, row_index: int) -> ColorRGB:
        shifts = np.arange(length, dtype=np.float64) + row_index
        return rainbow(self.offset, self.frequency, self.spread, shifts)


class LinearGradient(LineGradient):
    mode = GradientMode.LINEAR

    def __init__(self, start: ColorRGB, end: ColorRGB) -> None:
        self.start = start
        self.end = end

    @classmethod
    def from_config(cls, config: RenderConfig) -> LinearGradient:
        return cls(config.start_color, config.end_color)

    def __call__(self, length: int, row_index: int) -> ColorRGB:
        # Every line spans the full start..end range regardless of its row.
        return linear(self.start, self.end, linear_factors(length))


GRADIENTS: Dict[GradientMode, Type[RainbowGradient] | Type[LinearGradient]] = {
    GradientMode.RAINBOW: RainbowGradient,
    GradientMode.LINEAR: LinearGradient,
}


def resolve_gradient(config: RenderConfig) -> LineGradient:
    """Pick the gradient for ``config.mode`` once, before any line is rendered."""
    return GRADIENTS[config.mode].from_config(config)
