from __future__ import annotations
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import UnitFloat

from ..colors.rgb import ColorRGB
from ..types.color_types import Positions


def round_half_up(values: NDArray) -> NDArray:
    """Round non-negative values with halves going up (``127.5 -> 128``)."""
    return np.floor(values + 0.5)


def linear_factors(length: int) -> NDArray:
    """
    Normalized column positions ``i / (length - 1)`` for a line of ``length`` characters.

    A single-character line has no span to divide by; its only factor is 0.
    """
    if length <= 0:
        return np.empty(0, dtype=np.float64)
    if length == 1:
        return np.zeros(1, dtype=np.float64)
    return np.arange(length, dtype=np.float64) / (length - 1)


def linear(start: ColorRGB, end: ColorRGB, factor: Positions) -> ColorRGB:
    """
    Interpolate between two colors.

    Args:
        start: Color at factor 0
        end: Color at factor 1
        factor: Position in [0, 1], scalar or 1D array; clamped to that range

    Returns:
        A single color for a scalar factor, otherwise an array color with one
        entry per factor.
    """
    start_arr = np.asarray(start.to_tuple(), dtype=np.float64)
    delta = np.asarray(end.to_tuple(), dtype=np.float64) - start_arr

    if isinstance(factor, NDArray):
        u = np.clip(factor.astype(np.float64, copy=False), 0.0, 1.0)[:, np.newaxis]
        result = np.clip(round_half_up(start_arr + u * delta), 0, 255)
        return ColorRGB(result.astype(np.uint8))

    u = float(UnitFloat(factor))
    result = np.clip(round_half_up(start_arr + u * delta), 0, 255)
    r, g, b = (int(v) for v in result)
    return ColorRGB((r, g, b))
