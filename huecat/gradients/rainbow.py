"""Three-phase sine rainbow."""

from __future__ import annotations
import math
import numpy as np

from ..colors.rgb import ColorRGB
from ..types.color_types import Positions, element_to_array

AMPLITUDE = 127.0
CENTER = 128.0
# Red, green and blue sit 120 degrees apart on the wheel.
PHASES = np.array([0.0, 2.0 * math.pi / 3.0, 4.0 * math.pi / 3.0])


def rainbow(offset: float, frequency: float, spread: float, shift: Positions) -> ColorRGB:
    """
    Sample the rainbow at ``(offset + shift) / spread``.

    Each channel is ``AMPLITUDE * sin(frequency * i + phase) + CENTER``,
    truncated toward zero to an 8-bit value.

    Args:
        offset: Phase of the very first character
        frequency: How fast the hue cycles as the position advances
        spread: Character positions per unit of phase advance
        shift: Column plus row index; scalar or 1D array

    Returns:
        A single color for a scalar shift, otherwise an array color.
    """
    if spread == 0:
        raise ValueError("spread must be non-zero")

    is_array = isinstance(shift, np.ndarray)
    shifts = element_to_array(shift)
    i = (offset + shifts) / spread

    channels = AMPLITUDE * np.sin(frequency * i[:, np.newaxis] + PHASES) + CENTER
    values = np.clip(np.trunc(channels), 0, 255).astype(np.uint8)

    if is_array:
        return ColorRGB(values)
    r, g, b = (int(v) for v in values[0])
    return ColorRGB((r, g, b))
