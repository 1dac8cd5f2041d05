import numpy as np

from huecat.colors.rgb import ColorRGB, RED, BLUE
from huecat.config import RenderConfig
from huecat.gradients import (
    GRADIENTS,
    LinearGradient,
    RainbowGradient,
    linear,
    linear_factors,
    rainbow,
    resolve_gradient,
)
from huecat.types import GradientMode


def test_registry_covers_every_mode():
    assert set(GRADIENTS) == set(GradientMode)


def test_resolve_rainbow():
    gradient = resolve_gradient(RenderConfig(offset=3.0, frequency=2.0, spread=7.0))
    assert isinstance(gradient, RainbowGradient)
    assert (gradient.offset, gradient.frequency, gradient.spread) == (3.0, 2.0, 7.0)


def test_resolve_linear():
    green = ColorRGB((0, 255, 0))
    gradient = resolve_gradient(RenderConfig(mode=GradientMode.LINEAR, start_color=green))
    assert isinstance(gradient, LinearGradient)
    assert gradient.start == green
    assert gradient.end == BLUE


def test_rainbow_shift_is_column_plus_row():
    gradient = RainbowGradient(15.0, 1.0, 15.0)
    colors = gradient(4, 3)
    expected = rainbow(15.0, 1.0, 15.0, np.array([3.0, 4.0, 5.0, 6.0]))
    assert colors == expected


def test_rainbow_rows_differ():
    gradient = RainbowGradient(15.0, 1.0, 15.0)
    assert gradient(2, 0)[0] != gradient(2, 1)[0]


def test_linear_ignores_row():
    gradient = LinearGradient(RED, BLUE)
    assert gradient(6, 0) == gradient(6, 9)
    assert gradient(6, 0) == linear(RED, BLUE, linear_factors(6))


def test_empty_line():
    assert len(RainbowGradient(15.0, 1.0, 15.0)(0, 0)) == 0
    assert len(LinearGradient(RED, BLUE)(0, 0)) == 0
