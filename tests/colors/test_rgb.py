import numpy as np
import pytest

from huecat.colors.rgb import ColorRGB, RGB, RED, BLUE, ANSI_RESET


def test_channels():
    color = ColorRGB((10, 20, 30))
    assert (color.r, color.g, color.b) == (10, 20, 30)
    assert color.value == (10, 20, 30)
    assert not color.is_array


def test_values_are_clamped():
    assert ColorRGB((300, -5, 10)).value == (255, 0, 10)


def test_wrong_channel_count():
    with pytest.raises(ValueError, match="expects 3 channels, got 2"):
        ColorRGB((1, 2))


def test_immutable():
    color = ColorRGB((1, 2, 3))
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        color.extra = 1


def test_structural_equality_and_hash():
    assert ColorRGB((1, 2, 3)) == ColorRGB((1, 2, 3))
    assert ColorRGB((1, 2, 3)) != ColorRGB((3, 2, 1))
    assert ColorRGB((1, 2, 3)) == (1, 2, 3)
    assert len({ColorRGB((1, 2, 3)), ColorRGB((1, 2, 3))}) == 1
    assert RGB is ColorRGB


def test_ansi_code():
    assert ColorRGB((255, 0, 128)).ansi_code() == "\x1b[38;2;255;0;128m"
    assert RED.ansi_code() == "\x1b[38;2;255;0;0m"
    assert BLUE.ansi_code() == "\x1b[38;2;0;0;255m"
    assert ANSI_RESET == "\x1b[0m"


def test_array_color():
    colors = ColorRGB(np.array([[255, 0, 0], [0, 0, 255]]))
    assert colors.is_array
    assert len(colors) == 2
    assert colors.value.dtype == np.uint8
    assert colors[1] == BLUE
    assert list(colors) == [RED, BLUE]
    assert colors.ansi_codes() == [RED.ansi_code(), BLUE.ansi_code()]


def test_array_color_clamps_and_validates_shape():
    colors = ColorRGB(np.array([[300.0, -2.0, 12.0]]))
    assert np.array_equal(colors.value, np.array([[255, 0, 12]]))
    with pytest.raises(ValueError):
        ColorRGB(np.array([1, 2, 3]))


def test_channel_accessors_need_single_color():
    colors = ColorRGB(np.zeros((2, 3)))
    with pytest.raises(TypeError):
        colors.r
