"""Parsing of user-supplied color strings (``#RRGGBB`` or ``r,g,b``)."""

from __future__ import annotations
import re
from typing import List, Tuple

from .rgb import ColorRGB

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}")
_DECIMAL = re.compile(r"[0-9]+")
_RGB_PREFIX = re.compile(r"^rgb\s*", re.IGNORECASE)


class ColorParseError(ValueError):
    """Base class for color string parse failures."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


class InvalidFormat(ColorParseError):
    """The string matches neither the hex nor the comma-separated layout."""


class InvalidValues(ColorParseError):
    """The layout is right but a component is not a valid channel value."""


def parse_hex(text: str) -> ColorRGB:
    """
    Parse ``#RRGGBB``.

    Raises:
        InvalidFormat: if ``text`` is not ``#`` followed by exactly six characters
        InvalidValues: if any of the six characters is not a hex digit
    """
    digits = text[1:] if text.startswith("#") else text
    if len(digits) != 6:
        raise InvalidFormat(text, "expected '#' followed by 6 hex digits")
    if not _HEX_DIGITS.fullmatch(digits):
        raise InvalidValues(text, "invalid hex digit")
    return ColorRGB(tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4)))


def _split_components(text: str) -> List[str]:
    body = _RGB_PREFIX.sub("", text.strip(), count=1)
    if body.startswith("(") and body.endswith(")"):
        body = body[1:-1]
    return [component.strip() for component in body.split(",")]


def parse_rgb(text: str) -> ColorRGB:
    """
    Parse a comma-separated decimal triplet such as ``"0, 0, 255"`` or ``"rgb(0,0,255)"``.

    Raises:
        InvalidFormat: if there are not exactly three components, or a component
            is not a decimal integer literal
        InvalidValues: if a component is outside ``[0, 255]``
    """
    components = _split_components(text)
    if len(components) != 3:
        raise InvalidFormat(text, f"expected 3 comma-separated components, got {len(components)}")

    channels: List[int] = []
    for component in components:
        if not _DECIMAL.fullmatch(component):
            raise InvalidFormat(text, f"component {component!r} is not a decimal integer")
        channel = int(component)
        if channel > 255:
            raise InvalidValues(text, f"component {channel} is outside 0..255")
        channels.append(channel)

    r, g, b = channels
    return ColorRGB((r, g, b))


def parse_color(text: str) -> ColorRGB:
    """
    Parse a color string into a :class:`ColorRGB`.

    A leading ``#`` selects the hex form; every other string is read as a
    comma-separated decimal triplet with an optional ``rgb`` prefix.

    Examples:
        >>> parse_color("#FF0000").to_tuple()
        (255, 0, 0)
        >>> parse_color("0, 0, 255").to_tuple()
        (0, 0, 255)
    """
    stripped = text.strip()
    if stripped.startswith("#"):
        return parse_hex(stripped)
    return parse_rgb(stripped)


def try_parse_color(text: str | None, default: ColorRGB) -> Tuple[ColorRGB, ColorParseError | None]:
    """Parse ``text`` or fall back to ``default``; the error is returned, never raised."""
    if text is None:
        return default, None
    try:
        return parse_color(text), None
    except ColorParseError as exc:
        return default, exc
