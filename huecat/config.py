"""Render settings and the builder that turns raw option strings into them."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Mapping

from .colors import BLUE, RED, ColorRGB, try_parse_color
from .logging_setup import get_logger
from .types import DEFAULT_MODE, GradientMode


DEFAULT_FREQUENCY = 1.0
DEFAULT_SPREAD = 15.0
DEFAULT_OFFSET = 15.0
NO_COLOR_ENV = "NO_COLOR"


class ConfigError(ValueError):
    """A tuning option could not be turned into a usable value."""


@dataclass(frozen=True)
class RenderConfig:
    mode: GradientMode = DEFAULT_MODE
    frequency: float = DEFAULT_FREQUENCY
    spread: float = DEFAULT_SPREAD
    offset: float = DEFAULT_OFFSET
    start_color: ColorRGB = field(default=RED)
    end_color: ColorRGB = field(default=BLUE)
    no_color: bool = False


DEFAULT_CONFIG = RenderConfig()


def _parse_float(name: str, raw: str | None, default: float) -> float:
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"invalid value for --{name}: {raw!r} is not a number") from None
    if not math.isfinite(value):
        raise ConfigError(f"invalid value for --{name}: {raw!r} is not finite")
    return value


def _parse_positive(name: str, raw: str | None, default: float) -> float:
    value = _parse_float(name, raw, default)
    if value <= 0:
        raise ConfigError(f"invalid value for --{name}: {raw!r} must be positive")
    return value


def _parse_color(name: str, raw: str | None, default: ColorRGB) -> ColorRGB:
    color, error = try_parse_color(raw, default)
    if error is not None:
        get_logger().debug(f"ignoring --{name}: {error}; keeping {default.to_tuple()}")
    return color


def no_color_requested(environ: Mapping[str, str] | None = None) -> bool:
    """``NO_COLOR`` disables styling when it is set at all, whatever its value."""
    environ = os.environ if environ is None else environ
    return NO_COLOR_ENV in environ


def build_config(
    *,
    mode: str | None = None,
    frequency: str | None = None,
    spread: str | None = None,
    offset: str | None = None,
    start_color: str | None = None,
    end_color: str | None = None,
    no_color: bool = False,
    environ: Mapping[str, str] | None = None,
) -> RenderConfig:
    """
    Build the immutable config for one run.

    Numeric options that do not parse raise :class:`ConfigError`; color options
    that do not parse keep their defaults. The environment is consulted here
    and nowhere else.
    """
    resolved_mode = GradientMode.from_name(mode) if mode is not None else DEFAULT_MODE
    if mode is not None and resolved_mode.value != mode.strip().lower():
        get_logger().debug(f"unknown mode {mode!r}; using {resolved_mode.value}")

    return RenderConfig(
        mode=resolved_mode,
        frequency=_parse_positive("frequency", frequency, DEFAULT_FREQUENCY),
        spread=_parse_positive("spread", spread, DEFAULT_SPREAD),
        offset=_parse_float("offset", offset, DEFAULT_OFFSET),
        start_color=_parse_color("start-color", start_color, RED),
        end_color=_parse_color("end-color", end_color, BLUE),
        no_color=no_color or no_color_requested(environ),
    )
