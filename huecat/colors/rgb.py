from __future__ import annotations
from typing import Any, ClassVar, Iterator, List, Tuple, Union, cast
from numpy import ndarray
import numpy as np

from ..types.color_types import ColorValue, IntVector

ANSI_RESET = "\x1b[0m"


class ColorRGB:
    """
    Immutable 8-bit RGB color.

    Holds either a single ``(r, g, b)`` tuple or an ``(n, 3)`` array of colors,
    one per character of a rendered line. Channel values are clamped to
    ``[0, 255]`` on construction.
    """
    __slots__ = ('_value', '_is_frozen')  # no new attributes, so instances stay immutable

    num_channels: ClassVar[int] = 3
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorValue, ColorRGB]) -> None:
        if isinstance(value, ColorRGB):
            value = value.value

        # ---- Handle array input ----
        if isinstance(value, ndarray):
            arr = value
            if not isinstance(arr.dtype.type(0), (np.integer, np.floating)):
                raise TypeError(f"rgb expects a numeric dtype, got {arr.dtype}")
            if arr.ndim != 2 or arr.shape[-1] != self.num_channels:
                raise ValueError(
                    f"rgb expects an (n, {self.num_channels}) array, got shape {arr.shape}"
                )
            value = np.clip(arr, 0, 255).astype(np.uint8)

        # ---- Handle scalar tuple input ----
        else:
            channels = tuple(cast(Tuple[Any, ...], value))
            if len(channels) != self.num_channels:
                raise ValueError(f"rgb expects {self.num_channels} channels, got {len(channels)}")
            value = tuple(max(0, min(int(v), m)) for v, m in zip(channels, self.maxima))

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def r(self) -> int:
        return self._channel(0)

    @property
    def g(self) -> int:
        return self._channel(1)

    @property
    def b(self) -> int:
        return self._channel(2)

    def _channel(self, index: int) -> int:
        if self.is_array:
            raise TypeError("channel accessors are only defined for a single color")
        return cast(IntVector, self._value)[index]

    # ------------------ TERMINAL OUTPUT ------------------
    def ansi_code(self) -> str:
        """Return the true-color foreground escape for a single color."""
        r, g, b = cast(IntVector, self.to_tuple())
        return f"\x1b[38;2;{r};{g};{b}m"

    def ansi_codes(self) -> List[str]:
        """Return one foreground escape per color; a single color yields one entry."""
        if not self.is_array:
            return [self.ansi_code()]
        return [f"\x1b[38;2;{r};{g};{b}m" for r, g, b in cast(ndarray, self._value).tolist()]

    def to_tuple(self) -> IntVector:
        if self.is_array:
            raise TypeError("to_tuple is only defined for a single color")
        return cast(IntVector, self._value)

    # ------------------ ARRAY PROTOCOL ------------------
    def __len__(self) -> int:
        if isinstance(self._value, ndarray):
            return len(self._value)
        return 1

    def __getitem__(self, index: int) -> ColorRGB:
        if not isinstance(self._value, ndarray):
            raise TypeError("a single color is not indexable")
        return ColorRGB(tuple(int(v) for v in self._value[index]))

    def __iter__(self) -> Iterator[ColorRGB]:
        if not isinstance(self._value, ndarray):
            yield self
            return
        for row in self._value.tolist():
            yield ColorRGB(tuple(row))

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, tuple):
            return not self.is_array and self._value == other
        if not isinstance(other, ColorRGB):
            return NotImplemented
        if self.is_array or other.is_array:
            return self.is_array and other.is_array and bool(np.array_equal(self._value, other._value))
        return self._value == other._value

    def __hash__(self) -> int:
        if isinstance(self._value, ndarray):
            return hash(self._value.tobytes())
        return hash(self._value)

    def __repr__(self) -> str:
        if isinstance(self._value, ndarray):
            return f"ColorRGB(<{len(self._value)} colors>)"
        return f"ColorRGB({self._value!r})"


RGB = ColorRGB

RED = ColorRGB((255, 0, 0))
BLUE = ColorRGB((0, 0, 255))
