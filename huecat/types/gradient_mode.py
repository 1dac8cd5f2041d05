# No dependencies
from enum import Enum


class GradientMode(str, Enum):
    RAINBOW = "rainbow"
    LINEAR = "linear"

    @classmethod
    def from_name(cls, name: "str | GradientMode | None") -> "GradientMode":
        """Resolve a user-supplied mode name; anything unrecognized is RAINBOW."""
        if isinstance(name, GradientMode):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            return cls.RAINBOW


DEFAULT_MODE = GradientMode.RAINBOW
