from .gradient_mode import GradientMode, DEFAULT_MODE

__all__ = ["GradientMode", "DEFAULT_MODE"]
