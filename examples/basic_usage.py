"""Basic huecat usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import sys

import numpy as np

from huecat import (
    ANSI_RESET,
    GradientMode,
    LineRenderer,
    RenderConfig,
    linear,
    parse_color,
    rainbow,
)


def demonstrate_colors() -> None:
    # Parse both accepted notations and sample the two gradients directly.
    start = parse_color("#FF8040")
    end = parse_color("rgb(0, 64, 255)")
    print("Parsed:", start, end)
    print("Linear midpoint:", linear(start, end, 0.5))
    print("Rainbow samples:", rainbow(15.0, 1.0, 15.0, np.arange(3, dtype=np.float64)).value.tolist())


def demonstrate_rendering() -> None:
    text = ["The quick brown fox", "jumps over", "the lazy dog"]

    # Rainbow: every row shifts the phase by one column.
    renderer = LineRenderer(RenderConfig(), sys.stdout)
    for row, line in enumerate(text):
        renderer.write_line(line, row)

    # Linear: each line runs from the start color to the end color.
    config = RenderConfig(
        mode=GradientMode.LINEAR,
        start_color=parse_color("0,255,128"),
        end_color=parse_color("#8000FF"),
    )
    renderer = LineRenderer(config, sys.stdout)
    for row, line in enumerate(text):
        renderer.write_line(line, row)
    sys.stdout.write(ANSI_RESET)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_rendering()
