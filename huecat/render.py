"""Line rendering: one escape per character, one reset per run."""

from __future__ import annotations

from typing import TextIO

from .colors.rgb import ANSI_RESET
from .config import RenderConfig
from .gradients.strategy import LineGradient, resolve_gradient


def _style(line: str, row_index: int, gradient: LineGradient) -> str:
    colors = gradient(len(line), row_index)
    return "".join(code + char for code, char in zip(colors.ansi_codes(), line)) + "\n"


def render_line(line: str, row_index: int, config: RenderConfig) -> str:
    """
    Render one line (without its terminator) as styled text ending in ``"\\n"``.

    With ``no_color`` the raw line is returned and no gradient is computed.
    """
    if config.no_color:
        return line + "\n"
    return _style(line, row_index, resolve_gradient(config))


class LineRenderer:
    """Writes rendered lines to ``out`` using a gradient resolved once up front."""

    def __init__(self, config: RenderConfig, out: TextIO) -> None:
        self.config = config
        self.out = out
        self._gradient = None if config.no_color else resolve_gradient(config)

    def render(self, line: str, row_index: int) -> str:
        if self._gradient is None:
            return line + "\n"
        return _style(line, row_index, self._gradient)

    def write_line(self, line: str, row_index: int) -> None:
        self.out.write(self.render(line, row_index))

    def finish(self) -> None:
        """Emit the single style reset that ends colored output."""
        if not self.config.no_color:
            self.out.write(ANSI_RESET)
        self.out.flush()
