"""
Input sources and the driver that feeds their lines to the renderer.

Lines that are not valid UTF-8 are dropped without any user-visible error;
the next line still carries its own position as row index.
"""

from __future__ import annotations

import io
import os
import sys
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Sequence, TextIO, Tuple, Union

from .config import RenderConfig
from .logging_setup import get_logger
from .render import LineRenderer

STDIN = "-"
Source = Union[str, Path, None]


class InputError(OSError):
    """An input file could not be opened; the run is abandoned."""


def iter_lines(stream: BinaryIO) -> Iterator[Tuple[int, str]]:
    """Yield ``(row_index, line)`` pairs from a binary stream, terminators stripped."""
    logger = get_logger()
    for row_index, raw in enumerate(stream):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.debug(f"skipping undecodable line {row_index}: {exc}")
            continue
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield row_index, line


def is_stdin(source: Source) -> bool:
    return source is None or str(source) == STDIN


def existing_paths(paths: Iterable[str]) -> list[str]:
    """Keep the paths that exist (and ``-``), in order; the rest are dropped quietly."""
    kept = []
    for path in paths:
        if path == STDIN or (path and os.path.exists(path)):
            kept.append(path)
        else:
            get_logger().debug(f"dropping missing input {path!r}")
    return kept


class StreamDriver:
    """Renders every source in order; row indices restart for each source."""

    def __init__(self, config: RenderConfig, out: TextIO | None = None, stdin: BinaryIO | None = None) -> None:
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.stdin = stdin
        self.renderer = LineRenderer(config, self.out)

    def cat(self, stream: BinaryIO) -> None:
        for row_index, line in iter_lines(stream):
            self.renderer.write_line(line, row_index)

    def _cat_path(self, path: Union[str, Path]) -> None:
        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise InputError(f"{path}: {exc.strerror or exc}") from exc
        with handle:
            self.cat(handle)

    def run(self, sources: Sequence[Source]) -> None:
        """Render ``sources`` (standard input when empty) and finish with one reset."""
        try:
            for source in sources or [None]:
                if is_stdin(source):
                    self.cat(self.stdin if self.stdin is not None else sys.stdin.buffer)
                else:
                    self._cat_path(source)  # type: ignore[arg-type]
        finally:
            # Also on failure, so a half-rendered run does not leave the terminal colored.
            self.renderer.finish()


def cat_text(text: str, config: RenderConfig, out: TextIO | None = None) -> None:
    """Render an in-memory block of text, such as the usage message."""
    driver = StreamDriver(config, out=out, stdin=io.BytesIO(text.encode("utf-8")))
    driver.run([None])
