"""Command-line entrypoint: ``huecat [options] [FILE ...]``."""

from __future__ import annotations

import argparse
import os
import sys
from importlib import metadata
from typing import TextIO

from . import __version__
from .config import ConfigError, RenderConfig, build_config
from .logging_setup import configure_logging, get_logger
from .render import LineRenderer
from .stream import InputError, StreamDriver, cat_text, existing_paths

PROG = "huecat"
# A value option given without a value (followed by another flag, or last) reads as this.
FLAG_WITHOUT_VALUE = "true"


def _installed_version() -> str:
    try:
        return metadata.version(PROG)
    except metadata.PackageNotFoundError:
        return __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Print files (or standard input) with a color gradient across every line.",
        epilog="Set NO_COLOR in the environment to disable styling.",
        add_help=False,
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to print, in order ('-' reads standard input)")

    gradient = parser.add_argument_group("gradient")
    gradient.add_argument(
        "--mode", nargs="?", const=FLAG_WITHOUT_VALUE, default=None,
        help="Gradient mode: rainbow (default) or linear",
    )
    gradient.add_argument(
        "--frequency", nargs="?", const=FLAG_WITHOUT_VALUE, default=None,
        help="Rainbow frequency (default 1.0)",
    )
    gradient.add_argument(
        "--spread", nargs="?", const=FLAG_WITHOUT_VALUE, default=None,
        help="Rainbow spread (default 15.0)",
    )
    gradient.add_argument(
        "--offset", nargs="?", const=FLAG_WITHOUT_VALUE, default=None,
        help="Rainbow offset (default 15.0)",
    )
    gradient.add_argument(
        "--start-color", nargs="?", const=FLAG_WITHOUT_VALUE, default=None,
        help="Linear start color, '#RRGGBB' or 'r,g,b' (default 255,0,0)",
    )
    gradient.add_argument(
        "--end-color", nargs="?", const=FLAG_WITHOUT_VALUE, default=None,
        help="Linear end color, '#RRGGBB' or 'r,g,b' (default 0,0,255)",
    )

    general = parser.add_argument_group("general")
    general.add_argument("--no-color", action="store_true", help="Print without any styling")
    general.add_argument("--verbose", action="store_true", help="Log diagnostics to standard error")
    general.add_argument("-h", "--help", action="store_true", help="Show this help message and exit")
    general.add_argument("-v", "--version", action="store_true", help="Show the version and exit")
    return parser


def parse_args(argv: list[str] | None = None) -> tuple[argparse.Namespace, list[str]]:
    """Parse ``argv``; unrecognized arguments are returned rather than rejected."""
    return build_parser().parse_known_intermixed_args(argv)


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    return build_config(
        mode=args.mode,
        frequency=args.frequency,
        spread=args.spread,
        offset=args.offset,
        start_color=args.start_color,
        end_color=args.end_color,
        no_color=args.no_color,
    )


def print_version(config: RenderConfig, out: TextIO) -> None:
    renderer = LineRenderer(config, out)
    renderer.write_line(f"{PROG} {_installed_version()}", 0)
    renderer.finish()


def _silence_stdout() -> None:
    # The reader went away (e.g. `huecat file | head`); drop whatever is still buffered.
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: list[str] | None = None) -> int:
    args, unknown = parse_args(argv)
    configure_logging(verbose=args.verbose)
    logger = get_logger()
    if unknown:
        logger.debug(f"ignoring unrecognized arguments: {' '.join(unknown)}")

    try:
        config = config_from_args(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        if args.help:
            cat_text(build_parser().format_help(), config, out=sys.stdout)
            return 0
        if args.version:
            print_version(config, sys.stdout)
            return 0

        sources = existing_paths(args.files)
        logger.debug(f"rendering {sources or ['<stdin>']} in {config.mode.value} mode")
        StreamDriver(config, out=sys.stdout).run(sources)
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        _silence_stdout()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
