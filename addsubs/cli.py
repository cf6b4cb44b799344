"""
Command-Line Interface (CLI) setup for addsubs.

This module uses Python's `argparse` to define and parse the command-line
arguments that control which files are paired and how they are multiplexed.
"""
import argparse
from typing import List, Optional

from .config.common import (
    DEFAULT_DIR,
    DEFAULT_LANGUAGE,
    DEFAULT_SUB_FORMAT,
    DEFAULT_VIDEO_FORMAT,
)
from .domain.languages import SUPPORTED_CODES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="addsubs",
        description=(
            "mkvmerge wrapper to bulk add subtitles to video files. "
            "An output folder will be created with the multiplexed video files."
        ),
    )
    parser.add_argument(
        "-d", "--dir", default=DEFAULT_DIR, help="Directory with the video and sub files."
    )
    parser.add_argument(
        "-v", "--videoformat", default=DEFAULT_VIDEO_FORMAT, help="Video file extension."
    )
    parser.add_argument(
        "-s", "--subformat", default=DEFAULT_SUB_FORMAT, help="Sub file extension."
    )
    parser.add_argument(
        "-l", "--lang", default=DEFAULT_LANGUAGE,
        help=f"ISO 639-2 language abbreviation ({', '.join(SUPPORTED_CODES)}).",
    )
    parser.add_argument(
        "--sync", action="store_true",
        help="Resynchronize each subtitle against its video with ffs before muxing.",
    )
    parser.add_argument(
        "--processes", type=int, default=None,
        help="Maximum number of pairs processed at once. Defaults to all pairs at once.",
    )
    parser.add_argument(
        "--report", type=str, default=None,
        help="Write a YAML report of the batch results to this path.",
    )
    parser.add_argument(
        "--skip-tool-check", action="store_true",
        help="Do not run the mkvmerge/ffs version checks at startup.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO", choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set the logging level."
    )
    parser.add_argument(
        "--debug", dest="debug_mode", action="store_true", help="Shortcut for --log-level DEBUG."
    )
    return parser


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for addsubs.

    Args:
        argv: Arguments to parse. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: The parsed command-line arguments.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.processes is not None and args.processes < 1:
        parser.error("--processes must be at least 1.")
    return args
