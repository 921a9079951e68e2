#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/adjust.py

import argparse
import sys

from contrastlab.core import config as c
from contrastlab.logic.adjust import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS
from contrastlab.shared.truecolor import ensure_truecolor


def get_adjust_parser() -> argparse.ArgumentParser:
    """Create argument parser for adjust command.

    Returns:
        argparse.ArgumentParser: Configured parser.
    """
    parser = ContrastlabArgumentParser(
        prog="contrastlab adjust",
        description="contrastlab adjust: keep colors legible against a background",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v", "--value",
        required=True,
        nargs="+",
        type=INPUT_HANDLERS["color"],
        help="color value(s) to adjust",
    )
    parser.add_argument(
        "-b", "--base",
        type=INPUT_HANDLERS["color"],
        default=c.DEFAULT_BASE,
        help=f"background color (default: {c.DEFAULT_BASE})",
    )
    parser.add_argument(
        "-m", "--mode",
        type=INPUT_HANDLERS["mode"],
        default=c.DEFAULT_MODE,
        help=(
            "adjustment mode (default: 0)\n"
            "  -1 disabled   0 passthrough   1 hsl-luma\n"
            "   2 luv        3 hsl-loop      4 rgb-loop"
        ),
    )
    parser.add_argument(
        "-c", "--contrast",
        type=INPUT_HANDLERS["contrast"],
        default=c.DEFAULT_CONTRAST,
        help=f"minimum contrast ratio: 1 to 21 (default: {c.DEFAULT_CONTRAST})",
    )
    parser.add_argument(
        "-l", "--show-luminance",
        action="store_true",
        help="show luminance and WCAG contrast of each result",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="print only the adjusted css text",
    )
    return parser


def main() -> None:
    """Main entry point."""
    parser = get_adjust_parser()
    args = parser.parse_args(sys.argv[1:])
    if not args.quiet:
        ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
