#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/convert.py

import argparse
import sys

from contrastlab.logic.convert import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab convert",
        description="contrastlab convert: convert a color between representations",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v", "--value",
        required=True,
        nargs="+",
        type=INPUT_HANDLERS["color"],
        help="color value(s): hex code, color name or css text",
    )
    parser.add_argument(
        "-t", "--to-format",
        dest="to_format",
        required=True,
        type=INPUT_HANDLERS["to_format"],
        help="target format: hex, css, rgb, hsv, hsl, xyz, luv",
    )
    parser.add_argument(
        "-V", "--verbose",
        action="store_true",
        help="show the source color next to the result",
    )
    return parser


def main() -> None:
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args)


if __name__ == "__main__":
    main()
