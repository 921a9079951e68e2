#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/vision.py

import argparse
import sys

from contrastlab.logic.vision import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS
from contrastlab.shared.truecolor import ensure_truecolor


def get_vision_parser() -> argparse.ArgumentParser:
    parser = ContrastlabArgumentParser(
        prog="contrastlab vision",
        description="contrastlab vision: daltonize a color for color vision deficiencies",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v", "--value",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="base color: hex code, color name or css text",
    )
    parser.add_argument(
        "-t", "--type",
        action="append",
        type=INPUT_HANDLERS["cvd"],
        help="deficiency: protanope, deuteranope, tritanope (repeatable)",
    )
    parser.add_argument(
        "-all", "--all",
        dest="all_types",
        action="store_true",
        help="daltonize for every deficiency type",
    )
    return parser


def main() -> None:
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
