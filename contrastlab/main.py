#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/main.py

import argparse
import sys

from contrastlab import __version__
from contrastlab.subcommands.command_registry import SUBCOMMANDS
from contrastlab.shared.naming import handle_list_color_names_action
from contrastlab.shared.logger import log, ContrastlabArgumentParser


def get_main_parser() -> argparse.ArgumentParser:
    """Create argument parser for the top-level contrastlab command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab",
        description="contrastlab: color conversion and contrast adjustment tool",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
        epilog="commands: " + ", ".join(SUBCOMMANDS),
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"contrastlab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "--list-color-names",
        nargs="?",
        const="text",
        default=None,
        choices=["text", "json", "prettyjson"],
        help="list available color names and exit",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_main_command(args: argparse.Namespace) -> None:
    parser = get_main_parser()

    if args.list_color_names:
        handle_list_color_names_action(args.list_color_names)
        sys.exit(0)

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser")
            getter().print_help()
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    parser.print_help()
    sys.exit(0)


def main() -> None:
    """Main entry point for contrastlab CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args()
    handle_main_command(args)


if __name__ == "__main__":
    main()
