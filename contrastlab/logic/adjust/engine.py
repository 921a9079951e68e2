#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/adjust/engine.py

import argparse
import sys

from contrastlab.core.adjuster import AdjustMode, ContrastAdjuster
from contrastlab.shared.logger import log
from contrastlab.shared.naming import get_default_resolver, resolve_color_or_exit
from .renderer import render_adjust_result, render_adjuster_info


def _adjust_or_exit(adjuster: ContrastAdjuster, value: str) -> str:
    """Run the adjuster on CLI text; log and exit 2 when it cannot be parsed."""
    try:
        out = adjuster.process(value, throw_errors=True)
    except ValueError as e:
        log("error", str(e))
        sys.exit(2)
    if out is None:
        log("error", f"unable to adjust color '{value}'")
        sys.exit(2)
    return out


def run(args: argparse.Namespace) -> None:
    """Main execution logic for the adjust command."""
    base = resolve_color_or_exit(args.base)
    try:
        adjuster = ContrastAdjuster(args.base, args.mode, args.contrast, resolver=get_default_resolver())
    except ValueError as e:
        log("error", str(e))
        sys.exit(2)

    if args.quiet:
        for value in args.value:
            print(_adjust_or_exit(adjuster, value))
        return

    render_adjuster_info(adjuster, base)

    if adjuster.mode == AdjustMode.DISABLED:
        log("warning", "adjuster is disabled, every color maps to an empty string")

    for value in args.value:
        out = _adjust_or_exit(adjuster, value)
        if not out:
            log("info", f"{value} -> ''")
            continue
        original = resolve_color_or_exit(value)
        render_adjust_result(original, resolve_color_or_exit(out), out, base, args.show_luminance)
