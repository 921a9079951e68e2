#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/convert/engine.py

import argparse

from contrastlab.core import config as c
from contrastlab.shared.naming import resolve_color_or_exit
from .renderer import render_convert_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for color conversion"""
    for value in args.value:
        color = resolve_color_or_exit(value)
        out = render_convert_info(color, args.to_format)

        if args.verbose:
            src = render_convert_info(color, "css")
            print(f"{src} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {out}")
        else:
            print(out)
