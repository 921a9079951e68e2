#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/vision/engine.py

import argparse

from contrastlab.core import config as c
from contrastlab.shared.naming import get_title_for_hex, resolve_color_or_exit
from .renderer import render_vision_info


def run(args: argparse.Namespace) -> None:
    """Daltonize a color for the selected deficiencies."""
    original = resolve_color_or_exit(args.value)
    title = get_title_for_hex(original.to_hex(), "original")
    names = list(c.CVD_MATRICES) if args.all_types or not args.type else args.type

    results = {name: original.daltonize(name) for name in names}
    render_vision_info(original, title, results)
