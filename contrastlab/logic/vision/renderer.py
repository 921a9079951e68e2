#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/vision/renderer.py

from contrastlab.core import config as c
from contrastlab.core.colors import RGBA
from contrastlab.shared.preview import print_color_block


def render_vision_info(original: RGBA, title: str, results: dict) -> None:
    print()
    print_color_block(original, f"{c.BOLD_WHITE}{title}{c.RESET}")
    print()
    for name, color in results.items():
        label = f"{c.MSG_BOLD_COLORS['info']}{name}{c.RESET}"
        print_color_block(color, label)
    print()
