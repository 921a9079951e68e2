#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/preview.py

import re

from contrastlab.core.colors import RGBA
from contrastlab.core import config as c
from contrastlab.shared.truecolor import background_escape

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def print_color_block(color: RGBA, title: str = "color", text: str = None, end: str = "\n") -> None:
    """Print a swatch of `color` after a padded title, labelled with its CSS text."""
    label = text if text is not None else color.to_css()
    padding = " " * max(0, 18 - get_visible_len(title))
    swatch = f"{background_escape(color.r, color.g, color.b)}                {c.RESET}"

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {swatch}  {c.BOLD_WHITE}{label}{c.RESET}", end=end)
