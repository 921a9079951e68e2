#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/convert/renderer.py

from contrastlab.core import config as c
from contrastlab.core.colors import RGBA
from contrastlab.shared.formatting import format_colorspace


def render_convert_info(color: RGBA, fmt: str) -> str:
    """Composes a color into a formatted output string."""
    return f"{c.BOLD_WHITE}{format_colorspace(fmt, color)}{c.RESET}"
