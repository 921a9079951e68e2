#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/truecolor.py

import os
import sys

from contrastlab.shared.clamping import _round_half_up

# xterm 256-color palette layout
ANSI_CUBE_OFFSET = 16
ANSI_GRAY_OFFSET = 232
ANSI_GRAY_STEPS = 24


def supports_truecolor() -> bool:
    return os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit")


def ensure_truecolor() -> None:
    """Opt into 24-bit swatches unless the terminal asked for plain output."""
    if sys.platform == "win32" or os.environ.get("NO_COLOR"):
        return
    if os.environ.get("TERM") == "dumb":
        return
    if not supports_truecolor():
        os.environ["COLORTERM"] = "truecolor"


def rgb_to_ansi256(r: float, g: float, b: float) -> int:
    """Nearest xterm-256 index: the 24-step gray ramp for grays, else the 6x6x6 cube."""
    r, g, b = (_round_half_up(v) for v in (r, g, b))
    if r == g == b:
        if r < 8:
            return ANSI_CUBE_OFFSET
        if r > 248:
            return ANSI_CUBE_OFFSET + 215
        return ANSI_GRAY_OFFSET + _round_half_up((r - 8) / 247 * (ANSI_GRAY_STEPS - 1))

    def level(v):
        return _round_half_up(v / 255 * 5)

    return ANSI_CUBE_OFFSET + 36 * level(r) + 6 * level(g) + level(b)


def background_escape(r: float, g: float, b: float) -> str:
    if supports_truecolor():
        r, g, b = (_round_half_up(v) for v in (r, g, b))
        return f"\033[48;2;{r};{g};{b}m"
    return f"\033[48;5;{rgb_to_ansi256(r, g, b)}m"
