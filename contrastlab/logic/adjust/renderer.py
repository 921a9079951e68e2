#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/adjust/renderer.py

from contrastlab.core import config as c
from contrastlab.core.adjuster import ContrastAdjuster
from contrastlab.core.colors import RGBA
from contrastlab.core.contrast import get_contrast_ratio, get_wcag_levels
from contrastlab.shared.preview import print_color_block


def render_adjuster_info(adjuster: ContrastAdjuster, base: RGBA) -> None:
    surface = "dark" if adjuster.dark else "light"
    print()
    print_color_block(base, f"{c.BOLD_WHITE}base ({surface}){c.RESET}")
    print(f"{'mode':<18}{c.BOLD_WHITE}:{c.RESET}   {adjuster.mode.name.lower()}")
    print(f"{'contrast':<18}{c.BOLD_WHITE}:{c.RESET}   {adjuster.contrast:.2f}")
    print(f"{'target luminance':<18}{c.BOLD_WHITE}:{c.RESET}   {adjuster.target_luminance:.4f}")
    print()


def render_adjust_result(original: RGBA, adjusted: RGBA, text: str, base: RGBA, show_luminance: bool) -> None:
    print_color_block(original, "original")
    print_color_block(adjusted, "adjusted", text=text)

    if show_luminance:
        ratio = get_contrast_ratio(adjusted.luminance(), base.luminance())
        levels = get_wcag_levels(ratio)
        passed = " ".join(
            f"{c.MSG_BOLD_COLORS['success' if v == 'Pass' else 'error']}{k}{c.RESET}"
            for k, v in levels.items()
        )
        print(f"{'luminance':<18}{c.BOLD_WHITE}:{c.RESET}   {original.luminance():.4f} -> {adjusted.luminance():.4f}")
        print(f"{'contrast':<18}{c.BOLD_WHITE}:{c.RESET}   {ratio:.2f}:1  {passed}")
    print()
