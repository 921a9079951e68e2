#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/contrast.py

from typing import Tuple

from . import config as c
from .luminance import get_luminance


def get_contrast_ratio(lum1: float, lum2: float) -> float:
    """
    WCAG 2.1 contrast ratio between two relative luminances.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    Formula: (L1 + 0.05) / (L2 + 0.05), where L1 is the lighter of the two.
    """
    l1, l2 = (lum1, lum2) if lum1 > lum2 else (lum2, lum1)
    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def get_contrast_ratio_rgb(c1: Tuple[float, float, float], c2: Tuple[float, float, float]) -> float:
    """Calculate the WCAG 2.1 contrast ratio between two RGB colors."""
    return get_contrast_ratio(get_luminance(*c1), get_luminance(*c2))


def is_dark(lum: float) -> bool:
    return lum < c.DARK_THRESHOLD


def target_luminance_for(base_lum: float, contrast: float, dark: bool) -> float:
    """
    Luminance a foreground needs to reach `contrast` against a background of
    `base_lum`: above it on dark backgrounds, below it on light ones.

    The result is not clamped; it may fall outside [0, 1] when the ratio
    cannot be met.
    """
    if dark:
        return contrast * (base_lum + c.WCAG_LUMINANCE_OFFSET) - c.WCAG_LUMINANCE_OFFSET
    return (base_lum + c.WCAG_LUMINANCE_OFFSET) / contrast - c.WCAG_LUMINANCE_OFFSET


def get_wcag_levels(ratio: float) -> dict:
    """Pass/fail of a contrast ratio against the WCAG 2.1 thresholds."""
    return {
        "AA-Large": "Pass" if ratio >= c.WCAG_AA_LARGE else "Fail",
        "AA": "Pass" if ratio >= c.WCAG_AA_NORMAL else "Fail",
        "AAA": "Pass" if ratio >= c.WCAG_AAA_NORMAL else "Fail",
    }
