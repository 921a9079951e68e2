#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/luminance.py

from .channels import linearize
from . import config as c


def get_luminance(r: float, g: float, b: float) -> float:
    """Relative luminance of 0-255 sRGB channels (linear light, BT.709 weights)."""
    return (
        c.LUMA_R * linearize(r / c.RGB_MAX) +
        c.LUMA_G * linearize(g / c.RGB_MAX) +
        c.LUMA_B * linearize(b / c.RGB_MAX)
    )


def get_luma(r: float, g: float, b: float) -> float:
    """Fast perceptual luma (NTSC Y') in [0, 1]; not gamma aware."""
    return (c.NTSC_Y_R * r + c.NTSC_Y_G * g + c.NTSC_Y_B * b) / c.RGB_MAX
