#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/channels.py

from . import config as c


def linearize(channel: float) -> float:
    """sRGB component in [0, 1] to linear light (Bruce Lindbloom's breakpoint)."""
    if channel <= c.SRGB_TO_LINEAR_TH:
        return channel / c.SRGB_SLOPE
    return ((channel + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def delinearize(linear: float) -> float:
    """Linear light back to an sRGB component in [0, 1]."""
    if linear <= c.LINEAR_TO_SRGB_TH:
        return linear * c.SRGB_SLOPE
    return c.SRGB_DIVISOR * (linear ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < c.ONE_SIXTH:
        return p + (q - p) * c.HUE_SECTORS * t
    if t < 0.5:
        return q
    if t < c.TWO_THIRDS:
        return p + (q - p) * (c.TWO_THIRDS - t) * c.HUE_SECTORS
    return p
