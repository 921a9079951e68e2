#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/clamping.py

import math


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(255.0, v))


def _round_half_up(v: float) -> int:
    """Round like ECMAScript Math.round: halves always go up, -0.5 -> 0."""
    return int(math.floor(v + 0.5))


def _or_zero(v) -> float:
    """Missing (None) or NaN channels become 0."""
    if v is None or v != v:
        return 0
    return v
