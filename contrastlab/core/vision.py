#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/vision.py

from typing import Sequence, Tuple, Union

from . import config as c
from contrastlab.shared.clamping import _clamp255

CVDMatrix = Tuple[float, float, float, float, float, float, float, float, float]


def resolve_cvd_matrix(matrix: Union[str, Sequence[float]]) -> CVDMatrix:
    """Look up a named simulation matrix or validate a custom flat 3x3 one."""
    if isinstance(matrix, str):
        try:
            return c.CVD_MATRICES[matrix]
        except KeyError:
            raise ValueError("Invalid CVD matrix") from None
    values = tuple(matrix)
    if len(values) != 9:
        raise ValueError("Invalid CVD matrix")
    return values


def _dot(row: Sequence[float], x: float, y: float, z: float) -> float:
    return row[0] * x + row[1] * y + row[2] * z


def daltonize_rgb(
    r: float, g: float, b: float, matrix: Union[str, Sequence[float]]
) -> Tuple[float, float, float]:
    """
    Shift colors a viewer with the given deficiency cannot tell apart back
    into the range they can see.

    The color is simulated in LMS space, the per-channel error against the
    original is redistributed into green and blue, and the compensation is
    added to the original channels.
    """
    cvd = resolve_cvd_matrix(matrix)

    L = _dot(c.M_RGB_LMS_L, r, g, b)
    M = _dot(c.M_RGB_LMS_M, r, g, b)
    S = _dot(c.M_RGB_LMS_S, r, g, b)

    l_sim = _dot(cvd[0:3], L, M, S)
    m_sim = _dot(cvd[3:6], L, M, S)
    s_sim = _dot(cvd[6:9], L, M, S)

    err_r = r - _dot(c.M_LMS_RGB_R, l_sim, m_sim, s_sim)
    err_g = g - _dot(c.M_LMS_RGB_G, l_sim, m_sim, s_sim)
    err_b = b - _dot(c.M_LMS_RGB_B, l_sim, m_sim, s_sim)

    comp_r = _dot(c.M_CVD_ERROR[0], err_r, err_g, err_b)
    comp_g = _dot(c.M_CVD_ERROR[1], err_r, err_g, err_b)
    comp_b = _dot(c.M_CVD_ERROR[2], err_r, err_g, err_b)

    return _clamp255(comp_r + r), _clamp255(comp_g + g), _clamp255(comp_b + b)
