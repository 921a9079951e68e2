#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/conversions.py

import functools
import math
import re
from typing import Optional, Tuple

from . import config as c
from .channels import delinearize, hue_to_channel, linearize
from contrastlab.shared.clamping import _clamp01, _clamp255, _round_half_up

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")
_CSS_FUNCTION = re.compile(r"(rgba?|hsla?)\(\s*([^()]*?)\s*\)", re.IGNORECASE)
_CSS_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?(%|deg)?", re.IGNORECASE)


def hex_to_rgba(hex_code: str) -> Tuple[int, int, int, float]:
    """Convert #rgb, #rgba, #rrggbb or #rrggbbaa to an RGBA tuple.

    The 4 and 8 digit forms carry alpha; alpha comes back scaled to [0, 1].
    Raises ValueError when the body is empty or holds non-hex characters.
    """
    body = hex_code[1:] if hex_code.startswith("#") else hex_code
    if not _HEX_DIGITS.fullmatch(body):
        raise ValueError(f"invalid hex color '{hex_code}'")

    alpha = int(c.RGB_MAX)
    if len(body) == 4:
        alpha = int(body[3], 16) * c.NIBBLE_SCALE
        body = body[:3]
    elif len(body) == 8:
        alpha = int(body[6:], 16)
        body = body[:6]

    if len(body) == 3:
        raw = (
            ((int(body[0], 16) * c.NIBBLE_SCALE) << 16)
            + ((int(body[1], 16) * c.NIBBLE_SCALE) << 8)
            + int(body[2], 16) * c.NIBBLE_SCALE
        )
    else:
        raw = int(body, 16)

    return (raw >> 16, (raw >> 8) & 0xFF, raw & 0xFF, alpha / c.RGB_MAX)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a lower-case #rrggbb string."""
    value = (_round_half_up(r) << 16) + (_round_half_up(g) << 8) + _round_half_up(b)
    return f"#{value:06x}"


def _hue(r: float, g: float, b: float, cmax: float, delta: float) -> float:
    if cmax == r:
        h = (g - b) / delta + (c.HUE_SECTORS if g < b else 0)
    elif cmax == g:
        h = (b - r) / delta + c.HUE_SECTOR_G
    else:
        h = (r - g) / delta + c.HUE_SECTOR_B
    return h / c.HUE_SECTORS


def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB (0-255) to HSV (0-1)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = _clamp01(cmax - cmin)
    s = 0 if cmax == 0 else delta / cmax
    h = 0 if delta == 0 else _hue(r_f, g_f, b_f, cmax, delta)
    return (h, s, cmax)


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[int, int, int]:
    """Convert HSV (0-1) to rounded RGB (0-255)."""
    i = math.floor(h * c.HUE_SECTORS)
    f = h * c.HUE_SECTORS - i
    p = v * (c.UNIT - s)
    q = v * (c.UNIT - f * s)
    t = v * (c.UNIT - (c.UNIT - f) * s)

    sector = i % c.HUE_SECTORS
    if sector == 0:
        r_p, g_p, b_p = v, t, p
    elif sector == 1:
        r_p, g_p, b_p = q, v, p
    elif sector == 2:
        r_p, g_p, b_p = p, v, t
    elif sector == 3:
        r_p, g_p, b_p = p, q, v
    elif sector == 4:
        r_p, g_p, b_p = t, p, v
    else:
        r_p, g_p, b_p = v, p, q

    return (
        _round_half_up(_clamp255(r_p * c.RGB_MAX)),
        _round_half_up(_clamp255(g_p * c.RGB_MAX)),
        _round_half_up(_clamp255(b_p * c.RGB_MAX)),
    )


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB (0-255) to HSL (0-1)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    L = _clamp01((cmax + cmin) / c.DIV_2)
    delta = _clamp01(cmax - cmin)
    if delta == 0:
        return (0, 0, L)
    if L > 0.5:
        s = delta / (c.DIV_2 - cmax - cmin)
    else:
        s = delta / (cmax + cmin)
    return (_hue(r_f, g_f, b_f, cmax, delta), s, L)


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[int, int, int]:
    """Convert HSL (0-1) to rounded RGB (0-255)."""
    if s == 0:
        v = _round_half_up(_clamp255(c.RGB_MAX * L))
        return (v, v, v)

    q = L * (c.UNIT + s) if L < 0.5 else L + s - L * s
    p = c.DIV_2 * L - q
    return (
        _round_half_up(_clamp255(c.RGB_MAX * hue_to_channel(p, q, h + c.ONE_THIRD))),
        _round_half_up(_clamp255(c.RGB_MAX * hue_to_channel(p, q, h))),
        _round_half_up(_clamp255(c.RGB_MAX * hue_to_channel(p, q, h - c.ONE_THIRD))),
    )


def _css_component(token: str, text: str) -> Tuple[float, str]:
    m = _CSS_NUMBER.fullmatch(token)
    if not m:
        raise ValueError(f"invalid css color '{text}'")
    unit = (m.group(1) or "").lower()
    return float(token[:len(token) - len(unit)]), unit


def css_function_to_rgba(text: str) -> Optional[Tuple[float, float, float, float]]:
    """Parse rgb(), rgba(), hsl() or hsla() text into an RGBA tuple.

    Both the comma form and the space form with a ``/ alpha`` suffix are
    accepted. Returns None when `text` is not a CSS color function at all;
    raises ValueError when it is one but its arguments are malformed.
    """
    m = _CSS_FUNCTION.fullmatch(text.strip())
    if not m:
        return None

    tokens = [t for t in re.split(r"[\s,/]+", m.group(2)) if t]
    if len(tokens) not in (3, 4):
        raise ValueError(f"invalid css color '{text}'")
    parts = [_css_component(t, text) for t in tokens]

    alpha = c.UNIT
    if len(parts) == 4:
        a, unit = parts[3]
        if unit == "deg":
            raise ValueError(f"invalid css color '{text}'")
        alpha = _clamp01(a / c.PERCENT if unit == "%" else a)

    if m.group(1).lower().startswith("rgb"):
        channels = []
        for value, unit in parts[:3]:
            if unit == "deg":
                raise ValueError(f"invalid css color '{text}'")
            channels.append(_clamp255(value * c.RGB_MAX / c.PERCENT if unit == "%" else value))
        return (channels[0], channels[1], channels[2], alpha)

    (h, h_unit), (s, s_unit), (L, l_unit) = parts[:3]
    if h_unit == "%" or "deg" in (s_unit, l_unit):
        raise ValueError(f"invalid css color '{text}'")
    # Saturation and lightness are percentages with or without the sign
    r, g, b = hsl_to_rgb((h / c.HUE_DEGREES) % 1, _clamp01(s / c.PERCENT), _clamp01(L / c.PERCENT))
    return (r, g, b, alpha)


def rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB (0-255) to CIE XYZ (Y of white == 1)."""
    r_lin = linearize(r / c.RGB_MAX)
    g_lin = linearize(g / c.RGB_MAX)
    b_lin = linearize(b / c.RGB_MAX)
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return x, y, z


def xyz_to_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert CIE XYZ to RGB (0-255), clamped but not rounded."""
    r_lin = x * c.M_XYZ_SRGB_R[0] + y * c.M_XYZ_SRGB_R[1] + z * c.M_XYZ_SRGB_R[2]
    g_lin = x * c.M_XYZ_SRGB_G[0] + y * c.M_XYZ_SRGB_G[1] + z * c.M_XYZ_SRGB_G[2]
    b_lin = x * c.M_XYZ_SRGB_B[0] + y * c.M_XYZ_SRGB_B[1] + z * c.M_XYZ_SRGB_B[2]
    return (
        _clamp255(c.RGB_MAX * delinearize(r_lin)),
        _clamp255(c.RGB_MAX * delinearize(g_lin)),
        _clamp255(c.RGB_MAX * delinearize(b_lin)),
    )


# Reference white for CIE LUV: pure sRGB white taken through the matrix above.
REFERENCE_WHITE = rgb_to_xyz(c.RGB_MAX, c.RGB_MAX, c.RGB_MAX)


def _white_chromaticity(white: Tuple[float, float, float]) -> Tuple[float, float]:
    wx, wy, wz = white
    factor = c.UNIT / (wx + c.LUV_DENOM_Y * wy + c.LUV_DENOM_Z * wz)
    return c.LUV_U_NUM * wx * factor, c.LUV_V_NUM * wy * factor


def xyz_to_luv(
    x: float, y: float, z: float, white: Tuple[float, float, float] = REFERENCE_WHITE
) -> Tuple[float, float, float]:
    """Convert CIE XYZ to CIE LUV."""
    u_prime_n, v_prime_n = _white_chromaticity(white)

    denom = x + c.LUV_DENOM_Y * y + c.LUV_DENOM_Z * z
    if denom == 0:
        denom = c.UNIT

    u_prime = c.LUV_U_NUM * x / denom
    v_prime = c.LUV_V_NUM * y / denom

    y_r = y / white[1]
    if y_r > c.LUV_EPSILON:
        L = c.LUV_L_MULT * (y_r ** (c.UNIT / 3)) - c.LUV_L_SUB
    else:
        L = c.LUV_KAPPA * y_r

    u = c.LUV_U_V_MULT * L * (u_prime - u_prime_n)
    v = c.LUV_U_V_MULT * L * (v_prime - v_prime_n)
    return L, u, v


def luv_to_xyz(
    L: float, u: float, v: float, white: Tuple[float, float, float] = REFERENCE_WHITE
) -> Tuple[float, float, float]:
    """Convert CIE LUV to CIE XYZ by solving the u/v equations for X and Z."""
    u_prime_n, v_prime_n = _white_chromaticity(white)

    if L > c.LUV_L_THR:
        Y = ((L + c.LUV_L_SUB) / c.LUV_L_MULT) ** 3
    else:
        Y = L / c.LUV_KAPPA

    u_denom = u + c.LUV_U_V_MULT * L * u_prime_n
    v_denom = v + c.LUV_U_V_MULT * L * v_prime_n
    if u_denom == 0:
        u_denom = c.UNIT
    if v_denom == 0:
        v_denom = c.UNIT

    a = (c.LUV_INV_U_MULT * L / u_denom - c.UNIT) / 3
    b = -c.LUV_INV_Y_MULT * Y
    k = -c.UNIT / 3
    d = Y * (c.LUV_INV_V_MULT * L / v_denom - c.LUV_INV_Y_MULT)

    ak = a - k
    if ak == 0:
        ak = c.UNIT

    X = (d - b) / ak
    Z = X * a + b
    return X, Y, Z


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__ and not _name.startswith("_"):
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
