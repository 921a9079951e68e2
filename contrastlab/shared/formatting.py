#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/formatting.py

from contrastlab.core.colors import ColorBase


def format_colorspace(fmt: str, color: ColorBase) -> str:
    """Render `color` as text in the requested representation."""
    if fmt == 'hex':
        return color.to_hex()
    elif fmt == 'css':
        return color.to_css()
    elif fmt == 'rgb':
        r, g, b, a = color.to_rgba().values
        return f"rgba({r:.2f}, {g:.2f}, {b:.2f}, {a:.2f})"
    elif fmt == 'hsv':
        h, s, v, a = color.to_hsva().values
        return f"hsva({h * 360:.2f}deg, {s * 100:.2f}%, {v * 100:.2f}%, {a:.2f})"
    elif fmt == 'hsl':
        h, s, l, a = color.to_hsla().values
        return f"hsla({h * 360:.2f}deg, {s * 100:.2f}%, {l * 100:.2f}%, {a:.2f})"
    elif fmt == 'xyz':
        x, y, z, a = color.to_xyza().values
        return f"xyz({x:.4f}, {y:.4f}, {z:.4f})"
    elif fmt == 'luv':
        l, u, v, a = color.to_luva().values
        return f"luv({l:.4f} {u:.4f} {v:.4f})"

    return ""
