#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/sanitizer.py

import argparse
import re

from contrastlab.core import config as c


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its mathematical sign (+ or -).
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    digits_only = "".join(re.findall(r"[0-9]", s))
    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def _extract_signed_float(value: str) -> float:
    """
    Extracts a floating-point number from a string, preserving the sign and
    handling multiple decimal points by keeping only the first one encountered.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    raw_chars = re.findall(r"[0-9\.]", s)
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == '.':
            if not dot_seen:
                clean_str += char
                dot_seen = True
        else:
            clean_str += char

    if not clean_str or clean_str == '.':
        return None

    val = float(clean_str)
    return -val if is_negative else val


def _extract_alpha_only(value: str) -> str:
    """Extracts alphabetical characters and dashes from a string, lowercased."""
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z\-]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_color_text(v: str) -> str:
    """Validator for CSS color text: hex codes or color names."""
    cleaned = " ".join(str(v).split()) if v is not None else ""
    if not cleaned:
        raise argparse.ArgumentTypeError(f"invalid color value: '{_sanitize_for_log(v)}'")
    if not cleaned.startswith("#") and re.fullmatch(r"[0-9A-Fa-f]{3,8}", cleaned):
        # Bare hex digits are accepted without the leading '#'
        cleaned = f"#{cleaned}"
    return cleaned


def handle_mode(v: str) -> int:
    """Validator for adjuster modes, by number (-1..4) or by name."""
    name = _extract_alpha_only(v).strip("-")
    if name:
        if name not in c.MODE_ALIASES:
            raise argparse.ArgumentTypeError(f"invalid mode: '{_sanitize_for_log(v)}'")
        return c.MODE_ALIASES[name]

    val = _extract_signed_int(v)
    if val is None or val not in c.MODE_ALIASES.values():
        raise argparse.ArgumentTypeError(f"invalid mode: '{_sanitize_for_log(v)}'")
    return val


def handle_format(v: str) -> str:
    """Validator for output format names of the convert command."""
    name = _extract_alpha_only(v)
    if name not in c.FORMAT_ALIASES:
        raise argparse.ArgumentTypeError(f"invalid format: '{_sanitize_for_log(v)}'")
    return c.FORMAT_ALIASES[name]


def handle_cvd(v: str) -> str:
    """Validator for color vision deficiency matrix names."""
    name = _extract_alpha_only(v)
    if name not in c.CVD_MATRICES:
        raise argparse.ArgumentTypeError(f"invalid deficiency type: '{_sanitize_for_log(v)}'")
    return name


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# This dictionary maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "color": handle_color_text,
    "mode": handle_mode,
    "to_format": handle_format,
    "cvd": handle_cvd,
    "contrast": handle_float_range(1.0, 21.0),
}
