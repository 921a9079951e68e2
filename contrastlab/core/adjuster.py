#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/adjuster.py

from enum import IntEnum
from typing import Dict, Optional, Union

from . import config as c
from .colors import RGBA, XYZA, ColorBase, NameResolver
from .contrast import is_dark, target_luminance_for
from contrastlab.shared.clamping import _clamp01


class AdjustMode(IntEnum):
    DISABLED = -1
    PASSTHROUGH = 0
    HSL_LUMA = 1
    LUV = 2
    HSL_LOOP = 3
    RGB_LOOP = 4


class ContrastAdjuster:
    """
    Recolor arbitrary colors so they stay legible on a `base` background.

    The target luminance (and its CIE LUV lightness) is derived once from
    the base color and contrast ratio, then every processed color is pushed
    toward it with the strategy selected by `mode`. Results are memoized by
    input text; assigning `base`, `contrast` or `mode` recomputes the
    targets and drops the cache.

    An instance is not safe for concurrent reconfiguration. Callers sharing
    one across threads must serialize writes.
    """

    def __init__(
        self,
        base: str = c.DEFAULT_BASE,
        mode: Union[int, AdjustMode] = c.DEFAULT_MODE,
        contrast: float = c.DEFAULT_CONTRAST,
        resolver: Optional[NameResolver] = None,
    ) -> None:
        self._base = base
        self._mode = AdjustMode(mode)
        self._contrast = contrast
        self._resolver = resolver

        self._dark = False
        self._luma = 0.0
        self._luv = 0.0
        self._cache: Dict[str, str] = {}

        self.rebuild_contrast()

    # ------------------ CONFIGURATION ------------------

    @property
    def base(self) -> str:
        return self._base

    @base.setter
    def base(self, value: str) -> None:
        self._base = value
        self.rebuild_contrast()

    @property
    def contrast(self) -> float:
        return self._contrast

    @contrast.setter
    def contrast(self, value: float) -> None:
        self._contrast = value
        self.rebuild_contrast()

    @property
    def mode(self) -> AdjustMode:
        return self._mode

    @mode.setter
    def mode(self, value: Union[int, AdjustMode]) -> None:
        self._mode = AdjustMode(value)
        self.rebuild_contrast()

    @property
    def dark(self) -> bool:
        return self._dark

    @property
    def target_luminance(self) -> float:
        return self._luma

    @property
    def target_luv(self) -> float:
        return self._luv

    def rebuild_contrast(self) -> None:
        """Recompute the targets from base and contrast; raises ValueError on a bad base."""
        self._cache = {}

        base = RGBA.from_css(self._base, self._resolver)
        if base is None:
            raise ValueError("Invalid base color")

        lum = base.luminance()
        self._dark = is_dark(lum)
        self._luma = target_luminance_for(lum, self._contrast, self._dark)

        target_y = target_luminance_for(base.to_xyza().y, self._contrast, self._dark)
        self._luv = XYZA(0, target_y, 0, 1).to_luva().l

    # ------------------ PROCESSING ------------------

    def process(self, color: Union[ColorBase, str, None], throw_errors: bool = False) -> Optional[str]:
        """
        Adjust one color and return it as CSS text.

        `color` is CSS text (hex, rgb()/hsl() functions or a name known to the
        resolver) or a color value. A value is adjusted from its own channels
        and only its CSS text is used as the cache key.

        Returns "" when disabled, the input text unchanged in passthrough
        mode, and None when the text cannot be parsed (or re-raises the
        parse error when `throw_errors` is set).
        """
        if self._mode == AdjustMode.DISABLED:
            return ""

        rgb = None
        if color is not None and not isinstance(color, str):
            rgb = color.to_rgba()
            color = color.to_css()

        if self._mode == AdjustMode.PASSTHROUGH:
            return color

        if not color:
            return None

        if color in self._cache:
            return self._cache[color]

        if rgb is None:
            try:
                rgb = RGBA.from_css(color, self._resolver)
            except ValueError:
                if throw_errors:
                    raise
                return None

            if rgb is None:
                return None

        if self._mode == AdjustMode.HSL_LUMA:
            rgb = self._adjust_hsl_luma(rgb)
        elif self._mode == AdjustMode.LUV:
            rgb = self._adjust_luv(rgb)
        elif self._mode == AdjustMode.HSL_LOOP:
            rgb = self._adjust_hsl_loop(rgb)
        elif self._mode == AdjustMode.RGB_LOOP:
            rgb = self._adjust_rgb_loop(rgb)

        out = rgb.to_css()
        self._cache[color] = out
        return out

    def _adjust_hsl_luma(self, rgb: RGBA) -> RGBA:
        luma = rgb.luminance()
        if (luma < self._luma) if self._dark else (luma > self._luma):
            return rgb.to_hsla().target_luminance(self._luma).to_rgba()
        return rgb

    def _adjust_luv(self, rgb: RGBA) -> RGBA:
        luv = rgb.to_luva()
        if (luv.l < self._luv) if self._dark else (luv.l > self._luv):
            return luv.with_l(self._luv).to_rgba()
        return rgb

    def _adjust_hsl_loop(self, rgb: RGBA) -> RGBA:
        """
        Walk HSL lightness toward white (dark base) or black (light base)
        until Y' crosses HSL_LOOP_Y_THRESHOLD.

        Lightness tends to 1 or 0, so the walk always ends; it also stops
        after MAX_STEPS iterations, whichever comes first.
        """
        steps = 0
        if self._dark:
            while rgb.get_y() < c.HSL_LOOP_Y_THRESHOLD and steps < c.MAX_STEPS:
                hsl = rgb.to_hsla()
                rgb = hsl.with_l(_clamp01(c.HSL_LOOP_DARK_OFFSET + c.HSL_LOOP_FACTOR * hsl.l)).to_rgba()
                steps += 1
        else:
            while rgb.get_y() >= c.HSL_LOOP_Y_THRESHOLD and steps < c.MAX_STEPS:
                hsl = rgb.to_hsla()
                rgb = hsl.with_l(_clamp01(c.HSL_LOOP_FACTOR * hsl.l)).to_rgba()
                steps += 1
        return rgb

    def _adjust_rgb_loop(self, rgb: RGBA) -> RGBA:
        steps = 0
        if self._dark:
            while rgb.luminance() < c.RGB_LOOP_DARK_MIN_LUM and steps < c.BRIGHTEN_LOOP_LIMIT:
                rgb = rgb.brighten()
                steps += 1
        else:
            while rgb.luminance() > c.RGB_LOOP_LIGHT_MAX_LUM and steps < c.BRIGHTEN_LOOP_LIMIT:
                rgb = rgb.brighten(-c.BRIGHTEN_DEFAULT_AMOUNT)
                steps += 1
        return rgb
