#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/colors.py

"""
Immutable color values: RGBA, HSVA, HSLA, XYZA and LUVA.

Every value converts to every other representation and formats as CSS/hex
text by way of RGBA. Raw construction turns a missing (or NaN) channel into
0, alpha included; the ``from_*`` factories default a missing alpha to 1.

>>> RGBA.from_hex("#ff0000").to_hsva()
HSVA(h=0.0, s=1.0, v=1.0, a=1.0)
>>> HSLA(0, 0, 1, 0.5).to_css()
'hsla(0,0%,100%,0.5)'
"""

from __future__ import annotations

from typing import Callable, ClassVar, Optional, Sequence, Tuple, Union

from . import config as c
from . import conversions as conv
from .luminance import get_luma, get_luminance
from .vision import daltonize_rgb
from contrastlab.shared.clamping import _clamp255, _or_zero, _round_half_up

NameResolver = Callable[[str], Optional[Sequence[float]]]


def _css_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ColorBase:
    """Shared behaviour of the five color representations."""

    __slots__ = ()

    channels: ClassVar[Tuple[str, ...]] = ()
    _to_self: ClassVar[str]

    def __init__(self, *values) -> None:
        if len(values) > len(self.channels):
            raise TypeError(f"{self.__class__.__name__} takes at most {len(self.channels)} channels")
        values = values + (None,) * (len(self.channels) - len(values))
        for name, value in zip(self.channels, values):
            object.__setattr__(self, name, _or_zero(value))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    @property
    def values(self) -> Tuple[float, ...]:
        return tuple(getattr(self, name) for name in self.channels)

    def _replace(self, name: str, value: float):
        return self.__class__(*(value if n == name else getattr(self, n) for n in self.channels))

    def with_a(self, a: float):
        return self._replace("a", a)

    def eq(self, other: Optional[ColorBase], ignore_alpha: bool = False) -> bool:
        """Compare after converting `other` into this representation."""
        if other is None:
            return False
        if not isinstance(other, self.__class__):
            other = getattr(other, self._to_self)()
        mine, theirs = self.values, other.values
        if ignore_alpha:
            return mine[:-1] == theirs[:-1]
        return mine == theirs

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.values == other.values

    def __hash__(self):
        return hash((self.__class__.__name__,) + self.values)

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.channels)
        return f"{self.__class__.__name__}({inner})"

    # Formatting and conversions go through RGBA unless a subclass knows better.

    def to_css(self) -> str:
        return self.to_rgba().to_css()

    def to_hex(self) -> str:
        return self.to_rgba().to_hex()

    def to_rgba(self) -> RGBA:
        raise NotImplementedError

    def to_hsva(self) -> HSVA:
        return self.to_rgba().to_hsva()

    def to_hsla(self) -> HSLA:
        return self.to_rgba().to_hsla()

    def to_xyza(self) -> XYZA:
        return self.to_rgba().to_xyza()

    def to_luva(self) -> LUVA:
        return self.to_rgba().to_luva()


class RGBA(ColorBase):
    """Device RGB; r, g, b in [0, 255], a in [0, 1]."""

    __slots__ = ("r", "g", "b", "a")
    channels = ("r", "g", "b", "a")
    _to_self = "to_rgba"

    def __init__(self, r: float = None, g: float = None, b: float = None, a: float = None) -> None:
        super().__init__(r, g, b, a)

    def with_r(self, r: float) -> RGBA:
        return self._replace("r", r)

    def with_g(self, g: float) -> RGBA:
        return self._replace("g", g)

    def with_b(self, b: float) -> RGBA:
        return self._replace("b", b)

    # ------------------ PARSING ------------------

    @classmethod
    def from_hex(cls, hex_code: str) -> RGBA:
        return cls(*conv.hex_to_rgba(hex_code))

    @classmethod
    def from_name(cls, name: str, resolver: Optional[NameResolver] = None) -> Optional[RGBA]:
        """Resolve `name` through the injected collaborator.

        The resolver returns ``(r, g, b, alpha_byte)`` or None. Anything but
        four components counts as unresolvable.
        """
        if resolver is None:
            return None
        data = resolver(name)
        if data is None or len(data) != 4:
            return None
        return cls(data[0], data[1], data[2], data[3] / c.RGB_MAX)

    @classmethod
    def from_css(cls, text: Optional[str], resolver: Optional[NameResolver] = None) -> Optional[RGBA]:
        """Parse hex, rgb()/rgba()/hsl()/hsla() or a name (through `resolver`).

        Malformed hex or functional text raises ValueError; an unknown name
        gives None.
        """
        text = text.strip() if text else text
        if not text:
            return None
        if text[0] == "#":
            return cls.from_hex(text)
        parsed = conv.css_function_to_rgba(text)
        if parsed is not None:
            return cls(*parsed)
        return cls.from_name(text, resolver)

    # ------------------ FACTORIES ------------------

    @classmethod
    def from_hsva(cls, h: float, s: float, v: float, a: float = None) -> RGBA:
        return cls(*conv.hsv_to_rgb(h, s, v), 1 if a is None else a)

    @classmethod
    def from_hsla(cls, h: float, s: float, l: float, a: float = None) -> RGBA:
        return cls(*conv.hsl_to_rgb(h, s, l), 1 if a is None else a)

    @classmethod
    def from_xyza(cls, x: float, y: float, z: float, a: float = None) -> RGBA:
        return cls(*conv.xyz_to_rgb(x, y, z), 1 if a is None else a)

    # ------------------ FORMATTING ------------------

    def to_css(self) -> str:
        if self.a != 1:
            return f"rgba({_css_number(self.r)},{_css_number(self.g)},{_css_number(self.b)},{_css_number(self.a)})"
        return self.to_hex()

    def to_hex(self) -> str:
        return conv.rgb_to_hex(self.r, self.g, self.b)

    # ------------------ CONVERSIONS ------------------

    def to_rgba(self) -> RGBA:
        return self

    def to_hsva(self) -> HSVA:
        return HSVA.from_rgba(self.r, self.g, self.b, self.a)

    def to_hsla(self) -> HSLA:
        return HSLA.from_rgba(self.r, self.g, self.b, self.a)

    def to_xyza(self) -> XYZA:
        return XYZA.from_rgba(self.r, self.g, self.b, self.a)

    def to_luva(self) -> LUVA:
        return self.to_xyza().to_luva()

    # ------------------ PROCESSING ------------------

    def luminance(self) -> float:
        return get_luminance(self.r, self.g, self.b)

    def get_y(self) -> float:
        return get_luma(self.r, self.g, self.b)

    def brighten(self, amount: float = c.BRIGHTEN_DEFAULT_AMOUNT) -> RGBA:
        """Add `amount` percent of 255 to every channel; negative darkens.

        The offset is rounded to a whole channel step first, so the default
        amount of 1 adds 3 (not 2.55) and -1 subtracts 3.
        """
        offset = _round_half_up(c.RGB_MAX * (amount / c.PERCENT_TO_FACTOR))
        return RGBA(
            _clamp255(self.r + offset),
            _clamp255(self.g + offset),
            _clamp255(self.b + offset),
            self.a,
        )

    def daltonize(self, matrix: Union[str, Sequence[float]]) -> RGBA:
        return RGBA(*daltonize_rgb(self.r, self.g, self.b, matrix), self.a)


class HSVA(ColorBase):
    """Hue, saturation, value; all channels in [0, 1], hue wraps at 1."""

    __slots__ = ("h", "s", "v", "a")
    channels = ("h", "s", "v", "a")
    _to_self = "to_hsva"

    def __init__(self, h: float = None, s: float = None, v: float = None, a: float = None) -> None:
        super().__init__(h, s, v, a)

    def with_h(self, h: float) -> HSVA:
        return self._replace("h", h)

    def with_s(self, s: float) -> HSVA:
        return self._replace("s", s)

    def with_v(self, v: float) -> HSVA:
        return self._replace("v", v)

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float = None) -> HSVA:
        return cls(*conv.rgb_to_hsv(r, g, b), 1 if a is None else a)

    def to_rgba(self) -> RGBA:
        return RGBA.from_hsva(self.h, self.s, self.v, self.a)

    def to_hsva(self) -> HSVA:
        return self


class HSLA(ColorBase):
    """Hue, saturation, lightness; all channels in [0, 1], hue wraps at 1."""

    __slots__ = ("h", "s", "l", "a")
    channels = ("h", "s", "l", "a")
    _to_self = "to_hsla"

    def __init__(self, h: float = None, s: float = None, l: float = None, a: float = None) -> None:
        super().__init__(h, s, l, a)

    def with_h(self, h: float) -> HSLA:
        return self._replace("h", h)

    def with_s(self, s: float) -> HSLA:
        return self._replace("s", s)

    def with_l(self, l: float) -> HSLA:
        return self._replace("l", l)

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float = None) -> HSLA:
        return cls(*conv.rgb_to_hsl(r, g, b), 1 if a is None else a)

    def to_css(self) -> str:
        hue = _round_half_up(self.h * c.HUE_DEGREES)
        sat = _round_half_up(self.s * c.PERCENT)
        light = _round_half_up(self.l * c.PERCENT)
        if self.a != 1:
            return f"hsla({hue},{sat}%,{light}%,{_css_number(self.a)})"
        return f"hsl({hue},{sat}%,{light}%)"

    def to_rgba(self) -> RGBA:
        return RGBA.from_hsla(self.h, self.s, self.l, self.a)

    def to_hsla(self) -> HSLA:
        return self

    def target_luminance(self, target: float) -> HSLA:
        """
        Bisect lightness until the color's relative luminance meets `target`.

        Hue is held fixed. Saturation is first scaled down toward the extreme
        lightnesses, where a saturated color would otherwise overshoot the
        luminance its lightness implies. The search stops once the interval
        is no wider than BISECTION_PRECISION.
        """
        base = -self.l if self.l > 0.5 else self.l - 1
        s = self.s * (base ** c.SATURATION_CURVE_EXP + 1)

        low = 0.0
        d = 0.5
        mid = low + d
        for _ in range(c.BISECTION_MAX_ITERATIONS):
            if d <= c.BISECTION_PRECISION:
                break
            if RGBA.from_hsla(self.h, s, mid, 1).luminance() <= target:
                low = mid
            d /= 2
            mid = low + d

        return HSLA(self.h, s, mid, self.a)


class XYZA(ColorBase):
    """CIE XYZ in linear light; y is the relative luminance."""

    __slots__ = ("x", "y", "z", "a")
    channels = ("x", "y", "z", "a")
    _to_self = "to_xyza"

    def __init__(self, x: float = None, y: float = None, z: float = None, a: float = None) -> None:
        super().__init__(x, y, z, a)

    def with_x(self, x: float) -> XYZA:
        return self._replace("x", x)

    def with_y(self, y: float) -> XYZA:
        return self._replace("y", y)

    def with_z(self, z: float) -> XYZA:
        return self._replace("z", z)

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float = None) -> XYZA:
        return cls(*conv.rgb_to_xyz(r, g, b), 1 if a is None else a)

    @classmethod
    def from_luva(
        cls, l: float, u: float, v: float, a: float = None,
        white: Tuple[float, float, float] = conv.REFERENCE_WHITE,
    ) -> XYZA:
        return cls(*conv.luv_to_xyz(l, u, v, white), 1 if a is None else a)

    def to_rgba(self) -> RGBA:
        return RGBA.from_xyza(self.x, self.y, self.z, self.a)

    def to_xyza(self) -> XYZA:
        return self

    def to_luva(self, white: Tuple[float, float, float] = conv.REFERENCE_WHITE) -> LUVA:
        return LUVA.from_xyza(self.x, self.y, self.z, self.a, white)


class LUVA(ColorBase):
    """CIE 1976 L*u*v*, relative to the reference white."""

    __slots__ = ("l", "u", "v", "a")
    channels = ("l", "u", "v", "a")
    _to_self = "to_luva"

    def __init__(self, l: float = None, u: float = None, v: float = None, a: float = None) -> None:
        super().__init__(l, u, v, a)

    def with_l(self, l: float) -> LUVA:
        return self._replace("l", l)

    def with_u(self, u: float) -> LUVA:
        return self._replace("u", u)

    def with_v(self, v: float) -> LUVA:
        return self._replace("v", v)

    @classmethod
    def from_xyza(
        cls, x: float, y: float, z: float, a: float = None,
        white: Tuple[float, float, float] = conv.REFERENCE_WHITE,
    ) -> LUVA:
        return cls(*conv.xyz_to_luv(x, y, z, white), 1 if a is None else a)

    def to_rgba(self) -> RGBA:
        return self.to_xyza().to_rgba()

    def to_xyza(self, white: Tuple[float, float, float] = conv.REFERENCE_WHITE) -> XYZA:
        return XYZA.from_luva(self.l, self.u, self.v, self.a, white)

    def to_luva(self) -> LUVA:
        return self


Color = Union[RGBA, HSVA, HSLA, XYZA, LUVA]


def parse_color(text: Optional[str], resolver: Optional[NameResolver] = None) -> Optional[RGBA]:
    """Parse CSS/hex text into RGBA; None when empty or unresolvable."""
    return RGBA.from_css(text, resolver)
