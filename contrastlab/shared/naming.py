#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/naming.py

import json
import re
import sys
from typing import Dict, Optional, Tuple

from contrastlab.core import conversions as conv
from contrastlab.core.colors import RGBA
from contrastlab.shared.logger import log

# CSS Color Module Level 4 named colors
COLOR_NAMES = {
    "aliceblue": "#f0f8ff", "antiquewhite": "#faebd7", "aqua": "#00ffff",
    "aquamarine": "#7fffd4", "azure": "#f0ffff", "beige": "#f5f5dc",
    "bisque": "#ffe4c4", "black": "#000000", "blanchedalmond": "#ffebcd",
    "blue": "#0000ff", "blueviolet": "#8a2be2", "brown": "#a52a2a",
    "burlywood": "#deb887", "cadetblue": "#5f9ea0", "chartreuse": "#7fff00",
    "chocolate": "#d2691e", "coral": "#ff7f50", "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc", "crimson": "#dc143c", "cyan": "#00ffff",
    "darkblue": "#00008b", "darkcyan": "#008b8b", "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9", "darkgreen": "#006400", "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b", "darkmagenta": "#8b008b", "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00", "darkorchid": "#9932cc", "darkred": "#8b0000",
    "darksalmon": "#e9967a", "darkseagreen": "#8fbc8f", "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f", "darkslategrey": "#2f4f4f", "darkturquoise": "#00ced1",
    "darkviolet": "#9400d3", "deeppink": "#ff1493", "deepskyblue": "#00bfff",
    "dimgray": "#696969", "dimgrey": "#696969", "dodgerblue": "#1e90ff",
    "firebrick": "#b22222", "floralwhite": "#fffaf0", "forestgreen": "#228b22",
    "fuchsia": "#ff00ff", "gainsboro": "#dcdcdc", "ghostwhite": "#f8f8ff",
    "gold": "#ffd700", "goldenrod": "#daa520", "gray": "#808080",
    "green": "#008000", "greenyellow": "#adff2f", "grey": "#808080",
    "honeydew": "#f0fff0", "hotpink": "#ff69b4", "indianred": "#cd5c5c",
    "indigo": "#4b0082", "ivory": "#fffff0", "khaki": "#f0e68c",
    "lavender": "#e6e6fa", "lavenderblush": "#fff0f5", "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd", "lightblue": "#add8e6", "lightcoral": "#f08080",
    "lightcyan": "#e0ffff", "lightgoldenrodyellow": "#fafad2", "lightgray": "#d3d3d3",
    "lightgreen": "#90ee90", "lightgrey": "#d3d3d3", "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a", "lightseagreen": "#20b2aa", "lightskyblue": "#87cefa",
    "lightslategray": "#778899", "lightslategrey": "#778899", "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0", "lime": "#00ff00", "limegreen": "#32cd32",
    "linen": "#faf0e6", "magenta": "#ff00ff", "maroon": "#800000",
    "mediumaquamarine": "#66cdaa", "mediumblue": "#0000cd", "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db", "mediumseagreen": "#3cb371", "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a", "mediumturquoise": "#48d1cc", "mediumvioletred": "#c71585",
    "midnightblue": "#191970", "mintcream": "#f5fffa", "mistyrose": "#ffe4e1",
    "moccasin": "#ffe4b5", "navajowhite": "#ffdead", "navy": "#000080",
    "oldlace": "#fdf5e6", "olive": "#808000", "olivedrab": "#6b8e23",
    "orange": "#ffa500", "orangered": "#ff4500", "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa", "palegreen": "#98fb98", "paleturquoise": "#afeeee",
    "palevioletred": "#db7093", "papayawhip": "#ffefd5", "peachpuff": "#ffdab9",
    "peru": "#cd853f", "pink": "#ffc0cb", "plum": "#dda0dd",
    "powderblue": "#b0e0e6", "purple": "#800080", "rebeccapurple": "#663399",
    "red": "#ff0000", "rosybrown": "#bc8f8f", "royalblue": "#4169e1",
    "saddlebrown": "#8b4513", "salmon": "#fa8072", "sandybrown": "#f4a460",
    "seagreen": "#2e8b57", "seashell": "#fff5ee", "sienna": "#a0522d",
    "silver": "#c0c0c0", "skyblue": "#87ceeb", "slateblue": "#6a5acd",
    "slategray": "#708090", "slategrey": "#708090", "snow": "#fffafa",
    "springgreen": "#00ff7f", "steelblue": "#4682b4", "tan": "#d2b48c",
    "teal": "#008080", "thistle": "#d8bfd8", "tomato": "#ff6347",
    "turquoise": "#40e0d0", "violet": "#ee82ee", "wheat": "#f5deb3",
    "white": "#ffffff", "whitesmoke": "#f5f5f5", "yellow": "#ffff00",
    "yellowgreen": "#9acd32", "transparent": "#00000000",
}


def _normalize_name(name: str) -> str:
    return re.sub(r"[\s_\-]", "", str(name)).lower()


class CSSNameResolver:
    """
    Named-color collaborator backed by the CSS named color table.

    Called with a name, returns ``(r, g, b, alpha_byte)`` or None when the
    name is unknown. Lookup ignores case, spaces, dashes and underscores.
    Extra names can be registered through `extra`.
    """

    def __init__(self, extra: Optional[Dict[str, str]] = None) -> None:
        self._table: Dict[str, Tuple[int, int, int, int]] = {}
        for name, hex_code in COLOR_NAMES.items():
            self._register(name, hex_code)
        for name, hex_code in (extra or {}).items():
            self._register(name, hex_code)

    def _register(self, name: str, hex_code: str) -> None:
        r, g, b, a = conv.hex_to_rgba(hex_code)
        self._table[_normalize_name(name)] = (r, g, b, int(round(a * 255)))

    def __call__(self, name: str) -> Optional[Tuple[int, int, int, int]]:
        return self._table.get(_normalize_name(name))

    def __contains__(self, name: str) -> bool:
        return _normalize_name(name) in self._table

    def names(self):
        return sorted(self._table)


def get_title_for_hex(hex_code: str, fallback: str = "unknown") -> str:
    """First CSS name whose hex matches `hex_code`, else `fallback`."""
    target = hex_code.lower()
    if not target.startswith("#"):
        target = f"#{target}"
    for name, value in COLOR_NAMES.items():
        if value == target:
            return name
    return fallback


def handle_list_color_names_action(fmt: str) -> None:
    """Print every CSS color name as text, json or prettyjson."""
    if fmt == "text":
        for name in sorted(COLOR_NAMES):
            print(name)
    elif fmt == "json":
        print(json.dumps(COLOR_NAMES))
    else:
        print(json.dumps(COLOR_NAMES, indent=4))


_DEFAULT_RESOLVER = None


def get_default_resolver() -> CSSNameResolver:
    global _DEFAULT_RESOLVER
    if _DEFAULT_RESOLVER is None:
        _DEFAULT_RESOLVER = CSSNameResolver()
    return _DEFAULT_RESOLVER


def resolve_color_or_exit(text: str) -> RGBA:
    """Parse CLI color text with the CSS name table; log and exit 2 on failure."""
    try:
        color = RGBA.from_css(text, get_default_resolver())
    except ValueError as e:
        log("error", str(e))
        sys.exit(2)
    if color is None:
        log("error", f"unknown color '{text}'")
        sys.exit(2)
    return color
