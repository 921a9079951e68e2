import pytest

from contrastlab.core.colors import HSLA, HSVA, RGBA, parse_color
from contrastlab.core import conversions as conv
from samples import samples_css_function_rgba, samples_hex_rgba


def test_from_hex():
    for hex_code, expected in samples_hex_rgba.items():
        color = RGBA.from_hex(hex_code)
        for out, exp in zip(color.values, expected):
            assert abs(out - exp) < 1e-9


def test_from_hex_rejects_garbage():
    for bad in ("#", "#zzz", "#12g456", ""):
        with pytest.raises(ValueError):
            RGBA.from_hex(bad)


def test_to_hex_rounds_half_up():
    assert RGBA(255, 0, 0, 1).to_hex() == "#ff0000"
    assert RGBA(10.5, 0.49, 254.5, 1).to_hex() == "#0b00ff"


def test_to_css():
    assert RGBA(255, 0, 0, 1).to_css() == "#ff0000"
    assert RGBA(255, 0, 0, 0.5).to_css() == "rgba(255,0,0,0.5)"
    assert RGBA(255.0, 10.0, 0, 0).to_css() == "rgba(255,10,0,0)"


def test_missing_channels_become_zero():
    assert RGBA().values == (0, 0, 0, 0)
    assert RGBA(None, float("nan"), 3).values == (0, 0, 3, 0)


def test_factories_default_alpha_to_one():
    assert RGBA.from_hsla(0, 1, 0.5).a == 1
    assert RGBA.from_hsva(0, 1, 1).a == 1
    assert RGBA.from_xyza(0, 0, 0).a == 1
    assert RGBA.from_hsla(0, 1, 0.5, 0.25).a == 0.25


def test_immutable():
    color = RGBA(1, 2, 3, 1)
    with pytest.raises(AttributeError):
        color.r = 5
    with pytest.raises(AttributeError):
        del color.g
    assert color.with_r(5) == RGBA(5, 2, 3, 1)
    assert color.with_a(0.5).a == 0.5
    assert color.r == 1


def test_from_name_uses_resolver():
    assert RGBA.from_name("red") is None
    assert RGBA.from_name("red", lambda name: None) is None
    assert RGBA.from_name("red", lambda name: (255, 0, 0)) is None
    assert RGBA.from_name("red", lambda name: (255, 0, 0, 255)) == RGBA(255, 0, 0, 1.0)
    half = RGBA.from_name("x", lambda name: (1, 2, 3, 51))
    assert abs(half.a - 0.2) < 1e-12


def test_from_css():
    resolver = lambda name: (0, 128, 0, 255) if name == "green" else None
    assert RGBA.from_css(None) is None
    assert RGBA.from_css("   ") is None
    assert RGBA.from_css(" #ff0000 ") == RGBA(255, 0, 0, 1.0)
    assert RGBA.from_css("green", resolver) == RGBA(0, 128, 0, 1.0)
    assert RGBA.from_css("nope", resolver) is None
    assert parse_color("#00f") == RGBA(0, 0, 255, 1.0)


def test_equality():
    red = RGBA(255, 0, 0, 1)
    assert red == RGBA(255, 0, 0, 1)
    assert red != RGBA(255, 0, 0, 0.5)
    assert red != HSLA(0, 1, 0.5, 1)
    assert hash(red) == hash(RGBA(255, 0, 0, 1))
    assert len({red, RGBA(255, 0, 0, 1)}) == 1


def test_eq_across_representations():
    red = RGBA(255, 0, 0, 1)
    assert red.eq(HSLA(0, 1, 0.5, 1))
    assert red.eq(HSVA(0, 1, 1, 1))
    assert not red.eq(HSLA(0, 1, 0.5, 0.5))
    assert red.eq(HSLA(0, 1, 0.5, 0.5), ignore_alpha=True)
    assert not red.eq(None)


def test_brighten():
    gray = RGBA(100, 100, 100, 1)
    assert gray.brighten() == RGBA(103, 103, 103, 1)
    assert gray.brighten(-1) == RGBA(97, 97, 97, 1)
    assert gray.brighten(10) == RGBA(126, 126, 126, 1)
    assert RGBA(254, 0, 0, 0.4).brighten() == RGBA(255, 3, 3, 0.4)
    assert RGBA(1, 0, 0, 1).brighten(-1) == RGBA(0, 0, 0, 1)


def test_luminance_and_y():
    assert abs(RGBA(255, 255, 255, 1).luminance() - 1.0) < 1e-9
    assert RGBA(0, 0, 0, 1).luminance() == 0
    assert abs(RGBA(255, 255, 255, 1).get_y() - 1.0) < 1e-9
    assert abs(RGBA(255, 0, 0, 1).get_y() - 0.299) < 1e-9


def test_repr():
    assert repr(RGBA(1, 2, 3, 1)) == "RGBA(r=1, g=2, b=3, a=1)"


def test_from_css_functions():
    for text, expected in samples_css_function_rgba.items():
        color = RGBA.from_css(text)
        for out, exp in zip(color.values, expected):
            assert abs(out - exp) < 1e-9


def test_from_css_functions_reject_malformed():
    for bad in ("rgb(1, 2)", "rgb(a, b, c)", "rgba(1, 2, 3, 4, 5)", "hsl(10%, 50%, 50%)", "rgb(10deg, 0, 0)"):
        with pytest.raises(ValueError):
            RGBA.from_css(bad)
    assert conv.css_function_to_rgba("red") is None
    assert conv.css_function_to_rgba("rgb") is None


def test_css_output_parses_back():
    for color in (RGBA(1, 2, 3, 0.25), RGBA(138, 138, 138, 128 / 255), RGBA(255, 0, 0, 1)):
        assert RGBA.from_css(color.to_css()).eq(color)
    for hsla in (HSLA(0, 0, 1, 0.5), HSLA(0.5, 0.5, 0.25, 1)):
        assert RGBA.from_css(hsla.to_css()) == hsla.to_rgba()
