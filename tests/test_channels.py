from contrastlab.core.channels import delinearize, hue_to_channel, linearize
from contrastlab.shared.clamping import _clamp01, _clamp255, _or_zero, _round_half_up


def test_linearize_endpoints():
    assert linearize(0.0) == 0.0
    assert abs(linearize(1.0) - 1.0) < 1e-12


def test_linearize_linear_segment():
    assert abs(linearize(0.04) - 0.04 / 12.92) < 1e-12


def test_delinearize_inverts_linearize():
    for i in range(256):
        x = i / 255
        assert abs(delinearize(linearize(x)) - x) < 1e-9


def test_hue_to_channel_wraps():
    assert hue_to_channel(0.0, 1.0, -0.75) == hue_to_channel(0.0, 1.0, 0.25)
    assert hue_to_channel(0.0, 1.0, 1.25) == hue_to_channel(0.0, 1.0, 0.25)
    assert hue_to_channel(0.2, 0.8, 0.9) == 0.2


def test_round_half_up_matches_math_round():
    assert _round_half_up(2.5) == 3
    assert _round_half_up(3.5) == 4
    assert _round_half_up(-0.5) == 0
    assert _round_half_up(-2.55) == -3


def test_clamping_maps_nan_to_zero():
    nan = float("nan")
    assert _clamp01(nan) == 0.0
    assert _clamp255(nan) == 0.0
    assert _clamp01(1.5) == 1.0
    assert _clamp255(-3) == 0.0
    assert _or_zero(None) == 0
    assert _or_zero(nan) == 0
    assert _or_zero(0.25) == 0.25
