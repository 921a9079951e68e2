import pytest

from contrastlab.core.contrast import (
    get_contrast_ratio,
    get_contrast_ratio_rgb,
    get_wcag_levels,
    is_dark,
    target_luminance_for,
)
from contrastlab.core.luminance import get_luma, get_luminance


def test_luminance_extremes():
    assert get_luminance(0, 0, 0) == 0
    assert abs(get_luminance(255, 255, 255) - 1.0) < 1e-9
    assert abs(get_luminance(255, 0, 0) - 0.2126) < 1e-9
    assert abs(get_luminance(0, 255, 0) - 0.7152) < 1e-9


def test_luminance_of_default_base():
    assert abs(get_luminance(0x23, 0x23, 0x23) - 0.016807) < 1e-5


def test_luma_is_linear_in_channels():
    assert abs(get_luma(255, 255, 255) - 1.0) < 1e-9
    assert abs(get_luma(0, 0, 255) - 0.114) < 1e-9
    assert abs(get_luma(128, 128, 128) - 128 / 255) < 1e-9


def test_contrast_ratio():
    assert get_contrast_ratio(1.0, 0.0) == pytest.approx(21.0)
    assert get_contrast_ratio(0.0, 1.0) == pytest.approx(21.0)
    assert get_contrast_ratio(0.3, 0.3) == pytest.approx(1.0)
    assert get_contrast_ratio_rgb((0, 0, 0), (255, 255, 255)) == pytest.approx(21.0)


def test_is_dark():
    assert is_dark(0.0)
    assert is_dark(0.49)
    assert not is_dark(0.5)
    assert not is_dark(1.0)


def test_target_luminance_for():
    lum = 0.016807
    assert target_luminance_for(lum, 4.5, True) == pytest.approx(4.5 * (lum + 0.05) - 0.05)
    assert target_luminance_for(1.0, 4.5, False) == pytest.approx(1.05 / 4.5 - 0.05)
    # The ratio is met exactly at the returned luminance.
    target = target_luminance_for(0.1, 3.0, True)
    assert get_contrast_ratio(target, 0.1) == pytest.approx(3.0)


def test_target_luminance_for_is_not_clamped():
    assert target_luminance_for(0.4, 21.0, True) > 1.0
    assert target_luminance_for(0.6, 21.0, False) < 0.0


def test_wcag_levels():
    assert get_wcag_levels(21.0) == {"AA-Large": "Pass", "AA": "Pass", "AAA": "Pass"}
    assert get_wcag_levels(4.5) == {"AA-Large": "Pass", "AA": "Pass", "AAA": "Fail"}
    assert get_wcag_levels(3.0) == {"AA-Large": "Pass", "AA": "Fail", "AAA": "Fail"}
    assert get_wcag_levels(1.0) == {"AA-Large": "Fail", "AA": "Fail", "AAA": "Fail"}
