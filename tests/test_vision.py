import pytest

from contrastlab.core.colors import RGBA
from contrastlab.core.vision import daltonize_rgb, resolve_cvd_matrix

IDENTITY = (1, 0, 0, 0, 1, 0, 0, 0, 1)


def test_named_matrices():
    for name in ("protanope", "deuteranope", "tritanope"):
        assert len(resolve_cvd_matrix(name)) == 9


def test_invalid_matrix():
    with pytest.raises(ValueError, match="Invalid CVD matrix"):
        resolve_cvd_matrix("achromatope")
    with pytest.raises(ValueError, match="Invalid CVD matrix"):
        resolve_cvd_matrix((1, 0, 0, 0, 1, 0, 0, 0))
    with pytest.raises(ValueError):
        RGBA(1, 2, 3, 1).daltonize("nope")


def test_black_is_fixed_point():
    for name in ("protanope", "deuteranope", "tritanope"):
        assert RGBA(0, 0, 0, 1).daltonize(name) == RGBA(0, 0, 0, 1)


def test_identity_matrix_is_noop():
    for rgb in ((200, 100, 50), (18, 52, 86), (255, 255, 255)):
        out = daltonize_rgb(*rgb, IDENTITY)
        for o, e in zip(out, rgb):
            assert abs(o - e) < 0.5


def test_red_shifts_for_protanope():
    out = RGBA(255, 0, 0, 0.4).daltonize("protanope")
    assert out.a == 0.4
    assert out.r == 255
    assert out.g > 0 or out.b > 0


def test_output_is_clamped():
    for name in ("protanope", "deuteranope", "tritanope"):
        for rgb in ((255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0)):
            for v in daltonize_rgb(*rgb, name):
                assert 0 <= v <= 255
