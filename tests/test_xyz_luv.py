from contrastlab.core import conversions as conv
from contrastlab.core.colors import LUVA, RGBA, XYZA
from samples import samples_round_trip_rgb


def test_white_xyz():
    x, y, z, a = RGBA(255, 255, 255, 1).to_xyza().values
    assert abs(y - 1.0) < 1e-6
    assert abs(x - 0.950456) < 1e-6
    assert abs(z - 1.088754) < 1e-6
    assert conv.REFERENCE_WHITE == (x, y, z)


def test_white_and_black_luv():
    l, u, v, a = RGBA(255, 255, 255, 1).to_luva().values
    assert abs(l - 100) < 1e-9
    assert abs(u) < 1e-9
    assert abs(v) < 1e-9

    assert RGBA(0, 0, 0, 1).to_luva().values == (0, 0, 0, 1)


def test_black_luv_to_rgb():
    black = LUVA(0, 0, 0, 1).to_rgba()
    assert black.to_hex() == "#000000"


def test_xyz_round_trip():
    for r, g, b in samples_round_trip_rgb:
        back = RGBA(r, g, b, 1).to_xyza().to_rgba()
        for out, exp in zip(back.values, (r, g, b, 1)):
            assert abs(out - exp) < 0.5


def test_luv_round_trip():
    for r, g, b in samples_round_trip_rgb:
        back = RGBA(r, g, b, 1).to_luva().to_rgba()
        for out, exp in zip(back.values, (r, g, b, 1)):
            assert abs(out - exp) < 0.5


def test_luv_custom_white():
    d65 = (0.95047, 1.0, 1.08883)
    l, u, v = conv.xyz_to_luv(*d65, white=d65)
    assert abs(l - 100) < 1e-9
    assert abs(u) < 1e-9
    assert abs(v) < 1e-9

    lab = XYZA(0.2, 0.3, 0.4, 1).to_luva(white=d65)
    back = lab.to_xyza(white=d65)
    for out, exp in zip(back.values, (0.2, 0.3, 0.4, 1)):
        assert abs(out - exp) < 1e-9


def test_xyz_to_rgb_is_clamped():
    r, g, b = conv.xyz_to_rgb(2.0, 2.0, 2.0)
    assert (r, g, b) == (255, 255, 255)
    r, g, b = conv.xyz_to_rgb(-1.0, -1.0, -1.0)
    assert (r, g, b) == (0, 0, 0)


def test_luv_alpha_defaults():
    assert XYZA.from_luva(50, 0, 0).a == 1
    assert LUVA.from_xyza(0.2, 0.2, 0.2).a == 1
    assert LUVA(50, 0, 0, 0.5).to_xyza().a == 0.5
