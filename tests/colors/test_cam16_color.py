import math

import pytest

from chromacam import CAM16, HCT, RGB, XYZ, Lab, ColorError


def test_from_d65():
    cam = CAM16.from_xyz(XYZ.D65)
    assert abs(cam.c - 2.86903697) < 1e-6
    assert abs(cam.m - 2.265054822) < 1e-6
    assert abs(cam.s - 12.068257348) < 1e-6
    assert abs(cam.j - 100.0) < 1e-6


def test_from_black():
    cam = CAM16.from_xyz(XYZ(0.0, 0.0, 0.0))
    assert cam.value == (0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


def test_channels():
    cam = CAM16(180.0, 20.0, 30.0, 40.0, 15.0, 50.0)
    assert (cam.h, cam.c, cam.j, cam.q, cam.m, cam.s) == (180.0, 20.0, 30.0, 40.0, 15.0, 50.0)
    assert abs(cam.hue_radians - math.pi) < 1e-12


@pytest.mark.parametrize("value, message", [
    ((360.0, 0, 0, 0, 0, 0), r"Channel\(H\) must be in range \[0, 360\)\."),
    ((-1.0, 0, 0, 0, 0, 0), r"Channel\(H\)"),
    ((0, -1.0, 0, 0, 0, 0), r"Channel\(C\) must be >= 0\."),
    ((0, 0, 100.5, 0, 0, 0), r"Channel\(J\) must be in range \[0, 100\]\."),
    ((0, 0, 0, -1.0, 0, 0), r"Channel\(Q\)"),
    ((0, 0, 0, 0, float("nan"), 0), r"Channel\(M\) must be a finite number\."),
    ((0, 0, 0, 0, 0, -0.1), r"Channel\(S\)"),
])
def test_invalid_channels(value, message):
    with pytest.raises(ColorError, match=message):
        CAM16(value)


def test_wrong_channel_count():
    with pytest.raises(TypeError):
        CAM16(10.0, 20.0, 30.0)


def test_from_jch_is_self_consistent():
    cam = CAM16.from_rgb(RGB(0.6, 0.5, 0.4))
    rebuilt = CAM16.from_jch(cam.j, cam.c, cam.h)
    assert all(abs(a - b) < 1e-9 for a, b in zip(rebuilt, cam))


def test_to_xyz_round_trip():
    xyz = XYZ(30.0, 25.0, 10.0)
    back = CAM16.from_xyz(xyz).to_xyz()
    assert all(abs(a - b) < 1e-6 for a, b in zip(back, xyz))


def test_to_xyz_honours_conditions(dim_vc):
    xyz = XYZ(30.0, 25.0, 10.0)
    cam = CAM16.from_xyz(xyz, dim_vc)
    assert all(abs(a - b) < 1e-6 for a, b in zip(cam.to_xyz(dim_vc), xyz))
    assert any(abs(a - b) > 1e-3 for a, b in zip(cam.to_xyz(), xyz))


def test_ucs_black():
    cam = CAM16.from_xyz(XYZ(0.0, 0.0, 0.0))
    assert (cam.jstar, cam.mstar, cam.astar, cam.bstar) == (0.0, 0.0, 0.0, 0.0)


def test_ucs_polar_relation():
    cam = CAM16(90.0, 20.0, 50.0, 0.0, 30.0, 0.0)
    assert abs(cam.mstar - math.log(1 + 0.0228 * 30.0) / 0.0228) < 1e-12
    assert abs(cam.astar) < 1e-9
    assert abs(cam.bstar - cam.mstar) < 1e-12
    assert abs(cam.jstar - 1.7 * 50.0 / 1.35) < 1e-9


def test_distance():
    a = CAM16.from_rgb(RGB(0.6, 0.5, 0.4))
    b = CAM16.from_rgb(RGB(0.62, 0.5, 0.4))
    c = CAM16.from_rgb(RGB(0.9, 0.1, 0.1))
    assert a.distance(a) == 0.0
    assert 0.0 < a.distance(b) < a.distance(c)
    assert abs(a.distance(b) - b.distance(a)) < 1e-12


def test_from_color_dispatch():
    rgb = RGB(0.6, 0.5, 0.4)
    cam = CAM16.from_color(rgb)
    assert CAM16.from_color(cam) is cam
    assert CAM16.from_color(rgb.to_xyz()) == cam
    lab_cam = CAM16.from_color(rgb.to_xyz().to_lab())
    assert all(abs(x - y) < 1e-6 for x, y in zip(lab_cam, cam))
    hct_cam = CAM16.from_color(HCT.from_rgb(rgb))
    assert abs(hct_cam.h - cam.h) < 1.0
    with pytest.raises(TypeError):
        CAM16.from_color({})


def test_from_hct_matches_solved_rgb():
    hct = HCT(220.0, 20.0, 60.0)
    cam = CAM16.from_hct(hct)
    assert abs(cam.h - 220.0) < 0.5
    assert abs(cam.c - 20.0) < 0.5


def test_lab_conversion_through_color_base():
    cam = CAM16(Lab(60.0, 10.0, -20.0))
    assert cam.j > 0.0


def test_dark_colorful_converts_like_to_xyz():
    cam = CAM16.from_jch(5.0, 80.0, 270.0)
    expected = cam.to_xyz()
    assert expected.y == 0.0
    for xyz in (cam.convert("xyz"), XYZ(cam)):
        assert all(abs(a - b) < 1e-9 for a, b in zip(xyz, expected))
    assert cam.convert("lab").l >= 0.0
    assert expected.to_lab().l >= 0.0


def test_from_jch_rejects_negative_lightness():
    with pytest.raises(ColorError, match="Lightness J"):
        CAM16.from_jch(-1.0, 10.0, 0.0)
