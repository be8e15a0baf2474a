import math

import numpy as np
import pytest

from chromacam import ColorError
from chromacam.conversions import (
    D65_WHITE,
    cam16_to_xyz,
    cam16_ucs,
    jch_to_cam16,
    np_cam16_to_xyz,
    np_unit_rgb_to_xyz,
    np_xyz_to_cam16,
    ucs_colorfulness,
    ucs_distance,
    unit_rgb_to_xyz,
    xyz_to_cam16,
)


def test_d65_reference_vector():
    h, c, j, q, m, s = xyz_to_cam16(*D65_WHITE)
    assert abs(c - 2.86903697) < 1e-6
    assert abs(m - 2.265054822) < 1e-6
    assert abs(s - 12.068257348) < 1e-6
    assert abs(j - 100.0) < 1e-6
    assert 0.0 <= h < 360.0


def test_black_is_all_zero():
    out = xyz_to_cam16(0.0, 0.0, 0.0)
    assert out == (0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    assert not any(math.isnan(v) for v in out)


def test_red_has_reddish_hue():
    h, c, j, _, _, _ = xyz_to_cam16(*unit_rgb_to_xyz(1.0, 0.0, 0.0))
    assert h < 40.0 or h > 340.0
    assert c > 80.0
    assert 40.0 < j < 60.0


def test_hue_always_normalized():
    rng = np.random.default_rng(7)
    rgb = rng.random((200, 3))
    cam = np_xyz_to_cam16(np_unit_rgb_to_xyz(rgb))
    assert cam.shape == (200, 6)
    assert np.all((cam[:, 0] >= 0.0) & (cam[:, 0] < 360.0))
    assert np.all(cam[:, 1:] >= 0.0)
    assert np.all(cam[:, 2] <= 100.0)


def test_forward_inverse_round_trip():
    rng = np.random.default_rng(11)
    xyz = np_unit_rgb_to_xyz(rng.random((100, 3)))
    cam = np_xyz_to_cam16(xyz)
    back = np_cam16_to_xyz(cam)
    assert np.allclose(back, xyz, atol=1e-6)


def test_round_trip_custom_conditions(dim_vc):
    xyz = (30.0, 25.0, 10.0)
    h, c, j, *_ = xyz_to_cam16(*xyz, viewing_conditions=dim_vc)
    back = cam16_to_xyz(h, c, j, viewing_conditions=dim_vc)
    assert np.allclose(back, xyz, atol=1e-6)


def test_conditions_change_appearance(dim_vc):
    xyz = (30.0, 25.0, 10.0)
    assert not np.allclose(xyz_to_cam16(*xyz), xyz_to_cam16(*xyz, viewing_conditions=dim_vc))


def test_inverse_black_without_nan():
    assert cam16_to_xyz(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    x, y, z = cam16_to_xyz(120.0, 40.0, 0.0)
    assert (x, y, z) == (0.0, 0.0, 0.0)


def test_inverse_returns_hundred_scale():
    _, y, _ = cam16_to_xyz(0.0, 0.0, 100.0)
    assert 90.0 < y < 110.0


def test_inverse_accepts_full_arrays():
    cam = np_xyz_to_cam16(np.array(D65_WHITE))
    assert np.allclose(np_cam16_to_xyz(cam), D65_WHITE, atol=1e-6)
    assert np.allclose(np_cam16_to_xyz(cam[:3]), D65_WHITE, atol=1e-6)


@pytest.mark.parametrize("xyz", [
    (-1.0, 10.0, 10.0),
    (float("nan"), 10.0, 10.0),
    (10.0, float("inf"), 10.0),
])
def test_forward_rejects_bad_xyz(xyz):
    with pytest.raises(ColorError):
        xyz_to_cam16(*xyz)


def test_forward_rejects_wrong_shape():
    with pytest.raises(ValueError):
        np_xyz_to_cam16(np.zeros((4, 2)))


def test_inverse_rejects_non_finite():
    with pytest.raises(ColorError):
        cam16_to_xyz(float("nan"), 10.0, 50.0)


def test_jch_matches_forward():
    h, c, j, q, m, s = xyz_to_cam16(30.0, 25.0, 10.0)
    assert np.allclose(jch_to_cam16(j, c, h), (h, c, j, q, m, s), atol=1e-9)


def test_jch_zero_lightness(default_vc):
    h, c, j, q, m, s = jch_to_cam16(0.0, 10.0, 90.0)
    assert (h, c, j) == (90.0, 10.0, 0.0)
    assert q == 0.0
    assert s == 0.0
    assert abs(m - 10.0 * default_vc.fl_root) < 1e-12


def test_ucs_of_black():
    assert cam16_ucs(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)


def test_ucs_lightness_endpoint():
    jstar, _, _ = cam16_ucs(0.0, 100.0, 0.0)
    assert abs(jstar - 100.0) < 1e-12


def test_ucs_distance():
    a = cam16_ucs(10.0, 50.0, 20.0)
    assert ucs_distance(a, a) == 0.0
    b = cam16_ucs(10.0, 60.0, 20.0)
    assert ucs_distance(a, b) > 0.0
    assert abs(ucs_distance(a, b) - ucs_distance(b, a)) < 1e-12


def test_rejects_non_viewing_conditions():
    with pytest.raises(TypeError):
        np_xyz_to_cam16(np.array(D65_WHITE), viewing_conditions={"la": 11.72})
    with pytest.raises(TypeError):
        np_cam16_to_xyz(np.array([0.0, 0.0, 50.0]), viewing_conditions=None)


@pytest.mark.parametrize("j, c, h", [
    (-1.0, 10.0, 0.0),
    (100.5, 10.0, 0.0),
    (50.0, -1.0, 0.0),
    (math.nan, 10.0, 0.0),
    (50.0, 10.0, math.inf),
])
def test_jch_rejects_bad_input(j, c, h):
    with pytest.raises(ColorError):
        jch_to_cam16(j, c, h)


def test_jch_names_lightness():
    with pytest.raises(ColorError, match="Lightness J"):
        jch_to_cam16(-1.0, 10.0, 0.0)


def test_jch_accepts_full_lightness():
    assert jch_to_cam16(100.0, 10.0, 0.0)[2] == 100.0


def test_inverse_overflowing_chroma_is_nan():
    out = np_cam16_to_xyz(np.array([123.0, 1e300, 50.0]))
    assert np.all(np.isnan(out))


def test_ucs_colorfulness_matches_ucs():
    _, astar, bstar = cam16_ucs(40.0, 50.0, 30.0)
    assert abs(math.hypot(astar, bstar) - ucs_colorfulness(30.0)) < 1e-12
    assert ucs_colorfulness(0.0) == 0.0
