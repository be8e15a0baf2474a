import numpy as np

from chromacam.conversions import (
    D65_WHITE,
    lab_to_xyz,
    lstar_from_y,
    np_lab_to_xyz,
    np_xyz_to_lab,
    xyz_to_lab,
    y_from_lstar,
)


def test_white_is_l100():
    l, a, b = xyz_to_lab(*D65_WHITE)
    assert abs(l - 100.0) < 1e-9
    assert abs(a) < 1e-9
    assert abs(b) < 1e-9


def test_black_is_l0():
    assert np.allclose(xyz_to_lab(0.0, 0.0, 0.0), (0.0, 0.0, 0.0))


def test_mid_gray_luminance():
    assert abs(y_from_lstar(50.0) - 18.418651851244416) < 1e-9
    assert abs(lstar_from_y(18.418651851244416) - 50.0) < 1e-9


def test_lstar_y_round_trip_low_and_high():
    for lstar in (0.0, 1.0, 7.9, 8.1, 50.0, 99.0, 100.0):
        assert abs(lstar_from_y(y_from_lstar(lstar)) - lstar) < 1e-9


def test_lab_round_trip():
    x, y, z = lab_to_xyz(*xyz_to_lab(20.0, 30.0, 40.0))
    assert abs(x - 20.0) < 1e-9
    assert abs(y - 30.0) < 1e-9
    assert abs(z - 40.0) < 1e-9


def test_np_lab_batch_shape():
    xyz = np.array([[[20.0, 30.0, 40.0], [1.0, 1.0, 1.0]]])
    lab = np_xyz_to_lab(xyz)
    assert lab.shape == (1, 2, 3)
    assert np.allclose(np_lab_to_xyz(lab), xyz)
