import numpy as np
import pytest

from chromacam.conversions import D65_WHITE, convert, jch_to_cam16, np_cam16_to_xyz, np_convert
from chromacam.types.format_type import FormatType


def test_convert_returns_tuple():
    result = convert((0.2, 0.4, 0.6), "rgb", "xyz")
    assert isinstance(result, tuple)
    assert len(result) == 3


def test_same_space_same_format_is_identity():
    color = (0.2, 0.4, 0.6)
    assert convert(color, "rgb", "RGB") is color


def test_int_rgb_input():
    x, y, z = convert((255, 255, 255), "rgb", "xyz", input_type=FormatType.INT)
    assert np.allclose((x, y, z), D65_WHITE, atol=0.01)


def test_int_rgb_output():
    result = convert(D65_WHITE, "xyz", "rgb", output_type=FormatType.INT)
    assert result == (255, 255, 255)


def test_percentage_rgb_rescales_only():
    result = convert((100.0, 50.0, 0.0), "rgb", "rgb", input_type=FormatType.PERCENTAGE)
    assert np.allclose(result, (1.0, 0.5, 0.0))


def test_rgb_to_cam16_has_six_correlates():
    result = convert((0.6, 0.5, 0.4), "rgb", "cam16")
    assert len(result) == 6


def test_cam16_back_to_rgb():
    cam = convert((0.6, 0.5, 0.4), "rgb", "cam16")
    assert np.allclose(convert(cam, "cam16", "rgb"), (0.6, 0.5, 0.4), atol=1e-6)
    # H, C, J alone are enough
    assert np.allclose(convert(cam[:3], "cam16", "rgb"), (0.6, 0.5, 0.4), atol=1e-6)


def test_rgb_hct_round_trip():
    hct = convert((0.4, 0.5, 0.6), "rgb", "hct")
    assert np.allclose(convert(hct, "hct", "rgb"), (0.4, 0.5, 0.6), atol=0.02)


def test_lab_to_hct_keeps_lightness():
    h, c, t = convert((60.0, 10.0, -20.0), "lab", "hct")
    assert abs(t - 60.0) < 1e-12


def test_lab_to_cam16_goes_through_xyz():
    cam = convert((60.0, 10.0, -20.0), "lab", "cam16")
    xyz = convert((60.0, 10.0, -20.0), "lab", "xyz")
    assert np.allclose(cam, convert(xyz, "xyz", "cam16"))


def test_unknown_space():
    with pytest.raises(ValueError):
        convert((0.1, 0.2, 0.3), "rgb", "hsv")


def test_wrong_channel_count():
    with pytest.raises(TypeError):
        convert((0.1, 0.2), "rgb", "xyz")


def test_np_convert_batch():
    rgb = np.array([[0.1, 0.2, 0.3], [0.6, 0.5, 0.4], [1.0, 1.0, 1.0], [0.0, 0.0, 0.0]])
    cam = np_convert(rgb, "rgb", "cam16")
    assert cam.shape == (4, 6)
    back = np_convert(cam, "cam16", "rgb")
    assert np.allclose(back, rgb, atol=1e-6)


def test_np_convert_hct_batch():
    rgb = np.array([[0.6, 0.5, 0.4], [0.4, 0.5, 0.6]])
    hct = np_convert(rgb, "rgb", "hct")
    assert hct.shape == (2, 3)
    assert np.allclose(np_convert(hct, "hct", "rgb"), rgb, atol=0.02)


def test_dark_colorful_cam16_to_xyz_and_lab():
    cam = jch_to_cam16(5.0, 80.0, 270.0)
    # the raw inverse has a negative Y for this appearance
    assert np_cam16_to_xyz(np.array(cam))[1] < 0.0

    x, y, z = convert(cam, "cam16", "xyz")
    assert y == 0.0
    assert x > 0.0 and z > 0.0

    lstar, _, bstar = convert(cam, "cam16", "lab")
    assert 0.0 <= lstar < 1e-9
    assert bstar < 0.0


def test_np_convert_clamps_cam16_batch():
    cams = np.array([jch_to_cam16(5.0, 80.0, 270.0), jch_to_cam16(50.0, 20.0, 120.0)])
    xyz = np_convert(cams, "cam16", "xyz")
    assert xyz.shape == (2, 3)
    assert np.all(xyz >= 0.0)
