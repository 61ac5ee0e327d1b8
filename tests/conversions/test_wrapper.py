import numpy as np
import pytest

from colormodel.conversions import convert, np_convert, rgb_to_hsl
from ..samples import samples_rgb_hsl


def test_direct_edges():
    assert convert((240, 180, 60), "rgb", "hsl") == (40, 75, 94)
    assert convert((65, 25, 35, 10), "cmyk", "gray") == 10
    assert convert(50, "gray", "cmyk") == (0, 0, 0, 50)
    assert convert(50, "gray", "rgb") == (50, 50, 50)
    assert convert("fff", "hex", "rgb") == (255, 255, 255)


def test_routes_through_rgb():
    assert convert((40, 75, 94), "hsl", "hex") == "f0b43c"
    assert convert("#F0B43C", "hex", "hsl") == (40, 75, 94)
    assert convert((0, 25, 75, 6), "cmyk", "hsl") == (40, 75, 94)
    assert convert(62, "gray", "hsl") == (0, 0, 24)


def test_same_space_is_identity():
    color = (1, 2, 3)
    assert convert(color, "rgb", "RGB") is color


def test_unknown_space():
    with pytest.raises(ValueError):
        convert((1, 2, 3), "rgb", "lab")
    with pytest.raises(ValueError):
        np_convert(np.zeros((1, 3)), "rgb", "hex")


def test_np_convert_matches_scalar():
    colors = np.array(list(samples_rgb_hsl.keys()))
    result = np_convert(colors, "rgb", "hsl")
    expected = np.array([rgb_to_hsl(*c) for c in samples_rgb_hsl.keys()])
    assert np.array_equal(result, expected)


def test_np_convert_gray_has_channel_axis():
    colors = np.array([[240, 180, 60], [0, 0, 0]])
    gray = np_convert(colors, "rgb", "gray")
    assert gray.shape == (2, 1)
    assert np.array_equal(gray[..., 0], [62, 0])

    cmyk = np_convert(gray, "gray", "cmyk")
    assert np.array_equal(cmyk, [[0, 0, 0, 62], [0, 0, 0, 0]])


def test_np_convert_through_rgb():
    hsl = np.array([[[40, 75, 94], [180, 24, 94]]])
    cmyk = np_convert(hsl, "hsl", "cmyk")
    assert cmyk.shape == (1, 2, 4)
    assert np.array_equal(cmyk[0, 0], [0, 25, 75, 6])
