import numpy as np

from colormodel.conversions import (
    rgb_to_cmyk, np_rgb_to_cmyk, gray_to_cmyk,
    rgb_to_gray, np_rgb_to_gray, cmyk_to_gray,
    rgb_to_hex,
)
from ..samples import samples_rgb_cmyk, samples_rgb_gray, samples_rgb_hex


def test_rgb_to_cmyk():
    for (r, g, b), cmyk_expected in samples_rgb_cmyk.items():
        assert rgb_to_cmyk(r, g, b) == cmyk_expected


def test_rgb_to_cmyk_numpy():
    the_matrix = np.array(list(samples_rgb_cmyk.keys()))
    expected = np.array(list(samples_rgb_cmyk.values()))
    result = np_rgb_to_cmyk(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.array_equal(result, expected)


def test_rgb_to_gray():
    for (r, g, b), gray_expected in samples_rgb_gray.items():
        assert rgb_to_gray(r, g, b) == gray_expected

    the_matrix = np.array(list(samples_rgb_gray.keys()))
    expected = np.array(list(samples_rgb_gray.values()))
    assert np.array_equal(np_rgb_to_gray(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2]), expected)


def test_gray_and_cmyk():
    assert gray_to_cmyk(50) == (0, 0, 0, 50)
    assert cmyk_to_gray(65, 25, 35, 10) == 10


def test_rgb_to_hex():
    for (r, g, b), hex_expected in samples_rgb_hex.items():
        assert rgb_to_hex(r, g, b) == hex_expected
