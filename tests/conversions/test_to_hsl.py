import numpy as np

from colormodel.conversions.to_hsl import rgb_to_hsl, np_rgb_to_hsl, rgb_hue_fraction
from ..samples import samples_rgb_hsl


def test_rgb_to_hsl():
    for (r, g, b), hsl_expected in samples_rgb_hsl.items():
        assert rgb_to_hsl(r, g, b) == hsl_expected


def test_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    result = np_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert result.shape == expected.shape
    assert np.array_equal(result, expected)


def test_hue_fraction_wraps_negative_hues():
    assert rgb_hue_fraction(128, 128, 128) == 0.0
    fraction = rgb_hue_fraction(255, 0, 128)
    assert 0 <= fraction < 1
    assert abs(fraction * 360 - 330) < 0.5


def test_numpy_agrees_with_scalar():
    levels = np.arange(0, 256, 17)
    r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")
    result = np_rgb_to_hsl(r, g, b)
    expected = np.array([
        rgb_to_hsl(int(rr), int(gg), int(bb))
        for rr, gg, bb in zip(r.ravel(), g.ravel(), b.ravel())
    ]).reshape(result.shape)
    assert np.allclose(result, expected, atol=1)
