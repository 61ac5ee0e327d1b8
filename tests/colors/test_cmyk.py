import pytest

from colormodel.colors import Cmyk, Grayscale, Hsl, Rgb
from colormodel.errors import ColorRangeError
from colormodel.types import RenderFormat
from ..samples import samples_cmyk_rgb


def test_class_conversion_cmyk_to_rgb():
    for cmyk, rgb_expected in samples_cmyk_rgb.items():
        rgb = Cmyk(*cmyk).to_rgb()
        assert isinstance(rgb, Rgb)
        assert rgb.value == rgb_expected

    assert str(Cmyk(65, 25, 35, 10).to_rgb()) == 'rgb(80, 172, 149)'


def test_render_formats():
    color = Cmyk(65, 25, 35, 10)
    assert str(color) == '0.65 0.25 0.35 0.1'
    assert color.render(RenderFormat.PERCENT) == '0.65 0.25 0.35 0.1'
    assert color.render(RenderFormat.COMMA) == '65, 25, 35, 10'
    assert color.render(RenderFormat.CSS) == 'rgb(80, 172, 149)'
    assert color.render() == '65 25 35 10'


def test_cmyk_to_gray():
    gray = Cmyk(65, 25, 35, 10).to_gray()
    assert isinstance(gray, Grayscale)
    assert gray.gray == 10
    assert str(gray) == '0.1'


def test_fractions_are_scaled():
    color = Cmyk(0.5, 0, 1, 100)
    assert color.value == (50, 0, 1, 100)
    color.k = 0.25
    assert color.k == 25


def test_percent_strings():
    assert Cmyk("60%", "20%", "30%", "50%").value == (60, 20, 30, 50)


def test_out_of_range_values():
    for position in range(4):
        inks = [0, 0, 0, 0]
        inks[position] = 150
        with pytest.raises(ColorRangeError, match="between 0 and 100"):
            Cmyk(*inks)
    with pytest.raises(ColorRangeError):
        Cmyk(-1, 0, 0, 0)


def test_key_set():
    color = Cmyk(1, 2, 3, 4)
    for key in ("c", "m", "y", "k"):
        assert key in color
    assert color["k"] == 4
    assert "a" not in color


def test_cmyk_to_hsl_goes_through_rgb():
    assert Cmyk(0, 25, 75, 6).to_hsl() == Hsl(40, 75, 94)
