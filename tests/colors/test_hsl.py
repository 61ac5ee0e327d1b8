import pytest

from colormodel.colors import Hsl, Rgb
from colormodel.errors import ColorRangeError
from colormodel.types import RenderFormat
from ..samples import samples_hsl_rgb


def test_class_conversion_hsl_to_rgb():
    for hsl, rgb_expected in samples_hsl_rgb.items():
        rgb = Hsl(*hsl, .5).to_rgb()
        assert isinstance(rgb, Rgb)
        assert rgb.value == rgb_expected + (.5,)


def test_hsl_to_hex():
    assert Hsl(40, 75, 94).to_hex().hex == "f0b43c"


def test_set_fields_and_render():
    color = Hsl(260, 100, 100, 1)
    color.h = 240
    color.s = 60
    color.l = 40
    color.a = .5
    assert str(color) == 'hsla(240, 60%, 40%, 0.5)'
    assert str(Hsl(240, 60, 40)) == 'hsl(240, 60%, 40%)'


def test_percent_strings():
    color = Hsl("240", "100%", "50%", "0.5")
    assert color.value == (240, 100, 50, .5)


def test_to_dict_marks_percentages():
    assert Hsl(240, 60, 40).to_dict() == {"h": 240, "s": "60%", "l": "40%"}
    assert Hsl(240, 60, 40, .5).to_dict() == {"h": 240, "s": "60%", "l": "40%", "a": .5}
    assert Hsl(240, 60, 40).value == (240, 60, 40)


def test_out_of_range_values():
    with pytest.raises(ColorRangeError, match="between 0 and 360"):
        Hsl(460, 100, 100, 1)
    with pytest.raises(ColorRangeError, match="between 0 and 100"):
        Hsl(260, 150, 100, 1)
    with pytest.raises(ColorRangeError):
        Hsl(260, 100, 150, 1)
    with pytest.raises(ColorRangeError):
        Hsl(260, 100, 100, 2)


def test_non_css_render_warns():
    color = Hsl(240, 60, 40)
    with pytest.warns(UserWarning, match="no COMMA rendering"):
        assert color.render(RenderFormat.COMMA) == 'hsl(240, 60%, 40%)'
    with pytest.warns(UserWarning, match="no PERCENT rendering"):
        assert color.render(RenderFormat.PERCENT) == 'hsl(240, 60%, 40%)'
    assert color.render() == 'hsl(240, 60%, 40%)'


def test_has_hue():
    assert Hsl(0, 0, 0).has_hue
    assert not Rgb(0, 0, 0).has_hue


def test_hsl_round_trip_through_rgb():
    assert Hsl(40, 75, 94, .5).to_rgb().to_hsl() == Hsl(40, 75, 94, .5)
