import pytest

from colormodel import parse, parse_color_values, detect_space
from colormodel.colors import Cmyk, Grayscale, Hex, Hsl, Rgb
from colormodel.errors import ColorDomainError, ColorError, ColorParseError, ColorRangeError


def test_parse_rgb():
    color = parse('rgba(255, 255, 255, 0.5)')
    assert isinstance(color, Rgb)
    assert color.value == (255, 255, 255, .5)
    assert str(color) == 'rgba(255, 255, 255, 0.5)'

    assert parse('RGB(10, 20, 30)').value == (10, 20, 30)


def test_parse_hsl():
    color = parse('hsla(240, 100%, 100%, 0.5)')
    assert isinstance(color, Hsl)
    assert color.h == 240
    assert color.value == (240, 100, 100, .5)


def test_parse_hex():
    color = parse('#fff')
    assert isinstance(color, Hex)
    assert color.to_rgb().value == (255, 255, 255)
    assert parse('#F0B43C').hex == 'f0b43c'


def test_parse_cmyk():
    color = parse('60 20 30 50')
    assert isinstance(color, Cmyk)
    assert color.value == (60, 20, 30, 50)


def test_parse_grayscale():
    color = parse('60')
    assert isinstance(color, Grayscale)
    assert color.gray == 60
    assert parse('0.5').gray == 50


def test_parse_errors():
    with pytest.raises(ColorParseError, match="not in the correct color format"):
        parse('bad color')
    with pytest.raises(ColorParseError, match="Malformed"):
        parse('rgb(255, 255, 255')
    with pytest.raises(ColorParseError, match="Malformed"):
        parse('rgb 255, 255, 255')
    with pytest.raises(ColorParseError, match="Expected 3 or 4 values"):
        parse('rgb(1, 2)')
    with pytest.raises(ColorParseError, match="Expected 3 or 4 values"):
        parse('hsl(1, 2, 3, 4, 5)')
    with pytest.raises(ColorParseError):
        parse('rgb(a, b, c)')
    with pytest.raises(ColorParseError):
        parse(123)


def test_parse_errors_are_domain_errors():
    with pytest.raises(ColorDomainError):
        parse('bad color')
    with pytest.raises(ValueError):
        parse('bad color')


def test_parsed_values_are_range_checked():
    with pytest.raises(ColorRangeError):
        parse('rgb(300, 0, 0)')
    with pytest.raises(ColorRangeError):
        parse('#ffff')
    with pytest.raises(ColorRangeError):
        parse('60 20 30 150')


def test_parse_color_values():
    assert parse_color_values('rgb(1, 2, 3)') == ['1', '2', '3']
    assert parse_color_values('hsla(240, 100%, 100%, 0.5)') == ['240', '100%', '100%', '0.5']
    assert parse_color_values('60 20 30 50', comma=False) == ['60', '20', '30', '50']
    assert parse_color_values('1,2') == ['1', '2']


def test_detect_space():
    assert detect_space('rgba(1, 2, 3, 0.5)') == 'rgb'
    assert detect_space('HSL(1, 2%, 3%)') == 'hsl'
    assert detect_space('#abc') == 'hex'
    assert detect_space('1 2 3 4') == 'cmyk'
    assert detect_space('42') == 'gray'
    assert detect_space('bad color') is None


def test_non_finite_values_are_color_errors():
    for color_string in ('rgb(1e999, 0, 0)', 'hsl(1e400, 0%, 0%)', '1e999 0 0 0'):
        with pytest.raises(ColorError):
            parse(color_string)
    with pytest.raises(ColorRangeError):
        Rgb(float("inf"), 0, 0)
    with pytest.raises(ColorRangeError):
        Rgb(float("nan"), 0, 0)
