import pytest

from textareas.colour import RGB


def test_default_is_black():
    assert RGB() == RGB.black()
    assert RGB().colour == 0


def test_named_colours():
    assert RGB.white() == RGB(255, 255, 255)
    assert RGB.red() == RGB(255, 0, 0)
    assert RGB.green() == RGB(0, 255, 0)
    assert RGB.blue() == RGB(0, 0, 255)


def test_packed_colour_layout():
    assert RGB.red().colour == 0xFF0000
    assert RGB.green().colour == 0x00FF00
    assert RGB.blue().colour == 0x0000FF
    assert RGB.white().colour == 0xFFFFFF


def test_from_colour_unpacks_components():
    rgb = RGB.from_colour(0x123456)
    assert (rgb.r, rgb.g, rgb.b) == (0x12, 0x34, 0x56)


@pytest.mark.parametrize("packed", [0x000000, 0xFFFFFF, 0x123456, 0xABCDEF, 0x010203])
def test_round_trip(packed):
    assert RGB.from_colour(packed).colour == packed


def test_from_colour_ignores_high_bits():
    assert RGB.from_colour(0xFF123456) == RGB.from_colour(0x123456)


def test_colour_setter_updates_components():
    rgb = RGB()
    rgb.colour = 0x0A0B0C
    assert (rgb.r, rgb.g, rgb.b) == (0x0A, 0x0B, 0x0C)


def test_component_assignment_changes_colour():
    rgb = RGB.black()
    rgb.g = 255
    assert rgb == RGB.green()
    assert rgb.colour == RGB.green().colour


def test_describe():
    assert RGB(1, 2, 3).describe() == "R: 1\nG:     2\nB:   3\n"