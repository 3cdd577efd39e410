import pytest

from pycolours.errors import InvalidFormat, MalformedStructure, TypeMismatch
from pycolours.models import HslColour, RgbColour
from pycolours.parsing import convert_hsl, hex_bytes, hsl_components, rgb_channels


def test_convert_hsl_keeps_raw_components():
    assert convert_hsl("hsl(130, 50%, 30%)") == ("130", " 50%", " 30%")


def test_convert_hsl_without_spaces():
    assert convert_hsl("hsl(13,66%,93%)") == ("13", "66%", "93%")


@pytest.mark.parametrize("value", [None, 130, ("130", "50%", "30%")])
def test_convert_hsl_rejects_non_strings(value):
    with pytest.raises(TypeMismatch) as excinfo:
        convert_hsl(value)
    assert isinstance(excinfo.value, TypeError)
    assert excinfo.value.value == value


def test_convert_hsl_without_parentheses():
    with pytest.raises(MalformedStructure, match="130, 50%, 30%"):
        convert_hsl("130, 50%, 30%")


def test_convert_hsl_with_wrong_component_count():
    with pytest.raises(MalformedStructure):
        convert_hsl("hsl(130, 50%)")


def test_hex_bytes():
    assert hex_bytes("#f9e6e1") == RgbColour(249, 230, 225)
    assert hex_bytes("#FF8000") == RgbColour(255, 128, 0)


def test_rgb_channels():
    assert rgb_channels("rgb(249, 231, 226)") == RgbColour(249, 231, 226)
    assert rgb_channels("RGB(1,2,3)") == RgbColour(1, 2, 3)


def test_rgb_channels_rejects_non_numeric_token():
    with pytest.raises(InvalidFormat, match="rgb\\(1, x, 3\\)") as excinfo:
        rgb_channels("rgb(1, x, 3)")
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_rgb_channels_rejects_missing_channel():
    with pytest.raises(InvalidFormat):
        rgb_channels("rgb(1, 2)")


def test_hsl_components():
    assert hsl_components("hsl(130, 50%, 30%)") == HslColour(130, 50, 30)
