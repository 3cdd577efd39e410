from __future__ import annotations

import logging
import re
from typing import Any, List, Tuple

from pycolours.errors import InvalidFormat, MalformedStructure, TypeMismatch
from pycolours.models import HslColour, RgbColour

LOGGER = logging.getLogger(__name__)


def convert_hsl(hsl_string: Any) -> Tuple[str, str, str]:
    """
    Split an 'hsl(h, s%, l%)' string into its three raw components.

    Nothing is converted or stripped, so whitespace and percent signs are kept:

    >>> convert_hsl("hsl(130, 50%, 30%)")
    ('130', ' 50%', ' 30%')
    """
    if not isinstance(hsl_string, str):
        raise TypeMismatch(hsl_string, "hsl")
    parts = re.split(r"[()]", hsl_string)
    if len(parts) < 2:
        raise MalformedStructure(hsl_string, "no parentheses around the components")
    components = parts[1].split(",")
    if len(components) != 3:
        raise MalformedStructure(hsl_string, f"expected 3 components, found {len(components)}")
    h, s, l = components
    return h, s, l


def hex_bytes(hex: str) -> RgbColour:
    """Read the three channel bytes of '#rrggbb'. The string is not validated."""
    return RgbColour(int(hex[1:3], 16), int(hex[3:5], 16), int(hex[5:7], 16))


def _integers(value: str, strip: List[str], kind: str) -> List[int]:
    text = value.lower()
    for literal in strip:
        text = text.replace(literal, "")
    tokens = text.split(",")
    if len(tokens) != 3:
        LOGGER.debug("Rejected %s %r: %d components", kind, value, len(tokens))
        raise InvalidFormat(value, kind)
    numbers = []
    for token in tokens:
        try:
            numbers.append(int(token))
        except ValueError as err:
            LOGGER.debug("Rejected %s %r: component %r is not an integer", kind, value, token)
            raise InvalidFormat(value, kind) from err
    return numbers


def rgb_channels(rgb: str) -> RgbColour:
    """Read the channels of an 'rgb(r, g, b)' string."""
    r, g, b = _integers(rgb, ["rgb", "(", ")", " "], "rgb code")
    return RgbColour(r, g, b)


def hsl_components(hsl: str) -> HslColour:
    """Read hue, saturation and lightness of an 'hsl(h, s%, l%)' string, percent signs dropped."""
    h, s, l = _integers(hsl, ["hsl", "(", ")", " ", "%"], "hsl code")
    return HslColour(h, s, l)
