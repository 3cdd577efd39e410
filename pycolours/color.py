from __future__ import annotations

import colorsys
import logging
import math
from fractions import Fraction

from pycolours.configuration import DEFAULT_CONFIG, Config, Rounding
from pycolours.errors import InvalidFormat
from pycolours.models import HslColour, RgbColour
from pycolours.parsing import hex_bytes, hsl_components, rgb_channels
from pycolours.render import hex_render, hsl_render, rgb_render
from pycolours.validation import is_hex_code, is_hsl_code, is_rgb_code

LOGGER = logging.getLogger(__name__)


def round_value(value: Fraction, rounding: Rounding) -> int:
    if rounding is Rounding.HALF_EVEN:
        return round(value)
    sign = -1 if value < 0 else 1
    return sign * math.floor(abs(value) + Fraction(1, 2))


def hex_to_hsl(hex: str, config: Config = DEFAULT_CONFIG) -> str:
    """
    Convert '#rrggbb' to 'hsl(h, s%, l%)'.

    >>> hex_to_hsl("#ff0000")
    'hsl(0, 100%, 50%)'
    """
    if not is_hex_code(hex):
        LOGGER.debug("Rejected hex code %r", hex)
        raise InvalidFormat(hex, "hex")
    return rgb_to_hsl(hex_to_rgb(hex), config)


def hex_to_rgb(hex: str) -> str:
    """
    Convert '#rrggbb' to 'rgb(r, g, b)'.

    The input is not validated: anything that is not a hex code gives
    meaningless channels or a ValueError from the digit parsing. Check it
    with is_hex_code first when it comes from outside.
    """
    return rgb_render(hex_bytes(hex))


def rgb_to_hsl(rgb: str, config: Config = DEFAULT_CONFIG) -> str:
    """
    Convert 'rgb(r, g, b)' to 'hsl(h, s%, l%)'.

    >>> rgb_to_hsl("rgb(249, 231, 226)")
    'hsl(13, 66%, 93%)'
    """
    if not is_rgb_code(rgb):
        LOGGER.debug("Rejected rgb code %r", rgb)
        raise InvalidFormat(rgb, "rgb code")
    channels = rgb_channels(rgb)
    if config.strict_rgb_range and not channels.in_byte_range():
        LOGGER.debug("Rejected rgb code %r: channel out of range", rgb)
        raise InvalidFormat(rgb, "rgb code")
    try:
        return hsl_render(rgb_to_hsl_colour(channels, config.rounding))
    except ZeroDivisionError as err:
        # only reachable with channels above 255
        LOGGER.debug("Rejected rgb code %r: no hsl equivalent", rgb)
        raise InvalidFormat(rgb, "rgb code") from err


def rgb_to_hsl_colour(channels: RgbColour, rounding: Rounding = Rounding.HALF_UP) -> HslColour:
    r = Fraction(channels.r, 255)
    g = Fraction(channels.g, 255)
    b = Fraction(channels.b, 255)

    max_value = max(r, g, b)
    min_value = min(r, g, b)
    l = (max_value + min_value) / 2

    if max_value == min_value:
        h = s = Fraction(0)
    else:
        difference = max_value - min_value
        if l > Fraction(1, 2):
            s = difference / (2 - max_value - min_value)
        else:
            s = difference / (max_value + min_value)

        if max_value == r:
            h = (g - b) / difference + (6 if g < b else 0)
        elif max_value == g:
            h = (b - r) / difference + 2
        else:
            h = (r - g) / difference + 4
        h = h / 6

    return HslColour(
        round_value(h * 360, rounding),
        round_value(s * 100, rounding),
        round_value(l * 100, rounding))


def rgb_to_hex(rgb: str) -> str:
    """
    Convert 'rgb(r, g, b)' to '#rrggbb'.

    >>> rgb_to_hex("rgb(255, 128, 0)")
    '#ff8000'
    """
    if not is_rgb_code(rgb):
        LOGGER.debug("Rejected rgb code %r", rgb)
        raise InvalidFormat(rgb, "rgb code")
    channels = rgb_channels(rgb)
    if not channels.in_byte_range():
        LOGGER.debug("Rejected rgb code %r: channel does not fit in a byte", rgb)
        raise InvalidFormat(rgb, "rgb code")
    return hex_render(channels)


def hsl_to_rgb(hsl: str, config: Config = DEFAULT_CONFIG) -> str:
    """
    Convert 'hsl(h, s%, l%)' to 'rgb(r, g, b)'.

    >>> hsl_to_rgb("hsl(0, 100%, 50%)")
    'rgb(255, 0, 0)'
    """
    if not is_hsl_code(hsl):
        LOGGER.debug("Rejected hsl code %r", hsl)
        raise InvalidFormat(hsl, "hsl code")
    colour = hsl_components(hsl)
    if colour.s > 100 or colour.l > 100:
        LOGGER.debug("Rejected hsl code %r: percentage above 100", hsl)
        raise InvalidFormat(hsl, "hsl code")
    return rgb_render(hsl_to_rgb_colour(colour, config.rounding))


def hsl_to_rgb_colour(colour: HslColour, rounding: Rounding = Rounding.HALF_UP) -> RgbColour:
    # colorsys works in floats, so a channel landing on .5 may already be off by an ulp
    r, g, b = colorsys.hls_to_rgb((colour.h % 360) / 360, colour.l / 100, colour.s / 100)
    return RgbColour(*(round_value(Fraction(c) * 255, rounding) for c in (r, g, b)))


def hsl_to_hex(hsl: str, config: Config = DEFAULT_CONFIG) -> str:
    """
    Convert 'hsl(h, s%, l%)' to '#rrggbb'.

    >>> hsl_to_hex("hsl(0, 0%, 100%)")
    '#ffffff'
    """
    return rgb_to_hex(hsl_to_rgb(hsl, config))
