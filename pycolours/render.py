from pycolours.models import HslColour, RgbColour


def rgb_render(colour: RgbColour) -> str:
    return f"rgb({colour.r}, {colour.g}, {colour.b})"


def hsl_render(colour: HslColour) -> str:
    return f"hsl({colour.h}, {colour.s}%, {colour.l}%)"


def hex_render(colour: RgbColour) -> str:
    return '#{:02x}{:02x}{:02x}'.format(colour.r, colour.g, colour.b)
