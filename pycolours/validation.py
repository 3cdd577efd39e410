import re
from re import Pattern
from typing import Any

# Case-insensitive for ASCII letters only.
HEX_PATTERN: Pattern = re.compile(r"^#[0-9a-f]{6}$", re.IGNORECASE | re.ASCII)
RGB_PATTERN: Pattern = re.compile(r"^rgb\((\d{1,3},\s?){2}\d{1,3}\)$", re.IGNORECASE | re.ASCII)
HSL_PATTERN: Pattern = re.compile(r"^hsl\((\d{1,3},\s?)(\d{1,3}%,\s?)(\d{1,3}%)\)$", re.IGNORECASE | re.ASCII)


def _matches(pattern: Pattern, value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return pattern.fullmatch(value) is not None


def is_hex_code(hex: Any) -> bool:
    """
    Check if a string is a '#rrggbb' hex code. Short forms like '#fff' are rejected.

    >>> is_hex_code("#f9e6e1")
    True
    """
    return _matches(HEX_PATTERN, hex)


def is_rgb_code(rgb: Any) -> bool:
    """
    Check if a string is an 'rgb(r, g, b)' code.

    Only the digit pattern is checked, so 'rgb(256, 0, 0)' passes.
    """
    return _matches(RGB_PATTERN, rgb)


def is_hsl_code(hsl: Any) -> bool:
    """
    Check if a string is an 'hsl(h, s%, l%)' code.

    >>> is_hsl_code("hsl(13, 66%, 93%)")
    True
    >>> is_hsl_code("hsl(13,66,93)")
    False
    """
    return _matches(HSL_PATTERN, hsl)
