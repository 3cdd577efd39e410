from pycolours.color import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
)
from pycolours.configuration import DEFAULT_CONFIG, Config, Rounding, load_configuration
from pycolours.errors import ColourError, InvalidFormat, MalformedStructure, TypeMismatch
from pycolours.models import HslColour, RgbColour
from pycolours.parsing import convert_hsl
from pycolours.validation import is_hex_code, is_hsl_code, is_rgb_code

__version__ = "0.0.1"
