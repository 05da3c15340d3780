"""
Palettegen: deterministic color palette generation from a seed color.
"""

__version__ = "2.0.0"

from palettegen.services.colors import (
    ColorValue, RGBColor, HSLColor, HSVColor, CMYKColor,
    ColorPalette, ColorPalettes, PaletteGenerator,
    hex_to_rgb, rgb_to_hex, rgb_to_hsl, hsl_to_rgb, hsl_to_hsv, hsv_to_hsl,
    rgb_to_cmyk, cmyk_to_rgb, add_to_hue,
)
from palettegen.schemas import GeneratorParams, RandomPaletteOptions, DistributedPaletteOptions
