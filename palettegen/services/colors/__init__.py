"""
Palettegen color services: color model, palette generation and swatches.
"""

from .model import (
    ColorValue, RGBColor, HSLColor, HSVColor, CMYKColor,
    hex_to_rgb, rgb_to_hex, rgb_to_hsl, hsl_to_rgb, hsl_to_hsv, hsv_to_hsl,
    rgb_to_cmyk, cmyk_to_rgb, add_to_hue,
)
from .generator import ColorPalette, ColorPalettes, PaletteGenerator
