"""
Palettegen Color Model

A single color held simultaneously as hex, RGB, HSL and HSV, plus the pure
conversion routines between those spaces and CMYK.

Each representation setter follows its own recompute chain. The chains are
not equivalent: HSL values derived from RGB are floored to integers, so the
same color reached through different setters can carry slightly different
HSL/HSV numbers. Equality only looks at the hex code.
"""

import math
import re
from dataclasses import dataclass, replace
from typing import Union

HEX_RE = re.compile(r"#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})", re.IGNORECASE)


@dataclass
class RGBColor:
    """RGB color, channels 0-255 (not clamped, may be fractional)."""
    r: float = 0
    g: float = 0
    b: float = 0


@dataclass
class HSLColor:
    """HSL color: hue 0-360, saturation and lightness 0-100."""
    h: float = 0
    s: float = 0
    l: float = 0


@dataclass
class HSVColor:
    """HSV color: hue 0-360, saturation and value 0-100."""
    h: float = 0
    s: float = 0
    v: float = 0


@dataclass
class CMYKColor:
    """CMYK color, 0-100 (or 0-1 when normalized)."""
    c: float = 0
    m: float = 0
    y: float = 0
    k: float = 0


def round_half_up(x: float) -> int:
    """Round to the nearest integer, .5 going up (towards +inf)."""
    return math.floor(x + 0.5)


def _clamp(value: float, min_value: float, max_value: float) -> float:
    if value > max_value:
        return max_value
    if value < min_value:
        return min_value
    return value


def _nan_to_zero(value: float) -> float:
    return 0 if math.isnan(value) else value


# HEX & RGB

def hex_to_rgb(hex_code: str) -> RGBColor:
    """
    Convert a hex color code to RGB.

    Args:
        hex_code: Color in format #RRGGBB (the # is optional)

    Returns:
        RGBColor with integer channels, or black if the code does not parse
    """
    match = HEX_RE.fullmatch(hex_code) if isinstance(hex_code, str) else None
    if not match:
        return RGBColor(0, 0, 0)
    return RGBColor(*(int(group, 16) for group in match.groups()))


def rgb_to_hex(rgb: RGBColor) -> str:
    """
    Convert an RGB color to a lowercase #rrggbb code.

    Channels are rounded but not clamped, so out-of-range input produces a
    malformed code. Callers are expected to pass channels within 0-255.
    """
    def to_hex(x: float) -> str:
        digits = format(round_half_up(x), "x")
        return digits if len(digits) > 1 else "0" + digits

    return "#" + to_hex(rgb.r) + to_hex(rgb.g) + to_hex(rgb.b)


# RGB & HSL

def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """Convert RGB to HSL, flooring h, s and l to integers."""
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    l = (cmax + cmin) / 2

    if cmax == cmin:
        # achromatic
        h = s = 0.0
    else:
        d = cmax - cmin
        s = d / (2 - cmax - cmin) if l > 0.5 else d / (cmax + cmin)
        if cmax == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif cmax == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSLColor(h=math.floor(h * 360), s=math.floor(s * 100), l=math.floor(l * 100))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert HSL to RGB. Channels are returned unrounded in 0-255."""
    h = hsl.h / 360
    s = hsl.s / 100
    l = hsl.l / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return RGBColor(r * 255, g * 255, b * 255)


# HSL & HSV

def hsl_to_hsv(hsl: HSLColor) -> HSVColor:
    """Convert HSL to HSV. Saturation is 0 when the value is 0."""
    L = hsl.l / 100
    V = (hsl.s / 100) * min(L, 1 - L) + L
    return HSVColor(
        h=hsl.h,
        s=100 * (2 - (2 * L) / V) if V else 0,
        v=V * 100,
    )


def hsv_to_hsl(hsv: HSVColor) -> HSLColor:
    """Convert HSV to HSL. Saturation is 0 when lightness is 0 or 100."""
    V = hsv.v / 100
    L = V - (V * hsv.s) / 200
    m = min(L, 1 - L)
    return HSLColor(
        h=hsv.h,
        s=(100 * (V - L)) / m if m else 0,
        l=L * 100,
    )


# CMYK

def rgb_to_cmyk(rgb: RGBColor, normalized: bool = False) -> CMYKColor:
    """
    Convert RGB to CMYK.

    Args:
        rgb: Color with channels 0-255
        normalized: Return components in 0-1 instead of 0-100 (2 decimals)

    Returns:
        CMYKColor; black yields c = m = y = 0, k = 100
    """
    c = 1 - rgb.r / 255
    m = 1 - rgb.g / 255
    y = 1 - rgb.b / 255
    k = min(c, m, y)

    denom = 1 - k
    if denom:
        c = (c - k) / denom
        m = (m - k) / denom
        y = (y - k) / denom
    else:
        c = m = y = math.nan

    if not normalized:
        c = round_half_up(c * 10000) / 100 if not math.isnan(c) else c
        m = round_half_up(m * 10000) / 100 if not math.isnan(m) else m
        y = round_half_up(y * 10000) / 100 if not math.isnan(y) else y
        k = round_half_up(k * 10000) / 100 if not math.isnan(k) else k

    return CMYKColor(c=_nan_to_zero(c), m=_nan_to_zero(m), y=_nan_to_zero(y), k=_nan_to_zero(k))


def cmyk_to_rgb(cmyk: CMYKColor, normalized: bool = False) -> RGBColor:
    """
    Convert CMYK (components 0-100) to RGB.

    With ``normalized`` the channels are returned in 0-1 and left unrounded,
    otherwise they are scaled to 0-255 and rounded.
    """
    c = cmyk.c / 100
    m = cmyk.m / 100
    y = cmyk.y / 100
    k = cmyk.k / 100

    c = c * (1 - k) + k
    m = m * (1 - k) + k
    y = y * (1 - k) + k

    r, g, b = 1 - c, 1 - m, 1 - y

    if not normalized:
        r = round_half_up(255 * r)
        g = round_half_up(255 * g)
        b = round_half_up(255 * b)

    return RGBColor(r, g, b)


def add_to_hue(h: float = 0, add: float = 0) -> float:
    """
    Add ``add`` degrees to the hue ``h``, wrapping into the 0-360 range.

    Results above 360 wrap with a modulo, negative results are brought back
    by adding 360 once.
    """
    total = h + add
    if total > 360:
        return total % 360
    if total < 0:
        return 360 + total
    return total


class ColorValue:
    """
    One color in hex, RGB, HSL and HSV at the same time.

    Setting any representation recomputes the other three:

    - hex: rgb from hex, hsl from rgb, hsv from hsl
    - rgb: hex from rgb, hsl from rgb, hsv from hsl
    - hsl: rgb from hsl, hex from rgb, hsv from the new hsl
    - hsv: hsl from hsv, rgb from hsl, hex from rgb

    Example:
        >>> color = ColorValue("#3459c7")
        >>> color.rgb
        RGBColor(r=52, g=89, b=199)
    """

    hex_to_rgb = staticmethod(hex_to_rgb)
    rgb_to_hex = staticmethod(rgb_to_hex)
    rgb_to_hsl = staticmethod(rgb_to_hsl)
    hsl_to_rgb = staticmethod(hsl_to_rgb)
    hsl_to_hsv = staticmethod(hsl_to_hsv)
    hsv_to_hsl = staticmethod(hsv_to_hsl)
    rgb_to_cmyk = staticmethod(rgb_to_cmyk)
    cmyk_to_rgb = staticmethod(cmyk_to_rgb)
    add_to_hue = staticmethod(add_to_hue)

    def __init__(self, hex_code: str = "#000000"):
        self.hex = hex_code

    @property
    def hex(self) -> str:
        return self._hex

    @hex.setter
    def hex(self, value: str):
        self._hex = value
        self._rgb = hex_to_rgb(value)
        self._hsl = rgb_to_hsl(self._rgb)
        self._hsv = hsl_to_hsv(self._hsl)

    @property
    def rgb(self) -> RGBColor:
        return self._rgb

    @rgb.setter
    def rgb(self, value: RGBColor):
        self._rgb = value
        self._hex = rgb_to_hex(value)
        self._hsl = rgb_to_hsl(value)
        self._hsv = hsl_to_hsv(self._hsl)

    @property
    def hsl(self) -> HSLColor:
        return self._hsl

    @hsl.setter
    def hsl(self, value: HSLColor):
        self._hsl = value
        self._rgb = hsl_to_rgb(value)
        self._hex = rgb_to_hex(self._rgb)
        self._hsv = hsl_to_hsv(value)

    @property
    def hsv(self) -> HSVColor:
        return self._hsv

    @hsv.setter
    def hsv(self, value: HSVColor):
        self._hsv = value
        self._hsl = hsv_to_hsl(value)
        self._rgb = hsl_to_rgb(self._hsl)
        self._hex = rgb_to_hex(self._rgb)

    @property
    def cmyk(self) -> CMYKColor:
        return rgb_to_cmyk(self._rgb)

    def clone(self) -> "ColorValue":
        """Return a new color built from this color's hex code only."""
        return ColorValue(self._hex)

    def equals(self, other: "ColorValue") -> bool:
        return self._hex == other.hex

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._hex)

    def __repr__(self) -> str:
        return f"ColorValue({self._hex!r})"

    # Adjustments

    def saturate(self, saturation: float = 0, max_value: float = 100, min_value: float = 0) -> "ColorValue":
        """Shift HSV saturation by ``saturation``, clamped to [min_value, max_value]."""
        s = _clamp(self._hsv.s + saturation, min_value, max_value)
        self.hsv = replace(self._hsv, s=s)
        return self

    def brighten(self, brightness: float = 0, max_value: float = 100, min_value: float = 0) -> "ColorValue":
        """
        Adjust brightness.

        The clamped target is written to HSL lightness, then HSL is recomputed
        from the unchanged HSV, so the net effect is a re-derivation of the
        current color through the HSL chain rather than a brightness change.
        """
        # TODO: decide whether brighten should commit the target through the HSV value instead
        self._hsl = replace(self._hsl, l=_clamp(self._hsv.v + brightness, min_value, max_value))
        self.hsl = hsv_to_hsl(self._hsv)
        return self

    def saturate_hsl(self, saturation: float = 0, max_value: float = 100, min_value: float = 0) -> "ColorValue":
        """Shift HSL saturation by ``saturation``, clamped to [min_value, max_value]."""
        s = _clamp(self._hsl.s + saturation, min_value, max_value)
        self.hsl = replace(self._hsl, s=s)
        return self

    def lighten(self, lightness: float = 0, max_value: float = 100, min_value: float = 0) -> "ColorValue":
        """Shift HSL lightness by ``lightness``, clamped to [min_value, max_value]."""
        l = _clamp(self._hsl.l + lightness, min_value, max_value)
        self.hsl = replace(self._hsl, l=l)
        return self


ColorLike = Union[str, ColorValue]
