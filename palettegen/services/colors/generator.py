"""
Palettegen Palette Generator

Builds a base palette by shifting the hue around a seed color, derives a
light and a dark palette from it, and offers two selections over the
resulting colors: a random one and a brightness-distributed one.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from palettegen.config import config
from palettegen.schemas import DistributedPaletteOptions, RandomPaletteOptions
from palettegen.utils.logging import get_logger

from .model import ColorLike, ColorValue, HSVColor, add_to_hue, round_half_up
from .sampling import (
    Rand, comparator_shuffle, filter_by_bounds, keep_odd_indices,
    sample_without_replacement, sort_by_brightness, split_brightness_bands,
)

ColorPalette = List[ColorValue]


@dataclass
class ColorPalettes:
    """The three generated palettes."""
    base: ColorPalette = field(default_factory=list)
    light: ColorPalette = field(default_factory=list)
    dark: ColorPalette = field(default_factory=list)


def _clamp_channel(value: float) -> float:
    return max(0, min(config.CHANNEL_MAX, value))


def _resolve_options(model, options, overrides):
    """Build ``model`` from an options object with keyword overrides on top."""
    if options is None:
        return model(**overrides)
    return model(**{**options.model_dump(), **overrides})


class PaletteGenerator:
    """
    Generate color palettes around a seed color.

    The base palette holds ``2 * precision + 1`` colors: the seed in the
    middle, ``precision`` colors with a growing positive hue shift before it
    (drifting towards low saturation and high value) and ``precision`` with a
    growing negative hue shift after it (towards high saturation and low
    value). The light and dark palettes shift every base color by the same
    random hue, saturation and value deltas.

    Args:
        rand: Callable returning a float in [0, 1). Defaults to random.random
        precision: Colors generated on each side of the seed hue
        hue_range: Total hue spread of the base palette, in degrees
        base_color: Seed color, as a hex code or a ColorValue
        base_saturation: Saturation applied to the seed color

    Example:
        >>> generator = PaletteGenerator(base_color="#3459c7", precision=6)
        >>> colors = generator.distributed_palette(length=6)
    """

    def __init__(
        self,
        rand: Optional[Rand] = None,
        precision: Optional[int] = None,
        hue_range: Optional[float] = None,
        base_color: Optional[ColorLike] = None,
        base_saturation: Optional[float] = None,
    ):
        self.rand = rand or random.random
        self.precision = precision if precision is not None else config.DEFAULT_PRECISION
        self.hue_range = hue_range if hue_range is not None else config.DEFAULT_HUE_RANGE
        self.palettes = ColorPalettes()

        if base_color:
            self.set_base_color(base_color, base_saturation)
        else:
            self.set_base_color()
            h = round_half_up(self.rand() * config.HUE_MAX)
            s = base_saturation if base_saturation is not None else round_half_up(self.rand() * 20 + 65)
            v = round_half_up(self.rand() * 20 + 65)
            self.base_color.hsv = HSVColor(h=h, s=s, v=v)
            get_logger().debug("Synthesized random base color", extra={"base_color": self.base_color.hex})

        self.generate_palettes()

    @classmethod
    def from_params(cls, params, rand: Optional[Rand] = None) -> "PaletteGenerator":
        """Build a generator from a GeneratorParams model."""
        return cls(
            rand=rand,
            precision=params.precision,
            hue_range=params.hue_range,
            base_color=params.base_color,
            base_saturation=params.base_saturation,
        )

    def set_base_color(self, base_color: ColorLike = "#000000", base_saturation: Optional[float] = None):
        """
        Replace the seed color.

        A ColorValue seed is copied by hex, the generator never holds the
        caller's instance. The palettes are not regenerated; call
        generate_palettes() afterwards.
        """
        if isinstance(base_color, ColorValue):
            base_color = base_color.hex
        elif not config.validate_hex(base_color):
            get_logger().warning("Malformed base color, reading as black", extra={"base_color": base_color})

        self.base_color = ColorValue(base_color)
        self.base_color.saturate(base_saturation or 0)

    def generate_palettes(self):
        """Regenerate the base, light and dark palettes and replace them at once."""
        if not config.validate_precision(self.precision) or not config.validate_hue_range(self.hue_range):
            get_logger().warning(
                "Degenerate generator configuration",
                extra={"precision": self.precision, "hue_range": self.hue_range}
            )

        base = self.generate_base_palette()
        light = self.generate_light_palette(base)
        dark = self.generate_dark_palette(base)
        self.palettes = ColorPalettes(base=base, light=light, dark=dark)

        get_logger().debug(
            "Generated palettes",
            extra={
                "base_color": self.base_color.hex,
                "precision": self.precision,
                "hue_range": self.hue_range,
                "size": len(base),
            }
        )

    def generate_base_palette(self) -> ColorPalette:
        """
        Build the base palette around the seed color.

        Returns:
            List ordered from the largest positive hue shift, through the
            seed color, to the largest negative hue shift
        """
        palette: ColorPalette = [self.base_color]
        seed = self.base_color.hsv
        precision = self.precision
        hue_step = (self.hue_range * 0.5) / precision if precision > 0 else 0.0

        # towards desaturated, bright colors
        end_saturation = self.rand() * 5 + 22.5
        end_value = self.rand() * 7.5 + 90

        for i in range(1, precision + 1):
            color = ColorValue()
            color.hsv = HSVColor(
                h=add_to_hue(seed.h, hue_step * i),
                s=_clamp_channel(seed.s - (i * (seed.s - end_saturation)) / precision),
                v=_clamp_channel(seed.v + (i * (end_value - seed.v)) / precision),
            )
            palette.insert(0, color)

        # towards saturated, dark colors
        end_saturation = self.rand() * 7.5 + 90
        end_value = self.rand() * 5 + 22.5

        for i in range(1, precision + 1):
            color = ColorValue()
            color.hsv = HSVColor(
                h=add_to_hue(seed.h, -hue_step * i),
                s=_clamp_channel(seed.s + (i * (end_saturation - seed.s)) / precision),
                v=_clamp_channel(seed.v - (i * (seed.v - end_value)) / precision),
            )
            palette.append(color)

        return palette

    def _shift_palette(self, base: ColorPalette, direction: int) -> ColorPalette:
        hue = self.rand() * 5 + 7.5
        saturation = self.rand() * 7.5 + 22.5
        value = self.rand() * 7.5 + 27.5

        shifted = []
        for base_color in base:
            color = ColorValue(base_color.hex)
            color.hsv = HSVColor(
                h=add_to_hue(color.hsv.h, direction * hue),
                s=_clamp_channel(color.hsv.s + direction * saturation),
                v=_clamp_channel(color.hsv.v - direction * value),
            )
            shifted.append(color)
        return shifted

    def generate_light_palette(self, base: Optional[ColorPalette] = None) -> ColorPalette:
        """Derive lighter, less saturated colors from the base palette."""
        return self._shift_palette(self.palettes.base if base is None else base, -1)

    def generate_dark_palette(self, base: Optional[ColorPalette] = None) -> ColorPalette:
        """Derive darker, more saturated colors from the base palette."""
        return self._shift_palette(self.palettes.base if base is None else base, 1)

    @property
    def base_palette(self) -> ColorPalette:
        return self.palettes.base

    @property
    def light_palette(self) -> ColorPalette:
        return self.palettes.light

    @property
    def dark_palette(self) -> ColorPalette:
        return self.palettes.dark

    @property
    def full_palette(self) -> ColorPalette:
        """All colors in light, base, dark order."""
        return [*self.palettes.light, *self.palettes.base, *self.palettes.dark]

    def _contains_base_color(self, colors: ColorPalette) -> bool:
        return any(color.equals(self.base_color) for color in colors)

    def random_palette(self, options: Optional[RandomPaletteOptions] = None, **kwargs) -> ColorPalette:
        """
        Pick random colors from the full palette.

        Args:
            options: RandomPaletteOptions; keyword arguments override its fields

        Returns:
            At most ``length`` colors, sorted dark to light unless disabled
        """
        opts = _resolve_options(RandomPaletteOptions, options, kwargs)
        length = max(1, opts.length)

        colors = filter_by_bounds(
            self.full_palette,
            opts.min_brightness, opts.max_brightness,
            opts.min_saturation, opts.max_saturation,
        )

        # drops near-duplicate hues as well as the first and last colors
        # (usually the lightest and the darkest)
        if opts.filter_passes and self.precision > 2:
            for _ in range(2):
                colors = keep_odd_indices(colors)

        colors = comparator_shuffle(colors, self.rand)[:length]

        if opts.include_base_color and not self._contains_base_color(colors):
            if colors:
                colors[0] = self.base_color
            else:
                colors.append(self.base_color)

        if opts.sort_by_brightness:
            colors = sort_by_brightness(colors)

        return colors

    def distributed_palette(self, options: Optional[DistributedPaletteOptions] = None, **kwargs) -> ColorPalette:
        """
        Pick colors spread over the dark, mid and light brightness bands.

        Up to a quarter of ``length`` comes from the dark band, up to a
        quarter from the light band and the rest from the mid band, each
        drawn without replacement.

        Args:
            options: DistributedPaletteOptions; keyword arguments override its fields

        Returns:
            Selected colors, sorted dark to light unless disabled
        """
        opts = _resolve_options(DistributedPaletteOptions, options, kwargs)
        length = opts.length
        colors: ColorPalette = []
        exclude = None

        if opts.include_base_color:
            colors.append(self.base_color)
            length = max(0, length - 1)
            exclude = self.base_color

        pool = filter_by_bounds(
            self.full_palette,
            opts.min_brightness, opts.max_brightness,
            opts.min_saturation, opts.max_saturation,
        )

        # too few colors for the band sampling, return a shuffled pool
        if len(pool) <= length + 1:
            if exclude is not None:
                pool = [color for color in pool if not color.equals(exclude)]
            get_logger().debug(
                "Distributed palette pool too small, shuffling",
                extra={"pool_size": len(pool), "length": length}
            )
            return colors + comparator_shuffle(pool, self.rand)[:length]

        dark, light, mid = split_brightness_bands(pool, config.DARK_BAND_MAX, config.LIGHT_BAND_MIN)

        quarter = length // 4
        picked_dark = sample_without_replacement(dark, quarter, self.rand, exclude)
        picked_light = sample_without_replacement(light, quarter, self.rand, exclude)
        taken = len(picked_dark) + len(picked_light)
        picked_mid = sample_without_replacement(mid, length - taken, self.rand, exclude)

        get_logger().debug(
            "Sampled distributed palette",
            extra={"dark": len(picked_dark), "light": len(picked_light), "mid": len(picked_mid)}
        )

        colors += picked_dark + picked_light + picked_mid

        if opts.sort_by_brightness:
            colors = sort_by_brightness(colors)

        return colors
