"""
Unit tests for swatch rendering.
"""

import pytest
from PIL import Image

from palettegen import PaletteGenerator, ColorValue
from palettegen.services.colors.model import hex_to_rgb
from palettegen.services.colors.swatches import (
    color_to_rgb_tuple, create_color_chip, create_palette_row,
    render_palette_bands, render_selection_strip, render_overview,
)


def rgb_of(color: ColorValue):
    rgb = hex_to_rgb(color.hex)
    return (rgb.r, rgb.g, rgb.b)


class TestChips:
    """Test single chips and rows."""

    def test_color_to_rgb_tuple(self):
        assert color_to_rgb_tuple(ColorValue("#3459c7")) == (52, 89, 199)

    def test_chip(self):
        chip = create_color_chip(ColorValue("#3459c7"), chip_size=10)
        assert chip.size == (10, 10)
        assert chip.getpixel((5, 5)) == (52, 89, 199)

    def test_row_dimensions(self):
        colors = [ColorValue("#ff0000"), ColorValue("#00ff00"), ColorValue("#0000ff")]
        row = create_palette_row(colors, chip_size=20, spacing=2)
        assert row.size == (3 * 20 + 2 * 2, 20)
        assert row.getpixel((0, 0)) == (255, 0, 0)
        assert row.getpixel((21, 0)) == (255, 255, 255)
        assert row.getpixel((22, 0)) == (0, 255, 0)
        assert row.getpixel((63, 19)) == (0, 0, 255)

    def test_empty_row(self):
        row = create_palette_row([], chip_size=20)
        assert row.size == (20, 20)
        assert row.getpixel((10, 10)) == (255, 255, 255)


class TestPaletteRendering:
    """Test band, selection and overview rendering."""

    @pytest.fixture
    def generator(self, seeded_rand):
        return PaletteGenerator(rand=seeded_rand(5), precision=3, base_color="#3459c7")

    def test_palette_bands(self, generator):
        bands = {
            "light": generator.light_palette,
            "base": generator.base_palette,
            "dark": generator.dark_palette,
        }
        swatch = render_palette_bands(bands, chip_size=10, spacing=0, row_spacing=4)
        assert isinstance(swatch, Image.Image)
        assert swatch.size == (7 * 10, 3 * 10 + 2 * 4)
        assert swatch.getpixel((0, 0)) == rgb_of(generator.light_palette[0])
        assert swatch.getpixel((35, 15)) == rgb_of(generator.base_palette[3])
        assert swatch.getpixel((69, 37)) == rgb_of(generator.dark_palette[6])

    def test_palette_bands_empty(self):
        swatch = render_palette_bands({}, chip_size=12)
        assert swatch.size == (12, 12)

    def test_selection_strip(self):
        colors = [ColorValue("#ff0000"), ColorValue("#0000ff")]
        strip = render_selection_strip(colors, width=100, height=10)
        assert strip.getpixel((0, 0)) == rgb_of(colors[0].clone().saturate(0))
        assert strip.getpixel((99, 9)) == rgb_of(colors[1].clone().saturate(0))

    def test_selection_strip_post_saturation(self, generator):
        colors = generator.distributed_palette(length=4)
        before = [color.hex for color in colors]
        strip = render_selection_strip(colors, width=80, height=10, post_saturation=-100)
        for x in range(0, 80, 10):
            r, g, b = strip.getpixel((x, 5))
            assert r == g == b
        assert [color.hex for color in colors] == before

    def test_overview_layout(self, generator):
        selection = generator.random_palette(length=4)
        overview = render_overview(generator, selection, width=700, height=600)
        assert overview.size == (700, 600)
        assert overview.getpixel((0, 0)) == rgb_of(generator.light_palette[0])
        assert overview.getpixel((0, 50)) == rgb_of(generator.base_palette[0])
        assert overview.getpixel((0, 90)) == rgb_of(generator.dark_palette[0])
        assert overview.getpixel((699, 0)) == (255, 255, 255)
        assert overview.getpixel((0, 599)) == rgb_of(selection[0].clone().saturate(0))

    def test_overview_without_selection(self, generator):
        overview = render_overview(generator, width=100, height=100)
        assert overview.getpixel((50, 80)) == (255, 255, 255)
