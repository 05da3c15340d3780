"""
Palettegen Swatch Rendering

Creates Pillow images for previewing generated palettes: one row per
palette band, a strip for a selection, and an overview combining both.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from palettegen.config import config

from .model import ColorValue, hex_to_rgb

BAND_ORDER = ["light", "base", "dark"]
BACKGROUND = (255, 255, 255)


def color_to_rgb_tuple(color: ColorValue) -> Tuple[int, int, int]:
    """Integer RGB triple for drawing, parsed back from the hex code."""
    rgb = hex_to_rgb(color.hex)
    return int(rgb.r), int(rgb.g), int(rgb.b)


def create_color_chip(color: ColorValue, chip_size: Optional[int] = None) -> Image.Image:
    """
    Create a single color chip image.

    Args:
        color: Color to render
        chip_size: Size of the square chip in pixels

    Returns:
        PIL Image of the color chip
    """
    chip_size = chip_size or config.SWATCH_CHIP_SIZE
    return Image.new("RGB", (chip_size, chip_size), color_to_rgb_tuple(color))


def create_palette_row(
    colors: Sequence[ColorValue],
    chip_size: Optional[int] = None,
    spacing: Optional[int] = None,
) -> Image.Image:
    """
    Create a horizontal row of color chips.

    Returns:
        PIL Image of the row, or a single white chip for an empty palette
    """
    chip_size = chip_size or config.SWATCH_CHIP_SIZE
    spacing = config.SWATCH_SPACING if spacing is None else spacing

    if not colors:
        return Image.new("RGB", (chip_size, chip_size), BACKGROUND)

    row_width = len(colors) * chip_size + (len(colors) - 1) * spacing
    row = Image.new("RGB", (row_width, chip_size), BACKGROUND)

    x_pos = 0
    for color in colors:
        row.paste(create_color_chip(color, chip_size), (x_pos, 0))
        x_pos += chip_size + spacing

    return row


def render_palette_bands(
    palettes: Dict[str, List[ColorValue]],
    chip_size: Optional[int] = None,
    spacing: Optional[int] = None,
    row_spacing: int = 4,
) -> Image.Image:
    """
    Stack the light, base and dark palettes as rows.

    Args:
        palettes: Mapping of band name ("light", "base", "dark") to colors
        chip_size: Size of each color chip
        spacing: Horizontal spacing between chips
        row_spacing: Vertical spacing between rows

    Returns:
        PIL Image with one row per non-empty band
    """
    rows = [
        create_palette_row(palettes[band], chip_size, spacing)
        for band in BAND_ORDER
        if palettes.get(band)
    ]

    if not rows:
        size = chip_size or config.SWATCH_CHIP_SIZE
        return Image.new("RGB", (size, size), BACKGROUND)

    width = max(row.width for row in rows)
    height = sum(row.height for row in rows) + row_spacing * (len(rows) - 1)
    swatch = Image.new("RGB", (width, height), BACKGROUND)

    y_pos = 0
    for row in rows:
        swatch.paste(row, (0, y_pos))
        y_pos += row.height + row_spacing

    return swatch


def render_selection_strip(
    colors: Sequence[ColorValue],
    width: int,
    height: int,
    post_saturation: float = 0,
) -> Image.Image:
    """
    Fill a strip with equal-width blocks, one per selected color.

    ``post_saturation`` is applied to a clone of each color, the selection
    itself is left untouched.
    """
    strip = Image.new("RGB", (width, height), BACKGROUND)
    if not colors:
        return strip

    draw = ImageDraw.Draw(strip)
    block = width / len(colors)
    for i, color in enumerate(colors):
        adjusted = color.clone().saturate(post_saturation)
        x0 = round(i * block)
        x1 = max(x0, round((i + 1) * block) - 1)
        draw.rectangle([x0, 0, x1, height - 1], fill=color_to_rgb_tuple(adjusted))

    return strip


def render_overview(
    generator,
    selection: Optional[Sequence[ColorValue]] = None,
    width: int = 800,
    height: int = 600,
    palette_size: float = 0.2,
    post_saturation: float = 0,
) -> Image.Image:
    """
    Render the generated bands and a selection on one canvas.

    The three bands fill the top-left ``palette_size`` share of the canvas,
    one third of that height each; the selection fills the lower half.

    Args:
        generator: PaletteGenerator whose palettes are drawn
        selection: Colors returned by one of the generator's selections
        width: Canvas width in pixels
        height: Canvas height in pixels
        palette_size: Share of the canvas used by the bands
        post_saturation: HSV saturation delta applied to the selection when drawn

    Returns:
        PIL Image of the overview
    """
    canvas = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(canvas)

    bands = [generator.light_palette, generator.base_palette, generator.dark_palette]
    band_height = height * palette_size / 3
    for row, band in enumerate(bands):
        if not band:
            continue
        chip_width = width * palette_size / len(band)
        y0 = round(row * band_height)
        y1 = max(y0, round((row + 1) * band_height) - 1)
        for i, color in enumerate(band):
            x0 = round(i * chip_width)
            x1 = max(x0, round((i + 1) * chip_width) - 1)
            draw.rectangle([x0, y0, x1, y1], fill=color_to_rgb_tuple(color))

    if selection:
        strip = render_selection_strip(selection, width, height - height // 2, post_saturation)
        canvas.paste(strip, (0, height // 2))

    return canvas
