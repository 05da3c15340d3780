"""
Palettegen Schemas
Pydantic models for generator parameters and palette selection options.

Field names are snake_case; the camelCase names sent by parameter UIs
(``includeBaseColor``, ``minBrightness``, ...) are accepted as aliases.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Options(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeneratorParams(_Options):
    """Parameters used to build a palette generator."""
    precision: Optional[int] = Field(
        None,
        description="Colors generated on each side of the base hue (base palette length is 2 * precision + 1)"
    )
    hue_range: Optional[float] = Field(
        None,
        description="Total hue spread of the base palette, in degrees"
    )
    base_color: Optional[str] = Field(
        None,
        description="Seed color as #RRGGBB; a random color is synthesized when missing"
    )
    base_saturation: Optional[float] = Field(
        None,
        description="Saturation (0-100) applied to the seed color"
    )


class DistributedPaletteOptions(_Options):
    """Options for the brightness-stratified selection."""
    length: int = Field(4, description="Number of colors returned")
    include_base_color: bool = Field(False, description="Whether the seed color is part of the result")
    sort_by_brightness: bool = Field(True, description="Sort the result from dark to light (HSV value)")
    min_brightness: float = Field(0, description="Minimum HSV value of returned colors")
    max_brightness: float = Field(100, description="Maximum HSV value of returned colors")
    min_saturation: float = Field(0, description="Minimum HSV saturation of returned colors")
    max_saturation: float = Field(100, description="Maximum HSV saturation of returned colors")


class RandomPaletteOptions(DistributedPaletteOptions):
    """Options for the random selection."""
    filter_passes: bool = Field(
        True,
        description="Drop every other color twice before sampling, to avoid near-duplicate hues"
    )
