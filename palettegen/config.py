"""
Palettegen Configuration
Manages environment variables and defaults for the palette services.
"""
import os
import re


class Config:
    """Configuration class for palettegen services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("PALETTEGEN_LOG_LEVEL", "INFO")

    # Generator defaults
    DEFAULT_PRECISION: int = int(os.environ.get("PALETTEGEN_DEFAULT_PRECISION", "4"))
    DEFAULT_HUE_RANGE: float = float(os.environ.get("PALETTEGEN_DEFAULT_HUE_RANGE", "180"))

    # Swatch rendering
    SWATCH_CHIP_SIZE: int = int(os.environ.get("PALETTEGEN_SWATCH_CHIP_SIZE", "40"))
    SWATCH_SPACING: int = int(os.environ.get("PALETTEGEN_SWATCH_SPACING", "2"))

    # Color space bounds
    HUE_MAX: float = 360.0
    CHANNEL_MAX: float = 100.0

    # Brightness bands used by the distributed selection (HSV value)
    DARK_BAND_MAX: float = 37.5
    LIGHT_BAND_MIN: float = 87.5

    HEX_PATTERN = re.compile(r"#?[0-9A-Fa-f]{6}")

    @classmethod
    def validate_precision(cls, precision: int) -> bool:
        """Validate precision parameter."""
        return precision >= 1

    @classmethod
    def validate_hue_range(cls, hue_range: float) -> bool:
        """Validate hue range parameter."""
        return 0 <= hue_range <= cls.HUE_MAX

    @classmethod
    def validate_hex(cls, hex_code: str) -> bool:
        """Validate a RRGGBB color code, with or without the leading #."""
        return isinstance(hex_code, str) and cls.HEX_PATTERN.fullmatch(hex_code) is not None


# Global config instance
config = Config()
