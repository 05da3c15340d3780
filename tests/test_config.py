"""
Tests for configuration, option schemas and logging setup.
"""

from loguru import logger

from palettegen.config import Config, config
from palettegen.schemas import GeneratorParams, RandomPaletteOptions, DistributedPaletteOptions
from palettegen.utils.logging import StructuredLogger, get_logger


class TestConfig:
    """Test configuration defaults and validators."""

    def test_band_thresholds(self):
        assert config.DARK_BAND_MAX == 37.5
        assert config.LIGHT_BAND_MIN == 87.5

    def test_validate_precision(self):
        assert Config.validate_precision(1)
        assert Config.validate_precision(10)
        assert not Config.validate_precision(0)
        assert not Config.validate_precision(-1)

    def test_validate_hue_range(self):
        assert Config.validate_hue_range(0)
        assert Config.validate_hue_range(360)
        assert not Config.validate_hue_range(361)
        assert not Config.validate_hue_range(-1)

    def test_validate_hex(self):
        assert Config.validate_hex("#3459c7")
        assert Config.validate_hex("#3459C7")
        assert Config.validate_hex("3459c7")
        assert not Config.validate_hex("#gggggg")
        assert not Config.validate_hex("#3459c")
        assert not Config.validate_hex(None)


class TestSchemas:
    """Test option models and their camelCase aliases."""

    def test_random_defaults(self):
        options = RandomPaletteOptions()
        assert options.length == 4
        assert options.include_base_color is False
        assert options.filter_passes is True
        assert options.sort_by_brightness is True
        assert (options.min_brightness, options.max_brightness) == (0, 100)
        assert (options.min_saturation, options.max_saturation) == (0, 100)

    def test_distributed_has_no_filter_passes(self):
        assert "filter_passes" not in DistributedPaletteOptions.model_fields

    def test_camel_case_aliases(self):
        options = DistributedPaletteOptions(**{
            "length": 6,
            "includeBaseColor": True,
            "minBrightness": 20,
            "maxSaturation": 80,
        })
        assert options.length == 6
        assert options.include_base_color is True
        assert options.min_brightness == 20
        assert options.max_saturation == 80

    def test_snake_case_names(self):
        options = RandomPaletteOptions(include_base_color=True, filter_passes=False)
        assert options.include_base_color is True
        assert options.filter_passes is False

    def test_out_of_range_values_accepted(self):
        """Coercion happens in the selections, not in validation."""
        assert RandomPaletteOptions(length=-5).length == -5

    def test_generator_params(self):
        params = GeneratorParams(baseColor="#3459c7", baseSaturation=20)
        assert params.base_color == "#3459c7"
        assert params.base_saturation == 20
        assert params.precision is None


class TestLogging:
    """Test the structured logger wrapper."""

    def test_get_logger_singleton(self):
        assert get_logger() is get_logger()

    def test_extra_is_bound(self):
        structured = get_logger()
        records = []
        handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
        try:
            structured.debug("palette ready", extra={"size": 9})
            structured.warning("plain warning")
        finally:
            logger.remove(handler_id)

        assert records[0]["message"] == "palette ready"
        assert records[0]["extra"]["size"] == 9
        assert records[1]["level"].name == "WARNING"

    def test_custom_level(self):
        assert StructuredLogger(level="DEBUG").level == "DEBUG"
        # restore the shared configuration
        StructuredLogger()
