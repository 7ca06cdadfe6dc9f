"""
Tests for query models and configuration.
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from current_weather.config import (
    ExternalAPIConfig,
    LoggingConfig,
    configure_logging,
    current_weather_url,
)
from current_weather.models import (
    ByCityId,
    ByCityName,
    ByCoordinates,
    ByZipCode,
    QueryOptions,
    ResponseFormat,
    Units,
    parse_location,
)


class TestQueryOptions:
    """Defaults and immutability of QueryOptions."""

    def test_defaults(self):
        options = QueryOptions()

        assert options.format is ResponseFormat.JSON
        assert options.units is Units.STANDARD
        assert options.language == "en"

    def test_values_from_strings(self):
        """Test that enum values can be given as provider strings."""
        options = QueryOptions(format="xml", units="imperial", language="ja")

        assert options.format is ResponseFormat.XML
        assert options.units is Units.IMPERIAL

    def test_unknown_units_rejected(self):
        with pytest.raises(ValidationError):
            QueryOptions(units="rankine")

    def test_immutable(self):
        options = QueryOptions()

        with pytest.raises(ValidationError):
            options.language = "de"

    def test_hashable_for_sharing(self):
        """Test that equal option sets compare and hash equal."""
        assert hash(QueryOptions(units=Units.METRIC)) == hash(QueryOptions(units="metric"))


class TestLocationSpec:
    """Location cases and discriminated parsing."""

    @pytest.mark.parametrize(
        "location",
        [
            ByCityName(name="London"),
            ByCityId(id=2643743),
            ByCoordinates(latitude=51.51, longitude=-0.13),
            ByZipCode(code="94040", country_code="us"),
        ],
    )
    def test_locations_are_immutable(self, location):
        field = next(name for name in type(location).model_fields if name != "kind")

        with pytest.raises(ValidationError):
            setattr(location, field, None)

    def test_city_id_range(self):
        """Test that ids must fit in a signed 64-bit integer."""
        assert ByCityId(id=2**63 - 1).id == 2**63 - 1

        with pytest.raises(ValidationError):
            ByCityId(id=2**63)

    def test_zip_code_requires_country(self):
        with pytest.raises(ValidationError):
            ByZipCode(code="94040")

    @pytest.mark.parametrize(
        "data, expected",
        [
            ({"kind": "city_name", "name": "London"}, ByCityName(name="London")),
            ({"kind": "city_id", "id": 2643743}, ByCityId(id=2643743)),
            (
                {"kind": "coordinates", "latitude": 51.51, "longitude": -0.13},
                ByCoordinates(latitude=51.51, longitude=-0.13),
            ),
            (
                {"kind": "zip_code", "code": "94040", "country_code": "us"},
                ByZipCode(code="94040", country_code="us"),
            ),
        ],
    )
    def test_parse_location(self, data, expected):
        assert parse_location(data) == expected

    def test_parse_location_unknown_kind(self):
        with pytest.raises(ValidationError):
            parse_location({"kind": "postcode", "code": "94040"})


class TestConfiguration:
    """Endpoint and logging configuration."""

    def test_default_endpoint(self):
        assert current_weather_url() == "https://api.openweathermap.org/data/2.5/weather"
        assert ExternalAPIConfig.DEFAULT_LANGUAGE == "en"

    def test_endpoint_override_strips_trailing_slash(self):
        assert current_weather_url("http://localhost/2.5/") == "http://localhost/2.5/weather"

    @patch("current_weather.config.logging.basicConfig")
    def test_configure_logging_explicit_level(self, mock_basic_config):
        configure_logging("debug")

        mock_basic_config.assert_called_once_with(
            level="DEBUG", format=LoggingConfig.LOG_FORMAT
        )

    @patch("current_weather.config.logging.basicConfig")
    def test_configure_logging_uses_configured_level(self, mock_basic_config):
        with patch.object(LoggingConfig, "LOG_LEVEL", "warning"):
            configure_logging()

        assert mock_basic_config.call_args.kwargs["level"] == "WARNING"
