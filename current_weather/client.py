"""
Client for the OpenWeatherMap current weather endpoint.

Blocking and asyncio callers share request building and response parsing;
only the transport call differs between the two modes.
"""

import logging
from typing import Optional

from .config import ExternalAPIConfig
from .errors import UsageError
from .models import (
    ByCityId,
    ByCityName,
    ByCoordinates,
    ByZipCode,
    LOCATION_TYPES,
    LocationSpec,
    QueryOptions,
    ResponseFormat,
    Units,
    WeatherSnapshot,
)
from .parser import parse_snapshot
from .request_builder import build_url
from .transport import fetch_text, fetch_text_async

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = QueryOptions()


def _options(units: Units, language: str) -> QueryOptions:
    return QueryOptions(format=ResponseFormat.JSON, units=units, language=language)


class CurrentWeatherClient:
    """
    Current weather client usable from blocking and asyncio code.

    The client keeps only the API key and base URL, so one instance can serve
    any number of concurrent queries. Nothing is cached: every call issues
    its own request.
    """

    def __init__(self, api_key: Optional[str], base_url: Optional[str] = None):
        """
        Initialize the current weather client.

        Args:
            api_key: OpenWeatherMap API key (validated by the provider only)
            base_url: API root overriding ExternalAPIConfig.OPENWEATHER_BASE_URL
        """
        self.api_key = api_key
        self.base_url = base_url

    def _prepare(
        self, location: LocationSpec, options: QueryOptions, structured: bool
    ) -> str:
        if not isinstance(location, LOCATION_TYPES):
            raise UsageError(
                "A location must be one of ByCityName, ByCityId, ByCoordinates "
                f"or ByZipCode, got {type(location).__name__}"
            )
        if structured and options.format is not ResponseFormat.JSON:
            raise UsageError(
                f"Cannot build a WeatherSnapshot from a {options.format.value} "
                "response; request the json format or use get_raw"
            )
        logger.debug(
            "Querying current weather by %s (%s, %s, %s)",
            location.kind,
            options.format.value,
            options.units.value,
            options.language,
        )
        return build_url(location, options, self.api_key, base_url=self.base_url)

    def get_weather(
        self, location: LocationSpec, options: QueryOptions = DEFAULT_OPTIONS
    ) -> WeatherSnapshot:
        """
        Get current weather for a location.

        Args:
            location: One of ByCityName, ByCityId, ByCoordinates or ByZipCode
            options: Units and language; format must be JSON

        Returns:
            WeatherSnapshot: Normalized weather data

        Raises:
            UsageError: If options request XML/HTML or location is invalid
            TransportError: If the request fails or returns a non-2xx status
            MalformedResponseError: If the body is not JSON
            IncompleteResponseError: If mandatory fields are missing
        """
        url = self._prepare(location, options, structured=True)
        return parse_snapshot(fetch_text(url))

    async def get_weather_async(
        self, location: LocationSpec, options: QueryOptions = DEFAULT_OPTIONS
    ) -> WeatherSnapshot:
        """Asynchronous counterpart of get_weather."""
        url = self._prepare(location, options, structured=True)
        return parse_snapshot(await fetch_text_async(url))

    def get_raw(
        self, location: LocationSpec, options: QueryOptions = DEFAULT_OPTIONS
    ) -> str:
        """
        Get the unparsed response body in the requested format.

        Args:
            location: One of ByCityName, ByCityId, ByCoordinates or ByZipCode
            options: Format, units and language

        Returns:
            str: Response body as JSON, XML or HTML text
        """
        url = self._prepare(location, options, structured=False)
        return fetch_text(url)

    async def get_raw_async(
        self, location: LocationSpec, options: QueryOptions = DEFAULT_OPTIONS
    ) -> str:
        """Asynchronous counterpart of get_raw."""
        url = self._prepare(location, options, structured=False)
        return await fetch_text_async(url)

    # Shortcuts for each addressing mode, always returning a WeatherSnapshot

    def by_city_name(
        self,
        name: str,
        units: Units = Units.STANDARD,
        language: str = ExternalAPIConfig.DEFAULT_LANGUAGE,
    ) -> WeatherSnapshot:
        """
        Get current weather for a city name.

        Args:
            name: City name, optionally followed by state and country codes
            units: Unit system of the returned values
            language: Language of the condition description

        Returns:
            WeatherSnapshot: Normalized weather data
        """
        return self.get_weather(ByCityName(name=name), _options(units, language))

    async def by_city_name_async(
        self,
        name: str,
        units: Units = Units.STANDARD,
        language: str = ExternalAPIConfig.DEFAULT_LANGUAGE,
    ) -> WeatherSnapshot:
        """Asynchronous counterpart of by_city_name."""
        return await self.get_weather_async(
            ByCityName(name=name), _options(units, language)
        )

    def by_city_id(
        self,
        city_id: int,
        units: Units = Units.STANDARD,
        language: str = ExternalAPIConfig.DEFAULT_LANGUAGE,
    ) -> WeatherSnapshot:
        """
        Get current weather for an OpenWeatherMap city id.

        Args:
            city_id: Provider city id, a signed 64-bit integer
            units: Unit system of the returned values
            language: Language of the condition description

        Returns:
            WeatherSnapshot: Normalized weather data
        """
        return self.get_weather(ByCityId(id=city_id), _options(units, language))

    async def by_city_id_async(
        self,
        city_id: int,
        units: Units = Units.STANDARD,
        language: str = ExternalAPIConfig.DEFAULT_LANGUAGE,
    ) -> WeatherSnapshot:
        """Asynchronous counterpart of by_city_id."""
        return await self.get_weather_async(
            ByCityId(id=city_id), _options(units, language)
        )

    def by_coordinates(
        self,
        latitude: float,
        longitude: float,
        units: Units = Units.STANDARD,
        language: str = ExternalAPIConfig.DEFAULT_LANGUAGE,
    ) -> WeatherSnapshot:
        """
        Get current weather for geographic coordinates.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            units: Unit system of the returned values
            language: Language of the condition description

        Returns:
            WeatherSnapshot: Normalized weather data
        """
        return self.get_weather(
            ByCoordinates(latitude=latitude, longitude=longitude),
            _options(units, language),
        )

    async def by_coordinates_async(
        self,
        latitude: float,
        longitude: float,
        units: Units = Units.STANDARD,
        language: str = ExternalAPIConfig.DEFAULT_LANGUAGE,
    ) -> WeatherSnapshot:
        """Asynchronous counterpart of by_coordinates."""
        return await self.get_weather_async(
            ByCoordinates(latitude=latitude, longitude=longitude),
            _options(units, language),
        )

    def by_zip_code(
        self,
        code: str,
        country_code: str,
        units: Units = Units.STANDARD,
        language: str = ExternalAPIConfig.DEFAULT_LANGUAGE,
    ) -> WeatherSnapshot:
        """
        Get current weather for a postal code.

        Args:
            code: ZIP or postal code
            country_code: ISO 3166 country code the code belongs to
            units: Unit system of the returned values
            language: Language of the condition description

        Returns:
            WeatherSnapshot: Normalized weather data
        """
        return self.get_weather(
            ByZipCode(code=code, country_code=country_code),
            _options(units, language),
        )

    async def by_zip_code_async(
        self,
        code: str,
        country_code: str,
        units: Units = Units.STANDARD,
        language: str = ExternalAPIConfig.DEFAULT_LANGUAGE,
    ) -> WeatherSnapshot:
        """Asynchronous counterpart of by_zip_code."""
        return await self.get_weather_async(
            ByZipCode(code=code, country_code=country_code),
            _options(units, language),
        )
