"""
Current weather client for the OpenWeatherMap API.
"""

from .client import CurrentWeatherClient
from .config import configure_logging
from .errors import (
    IncompleteResponseError,
    MalformedResponseError,
    TransportError,
    UsageError,
    WeatherError,
)
from .models import (
    ByCityId,
    ByCityName,
    ByCoordinates,
    ByZipCode,
    LocationSpec,
    QueryOptions,
    ResponseFormat,
    Units,
    WeatherSnapshot,
    parse_location,
)
from .parser import parse_snapshot
from .request_builder import build_url

__all__ = [
    "CurrentWeatherClient",
    "configure_logging",
    "WeatherError",
    "TransportError",
    "MalformedResponseError",
    "IncompleteResponseError",
    "UsageError",
    "ByCityName",
    "ByCityId",
    "ByCoordinates",
    "ByZipCode",
    "LocationSpec",
    "QueryOptions",
    "ResponseFormat",
    "Units",
    "WeatherSnapshot",
    "parse_location",
    "parse_snapshot",
    "build_url",
]
