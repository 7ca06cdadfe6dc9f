"""
Query construction for the current weather endpoint.
"""

from typing import List, Optional, Tuple
from urllib.parse import quote, urlencode

from .config import current_weather_url
from .errors import UsageError
from .models import (
    ByCityId,
    ByCityName,
    ByCoordinates,
    ByZipCode,
    LocationSpec,
    QueryOptions,
    ResponseFormat,
)

QueryParams = List[Tuple[str, str]]


def _location_params(location: LocationSpec) -> QueryParams:
    if isinstance(location, ByCityName):
        return [("q", location.name)]
    if isinstance(location, ByCityId):
        return [("id", str(location.id))]
    if isinstance(location, ByCoordinates):
        return [("lat", repr(location.latitude)), ("lon", repr(location.longitude))]
    if isinstance(location, ByZipCode):
        return [("zip", f"{location.code},{location.country_code}")]

    raise UsageError(
        f"Unsupported location specification: {type(location).__name__}"
    )


def build_params(
    location: LocationSpec, options: QueryOptions, api_key: Optional[str]
) -> QueryParams:
    """
    Assemble the ordered query parameters for one request.

    Args:
        location: One of ByCityName, ByCityId, ByCoordinates or ByZipCode
        options: Format, units and language of the response
        api_key: OpenWeatherMap API key, passed through unvalidated

    Returns:
        List of (name, value) pairs

    Raises:
        UsageError: If location is not a supported location case
    """
    params = _location_params(location)
    params.extend(
        [
            ("appid", api_key or ""),
            ("units", options.units.value),
            ("lang", options.language),
        ]
    )
    # JSON is the provider default and is requested by omitting mode
    if options.format is not ResponseFormat.JSON:
        params.append(("mode", options.format.value))
    return params


def build_url(
    location: LocationSpec,
    options: QueryOptions,
    api_key: Optional[str],
    base_url: Optional[str] = None,
) -> str:
    """
    Build the absolute current weather URL for a location and option set.

    Values are percent-encoded with ``%20`` for spaces and UTF-8 escapes for
    non-ASCII text; the comma joining a ZIP code and its country stays literal.

    Args:
        location: One of ByCityName, ByCityId, ByCoordinates or ByZipCode
        options: Format, units and language of the response
        api_key: OpenWeatherMap API key
        base_url: API root overriding the configured default

    Returns:
        str: URL ready for a single GET request
    """
    query = urlencode(
        build_params(location, options, api_key), safe=",", quote_via=quote
    )
    return f"{current_weather_url(base_url)}?{query}"
