"""
Pydantic models for query inputs and the normalized weather result.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .config import ExternalAPIConfig

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ResponseFormat(str, Enum):
    """Response encodings offered by the provider."""

    JSON = "json"
    XML = "xml"
    HTML = "html"


class Units(str, Enum):
    """Unit systems offered by the provider."""

    STANDARD = "standard"
    METRIC = "metric"
    IMPERIAL = "imperial"


class ByCityName(BaseModel):
    """Location addressed by city name, e.g. ``London`` or ``London,GB``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["city_name"] = "city_name"
    name: str


class ByCityId(BaseModel):
    """Location addressed by the provider's city identifier."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["city_id"] = "city_id"
    id: int = Field(..., ge=INT64_MIN, le=INT64_MAX)


class ByCoordinates(BaseModel):
    """Location addressed by geographic coordinates in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["coordinates"] = "coordinates"
    latitude: float
    longitude: float


class ByZipCode(BaseModel):
    """Location addressed by ZIP/postal code and country code."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["zip_code"] = "zip_code"
    code: str
    country_code: str


LocationSpec = Annotated[
    Union[ByCityName, ByCityId, ByCoordinates, ByZipCode],
    Field(discriminator="kind"),
]

LOCATION_TYPES = (ByCityName, ByCityId, ByCoordinates, ByZipCode)

_location_adapter = TypeAdapter(LocationSpec)


def parse_location(data: Mapping[str, Any]) -> Union[ByCityName, ByCityId, ByCoordinates, ByZipCode]:
    """
    Validate a mapping carrying a ``kind`` discriminator into a location case.

    Args:
        data: Mapping such as ``{"kind": "zip_code", "code": "94040", "country_code": "us"}``

    Returns:
        The matching location model

    Raises:
        pydantic.ValidationError: If the mapping matches no location case
    """
    return _location_adapter.validate_python(data)


class QueryOptions(BaseModel):
    """Response-shaping options, independent of the location."""

    model_config = ConfigDict(frozen=True)

    format: ResponseFormat = ResponseFormat.JSON
    units: Units = Units.STANDARD
    language: str = ExternalAPIConfig.DEFAULT_LANGUAGE


class WeatherSnapshot(BaseModel):
    """Current conditions for one location, as reported by the provider."""

    model_config = ConfigDict(frozen=True, strict=True)

    city_name: str = Field(..., description="City name")
    city_id: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Provider city id")
    latitude: float
    longitude: float
    title: str = Field(..., description="Short condition category, e.g. Clouds")
    description: str = Field(..., description="Localized condition detail")
    temperature: float = Field(..., description="Temperature in the requested units")
    pressure: int = Field(..., description="Atmospheric pressure in hPa")
    humidity: int = Field(..., description="Relative humidity in percent")
    wind_speed: float
    wind_direction: int = Field(..., description="Meteorological degrees")
    cloud_cover: int = Field(..., description="Cloudiness in percent")
