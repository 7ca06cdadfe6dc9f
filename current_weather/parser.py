"""
Normalization of current weather JSON payloads into WeatherSnapshot.

The payload is validated against strict pydantic models of the provider's
response before anything is built, so a payload is either fully accepted or
rejected with the complete list of problems.
"""

import json
import logging
from typing import Annotated, Any, Dict, List, Optional, Tuple

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from .errors import IncompleteResponseError, MalformedResponseError
from .models import INT64_MAX, INT64_MIN, WeatherSnapshot

logger = logging.getLogger(__name__)


def _int_to_float(value: Any) -> Any:
    # bool is an int subclass; leave it for strict validation to reject
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError as e:
            raise ValueError("number outside float64 range") from e
    return value


Number = Annotated[float, BeforeValidator(_int_to_float), Field(allow_inf_nan=False)]


class _PayloadModel(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")


class Coord(_PayloadModel):
    lon: Number
    lat: Number


class Condition(_PayloadModel):
    main: str
    description: str


class Main(_PayloadModel):
    temp: Number
    pressure: int
    humidity: int


class Wind(_PayloadModel):
    speed: Number
    deg: int


class Clouds(_PayloadModel):
    all: int


class CurrentWeatherPayload(_PayloadModel):
    """The parts of the provider's current weather response that are required."""

    name: str
    id: int = Field(..., ge=INT64_MIN, le=INT64_MAX)
    coord: Coord
    weather: List[Condition] = Field(..., min_length=1)
    main: Main
    wind: Wind
    clouds: Clouds

    @field_validator("weather", mode="before")
    @classmethod
    def first_condition_only(cls, value: Any) -> Any:
        """Only the primary condition is used, so later entries are not checked."""
        if isinstance(value, list):
            return value[:1]
        return value

    def to_snapshot(self) -> WeatherSnapshot:
        condition = self.weather[0]
        return WeatherSnapshot(
            city_name=self.name,
            city_id=self.id,
            latitude=self.coord.lat,
            longitude=self.coord.lon,
            title=condition.main,
            description=condition.description,
            temperature=self.main.temp,
            pressure=self.main.pressure,
            humidity=self.main.humidity,
            wind_speed=self.wind.speed,
            wind_direction=self.wind.deg,
            cloud_cover=self.clouds.all,
        )


def format_path(path: Tuple[Any, ...]) -> str:
    """Render a location the way it appears in documentation: ``weather[0].main``."""
    rendered = ""
    for step in path:
        if isinstance(step, int):
            rendered += f"[{step}]"
        else:
            rendered += f".{step}" if rendered else step
    return rendered or "document"


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant {token}")


def _provider_message(document: Any) -> Optional[str]:
    """Return the message of the provider's error envelope, if present."""
    if isinstance(document, dict) and "cod" in document and document.get("message"):
        return str(document["message"])
    return None


def load_document(text: str) -> Any:
    """
    Parse response text into a generic JSON tree.

    NaN and Infinity are not JSON and are rejected.

    Raises:
        MalformedResponseError: If text is not valid JSON
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        logger.warning("Weather response is not valid JSON: %s", e)
        raise MalformedResponseError(f"Weather response is not valid JSON: {e}") from e


def validate_payload(document: Any) -> CurrentWeatherPayload:
    """
    Validate a parsed JSON tree against the required response fields.

    Args:
        document: Result of json.loads on the response text

    Returns:
        CurrentWeatherPayload: The validated payload

    Raises:
        IncompleteResponseError: If any mandatory field is missing or mistyped
    """
    try:
        return CurrentWeatherPayload.model_validate(document)
    except ValidationError as e:
        problems: Dict[str, str] = {}
        for error in e.errors():
            reason = "missing" if error["type"] == "missing" else error["msg"]
            problems.setdefault(format_path(tuple(error["loc"])), reason)

        provider_message = _provider_message(document)
        logger.warning(
            "Weather response rejected, %d invalid fields (provider message: %s)",
            len(problems),
            provider_message,
        )
        raise IncompleteResponseError(
            problems, provider_message=provider_message
        ) from e


def parse_snapshot(text: str) -> WeatherSnapshot:
    """
    Convert a JSON current weather response into a WeatherSnapshot.

    Values are taken as-is: no unit conversion and no rounding.

    Args:
        text: Response body requested with the JSON format

    Returns:
        WeatherSnapshot: Fully populated snapshot

    Raises:
        MalformedResponseError: If text is not valid JSON
        IncompleteResponseError: If a mandatory field is missing or mistyped
    """
    return validate_payload(load_document(text)).to_snapshot()
