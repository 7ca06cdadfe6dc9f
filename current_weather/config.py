"""
Configuration constants for the current weather client.
"""

import logging
import os
from typing import Optional


class ExternalAPIConfig:
    """External API configuration"""

    OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
    CURRENT_WEATHER_PATH = "/weather"

    # Applied to every location-addressing mode
    DEFAULT_LANGUAGE = "en"

    # Query parameters whose values must never reach the logs
    REDACTED_PARAMS = ("appid",)


class LoggingConfig:
    """Logging configuration"""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def current_weather_url(base_url: Optional[str] = None) -> str:
    """
    Build the absolute URL of the current weather endpoint.

    Args:
        base_url: API root to use instead of the default OpenWeatherMap root

    Returns:
        str: Endpoint URL without a query string
    """
    root = (base_url or ExternalAPIConfig.OPENWEATHER_BASE_URL).rstrip("/")
    return f"{root}{ExternalAPIConfig.CURRENT_WEATHER_PATH}"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for applications embedding the client.

    Args:
        level: Log level name (defaults to the LOG_LEVEL environment variable)
    """
    logging.basicConfig(
        level=(level or LoggingConfig.LOG_LEVEL).upper(),
        format=LoggingConfig.LOG_FORMAT,
    )
