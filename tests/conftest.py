"""
Pytest configuration and shared fixtures.
"""

import json
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

CURRENT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


@pytest.fixture
def sample_api_key() -> str:
    """Sample API key for testing."""
    return "test_openweather_api_key_123"


@pytest.fixture
def mock_openweather_response() -> dict:
    """Mock OpenWeatherMap API response for London."""
    return {
        "coord": {"lon": -0.13, "lat": 51.51},
        "weather": [
            {"id": 804, "main": "Clouds", "description": "overcast clouds", "icon": "04n"}
        ],
        "base": "stations",
        "main": {"temp": 282.55, "pressure": 1012, "humidity": 81},
        "visibility": 10000,
        "wind": {"speed": 4.1, "deg": 280},
        "clouds": {"all": 90},
        "dt": 1485789600,
        "sys": {"country": "GB"},
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def mock_openweather_body(mock_openweather_response) -> str:
    """The London response as raw JSON text."""
    return json.dumps(mock_openweather_response)


def make_aiohttp_session(
    status: int = 200,
    body: str = "",
    error: Optional[Exception] = None,
    content: Optional[bytes] = None,
    headers: Optional[dict] = None,
) -> MagicMock:
    """
    Build a stand-in for aiohttp.ClientSession usable with ``async with``.

    The body is served as UTF-8 bytes unless raw ``content`` is given. The
    returned mock exposes ``.session`` so tests can inspect ``get`` calls.
    """
    response = MagicMock()
    response.status = status
    response.read = AsyncMock(
        return_value=content if content is not None else body.encode("utf-8")
    )
    response.headers = headers or {}

    response_context = MagicMock()
    response_context.__aenter__ = AsyncMock(return_value=response)
    response_context.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    if error is not None:
        session.get = MagicMock(side_effect=error)
    else:
        session.get = MagicMock(return_value=response_context)

    session_context = MagicMock()
    session_context.__aenter__ = AsyncMock(return_value=session)
    session_context.__aexit__ = AsyncMock(return_value=False)
    session_context.session = session
    return session_context


@pytest.fixture
def fake_aiohttp_session():
    """Factory for aiohttp.ClientSession stand-ins."""
    return make_aiohttp_session
