"""
Error taxonomy for current weather queries.

Every failure raised by the public operations is one of the classes below.
Transport library exceptions are chained as ``__cause__`` and never escape
on their own.
"""

from typing import Dict, Optional


class WeatherError(Exception):
    """Base exception for weather query errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class TransportError(WeatherError):
    """The GET request failed to complete or returned a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.detail = detail
        self.url = url
        super().__init__(message, status_code=status_code)


class MalformedResponseError(WeatherError):
    """The response body could not be parsed as JSON at all."""


class IncompleteResponseError(WeatherError):
    """The response parsed, but mandatory fields are missing or mistyped."""

    def __init__(
        self,
        problems: Dict[str, str],
        provider_message: Optional[str] = None,
    ):
        self.problems = dict(problems)
        self.provider_message = provider_message

        summary = ", ".join(f"{path} ({reason})" for path, reason in problems.items())
        message = f"Weather response is incomplete: {summary}"
        if provider_message:
            message = f"{message}; provider says: {provider_message}"
        super().__init__(message)


class UsageError(WeatherError):
    """The caller asked for something the client cannot do with its inputs."""
