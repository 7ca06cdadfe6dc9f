"""
HTTP transport for the current weather endpoint.

Each call performs exactly one GET request on a session that is opened and
closed around it. There are no retries and no timeout overrides; failures are
reported as TransportError.
"""

import asyncio
import json
import logging
from email.message import Message
from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import aiohttp
import requests

from .config import ExternalAPIConfig
from .errors import TransportError

logger = logging.getLogger(__name__)

DETAIL_MAX_LENGTH = 200
DEFAULT_CHARSET = "utf-8"


def redact_url(url: str) -> str:
    """Return url with credential query parameters masked."""
    parts = urlsplit(url)
    query = [
        (name, "***" if name in ExternalAPIConfig.REDACTED_PARAMS else value)
        for name, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="*,")))


def decode_body(content: bytes, content_type: Optional[str]) -> str:
    """
    Decode a response body the same way in both execution modes.

    The charset declared in the Content-Type header is used when present and
    known; otherwise the body is read as UTF-8. Undecodable bytes are replaced.

    Args:
        content: Raw response body
        content_type: Value of the Content-Type header, if any

    Returns:
        str: Decoded body
    """
    charset = None
    if content_type:
        header = Message()
        header["Content-Type"] = content_type
        charset = header.get_content_charset()
    try:
        return content.decode(charset or DEFAULT_CHARSET, "replace")
    except LookupError:
        return content.decode(DEFAULT_CHARSET, "replace")


def _error_detail(body: str) -> Optional[str]:
    """Extract the provider's error message from a response body."""
    if not body:
        return None
    try:
        payload = json.loads(body)
    except ValueError:
        return body[:DETAIL_MAX_LENGTH]
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return body[:DETAIL_MAX_LENGTH]


def _check_status(url: str, status: int, body: str) -> str:
    if 200 <= status < 300:
        return body

    detail = _error_detail(body)
    safe_url = redact_url(url)
    logger.warning(
        "Weather API returned status %d for %s: %s", status, safe_url, detail
    )
    raise TransportError(
        f"Weather API request failed with status {status}",
        status_code=status,
        detail=detail,
        url=safe_url,
    )


def fetch_text(url: str) -> str:
    """
    Fetch the response body of url, blocking until it is fully read.

    Args:
        url: Absolute request URL

    Returns:
        str: Response body

    Raises:
        TransportError: On connection failure or a non-2xx status
    """
    logger.debug("Requesting %s", redact_url(url))
    try:
        with requests.Session() as session:
            response = session.get(url)
            status = response.status_code
            body = decode_body(response.content, response.headers.get("Content-Type"))
    except requests.RequestException as e:
        safe_url = redact_url(url)
        logger.error("Weather API request to %s failed: %s", safe_url, e)
        raise TransportError(
            f"Weather API request failed: {e.__class__.__name__}", url=safe_url
        ) from e

    return _check_status(url, status, body)


async def fetch_text_async(url: str) -> str:
    """
    Fetch the response body of url without blocking the event loop.

    Args:
        url: Absolute request URL

    Returns:
        str: Response body

    Raises:
        TransportError: On connection failure or a non-2xx status
    """
    logger.debug("Requesting %s", redact_url(url))
    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(url) as response:
                status = response.status
                body = decode_body(
                    await response.read(), response.headers.get("Content-Type")
                )
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        safe_url = redact_url(url)
        logger.error("Weather API request to %s failed: %s", safe_url, e)
        raise TransportError(
            f"Weather API request failed: {e.__class__.__name__}", url=safe_url
        ) from e

    return _check_status(url, status, body)
