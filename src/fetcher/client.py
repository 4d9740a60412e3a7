"""HTTP fetcher for pages to analyze."""

import logging
import socket

import httpx

from config import settings
from fetcher.errors import FetchError, FetchErrorKind

logger = logging.getLogger(__name__)

# Substrings of resolver / socket errors, for when the underlying OSError is
# not on the exception chain
_DNS_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "temporary failure in name resolution",
    "getaddrinfo failed",
    "no address associated with hostname",
)
_REFUSED_MARKERS = (
    "connection refused",
    "actively refused",
)


def create_client() -> httpx.AsyncClient:
    """Build an async client with our identifier header and timeout."""
    return httpx.AsyncClient(
        timeout=settings.http_timeout,
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
    )


def validate_url(url: str) -> httpx.URL:
    """Parse *url*, rejecting anything that is not an absolute http(s) URL."""
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise FetchError(FetchErrorKind.INVALID_URL, str(e)) from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise FetchError(FetchErrorKind.INVALID_URL, f"Invalid URL: {url}")

    return parsed


def _classify_connect_error(error: httpx.ConnectError) -> FetchErrorKind:
    """Tell DNS failures apart from refused connections."""
    cause: BaseException | None = error
    while cause is not None:
        if isinstance(cause, socket.gaierror):
            return FetchErrorKind.DNS_FAILURE
        if isinstance(cause, ConnectionRefusedError):
            return FetchErrorKind.CONNECTION_REFUSED
        cause = cause.__cause__ or cause.__context__

    message = str(error).lower()
    if any(marker in message for marker in _DNS_MARKERS):
        return FetchErrorKind.DNS_FAILURE
    if any(marker in message for marker in _REFUSED_MARKERS):
        return FetchErrorKind.CONNECTION_REFUSED
    return FetchErrorKind.NO_RESPONSE


async def _get(client: httpx.AsyncClient, url: str) -> httpx.Response:
    """GET *url*, translating transport failures into ``FetchError``."""
    try:
        return await client.get(url)
    except httpx.TimeoutException as e:
        raise FetchError(FetchErrorKind.TIMEOUT, str(e) or "timeout") from e
    except httpx.ConnectError as e:
        raise FetchError(_classify_connect_error(e), str(e)) from e
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
        raise FetchError(FetchErrorKind.INVALID_URL, str(e)) from e
    except httpx.RequestError as e:
        raise FetchError(FetchErrorKind.NO_RESPONSE, str(e)) from e


async def fetch_html(url: str, *, client: httpx.AsyncClient | None = None) -> str:
    """
    Fetch *url* and return the response body as text.

    Args:
        url: Absolute http(s) URL
        client: Shared client to use; a short-lived one is created otherwise

    Returns:
        Decoded response body of a 2xx response

    Raises:
        FetchError: With the kind of failure (bad URL, DNS, refused,
            non-2xx status, no response, timeout)
    """
    try:
        validate_url(url)

        if client is not None:
            response = await _get(client, url)
        else:
            async with create_client() as own_client:
                response = await _get(own_client, url)

        if not response.is_success:
            raise FetchError(
                FetchErrorKind.UPSTREAM_ERROR,
                f"{response.status_code} {response.reason_phrase}".strip(),
                upstream_status=response.status_code,
            )
    except FetchError as e:
        logger.warning(f"Fetch failed for {url}: {e.code} ({e.details})")
        raise

    return response.text
