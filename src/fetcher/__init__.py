"""Page fetching with a closed failure taxonomy."""

from fetcher.client import create_client, fetch_html, validate_url
from fetcher.errors import ERROR_RESPONSES, FetchError, FetchErrorKind

__all__ = [
    "create_client",
    "fetch_html",
    "validate_url",
    "ERROR_RESPONSES",
    "FetchError",
    "FetchErrorKind",
]
