"""Fetch failure taxonomy."""

import enum


class FetchErrorKind(str, enum.Enum):
    """Closed set of ways a page fetch can fail."""

    INVALID_URL = "invalid-url"
    DNS_FAILURE = "dns-failure"
    CONNECTION_REFUSED = "connection-refused"
    UPSTREAM_ERROR = "upstream-error"  # Non-2xx final response
    NO_RESPONSE = "no-response"
    TIMEOUT = "timeout"


# kind -> (HTTP status at the API boundary, user-facing message)
ERROR_RESPONSES = {
    FetchErrorKind.INVALID_URL: (
        400,
        "The provided URL is not valid. Please check the URL and try again.",
    ),
    FetchErrorKind.DNS_FAILURE: (
        400,
        "Could not resolve the provided URL. Please check if the URL is correct and try again.",
    ),
    FetchErrorKind.CONNECTION_REFUSED: (
        502,
        "Connection refused. The server might be down or the URL might be incorrect.",
    ),
    FetchErrorKind.UPSTREAM_ERROR: (
        502,
        "The server responded with status {upstream_status}",
    ),
    FetchErrorKind.NO_RESPONSE: (
        504,
        "No response received from the server. Please check the URL and try again.",
    ),
    FetchErrorKind.TIMEOUT: (
        504,
        "The request timed out. Please try again later.",
    ),
}


class FetchError(Exception):
    """Raised when a page cannot be fetched.

    Carries the failure ``kind`` plus the underlying error text in
    ``details``. ``upstream_status`` is set only for ``UPSTREAM_ERROR``.
    """

    def __init__(
        self,
        kind: FetchErrorKind,
        details: str = "",
        upstream_status: int | None = None,
    ):
        self.kind = kind
        self.details = details
        self.upstream_status = upstream_status
        super().__init__(self.message)

    @property
    def message(self) -> str:
        _, template = ERROR_RESPONSES[self.kind]
        return template.format(upstream_status=self.upstream_status)

    @property
    def status_code(self) -> int:
        """HTTP status to report to our own caller."""
        if self.kind == FetchErrorKind.UPSTREAM_ERROR and self.upstream_status:
            # Pass 4xx/5xx through, anything else is a bad gateway
            if 400 <= self.upstream_status < 600:
                return self.upstream_status
        status, _ = ERROR_RESPONSES[self.kind]
        return status

    @property
    def code(self) -> str:
        return self.kind.value
