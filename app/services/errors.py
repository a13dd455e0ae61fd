"""Failure kinds raised inside the content fetcher.

None of these escape a read operation: each one is logged and turned into
the operation's fallback value (or ``None`` for single-item lookups).
"""


class ContentFetchError(Exception):
    """Base class for every content-fetch failure."""


class IntegrationDisabled(ContentFetchError):
    pass


class BackendUnconfigured(ContentFetchError):
    pass


class BackendUnreachable(ContentFetchError):
    """Network error or timeout talking to the backend."""


class BackendError(ContentFetchError):
    """The backend answered with a status outside the 2xx range."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP error! Status: {status_code}")


class DecodeError(ContentFetchError):
    """The response body was not JSON or not the expected shape."""


class EmptyResult(ContentFetchError):
    """A list endpoint returned no items."""
