"""
Errors raised by Lob API calls.

Every failure of a GET/POST/DELETE call raises a subclass of LobError. The
original cause, when there is one, is chained as __cause__.
"""
from typing import Any, Optional


class LobError(Exception):
    """Base exception for all failed Lob API calls."""
    def __init__(self, message: str, url: str = None):
        super().__init__(message)
        self.url = url


class RequestConstructionError(LobError):
    """Raised when the HTTP request cannot be built (malformed URL or method)."""
    pass


class NetworkError(LobError):
    """Raised when the request cannot reach the server."""
    pass


class BodyReadError(LobError):
    """Raised when the response body cannot be read after headers were received."""
    pass


class DecodeError(LobError):
    """Raised when a 200 response body does not decode into the requested result."""
    def __init__(self, message: str, url: str = None, body: bytes = b''):
        super().__init__(message, url=url)
        self.body = body


class APIStatusError(LobError):
    """Raised when the API answers with anything other than 200.

    ``result`` holds a best-effort decode of the body (typically the API's own
    error description), or None if the body did not decode.
    """
    def __init__(self, status_code: int, url: str, body: bytes, result: Optional[Any] = None):
        self.status_code = status_code
        self.body = body
        self.result = result
        super().__init__(
            f"Non-200 status code {status_code} returned from {url} with body {self.text}",
            url=url
        )

    @property
    def text(self) -> str:
        """Return the raw body as text."""
        return self.body.decode('utf-8', errors='replace')
