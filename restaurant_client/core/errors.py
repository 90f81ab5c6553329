"""
Client Error Types

Every failure surfaced by the client is an ApiError carrying the same three
fields regardless of where it originated:

    - message: Human-readable description
    - status: HTTP status code (0 when no response was received)
    - data: Parsed response payload, if any

Hierarchy:
    ApiError            Server answered with a failure status
    └── NetworkError    No usable response (DNS, refused, timeout, ...)
    TokenStoreError     Token could not be read or persisted

Author: Khalil Bannouri
Version: 1.0.0
"""

from typing import Any, Optional

import httpx


NETWORK_ERROR_MESSAGE = "Network request failed"
AUTH_FAILURE_STATUSES = (401, 403)


class ApiError(Exception):
    """
    Structured failure returned by the backend.

    Attributes:
        message: Payload ``message`` field, else the HTTP reason phrase
        status: HTTP status code
        data: Full parsed payload (None when the body was empty or not JSON)

    Example:
        >>> try:
        ...     await client.table.get(42)
        ... except ApiError as e:
        ...     if e.status == 404:
        ...         print(e.message)
    """

    def __init__(self, message: str, status: int, data: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data

    @classmethod
    def from_response(cls, response: httpx.Response, payload: Any) -> "ApiError":
        """
        Build an error from a failed HTTP response.

        Args:
            response: The failed response
            payload: Its parsed JSON body, or None

        Returns:
            ApiError: Error with the payload message preferred over the
            status text
        """
        message = None
        if isinstance(payload, dict):
            message = payload.get("message")
        return cls(
            message or response.reason_phrase or f"HTTP {response.status_code}",
            response.status_code,
            payload,
        )

    @property
    def is_auth_error(self) -> bool:
        """True for 401/403 responses; callers decide whether to drop the token."""
        return self.status in AUTH_FAILURE_STATUSES

    @property
    def is_network_error(self) -> bool:
        return False

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "message": self.message,
            "status": self.status,
            "data": self.data,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status={self.status})"


class NetworkError(ApiError):
    """No HTTP response was obtained. Always status 0 with no payload."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or NETWORK_ERROR_MESSAGE, 0, None)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "NetworkError":
        return cls(str(exc) or None)

    @property
    def is_network_error(self) -> bool:
        return True


class TokenStoreError(Exception):
    """Raised when the persisted token cannot be read or written."""
