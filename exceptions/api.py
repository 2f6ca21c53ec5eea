"""
Exceptions raised by the REST layer (api.py and repositories).
"""

from .base import StorefrontException


class ApiException(StorefrontException):
    """Base exception for backend communication errors."""
    pass


class AuthenticationRequiredException(ApiException):
    """Raised before any network call when no bearer token is available."""

    def __init__(self):
        super().__init__("No authentication token found. Please log in again.")


class AuthenticationFailedException(ApiException):
    """Raised when the backend rejects the token (HTTP 401)."""

    def __init__(self, path: str):
        super().__init__(
            "Authentication failed. Please refresh the token and try again.",
            details={'path': path}
        )
        self.path = path


class ApiRequestException(ApiException):
    """Raised on a non-2xx response or an explicit {"success": false} payload."""

    def __init__(self, path: str, status: int, reason: str | None = None):
        super().__init__(
            f"API error: {status} {reason or ''}".rstrip(),
            details={'path': path, 'status': status, 'reason': reason}
        )
        self.path = path
        self.status = status
        self.reason = reason


class ApiConnectionException(ApiException):
    """Raised when the request never got a response (network error, timeout)."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not reach the server: {reason}",
            details={'path': path, 'reason': reason}
        )
        self.path = path
        self.reason = reason


class ApiResponseException(ApiException):
    """Raised when a 2xx payload does not have the shape the models expect."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Unexpected response from {path}: {reason}",
            details={'path': path, 'reason': reason}
        )
        self.path = path
        self.reason = reason
