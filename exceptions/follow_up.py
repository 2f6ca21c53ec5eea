"""
Follow-up reminder exceptions.
"""

from .base import StorefrontException


class FollowUpException(StorefrontException):
    """Base exception for follow-up reminder errors."""
    pass


class InvalidFollowUpException(FollowUpException):
    """Raised when a follow-up reminder fails validation (before any network call)."""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid follow-up reminder: {reason}",
            details={'reason': reason}
        )
        self.reason = reason
