"""
Order-related exceptions.
"""

from .base import StorefrontException


class OrderException(StorefrontException):
    """Base exception for order-related errors."""
    pass


class OrderNotFoundException(OrderException):
    """Raised when an order cannot be found by any lookup."""

    def __init__(self, order_id: str):
        super().__init__(
            f"Order #{order_id} not found",
            details={'order_id': order_id}
        )
        self.order_id = order_id


class OrderPlacementException(OrderException):
    """Raised when the backend does not confirm a new order."""

    def __init__(self, reason: str):
        super().__init__(
            f"Failed to place order: {reason}",
            details={'reason': reason}
        )
        self.reason = reason
