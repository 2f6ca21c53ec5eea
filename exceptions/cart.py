"""
Cart-related exceptions.
"""

from .base import StorefrontException


class CartException(StorefrontException):
    """Base exception for cart-related errors."""
    pass


class EmptyCartException(CartException):
    """Raised when trying to checkout with empty cart."""

    def __init__(self):
        super().__init__("Your cart is empty")


class CartItemNotFoundException(CartException):
    """Raised when a product is not part of the current cart."""

    def __init__(self, product_id: str):
        super().__init__(
            f"Product {product_id} is not in the cart",
            details={'product_id': product_id}
        )
        self.product_id = product_id


class InvalidQuantityException(CartException):
    """Raised when a cart quantity is not a positive integer."""

    def __init__(self, product_id: str, quantity: int):
        super().__init__(
            f"Invalid quantity {quantity} for product {product_id}",
            details={'product_id': product_id, 'quantity': quantity}
        )
        self.product_id = product_id
        self.quantity = quantity
