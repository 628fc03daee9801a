"""
Cart-related exceptions.
"""

from .base import StorefrontException, ValidationException


class CartException(StorefrontException):
    """Base exception for cart-related errors."""
    pass


class EmptyCartException(CartException, ValidationException):
    """Raised when trying to checkout with empty cart."""

    def __init__(self, user_id: str | None):
        super().__init__(
            f"Cart is empty for user {user_id}",
            details={'user_id': user_id}
        )
        self.user_id = user_id


class CartItemNotFoundException(CartException):
    """Raised when a cart line for the product does not exist."""

    def __init__(self, product_id: int):
        super().__init__(
            f"Product {product_id} is not in the cart",
            details={'product_id': product_id}
        )
        self.product_id = product_id


class InvalidQuantityException(CartException, ValidationException):
    """Raised when a quantity below 1 is added or priced."""

    def __init__(self, product_id: int | None, quantity: int):
        super().__init__(
            f"Invalid quantity {quantity} for product {product_id}",
            details={'product_id': product_id, 'quantity': quantity}
        )
        self.product_id = product_id
        self.quantity = quantity
