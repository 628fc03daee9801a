"""
Product-related exceptions.
"""

from .base import StorefrontException, ValidationException


class ProductException(StorefrontException):
    """Base exception for product-related errors."""
    pass


class ProductNotFoundException(ProductException):
    """Raised when product is not found in the catalog."""

    def __init__(self, product_id: int):
        super().__init__(
            f"Product {product_id} not found",
            details={'product_id': product_id}
        )
        self.product_id = product_id


class InvalidProductDataException(ProductException, ValidationException):
    """Raised when product data fails validation (missing name, negative price)."""

    def __init__(self, reason: str, product_id: int | None = None):
        super().__init__(
            f"Invalid product data: {reason}",
            details={'product_id': product_id, 'reason': reason}
        )
        self.product_id = product_id
        self.reason = reason
