"""
Order-related exceptions.
"""

from .base import StorefrontException, ValidationException, AuthorizationException, PersistenceException


class OrderException(StorefrontException):
    """Base exception for order-related errors."""
    pass


class OrderNotFoundException(OrderException):
    """Raised when order is not found in storage."""

    def __init__(self, order_id: int):
        super().__init__(
            f"Order {order_id} not found",
            details={'order_id': order_id}
        )
        self.order_id = order_id


class InvalidOrderStateException(OrderException):
    """Raised when order is in invalid state for requested operation."""

    def __init__(self, order_id: int, current_state: str, required_state: str):
        super().__init__(
            f"Order {order_id} is in state '{current_state}', required '{required_state}'",
            details={'order_id': order_id, 'current_state': current_state, 'required_state': required_state}
        )
        self.order_id = order_id
        self.current_state = current_state
        self.required_state = required_state


class OrderOwnershipException(OrderException, AuthorizationException):
    """Raised when user attempts to access/modify order they don't own."""

    def __init__(self, order_id: int, user_id: str | None):
        super().__init__(
            f"User {user_id} does not have permission to access order {order_id}",
            details={'order_id': order_id, 'user_id': user_id}
        )
        self.order_id = order_id
        self.user_id = user_id


class InvalidAddressException(OrderException, ValidationException):
    """Raised when the delivery address is empty or whitespace only."""

    def __init__(self, user_id: str | None):
        super().__init__(
            "Delivery address is required",
            details={'user_id': user_id}
        )
        self.user_id = user_id


class OrderPersistenceException(OrderException, PersistenceException):
    """
    Raised when line items could not be stored after the order header was.

    The header stays in storage without items; nothing is rolled back.
    """

    def __init__(self, order_id: int, reason: str):
        super().__init__(
            f"Order {order_id} was created but its line items could not be stored: {reason}",
            details={'order_id': order_id, 'reason': reason}
        )
        self.order_id = order_id
        self.reason = reason
