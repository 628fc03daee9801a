"""
User-related exceptions.
"""

from .base import StorefrontException, AuthorizationException


class UserException(StorefrontException):
    """Base exception for user-related errors."""
    pass


class UserNotFoundException(UserException):
    """Raised when user profile is not found in storage."""

    def __init__(self, user_id: str | None = None):
        if user_id:
            message = f"User with ID {user_id} not found"
            details = {'user_id': user_id}
        else:
            message = "User not found"
            details = {}

        super().__init__(message, details)
        self.user_id = user_id


class SelfModificationException(UserException, AuthorizationException):
    """Raised when an admin tries to change their own role or delete their own account."""

    def __init__(self, user_id: str, operation: str):
        super().__init__(
            f"User {user_id} cannot {operation} their own account",
            details={'user_id': user_id, 'operation': operation}
        )
        self.user_id = user_id
        self.operation = operation
