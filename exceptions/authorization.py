"""
Authorization-related exceptions.
"""

from .base import AuthorizationException


class PermissionDeniedException(AuthorizationException):
    """Raised when the authorization guard denies an admin action."""

    def __init__(self, actor_id: str | None, action: str):
        who = f"User {actor_id}" if actor_id else "Anonymous actor"
        super().__init__(
            f"{who} is not allowed to perform '{action}'",
            details={'actor_id': actor_id, 'action': action}
        )
        self.actor_id = actor_id
        self.action = action


class NotAuthenticatedException(AuthorizationException):
    """Raised when an operation requires a signed-in actor."""

    def __init__(self, operation: str):
        super().__init__(
            f"Authentication required for '{operation}'",
            details={'operation': operation}
        )
        self.operation = operation
