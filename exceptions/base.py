"""
Root of the storefront exception tree.

Every error raised by pricing, cart, checkout, order status, catalog and
admin operations derives from StorefrontException and falls into one of
three categories: the input was rejected, the actor was not allowed, or
storage failed.
"""


class StorefrontException(Exception):
    """
    Base class for storefront errors.

    Attributes:
        message: Text shown to the shopper or admin
        details: Ids and states involved (order_id, user_id, product_id, status, ...)
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if not self.details:
            return f"{self.__class__.__name__}({self.message!r})"
        context = ', '.join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.__class__.__name__}({self.message!r}, {context})"


class ValidationException(StorefrontException):
    """Input rejected before any state change (empty address, bad payment form, bad quantity)."""
    pass


class AuthorizationException(StorefrontException):
    """Acting identity is not allowed to perform the requested operation."""
    pass


class PersistenceException(StorefrontException):
    """Storage collaborator failed to read or write."""
    pass
