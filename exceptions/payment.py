"""
Payment-related exceptions.
"""

from .base import StorefrontException, ValidationException


class PaymentException(StorefrontException):
    """Base exception for payment-related errors."""
    pass


class InvalidPaymentDetailsException(PaymentException, ValidationException):
    """Raised when the online payment sub-form does not validate."""

    def __init__(self, payment_type: str | None, errors: list[str]):
        super().__init__(
            f"Invalid {payment_type or 'online'} payment details: {', '.join(errors)}",
            details={'payment_type': payment_type, 'errors': errors}
        )
        self.payment_type = payment_type
        self.errors = errors
