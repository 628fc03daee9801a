"""
Payment Form Validation Utility

Validates the online payment sub-form submitted at checkout:
- Card path (debit/credit): number, cardholder name, expiry, CVV
- UPI path: identifier of the form name@bank

Only the shape of the input is checked. No payment is ever authorized.
"""

import logging
import re

from enums.online_payment_type import OnlinePaymentType
from models.payment import PaymentDetailsDTO

logger = logging.getLogger(__name__)

CARD_NUMBER_LENGTH = 16
CVV_LENGTH = 3
EXPIRY_PATTERN = re.compile(r"^(0[1-9]|1[0-2])/\d{2}$")


def normalize_card_number(card_number: str | None) -> str:
    """Strip all whitespace, as card numbers are typed in groups of four."""
    return re.sub(r"\s+", "", card_number or "")


def mask_card_number(card_number: str | None) -> str:
    """
    Mask all but the last four digits.

    Example:
        >>> mask_card_number("4111 1111 1111 1234")
        '************1234'
    """
    digits = normalize_card_number(card_number)
    if len(digits) <= 4:
        return "*" * len(digits)
    return "*" * (len(digits) - 4) + digits[-4:]


def validate_card_details(card_number: str | None, card_name: str | None,
                          card_expiry: str | None, card_cvv: str | None) -> tuple[bool, list[str]]:
    """
    Validate the card sub-form.

    Args:
        card_number: Card number, whitespace allowed between digit groups
        card_name: Cardholder name
        card_expiry: Expiry in MM/YY form
        card_cvv: Card verification value

    Returns:
        tuple: (is_valid, errors)
            - (True, []) if valid
            - (False, ["card_number", ...]) naming every invalid field

    Example:
        >>> validate_card_details("4111 1111 1111 1111", "A. Buyer", "12/27", "123")
        (True, [])
        >>> validate_card_details("4111", "", "13/27", "12")
        (False, ['card_number', 'card_name', 'card_expiry', 'card_cvv'])
    """
    errors = []

    digits = normalize_card_number(card_number)
    if len(digits) != CARD_NUMBER_LENGTH or not digits.isdigit():
        errors.append("card_number")

    if not (card_name or "").strip():
        errors.append("card_name")

    if not EXPIRY_PATTERN.match(card_expiry or ""):
        errors.append("card_expiry")

    cvv = card_cvv or ""
    if len(cvv) != CVV_LENGTH or not cvv.isdigit():
        errors.append("card_cvv")

    if errors:
        logger.debug(f"Card details rejected: {', '.join(errors)}")
    return len(errors) == 0, errors


def validate_upi_id(upi_id: str | None) -> tuple[bool, str | None]:
    """
    Validate a UPI identifier.

    Returns:
        tuple: (is_valid, error_message)
    """
    if not upi_id or "@" not in upi_id:
        return False, "upi_id"
    return True, None


def validate_payment_details(payment_details: PaymentDetailsDTO | None) -> tuple[bool, list[str]]:
    """
    Validate the online payment sub-form for the selected payment type.

    Returns:
        tuple: (is_valid, errors) where errors name the invalid fields
    """
    if payment_details is None:
        return False, ["payment_details"]

    if payment_details.payment_type == OnlinePaymentType.UPI:
        is_valid, error = validate_upi_id(payment_details.upi_id)
        return is_valid, [] if is_valid else [error]

    return validate_card_details(
        payment_details.card_number,
        payment_details.card_name,
        payment_details.card_expiry,
        payment_details.card_cvv
    )
