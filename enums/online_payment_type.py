from enum import Enum


class OnlinePaymentType(str, Enum):
    """
    Sub-form selected when paying online.

    DEBIT / CREDIT: card number, cardholder name, expiry and CVV required
    UPI: only a UPI identifier (name@bank) is required
    """
    DEBIT = "debit"
    CREDIT = "credit"
    UPI = "upi"
