"""
Tests for utils/payment_validation.py and PaymentService.validate()
"""

import pytest

from enums.online_payment_type import OnlinePaymentType
from enums.payment_method import PaymentMethod
from exceptions import InvalidPaymentDetailsException, ValidationException
from models.payment import PaymentDetailsDTO
from services.payment import PaymentService
from utils.payment_validation import (
    validate_card_details,
    validate_upi_id,
    validate_payment_details,
    mask_card_number,
)

VALID_CARD = dict(card_number="4111 1111 1111 1111", card_name="Asha Rao", card_expiry="09/28", card_cvv="123")


class TestValidateCardDetails:

    def test_valid_card(self):
        assert validate_card_details(**VALID_CARD) == (True, [])

    def test_number_without_spaces(self):
        is_valid, _ = validate_card_details(**{**VALID_CARD, 'card_number': "4111111111111111"})
        assert is_valid

    @pytest.mark.parametrize("card_number", ["4111 1111 1111 111", "4111 1111 1111 11112", "4111-1111-1111-1111",
                                             "abcd efgh ijkl mnop", "", None])
    def test_invalid_number(self, card_number):
        is_valid, errors = validate_card_details(**{**VALID_CARD, 'card_number': card_number})
        assert not is_valid
        assert errors == ["card_number"]

    @pytest.mark.parametrize("card_name", ["", "   ", None])
    def test_blank_name(self, card_name):
        _, errors = validate_card_details(**{**VALID_CARD, 'card_name': card_name})
        assert errors == ["card_name"]

    @pytest.mark.parametrize("card_expiry", ["13/28", "00/28", "9/28", "09/2028", "0928", ""])
    def test_invalid_expiry(self, card_expiry):
        _, errors = validate_card_details(**{**VALID_CARD, 'card_expiry': card_expiry})
        assert errors == ["card_expiry"]

    @pytest.mark.parametrize("card_cvv", ["12", "1234", "12a", ""])
    def test_invalid_cvv(self, card_cvv):
        _, errors = validate_card_details(**{**VALID_CARD, 'card_cvv': card_cvv})
        assert errors == ["card_cvv"]

    def test_reports_every_invalid_field(self):
        is_valid, errors = validate_card_details("4111", "", "13/27", "12")
        assert not is_valid
        assert errors == ["card_number", "card_name", "card_expiry", "card_cvv"]


class TestValidateUpi:

    def test_valid(self):
        assert validate_upi_id("asha@okbank") == (True, None)

    @pytest.mark.parametrize("upi_id", ["ashaokbank", "", None])
    def test_invalid(self, upi_id):
        assert validate_upi_id(upi_id) == (False, "upi_id")


class TestValidatePaymentDetails:

    def test_upi_ignores_card_fields(self):
        details = PaymentDetailsDTO(payment_type=OnlinePaymentType.UPI, upi_id="asha@okbank")
        assert validate_payment_details(details) == (True, [])

    def test_debit_requires_card(self):
        details = PaymentDetailsDTO(payment_type=OnlinePaymentType.DEBIT, upi_id="asha@okbank")
        is_valid, errors = validate_payment_details(details)
        assert not is_valid
        assert "card_number" in errors

    def test_missing_details(self):
        assert validate_payment_details(None) == (False, ["payment_details"])


class TestPaymentServiceValidate:

    def test_cod_needs_no_details(self):
        PaymentService.validate(PaymentMethod.COD, None)

    def test_online_invalid_raises(self):
        details = PaymentDetailsDTO(payment_type=OnlinePaymentType.UPI, upi_id="nope")

        with pytest.raises(InvalidPaymentDetailsException) as exc_info:
            PaymentService.validate(PaymentMethod.ONLINE, details)

        assert exc_info.value.payment_type == "upi"
        assert exc_info.value.errors == ["upi_id"]
        assert isinstance(exc_info.value, ValidationException)

    def test_online_valid_card(self):
        PaymentService.validate(PaymentMethod.ONLINE, PaymentDetailsDTO(**VALID_CARD))


def test_mask_card_number():
    assert mask_card_number("4111 1111 1111 1234") == "************1234"
    assert mask_card_number("123") == "***"
