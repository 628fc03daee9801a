import asyncio
import logging

import config
from enums.payment_method import PaymentMethod
from exceptions.payment import InvalidPaymentDetailsException
from models.payment import PaymentDetailsDTO
from utils.payment_validation import validate_payment_details, mask_card_number


class PaymentService:
    """
    Simulated payment acceptance.

    There is no gateway: an order placed with a valid form is always accepted
    after a fixed processing delay.
    """

    @staticmethod
    def validate(payment_method: PaymentMethod, payment_details: PaymentDetailsDTO | None) -> None:
        """
        Validate the payment form for the chosen method.

        Cash on delivery needs no details. Online payment requires a valid
        card or UPI sub-form.

        Raises:
            InvalidPaymentDetailsException: If the online sub-form does not validate
        """
        if PaymentMethod(payment_method) != PaymentMethod.ONLINE:
            return

        is_valid, errors = validate_payment_details(payment_details)
        if not is_valid:
            payment_type = payment_details.payment_type.value if payment_details else None
            logging.info(f"Online payment form rejected ({payment_type}): {', '.join(errors)}")
            raise InvalidPaymentDetailsException(payment_type, errors)

        if payment_details.card_number:
            logging.debug(f"Online payment form accepted for card {mask_card_number(payment_details.card_number)}")

    @staticmethod
    async def simulate_processing() -> None:
        # Not cancellable and no timeout: checkout waits for the full delay
        if config.CHECKOUT_PROCESSING_DELAY_SECONDS > 0:
            await asyncio.sleep(config.CHECKOUT_PROCESSING_DELAY_SECONDS)
