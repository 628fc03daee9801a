from pydantic import BaseModel

from enums.online_payment_type import OnlinePaymentType


class PaymentDetailsDTO(BaseModel):
    """
    Online payment sub-form as entered at checkout.

    Never persisted: only the payment method ends up on the order.
    """
    payment_type: OnlinePaymentType = OnlinePaymentType.DEBIT
    card_number: str | None = None
    card_name: str | None = None
    card_expiry: str | None = None
    card_cvv: str | None = None
    upi_id: str | None = None
