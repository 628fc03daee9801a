from pydantic import BaseModel


class PriceSummaryDTO(BaseModel):
    """Checkout totals in whole currency units."""
    subtotal: int
    tax: int
    shipping: int
    grand_total: int
