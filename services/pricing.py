from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Any

import config
from exceptions.base import ValidationException
from exceptions.cart import InvalidQuantityException
from models.pricing import PriceSummaryDTO


class PricingService:
    """Checkout pricing: subtotal, flat-rate tax, threshold-based shipping."""

    @staticmethod
    def calculate_totals(lines: Iterable[Any]) -> PriceSummaryDTO:
        """
        Calculate checkout totals for a set of line items.

        This is the only place totals are computed. The cart summary and the
        order created at checkout both call it with the same lines, so the
        displayed total and the charged total cannot drift apart.

        Algorithm:
        1. subtotal = sum(price * quantity)
        2. tax = subtotal * TAX_RATE, rounded half-up to a whole unit
        3. shipping = 0 if subtotal > FREE_SHIPPING_THRESHOLD else FLAT_SHIPPING_FEE
        4. grand_total = subtotal + tax + shipping

        Example with the default configuration:
            [10000 x 2, 25000 x 1] -> subtotal 45000, tax 8100, shipping 0, total 53100
            [5000 x 2]             -> subtotal 10000, tax 1800, shipping 4999, total 16799

        Args:
            lines: Cart lines, order line items, or (price, quantity) tuples

        Returns:
            PriceSummaryDTO with subtotal, tax, shipping and grand_total

        Raises:
            InvalidQuantityException: If a line has quantity <= 0
            ValidationException: If a line has a negative or missing price
        """
        subtotal = 0
        for line in lines:
            price, quantity, product_id = PricingService._unpack_line(line)
            if quantity is None or quantity <= 0:
                raise InvalidQuantityException(product_id, quantity)
            if price is None or price < 0:
                raise ValidationException(
                    f"Invalid price {price} for product {product_id}",
                    details={'product_id': product_id, 'price': price}
                )
            subtotal += price * quantity

        tax = PricingService.calculate_tax(subtotal)
        shipping = PricingService.calculate_shipping(subtotal)
        return PriceSummaryDTO(
            subtotal=subtotal,
            tax=tax,
            shipping=shipping,
            grand_total=subtotal + tax + shipping
        )

    @staticmethod
    def calculate_tax(subtotal: int) -> int:
        # Decimal keeps 0.18 exact, so e.g. 2.5 rounds up instead of drifting to 2.4999...
        tax = (Decimal(subtotal) * config.TAX_RATE).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return int(tax)

    @staticmethod
    def calculate_shipping(subtotal: int) -> int:
        # Strict threshold: exactly FREE_SHIPPING_THRESHOLD still pays shipping
        if subtotal > config.FREE_SHIPPING_THRESHOLD:
            return 0
        return config.FLAT_SHIPPING_FEE

    @staticmethod
    def _unpack_line(line: Any) -> tuple[Any, Any, Any]:
        if isinstance(line, tuple):
            price, quantity = line
            return price, quantity, None
        return line.price, line.quantity, getattr(line, "product_id", None)
