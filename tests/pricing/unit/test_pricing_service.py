"""
Unit Tests for PricingService.calculate_totals()

Covers tax rounding, the strict free-shipping threshold and line validation.
"""

from decimal import Decimal
from unittest.mock import patch

import pytest

from exceptions.base import ValidationException
from exceptions.cart import InvalidQuantityException
from models.cartItem import CartItemDTO
from models.orderItem import OrderItemDTO
from services.pricing import PricingService


class TestCalculateTotals:
    """Test calculate_totals() with the default configuration."""

    def test_free_shipping_above_threshold(self):
        totals = PricingService.calculate_totals([(10000, 2), (25000, 1)])

        assert totals.subtotal == 45000
        assert totals.tax == 8100
        assert totals.shipping == 0
        assert totals.grand_total == 53100

    def test_flat_shipping_below_threshold(self):
        totals = PricingService.calculate_totals([(5000, 2)])

        assert totals.subtotal == 10000
        assert totals.tax == 1800
        assert totals.shipping == 4999
        assert totals.grand_total == 16799

    def test_threshold_is_strict(self):
        """Exactly 40000 still pays shipping."""
        totals = PricingService.calculate_totals([(40000, 1)])

        assert totals.subtotal == 40000
        assert totals.tax == 7200
        assert totals.shipping == 4999
        assert totals.grand_total == 52199

    def test_one_unit_above_threshold_ships_free(self):
        totals = PricingService.calculate_totals([(40001, 1)])

        assert totals.shipping == 0
        assert totals.tax == 7200  # 7200.18 rounds down
        assert totals.grand_total == 47201

    def test_empty_input(self):
        totals = PricingService.calculate_totals([])

        assert totals.subtotal == 0
        assert totals.tax == 0
        assert totals.shipping == 4999
        assert totals.grand_total == 4999

    def test_accepts_cart_and_order_lines(self):
        cart_lines = [CartItemDTO(product_id=1, product_name="Sofa", price=25000, quantity=1),
                      CartItemDTO(product_id=2, product_name="Lamp", price=5000, quantity=3)]
        order_lines = [OrderItemDTO(product_id=1, product_name="Sofa", price=25000, quantity=1),
                       OrderItemDTO(product_id=2, product_name="Lamp", price=5000, quantity=3)]

        assert PricingService.calculate_totals(cart_lines) == PricingService.calculate_totals(order_lines)
        assert PricingService.calculate_totals(cart_lines).subtotal == 40000

    def test_grand_total_is_sum_of_parts(self):
        for lines in ([(1, 1)], [(12345, 3)], [(999, 7), (40000, 2)]):
            totals = PricingService.calculate_totals(lines)
            assert totals.grand_total == totals.subtotal + totals.tax + totals.shipping


class TestTaxRounding:
    """Test round-half-up of the flat-rate tax."""

    def test_half_rounds_up(self):
        # 25 * 0.18 = 4.5
        assert PricingService.calculate_tax(25) == 5

    def test_below_half_rounds_down(self):
        # 13 * 0.18 = 2.34
        assert PricingService.calculate_tax(13) == 2

    def test_above_half_rounds_up(self):
        # 14 * 0.18 = 2.52
        assert PricingService.calculate_tax(14) == 3

    def test_zero_subtotal(self):
        assert PricingService.calculate_tax(0) == 0

    @patch('services.pricing.config.TAX_RATE', Decimal("0.10"))
    def test_uses_configured_rate(self):
        assert PricingService.calculate_tax(1005) == 101  # 100.5 rounds up


class TestLineValidation:
    """Test rejection of invalid lines."""

    def test_zero_quantity_rejected(self):
        with pytest.raises(InvalidQuantityException):
            PricingService.calculate_totals([(1000, 0)])

    def test_negative_quantity_rejected(self):
        line = CartItemDTO(product_id=7, product_name="Stool", price=1000, quantity=-1)

        with pytest.raises(InvalidQuantityException) as exc_info:
            PricingService.calculate_totals([line])

        assert exc_info.value.product_id == 7

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationException):
            PricingService.calculate_totals([(-1, 1)])


class TestCalculateShipping:

    def test_flat_fee_up_to_threshold(self):
        assert PricingService.calculate_shipping(0) == 4999
        assert PricingService.calculate_shipping(40000) == 4999

    def test_free_above_threshold(self):
        assert PricingService.calculate_shipping(40001) == 0

    @patch('services.pricing.config.FREE_SHIPPING_THRESHOLD', 1000)
    @patch('services.pricing.config.FLAT_SHIPPING_FEE', 250)
    def test_uses_configured_values(self):
        assert PricingService.calculate_shipping(1000) == 250
        assert PricingService.calculate_shipping(1001) == 0
