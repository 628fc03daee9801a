"""
Tests for the exception hierarchy raised by the storefront services.
"""
import pytest

from exceptions import (
    StorefrontException,
    ValidationException,
    AuthorizationException,
    PersistenceException,
    OrderException,
    OrderNotFoundException,
    InvalidOrderStateException,
    OrderOwnershipException,
    InvalidAddressException,
    OrderPersistenceException,
    EmptyCartException,
    CartException,
    InvalidQuantityException,
    InvalidPaymentDetailsException,
    SelfModificationException,
    RecordNotFoundException,
    StorageOperationException,
)


class TestOrderNotFoundException:

    def test_creation(self):
        exc = OrderNotFoundException(order_id=999999)

        assert exc.order_id == 999999
        assert "Order 999999 not found" in str(exc)
        assert exc.details == {'order_id': 999999}


class TestInvalidOrderStateException:

    def test_creation(self):
        exc = InvalidOrderStateException(order_id=1, current_state="Shipped", required_state="Pending")

        assert exc.current_state == "Shipped"
        assert exc.required_state == "Pending"
        assert "Shipped" in str(exc)
        assert "Pending" in str(exc)


class TestOrderPersistenceException:

    def test_carries_order_id(self):
        exc = OrderPersistenceException(order_id=12, reason="disk full")

        assert exc.order_id == 12
        assert "12" in str(exc)
        assert isinstance(exc, PersistenceException)
        assert isinstance(exc, OrderException)


class TestHierarchy:

    @pytest.mark.parametrize("exc,categories", [
        (EmptyCartException("u1"), (ValidationException, CartException)),
        (InvalidQuantityException(1, 0), (ValidationException, CartException)),
        (InvalidAddressException("u1"), (ValidationException, OrderException)),
        (InvalidPaymentDetailsException("upi", ["upi_id"]), (ValidationException,)),
        (OrderOwnershipException(1, "u2"), (AuthorizationException, OrderException)),
        (SelfModificationException("admin-1", "delete"), (AuthorizationException,)),
        (RecordNotFoundException("order", 1), (PersistenceException,)),
        (StorageOperationException("insert", "order", "locked"), (PersistenceException,)),
    ])
    def test_categories(self, exc, categories):
        assert isinstance(exc, StorefrontException)
        for category in categories:
            assert isinstance(exc, category)

    def test_catch_by_category(self):
        with pytest.raises(ValidationException):
            raise InvalidAddressException("u1")

    def test_self_modification_message(self):
        exc = SelfModificationException("admin-1", "delete")

        assert str(exc) == "User admin-1 cannot delete their own account"
