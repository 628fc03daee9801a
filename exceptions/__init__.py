"""
Custom exceptions for the storefront core.

This module provides a hierarchy of custom exceptions for consistent error handling
throughout the application.

Exception Hierarchy:
--------------------
StorefrontException (base)
├── ValidationException
│   ├── EmptyCartException
│   ├── InvalidQuantityException
│   ├── InvalidAddressException
│   ├── InvalidPaymentDetailsException
│   └── InvalidProductDataException
├── AuthorizationException
│   ├── PermissionDeniedException
│   ├── NotAuthenticatedException
│   ├── OrderOwnershipException
│   └── SelfModificationException
├── PersistenceException
│   ├── RecordNotFoundException
│   ├── StorageOperationException
│   └── OrderPersistenceException
├── OrderException
│   ├── OrderNotFoundException
│   └── InvalidOrderStateException
├── CartException
│   └── CartItemNotFoundException
├── ProductException
│   └── ProductNotFoundException
└── UserException
    └── UserNotFoundException

Usage:
------
Services raise specific exceptions:
    raise OrderNotFoundException(order_id=123)

Callers catch by category:
    try:
        await OrderService.place_order(...)
    except ValidationException as e:
        show_form_error(str(e))
"""

from .base import StorefrontException, ValidationException, AuthorizationException, PersistenceException
from .authorization import PermissionDeniedException, NotAuthenticatedException
from .cart import CartException, EmptyCartException, CartItemNotFoundException, InvalidQuantityException
from .order import (
    OrderException,
    OrderNotFoundException,
    InvalidOrderStateException,
    OrderOwnershipException,
    InvalidAddressException,
    OrderPersistenceException
)
from .payment import PaymentException, InvalidPaymentDetailsException
from .persistence import RecordNotFoundException, StorageOperationException
from .product import ProductException, ProductNotFoundException, InvalidProductDataException
from .user import UserException, UserNotFoundException, SelfModificationException

__all__ = [
    # Base
    'StorefrontException',
    'ValidationException',
    'AuthorizationException',
    'PersistenceException',

    # Authorization
    'PermissionDeniedException',
    'NotAuthenticatedException',

    # Cart
    'CartException',
    'EmptyCartException',
    'CartItemNotFoundException',
    'InvalidQuantityException',

    # Order
    'OrderException',
    'OrderNotFoundException',
    'InvalidOrderStateException',
    'OrderOwnershipException',
    'InvalidAddressException',
    'OrderPersistenceException',

    # Payment
    'PaymentException',
    'InvalidPaymentDetailsException',

    # Persistence
    'RecordNotFoundException',
    'StorageOperationException',

    # Product
    'ProductException',
    'ProductNotFoundException',
    'InvalidProductDataException',

    # User
    'UserException',
    'UserNotFoundException',
    'SelfModificationException',
]
