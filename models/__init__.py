"""
Models Package

This file ensures all SQLAlchemy models are imported and registered,
which is required for Base.metadata.create_all() to see every table.
"""

from models.base import Base
from models.product import Product
from models.order import Order
from models.orderItem import OrderItem
from models.user import UserProfile
from models.role_assignment import RoleAssignment
from models.cartItem import CartItem

__all__ = [
    'Base',
    'Product',
    'Order',
    'OrderItem',
    'UserProfile',
    'RoleAssignment',
    'CartItem',
]
