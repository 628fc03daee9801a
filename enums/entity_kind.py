from enum import Enum


class EntityKind(str, Enum):
    """Entity kinds understood by every storage backend."""
    PRODUCT = "product"
    ORDER = "order"
    ORDER_LINE_ITEM = "orderLineItem"
    ROLE_ASSIGNMENT = "roleAssignment"
    USER_PROFILE = "userProfile"
    CART_LINE = "cartLine"
