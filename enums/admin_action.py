from enum import Enum


class AdminAction(str, Enum):
    """
    Privileged actions checked by the authorization guard.

    Every one of them requires an "admin" role assignment.
    """
    VIEW_ALL_ORDERS = "view_all_orders"
    MUTATE_ANY_ORDER_STATUS = "mutate_any_order_status"
    MANAGE_CATALOG = "manage_catalog"
    MANAGE_ROLES = "manage_roles"
