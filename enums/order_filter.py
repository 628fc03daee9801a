from enum import IntEnum


class OrderFilterType(IntEnum):
    """
    Filter types for the admin order list.

    Default filter: ALL
    """
    ALL = 1
    PENDING = 2
    SHIPPED = 3
    DELIVERED = 4
    CANCELLED = 5
