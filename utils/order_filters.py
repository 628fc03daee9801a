"""
Order Filter Utilities

Maps OrderFilterType enum to lists of OrderStatus for repository queries.
"""
from enums.order_filter import OrderFilterType
from enums.order_status import OrderStatus

_FILTER_STATUSES = {
    OrderFilterType.PENDING: [OrderStatus.PENDING],
    OrderFilterType.SHIPPED: [OrderStatus.SHIPPED],
    OrderFilterType.DELIVERED: [OrderStatus.DELIVERED],
    OrderFilterType.CANCELLED: [OrderStatus.CANCELLED],
}


def get_status_filter_for_filter_type(filter_type: OrderFilterType | int | None) -> list[OrderStatus] | None:
    """
    Converts OrderFilterType to list of OrderStatus values for repository queries.

    Args:
        filter_type: OrderFilterType enum value (or None for default)

    Returns:
        List of OrderStatus to filter by, or None for all orders

    Default behavior:
        None or ALL → None (no filter)
    """
    if filter_type is None or filter_type == OrderFilterType.ALL:
        return None

    statuses = _FILTER_STATUSES.get(OrderFilterType(filter_type))
    return list(statuses) if statuses else None
