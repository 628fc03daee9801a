from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "Pending"        # Placed at checkout, awaiting dispatch
    SHIPPED = "Shipped"        # Handed to the carrier
    DELIVERED = "Delivered"    # Received by the customer
    CANCELLED = "Cancelled"    # Cancelled by owner (while pending) or admin
