"""
Order State Machine for validating order status transitions and maintaining consistency.

This module implements a finite state machine to ensure valid order status transitions
and provide audit logging for all status changes.
"""

import logging
from typing import Dict, List, Set

from enums.order_status import OrderStatus

logger = logging.getLogger(__name__)


class OrderStatusTransition:
    """Represents a valid status transition with metadata"""

    def __init__(self, from_status: OrderStatus, to_status: OrderStatus, requires_admin: bool = False,
                 description: str = ""):
        self.from_status = from_status
        self.to_status = to_status
        self.requires_admin = requires_admin
        self.description = description

    def __repr__(self):
        admin_flag = " (Admin)" if self.requires_admin else ""
        return f"{self.from_status.value} -> {self.to_status.value}{admin_flag}"


class OrderStateMachine:
    """
    Finite state machine for order status transitions with validation and audit logging.

    Forward transitions:
    - PENDING -> SHIPPED (admin)
    - SHIPPED -> DELIVERED (admin)
    - PENDING -> CANCELLED (owner or admin)

    DELIVERED and CANCELLED have no forward transitions. Administrators may
    still set any status from any status; such moves are logged as overrides.
    """

    VALID_TRANSITIONS: List[OrderStatusTransition] = [
        OrderStatusTransition(
            OrderStatus.PENDING,
            OrderStatus.SHIPPED,
            requires_admin=True,
            description="Order handed to the carrier"
        ),
        OrderStatusTransition(
            OrderStatus.SHIPPED,
            OrderStatus.DELIVERED,
            requires_admin=True,
            description="Order received by the customer"
        ),
        OrderStatusTransition(
            OrderStatus.PENDING,
            OrderStatus.CANCELLED,
            requires_admin=False,
            description="Order cancelled before dispatch"
        ),
    ]

    _transition_map: Dict[OrderStatus, Set[OrderStatus]] = {}
    _admin_required_transitions: Set[tuple] = set()
    _transition_descriptions: Dict[tuple, str] = {}

    @classmethod
    def _build_transition_map(cls):
        """Build internal transition maps for lookup"""
        if cls._transition_map:
            return

        for transition in cls.VALID_TRANSITIONS:
            cls._transition_map.setdefault(transition.from_status, set()).add(transition.to_status)
            if transition.requires_admin:
                cls._admin_required_transitions.add((transition.from_status, transition.to_status))
            cls._transition_descriptions[(transition.from_status, transition.to_status)] = transition.description

    @classmethod
    def is_valid_transition(cls, from_status: OrderStatus, to_status: OrderStatus) -> bool:
        """
        Check if a status transition is a forward transition of the state machine.

        Args:
            from_status: Current order status
            to_status: Desired new status

        Returns:
            True if transition is valid (or a same-status no-op), False otherwise
        """
        cls._build_transition_map()

        if from_status == to_status:
            return True

        return OrderStatus(to_status) in cls._transition_map.get(OrderStatus(from_status), set())

    @classmethod
    def requires_admin(cls, from_status: OrderStatus, to_status: OrderStatus) -> bool:
        cls._build_transition_map()
        return (OrderStatus(from_status), OrderStatus(to_status)) in cls._admin_required_transitions

    @classmethod
    def get_transition_description(cls, from_status: OrderStatus, to_status: OrderStatus) -> str:
        cls._build_transition_map()
        return cls._transition_descriptions.get(
            (OrderStatus(from_status), OrderStatus(to_status)),
            f"Transition from {OrderStatus(from_status).value} to {OrderStatus(to_status).value}"
        )

    @classmethod
    def can_transition(cls, from_status: OrderStatus, to_status: OrderStatus, is_admin: bool) -> bool:
        """
        Check whether an actor may move an order between two statuses.

        Args:
            from_status: Current order status
            to_status: Desired new status
            is_admin: Whether the actor passed the authorization guard

        Returns:
            True for admins (any status may be set), for same-status no-ops, and
            for forward transitions that do not require an admin
        """
        if is_admin or from_status == to_status:
            return True
        return (cls.is_valid_transition(from_status, to_status) and
                not cls.requires_admin(from_status, to_status))

    @classmethod
    def validate_and_log_transition(cls, order_id: int, from_status: OrderStatus, to_status: OrderStatus,
                                    actor_id: str | None = None, is_admin: bool = False) -> bool:
        """
        Validate a status transition and create audit log entry.

        Args:
            order_id: ID of the order being transitioned
            from_status: Current order status
            to_status: Desired new status
            actor_id: ID of the actor performing transition
            is_admin: Whether the actor is an administrator

        Returns:
            True if transition is allowed and logged, False otherwise
        """
        from_status = OrderStatus(from_status)
        to_status = OrderStatus(to_status)

        if not cls.can_transition(from_status, to_status, is_admin):
            if cls.is_valid_transition(from_status, to_status):
                logger.error(f"Admin required for transition {from_status.value} -> {to_status.value} "
                             f"on order {order_id}")
            else:
                logger.error(f"Invalid status transition for order {order_id}: "
                             f"{from_status.value} -> {to_status.value}")
            return False

        performer = f"admin {actor_id}" if is_admin else f"user {actor_id}"
        if not cls.is_valid_transition(from_status, to_status):
            logger.warning(f"ORDER_STATUS_OVERRIDE: Order {order_id} {from_status.value} -> {to_status.value} "
                           f"by {performer}")
        else:
            transition_desc = cls.get_transition_description(from_status, to_status)
            logger.info(f"ORDER_STATUS_TRANSITION: Order {order_id} {from_status.value} -> {to_status.value} "
                        f"by {performer}: {transition_desc}")

        return True

