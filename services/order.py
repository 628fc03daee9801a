import asyncio
import logging
from datetime import datetime

from enums.admin_action import AdminAction
from enums.order_filter import OrderFilterType
from enums.order_status import OrderStatus
from enums.payment_method import PaymentMethod
from exceptions.base import PersistenceException, ValidationException
from exceptions.cart import EmptyCartException
from exceptions.order import (
    OrderNotFoundException,
    InvalidOrderStateException,
    OrderOwnershipException,
    InvalidAddressException,
    OrderPersistenceException
)
from models.order import OrderDTO
from models.orderItem import OrderItemDTO
from models.payment import PaymentDetailsDTO
from models.user import ActorDTO
from repositories.order import OrderRepository
from repositories.orderItem import OrderItemRepository
from services.cart import Cart
from services.payment import PaymentService
from services.pricing import PricingService
from storage.base import StorageBackend
from utils.order_filters import get_status_filter_for_filter_type
from utils.order_state_machine import OrderStateMachine
from utils.permission_utils import can_manage, require_admin, require_authenticated


class OrderService:

    @staticmethod
    async def place_order(actor: ActorDTO | None,
                          cart: Cart,
                          payment_method: PaymentMethod,
                          address: str | None,
                          storage: StorageBackend,
                          payment_details: PaymentDetailsDTO | None = None) -> OrderDTO:
        """
        Turn the actor's cart into an immutable order.

        Preconditions are checked in order and any violation raises before
        anything is written:
        1. actor signed in
        2. cart not empty
        3. address not blank
        4. online payment form valid (COD needs none)

        Then, after the simulated processing delay, the header is inserted
        (status PENDING, total = grand total from PricingService), followed by
        one line item per cart line copied by value. The cart is cleared only
        when both writes succeed.

        Args:
            actor: Current actor (None when signed out)
            cart: The actor's cart
            payment_method: COD or ONLINE
            address: Delivery address
            storage: Storage backend
            payment_details: Card or UPI sub-form, required for ONLINE

        Returns:
            OrderDTO: The created order with its line items

        Raises:
            NotAuthenticatedException: If actor is None
            EmptyCartException: If the cart has no lines
            InvalidAddressException: If address is empty after stripping
            InvalidPaymentDetailsException: If the online payment form is invalid
            PersistenceException: If the order header could not be stored (no items written)
            OrderPersistenceException: If the header was stored but the items were not
        """
        actor = require_authenticated(actor, "place an order")

        if cart.is_empty:
            raise EmptyCartException(actor.id)

        address = (address or "").strip()
        if not address:
            raise InvalidAddressException(actor.id)

        try:
            payment_method = PaymentMethod(payment_method)
        except ValueError:
            raise ValidationException(f"Unknown payment method '{payment_method}'",
                                      details={'user_id': actor.id, 'payment_method': payment_method})
        PaymentService.validate(payment_method, payment_details)

        await PaymentService.simulate_processing()

        lines = cart.lines
        totals = PricingService.calculate_totals(lines)

        order_dto = OrderDTO(
            user_id=actor.id,
            total=totals.grand_total,
            status=OrderStatus.PENDING,
            payment_method=payment_method,
            address=address,
            created_at=datetime.now()
        )
        try:
            order_dto.id = await OrderRepository.create(order_dto, storage)
        except PersistenceException as e:
            logging.error(f"❌ Order header for user {actor.id} could not be stored: {e}")
            raise

        order_items = [
            OrderItemDTO(
                order_id=order_dto.id,
                product_id=line.product_id,
                product_name=line.product_name,
                product_image=line.product_image,
                price=line.price,
                quantity=line.quantity
            )
            for line in lines
        ]
        try:
            item_ids = await OrderItemRepository.create_many(order_items, storage)
        except PersistenceException as e:
            # Header stays without items; no rollback is attempted
            logging.error(f"❌ Order {order_dto.id} stored without line items: {e}")
            raise OrderPersistenceException(order_dto.id, str(e)) from e

        for order_item, item_id in zip(order_items, item_ids):
            order_item.id = item_id
        order_dto.items = order_items

        cart.clear()
        logging.info(f"✅ Order {order_dto.id} placed by user {actor.id} "
                     f"(Items: {len(order_items)}, Total: {order_dto.total}, Payment: {payment_method.value})")
        return order_dto

    @staticmethod
    async def get_order(actor: ActorDTO | None, order_id: int, storage: StorageBackend) -> OrderDTO:
        """
        Get one order with its line items.

        Raises:
            OrderNotFoundException: If the order does not exist
            OrderOwnershipException: If the actor is neither owner nor admin
        """
        order = await OrderRepository.get_by_id(order_id, storage)
        if order is None:
            raise OrderNotFoundException(order_id)

        if not can_manage(actor, AdminAction.VIEW_ALL_ORDERS) and (actor is None or order.user_id != actor.id):
            raise OrderOwnershipException(order_id, actor.id if actor else None)

        return (await OrderService._with_items([order], storage))[0]

    @staticmethod
    async def get_user_orders(actor: ActorDTO | None, storage: StorageBackend) -> list[OrderDTO]:
        """Orders owned by the actor, newest first. Empty when signed out."""
        if actor is None:
            return []
        orders = await OrderRepository.get_by_user_id(actor.id, storage)
        return await OrderService._with_items(orders, storage)

    @staticmethod
    async def get_all_orders(actor: ActorDTO | None,
                             storage: StorageBackend,
                             filter_type: OrderFilterType | int | None = None) -> list[OrderDTO]:
        """
        Every order, newest first, for the admin order list.

        A denied read is an empty result rather than an error.

        Args:
            actor: Current actor
            storage: Storage backend
            filter_type: OrderFilterType (None or ALL = every status)
        """
        if not can_manage(actor, AdminAction.VIEW_ALL_ORDERS):
            logging.debug(f"Order list denied for actor {actor.id if actor else None}")
            return []

        status_filter = get_status_filter_for_filter_type(filter_type)
        orders = await OrderRepository.get_all(storage, status_filter)
        return await OrderService._with_items(orders, storage)

    @staticmethod
    async def update_order_status(actor: ActorDTO | None,
                                  order_id: int,
                                  new_status: OrderStatus | str,
                                  storage: StorageBackend) -> OrderDTO:
        """
        Set the status of any order (admin only).

        Admins may set any status from any status; moves outside the forward
        transitions are logged as overrides. Only the status is written.

        Raises:
            PermissionDeniedException: If the actor is not an admin (nothing is written)
            ValidationException: If new_status is not a known status
            OrderNotFoundException: If the order does not exist
        """
        actor = require_admin(actor, AdminAction.MUTATE_ANY_ORDER_STATUS)

        try:
            new_status = OrderStatus(new_status)
        except ValueError:
            raise ValidationException(f"Unknown order status '{new_status}'",
                                      details={'order_id': order_id, 'status': new_status})

        order = await OrderRepository.get_by_id(order_id, storage)
        if order is None:
            raise OrderNotFoundException(order_id)

        if order.status == new_status:
            logging.debug(f"Order {order_id} already {new_status.value}, nothing to update")
            return (await OrderService._with_items([order], storage))[0]

        OrderStateMachine.validate_and_log_transition(order_id, order.status, new_status,
                                                      actor_id=actor.id, is_admin=True)
        await OrderRepository.update_status(order_id, new_status, storage)
        order.status = new_status
        return (await OrderService._with_items([order], storage))[0]

    @staticmethod
    async def cancel_order(actor: ActorDTO | None, order_id: int, storage: StorageBackend) -> OrderDTO:
        """
        Cancel an order.

        The owner may cancel while the order is still PENDING. Admins may
        cancel in any status.

        Raises:
            NotAuthenticatedException: If actor is None
            OrderNotFoundException: If the order does not exist
            OrderOwnershipException: If the actor is neither owner nor admin
            InvalidOrderStateException: If a non-admin owner cancels a non-pending order
        """
        actor = require_authenticated(actor, "cancel an order")

        order = await OrderRepository.get_by_id(order_id, storage)
        if order is None:
            raise OrderNotFoundException(order_id)

        is_admin = can_manage(actor, AdminAction.MUTATE_ANY_ORDER_STATUS)
        if not is_admin and order.user_id != actor.id:
            logging.warning(f"User {actor.id} attempted to cancel order {order_id} owned by {order.user_id}")
            raise OrderOwnershipException(order_id, actor.id)

        if order.status == OrderStatus.CANCELLED:
            return (await OrderService._with_items([order], storage))[0]

        if not OrderStateMachine.validate_and_log_transition(order_id, order.status, OrderStatus.CANCELLED,
                                                             actor_id=actor.id, is_admin=is_admin):
            raise InvalidOrderStateException(order_id, order.status.value, OrderStatus.PENDING.value)

        await OrderRepository.update_status(order_id, OrderStatus.CANCELLED, storage)
        order.status = OrderStatus.CANCELLED
        logging.info(f"🚫 Order {order_id} cancelled by {'admin' if is_admin else 'owner'} {actor.id}")
        return (await OrderService._with_items([order], storage))[0]

    @staticmethod
    async def _with_items(orders: list[OrderDTO], storage: StorageBackend) -> list[OrderDTO]:
        item_lists = await asyncio.gather(
            *(OrderItemRepository.get_by_order_id(order.id, storage) for order in orders)
        )
        for order, items in zip(orders, item_lists):
            order.items = items
        return orders
