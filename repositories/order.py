import logging

from enums.entity_kind import EntityKind
from enums.order_status import OrderStatus
from models.order import OrderDTO
from storage.base import StorageBackend, Ordering

logger = logging.getLogger(__name__)

# Newest first; id breaks ties between orders created in the same instant
NEWEST_FIRST = [Ordering("created_at", descending=True), Ordering("id", descending=True)]


class OrderRepository:
    @staticmethod
    async def create(order_dto: OrderDTO, storage: StorageBackend) -> int:
        record = order_dto.model_dump(exclude={'id', 'items'}, exclude_none=True)
        return await storage.insert(EntityKind.ORDER, record)

    @staticmethod
    async def get_by_id(order_id: int, storage: StorageBackend) -> OrderDTO | None:
        record = await storage.get(EntityKind.ORDER, order_id)
        if record is not None:
            return OrderDTO.model_validate(record)
        else:
            return None

    @staticmethod
    async def get_by_user_id(user_id: str, storage: StorageBackend) -> list[OrderDTO]:
        records = await storage.query(EntityKind.ORDER, {'user_id': user_id}, NEWEST_FIRST)
        return [OrderDTO.model_validate(record) for record in records]

    @staticmethod
    async def get_all(storage: StorageBackend, status_filter: list[OrderStatus] | None = None) -> list[OrderDTO]:
        """
        Get all orders, newest first.

        Args:
            storage: Storage backend
            status_filter: Optional list of statuses to restrict to (None = all)
        """
        order_filter = {'status': list(status_filter)} if status_filter else None
        records = await storage.query(EntityKind.ORDER, order_filter, NEWEST_FIRST)
        return [OrderDTO.model_validate(record) for record in records]

    @staticmethod
    async def update_status(order_id: int, status: OrderStatus, storage: StorageBackend) -> None:
        # Status is the only mutable field of a placed order
        await storage.update(EntityKind.ORDER, order_id, {'status': status})
