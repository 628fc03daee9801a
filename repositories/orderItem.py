from enums.entity_kind import EntityKind
from models.orderItem import OrderItemDTO
from storage.base import StorageBackend, Ordering


class OrderItemRepository:
    @staticmethod
    async def create_many(order_items: list[OrderItemDTO], storage: StorageBackend) -> list[int]:
        records = [item.model_dump(exclude={'id'}) for item in order_items]
        return await storage.insert_many(EntityKind.ORDER_LINE_ITEM, records)

    @staticmethod
    async def get_by_order_id(order_id: int, storage: StorageBackend) -> list[OrderItemDTO]:
        records = await storage.query(EntityKind.ORDER_LINE_ITEM, {'order_id': order_id}, [Ordering("id")])
        return [OrderItemDTO.model_validate(record) for record in records]
