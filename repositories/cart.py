from enums.entity_kind import EntityKind
from models.cartItem import CartItemDTO
from storage.base import StorageBackend, Ordering


class CartRepository:
    @staticmethod
    async def get_by_user_id(user_id: str, storage: StorageBackend) -> list[CartItemDTO]:
        records = await storage.query(EntityKind.CART_LINE, {'user_id': user_id}, [Ordering("id")])
        return [CartItemDTO.model_validate(record) for record in records]

    @staticmethod
    async def clear(user_id: str, storage: StorageBackend) -> None:
        records = await storage.query(EntityKind.CART_LINE, {'user_id': user_id})
        for record in records:
            await storage.delete(EntityKind.CART_LINE, record['id'])

    @staticmethod
    async def replace(user_id: str, items: list[CartItemDTO], storage: StorageBackend) -> None:
        """Store the cart verbatim: existing lines for the user are dropped first."""
        await CartRepository.clear(user_id, storage)
        if items:
            records = [item.model_dump(exclude={'id'}) | {'user_id': user_id} for item in items]
            await storage.insert_many(EntityKind.CART_LINE, records)
