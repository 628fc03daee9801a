from enums.entity_kind import EntityKind
from models.product import ProductDTO
from storage.base import StorageBackend, Ordering


class ProductRepository:
    @staticmethod
    async def create(product_dto: ProductDTO, storage: StorageBackend) -> int:
        record = product_dto.model_dump(exclude={'id'}, exclude_none=True)
        return await storage.insert(EntityKind.PRODUCT, record)

    @staticmethod
    async def get_by_id(product_id: int, storage: StorageBackend) -> ProductDTO | None:
        record = await storage.get(EntityKind.PRODUCT, product_id)
        if record is not None:
            return ProductDTO.model_validate(record)
        else:
            return None

    @staticmethod
    async def get_all(storage: StorageBackend) -> list[ProductDTO]:
        records = await storage.query(EntityKind.PRODUCT, order_by=[Ordering("id")])
        return [ProductDTO.model_validate(record) for record in records]

    @staticmethod
    async def update(product_dto: ProductDTO, storage: StorageBackend) -> None:
        patch = product_dto.model_dump(exclude={'id', 'created_at'}, exclude_none=True)
        await storage.update(EntityKind.PRODUCT, product_dto.id, patch)

    @staticmethod
    async def delete(product_id: int, storage: StorageBackend) -> None:
        await storage.delete(EntityKind.PRODUCT, product_id)
