import logging

import config
from enums.admin_action import AdminAction
from enums.product_category import ProductCategory
from exceptions.product import ProductNotFoundException, InvalidProductDataException
from models.product import ProductDTO
from models.user import ActorDTO
from repositories.product import ProductRepository
from storage.base import StorageBackend
from utils.permission_utils import require_admin


class ProductService:

    @staticmethod
    async def list_products(storage: StorageBackend,
                            search: str | None = None,
                            category: ProductCategory | str | None = None) -> list[ProductDTO]:
        """
        Catalog listing, ordered by id.

        Args:
            storage: Storage backend
            search: Optional case-insensitive match on name or category
            category: Optional exact category
        """
        products = await ProductRepository.get_all(storage)
        if category is not None:
            category = ProductCategory(category)
            products = [product for product in products if product.category == category]
        if search:
            needle = search.strip().lower()
            products = [
                product for product in products
                if needle in (product.name or "").lower()
                or (product.category is not None and needle in product.category.value.lower())
            ]
        return products

    @staticmethod
    async def get_product(product_id: int, storage: StorageBackend) -> ProductDTO:
        product = await ProductRepository.get_by_id(product_id, storage)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product

    @staticmethod
    def _validate(product_dto: ProductDTO) -> None:
        if not (product_dto.name or "").strip():
            raise InvalidProductDataException("name is required", product_dto.id)
        if product_dto.price is None or product_dto.price < 0:
            raise InvalidProductDataException(f"price must be zero or more, got {product_dto.price}",
                                              product_dto.id)

    @staticmethod
    async def create_product(actor: ActorDTO | None, product_dto: ProductDTO, storage: StorageBackend) -> ProductDTO:
        """
        Add a product to the catalog (admin only).

        A missing image falls back to DEFAULT_PRODUCT_IMAGE and a missing
        category to the first catalog category.

        Raises:
            PermissionDeniedException: If the actor is not an admin
            InvalidProductDataException: If name is blank or price is negative
        """
        actor = require_admin(actor, AdminAction.MANAGE_CATALOG)
        ProductService._validate(product_dto)

        product_dto = product_dto.model_copy(update={
            'name': product_dto.name.strip(),
            'image': product_dto.image or config.DEFAULT_PRODUCT_IMAGE,
            'category': product_dto.category or list(ProductCategory)[0],
            'featured': bool(product_dto.featured),
        })
        product_dto.id = await ProductRepository.create(product_dto, storage)
        logging.info(f"Admin {actor.id} created product {product_dto.id} ({product_dto.name})")
        return product_dto

    @staticmethod
    async def update_product(actor: ActorDTO | None, product_dto: ProductDTO, storage: StorageBackend) -> ProductDTO:
        """
        Patch an existing product (admin only). Fields left as None keep their value.

        Existing order line items are never touched: they hold their own copy.
        """
        actor = require_admin(actor, AdminAction.MANAGE_CATALOG)
        if product_dto.id is None:
            raise InvalidProductDataException("id is required to update a product")
        existing = await ProductService.get_product(product_dto.id, storage)

        merged = existing.model_copy(update=product_dto.model_dump(exclude_none=True))
        ProductService._validate(merged)
        if not merged.image:
            merged.image = config.DEFAULT_PRODUCT_IMAGE

        await ProductRepository.update(merged, storage)
        logging.info(f"Admin {actor.id} updated product {merged.id}")
        return merged

    @staticmethod
    async def delete_product(actor: ActorDTO | None, product_id: int, storage: StorageBackend) -> None:
        actor = require_admin(actor, AdminAction.MANAGE_CATALOG)
        await ProductService.get_product(product_id, storage)
        await ProductRepository.delete(product_id, storage)
        logging.info(f"Admin {actor.id} deleted product {product_id}")
