import logging

from exceptions.base import ValidationException
from exceptions.cart import CartItemNotFoundException, InvalidQuantityException
from exceptions.product import InvalidProductDataException
from models.cart import CartDTO
from models.cartItem import CartItemDTO
from models.pricing import PriceSummaryDTO
from models.product import ProductDTO
from repositories.cart import CartRepository
from services.pricing import PricingService
from storage.base import StorageBackend


class Cart:
    """
    In-memory cart for one actor.

    Holds at most one line per product id, in insertion order. Lines carry a
    snapshot of the product (name, image, price) taken when the product was
    first added, which is what checkout copies into the order line items.
    """

    def __init__(self, user_id: str | None = None, items: list[CartItemDTO] | None = None):
        self.user_id = user_id
        self._items: list[CartItemDTO] = [item.model_copy() for item in items or []]

    @property
    def lines(self) -> list[CartItemDTO]:
        # Copies, so callers cannot change quantities behind the cart's back
        return [item.model_copy() for item in self._items]

    @property
    def is_empty(self) -> bool:
        return len(self._items) == 0

    @property
    def item_count(self) -> int:
        """Total number of units across all lines."""
        return sum(item.quantity for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def _find(self, product_id: int) -> CartItemDTO | None:
        return next((item for item in self._items if item.product_id == product_id), None)

    def add_or_increment(self, product: ProductDTO, quantity: int = 1) -> CartItemDTO:
        """
        Add a product to the cart or raise the quantity of its existing line.

        Args:
            product: Catalog product (id and price are required)
            quantity: Units to add, at least 1

        Returns:
            Copy of the resulting cart line

        Raises:
            InvalidQuantityException: If quantity < 1
            InvalidProductDataException: If the product has no id or price
        """
        if quantity is None or quantity < 1:
            raise InvalidQuantityException(product.id, quantity)
        if product.id is None or product.price is None:
            raise InvalidProductDataException("Product needs an id and a price to be added to a cart",
                                              product_id=product.id)

        line = self._find(product.id)
        if line is not None:
            line.quantity += quantity
        else:
            line = CartItemDTO(
                user_id=self.user_id,
                product_id=product.id,
                product_name=product.name or "",
                product_image=product.image,
                price=product.price,
                quantity=quantity
            )
            self._items.append(line)
        logging.debug(f"Cart {self.user_id}: product {product.id} x{line.quantity}")
        return line.model_copy()

    def set_quantity(self, product_id: int, quantity: int) -> None:
        """
        Set the quantity of a line. Zero or less removes the line, whether or not it exists.

        Raises:
            CartItemNotFoundException: If quantity is positive and the product has no line
        """
        if quantity <= 0:
            self.remove(product_id)
            return
        line = self._find(product_id)
        if line is None:
            raise CartItemNotFoundException(product_id)
        line.quantity = quantity

    def remove(self, product_id: int) -> None:
        self._items = [item for item in self._items if item.product_id != product_id]

    def clear(self) -> None:
        self._items = []

    def subtotal(self) -> int:
        return self.totals().subtotal

    def totals(self) -> PriceSummaryDTO:
        return PricingService.calculate_totals(self._items)

    def to_dto(self) -> CartDTO:
        return CartDTO(user_id=self.user_id, items=self.lines)

    @classmethod
    def from_dto(cls, cart_dto: CartDTO) -> "Cart":
        cart = cls(cart_dto.user_id)
        for item in cart_dto.items:
            if item.quantity is None or item.quantity <= 0:
                continue
            existing = cart._find(item.product_id)
            if existing is not None:
                existing.quantity += item.quantity
            else:
                cart._items.append(item.model_copy(update={'user_id': cart_dto.user_id}))
        return cart


class CartService:
    """Keeps carts between sessions for the local-storage variant."""

    @staticmethod
    async def save(cart: Cart, storage: StorageBackend) -> None:
        if cart.user_id is None:
            raise ValidationException("Cannot persist a cart without an owner")
        await CartRepository.replace(cart.user_id, cart.lines, storage)
        logging.debug(f"Saved cart of user {cart.user_id} ({len(cart)} lines)")

    @staticmethod
    async def load(user_id: str, storage: StorageBackend) -> Cart:
        items = await CartRepository.get_by_user_id(user_id, storage)
        return Cart.from_dto(CartDTO(user_id=user_id, items=items))

    @staticmethod
    async def clear(user_id: str, storage: StorageBackend) -> None:
        await CartRepository.clear(user_id, storage)
