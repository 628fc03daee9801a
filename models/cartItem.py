from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, CheckConstraint, UniqueConstraint

from models.base import Base


class CartItem(Base):
    """Persisted cart line, used by the local-storage variant to keep carts between sessions."""
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, nullable=False)
    product_id = Column(Integer, nullable=False)
    product_name = Column(String, nullable=False)
    product_image = Column(String, nullable=True)
    price = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_quantity_positive'),
        UniqueConstraint('user_id', 'product_id', name='uq_cart_items_user_product'),
    )


class CartItemDTO(BaseModel):
    id: int | None = None
    user_id: str | None = None
    product_id: int
    product_name: str
    product_image: str | None = None
    price: int
    quantity: int
