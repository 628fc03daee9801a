from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, Text, Boolean, Float, DateTime, func, CheckConstraint
from sqlalchemy import Enum as SQLEnum

from enums.product_category import ProductCategory
from models.base import Base


class Product(Base):
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    price = Column(Integer, nullable=False)
    category = Column(SQLEnum(ProductCategory, values_callable=lambda e: [m.value for m in e]), nullable=False)
    description = Column(Text, nullable=True)
    image = Column(String, nullable=True)
    featured = Column(Boolean, nullable=False, default=False)

    # Optional merchandising metadata shown on product cards
    original_price = Column(Integer, nullable=True)
    rating = Column(Float, nullable=True)
    reviews = Column(Integer, nullable=True)
    in_stock = Column(Boolean, nullable=True)
    created_at = Column(DateTime, default=func.now())

    __table_args__ = (
        CheckConstraint('price >= 0', name='check_product_price_non_negative'),
    )


class ProductDTO(BaseModel):
    id: int | None = None
    name: str | None = None
    price: int | None = None
    category: ProductCategory | None = None
    description: str | None = None
    image: str | None = None
    featured: bool | None = None
    original_price: int | None = None
    rating: float | None = None
    reviews: int | None = None
    in_stock: bool | None = None
    created_at: datetime | None = None
