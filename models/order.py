from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, Text, DateTime, func, CheckConstraint, Index
from sqlalchemy import Enum as SQLEnum

from enums.order_status import OrderStatus
from enums.payment_method import PaymentMethod
from models.base import Base
from models.orderItem import OrderItemDTO


class Order(Base):
    __tablename__ = 'orders'

    id = Column(Integer, primary_key=True, unique=True)
    user_id = Column(String, nullable=False)
    # Grand total (subtotal + tax + shipping) frozen at checkout, never recomputed
    total = Column(Integer, nullable=False)
    status = Column(SQLEnum(OrderStatus, values_callable=lambda e: [m.value for m in e]),
                    nullable=False, default=OrderStatus.PENDING)
    payment_method = Column(SQLEnum(PaymentMethod, values_callable=lambda e: [m.value for m in e]), nullable=False)
    address = Column(Text, nullable=False)
    created_at = Column(DateTime, default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint('total >= 0', name='check_order_total_non_negative'),
        Index('ix_orders_user_created', 'user_id', 'created_at'),
    )


class OrderDTO(BaseModel):
    id: int | None = None
    user_id: str | None = None
    total: int | None = None
    status: OrderStatus | None = None
    payment_method: PaymentMethod | None = None
    address: str | None = None
    created_at: datetime | None = None
    items: list[OrderItemDTO] = []  # Line items, loaded separately from the header
