# cart is an ephemeral container of product selections for one actor. Lines carry
# a snapshot of the product fields needed at checkout (name, image, price) so the
# order line items can be copied by value without another catalog read.
from pydantic import BaseModel

from models.cartItem import CartItemDTO


class CartDTO(BaseModel):
    user_id: str | None = None
    items: list[CartItemDTO] = []
