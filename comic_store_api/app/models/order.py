from dataclasses import dataclass
from datetime import date
from typing import Optional

from .entity import Entity
from .enums import OrderStatus


@dataclass(eq=False)
class Order(Entity):
    final_price: float
    order_date: date
    user_id: int
    status: OrderStatus = OrderStatus.IN_CONSEGNA
    id: Optional[int] = None
