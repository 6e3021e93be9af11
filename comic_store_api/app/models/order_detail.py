from dataclasses import dataclass
from typing import Optional

from .entity import Entity


@dataclass(eq=False)
class OrderDetail(Entity):
    """One line of an order: how many units of a copy were bought."""

    quantity: int
    copy_id: int
    order_id: int
    id: Optional[int] = None
