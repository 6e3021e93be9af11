"""Pydantic schemas for orders and order lines."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from ..models.enums import OrderStatus


class OrderBase(BaseModel):
    final_price: float = Field(..., description="Prezzo finale")
    order_date: date = Field(..., description="Order date, not in the future")
    status: OrderStatus = OrderStatus.IN_CONSEGNA
    user_id: int


class OrderCreate(OrderBase):
    pass


class OrderUpdate(BaseModel):
    final_price: Optional[float] = None
    order_date: Optional[date] = None
    status: Optional[OrderStatus] = None
    user_id: Optional[int] = None


class OrderRead(OrderBase):
    id: int

    model_config = {
        "from_attributes": True,
    }


class OrderDetailBase(BaseModel):
    quantity: int = Field(..., description="Number of units, at least 1")
    copy_id: int
    order_id: int


class OrderDetailCreate(OrderDetailBase):
    pass


class OrderDetailUpdate(BaseModel):
    quantity: Optional[int] = None
    copy_id: Optional[int] = None
    order_id: Optional[int] = None


class OrderDetailRead(OrderDetailBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
