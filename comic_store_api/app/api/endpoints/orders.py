"""Order endpoints under ``/api/ordini``."""

from typing import List

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse

from comic_store_api.app.core.exceptions import InvalidRecordError
from comic_store_api.app.schemas.order import OrderCreate, OrderRead, OrderUpdate
from comic_store_api.app.services.order_service import OrderService

router = APIRouter()


@router.post("/create-ordine", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_ordine(order_in: OrderCreate):
    try:
        return await OrderService.create_order(order_in)
    except InvalidRecordError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/get-ordini", response_model=List[OrderRead])
async def get_ordini() -> List[OrderRead]:
    return await OrderService.list_orders()


@router.get("/find-ordine-by-id/{order_id}", response_model=OrderRead)
async def find_ordine(order_id: int):
    order = await OrderService.get_order(order_id)
    if order is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return order


@router.delete("/delete-ordine/{order_id}", response_class=PlainTextResponse)
async def delete_ordine(order_id: int) -> PlainTextResponse:
    """Delete an order and its lines."""
    deleted = await OrderService.delete_order(order_id)
    if deleted is None:
        return PlainTextResponse(
            f"Ordine con ID '{order_id}' non trovato.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(f"Ordine con ID '{order_id}' eliminato con successo.")


@router.put("/update-ordine/{order_id}", response_model=OrderRead)
async def update_ordine(order_id: int, order_in: OrderUpdate):
    order = await OrderService.update_order(order_id, order_in)
    if order is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return order
