"""Order line endpoints under ``/api/dettagliOrdini``."""

from typing import List

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse

from comic_store_api.app.core.exceptions import InvalidRecordError
from comic_store_api.app.schemas.order import OrderDetailCreate, OrderDetailRead, OrderDetailUpdate
from comic_store_api.app.services.order_service import OrderDetailService

router = APIRouter()


@router.post("/create-dettagli-ordine", response_model=OrderDetailRead, status_code=status.HTTP_201_CREATED)
async def create_dettagli_ordine(detail_in: OrderDetailCreate):
    try:
        return await OrderDetailService.create_detail(detail_in)
    except InvalidRecordError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/get-dettagli-ordini", response_model=List[OrderDetailRead])
async def get_dettagli_ordini() -> List[OrderDetailRead]:
    return await OrderDetailService.list_details()


@router.get("/find-dettagli-ordine-by-id/{detail_id}", response_model=OrderDetailRead)
async def find_dettagli_ordine(detail_id: int):
    detail = await OrderDetailService.get_detail(detail_id)
    if detail is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return detail


@router.delete("/delete-dettagli-ordine/{detail_id}", response_class=PlainTextResponse)
async def delete_dettagli_ordine(detail_id: int) -> PlainTextResponse:
    deleted = await OrderDetailService.delete_detail(detail_id)
    if deleted is None:
        return PlainTextResponse(
            f"Dettagli ordine con ID '{detail_id}' non trovati.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(f"Dettagli ordine con ID '{detail_id}' eliminati con successo.")


@router.put("/update-dettagli-ordine/{detail_id}", response_model=OrderDetailRead)
async def update_dettagli_ordine(detail_id: int, detail_in: OrderDetailUpdate):
    detail = await OrderDetailService.update_detail(detail_id, detail_in)
    if detail is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return detail
