"""Comic copy endpoints under ``/api/copieFumetto``."""

from typing import List

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse

from comic_store_api.app.core.exceptions import InvalidRecordError
from comic_store_api.app.schemas.comic_copy import ComicCopyCreate, ComicCopyRead, ComicCopyUpdate
from comic_store_api.app.services.comic_copy_service import ComicCopyService

router = APIRouter()


@router.post("/create-copia-fumetto", response_model=ComicCopyRead, status_code=status.HTTP_201_CREATED)
async def create_copia_fumetto(copy_in: ComicCopyCreate):
    try:
        return await ComicCopyService.create_copy(copy_in)
    except InvalidRecordError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/get-copie-fumetto", response_model=List[ComicCopyRead])
async def get_copie_fumetto() -> List[ComicCopyRead]:
    return await ComicCopyService.list_copies()


@router.get("/find-copia-fumetto-by-id/{copy_id}", response_model=ComicCopyRead)
async def find_copia_fumetto(copy_id: int):
    copy = await ComicCopyService.get_copy(copy_id)
    if copy is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return copy


@router.delete("/delete-copia-fumetto/{copy_id}", response_class=PlainTextResponse)
async def delete_copia_fumetto(copy_id: int) -> PlainTextResponse:
    """Delete a copy with its auctions and order lines."""
    deleted = await ComicCopyService.delete_copy(copy_id)
    if deleted is None:
        return PlainTextResponse(
            f"Copia fumetto con ID '{copy_id}' non trovata.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(f"Copia fumetto con ID '{copy_id}' eliminata con successo.")


@router.put("/update-copia-fumetto/{copy_id}", response_model=ComicCopyRead)
async def update_copia_fumetto(copy_id: int, copy_in: ComicCopyUpdate):
    copy = await ComicCopyService.update_copy(copy_id, copy_in)
    if copy is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return copy
