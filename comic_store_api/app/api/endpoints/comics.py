"""Comic catalogue endpoints under ``/api/fumetti``."""

from typing import List

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse

from comic_store_api.app.core.exceptions import InvalidRecordError
from comic_store_api.app.schemas.comic import ComicCreate, ComicRead, ComicUpdate
from comic_store_api.app.services.comic_service import ComicService

router = APIRouter()


@router.post("/create-fumetto", response_model=ComicRead, status_code=status.HTTP_201_CREATED)
async def create_fumetto(comic_in: ComicCreate):
    try:
        return await ComicService.create_comic(comic_in)
    except InvalidRecordError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/get-fumetti", response_model=List[ComicRead])
async def get_fumetti() -> List[ComicRead]:
    return await ComicService.list_comics()


@router.get("/find-fumetto-by-id/{comic_id}", response_model=ComicRead)
async def find_fumetto(comic_id: int):
    comic = await ComicService.get_comic(comic_id)
    if comic is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return comic


@router.delete("/delete-fumetto/{comic_id}", response_class=PlainTextResponse)
async def delete_fumetto(comic_id: int) -> PlainTextResponse:
    """Delete a comic and drop it from every wishlist."""
    deleted = await ComicService.delete_comic(comic_id)
    if deleted is None:
        return PlainTextResponse(
            f"Fumetto con ID '{comic_id}' non trovato.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(f"Fumetto con ID '{comic_id}' eliminato con successo.")


@router.put("/update-fumetto/{comic_id}", response_model=ComicRead)
async def update_fumetto(comic_id: int, comic_in: ComicUpdate):
    comic = await ComicService.update_comic(comic_id, comic_in)
    if comic is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return comic
