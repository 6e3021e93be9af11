"""Auction endpoints under ``/api/aste``."""

from typing import List

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse

from comic_store_api.app.core.exceptions import InvalidRecordError
from comic_store_api.app.schemas.auction import AuctionCreate, AuctionRead, AuctionUpdate
from comic_store_api.app.services.auction_service import AuctionService

router = APIRouter()


@router.post("/create-asta", response_model=AuctionRead, status_code=status.HTTP_201_CREATED)
async def create_asta(auction_in: AuctionCreate):
    try:
        return await AuctionService.create_auction(auction_in)
    except InvalidRecordError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/get-aste", response_model=List[AuctionRead])
async def get_aste() -> List[AuctionRead]:
    return await AuctionService.list_auctions()


@router.get("/find-asta-by-id/{auction_id}", response_model=AuctionRead)
async def find_asta(auction_id: int):
    auction = await AuctionService.get_auction(auction_id)
    if auction is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return auction


@router.delete("/delete-asta/{auction_id}", response_class=PlainTextResponse)
async def delete_asta(auction_id: int) -> PlainTextResponse:
    deleted = await AuctionService.delete_auction(auction_id)
    if deleted is None:
        return PlainTextResponse(
            f"Asta con ID '{auction_id}' non trovata.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(f"Asta con ID '{auction_id}' eliminata con successo.")


@router.put("/update-asta/{auction_id}", response_model=AuctionRead)
async def update_asta(auction_id: int, auction_in: AuctionUpdate):
    auction = await AuctionService.update_auction(auction_id, auction_in)
    if auction is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return auction
