"""
Wishlist endpoints.

Besides the five CRUD routes under ``/api/wishlists`` two routes add
and remove a single comic.  Adding a comic twice, or removing one that
is not listed, leaves the wishlist unchanged.
"""

from typing import List

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse

from comic_store_api.app.core.exceptions import InvalidRecordError
from comic_store_api.app.schemas.wishlist import WishlistCreate, WishlistRead, WishlistUpdate
from comic_store_api.app.services.wishlist_service import WishlistService

router = APIRouter()


@router.post("/create-wishlist", response_model=WishlistRead, status_code=status.HTTP_201_CREATED)
async def create_wishlist(wishlist_in: WishlistCreate):
    """Create a wishlist.

    A creation date in the future, an unknown owner or comic, or an
    owner who already has a wishlist answer 400 with an empty body.
    """
    try:
        return await WishlistService.create_wishlist(wishlist_in)
    except InvalidRecordError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/get-wishlists", response_model=List[WishlistRead])
async def get_wishlists() -> List[WishlistRead]:
    return await WishlistService.list_wishlists()


@router.get("/find-wishlist-by-id/{wishlist_id}", response_model=WishlistRead)
async def find_wishlist(wishlist_id: int):
    wishlist = await WishlistService.get_wishlist(wishlist_id)
    if wishlist is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return wishlist


@router.delete("/delete-wishlist/{wishlist_id}", response_class=PlainTextResponse)
async def delete_wishlist(wishlist_id: int) -> PlainTextResponse:
    deleted = await WishlistService.delete_wishlist(wishlist_id)
    if deleted is None:
        return PlainTextResponse(
            f"Wishlist con ID '{wishlist_id}' non trovato.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(f"Wishlist con ID '{wishlist_id}' eliminato con successo.")


@router.put("/update-wishlist/{wishlist_id}", response_model=WishlistRead)
async def update_wishlist(wishlist_id: int, wishlist_in: WishlistUpdate):
    wishlist = await WishlistService.update_wishlist(wishlist_id, wishlist_in)
    if wishlist is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return wishlist


@router.put("/add-fumetto/{wishlist_id}/{comic_id}", response_model=WishlistRead)
async def add_fumetto(wishlist_id: int, comic_id: int):
    """Add a comic; 404 if the wishlist or the comic does not exist."""
    wishlist = await WishlistService.add_item(wishlist_id, comic_id)
    if wishlist is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return wishlist


@router.put("/remove-fumetto/{wishlist_id}/{comic_id}", response_model=WishlistRead)
async def remove_fumetto(wishlist_id: int, comic_id: int):
    """Remove a comic; 404 only if the wishlist does not exist."""
    wishlist = await WishlistService.remove_item(wishlist_id, comic_id)
    if wishlist is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return wishlist
