"""
User endpoints.

Five CRUD routes under ``/api/utenti``.  Creation failures answer 400
with an empty body; unknown ids answer 404.
"""

from typing import List

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse

from comic_store_api.app.core.exceptions import InvalidRecordError
from comic_store_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from comic_store_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/create-utente", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_utente(user_in: UserCreate):
    """Register a new user."""
    try:
        return await UserService.create_user(user_in)
    except InvalidRecordError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/get-utenti", response_model=List[UserRead])
async def get_utenti() -> List[UserRead]:
    return await UserService.list_users()


@router.get("/find-utente-by-id/{user_id}", response_model=UserRead)
async def find_utente(user_id: int):
    user = await UserService.get_user(user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user


@router.delete("/delete-utente/{user_id}", response_class=PlainTextResponse)
async def delete_utente(user_id: int) -> PlainTextResponse:
    """Delete a user; the user's wishlist is deleted with it."""
    deleted = await UserService.delete_user(user_id)
    if deleted is None:
        return PlainTextResponse(
            f"Utente con ID '{user_id}' non trovato.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(f"Utente con ID '{user_id}' eliminato con successo.")


@router.put("/update-utente/{user_id}", response_model=UserRead)
async def update_utente(user_id: int, user_in: UserUpdate):
    """Update the fields present in the body."""
    user = await UserService.update_user(user_id, user_in)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user
