"""Subscription plan endpoints under ``/api/abbonamenti``."""

from typing import List

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse

from comic_store_api.app.core.exceptions import InvalidRecordError
from comic_store_api.app.schemas.subscription import (
    SubscriptionCreate,
    SubscriptionRead,
    SubscriptionUpdate,
)
from comic_store_api.app.services.subscription_service import SubscriptionService

router = APIRouter()


@router.post("/create-abbonamento", response_model=SubscriptionRead, status_code=status.HTTP_201_CREATED)
async def create_abbonamento(subscription_in: SubscriptionCreate):
    try:
        return await SubscriptionService.create_subscription(subscription_in)
    except InvalidRecordError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/get-abbonamenti", response_model=List[SubscriptionRead])
async def get_abbonamenti() -> List[SubscriptionRead]:
    return await SubscriptionService.list_subscriptions()


@router.get("/find-abbonamento-by-id/{subscription_id}", response_model=SubscriptionRead)
async def find_abbonamento(subscription_id: int):
    subscription = await SubscriptionService.get_subscription(subscription_id)
    if subscription is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return subscription


@router.delete("/delete-abbonamento/{subscription_id}", response_class=PlainTextResponse)
async def delete_abbonamento(subscription_id: int) -> PlainTextResponse:
    """Delete a plan.  Enrolled users keep their account without a plan."""
    deleted = await SubscriptionService.delete_subscription(subscription_id)
    if deleted is None:
        return PlainTextResponse(
            f"Abbonamento con ID '{subscription_id}' non trovato.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(f"Abbonamento con ID '{subscription_id}' eliminato con successo.")


@router.put("/update-abbonamento/{subscription_id}", response_model=SubscriptionRead)
async def update_abbonamento(subscription_id: int, subscription_in: SubscriptionUpdate):
    subscription = await SubscriptionService.update_subscription(subscription_id, subscription_in)
    if subscription is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return subscription
