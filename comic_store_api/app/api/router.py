"""
Top-level API router.

Aggregates the resource routers under their path prefixes.  The
application mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import (
    auctions,
    comic_copies,
    comics,
    order_details,
    orders,
    subscriptions,
    users,
    wishlists,
)

router = APIRouter()

router.include_router(users.router, prefix="/utenti", tags=["utenti"])
router.include_router(comics.router, prefix="/fumetti", tags=["fumetti"])
router.include_router(wishlists.router, prefix="/wishlists", tags=["wishlists"])
router.include_router(subscriptions.router, prefix="/abbonamenti", tags=["abbonamenti"])
router.include_router(comic_copies.router, prefix="/copieFumetto", tags=["copieFumetto"])
router.include_router(auctions.router, prefix="/aste", tags=["aste"])
router.include_router(orders.router, prefix="/ordini", tags=["ordini"])
router.include_router(order_details.router, prefix="/dettagliOrdini", tags=["dettagliOrdini"])
