"""
Domain entities.

These are plain Python objects handled by the repositories and the
service layer.  The API never exposes them directly; services convert
them to the pydantic schemas in ``app.schemas``.
"""

from .auction import Auction
from .comic import Comic
from .comic_copy import ComicCopy
from .entity import Entity
from .enums import (
    AuctionStatus,
    ComicCategory,
    CopyCondition,
    OrderStatus,
    SubscriptionPlan,
    UserRole,
)
from .order import Order
from .order_detail import OrderDetail
from .subscription import Subscription
from .user import User
from .wishlist import Wishlist

__all__ = [
    "Auction",
    "AuctionStatus",
    "Comic",
    "ComicCategory",
    "ComicCopy",
    "CopyCondition",
    "Entity",
    "Order",
    "OrderDetail",
    "OrderStatus",
    "Subscription",
    "SubscriptionPlan",
    "User",
    "UserRole",
    "Wishlist",
]
