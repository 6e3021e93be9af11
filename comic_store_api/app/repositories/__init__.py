"""SQLite repositories, one per entity type."""

from .auction_repository import AuctionRepository
from .base import Repository
from .comic_copy_repository import ComicCopyRepository
from .comic_repository import ComicRepository
from .order_detail_repository import OrderDetailRepository
from .order_repository import OrderRepository
from .subscription_repository import SubscriptionRepository
from .user_repository import UserRepository
from .wishlist_repository import WishlistRepository

__all__ = [
    "AuctionRepository",
    "ComicCopyRepository",
    "ComicRepository",
    "OrderDetailRepository",
    "OrderRepository",
    "Repository",
    "SubscriptionRepository",
    "UserRepository",
    "WishlistRepository",
]
