"""
Pydantic schemas for wishlists.

On write a wishlist refers to its owner and its comics by id
(``owner_id``, ``item_ids``).  On read the comics are embedded in
their stored order.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from .comic import ComicRead


class WishlistCreate(BaseModel):
    """Schema for creating a wishlist."""

    creation_date: date = Field(..., description="Creation date, not in the future")
    owner_id: Optional[int] = Field(None, description="User owning the wishlist")
    item_ids: List[int] = Field(default_factory=list, description="Comics to put in the wishlist")


class WishlistUpdate(BaseModel):
    """Schema for updating a wishlist.

    ``item_ids`` replaces the whole item list when given.
    """

    creation_date: Optional[date] = None
    owner_id: Optional[int] = None
    item_ids: Optional[List[int]] = None


class WishlistRead(BaseModel):
    id: int
    creation_date: date
    owner_id: Optional[int] = None
    items: List[ComicRead] = Field(default_factory=list)
