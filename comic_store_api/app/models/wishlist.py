"""
Wishlist entity.

A wishlist belongs to one user and references any number of comics;
a comic can appear in many wishlists.  ``items`` keeps insertion order
and never holds the same comic twice.  The reverse side of the
relation (the wishlists a comic appears in) is not tracked on
``Comic``; the repository derives it from the join table.
"""

from datetime import date
from typing import List, Optional

from .comic import Comic
from .entity import Entity
from .user import User


class Wishlist(Entity):
    def __init__(
        self,
        creation_date: Optional[date] = None,
        items: Optional[List[Comic]] = None,
        owner: Optional[User] = None,
        id: Optional[int] = None,
    ):
        self.id = id
        self.creation_date = creation_date
        self.items: List[Comic] = list(items) if items is not None else []
        self.owner = owner

    def add_item(self, item: Comic) -> None:
        """Add ``item`` unless it is already in the wishlist."""
        if item not in self.items:
            self.items.append(item)

    def remove_item(self, item: Comic) -> None:
        """Remove ``item``; does nothing if it is not in the wishlist."""
        if item in self.items:
            self.items.remove(item)

    def __repr__(self) -> str:
        return f"Wishlist(id={self.id!r}, creation_date={self.creation_date!r})"
