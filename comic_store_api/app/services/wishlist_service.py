"""
Service layer for wishlists.

A wishlist optionally belongs to one user (at most one wishlist per
user) and holds an ordered, duplicate-free list of comics.  Requests
refer to the owner and the comics by id; ids that do not resolve, or
an owner who already has another wishlist, make the write invalid.
Items are always added through ``Wishlist.add_item`` so repeated ids
collapse into a single entry.
"""

import logging
import sqlite3
from typing import List, Optional, Sequence

from ..core.db import transaction
from ..core.exceptions import FieldError, InvalidRecordError
from ..models.wishlist import Wishlist
from ..repositories.comic_repository import ComicRepository
from ..repositories.user_repository import UserRepository
from ..repositories.wishlist_repository import WishlistRepository
from ..schemas.comic import ComicRead
from ..schemas.wishlist import WishlistCreate, WishlistRead, WishlistUpdate
from .validation import ensure_valid, validate_wishlist


class WishlistService:
    """Service class for managing wishlists and their items."""

    @staticmethod
    def _to_read(wishlist: Wishlist) -> WishlistRead:
        return WishlistRead(
            id=wishlist.id,
            creation_date=wishlist.creation_date,
            owner_id=wishlist.owner.id if wishlist.owner is not None else None,
            items=[ComicRead.model_validate(comic) for comic in wishlist.items],
        )

    @classmethod
    def _assign_owner(
        cls,
        conn: sqlite3.Connection,
        wishlist: Wishlist,
        owner_id: Optional[int],
        errors: List[FieldError],
    ) -> None:
        if owner_id is None:
            wishlist.owner = None
            return
        owner = UserRepository(conn).find_by_id(owner_id)
        if owner is None:
            errors.append(FieldError("owner_id", f"user {owner_id} does not exist"))
            return
        current = WishlistRepository(conn).find_by_owner(owner_id, load_items=False)
        if current is not None and current != wishlist:
            errors.append(FieldError("owner_id", f"user {owner_id} already owns wishlist {current.id}"))
            return
        wishlist.owner = owner

    @classmethod
    def _assign_items(
        cls,
        conn: sqlite3.Connection,
        wishlist: Wishlist,
        item_ids: Sequence[int],
        errors: List[FieldError],
    ) -> None:
        comics = ComicRepository(conn).find_by_ids(item_ids)
        missing = sorted(set(item_ids) - {comic.id for comic in comics})
        if missing:
            errors.append(FieldError("item_ids", f"unknown comics: {missing}"))
        wishlist.items = []
        for comic in comics:
            wishlist.add_item(comic)

    @classmethod
    async def create_wishlist(cls, data: WishlistCreate) -> WishlistRead:
        """Create a wishlist and return it with its items."""
        logger = logging.getLogger(__name__)
        wishlist = Wishlist(creation_date=data.creation_date)
        with transaction() as conn:
            errors = []
            cls._assign_owner(conn, wishlist, data.owner_id, errors)
            cls._assign_items(conn, wishlist, data.item_ids, errors)
            errors.extend(validate_wishlist(wishlist))
            try:
                ensure_valid(errors)
            except InvalidRecordError as exc:
                logger.warning("Rejected wishlist: %s", exc)
                raise
            WishlistRepository(conn).save(wishlist)
        logger.info("Created wishlist %s with %d item(s)", wishlist.id, len(wishlist.items))
        return cls._to_read(wishlist)

    @classmethod
    async def list_wishlists(cls) -> List[WishlistRead]:
        with transaction() as conn:
            wishlists = WishlistRepository(conn).find_all()
        return [cls._to_read(wishlist) for wishlist in wishlists]

    @classmethod
    async def get_wishlist(cls, wishlist_id: int) -> Optional[WishlistRead]:
        with transaction() as conn:
            wishlist = WishlistRepository(conn).find_by_id(wishlist_id)
        return cls._to_read(wishlist) if wishlist else None

    @classmethod
    async def update_wishlist(cls, wishlist_id: int, data: WishlistUpdate) -> Optional[WishlistRead]:
        """Update a wishlist.

        ``creation_date`` and ``owner_id`` are replaced when present in
        the body (an explicit ``null`` owner detaches the wishlist).
        ``item_ids`` replaces the item list.  Returns ``None`` if the
        wishlist does not exist.
        """
        logger = logging.getLogger(__name__)
        changes = data.model_dump(exclude_unset=True)
        with transaction() as conn:
            repo = WishlistRepository(conn)
            wishlist = repo.find_by_id(wishlist_id)
            if wishlist is None:
                return None
            errors = []
            if "creation_date" in changes:
                wishlist.creation_date = changes["creation_date"]
            if "owner_id" in changes:
                cls._assign_owner(conn, wishlist, changes["owner_id"], errors)
            if changes.get("item_ids") is not None:
                cls._assign_items(conn, wishlist, changes["item_ids"], errors)
            errors.extend(validate_wishlist(wishlist))
            ensure_valid(errors)
            repo.save(wishlist)
        logger.info("Updated wishlist %s", wishlist_id)
        return cls._to_read(wishlist)

    @classmethod
    async def delete_wishlist(cls, wishlist_id: int) -> Optional[WishlistRead]:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = WishlistRepository(conn)
            wishlist = repo.find_by_id(wishlist_id)
            if wishlist is None:
                return None
            repo.delete_by_id(wishlist_id)
        logger.info("Deleted wishlist %s", wishlist_id)
        return cls._to_read(wishlist)

    @classmethod
    async def add_item(cls, wishlist_id: int, comic_id: int) -> Optional[WishlistRead]:
        """Add a comic to a wishlist.

        Adding a comic that is already listed leaves the wishlist
        unchanged.  Returns ``None`` if the wishlist or the comic does
        not exist.
        """
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = WishlistRepository(conn)
            wishlist = repo.find_by_id(wishlist_id)
            comic = ComicRepository(conn).find_by_id(comic_id)
            if wishlist is None or comic is None:
                return None
            wishlist.add_item(comic)
            repo.save(wishlist)
        logger.info("Wishlist %s now holds %d item(s)", wishlist_id, len(wishlist.items))
        return cls._to_read(wishlist)

    @classmethod
    async def remove_item(cls, wishlist_id: int, comic_id: int) -> Optional[WishlistRead]:
        """Remove a comic from a wishlist.

        Removing a comic that is not listed (or does not exist) is a
        no-op.  Returns ``None`` if the wishlist does not exist.
        """
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = WishlistRepository(conn)
            wishlist = repo.find_by_id(wishlist_id)
            if wishlist is None:
                return None
            comic = ComicRepository(conn).find_by_id(comic_id)
            if comic is not None:
                wishlist.remove_item(comic)
                repo.save(wishlist)
        logger.info("Wishlist %s now holds %d item(s)", wishlist_id, len(wishlist.items))
        return cls._to_read(wishlist)
