"""
Persistence of wishlists and their many-to-many link to comics.

The link lives in the ``comics_in_wishlist`` join table; its
``position`` column preserves the order of ``Wishlist.items``.  Items
are loaded by a separate query (``load_items``) so callers that only
need the wishlist row can skip it.  The owner is stored as
``wishlists.owner_id``.
"""

import sqlite3
from typing import List, Optional

from ..models.wishlist import Wishlist
from .base import Repository, from_iso, storable_id, to_iso
from .comic_repository import ComicRepository
from .user_repository import UserRepository


class WishlistRepository(Repository[Wishlist]):
    def save(self, entity: Wishlist) -> Wishlist:
        """Write the wishlist row and replace its item links."""
        owner_id = entity.owner.id if entity.owner is not None else None
        cursor = self.conn.cursor()
        if entity.id is None:
            cursor.execute(
                "INSERT INTO wishlists (creation_date, owner_id) VALUES (?, ?)",
                (to_iso(entity.creation_date), owner_id),
            )
            entity.id = cursor.lastrowid
        else:
            cursor.execute(
                "UPDATE wishlists SET creation_date = ?, owner_id = ? WHERE id = ?",
                (to_iso(entity.creation_date), owner_id, entity.id),
            )
        cursor.execute("DELETE FROM comics_in_wishlist WHERE wishlist_id = ?", (entity.id,))
        for position, comic in enumerate(entity.items):
            if comic.id is None:
                raise ValueError("wishlist items must be saved before the wishlist")
            cursor.execute(
                "INSERT INTO comics_in_wishlist (wishlist_id, comic_id, position) VALUES (?, ?, ?)",
                (entity.id, comic.id, position),
            )
        return entity

    def find_by_id(self, entity_id: int, load_items: bool = True) -> Optional[Wishlist]:
        if not storable_id(entity_id):
            return None
        row = self.conn.execute("SELECT * FROM wishlists WHERE id = ?", (entity_id,)).fetchone()
        if not row:
            return None
        return self._row_to_entity(row, load_items)

    def find_by_owner(self, owner_id: int, load_items: bool = True) -> Optional[Wishlist]:
        if not storable_id(owner_id):
            return None
        row = self.conn.execute(
            "SELECT * FROM wishlists WHERE owner_id = ?", (owner_id,)
        ).fetchone()
        if not row:
            return None
        return self._row_to_entity(row, load_items)

    def find_all(self, load_items: bool = True) -> List[Wishlist]:
        rows = self.conn.execute("SELECT * FROM wishlists ORDER BY id").fetchall()
        return [self._row_to_entity(row, load_items) for row in rows]

    def delete_by_id(self, entity_id: int) -> bool:
        if not storable_id(entity_id):
            return False
        cursor = self.conn.cursor()
        cursor.execute("DELETE FROM comics_in_wishlist WHERE wishlist_id = ?", (entity_id,))
        cursor.execute("DELETE FROM wishlists WHERE id = ?", (entity_id,))
        return cursor.rowcount > 0

    def load_items(self, wishlist: Wishlist) -> Wishlist:
        """Populate ``wishlist.items`` from the join table."""
        rows = self.conn.execute(
            """
            SELECT c.*
            FROM comics c
            JOIN comics_in_wishlist cw ON cw.comic_id = c.id
            WHERE cw.wishlist_id = ?
            ORDER BY cw.position
            """,
            (wishlist.id,),
        ).fetchall()
        wishlist.items = [ComicRepository.row_to_entity(row) for row in rows]
        return wishlist

    def _row_to_entity(self, row: sqlite3.Row, load_items: bool) -> Wishlist:
        owner = None
        if row["owner_id"] is not None:
            owner = UserRepository(self.conn).find_by_id(row["owner_id"])
        wishlist = Wishlist(
            id=row["id"],
            creation_date=from_iso(row["creation_date"]),
            owner=owner,
        )
        if load_items:
            self.load_items(wishlist)
        return wishlist
