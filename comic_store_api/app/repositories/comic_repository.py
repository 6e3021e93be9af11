import sqlite3
from typing import List, Optional, Sequence

from ..models.comic import Comic
from ..models.enums import ComicCategory
from .base import Repository, from_iso, storable_id, to_iso


class ComicRepository(Repository[Comic]):
    def save(self, entity: Comic) -> Comic:
        values = (
            entity.title,
            entity.author,
            entity.publisher,
            entity.description,
            to_iso(entity.publication_date),
            int(entity.available_for_auction),
            entity.category.value,
        )
        cursor = self.conn.cursor()
        if entity.id is None:
            cursor.execute(
                """
                INSERT INTO comics (
                    title, author, publisher, description, publication_date,
                    available_for_auction, category
                )
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                values,
            )
            entity.id = cursor.lastrowid
        else:
            cursor.execute(
                """
                UPDATE comics
                SET title = ?, author = ?, publisher = ?, description = ?,
                    publication_date = ?, available_for_auction = ?, category = ?
                WHERE id = ?
                """,
                values + (entity.id,),
            )
        return entity

    def find_by_id(self, entity_id: int) -> Optional[Comic]:
        if not storable_id(entity_id):
            return None
        row = self.conn.execute("SELECT * FROM comics WHERE id = ?", (entity_id,)).fetchone()
        return self.row_to_entity(row) if row else None

    def find_by_ids(self, ids: Sequence[int]) -> List[Comic]:
        """Return the comics with the given ids, in the order of ``ids``.

        Unknown ids are skipped; callers compare lengths to detect them.
        """
        found = []
        for comic_id in ids:
            comic = self.find_by_id(comic_id)
            if comic is not None:
                found.append(comic)
        return found

    def find_all(self) -> List[Comic]:
        rows = self.conn.execute("SELECT * FROM comics ORDER BY id").fetchall()
        return [self.row_to_entity(row) for row in rows]

    def delete_by_id(self, entity_id: int) -> bool:
        if not storable_id(entity_id):
            return False
        cursor = self.conn.cursor()
        cursor.execute("DELETE FROM comics_in_wishlist WHERE comic_id = ?", (entity_id,))
        cursor.execute("DELETE FROM comics WHERE id = ?", (entity_id,))
        return cursor.rowcount > 0

    @staticmethod
    def row_to_entity(row: sqlite3.Row) -> Comic:
        return Comic(
            id=row["id"],
            title=row["title"],
            author=row["author"],
            publisher=row["publisher"],
            description=row["description"],
            publication_date=from_iso(row["publication_date"]),
            available_for_auction=bool(row["available_for_auction"]),
            category=ComicCategory(row["category"]),
        )
