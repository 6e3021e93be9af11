import sqlite3
from typing import List, Optional

from ..models.comic_copy import ComicCopy
from ..models.enums import CopyCondition
from .base import Repository, storable_id


class ComicCopyRepository(Repository[ComicCopy]):
    def save(self, entity: ComicCopy) -> ComicCopy:
        values = (
            entity.condition.value,
            entity.price,
            int(entity.available),
            entity.comic_id,
        )
        cursor = self.conn.cursor()
        if entity.id is None:
            cursor.execute(
                "INSERT INTO comic_copies (condition, price, available, comic_id) VALUES (?, ?, ?, ?)",
                values,
            )
            entity.id = cursor.lastrowid
        else:
            cursor.execute(
                """
                UPDATE comic_copies
                SET condition = ?, price = ?, available = ?, comic_id = ?
                WHERE id = ?
                """,
                values + (entity.id,),
            )
        return entity

    def find_by_id(self, entity_id: int) -> Optional[ComicCopy]:
        if not storable_id(entity_id):
            return None
        row = self.conn.execute(
            "SELECT * FROM comic_copies WHERE id = ?", (entity_id,)
        ).fetchone()
        return self._row_to_entity(row) if row else None

    def find_all(self) -> List[ComicCopy]:
        rows = self.conn.execute("SELECT * FROM comic_copies ORDER BY id").fetchall()
        return [self._row_to_entity(row) for row in rows]

    def delete_by_id(self, entity_id: int) -> bool:
        if not storable_id(entity_id):
            return False
        # auctions and order lines of the copy go with it (ON DELETE CASCADE)
        cursor = self.conn.execute("DELETE FROM comic_copies WHERE id = ?", (entity_id,))
        return cursor.rowcount > 0

    @staticmethod
    def _row_to_entity(row: sqlite3.Row) -> ComicCopy:
        return ComicCopy(
            id=row["id"],
            condition=CopyCondition(row["condition"]),
            price=row["price"],
            available=bool(row["available"]),
            comic_id=row["comic_id"],
        )
