import sqlite3
from typing import List, Optional

from ..models.auction import Auction
from ..models.enums import AuctionStatus
from .base import Repository, from_iso, storable_id, to_iso


class AuctionRepository(Repository[Auction]):
    def save(self, entity: Auction) -> Auction:
        values = (
            to_iso(entity.start_date),
            to_iso(entity.end_date),
            entity.current_offer,
            entity.status.value,
            entity.copy_id,
            entity.best_bidder_id,
        )
        cursor = self.conn.cursor()
        if entity.id is None:
            cursor.execute(
                """
                INSERT INTO auctions (
                    start_date, end_date, current_offer, status, copy_id, best_bidder_id
                )
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                values,
            )
            entity.id = cursor.lastrowid
        else:
            cursor.execute(
                """
                UPDATE auctions
                SET start_date = ?, end_date = ?, current_offer = ?, status = ?,
                    copy_id = ?, best_bidder_id = ?
                WHERE id = ?
                """,
                values + (entity.id,),
            )
        return entity

    def find_by_id(self, entity_id: int) -> Optional[Auction]:
        if not storable_id(entity_id):
            return None
        row = self.conn.execute("SELECT * FROM auctions WHERE id = ?", (entity_id,)).fetchone()
        return self._row_to_entity(row) if row else None

    def find_all(self) -> List[Auction]:
        rows = self.conn.execute("SELECT * FROM auctions ORDER BY id").fetchall()
        return [self._row_to_entity(row) for row in rows]

    def delete_by_id(self, entity_id: int) -> bool:
        if not storable_id(entity_id):
            return False
        cursor = self.conn.execute("DELETE FROM auctions WHERE id = ?", (entity_id,))
        return cursor.rowcount > 0

    @staticmethod
    def _row_to_entity(row: sqlite3.Row) -> Auction:
        return Auction(
            id=row["id"],
            start_date=from_iso(row["start_date"]),
            end_date=from_iso(row["end_date"]),
            current_offer=row["current_offer"],
            status=AuctionStatus(row["status"]),
            copy_id=row["copy_id"],
            best_bidder_id=row["best_bidder_id"],
        )
