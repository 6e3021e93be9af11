import sqlite3
from typing import List, Optional

from ..models.order_detail import OrderDetail
from .base import Repository, storable_id


class OrderDetailRepository(Repository[OrderDetail]):
    def save(self, entity: OrderDetail) -> OrderDetail:
        cursor = self.conn.cursor()
        if entity.id is None:
            cursor.execute(
                "INSERT INTO order_details (quantity, copy_id, order_id) VALUES (?, ?, ?)",
                (entity.quantity, entity.copy_id, entity.order_id),
            )
            entity.id = cursor.lastrowid
        else:
            cursor.execute(
                "UPDATE order_details SET quantity = ?, copy_id = ?, order_id = ? WHERE id = ?",
                (entity.quantity, entity.copy_id, entity.order_id, entity.id),
            )
        return entity

    def find_by_id(self, entity_id: int) -> Optional[OrderDetail]:
        if not storable_id(entity_id):
            return None
        row = self.conn.execute(
            "SELECT * FROM order_details WHERE id = ?", (entity_id,)
        ).fetchone()
        return self._row_to_entity(row) if row else None

    def find_all(self) -> List[OrderDetail]:
        rows = self.conn.execute("SELECT * FROM order_details ORDER BY id").fetchall()
        return [self._row_to_entity(row) for row in rows]

    def delete_by_id(self, entity_id: int) -> bool:
        if not storable_id(entity_id):
            return False
        cursor = self.conn.execute("DELETE FROM order_details WHERE id = ?", (entity_id,))
        return cursor.rowcount > 0

    @staticmethod
    def _row_to_entity(row: sqlite3.Row) -> OrderDetail:
        return OrderDetail(
            id=row["id"],
            quantity=row["quantity"],
            copy_id=row["copy_id"],
            order_id=row["order_id"],
        )
