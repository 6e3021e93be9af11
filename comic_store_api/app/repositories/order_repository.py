import sqlite3
from typing import List, Optional

from ..models.enums import OrderStatus
from ..models.order import Order
from .base import Repository, from_iso, storable_id, to_iso


class OrderRepository(Repository[Order]):
    def save(self, entity: Order) -> Order:
        values = (
            entity.final_price,
            to_iso(entity.order_date),
            entity.status.value,
            entity.user_id,
        )
        cursor = self.conn.cursor()
        if entity.id is None:
            cursor.execute(
                "INSERT INTO orders (final_price, order_date, status, user_id) VALUES (?, ?, ?, ?)",
                values,
            )
            entity.id = cursor.lastrowid
        else:
            cursor.execute(
                """
                UPDATE orders
                SET final_price = ?, order_date = ?, status = ?, user_id = ?
                WHERE id = ?
                """,
                values + (entity.id,),
            )
        return entity

    def find_by_id(self, entity_id: int) -> Optional[Order]:
        if not storable_id(entity_id):
            return None
        row = self.conn.execute("SELECT * FROM orders WHERE id = ?", (entity_id,)).fetchone()
        return self._row_to_entity(row) if row else None

    def find_all(self) -> List[Order]:
        rows = self.conn.execute("SELECT * FROM orders ORDER BY id").fetchall()
        return [self._row_to_entity(row) for row in rows]

    def delete_by_id(self, entity_id: int) -> bool:
        if not storable_id(entity_id):
            return False
        # order lines are removed by ON DELETE CASCADE
        cursor = self.conn.execute("DELETE FROM orders WHERE id = ?", (entity_id,))
        return cursor.rowcount > 0

    @staticmethod
    def _row_to_entity(row: sqlite3.Row) -> Order:
        return Order(
            id=row["id"],
            final_price=row["final_price"],
            order_date=from_iso(row["order_date"]),
            status=OrderStatus(row["status"]),
            user_id=row["user_id"],
        )
